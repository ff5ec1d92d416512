"""
Transaction model for income and expense records.
"""
from sqlalchemy import Column, String, Numeric, DateTime, ForeignKey, Integer, Index
from sqlalchemy.orm import relationship
from app.db.base import BaseModel

TRANSACTION_TYPES = ("income", "expense")


class Transaction(BaseModel):
    """A single financial event. Negative amount = expense, non-negative = income."""
    __tablename__ = "transactions"
    __table_args__ = (
        Index("ix_transactions_owner_date", "owner_id", "date"),
    )
    
    owner_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    amount = Column(Numeric(15, 2), nullable=False)
    type = Column(String(10), nullable=False)
    date = Column(DateTime, nullable=False, index=True)  # Date of the event, not creation time
    
    # Relationships
    owner = relationship("User", back_populates="transactions")
