"""Models package - Import all models for SQLAlchemy registration."""
from app.models.user import User
from app.models.transaction import Transaction, TRANSACTION_TYPES

__all__ = [
    "User",
    "Transaction",
    "TRANSACTION_TYPES",
]
