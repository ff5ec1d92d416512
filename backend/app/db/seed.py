"""
Seed the database with a demo user and sample transactions.
Existing users and transactions are removed first.
"""
import logging
from datetime import datetime
from decimal import Decimal
from sqlalchemy.orm import Session
from app.core.security import get_password_hash
from app.db.session import SessionLocal, init_db
from app.models import User, Transaction

logger = logging.getLogger(__name__)

DEMO_EMAIL = "test@example.com"
DEMO_PASSWORD = "password123"

SAMPLE_TRANSACTIONS = [
    ("Grocery Shopping", Decimal("-120.50"), "expense", datetime(2024, 1, 20)),
    ("Salary", Decimal("3000.00"), "income", datetime(2024, 2, 15)),
    ("Rent", Decimal("-1500.00"), "expense", datetime(2024, 2, 1)),
    ("Freelance Work", Decimal("500.00"), "income", datetime(2024, 2, 10)),
    ("Utilities", Decimal("-200.00"), "expense", datetime(2024, 2, 5)),
]


def seed(db: Session) -> User:
    """Replace all data with the demo user and its transactions."""
    db.query(Transaction).delete()
    db.query(User).delete()
    
    user = User(
        email=DEMO_EMAIL,
        hashed_password=get_password_hash(DEMO_PASSWORD),
        name="Test User"
    )
    db.add(user)
    db.flush()
    
    for name, amount, transaction_type, date in SAMPLE_TRANSACTIONS:
        db.add(Transaction(
            owner_id=user.id,
            name=name,
            amount=amount,
            type=transaction_type,
            date=date
        ))
    
    db.commit()
    db.refresh(user)
    logger.info(f"Seeded user {user.id} with {len(SAMPLE_TRANSACTIONS)} transactions")
    return user


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_db()
    db = SessionLocal()
    try:
        seed(db)
        print("Seed data inserted successfully")
    finally:
        db.close()
