"""
Transaction service: per-user CRUD and the chart summary aggregation.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from app.core.exceptions import ValidationError, NotFound, InternalError
from app.core.utils import utcnow, to_naive_utc, subtract_months, format_day_label
from app.models.transaction import Transaction, TRANSACTION_TYPES

logger = logging.getLogger(__name__)

SUMMARY_RANGES = ("all", "weekly", "monthly")

# Bounds of the Numeric(15, 2) amount column
CENT = Decimal("0.01")
MAX_AMOUNT = Decimal(10) ** 13


@dataclass
class TransactionSummary:
    """Date-bucketed totals; the three lists are aligned by index."""
    labels: List[str] = field(default_factory=list)
    expenses: List[Decimal] = field(default_factory=list)
    income: List[Decimal] = field(default_factory=list)


def _escape_like(text: str) -> str:
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def list_transactions(
    owner_id: int,
    db: Session,
    transaction_type: Optional[str] = None,
    search: Optional[str] = None
) -> List[Transaction]:
    """List the owner's transactions, newest first, optionally filtered by type and name."""
    query = db.query(Transaction).filter(Transaction.owner_id == owner_id)
    
    if transaction_type and transaction_type != "all":
        if transaction_type not in TRANSACTION_TYPES:
            raise ValidationError(f"Invalid transaction type: {transaction_type}")
        query = query.filter(Transaction.type == transaction_type)
    
    if search:
        # Case-insensitive substring match
        query = query.filter(Transaction.name.ilike(f"%{_escape_like(search)}%", escape="\\"))
    
    try:
        return query.order_by(Transaction.date.desc(), Transaction.id.desc()).all()
    except SQLAlchemyError as e:
        logger.error(f"Failed to fetch transactions for user {owner_id}: {e}", exc_info=True)
        raise InternalError("Failed to fetch transactions")


def parse_amount(raw_value: Any) -> Decimal:
    """Parse a client-supplied value into a Decimal that fits the amount column."""
    if isinstance(raw_value, bool):
        raise ValidationError("Amount must be numeric")
    try:
        value = Decimal(str(raw_value).strip())
    except (InvalidOperation, ValueError):
        raise ValidationError("Amount must be numeric")
    if not value.is_finite():
        raise ValidationError("Amount must be numeric")
    if abs(value) >= MAX_AMOUNT:
        raise ValidationError("Amount out of range")
    if value != value.quantize(CENT):
        raise ValidationError("Amount must have at most 2 decimal places")
    return value


def signed_amount(raw_value: Any, transaction_type: str) -> Decimal:
    """Derive the stored amount from the type; the client-sent sign is ignored."""
    magnitude = abs(parse_amount(raw_value))
    if transaction_type == "expense":
        if magnitude == 0:
            raise ValidationError("Expense amount must be non-zero")
        return -magnitude
    return magnitude


def add_transaction(
    owner_id: int,
    name: Optional[str],
    raw_value: Any,
    transaction_type: Optional[str],
    date: Optional[datetime],
    db: Session
) -> Transaction:
    """Create a transaction for the owner. Persists nothing when validation fails."""
    if isinstance(name, str):
        name = name.strip()
    if isinstance(raw_value, str):
        raw_value = raw_value.strip()
    if not name or raw_value is None or raw_value == "" or not transaction_type or date is None:
        raise ValidationError("Missing required fields")
    if transaction_type not in TRANSACTION_TYPES:
        raise ValidationError(f"Invalid transaction type: {transaction_type}")
    
    transaction = Transaction(
        owner_id=owner_id,
        name=name,
        amount=signed_amount(raw_value, transaction_type),
        type=transaction_type,
        date=to_naive_utc(date)
    )
    db.add(transaction)
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to create transaction for user {owner_id}: {e}", exc_info=True)
        raise InternalError("Failed to create transaction")
    db.refresh(transaction)
    logger.info(f"Created {transaction_type} transaction {transaction.id} for user {owner_id}")
    return transaction


def delete_transaction(owner_id: int, transaction_id: int, db: Session) -> Transaction:
    """
    Delete one of the owner's transactions and return it.
    A transaction owned by someone else is reported as not found.
    """
    try:
        transaction = db.query(Transaction).filter(
            Transaction.id == transaction_id,
            Transaction.owner_id == owner_id
        ).first()
    except SQLAlchemyError as e:
        logger.error(f"Failed to look up transaction {transaction_id}: {e}", exc_info=True)
        raise InternalError("Failed to delete transaction")
    if not transaction:
        raise NotFound("Transaction not found")
    # Keep the loaded row readable after the delete commits
    db.expunge(transaction)

    try:
        # Conditional delete: a concurrent delete of the same row leaves rowcount at 0
        deleted = db.query(Transaction).filter(
            Transaction.id == transaction_id,
            Transaction.owner_id == owner_id
        ).delete(synchronize_session=False)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to delete transaction {transaction_id}: {e}", exc_info=True)
        raise InternalError("Failed to delete transaction")
    if deleted == 0:
        raise NotFound("Transaction not found")
    
    logger.info(f"Deleted transaction {transaction_id} for user {owner_id}")
    return transaction


def summary_start(range_name: str, now: datetime) -> Optional[datetime]:
    """Lower date bound for a summary range, or None for no bound."""
    if range_name == "weekly":
        return now - timedelta(days=7)
    if range_name == "monthly":
        return subtract_months(now, 1)
    return None


def summarize(transactions: List[Transaction]) -> TransactionSummary:
    """
    Group date-ascending transactions into calendar-day buckets.
    Labels keep first-seen order; a bucket with no activity in one series holds 0.
    """
    buckets: Dict[str, Dict[str, Decimal]] = {}
    for transaction in transactions:
        label = format_day_label(transaction.date)
        bucket = buckets.setdefault(label, {"expenses": Decimal("0"), "income": Decimal("0")})
        amount = Decimal(transaction.amount)
        if amount < 0:
            bucket["expenses"] += abs(amount)
        else:
            bucket["income"] += amount
    
    summary = TransactionSummary()
    for label, totals in buckets.items():
        summary.labels.append(label)
        summary.expenses.append(totals["expenses"])
        summary.income.append(totals["income"])
    return summary


def get_summary(owner_id: int, range_name: str, db: Session, now: Optional[datetime] = None) -> TransactionSummary:
    """Aggregate the owner's transactions within the range into chart series."""
    range_name = range_name or "all"
    if range_name not in SUMMARY_RANGES:
        raise ValidationError(f"Invalid range: {range_name}")
    
    query = db.query(Transaction).filter(Transaction.owner_id == owner_id)
    start = summary_start(range_name, now or utcnow())
    if start is not None:
        query = query.filter(Transaction.date >= start)
    
    try:
        transactions = query.order_by(Transaction.date.asc(), Transaction.id.asc()).all()
    except SQLAlchemyError as e:
        logger.error(f"Failed to fetch summary for user {owner_id}: {e}", exc_info=True)
        raise InternalError("Failed to fetch summary")
    return summarize(transactions)
