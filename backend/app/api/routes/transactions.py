"""
Transaction routes. Every operation is scoped to the authenticated user.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from app.db.session import get_db
from app.schemas.transaction import (
    TransactionCreate, TransactionResponse,
    TransactionSummaryResponse, SummaryDataset
)
from app.services import transaction_service
from app.api.dependencies import get_current_user_id

router = APIRouter(prefix="/transactions", tags=["transactions"])

EXPENSE_COLOR = "rgba(255, 68, 68, 1)"
INCOME_COLOR = "rgba(0, 200, 81, 1)"


@router.get("", response_model=List[TransactionResponse])
def list_transactions(
    type: Optional[str] = Query(default=None),
    search: Optional[str] = Query(default=None),
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """List transactions, newest first. ``type`` is income, expense or all."""
    return transaction_service.list_transactions(user_id, db, transaction_type=type, search=search)


@router.post("", response_model=TransactionResponse)
def create_transaction(
    transaction_data: TransactionCreate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Create a transaction; the stored sign follows ``type``."""
    return transaction_service.add_transaction(
        owner_id=user_id,
        name=transaction_data.name,
        raw_value=transaction_data.amount,
        transaction_type=transaction_data.type,
        date=transaction_data.date,
        db=db
    )


@router.get("/summary", response_model=TransactionSummaryResponse)
def get_summary(
    range: str = Query(default="all"),
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Date-bucketed expense and income totals for charting."""
    summary = transaction_service.get_summary(user_id, range, db)
    return TransactionSummaryResponse(
        labels=summary.labels,
        datasets=[
            SummaryDataset(label="expenses", data=summary.expenses, color=EXPENSE_COLOR),
            SummaryDataset(label="income", data=summary.income, color=INCOME_COLOR),
        ]
    )


@router.delete("/{transaction_id}", response_model=TransactionResponse)
def delete_transaction(
    transaction_id: int,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Delete a transaction and return it."""
    return transaction_service.delete_transaction(user_id, transaction_id, db)
