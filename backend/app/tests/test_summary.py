"""
Tests for the summary aggregation and date helpers.
"""
from datetime import datetime
from decimal import Decimal
import pytest
from app.core.exceptions import ValidationError
from app.core.utils import subtract_months, format_day_label
from app.models.transaction import Transaction
from app.services.transaction_service import summarize, get_summary, summary_start, signed_amount


def make(amount, date, owner_id=1, name="t"):
    return Transaction(
        owner_id=owner_id,
        name=name,
        amount=Decimal(str(amount)),
        type="expense" if amount < 0 else "income",
        date=date
    )


def test_summarize_separates_series():
    summary = summarize([
        make(-1500, datetime(2024, 2, 1)),
        make(3000, datetime(2024, 2, 15)),
    ])
    assert summary.labels == ["Feb 1", "Feb 15"]
    assert summary.expenses == [Decimal("1500"), Decimal("0")]
    assert summary.income == [Decimal("0"), Decimal("3000")]


def test_same_day_collapses_into_one_bucket():
    summary = summarize([
        make(-20, datetime(2024, 3, 5, 9, 0)),
        make(100, datetime(2024, 3, 5, 18, 30)),
        make(-5.5, datetime(2024, 3, 5, 23, 59)),
    ])
    assert summary.labels == ["Mar 5"]
    assert summary.expenses == [Decimal("25.5")]
    assert summary.income == [Decimal("100")]


def test_summarize_empty():
    summary = summarize([])
    assert summary.labels == [] and summary.expenses == [] and summary.income == []


def test_summary_start():
    now = datetime(2024, 3, 31, 12, 0)
    assert summary_start("all", now) is None
    assert summary_start("weekly", now) == datetime(2024, 3, 24, 12, 0)
    assert summary_start("monthly", now) == datetime(2024, 2, 29, 12, 0)


def test_subtract_months_crosses_year():
    assert subtract_months(datetime(2024, 1, 15), 1) == datetime(2023, 12, 15)


def test_format_day_label():
    assert format_day_label(datetime(2024, 12, 9)) == "Dec 9"


def test_get_summary_weekly_boundary(db, user):
    now = datetime(2024, 2, 15, 12, 0)
    db.add_all([
        make(-10, datetime(2024, 2, 8, 12, 0), owner_id=user.id),
        make(-20, datetime(2024, 2, 8, 11, 59), owner_id=user.id),
        make(30, datetime(2024, 2, 14), owner_id=user.id),
    ])
    db.commit()
    
    summary = get_summary(user.id, "weekly", db, now=now)
    assert summary.labels == ["Feb 8", "Feb 14"]
    assert summary.expenses == [Decimal("10"), Decimal("0")]
    assert summary.income == [Decimal("0"), Decimal("30")]


def test_get_summary_rejects_unknown_range(db, user):
    with pytest.raises(ValidationError):
        get_summary(user.id, "daily", db)


def test_signed_amount():
    assert signed_amount("42", "expense") == Decimal("-42")
    assert signed_amount(-42, "income") == Decimal("42")
    with pytest.raises(ValidationError):
        signed_amount("forty", "income")


def test_signed_amount_rejects_sub_cent_and_oversized_values():
    with pytest.raises(ValidationError):
        signed_amount("0.004", "expense")
    with pytest.raises(ValidationError):
        signed_amount("0", "expense")
    with pytest.raises(ValidationError):
        signed_amount("1e400", "income")
    assert signed_amount("0", "income") == Decimal("0")
    assert signed_amount("0.01", "expense") == Decimal("-0.01")
