"""
Pydantic schemas for Transaction entity.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, List, Optional
from datetime import datetime


class TransactionCreate(BaseModel):
    """
    Schema for transaction creation.
    Fields are optional here so that missing values are reported by the
    service as a validation error; the sign of ``amount`` is ignored.
    """
    name: Optional[str] = None
    amount: Optional[Any] = None
    type: Optional[str] = None
    date: Optional[datetime] = None


class TransactionResponse(BaseModel):
    """Schema for transaction response."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
    
    id: int
    user_id: int = Field(validation_alias="owner_id", serialization_alias="userId")
    name: str
    amount: float
    type: str
    date: datetime
    created_at: datetime = Field(serialization_alias="createdAt")


class SummaryDataset(BaseModel):
    """One chart series aligned with the summary labels."""
    model_config = ConfigDict(populate_by_name=True)
    
    label: str
    data: List[float]
    color: str
    stroke_width: int = Field(default=2, serialization_alias="strokeWidth")


class TransactionSummaryResponse(BaseModel):
    """Schema for the chart summary: labels plus expense and income datasets."""
    labels: List[str]
    datasets: List[SummaryDataset]
