"""Pydantic schemas for validating shop input.

Timestamps are normalised to timezone-aware UTC; naive values are taken
to already be UTC.
"""

from datetime import datetime, timezone
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

class CustomerRegistration(BaseModel):
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    total_purchases: Decimal = Field(Decimal("0"), ge=0)
    weekly_purchases: Decimal = Field(Decimal("0"), ge=0)
    current_purchase_amount: Decimal = Field(Decimal("0"), ge=0)
    last_purchase_date: datetime = Field(default_factory=utcnow)

    @field_validator("last_purchase_date")
    @classmethod
    def _utc_last_purchase_date(cls, value: datetime) -> datetime:
        return as_utc(value)


class PurchaseEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    customer_id: str = Field(..., min_length=1)
    amount: Decimal = Field(..., gt=0)
    timestamp: datetime = Field(default_factory=utcnow)

    @field_validator("timestamp")
    @classmethod
    def _utc_timestamp(cls, value: datetime) -> datetime:
        return as_utc(value)
