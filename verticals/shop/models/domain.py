"""Shop domain objects.

Customer is the only mutable record; FactSet and DiscountOutcome are
snapshots produced per purchase and discarded after notification.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any

from verticals.shop.models.schemas import CustomerRegistration


@dataclass
class Customer:
    """A registered shopper and their running totals.

    total_purchases only ever grows; weekly_purchases is a single-bucket
    window that resets when purchases are too far apart.
    """

    id: str
    name: str
    total_purchases: Decimal
    weekly_purchases: Decimal
    current_purchase_amount: Decimal
    last_purchase_date: datetime

    @classmethod
    def from_registration(cls, record: CustomerRegistration) -> "Customer":
        return cls(
            id=record.id,
            name=record.name,
            total_purchases=record.total_purchases,
            weekly_purchases=record.weekly_purchases,
            current_purchase_amount=record.current_purchase_amount,
            last_purchase_date=record.last_purchase_date,
        )


@dataclass(frozen=True)
class FactSet:
    """Snapshot of a customer's totals right after a purchase."""

    customer_id: str
    total_purchases: Decimal
    weekly_purchases: Decimal
    current_purchase_amount: Decimal

    @classmethod
    def from_customer(cls, customer: Customer) -> "FactSet":
        return cls(
            customer_id=customer.id,
            total_purchases=customer.total_purchases,
            weekly_purchases=customer.weekly_purchases,
            current_purchase_amount=customer.current_purchase_amount,
        )

    def as_facts(self) -> dict[str, Any]:
        return {
            "customer_id": self.customer_id,
            "total_purchases": self.total_purchases,
            "weekly_purchases": self.weekly_purchases,
            "current_purchase_amount": self.current_purchase_amount,
        }


@dataclass(frozen=True)
class DiscountOutcome:
    """A discount decision for one purchase."""

    customer_id: str
    discount_type: str
    discount_percentage: int
    purchase_amount: Decimal
    applied_immediately: bool
    message: str = ""
