"""Test in-memory repository and customer store."""
from datetime import datetime, timezone
from decimal import Decimal

import pytest
from verticals.shop.errors import UnknownCustomerError
from verticals.shop.models import Customer
from verticals.shop.repository import CustomerRepository


def _customer(customer_id="cust-001", name="Alice"):
    return Customer(
        id=customer_id,
        name=name,
        total_purchases=Decimal("0"),
        weekly_purchases=Decimal("0"),
        current_purchase_amount=Decimal("0"),
        last_purchase_date=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


def test_add_and_get():
    repo = CustomerRepository()
    repo.add(_customer())
    assert repo.get("cust-001") is not None
    assert repo.get("cust-001").name == "Alice"
    assert repo.get("missing") is None


def test_add_replaces_same_key():
    repo = CustomerRepository()
    repo.add(_customer(name="Alice"))
    repo.add(_customer(name="Alicia"))
    assert len(repo.list()) == 1
    assert repo.get("cust-001").name == "Alicia"


def test_list_in_insertion_order():
    repo = CustomerRepository()
    repo.add(_customer("b"))
    repo.add(_customer("a"))
    assert [c.id for c in repo.list()] == ["b", "a"]
    assert [c.id for c in repo.list(limit=1)] == ["b"]


def test_require_unknown_customer():
    repo = CustomerRepository()
    with pytest.raises(UnknownCustomerError) as exc_info:
        repo.require("ghost")
    assert exc_info.value.customer_id == "ghost"
