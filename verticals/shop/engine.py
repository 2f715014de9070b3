"""Shop discount engine: the public entry point of the shop vertical.

Wires the customer store, discount rules, dispatcher and console notifier
into one object::

    engine = ShopEngine()
    engine.register_customer(CustomerRegistration(id="cust-001", name="Alice"))
    outcomes = engine.submit_purchase("cust-001", 250)
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional, TextIO

from core.notifications.dispatcher import MatchListener, NoMatchListener, NotificationDispatcher
from patterns.domain_config import ShopConfig
from verticals.shop.config import config as default_config
from verticals.shop.models.domain import Customer, DiscountOutcome
from verticals.shop.models.schemas import CustomerRegistration, utcnow
from verticals.shop.notifier import ConsoleNotifier
from verticals.shop.processor import PurchaseProcessor
from verticals.shop.repository import CustomerRepository
from verticals.shop.rules import DiscountRules


class ShopEngine:
    """Evaluates discount rules for every purchase a customer makes."""

    def __init__(
        self,
        config: Optional[ShopConfig] = None,
        clock: Callable[[], datetime] = utcnow,
        console: bool = True,
        stream: Optional[TextIO] = None,
    ):
        self.config = config or default_config
        self.customers = CustomerRepository()
        self.dispatcher = NotificationDispatcher()
        self.processor = PurchaseProcessor(
            customers=self.customers,
            rules=DiscountRules(config=self.config),
            dispatcher=self.dispatcher,
            config=self.config,
            clock=clock,
        )
        if console:
            notifier = ConsoleNotifier(stream)
            self.subscribe(notifier.on_discount, notifier.on_no_match)

    def register_customer(self, record: CustomerRegistration | dict) -> Customer:
        if isinstance(record, dict):
            record = CustomerRegistration(**record)
        return self.processor.register_customer(record)

    def get_customer(self, customer_id: str) -> Customer | None:
        return self.customers.get(customer_id)

    def list_customers(self, limit: int | None = None) -> list[Customer]:
        """Registered customers in registration order."""
        return self.customers.list(limit)

    def submit_purchase(
        self,
        customer_id: str,
        amount: Decimal | int | float | str,
        timestamp: datetime | None = None,
    ) -> list[DiscountOutcome]:
        return self.processor.submit_purchase(customer_id, amount, timestamp)

    def subscribe(
        self,
        on_discount: MatchListener,
        on_no_match: Optional[NoMatchListener] = None,
    ) -> str:
        return self.dispatcher.subscribe(on_discount, on_no_match)

    def unsubscribe(self, subscription_id: str) -> bool:
        return self.dispatcher.unsubscribe(subscription_id)
