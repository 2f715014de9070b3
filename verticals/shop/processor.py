"""Purchase processor: purchase event -> running totals -> rules -> notices.

Each purchase runs to completion before the call returns:

1. update the customer's totals in the store
2. derive a fact set from the updated record
3. evaluate every discount rule
4. dispatch one notification per outcome, or the no-match signal

Unknown customers and rule failures are logged and the purchase yields no
outcome; neither error escapes `process_purchase`.
"""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import Callable

from core.engine.template_engine import fmt_money
from core.notifications.dispatcher import NotificationDispatcher
from patterns.domain_config import ShopConfig
from verticals.shop.errors import RuleEvaluationError, UnknownCustomerError
from verticals.shop.models.domain import Customer, DiscountOutcome, FactSet
from verticals.shop.models.schemas import CustomerRegistration, PurchaseEvent, utcnow
from verticals.shop.repository import CustomerRepository
from verticals.shop.rules import DiscountRules

logger = logging.getLogger(__name__)


def days_between(earlier: datetime, later: datetime) -> int:
    """Whole days elapsed, rounded down."""
    return (later - earlier).days


def roll_weekly_total(
    weekly_total: Decimal,
    amount: Decimal,
    last_purchase: datetime,
    purchased_at: datetime,
    window_days: int = 7,
) -> Decimal:
    """Add to the weekly bucket, or restart it when the gap exceeds the window."""
    if days_between(last_purchase, purchased_at) <= window_days:
        return weekly_total + amount
    return amount


class PurchaseProcessor:
    """Applies purchases to the customer store and dispatches discount outcomes."""

    def __init__(
        self,
        customers: CustomerRepository,
        rules: DiscountRules,
        dispatcher: NotificationDispatcher,
        config: ShopConfig | None = None,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.customers = customers
        self.rules = rules
        self.dispatcher = dispatcher
        self.config = config or ShopConfig.default()
        self.clock = clock

    def register_customer(self, record: CustomerRegistration) -> Customer:
        customer = Customer.from_registration(record)
        self.customers.add(customer)
        logger.debug("Registered customer %s (%s)", customer.id, customer.name)
        return customer

    def submit_purchase(
        self,
        customer_id: str,
        amount: Decimal | int | float | str,
        timestamp: datetime | None = None,
    ) -> list[DiscountOutcome]:
        """Build a PurchaseEvent stamped with the clock and process it."""
        event = PurchaseEvent(
            customer_id=customer_id,
            amount=amount,
            timestamp=timestamp or self.clock(),
        )
        return self.process_purchase(event)

    def process_purchase(self, event: PurchaseEvent) -> list[DiscountOutcome]:
        """Run one purchase through the pipeline and return its outcomes."""
        try:
            fact_set = self.apply_purchase(event)
        except UnknownCustomerError as exc:
            logger.warning("Customer %s not found, purchase dropped", exc.customer_id)
            return []

        try:
            outcomes = self.rules.evaluate(fact_set)
        except RuleEvaluationError:
            logger.exception("Error running rules for customer %s", event.customer_id)
            return []

        if not outcomes:
            logger.info("No rules matched for customer %s", event.customer_id)
            self.dispatcher.dispatch_no_match(fact_set)
            return []

        for outcome in outcomes:
            logger.info(
                "Discount %s (%s%%) for customer %s",
                outcome.discount_type,
                outcome.discount_percentage,
                outcome.customer_id,
            )
            self.dispatcher.dispatch(outcome, outcome.message)
        return outcomes

    def apply_purchase(self, event: PurchaseEvent) -> FactSet:
        """Update the customer's running totals and snapshot them.

        Raises UnknownCustomerError without touching the store.
        """
        customer = self.customers.require(event.customer_id)

        # no field changes until the weekly total is known
        weekly_total = roll_weekly_total(
            customer.weekly_purchases,
            event.amount,
            customer.last_purchase_date,
            event.timestamp,
            self.config.weekly_window.window_days,
        )

        customer.current_purchase_amount = event.amount
        customer.total_purchases += event.amount
        customer.weekly_purchases = weekly_total
        customer.last_purchase_date = event.timestamp

        currency = self.config.currency
        logger.info(
            "Processing purchase for %s: amount=%s total=%s weekly=%s",
            customer.name,
            fmt_money(event.amount, currency),
            fmt_money(customer.total_purchases, currency),
            fmt_money(customer.weekly_purchases, currency),
        )
        return FactSet.from_customer(customer)
