"""Shop vertical errors.

Both kinds are recovered inside the purchase processor: they are logged and
the purchase produces no outcome.
"""

from patterns.rules_engine import RuleEvaluationError

__all__ = ["ShopError", "UnknownCustomerError", "RuleEvaluationError"]


class ShopError(Exception):
    """Base exception for shop errors."""


class UnknownCustomerError(ShopError):
    """Raised when a purchase references a customer that was never registered."""

    def __init__(self, customer_id: str):
        self.customer_id = customer_id
        super().__init__(f"Customer {customer_id} not found")
