from verticals.shop.models.domain import Customer, DiscountOutcome, FactSet
from verticals.shop.models.schemas import CustomerRegistration, PurchaseEvent

__all__ = [
    "Customer",
    "CustomerRegistration",
    "DiscountOutcome",
    "FactSet",
    "PurchaseEvent",
]
