"""Customer store for the shop vertical."""

from patterns.repository import InMemoryRepository
from verticals.shop.errors import UnknownCustomerError
from verticals.shop.models.domain import Customer


class CustomerRepository(InMemoryRepository[Customer]):
    """Customers keyed by id. Records are never deleted."""

    key_attr = "id"

    def require(self, customer_id: str) -> Customer:
        """Return the customer or raise UnknownCustomerError."""
        customer = self.get(customer_id)
        if customer is None:
            raise UnknownCustomerError(customer_id)
        return customer
