"""Order placement and lookup."""

from dataclasses import dataclass
from typing import Protocol

from reservia.domain.ids import ensure_object_id
from reservia.domain.writes import DeleteSummary, InsertSummary


class OrderRepository(Protocol):
    """Persistence interface for orders."""

    def create_order(self, document: dict[str, object]) -> str:
        """Insert an order and return its id."""

    def list_by_buyer(self, buyer_id: str) -> list[dict[str, object]]:
        """Return orders placed by a buyer."""

    def delete_order(self, order_id: str) -> int:
        """Delete an order and return the number of removed documents."""


@dataclass
class OrderService:
    """Application service for orders.

    Placing an order does not adjust the ordered listing; clients update
    the listing counters through the food service in a separate request.
    """

    repository: OrderRepository

    def place_order(self, document: dict[str, object]) -> InsertSummary:
        return InsertSummary(inserted_id=self.repository.create_order(document))

    def list_by_buyer(self, buyer_id: str) -> list[dict[str, object]]:
        """Return the orders of one buyer."""
        return self.repository.list_by_buyer(buyer_id)

    def delete_order(self, order_id: str) -> DeleteSummary:
        """Delete an order; unknown ids delete nothing."""
        deleted = self.repository.delete_order(ensure_object_id(order_id))
        return DeleteSummary(deleted_count=deleted)
