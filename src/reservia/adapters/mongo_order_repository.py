"""MongoDB implementation for orders."""

from dataclasses import dataclass

from bson import ObjectId
from pymongo.collection import Collection

from reservia.adapters.mongo_documents import serialize_documents, store_errors
from reservia.services.orders import OrderRepository


@dataclass
class MongoOrderRepository(OrderRepository):
    """Mongo-backed repository for the ordered collection."""

    collection: Collection

    def create_order(self, document: dict[str, object]) -> str:
        """Insert an order and return its id."""
        with store_errors("insert", self.collection.name):
            result = self.collection.insert_one(dict(document))
        return str(result.inserted_id)

    def list_by_buyer(self, buyer_id: str) -> list[dict[str, object]]:
        """Return orders placed by a buyer."""
        with store_errors("find", self.collection.name):
            return serialize_documents(self.collection.find({"buyerId": buyer_id}))

    def delete_order(self, order_id: str) -> int:
        """Delete an order by id."""
        with store_errors("delete_one", self.collection.name):
            result = self.collection.delete_one({"_id": ObjectId(order_id)})
        return result.deleted_count
