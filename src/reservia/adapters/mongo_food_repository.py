"""MongoDB implementation for food listings."""

from dataclasses import dataclass

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING
from pymongo.collection import Collection

from reservia.adapters.mongo_documents import (
    serialize_document,
    serialize_documents,
    store_errors,
)
from reservia.domain.writes import UpdateSummary
from reservia.services.foods import FoodRepository


@dataclass
class MongoFoodRepository(FoodRepository):
    """Mongo-backed repository for the foods collection."""

    collection: Collection

    def create_food(self, document: dict[str, object]) -> str:
        """Insert a listing and return its id."""
        with store_errors("insert", self.collection.name):
            result = self.collection.insert_one(dict(document))
        return str(result.inserted_id)

    def get_food(self, food_id: str) -> dict[str, object] | None:
        """Return a listing by id, if present."""
        with store_errors("find_one", self.collection.name):
            document = self.collection.find_one({"_id": ObjectId(food_id)})
        return serialize_document(document) if document else None

    def list_foods(
        self, skip: int | None = None, limit: int | None = None
    ) -> list[dict[str, object]]:
        """Return listings in natural order, optionally sliced."""
        with store_errors("find", self.collection.name):
            cursor = self.collection.find({})
            if skip:
                cursor = cursor.skip(skip)
            if limit:
                cursor = cursor.limit(limit)
            return serialize_documents(cursor)

    def count_foods(self) -> int:
        with store_errors("count_documents", self.collection.name):
            return self.collection.count_documents({})

    def list_by_owner(self, uid: str) -> list[dict[str, object]]:
        """Return listings added by a user."""
        with store_errors("find", self.collection.name):
            return serialize_documents(self.collection.find({"uid": uid}))

    def search_by_name(self, pattern: str) -> list[dict[str, object]]:
        """Return listings whose name matches the pattern, ignoring case."""
        query = {"name": {"$regex": pattern, "$options": "i"}}
        with store_errors("find", self.collection.name):
            return serialize_documents(self.collection.find(query))

    def list_top_foods(self, limit: int) -> list[dict[str, object]]:
        """Return listings by count, highest first, ties in insertion order."""
        with store_errors("find", self.collection.name):
            cursor = (
                self.collection.find({"count": {"$gte": 0}})
                .sort([("count", DESCENDING), ("_id", ASCENDING)])
                .limit(limit)
            )
            return serialize_documents(cursor)

    def update_food(self, food_id: str, fields: dict[str, object]) -> UpdateSummary:
        """Merge fields into a listing with $set semantics."""
        with store_errors("update_one", self.collection.name):
            result = self.collection.update_one(
                {"_id": ObjectId(food_id)}, {"$set": fields}
            )
        return UpdateSummary(
            matched_count=result.matched_count,
            modified_count=result.modified_count,
        )
