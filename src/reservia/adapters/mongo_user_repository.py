"""MongoDB-backed user repository."""

from dataclasses import dataclass

from pymongo.collection import Collection

from reservia.adapters.mongo_documents import store_errors
from reservia.services.users import UserRepository


@dataclass
class MongoUserRepository(UserRepository):
    """Mongo implementation for user persistence."""

    collection: Collection

    def create_user(self, profile: dict[str, object]) -> str:
        """Insert a user profile and return its id."""
        with store_errors("insert", self.collection.name):
            result = self.collection.insert_one(dict(profile))
        return str(result.inserted_id)
