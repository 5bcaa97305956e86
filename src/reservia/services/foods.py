"""Services for browsing and maintaining food listings."""

import re
from dataclasses import dataclass
from typing import Protocol

from reservia.domain.errors import InvalidInput, NotFound
from reservia.domain.foods import (
    COUNTER_FIELDS,
    DETAIL_FIELDS,
    TOP_FOODS_LIMIT,
    PageRequest,
)
from reservia.domain.ids import ensure_object_id
from reservia.domain.writes import InsertSummary, UpdateSummary


class FoodRepository(Protocol):
    """Persistence interface for food listings."""

    def create_food(self, document: dict[str, object]) -> str:
        """Insert a listing as-is and return its id."""

    def get_food(self, food_id: str) -> dict[str, object] | None:
        """Return a listing by id, if present."""

    def list_foods(
        self, skip: int | None = None, limit: int | None = None
    ) -> list[dict[str, object]]:
        """Return listings in stored order, optionally sliced."""

    def count_foods(self) -> int:
        """Return the number of listings."""

    def list_by_owner(self, uid: str) -> list[dict[str, object]]:
        """Return listings whose uid matches exactly."""

    def search_by_name(self, pattern: str) -> list[dict[str, object]]:
        """Return listings whose name matches the regex case-insensitively."""

    def list_top_foods(self, limit: int) -> list[dict[str, object]]:
        """Return listings ranked by count, highest first."""

    def update_food(self, food_id: str, fields: dict[str, object]) -> UpdateSummary:
        """Merge fields into a listing."""


@dataclass
class FoodService:
    """Application service for food listing operations."""

    repository: FoodRepository
    default_page_size: int = 10
    max_page_size: int = 100
    max_search_length: int = 100

    def create_food(self, document: dict[str, object]) -> InsertSummary:
        """Store a new listing without schema validation."""
        return InsertSummary(inserted_id=self.repository.create_food(document))

    def get_food(self, food_id: str) -> dict[str, object]:
        """Return a single listing or raise NotFound."""
        food = self.repository.get_food(ensure_object_id(food_id))
        if food is None:
            raise NotFound("Food not found")
        return food

    def list_foods(
        self, page: int | None = None, limit: int | None = None
    ) -> list[dict[str, object]]:
        """Return every listing, or one page when page or limit is given."""
        if page is None and limit is None:
            return self.repository.list_foods()
        request = self.page_request(page, limit)
        return self.repository.list_foods(skip=request.skip, limit=request.limit)

    def count_foods(self) -> int:
        return self.repository.count_foods()

    def list_by_owner(self, uid: str) -> list[dict[str, object]]:
        """Return listings added by the given user."""
        return self.repository.list_by_owner(uid)

    def search(self, query: str | None) -> list[dict[str, object]]:
        """Search listing names for a literal, case-insensitive substring."""
        cleaned = (query or "").strip()
        if not cleaned:
            raise InvalidInput("Search text is required")
        if len(cleaned) > self.max_search_length:
            raise InvalidInput(
                f"Search text must be at most {self.max_search_length} characters"
            )
        return self.repository.search_by_name(re.escape(cleaned))

    def top_foods(self, limit: int = TOP_FOODS_LIMIT) -> list[dict[str, object]]:
        """Return the most ordered listings."""
        return self.repository.list_top_foods(limit)

    def update_counters(
        self, food_id: str, fields: dict[str, object]
    ) -> UpdateSummary:
        """Update only count and quantity on a listing."""
        return self._update(food_id, fields, COUNTER_FIELDS)

    def update_details(
        self, food_id: str, fields: dict[str, object]
    ) -> UpdateSummary:
        """Update the editable listing metadata."""
        return self._update(food_id, fields, DETAIL_FIELDS)

    def page_request(self, page: int | None, limit: int | None) -> PageRequest:
        """Validate pagination input, filling in defaults."""
        resolved_page = 1 if page is None else page
        resolved_limit = self.default_page_size if limit is None else limit
        if resolved_page < 1:
            raise InvalidInput("page must be at least 1")
        if not 1 <= resolved_limit <= self.max_page_size:
            raise InvalidInput(f"limit must be between 1 and {self.max_page_size}")
        return PageRequest(page=resolved_page, limit=resolved_limit)

    def _update(
        self,
        food_id: str,
        fields: dict[str, object],
        allowed: tuple[str, ...],
    ) -> UpdateSummary:
        valid_id = ensure_object_id(food_id)
        changes = {
            key: value
            for key, value in fields.items()
            if key in allowed and value is not None
        }
        if not changes:
            raise InvalidInput("No fields to update")
        return self.repository.update_food(valid_id, changes)
