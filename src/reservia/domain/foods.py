"""Domain constants for food listings."""

from dataclasses import dataclass

COUNTER_FIELDS = ("count", "quantity")
DETAIL_FIELDS = (
    "name",
    "image",
    "category",
    "quantity",
    "price",
    "description",
    "origin",
)
TOP_FOODS_LIMIT = 6


@dataclass(frozen=True)
class PageRequest:
    """A validated slice of the food collection."""

    page: int
    limit: int

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit
