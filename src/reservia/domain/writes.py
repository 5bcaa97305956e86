"""Acknowledgements returned by store writes."""

from dataclasses import dataclass


@dataclass(frozen=True)
class InsertSummary:
    """Result of a single-document insert."""

    inserted_id: str

    def to_response(self) -> dict[str, object]:
        return {"acknowledged": True, "insertedId": self.inserted_id}


@dataclass(frozen=True)
class UpdateSummary:
    """Result of a single-document partial update."""

    matched_count: int
    modified_count: int

    def to_response(self) -> dict[str, object]:
        return {
            "acknowledged": True,
            "matchedCount": self.matched_count,
            "modifiedCount": self.modified_count,
        }


@dataclass(frozen=True)
class DeleteSummary:
    """Result of a single-document delete."""

    deleted_count: int

    def to_response(self) -> dict[str, object]:
        return {"acknowledged": True, "deletedCount": self.deleted_count}
