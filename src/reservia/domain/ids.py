"""Document identifier helpers."""

from bson import ObjectId

from reservia.domain.errors import InvalidId


def ensure_object_id(raw: str | None) -> str:
    """Return the id unchanged when it is a 24-character hex ObjectId."""
    if not isinstance(raw, str) or not ObjectId.is_valid(raw):
        raise InvalidId()
    return raw
