"""Shared helpers for MongoDB-backed repositories."""

import logging
from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from bson import ObjectId
from pymongo.errors import PyMongoError

from reservia.domain.errors import StoreUnavailable

_logger = logging.getLogger(__name__)


@contextmanager
def store_errors(operation: str, collection: str) -> Iterator[None]:
    """Translate driver failures into StoreUnavailable."""
    try:
        yield
    except PyMongoError as exc:
        _logger.exception(
            "MongoDB %s failed", operation, extra={"collection": collection}
        )
        raise StoreUnavailable() from exc


def serialize_document(document: dict[str, object]) -> dict[str, object]:
    """Return a JSON-friendly copy with ObjectId values rendered as strings."""
    serialized = dict(document)
    for key, value in serialized.items():
        if isinstance(value, ObjectId):
            serialized[key] = str(value)
    return serialized


def serialize_documents(
    documents: Iterable[dict[str, object]],
) -> list[dict[str, object]]:
    return [serialize_document(document) for document in documents]
