"""Optional per-item metadata."""

from enum import IntFlag

from ..engine.constants import (
    EVERYTHING_REQUEST_ATTRIBUTES,
    EVERYTHING_REQUEST_DATE_ACCESSED,
    EVERYTHING_REQUEST_DATE_CREATED,
    EVERYTHING_REQUEST_DATE_MODIFIED,
    EVERYTHING_REQUEST_SIZE,
)


class ItemMetadata(IntFlag):
    """Additional file system metadata to include in search results.

    Values are the Everything request flags themselves and are passed to the engine unchanged.
    """

    SIZE = EVERYTHING_REQUEST_SIZE
    DATE_CREATED = EVERYTHING_REQUEST_DATE_CREATED
    DATE_MODIFIED = EVERYTHING_REQUEST_DATE_MODIFIED
    DATE_ACCESSED = EVERYTHING_REQUEST_DATE_ACCESSED
    ATTRIBUTES = EVERYTHING_REQUEST_ATTRIBUTES
