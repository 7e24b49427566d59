"""Typed queries against the Everything file index.

    >>> from everyquery import ItemMetadata, SortKey, SortOrder, search
    >>> items = (
    ...     search("*.txt")
    ...     .sort_by(SortKey.SIZE, SortOrder.DESCENDING)
    ...     .request_metadata(ItemMetadata.SIZE | ItemMetadata.DATE_MODIFIED)
    ...     .query_range(slice(0, 10))
    ... )
"""

from .engine import EngineError, SharedEngine, configure_global_engine, global_engine
from .query import (
    UNBOUNDED,
    Excluded,
    Included,
    Item,
    ItemMetadata,
    ItemType,
    ResultRange,
    Search,
    SortKey,
    SortOrder,
    search,
    search_regex,
)

__all__ = [
    "UNBOUNDED",
    "EngineError",
    "Excluded",
    "Included",
    "Item",
    "ItemMetadata",
    "ItemType",
    "ResultRange",
    "Search",
    "SharedEngine",
    "SortKey",
    "SortOrder",
    "configure_global_engine",
    "global_engine",
    "search",
    "search_regex",
]
