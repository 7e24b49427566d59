"""Search specification, query translation and result materialization."""

from .builder import Search, search, search_regex
from .item import Item, ItemType
from .metadata import ItemMetadata
from .pagination import UNBOUNDED, Excluded, Included, ResultRange
from .sort import SortKey, SortOrder

__all__ = [
    "UNBOUNDED",
    "Excluded",
    "Included",
    "Item",
    "ItemMetadata",
    "ItemType",
    "ResultRange",
    "Search",
    "SortKey",
    "SortOrder",
    "search",
    "search_regex",
]
