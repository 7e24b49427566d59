"""Sort keys and their mapping onto Everything sort modes."""

from enum import Enum

from ..engine.constants import SortType


class SortOrder(Enum):
    """Order in which search results are sorted."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


class SortKey(Enum):
    """Key by which search results are sorted."""

    NAME = "name"
    TYPE_NAME = "type_name"
    PATH = "path"
    SIZE = "size"
    EXTENSION = "extension"
    DATE_CREATED = "date_created"
    DATE_MODIFIED = "date_modified"
    DATE_ACCESSED = "date_accessed"
    ATTRIBUTES = "attributes"


_SORT_TYPES: dict[tuple[SortKey, SortOrder], SortType] = {
    (SortKey.NAME, SortOrder.ASCENDING): SortType.EVERYTHING_SORT_NAME_ASCENDING,
    (SortKey.NAME, SortOrder.DESCENDING): SortType.EVERYTHING_SORT_NAME_DESCENDING,
    (SortKey.TYPE_NAME, SortOrder.ASCENDING): SortType.EVERYTHING_SORT_TYPE_NAME_ASCENDING,
    (SortKey.TYPE_NAME, SortOrder.DESCENDING): SortType.EVERYTHING_SORT_TYPE_NAME_DESCENDING,
    (SortKey.PATH, SortOrder.ASCENDING): SortType.EVERYTHING_SORT_PATH_ASCENDING,
    (SortKey.PATH, SortOrder.DESCENDING): SortType.EVERYTHING_SORT_PATH_DESCENDING,
    (SortKey.SIZE, SortOrder.ASCENDING): SortType.EVERYTHING_SORT_SIZE_ASCENDING,
    (SortKey.SIZE, SortOrder.DESCENDING): SortType.EVERYTHING_SORT_SIZE_DESCENDING,
    (SortKey.EXTENSION, SortOrder.ASCENDING): SortType.EVERYTHING_SORT_EXTENSION_ASCENDING,
    (SortKey.EXTENSION, SortOrder.DESCENDING): SortType.EVERYTHING_SORT_EXTENSION_DESCENDING,
    (SortKey.DATE_CREATED, SortOrder.ASCENDING): SortType.EVERYTHING_SORT_DATE_CREATED_ASCENDING,
    (SortKey.DATE_CREATED, SortOrder.DESCENDING): SortType.EVERYTHING_SORT_DATE_CREATED_DESCENDING,
    (SortKey.DATE_MODIFIED, SortOrder.ASCENDING): SortType.EVERYTHING_SORT_DATE_MODIFIED_ASCENDING,
    (SortKey.DATE_MODIFIED, SortOrder.DESCENDING): SortType.EVERYTHING_SORT_DATE_MODIFIED_DESCENDING,
    (SortKey.DATE_ACCESSED, SortOrder.ASCENDING): SortType.EVERYTHING_SORT_DATE_ACCESSED_ASCENDING,
    (SortKey.DATE_ACCESSED, SortOrder.DESCENDING): SortType.EVERYTHING_SORT_DATE_ACCESSED_DESCENDING,
    (SortKey.ATTRIBUTES, SortOrder.ASCENDING): SortType.EVERYTHING_SORT_ATTRIBUTES_ASCENDING,
    (SortKey.ATTRIBUTES, SortOrder.DESCENDING): SortType.EVERYTHING_SORT_ATTRIBUTES_DESCENDING,
}


def convert_sort_type(key: SortKey, order: SortOrder) -> SortType:
    """Combine a sort key and order into the Everything sort mode."""
    return _SORT_TYPES[key, order]
