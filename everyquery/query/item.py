"""Materialization of engine result rows into items."""

import logging
from collections.abc import Callable
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

from more_itertools import one

from ..common.pydantic import FrozenBaseModel
from ..engine.protocol import EngineError, RawItem, ResultSet
from .filetime import filetime_to_unix_ns, unix_ns_to_datetime
from .metadata import ItemMetadata

if TYPE_CHECKING:
    from .builder import Search

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ItemType(Enum):
    """Type of an ``Item``."""

    FILE = "file"
    FOLDER = "folder"
    VOLUME = "volume"


class Item(FrozenBaseModel):
    """A file, folder or volume matched by a search.

    Optional fields are ``None`` when they were not requested through
    ``Search.request_metadata`` or when the engine failed to return them. Failures are logged.
    Timestamps are nanoseconds since the Unix epoch.
    """

    path: Path
    item_type: ItemType
    size: int | None = None
    date_created_ns: int | None = None
    date_modified_ns: int | None = None
    date_accessed_ns: int | None = None
    attributes: int | None = None

    @property
    def name(self) -> str:
        """Final path component."""
        return self.path.name

    @property
    def date_created(self) -> datetime | None:
        """Creation time in UTC."""
        return None if self.date_created_ns is None else unix_ns_to_datetime(self.date_created_ns)

    @property
    def date_modified(self) -> datetime | None:
        """Modification time in UTC."""
        return None if self.date_modified_ns is None else unix_ns_to_datetime(self.date_modified_ns)

    @property
    def date_accessed(self) -> datetime | None:
        """Access time in UTC."""
        return None if self.date_accessed_ns is None else unix_ns_to_datetime(self.date_accessed_ns)


def get_metadata(
    search: "Search",
    item: RawItem,
    item_path: Path,
    metadata_flag: ItemMetadata,
    getter: Callable[[RawItem], T],
) -> T | None:
    """Read one metadata field if ``search`` requested it.

    Returns ``None`` without touching the engine when the field was not requested, and logs
    and returns ``None`` when the engine fails to produce it.
    """
    if metadata_flag not in search.requested_metadata:
        return None
    try:
        return getter(item)
    except EngineError as err:
        logger.error(
            "Unable to retrieve requested metadata for %s. "
            "Caused by the following error in the Everything SDK: %s",
            item_path,
            err,
        )
        return None


def _item_type(item: RawItem, path: Path) -> ItemType | None:
    candidates = [
        item_type
        for item_type, matches in (
            (ItemType.FILE, item.is_file()),
            (ItemType.FOLDER, item.is_folder()),
            (ItemType.VOLUME, item.is_volume()),
        )
        if matches
    ]
    try:
        return one(candidates)
    except ValueError:
        logger.error(
            "Encountering an item that is not exactly one of: file, folder, or volume (%s: %s). "
            "This is likely a bug in the Everything SDK.",
            path,
            ", ".join(t.value for t in candidates) or "none",
        )
        return None


def materialize(search: "Search", results: ResultSet, index: int) -> Item | None:
    """Build the ``Item`` at ``index`` of ``results``, or ``None`` if it cannot be read."""
    item = results.at(index)
    if item is None:
        return None

    try:
        path = Path(item.full_path_name())
    except EngineError as err:
        logger.error(
            "Unable to retrieve the full path name of an item. "
            "Caused by the following error in the Everything SDK: %s",
            err,
        )
        return None

    item_type = _item_type(item, path)
    if item_type is None:
        return None

    date_created = get_metadata(search, item, path, ItemMetadata.DATE_CREATED, lambda i: i.date_created())
    date_modified = get_metadata(search, item, path, ItemMetadata.DATE_MODIFIED, lambda i: i.date_modified())
    date_accessed = get_metadata(search, item, path, ItemMetadata.DATE_ACCESSED, lambda i: i.date_accessed())

    return Item(
        path=path,
        item_type=item_type,
        size=get_metadata(search, item, path, ItemMetadata.SIZE, lambda i: i.size()),
        date_created_ns=None if date_created is None else filetime_to_unix_ns(date_created),
        date_modified_ns=None if date_modified is None else filetime_to_unix_ns(date_modified),
        date_accessed_ns=None if date_accessed is None else filetime_to_unix_ns(date_accessed),
        attributes=get_metadata(search, item, path, ItemMetadata.ATTRIBUTES, lambda i: i.attributes()),
    )
