"""Test utilities and fake implementations."""

from collections.abc import Iterable

from everyquery.engine.protocol import EngineError, EngineQuery

# FILETIME of 2024-01-01T00:00:00Z.
FILETIME_2024 = 133_485_408_000_000_000
UNIX_NS_2024 = 1_704_067_200_000_000_000


class FakeItem:
    """Result row with scripted values.

    Any value may be an ``EngineError``, which the matching accessor raises instead of returning.
    """

    def __init__(
        self,
        path: str | EngineError,
        kind: str | Iterable[str] = "file",
        size: int | EngineError = 0,
        date_created: int | EngineError = FILETIME_2024,
        date_modified: int | EngineError = FILETIME_2024,
        date_accessed: int | EngineError = FILETIME_2024,
        attributes: int | EngineError = 0x20,
    ):
        """Store the scripted row."""
        self.path = path
        self.kinds = {kind} if isinstance(kind, str) else set(kind)
        self.values = {
            "size": size,
            "date_created": date_created,
            "date_modified": date_modified,
            "date_accessed": date_accessed,
            "attributes": attributes,
        }
        self.calls: list[str] = []

    def _get(self, field: str) -> int:
        self.calls.append(field)
        value = self.values[field]
        if isinstance(value, EngineError):
            raise value
        return value

    def full_path_name(self) -> str:
        """Scripted path."""
        self.calls.append("path")
        if isinstance(self.path, EngineError):
            raise self.path
        return self.path

    def is_file(self) -> bool:
        """Whether the row is scripted as a file."""
        return "file" in self.kinds

    def is_folder(self) -> bool:
        """Whether the row is scripted as a folder."""
        return "folder" in self.kinds

    def is_volume(self) -> bool:
        """Whether the row is scripted as a volume."""
        return "volume" in self.kinds

    def size(self) -> int:
        """Scripted size."""
        return self._get("size")

    def date_created(self) -> int:
        """Scripted creation time."""
        return self._get("date_created")

    def date_modified(self) -> int:
        """Scripted modification time."""
        return self._get("date_modified")

    def date_accessed(self) -> int:
        """Scripted access time."""
        return self._get("date_accessed")

    def attributes(self) -> int:
        """Scripted attributes."""
        return self._get("attributes")


class FakeResultSet:
    """Result window backed by a list."""

    def __init__(self, items: list[FakeItem]):
        """Store the window."""
        self.items = items

    def __len__(self) -> int:
        """Number of rows."""
        return len(self.items)

    def at(self, index: int) -> FakeItem | None:
        """Row at ``index``."""
        if 0 <= index < len(self.items):
            return self.items[index]
        return None


class FakeEngine:
    """In-memory engine that windows a fixed list of rows and records every query."""

    def __init__(self, items: list[FakeItem] | None = None, error: EngineError | None = None):
        """Store the full result list, or an error to raise from every query."""
        self.items = items or []
        self.error = error
        self.queries: list[EngineQuery] = []

    def query(self, query: EngineQuery) -> FakeResultSet:
        """Record ``query`` and return the requested window."""
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return FakeResultSet(self.items[query.offset : query.offset + query.max])


def fake_items(count: int, prefix: str = "C:\\data\\file") -> list[FakeItem]:
    """Create ``count`` plain file rows."""
    return [FakeItem(f"{prefix}{i}.txt", size=i) for i in range(count)]

