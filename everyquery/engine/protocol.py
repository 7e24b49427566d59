"""Engine capability set for dependency injection."""

from typing import Protocol

from pydantic import Field

from ..common.pydantic import FrozenBaseModel
from .constants import EVERYTHING_MAX_RESULTS, ErrorCode

U32_MAX = 0xFFFFFFFF


class EngineError(RuntimeError):
    """Error reported by the search engine."""

    def __init__(self, message: str, code: int | None = None):
        """Store the engine error code next to the message."""
        super().__init__(message)
        self.code = code

    @classmethod
    def from_code(cls, code: int) -> "EngineError":
        """Build an error from an ``Everything_GetLastError`` value."""
        try:
            name = ErrorCode(code).name
        except ValueError:
            name = f"unknown error {code}"
        return cls(name, code)


class EngineQuery(FrozenBaseModel):
    """Fully configured query, handed to the engine in one piece."""

    search: str
    regex: bool = False
    match_case: bool = False
    match_path: bool = False
    match_whole_word: bool = False
    sort: int = Field(description="Everything sort mode code.")
    request_flags: int = Field(default=0, ge=0, le=U32_MAX)
    offset: int = Field(default=0, ge=0, le=U32_MAX)
    max: int = Field(default=EVERYTHING_MAX_RESULTS, ge=0, le=U32_MAX)


class RawItem(Protocol):
    """One row of an engine result set."""

    def full_path_name(self) -> str:
        """Return the absolute path of the item; raise ``EngineError`` on failure."""
        ...

    def is_file(self) -> bool:
        """Return whether the item is a file."""
        ...

    def is_folder(self) -> bool:
        """Return whether the item is a folder."""
        ...

    def is_volume(self) -> bool:
        """Return whether the item is a volume."""
        ...

    def size(self) -> int:
        """Return the size in bytes."""
        ...

    def date_created(self) -> int:
        """Return the creation time as FILETIME ticks."""
        ...

    def date_modified(self) -> int:
        """Return the modification time as FILETIME ticks."""
        ...

    def date_accessed(self) -> int:
        """Return the access time as FILETIME ticks."""
        ...

    def attributes(self) -> int:
        """Return the file attribute bitmask."""
        ...


class ResultSet(Protocol):
    """Window of results returned by a single query."""

    def __len__(self) -> int:
        """Return the number of rows in the window."""
        ...

    def at(self, index: int) -> RawItem | None:
        """Return the row at ``index`` or ``None`` if it is out of range."""
        ...


class Engine(Protocol):
    """Search engine connection."""

    def query(self, query: EngineQuery) -> ResultSet:
        """Configure and run ``query``, blocking until results are available."""
        ...
