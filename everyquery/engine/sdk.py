"""ctypes binding to the Everything SDK DLL."""

import ctypes
import logging
import struct
import threading
from pathlib import Path

from .constants import (
    EVERYTHING_REQUEST_ATTRIBUTES,
    EVERYTHING_REQUEST_DATE_ACCESSED,
    EVERYTHING_REQUEST_DATE_CREATED,
    EVERYTHING_REQUEST_DATE_MODIFIED,
    EVERYTHING_REQUEST_FILE_NAME,
    EVERYTHING_REQUEST_PATH,
    EVERYTHING_REQUEST_SIZE,
    INVALID_FILE_ATTRIBUTES,
    ErrorCode,
)
from .protocol import EngineError, EngineQuery

logger = logging.getLogger(__name__)

# Long-path limit of the Win32 wide-character APIs.
PATH_BUFFER_SIZE = 32_768

DWORD = ctypes.c_uint32
BOOL = ctypes.c_int


def default_dll_name() -> str:
    """Return the DLL name matching the interpreter's bitness."""
    return "Everything64.dll" if struct.calcsize("P") == 8 else "Everything32.dll"


class SnapshotItem:
    """Result row copied out of the DLL while the engine lock is held.

    Each field holds either the retrieved value or the ``EngineError`` raised while reading it,
    so accessors behave exactly as the live SDK calls did.
    """

    def __init__(
        self,
        path: str | EngineError,
        is_file: bool,
        is_folder: bool,
        is_volume: bool,
        fields: dict[int, int | EngineError],
    ):
        """Store a copied result row."""
        self._path = path
        self._is_file = is_file
        self._is_folder = is_folder
        self._is_volume = is_volume
        self._fields = fields

    def _get(self, flag: int) -> int:
        value = self._fields.get(flag)
        if value is None:
            raise EngineError.from_code(ErrorCode.EVERYTHING_ERROR_INVALIDREQUEST)
        if isinstance(value, EngineError):
            raise value
        return value

    def full_path_name(self) -> str:
        """Full path of the item."""
        if isinstance(self._path, EngineError):
            raise self._path
        return self._path

    def is_file(self) -> bool:
        """Whether the item is a file."""
        return self._is_file

    def is_folder(self) -> bool:
        """Whether the item is a folder."""
        return self._is_folder

    def is_volume(self) -> bool:
        """Whether the item is a volume."""
        return self._is_volume

    def size(self) -> int:
        """Size in bytes."""
        return self._get(EVERYTHING_REQUEST_SIZE)

    def date_created(self) -> int:
        """Creation time as FILETIME ticks."""
        return self._get(EVERYTHING_REQUEST_DATE_CREATED)

    def date_modified(self) -> int:
        """Modification time as FILETIME ticks."""
        return self._get(EVERYTHING_REQUEST_DATE_MODIFIED)

    def date_accessed(self) -> int:
        """Access time as FILETIME ticks."""
        return self._get(EVERYTHING_REQUEST_DATE_ACCESSED)

    def attributes(self) -> int:
        """File attribute bitmask."""
        return self._get(EVERYTHING_REQUEST_ATTRIBUTES)


class SnapshotResultSet:
    """Owned copy of a query result window."""

    def __init__(self, items: list[SnapshotItem]):
        """Store the copied rows."""
        self._items = items

    def __len__(self) -> int:
        """Number of rows."""
        return len(self._items)

    def at(self, index: int) -> SnapshotItem | None:
        """Row at ``index``."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return None


class EverythingSDK:
    """Engine backed by ``Everything64.dll`` talking to the running Everything service."""

    def __init__(self, dll_path: str | Path | None = None):
        """Remember where to load the DLL from; loading happens on the first query."""
        self._dll_path = str(dll_path) if dll_path is not None else default_dll_name()
        self._dll: ctypes.CDLL | None = None
        self._load_lock = threading.Lock()

    @property
    def dll(self) -> ctypes.CDLL:
        """Loaded DLL with argument and return types declared."""
        with self._load_lock:
            if self._dll is None:
                self._dll = self._load()
            return self._dll

    def _load(self) -> ctypes.CDLL:
        loader = getattr(ctypes, "WinDLL", ctypes.CDLL)
        try:
            dll = loader(self._dll_path)
        except OSError as err:
            raise EngineError(f"Unable to load the Everything SDK from {self._dll_path}: {err}") from err
        logger.debug("Loaded Everything SDK from %s", self._dll_path)

        for name in ("Everything_SetRegex", "Everything_SetMatchCase", "Everything_SetMatchPath"):
            getattr(dll, name).argtypes = [BOOL]
        dll.Everything_SetMatchWholeWord.argtypes = [BOOL]
        dll.Everything_SetSearchW.argtypes = [ctypes.c_wchar_p]
        for name in ("Everything_SetSort", "Everything_SetRequestFlags", "Everything_SetOffset", "Everything_SetMax"):
            getattr(dll, name).argtypes = [DWORD]
        dll.Everything_QueryW.argtypes = [BOOL]
        dll.Everything_QueryW.restype = BOOL
        dll.Everything_GetNumResults.restype = DWORD
        dll.Everything_GetLastError.restype = DWORD
        for name in ("Everything_IsFileResult", "Everything_IsFolderResult", "Everything_IsVolumeResult"):
            getattr(dll, name).argtypes = [DWORD]
            getattr(dll, name).restype = BOOL
        dll.Everything_GetResultFullPathNameW.argtypes = [DWORD, ctypes.c_wchar_p, DWORD]
        dll.Everything_GetResultFullPathNameW.restype = DWORD
        dll.Everything_GetResultSize.argtypes = [DWORD, ctypes.POINTER(ctypes.c_int64)]
        dll.Everything_GetResultSize.restype = BOOL
        for name in (
            "Everything_GetResultDateCreated",
            "Everything_GetResultDateModified",
            "Everything_GetResultDateAccessed",
        ):
            getattr(dll, name).argtypes = [DWORD, ctypes.POINTER(ctypes.c_uint64)]
            getattr(dll, name).restype = BOOL
        dll.Everything_GetResultAttributes.argtypes = [DWORD]
        dll.Everything_GetResultAttributes.restype = DWORD
        return dll

    def _last_error(self) -> EngineError:
        return EngineError.from_code(self.dll.Everything_GetLastError())

    def query(self, query: EngineQuery) -> SnapshotResultSet:
        """Run ``query`` and copy the whole result window out of the DLL."""
        dll = self.dll
        dll.Everything_SetSearchW(query.search)
        dll.Everything_SetRegex(query.regex)
        dll.Everything_SetMatchCase(query.match_case)
        dll.Everything_SetMatchPath(query.match_path)
        dll.Everything_SetMatchWholeWord(query.match_whole_word)
        dll.Everything_SetSort(query.sort)
        # Name and path are needed for full path retrieval whatever else was requested.
        dll.Everything_SetRequestFlags(query.request_flags | EVERYTHING_REQUEST_FILE_NAME | EVERYTHING_REQUEST_PATH)
        dll.Everything_SetOffset(query.offset)
        dll.Everything_SetMax(query.max)

        if not dll.Everything_QueryW(True):
            raise self._last_error()

        num_results = dll.Everything_GetNumResults()
        logger.debug("Everything returned %d results for %r", num_results, query.search)
        return SnapshotResultSet([self._snapshot(i, query.request_flags) for i in range(num_results)])

    def _snapshot(self, index: int, request_flags: int) -> SnapshotItem:
        dll = self.dll
        fields: dict[int, int | EngineError] = {}
        if request_flags & EVERYTHING_REQUEST_SIZE:
            fields[EVERYTHING_REQUEST_SIZE] = self._read_size(index)
        for flag, getter in (
            (EVERYTHING_REQUEST_DATE_CREATED, dll.Everything_GetResultDateCreated),
            (EVERYTHING_REQUEST_DATE_MODIFIED, dll.Everything_GetResultDateModified),
            (EVERYTHING_REQUEST_DATE_ACCESSED, dll.Everything_GetResultDateAccessed),
        ):
            if request_flags & flag:
                filetime = ctypes.c_uint64()
                fields[flag] = filetime.value if getter(index, ctypes.byref(filetime)) else self._last_error()
        if request_flags & EVERYTHING_REQUEST_ATTRIBUTES:
            attributes = dll.Everything_GetResultAttributes(index)
            fields[EVERYTHING_REQUEST_ATTRIBUTES] = (
                self._last_error() if attributes == INVALID_FILE_ATTRIBUTES else attributes
            )

        return SnapshotItem(
            path=self._read_path(index),
            is_file=bool(dll.Everything_IsFileResult(index)),
            is_folder=bool(dll.Everything_IsFolderResult(index)),
            is_volume=bool(dll.Everything_IsVolumeResult(index)),
            fields=fields,
        )

    def _read_path(self, index: int) -> str | EngineError:
        buffer = ctypes.create_unicode_buffer(PATH_BUFFER_SIZE)
        if not self.dll.Everything_GetResultFullPathNameW(index, buffer, PATH_BUFFER_SIZE):
            return self._last_error()
        return buffer.value

    def _read_size(self, index: int) -> int | EngineError:
        size = ctypes.c_int64()
        if not self.dll.Everything_GetResultSize(index, ctypes.byref(size)):
            return self._last_error()
        return size.value
