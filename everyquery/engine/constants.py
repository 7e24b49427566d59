"""Constants of the Everything SDK (Everything.h)."""

from enum import IntEnum

# Request flags. ItemMetadata reuses these bit positions unchanged.
EVERYTHING_REQUEST_FILE_NAME = 0x00000001
EVERYTHING_REQUEST_PATH = 0x00000002
EVERYTHING_REQUEST_FULL_PATH_AND_FILE_NAME = 0x00000004
EVERYTHING_REQUEST_EXTENSION = 0x00000008
EVERYTHING_REQUEST_SIZE = 0x00000010
EVERYTHING_REQUEST_DATE_CREATED = 0x00000020
EVERYTHING_REQUEST_DATE_MODIFIED = 0x00000040
EVERYTHING_REQUEST_DATE_ACCESSED = 0x00000080
EVERYTHING_REQUEST_ATTRIBUTES = 0x00000100

# SetMax() value meaning "no limit".
EVERYTHING_MAX_RESULTS = 0xFFFFFFFF

INVALID_FILE_ATTRIBUTES = 0xFFFFFFFF


class SortType(IntEnum):
    """Sort modes accepted by ``Everything_SetSort``."""

    EVERYTHING_SORT_NAME_ASCENDING = 1
    EVERYTHING_SORT_NAME_DESCENDING = 2
    EVERYTHING_SORT_PATH_ASCENDING = 3
    EVERYTHING_SORT_PATH_DESCENDING = 4
    EVERYTHING_SORT_SIZE_ASCENDING = 5
    EVERYTHING_SORT_SIZE_DESCENDING = 6
    EVERYTHING_SORT_EXTENSION_ASCENDING = 7
    EVERYTHING_SORT_EXTENSION_DESCENDING = 8
    EVERYTHING_SORT_TYPE_NAME_ASCENDING = 9
    EVERYTHING_SORT_TYPE_NAME_DESCENDING = 10
    EVERYTHING_SORT_DATE_CREATED_ASCENDING = 11
    EVERYTHING_SORT_DATE_CREATED_DESCENDING = 12
    EVERYTHING_SORT_DATE_MODIFIED_ASCENDING = 13
    EVERYTHING_SORT_DATE_MODIFIED_DESCENDING = 14
    EVERYTHING_SORT_ATTRIBUTES_ASCENDING = 15
    EVERYTHING_SORT_ATTRIBUTES_DESCENDING = 16
    EVERYTHING_SORT_DATE_ACCESSED_ASCENDING = 23
    EVERYTHING_SORT_DATE_ACCESSED_DESCENDING = 24


class ErrorCode(IntEnum):
    """Values returned by ``Everything_GetLastError``."""

    EVERYTHING_OK = 0
    EVERYTHING_ERROR_MEMORY = 1
    EVERYTHING_ERROR_IPC = 2
    EVERYTHING_ERROR_REGISTERCLASSEX = 3
    EVERYTHING_ERROR_CREATEWINDOW = 4
    EVERYTHING_ERROR_CREATETHREAD = 5
    EVERYTHING_ERROR_INVALIDINDEX = 6
    EVERYTHING_ERROR_INVALIDCALL = 7
    EVERYTHING_ERROR_INVALIDREQUEST = 8
    EVERYTHING_ERROR_INVALIDPARAMETER = 9
