"""FILETIME conversion.

Everything reports timestamps as Windows FILETIME values: the number of 100-nanosecond intervals
since 1601-01-01 UTC. Callers get nanoseconds since the Unix epoch instead, the same unit as
``os.stat_result.st_mtime_ns``.
"""

from datetime import UTC, datetime, timedelta

# Difference between 1601-01-01 and 1970-01-01 in 100-nanosecond intervals.
FILETIME_UNIX_DIFF = 116_444_736_000_000_000
TICKS_PER_SECOND = 10_000_000
NANOS_PER_TICK = 100
NANOS_PER_SECOND = 1_000_000_000

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
MAX_DATETIME = datetime.max.replace(tzinfo=UTC)
_MAX_MICROSECONDS = (MAX_DATETIME - UNIX_EPOCH) // timedelta(microseconds=1)


def filetime_to_unix_ns(filetime: int) -> int:
    """Convert FILETIME ticks to nanoseconds since the Unix epoch.

    Values before 1970 clamp to the epoch itself.
    """
    unix_ticks = max(filetime - FILETIME_UNIX_DIFF, 0)
    secs, ticks = divmod(unix_ticks, TICKS_PER_SECOND)
    return secs * NANOS_PER_SECOND + ticks * NANOS_PER_TICK


def unix_ns_to_datetime(ns: int) -> datetime:
    """Render a nanosecond timestamp as an aware UTC datetime, truncated to microseconds.

    Timestamps past the end of year 9999 clamp to ``MAX_DATETIME``.
    """
    return UNIX_EPOCH + timedelta(microseconds=min(ns // 1_000, _MAX_MICROSECONDS))
