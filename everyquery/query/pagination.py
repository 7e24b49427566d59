"""Result ranges and their mapping onto the engine's offset/count pair."""

from dataclasses import dataclass

from ..engine.constants import EVERYTHING_MAX_RESULTS

U32_MASK = 0xFFFFFFFF


@dataclass(frozen=True, slots=True)
class Included:
    """Bound that includes ``value``."""

    value: int


@dataclass(frozen=True, slots=True)
class Excluded:
    """Bound that excludes ``value``."""

    value: int


class _Unbounded:
    """Missing bound."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "UNBOUNDED"


UNBOUNDED = _Unbounded()

Bound = Included | Excluded | _Unbounded


@dataclass(frozen=True, slots=True)
class ResultRange:
    """Window of result positions, each end independently included, excluded or open."""

    start: Bound = UNBOUNDED
    end: Bound = UNBOUNDED

    @classmethod
    def coerce(cls, bounds: "ResultRange | slice | range | None") -> "ResultRange":
        """Build a range from a ``slice``, a ``range`` or ``None`` (everything).

        Python ranges and slices include their start and exclude their stop.
        """
        if bounds is None:
            return cls()
        if isinstance(bounds, cls):
            return bounds
        if isinstance(bounds, (slice, range)):
            if bounds.step not in (None, 1):
                raise ValueError(f"Result ranges must be contiguous, got step {bounds.step}")
            start = UNBOUNDED if bounds.start is None else Included(bounds.start)
            end = UNBOUNDED if bounds.stop is None else Excluded(bounds.stop)
            return cls(start, end)
        raise TypeError(f"Unsupported result range: {bounds!r}")

    def to_offset_count(self) -> tuple[int, int]:
        """Convert to the engine's ``(offset, max)`` pair.

        The arithmetic is unsigned 32-bit and wraps. Inverted or out-of-range bounds are not
        checked and produce wrapped values.
        """
        if isinstance(self.start, Included):
            start = self.start.value & U32_MASK
        elif isinstance(self.start, Excluded):
            start = (self.start.value + 1) & U32_MASK
        else:
            start = 0

        if isinstance(self.end, Included):
            count = (self.end.value - start + 1) & U32_MASK
        elif isinstance(self.end, Excluded):
            count = (self.end.value - start) & U32_MASK
        else:
            count = EVERYTHING_MAX_RESULTS

        return start, count
