"""Search specification."""

from typing import Self

from pydantic import Field

from ..common.pydantic import FrozenBaseModel
from ..engine.shared import SharedEngine
from .item import Item
from .metadata import ItemMetadata
from .pagination import ResultRange
from .sort import SortKey, SortOrder
from .translator import run_query


class Search(FrozenBaseModel):
    """A search to run against the Everything index.

    Build one with ``search`` or ``search_regex``, refine it with the builder methods, then call
    ``query_all`` or ``query_range``. Instances are immutable: builder methods return updated
    copies, and the same search can be queried any number of times.
    """

    pattern: str = Field(description="Everything search syntax, or a regular expression if `regex` is set.")
    regex: bool = Field(default=False, description="Interpret `pattern` as a regular expression.")
    case_sensitive: bool = Field(default=False, description="Case-sensitive matching.")
    full_path: bool = Field(default=False, description="Match against the full path instead of the name.")
    whole_word: bool = Field(default=False, description="Match whole words only.")
    sort_key: SortKey = SortKey.NAME
    sort_order: SortOrder = SortOrder.ASCENDING
    requested_metadata: ItemMetadata = Field(
        default=ItemMetadata(0), description="Optional metadata to fetch for every result."
    )

    def match_case(self, case: bool = True) -> Self:
        """Set whether the search is case-sensitive. Searches are case-insensitive by default."""
        return self.model_copy(update={"case_sensitive": case})

    def match_path(self, path: bool = True) -> Self:
        """Set whether the pattern is matched against full paths. Disabled by default."""
        return self.model_copy(update={"full_path": path})

    def match_whole_word(self, whole_word: bool = True) -> Self:
        """Set whether the search matches whole words only. Partial words match by default."""
        return self.model_copy(update={"whole_word": whole_word})

    def sort_by(self, key: SortKey, order: SortOrder = SortOrder.ASCENDING) -> Self:
        """Set the sort key and order, replacing any previous choice.

        Results are sorted by name in ascending order by default.
        """
        return self.model_copy(update={"sort_key": key, "sort_order": order})

    def request_metadata(self, metadata: ItemMetadata) -> Self:
        """Request additional metadata for every result.

        Repeated calls accumulate: the requested sets are combined, never replaced.
        """
        return self.model_copy(update={"requested_metadata": self.requested_metadata | metadata})

    def query_all(self, engine: SharedEngine | None = None) -> list[Item]:
        """Run the search and return every matching item.

        Equivalent to ``query_range(None)``. Blocks until the engine answers; large result sets
        can use a lot of memory, so prefer ``query_range`` for broad patterns.
        """
        return self.query_range(None, engine=engine)

    def query_range(
        self, bounds: ResultRange | slice | range | None, engine: SharedEngine | None = None
    ) -> list[Item]:
        """Run the search and return the matching items within ``bounds``.

        ``query_range(slice(None, 100))`` returns the first 100 results and
        ``query_range(range(100, 200))`` results 100 through 199. Use ``ResultRange`` with
        ``Included``/``Excluded`` bounds for other combinations. Blocks until the engine answers.

        The Everything index is live. Consecutive calls such as ``range(0, 100)`` then
        ``range(100, 200)`` are not guaranteed to be consistent: files may be added, removed or
        reordered between them, causing gaps or overlaps. Fetch everything you need in a single
        call when consistency matters.
        """
        return run_query(self, bounds, engine)


def search(pattern: str) -> Search:
    """Create a search using the Everything search syntax.

    The syntax supports wildcards (``*``, ``?``), operators (``AND``, ``OR``, ``NOT``) and more;
    see https://www.voidtools.com/support/everything/searching/.
    """
    return Search(pattern=pattern)


def search_regex(pattern: str) -> Search:
    """Create a search using a regular expression."""
    return Search(pattern=pattern, regex=True)
