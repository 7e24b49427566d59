"""Translation of a ``Search`` into an engine query and back into items."""

import logging
from typing import TYPE_CHECKING

from ..engine.protocol import EngineError, EngineQuery
from ..engine.shared import SharedEngine, global_engine
from .item import Item, materialize
from .pagination import ResultRange
from .sort import convert_sort_type

if TYPE_CHECKING:
    from .builder import Search

logger = logging.getLogger(__name__)


def build_engine_query(search: "Search", offset: int, count: int) -> EngineQuery:
    """Configure an engine query from ``search`` for the window ``offset`` .. ``offset + count``."""
    return EngineQuery(
        search=search.pattern,
        regex=search.regex,
        match_case=search.case_sensitive,
        match_path=search.full_path,
        match_whole_word=search.whole_word,
        sort=int(convert_sort_type(search.sort_key, search.sort_order)),
        request_flags=int(search.requested_metadata),
        offset=offset,
        max=count,
    )


def run_query(
    search: "Search",
    bounds: ResultRange | slice | range | None = None,
    engine: SharedEngine | None = None,
) -> list[Item]:
    """Execute ``search`` over ``bounds`` and return the materialized items in engine order.

    The engine lock is held only while the query runs. Rows that cannot be read are skipped, so
    the result may be shorter than the requested window.
    """
    offset, count = ResultRange.coerce(bounds).to_offset_count()
    query = build_engine_query(search, offset, count)
    shared = engine if engine is not None else global_engine()

    try:
        with shared.lock() as handle:
            results = handle.query(query)
    except EngineError as err:
        logger.error(
            "Everything query for %r failed. "
            "Caused by the following error in the Everything SDK: %s",
            search.pattern,
            err,
        )
        return []

    items = (materialize(search, results, i) for i in range(len(results)))
    return [item for item in items if item is not None]
