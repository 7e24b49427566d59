"""Process-wide, lock-guarded engine handle."""

import threading
from collections.abc import Generator
from contextlib import contextmanager

from .protocol import Engine
from .sdk import EverythingSDK


class SharedEngine:
    """Serializes access to a single engine connection.

    Everything keeps one query state per process, so only one caller may configure and run a
    query at a time. Other callers block in ``lock()`` until the current query has finished.
    """

    def __init__(self, engine: Engine):
        """Wrap ``engine`` behind a mutex."""
        self._engine = engine
        self._lock = threading.Lock()

    @contextmanager
    def lock(self) -> Generator[Engine, None, None]:
        """Hold the engine for the duration of the ``with`` block."""
        with self._lock:
            yield self._engine

    def replace(self, engine: Engine) -> None:
        """Swap the wrapped engine once in-flight queries are done."""
        with self._lock:
            self._engine = engine


_global_engine: SharedEngine | None = None
_global_engine_guard = threading.Lock()


def global_engine() -> SharedEngine:
    """Return the process-wide engine, creating the Everything DLL binding on first use."""
    global _global_engine
    with _global_engine_guard:
        if _global_engine is None:
            _global_engine = SharedEngine(EverythingSDK())
        return _global_engine


def configure_global_engine(engine: Engine) -> SharedEngine:
    """Install ``engine`` as the process-wide engine and return its shared handle."""
    global _global_engine
    with _global_engine_guard:
        if _global_engine is None:
            _global_engine = SharedEngine(engine)
        else:
            _global_engine.replace(engine)
        return _global_engine
