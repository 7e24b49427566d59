"""Boundary with the Everything search engine."""

from .protocol import Engine, EngineError, EngineQuery, RawItem, ResultSet
from .shared import SharedEngine, configure_global_engine, global_engine

__all__ = [
    "Engine",
    "EngineError",
    "EngineQuery",
    "RawItem",
    "ResultSet",
    "SharedEngine",
    "configure_global_engine",
    "global_engine",
]
