"""Ataxx engine package: search implementation and Qt worker bridge.

The Qt bridge is imported lazily by callers (``ataxie.engine.qt_bridge``) so
the search itself stays usable without PyQt6 loaded.
"""

from ataxie.engine.evaluate import evaluate
from ataxie.engine.minimax import MinimaxEngine
from ataxie.engine.search import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_SENSES,
    INF_SCORE,
    WINNING_VALUE,
    ColorSense,
    IEngine,
    SearchLimits,
    SearchResult,
)

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "DEFAULT_SENSES",
    "INF_SCORE",
    "WINNING_VALUE",
    "ColorSense",
    "IEngine",
    "MinimaxEngine",
    "SearchLimits",
    "SearchResult",
    "evaluate",
]
