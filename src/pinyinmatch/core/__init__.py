"""
核心抽象層

定義引擎介面、消歧策略協定與事件模型。
"""

from .engine_interface import TransliterationEngine
from .events import MatchEvent, MatchEventHandler, build_exception_event
from .protocols import DisambiguationStrategyProtocol

__all__ = [
    "TransliterationEngine",
    "DisambiguationStrategyProtocol",
    "MatchEvent",
    "MatchEventHandler",
    "build_exception_event",
]
