"""
轉寫引擎抽象基類

定義拼音搜尋引擎必須實作的介面，並提供共用的日誌、計時與事件發送。
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Iterable, Optional

from pinyinmatch.core.events import MatchEvent, MatchEventHandler
from pinyinmatch.utils.logger import TimingContext, get_logger, setup_logger


class TransliterationEngine(ABC):
    """
    轉寫引擎抽象基類 (Abstract Base Class)

    職責:
    - 持有緩存、詞組字典等狀態（不使用模組層級的全域狀態）
    - 提供 pinyin / initials / matches / warmup 公開介面
    - 提供日誌、計時與事件回呼

    生命週期:
    - 宿主建立一次 Engine，呼叫 initialize()
    - 之後每次按鍵對每個候選呼叫 matches()
    - 結束時呼叫 teardown()
    """

    _engine_name: str = "base"

    def _init_logger(
        self,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
        on_event: Optional[MatchEventHandler] = None,
    ) -> None:
        self._verbose = verbose
        self._timing_callback = on_timing
        self._on_event = on_event

        if verbose:
            setup_logger(level=logging.DEBUG)

        self._logger = get_logger(f"engine.{self._engine_name}")

    def _log_timing(self, operation: str) -> TimingContext:
        return TimingContext(
            operation=operation,
            logger=self._logger,
            level=logging.DEBUG,
            callback=self._timing_callback,
        )

    def _emit_event(self, event: MatchEvent) -> None:
        event.setdefault("engine", self._engine_name)
        if self._on_event is None:
            return
        try:
            self._on_event(event)
        except Exception:
            self._logger.exception("on_event 回呼執行失敗")

    @abstractmethod
    def initialize(self) -> None:
        pass

    @abstractmethod
    def teardown(self) -> None:
        pass

    @abstractmethod
    def is_initialized(self) -> bool:
        pass

    @abstractmethod
    def pinyin(self, text: str) -> str:
        pass

    @abstractmethod
    def initials(self, text: str) -> str:
        pass

    @abstractmethod
    def matches(self, candidate_name: str, query: str) -> bool:
        pass

    @abstractmethod
    def warmup(self, candidates: Iterable[str]) -> int:
        pass

    @abstractmethod
    def get_cache_stats(self) -> Dict[str, Any]:
        pass
