"""
全域配置模組

提供統一的配置類別，控制消歧策略、緩存容量、字典來源與日誌行為。

使用方式:
    from pinyinmatch import PinyinEngine, PinyinMatchConfig

    # 預設：詞組字典優先 + 最長匹配分詞
    engine = PinyinEngine()

    # 改用多音字組合展開策略
    engine = PinyinEngine(PinyinMatchConfig(strategy="variant"))

    # 進階: 使用標準 logging 控制
    import logging
    logging.getLogger("pinyinmatch").setLevel(logging.DEBUG)
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

from .core.events import MatchEventHandler
from .utils.logger import setup_logger

STRATEGY_PHRASE = "phrase"
STRATEGY_VARIANT = "variant"
STRATEGIES = (STRATEGY_PHRASE, STRATEGY_VARIANT)

DEFAULT_CACHE_CAPACITY = 5000
DEFAULT_MAX_PHRASE_LENGTH = 4
DEFAULT_MAX_VARIANTS = 1024


def configure_logging(verbose: bool = False) -> None:
    """
    根據 verbose 設定配置 logging

    Args:
        verbose: 是否開啟詳細日誌
    """
    if verbose:
        setup_logger(level=logging.DEBUG)


@dataclass
class PinyinMatchConfig:
    """
    引擎配置類別

    屬性:
        strategy: 消歧策略，"phrase"（詞組字典 + 分詞回退）或 "variant"（多音字組合展開）
        cache_capacity: 每個 LRU 緩存的容量
        max_phrase_length: 分詞時嘗試的最長詞組字數（由長到短試到 2）
        max_variants: 變體展開的組合數上限
        dictionary_path: 詞組字典檔路徑，None 表示使用套件內建字典
        use_default_dictionary: dictionary_path 為 None 時是否載入內建字典
        verbose: 是否開啟詳細日誌
        on_timing: 計時回呼函數 (operation: str, elapsed: float) -> None
        on_event: 降級/錯誤事件回呼函數 (event: MatchEvent) -> None

    Raises:
        ValueError: 配置值不合法（在建構時立即失敗，不會默默修正）
    """

    strategy: str = STRATEGY_PHRASE
    cache_capacity: int = DEFAULT_CACHE_CAPACITY
    max_phrase_length: int = DEFAULT_MAX_PHRASE_LENGTH
    max_variants: int = DEFAULT_MAX_VARIANTS
    dictionary_path: Optional[Union[str, Path]] = None
    use_default_dictionary: bool = True

    # 日誌控制
    verbose: bool = False

    # 回呼
    on_timing: Optional[Callable[[str, float], None]] = None
    on_event: Optional[MatchEventHandler] = None

    def __post_init__(self):
        if self.strategy not in STRATEGIES:
            raise ValueError(f"Unknown strategy {self.strategy!r}, expected one of {STRATEGIES}")
        if self.cache_capacity <= 0:
            raise ValueError(f"cache_capacity must be positive, got {self.cache_capacity}")
        if self.max_phrase_length < 2:
            raise ValueError(f"max_phrase_length must be at least 2, got {self.max_phrase_length}")
        if self.max_variants <= 0:
            raise ValueError(f"max_variants must be positive, got {self.max_variants}")

        configure_logging(self.verbose)

