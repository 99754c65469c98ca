"""
拼音轉寫引擎 (PinyinEngine)

持有緩存、詞組字典與消歧策略，提供宿主呼叫的公開介面：
initialize / teardown / pinyin / initials / variants / matches / warmup。

公開方法對呼叫端保證永不拋錯：內部失敗只記錄日誌與事件，
並回傳最安全的預設值（轉寫回傳 ""、比對回傳 False）。
唯一會拋出的是建構時的配置錯誤 (ValueError)
與 initialize() 時缺少 pypinyin 的 ImportError。
"""

import dataclasses
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from pinyinmatch.config import STRATEGY_PHRASE, PinyinMatchConfig
from pinyinmatch.core.engine_interface import TransliterationEngine
from pinyinmatch.core.events import build_exception_event
from pinyinmatch.core.protocols.disambiguation import DisambiguationStrategyProtocol
from pinyinmatch.utils.cache import LRUCache

from .matcher import PinyinSearchMatcher
from .phrase_dict import PhrasePinyinDict
from .segmenter import PhraseSegmenter
from .strategies import HeteronymVariantStrategy, PhraseDictionaryStrategy
from .utils import ChinesePinyinUtils, _get_pypinyin
from .variant_expander import HeteronymVariantExpander


class PinyinEngine(TransliterationEngine):
    """
    拼音轉寫與搜尋比對引擎

    使用方式:
        >>> engine = PinyinEngine()
        >>> engine.initialize()
        >>> engine.pinyin("钥匙")
        'yaoshi'
        >>> engine.initials("钥匙")
        'ys'
        >>> engine.matches("钥匙", "YS")
        True
        >>> engine.teardown()

    或以 context manager 管理生命週期:
        >>> with PinyinEngine(strategy="variant") as engine:
        ...     engine.matches("银行", "yinhang")
        True
    """

    _engine_name = "pinyin"

    def __init__(self, config: Optional[PinyinMatchConfig] = None, **overrides: Any):
        if config is None:
            config = PinyinMatchConfig(**overrides)
        elif overrides:
            config = dataclasses.replace(config, **overrides)

        self._config = config
        self._init_logger(
            verbose=config.verbose,
            on_timing=config.on_timing,
            on_event=config.on_event,
        )

        self._utils = ChinesePinyinUtils()
        self._dictionary: Optional[PhrasePinyinDict] = None
        self._strategy: Optional[DisambiguationStrategyProtocol] = None
        self._pinyin_cache: Optional[LRUCache[str, str]] = None
        self._initials_cache: Optional[LRUCache[str, str]] = None
        self._variant_cache: Optional[LRUCache[str, Tuple[Tuple[str, ...], ...]]] = None
        self._matcher = PinyinSearchMatcher(self)
        self._initialized = False

    # ========== 生命週期 ==========

    def initialize(self) -> None:
        """配置緩存並載入詞組字典（只執行一次，重複呼叫無作用）"""
        if self._initialized:
            return

        with self._log_timing("PinyinEngine.initialize"):
            _get_pypinyin()

            capacity = self._config.cache_capacity
            self._pinyin_cache = LRUCache(capacity)
            self._initials_cache = LRUCache(capacity)
            self._variant_cache = LRUCache(capacity)

            if self._config.strategy == STRATEGY_PHRASE:
                self._dictionary = PhrasePinyinDict(utils=self._utils, on_event=self._emit_event)
                self._load_dictionary(self._dictionary)
                segmenter = PhraseSegmenter(
                    self._dictionary,
                    max_phrase_length=self._config.max_phrase_length,
                    utils=self._utils,
                    on_event=self._emit_event,
                )
                self._strategy = PhraseDictionaryStrategy(self._dictionary, segmenter)
            else:
                expander = HeteronymVariantExpander(
                    max_variants=self._config.max_variants,
                    utils=self._utils,
                )
                self._strategy = HeteronymVariantStrategy(expander, self._utils)

            self._initialized = True
            self._logger.info(
                f"PinyinEngine initialized (strategy={self._config.strategy}, "
                f"phrases={len(self._dictionary) if self._dictionary is not None else 0})"
            )

    def _load_dictionary(self, dictionary: PhrasePinyinDict) -> None:
        if self._config.dictionary_path is not None:
            dictionary.load_file(self._config.dictionary_path)
        elif self._config.use_default_dictionary:
            dictionary.load_default()
        else:
            dictionary.load_empty()

    def teardown(self) -> None:
        """清空並釋放緩存與字典，回到未初始化狀態（可重複呼叫）"""
        for cache in (self._pinyin_cache, self._initials_cache, self._variant_cache):
            if cache is not None:
                cache.clear()
        self._pinyin_cache = None
        self._initials_cache = None
        self._variant_cache = None

        if self._dictionary is not None:
            self._dictionary.unload()
        self._dictionary = None
        self._strategy = None

        if self._initialized:
            self._logger.info("PinyinEngine torn down")
        self._initialized = False

    def __enter__(self) -> "PinyinEngine":
        self.initialize()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.teardown()
        return False

    # ========== 屬性 ==========

    @property
    def config(self) -> PinyinMatchConfig:
        return self._config

    @property
    def utils(self) -> ChinesePinyinUtils:
        return self._utils

    @property
    def dictionary(self) -> Optional[PhrasePinyinDict]:
        return self._dictionary

    @property
    def strategy(self) -> Optional[DisambiguationStrategyProtocol]:
        return self._strategy

    def is_initialized(self) -> bool:
        return self._initialized

    # ========== 轉寫 ==========

    def pinyin(self, text: str) -> str:
        """
        文字 → 全拼（小寫、無聲調、無分隔）

        優先整句查詞組字典，否則分詞（或變體策略下的預設讀音）。

        Args:
            text: 輸入文字（如 "钥匙"）

        Returns:
            str: 拼音字串（如 "yaoshi"）；空輸入、未初始化或內部失敗時為 ""
        """
        if not text or not self._initialized:
            return ""
        try:
            return self._compute_pinyin(text)
        except Exception as e:
            self._report_failure("pinyin", text, e)
            return ""

    def initials(self, text: str) -> str:
        """
        文字 → 首字母（如 "钥匙" → "ys"）

        與 pinyin() 相同的優先順序，改用空格分隔的拼音抽取首字母，並使用獨立緩存。
        """
        if not text or not self._initialized:
            return ""
        try:
            return self._compute_initials(text)
        except Exception as e:
            self._report_failure("initials", text, e)
            return ""

    def variants(self, text: str) -> List[str]:
        """
        所有可能的全拼

        變體策略下為多音字讀音組合（預設讀音在前）；詞組策略下只有 [pinyin(text)]。
        """
        if not text or not self._initialized:
            return []
        try:
            if not self._strategy.has_variants(text):
                return [self._compute_pinyin(text)]
            return ["".join(syllables) for syllables in self._variant_syllables(text)]
        except Exception as e:
            self._report_failure("variants", text, e)
            return []

    def _variant_syllables(self, text: str) -> Tuple[Tuple[str, ...], ...]:
        """讀音組合（音節 tuple），結果寫入變體緩存（不做錯誤保護，僅供比對器呼叫）"""
        cached = self._variant_cache.get(text)
        if cached is not None:
            return cached
        result = tuple(self._strategy.variant_syllables(text))
        self._variant_cache.set(text, result)
        return result

    def _compute_pinyin(self, text: str) -> str:
        return self._cached(self._pinyin_cache, text, self._strategy.full_pinyin)

    def _compute_initials(self, text: str) -> str:
        return self._cached(
            self._initials_cache,
            text,
            lambda t: self._utils.extract_initials(self._strategy.spaced_pinyin(t)),
        )

    @staticmethod
    def _cached(cache: LRUCache[str, str], text: str, compute: Callable[[str], str]) -> str:
        cached = cache.get(text)
        if cached is not None:
            return cached
        result = compute(text)
        cache.set(text, result)
        return result

    # ========== 比對 ==========

    def matches(self, candidate_name: str, query: str) -> bool:
        """
        檢查查詢字串是否匹配候選名稱（拼音匹配）

        Args:
            candidate_name: 候選名稱（如物品名 "钥匙"）
            query: 使用者輸入（如 "ys"、"yao"，不分大小寫）

        Returns:
            bool: 查詢為全拼或首字母的子字串時為 True；任何失敗皆回傳 False
        """
        if not candidate_name or not query or not self._initialized:
            return False
        try:
            return self._matcher.matches(candidate_name, query)
        except Exception as e:
            self._report_failure("matches", candidate_name, e)
            return False

    def filter_by_search_text(self, names: Iterable[str], query: str) -> List[str]:
        """保留原文包含查詢字串、或拼音匹配的名稱（依輸入順序）"""
        try:
            return self._matcher.filter_by_search_text(names, query)
        except Exception as e:
            self._report_failure("matches", query, e)
            return []

    # ========== 預熱 ==========

    def warmup(self, candidates: Iterable[str]) -> int:
        """
        預熱緩存 - 為宿主提供的所有候選名稱預先計算拼音與首字母

        單一候選失敗不會中斷其餘候選。

        Returns:
            int: 成功預熱的候選數量（未初始化時為 0）
        """
        if not self._initialized:
            return 0

        warmed = 0
        with self._log_timing("PinyinEngine.warmup"):
            try:
                for name in candidates:
                    if not name:
                        continue
                    try:
                        self._compute_pinyin(name)
                        self._compute_initials(name)
                    except Exception as e:
                        self._report_failure("warmup", name, e)
                        continue
                    warmed += 1
            except Exception as e:
                # 候選來源本身失敗（如宿主的生成器拋錯），保留已完成的部分
                self._report_failure("warmup", "", e)

        self._logger.debug(f"Warmup finished: {warmed} candidates")
        return warmed

    # ========== 統計與診斷 ==========

    def get_cache_stats(self) -> Dict[str, Any]:
        stats: Dict[str, Any] = {
            "strategy": self._config.strategy,
            "initialized": self._initialized,
            "dictionary_size": len(self._dictionary) if self._dictionary is not None else 0,
        }
        for name, cache in (
            ("pinyin", self._pinyin_cache),
            ("initials", self._initials_cache),
            ("variants", self._variant_cache),
        ):
            if cache is not None:
                stats[name] = cache.get_stats()
        return stats

    def _report_failure(self, stage: str, text: str, exc: Exception) -> None:
        self._logger.debug(f"{stage} 失敗，回傳預設值: {text!r}", exc_info=True)
        self._emit_event(build_exception_event("error", stage, exc, engine=self._engine_name, text=text))
