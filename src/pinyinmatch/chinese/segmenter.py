"""
最長匹配分詞器

由左至右掃描文本，在每個位置優先嘗試字典中最長的詞組，
找不到詞組時退回單字基礎讀音。

最長優先是策略決定：同一起點若長短詞組都存在，永遠選較長者。
"""

from typing import List, NamedTuple, Optional

from pinyinmatch.core.events import MatchEventHandler, build_exception_event
from pinyinmatch.utils.logger import get_logger

from .config import ChinesePinyinConfig
from .phrase_dict import PhrasePinyinDict
from .utils import ChinesePinyinUtils


class Segment(NamedTuple):
    """分詞結果片段"""

    surface: str
    pinyin: str
    pinyin_with_spaces: str
    from_dictionary: bool


class PhraseSegmenter:
    """
    最長匹配分詞器

    在位置 i 由 max_phrase_length 遞減嘗試到 2，
    第一個命中字典的 text[i:i+len] 勝出並前進 len；
    都未命中則取 text[i] 的預設讀音並前進 1。

    兩種輸出模式共用同一演算法：
    - segment(): 直接串接，作為全拼結果
    - segment_with_spaces(): 片段之間以單一空格分隔，只用於抽取首字母

    範例:
        >>> seg = PhraseSegmenter(dictionary)   # 字典含 "银行: yín háng"
        >>> seg.segment("去银行")
        'quyinhang'
        >>> seg.segment_with_spaces("去银行")
        'qu yin hang'
    """

    def __init__(
        self,
        dictionary: PhrasePinyinDict,
        max_phrase_length: int = ChinesePinyinConfig.DEFAULT_MAX_PHRASE_LENGTH,
        utils: Optional[ChinesePinyinUtils] = None,
        on_event: Optional[MatchEventHandler] = None,
    ):
        if max_phrase_length < ChinesePinyinConfig.MIN_PHRASE_LENGTH:
            raise ValueError(
                f"max_phrase_length must be at least {ChinesePinyinConfig.MIN_PHRASE_LENGTH}, "
                f"got {max_phrase_length}"
            )
        self.dictionary = dictionary
        self.max_phrase_length = max_phrase_length
        self.utils = utils or dictionary.utils
        self._on_event = on_event
        self._logger = get_logger("segmenter")

    def tokenize(self, text: str) -> List[Segment]:
        """
        切分文本為片段（不做錯誤保護，供內部與測試使用）

        Returns:
            List[Segment]: 依原文順序的片段
        """
        segments: List[Segment] = []
        n = len(text)
        i = 0

        while i < n:
            entry = None
            for length in range(min(self.max_phrase_length, n - i), 1, -1):
                entry = self.dictionary.get_entry(text[i:i + length])
                if entry is not None:
                    break

            if entry is not None:
                segments.append(Segment(entry.phrase, entry.pinyin, entry.pinyin_with_spaces, True))
                i += len(entry.phrase)
            else:
                reading = self.utils.base_reading(text[i])
                segments.append(Segment(text[i], reading, reading, False))
                i += 1

        return segments

    def segment(self, text: str) -> str:
        """全拼（片段直接串接）"""
        return self._join(text, spaced=False)

    def segment_with_spaces(self, text: str) -> str:
        """空格分隔拼音（片段之間恰好一個空格）"""
        return self._join(text, spaced=True)

    def _join(self, text: str, spaced: bool) -> str:
        if not text:
            return ""
        try:
            segments = self.tokenize(text)
        except Exception as e:
            return self._degrade(text, spaced, e)

        if spaced:
            return " ".join(s.pinyin_with_spaces for s in segments)
        return "".join(s.pinyin for s in segments)

    def _degrade(self, text: str, spaced: bool, exc: Exception) -> str:
        """分詞失敗時，整段改走逐字基礎讀音表"""
        self._logger.debug(f"分詞失敗，改用逐字轉寫: {text!r}", exc_info=True)

        if self._on_event is not None:
            try:
                self._on_event(
                    build_exception_event(
                        "degraded", "segmentation", exc, text=text, degrade_reason="base_table_fallback"
                    )
                )
            except Exception:
                self._logger.exception("on_event 回呼執行失敗")

        if spaced:
            return self.utils.base_pinyin_with_spaces(text)
        return self.utils.base_pinyin(text)
