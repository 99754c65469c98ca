"""
中文拼音工具函數模組

提供拼音相關的通用函數,包括:
- 基礎逐字讀音表（pypinyin 預設讀音，延遲載入）
- 去聲調正規化
- 由拼音抽取首字母

注意：此模組使用延遲導入 (Lazy Import) 機制，
僅在第一次查詢基礎讀音時才會載入 pypinyin。
"""

import re
from functools import lru_cache
from typing import List

from pinyinmatch.utils.lazy_imports import PYPINYIN_INSTALL_HINT
from pinyinmatch.utils.logger import get_logger

from .config import ChinesePinyinConfig

logger = get_logger("chinese.utils")

_pypinyin = None

_WHITESPACE_RE = re.compile(r"\s+")


def _get_pypinyin():
    """延遲載入 pypinyin 模組"""
    global _pypinyin

    if _pypinyin is None:
        try:
            import pypinyin
        except ImportError as e:
            logger.error("無法載入 pypinyin，請確認是否已安裝")
            raise ImportError(PYPINYIN_INSTALL_HINT) from e
        _pypinyin = pypinyin
    return _pypinyin


# =============================================================================
# 基礎讀音快取 (Performance Critical)
# =============================================================================
# 單字讀音與文本無關，可跨引擎實例共用

@lru_cache(maxsize=20000)
def cached_base_reading(char: str) -> str:
    """
    單一字元的預設讀音（小寫、無聲調、ü 記作 v）

    非中文字元原樣回傳（轉小寫）。
    """
    pypinyin = _get_pypinyin()
    readings = pypinyin.lazy_pinyin(char, style=pypinyin.Style.NORMAL)
    return (readings[0] if readings else char).lower()


class ChinesePinyinUtils:
    """拼音工具類別 - 提供拼音處理的通用函數"""

    def __init__(self, config=None):
        """
        初始化拼音工具

        Args:
            config: ChinesePinyinConfig 類別或相容物件，None 則使用預設配置
        """
        self.config = config or ChinesePinyinConfig

    def base_reading(self, char: str) -> str:
        """單一字元的預設讀音"""
        return cached_base_reading(char)

    def base_syllables(self, text: str) -> List[str]:
        """逐字查基礎讀音表，回傳每個字元的讀音"""
        return [self.base_reading(char) for char in text]

    def base_pinyin(self, text: str) -> str:
        """
        逐字基礎轉寫（無分隔）

        這是分詞失敗時的退化路徑，也是變體策略的預設讀音字串。

        Args:
            text: 輸入文字

        Returns:
            str: 拼音字串，例如 "土块" -> "tukuai"
        """
        return "".join(self.base_syllables(text))

    def base_pinyin_with_spaces(self, text: str) -> str:
        """逐字基礎轉寫（單一空格分隔）"""
        return " ".join(self.base_syllables(text))

    def strip_tones(self, pinyin: str) -> str:
        """
        去除聲調符號並轉小寫

        ā/á/ǎ/à → a（e/i/o/u 同理），ǖ/ǘ/ǚ/ǜ/ü → v

        Args:
            pinyin: 帶調拼音（如 "yào shi"）

        Returns:
            str: 無調拼音（如 "yao shi"）
        """
        if not pinyin:
            return ""
        tone_marks = self.config.TONE_MARKS
        return "".join(tone_marks.get(ch, ch) for ch in pinyin.lower())

    @staticmethod
    def collapse_spaces(pinyin: str) -> str:
        """將連續空白壓成單一空格並去除首尾空白"""
        return _WHITESPACE_RE.sub(" ", pinyin).strip()

    def is_vowel(self, char: str) -> bool:
        return char in self.config.VOWELS

    def extract_initials(self, pinyin: str) -> str:
        """
        從拼音字串抽取首字母

        規則：
        - 空白是音節邊界；空白分隔後的 token 若是合法單音節，取其首字母
        - 其餘 token 視為黏連片段：首字元必為首字母，
          之後凡「元音後接非元音」處視為新音節開頭

        黏連片段的規則是近似法，無法正確切分所有音節
        （例如 "jinyaoshi" 會得到 "jns"、連續的零聲母音節會被合併）。

        範例:
            >>> utils.extract_initials("yao shi")
            'ys'
            >>> utils.extract_initials("yaoshi")
            'ys'
        """
        if not pinyin:
            return ""

        initials = []
        for token in pinyin.split():
            if token in self.config.VALID_SYLLABLES:
                initials.append(token[0])
            else:
                initials.append(self._initials_of_run(token))
        return "".join(initials)

    def _initials_of_run(self, run: str) -> str:
        result = [run[0]]
        for previous, current in zip(run, run[1:]):
            if self.is_vowel(previous) and not self.is_vowel(current):
                result.append(current)
        return "".join(result)
