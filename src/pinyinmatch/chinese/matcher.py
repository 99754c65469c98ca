"""
拼音搜尋比對器

判斷使用者輸入的查詢字串是否以「子字串」形式出現在候選名稱的
全拼或首字母中（變體策略下也比對每個讀音組合）。

本模組不做錯誤保護；例外由 PinyinEngine.matches 統一攔截並轉為 False。
"""

from typing import TYPE_CHECKING, Iterable, List

if TYPE_CHECKING:
    from pinyinmatch.chinese.engine import PinyinEngine


def normalize_query(query: str) -> str:
    """查詢字串統一轉小寫"""
    return query.lower()


class PinyinSearchMatcher:
    """
    拼音搜尋比對器

    比對順序（任一命中即回傳 True）:
    1. 全拼子字串
    2. 首字母子字串
    3. 變體策略且名稱含多音字時：任一讀音組合的全拼或首字母

    建立方式:
        由 PinyinEngine 建立並持有
    """

    def __init__(self, engine: "PinyinEngine"):
        self._engine = engine

    def matches(self, candidate_name: str, query: str) -> bool:
        if not candidate_name or not query:
            return False

        search = normalize_query(query)
        engine = self._engine

        # 1. 全拼匹配
        if search in engine.pinyin(candidate_name):
            return True

        # 2. 首字母匹配
        if search in engine.initials(candidate_name):
            return True

        # 3. 多音字讀音組合
        if not engine.strategy.has_variants(candidate_name):
            return False

        utils = engine.utils
        for syllables in engine._variant_syllables(candidate_name):
            if search in "".join(syllables):
                return True
            if search in utils.extract_initials(" ".join(syllables)):
                return True
        return False

    def filter_by_search_text(self, names: Iterable[str], query: str) -> List[str]:
        """
        宿主的預設比對（不分大小寫的原文包含）或拼音比對，保留輸入順序

        原文已命中時不再做拼音比對；拼音比對經由引擎的安全邊界，單筆失敗只視為不匹配。
        """
        if not query:
            return []

        search = normalize_query(query)
        return [
            name
            for name in names
            if name and (search in name.lower() or self._engine.matches(name, query))
        ]
