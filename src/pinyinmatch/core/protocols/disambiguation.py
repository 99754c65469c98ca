"""
Disambiguation Strategy Protocol

定義多音字消歧策略的最小介面（text -> 全拼 / 空格分隔拼音 / 變體）。
"""

from typing import List, Protocol, runtime_checkable


@runtime_checkable
class DisambiguationStrategyProtocol(Protocol):
    name: str

    def full_pinyin(self, text: str) -> str:
        """無分隔的全拼"""
        ...

    def spaced_pinyin(self, text: str) -> str:
        """以單一空格分隔音節的拼音（只用於抽取首字母）"""
        ...

    def has_variants(self, text: str) -> bool:
        """文本是否可能有其他讀音組合"""
        ...

    def variant_syllables(self, text: str) -> List[tuple]:
        """所有讀音組合（每個組合為音節 tuple）"""
        ...
