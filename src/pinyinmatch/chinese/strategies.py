"""
多音字消歧策略

兩種互斥的策略，由配置擇一使用，不會混在同一條流程中：

- PhraseDictionaryStrategy（預設）：整句先查詞組字典，否則最長匹配分詞，
  精準度取決於詞組資料的涵蓋範圍
- HeteronymVariantStrategy：全拼使用預設讀音，另外保留所有多音字讀音組合
  供比對，不需人工整理的詞組資料，但候選較寬鬆
"""

from typing import List, Tuple

from pinyinmatch.config import STRATEGY_PHRASE, STRATEGY_VARIANT

from .phrase_dict import PhrasePinyinDict
from .segmenter import PhraseSegmenter
from .utils import ChinesePinyinUtils
from .variant_expander import HeteronymVariantExpander


class PhraseDictionaryStrategy:
    """詞組字典優先、最長匹配分詞回退"""

    name = STRATEGY_PHRASE

    def __init__(self, dictionary: PhrasePinyinDict, segmenter: PhraseSegmenter):
        self.dictionary = dictionary
        self.segmenter = segmenter

    def full_pinyin(self, text: str) -> str:
        pinyin = self.dictionary.try_get_pinyin(text)
        if pinyin is not None:
            return pinyin
        return self.segmenter.segment(text)

    def spaced_pinyin(self, text: str) -> str:
        pinyin = self.dictionary.try_get_pinyin_with_spaces(text)
        if pinyin is not None:
            return pinyin
        return self.segmenter.segment_with_spaces(text)

    def has_variants(self, text: str) -> bool:
        return False

    def variant_syllables(self, text: str) -> List[Tuple[str, ...]]:
        return [tuple(self.spaced_pinyin(text).split())] if text else []


class HeteronymVariantStrategy:
    """預設讀音 + 多音字讀音組合展開"""

    name = STRATEGY_VARIANT

    def __init__(self, expander: HeteronymVariantExpander, utils: ChinesePinyinUtils):
        self.expander = expander
        self.utils = utils

    def full_pinyin(self, text: str) -> str:
        return self.utils.base_pinyin(text)

    def spaced_pinyin(self, text: str) -> str:
        return self.utils.base_pinyin_with_spaces(text)

    def has_variants(self, text: str) -> bool:
        return self.expander.has_heteronym(text)

    def variant_syllables(self, text: str) -> List[Tuple[str, ...]]:
        return self.expander.expand_syllables(text)
