"""
多音字讀音組合展開

不依賴詞組資料的消歧方式：對含多音字的文本，
以每個字的讀音集合做笛卡兒積，產生所有可能的全拼。

k 個多音字位置、各有 r1…rk 個讀音時恰好產生 ∏ri 個組合
（相同讀音造成的重複會被去除）。
只有在預掃描確認含有多音字時才進入組合展開，
一般文本只需線性的逐字轉寫。
"""

import itertools
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from pinyinmatch.utils.logger import get_logger

from .config import ChinesePinyinConfig
from .utils import ChinesePinyinUtils


class HeteronymVariantExpander:
    """
    多音字讀音組合展開器

    功能:
    - reading_set(): 單字的有效讀音集合（預設讀音在前、去重）
    - has_heteronym(): 便宜的預掃描
    - expand(): 所有讀音組合的全拼字串
    - expand_syllables(): 同上，但以音節 tuple 表示（用於抽取首字母）

    範例:
        >>> expander = HeteronymVariantExpander()
        >>> expander.expand("银行")
        ['yinxing', 'yinhang']
    """

    def __init__(
        self,
        readings: Optional[Mapping[str, Sequence[str]]] = None,
        max_variants: int = 1024,
        utils: Optional[ChinesePinyinUtils] = None,
    ):
        if max_variants <= 0:
            raise ValueError(f"max_variants must be positive, got {max_variants}")

        self.utils = utils or ChinesePinyinUtils()
        self.readings: Dict[str, Tuple[str, ...]] = {
            char: tuple(values)
            for char, values in (readings or ChinesePinyinConfig.HETERONYM_READINGS).items()
        }
        self.max_variants = max_variants
        self._logger = get_logger("variants")

    def has_heteronym(self, text: str) -> bool:
        """文本是否含有讀音表中的字"""
        return any(char in self.readings for char in text)

    def reading_set(self, char: str) -> Tuple[str, ...]:
        """
        單字的有效讀音集合

        Returns:
            Tuple[str, ...]: 預設讀音在前，再接讀音表中的其他讀音（去重）；
            不在表中的字只有預設讀音
        """
        default = self.utils.base_reading(char)
        alternatives = self.readings.get(char)
        if not alternatives:
            return (default,)
        # dict.fromkeys 保留順序去重
        return tuple(dict.fromkeys((default, *alternatives)))

    def expand_syllables(self, text: str) -> List[Tuple[str, ...]]:
        """
        所有讀音組合（音節 tuple），預設讀音組合排第一

        不含多音字時只回傳預設讀音組合。
        """
        if not text:
            return []

        if not self.has_heteronym(text):
            return [tuple(self.utils.base_syllables(text))]

        reading_sets = [self.reading_set(char) for char in text]
        combos: List[Tuple[str, ...]] = []
        seen = set()

        for combo in itertools.product(*reading_sets):
            if len(combos) >= self.max_variants:
                self._logger.debug(
                    f"變體數量達上限 {self.max_variants}，停止展開: {text!r}"
                )
                break
            key = "".join(combo)
            if key in seen:
                continue
            seen.add(key)
            combos.append(combo)

        return combos

    def expand(self, text: str) -> List[str]:
        """所有讀音組合的全拼字串"""
        return ["".join(combo) for combo in self.expand_syllables(text)]

    def variant_count(self, text: str) -> int:
        """組合數上界 ∏ri（未去重、未套用上限）"""
        count = 1
        for char in text:
            count *= len(self.reading_set(char))
        return count
