"""
最長匹配分詞器測試

驗證：
1. 最長詞組優先
2. 未命中字元退回單字讀音
3. 帶空格模式的分隔規則
4. 分詞失敗時退化為逐字轉寫
"""

import pytest

from pinyinmatch.chinese.phrase_dict import PhrasePinyinDict
from pinyinmatch.chinese.segmenter import PhraseSegmenter


def make_dictionary(text):
    d = PhrasePinyinDict()
    d.load_text(text)
    return d


class TestPhraseSegmenter:
    """測試分詞結果"""

    def setup_method(self):
        self.dictionary = make_dictionary(
            "中国: aa bb\n"
            "中国银行: zhōng guó yín háng\n"
            "银行: yín háng\n"
            "钥匙: yào shi\n"
        )
        self.segmenter = PhraseSegmenter(self.dictionary)

    def test_longest_match_wins(self):
        """同一起點長短詞組都存在時選較長者"""
        assert self.segmenter.segment("中国银行卡") == "zhongguoyinhangka"

    def test_shorter_phrase_when_longer_missing(self):
        assert self.segmenter.segment("中国人") == "aabbren"

    def test_phrase_in_the_middle(self):
        assert self.segmenter.segment("去银行") == "quyinhang"

    def test_spaced_output(self):
        """片段之間恰好一個空格，詞組內部保留字典的空格"""
        assert self.segmenter.segment_with_spaces("去银行") == "qu yin hang"
        assert self.segmenter.segment_with_spaces("金钥匙") == "jin yao shi"

    def test_no_phrase_hits(self):
        assert self.segmenter.segment("土块") == "tukuai"
        assert self.segmenter.segment_with_spaces("土块") == "tu kuai"

    def test_empty_text(self):
        assert self.segmenter.segment("") == ""
        assert self.segmenter.segment_with_spaces("") == ""

    def test_tokenize_marks_dictionary_hits(self):
        segments = self.segmenter.tokenize("去银行")

        assert [s.surface for s in segments] == ["去", "银行"]
        assert [s.from_dictionary for s in segments] == [False, True]

    def test_max_phrase_length_limits_window(self):
        """視窗只有 2 時無法命中四字詞組"""
        segmenter = PhraseSegmenter(self.dictionary, max_phrase_length=2)
        assert segmenter.segment("中国银行") == "aabbyinhang"

    def test_rejects_short_max_phrase_length(self):
        with pytest.raises(ValueError):
            PhraseSegmenter(self.dictionary, max_phrase_length=1)


class TestSegmenterDegradation:
    """測試分詞失敗時的退化"""

    def test_lookup_failure_falls_back_to_base_table(self):
        events = []
        dictionary = make_dictionary("银行: yín háng")
        segmenter = PhraseSegmenter(dictionary, on_event=events.append)

        def broken_lookup(phrase):
            raise RuntimeError("lookup failed")

        dictionary.get_entry = broken_lookup

        # 退化為逐字預設讀音（行 → xing）
        assert segmenter.segment("银行") == "yinxing"
        assert segmenter.segment_with_spaces("银行") == "yin xing"
        assert events[0]["type"] == "degraded"
        assert events[0]["stage"] == "segmentation"
        assert events[0]["exception_type"] == "RuntimeError"
