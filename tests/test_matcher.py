"""
拼音搜尋比對測試

驗證：
1. 全拼子字串 / 首字母子字串匹配
2. 不分大小寫
3. 變體策略的多音字比對
4. 原文包含 + 拼音比對的過濾
"""

import pytest

from pinyinmatch import PinyinEngine


class TestMatches:
    """測試 matches()"""

    @pytest.mark.parametrize("query", ["yaoshi", "yao", "shi", "ys", "YS", "Yao", "s"])
    def test_phrase_matches(self, engine, query):
        assert engine.matches("钥匙", query)

    @pytest.mark.parametrize("query", ["xyz", "yue", "chi", "yaoshix"])
    def test_phrase_non_matches(self, engine, query):
        assert not engine.matches("钥匙", query)

    def test_empty_arguments(self, engine):
        assert not engine.matches("", "ys")
        assert not engine.matches("钥匙", "")

    def test_initials_substring(self, engine):
        assert engine.matches("中国银行", "gyh")
        assert engine.matches("中国银行", "zhongguo")
        assert not engine.matches("中国银行", "zgx")

    def test_mixed_text_matches(self, engine):
        assert engine.matches("铁Sword", "tiesw")
        assert engine.matches("铁Sword", "TS")

    def test_variant_strategy_matches_every_reading(self, variant_engine):
        assert variant_engine.matches("长行", "zhanghang")
        assert variant_engine.matches("长行", "changxing")
        assert variant_engine.matches("长行", "zh")
        assert not variant_engine.matches("长行", "zhangx1")

    def test_phrase_strategy_does_not_use_alternate_readings(self, dictionary_file):
        with PinyinEngine(dictionary_path=dictionary_file) as eng:
            assert not eng.matches("银行", "yinxing")
            assert eng.matches("银行", "yinhang")


class TestFilterBySearchText:
    """測試 filter_by_search_text()"""

    def test_keeps_input_order(self, engine):
        names = ["土块", "钥匙", "Iron Key", "银行"]
        assert engine.filter_by_search_text(names, "y") == ["钥匙", "Iron Key", "银行"]
        assert engine.filter_by_search_text(names, "ys") == ["钥匙"]

    def test_plain_containment(self, engine):
        names = ["Iron Key", "金钥匙", "土块"]
        assert engine.filter_by_search_text(names, "key") == ["Iron Key"]
        assert engine.filter_by_search_text(names, "钥") == ["金钥匙"]

    def test_pinyin_and_plain_combined(self, engine):
        names = ["Yarn", "钥匙", "土块"]
        assert engine.filter_by_search_text(names, "ya") == ["Yarn", "钥匙"]

    def test_empty_query(self, engine):
        assert engine.filter_by_search_text(["钥匙"], "") == []

    def test_before_initialize_only_plain(self):
        eng = PinyinEngine(use_default_dictionary=False)
        assert eng.filter_by_search_text(["Iron Key", "钥匙"], "key") == ["Iron Key"]
        assert eng.filter_by_search_text(["Iron Key", "钥匙"], "ys") == []
