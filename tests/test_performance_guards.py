"""
效能護欄測試

以呼叫次數（而非計時）確認：
1. 緩存命中時不重新計算
2. 無多音字的文本不進入組合展開
3. 分詞的字典查詢次數有上界
4. 緩存容量受限
"""

from pinyinmatch import PinyinEngine


class CallCounter:
    def __init__(self, func):
        self.func = func
        self.calls = 0

    def __call__(self, *args, **kwargs):
        self.calls += 1
        return self.func(*args, **kwargs)


class TestCacheGuards:
    """測試緩存命中"""

    def test_repeated_pinyin_computed_once(self, engine, monkeypatch):
        counter = CallCounter(engine.strategy.full_pinyin)
        monkeypatch.setattr(engine.strategy, "full_pinyin", counter)

        for _ in range(100):
            assert engine.pinyin("金钥匙") == "jinyaoshi"

        assert counter.calls == 1

    def test_keystroke_loop_after_warmup_skips_segmentation(self, engine, monkeypatch):
        """預熱後，逐鍵比對只讀緩存"""
        names = ["钥匙", "银行", "土块", "中国银行卡"]
        engine.warmup(names)

        segmenter = engine.strategy.segmenter
        counter = CallCounter(segmenter.tokenize)
        monkeypatch.setattr(segmenter, "tokenize", counter)

        for query in ["y", "ya", "yao", "yaos", "ys"]:
            matched = [name for name in names if engine.matches(name, query)]
            assert "钥匙" in matched

        assert counter.calls == 0

    def test_cache_capacity_bounds_size(self, dictionary_file):
        with PinyinEngine(dictionary_path=dictionary_file, cache_capacity=2) as eng:
            eng.warmup(["钥匙", "银行", "土块", "中国"])
            stats = eng.get_cache_stats()

        assert stats["pinyin"]["size"] == 2
        assert stats["initials"]["size"] == 2


class TestVariantGuards:
    """測試組合展開的預掃描"""

    def test_plain_text_never_expands(self, variant_engine, monkeypatch):
        expander = variant_engine.strategy.expander
        counter = CallCounter(expander.reading_set)
        monkeypatch.setattr(expander, "reading_set", counter)

        assert not variant_engine.matches("土块", "zzz")
        assert variant_engine.variants("土块") == ["tukuai"]

        assert counter.calls == 0

    def test_variants_cached(self, variant_engine, monkeypatch):
        expander = variant_engine.strategy.expander
        counter = CallCounter(expander.expand_syllables)
        monkeypatch.setattr(expander, "expand_syllables", counter)

        for _ in range(20):
            variant_engine.matches("长行", "zzz")

        assert counter.calls == 1


class TestSegmentationGuards:
    """測試分詞查詢次數"""

    def test_lookups_bounded_by_window(self, engine, monkeypatch):
        dictionary = engine.dictionary
        counter = CallCounter(dictionary.get_entry)
        monkeypatch.setattr(dictionary, "get_entry", counter)

        text = "土块" * 50
        engine.strategy.segmenter.segment(text)

        max_len = engine.config.max_phrase_length
        assert counter.calls <= len(text) * (max_len - 1)
