"""
詞組拼音字典測試

驗證：
1. 行格式解析（註解、冒號、空白、聲調）
2. 重複詞組保留第一筆
3. 載入失敗時降級為空字典並發出事件
"""

from pinyinmatch.chinese.phrase_dict import PhrasePinyinDict, parse_phrase_line
from pinyinmatch.chinese.utils import ChinesePinyinUtils


class TestParsePhraseLine:
    """測試單行解析"""

    def setup_method(self):
        self.utils = ChinesePinyinUtils()

    def test_basic_line_strips_tones(self):
        entry = parse_phrase_line("钥匙: yào shi", self.utils)
        assert entry.phrase == "钥匙"
        assert entry.pinyin == "yaoshi"
        assert entry.pinyin_with_spaces == "yao shi"

    def test_umlaut_becomes_v(self):
        entry = parse_phrase_line("绿色: lǜ sè", self.utils)
        assert entry.pinyin == "lvse"
        assert entry.pinyin_with_spaces == "lv se"

    def test_uppercase_and_extra_spaces(self):
        """大寫轉小寫，連續空白壓成一個"""
        entry = parse_phrase_line("  银行 :   YÍN    HÁNG  ", self.utils)
        assert entry.phrase == "银行"
        assert entry.pinyin_with_spaces == "yin hang"

    def test_trailing_comment_removed(self):
        entry = parse_phrase_line("长大: zhǎng dà   # 動詞", self.utils)
        assert entry.pinyin_with_spaces == "zhang da"

    def test_skipped_lines(self):
        """空行、註解行、缺冒號、冒號任一側為空都略過"""
        for line in ["", "   ", "# 註解", "   # 縮排註解", "沒有冒號", ": abc", "abc:", "abc:   # 只有註解"]:
            assert parse_phrase_line(line, self.utils) is None, line


class TestPhrasePinyinDict:
    """測試字典載入與查詢"""

    def test_load_text_and_lookup(self):
        d = PhrasePinyinDict()
        added = d.load_text("钥匙: yào shi\n\n# 註解\n银行: yín háng\n")

        assert added == 2
        assert len(d) == 2
        assert d.is_loaded
        assert "钥匙" in d
        assert d.try_get_pinyin("银行") == "yinhang"
        assert d.try_get_pinyin_with_spaces("银行") == "yin hang"
        assert d.try_get_pinyin("不存在") is None
        assert d.try_get_pinyin_with_spaces("不存在") is None

    def test_duplicate_keeps_first(self):
        d = PhrasePinyinDict()
        d.load_text("长大: zhǎng dà\n长大: cháng dà\n")

        assert len(d) == 1
        assert d.try_get_pinyin("长大") == "zhangda"

    def test_second_load_is_noop(self):
        d = PhrasePinyinDict()
        d.load_text("钥匙: yào shi")
        assert d.load_text("银行: yín háng") == 0
        assert "银行" not in d

    def test_unload_resets(self):
        d = PhrasePinyinDict()
        d.load_text("钥匙: yào shi")
        d.unload()

        assert not d.is_loaded
        assert len(d) == 0
        assert d.try_get_pinyin("钥匙") is None

    def test_load_file(self, dictionary_file):
        d = PhrasePinyinDict()
        d.load_file(dictionary_file)

        assert d.try_get_pinyin("钥匙") == "yaoshi"
        assert d.try_get_pinyin("中国银行") == "zhongguoyinhang"

    def test_load_file_with_byte_order_mark(self, tmp_path):
        """UTF-8 BOM 不會黏在第一個詞組上"""
        path = tmp_path / "bom.txt"
        path.write_text("钥匙: yào shi\n银行: yín háng\n", encoding="utf-8-sig")

        d = PhrasePinyinDict()
        d.load_file(path)

        assert "钥匙" in d
        assert "\ufeff钥匙" not in d
        assert d.try_get_pinyin("钥匙") == "yaoshi"
        assert d.try_get_pinyin("银行") == "yinhang"

    def test_load_default_resource(self):
        """套件內建字典可載入且包含常見多音詞"""
        d = PhrasePinyinDict()
        d.load_default()

        assert len(d) > 0
        assert d.try_get_pinyin("钥匙") == "yaoshi"
        assert d.try_get_pinyin("银行") == "yinhang"
        assert d.try_get_pinyin("省略") == "shenglve"


class TestDictionaryDegradation:
    """測試載入失敗的降級行為"""

    def test_missing_file_degrades_to_empty(self, tmp_path, caplog):
        events = []
        d = PhrasePinyinDict(on_event=events.append)

        with caplog.at_level("WARNING", logger="pinyinmatch"):
            added = d.load_file(tmp_path / "missing.txt")

        assert added == 0
        assert d.is_loaded
        assert len(d) == 0
        assert any("降級模式" in r.getMessage() for r in caplog.records)

        assert len(events) == 1
        assert events[0]["type"] == "degraded"
        assert events[0]["stage"] == "dictionary_load"
        assert events[0]["degrade_reason"] == "resource_unavailable"

    def test_undecodable_file_degrades(self, tmp_path):
        path = tmp_path / "broken.txt"
        path.write_bytes(b"\xff\xfe\xfa\x00 not utf-8 \x80")
        events = []
        d = PhrasePinyinDict(on_event=events.append)

        assert d.load_file(path) == 0
        assert d.is_loaded
        assert len(d) == 0
        assert events and events[0]["type"] == "degraded"

    def test_raising_event_handler_is_swallowed(self, tmp_path):
        def handler(event):
            raise RuntimeError("boom")

        d = PhrasePinyinDict(on_event=handler)
        d.load_file(tmp_path / "missing.txt")

        assert d.is_loaded
