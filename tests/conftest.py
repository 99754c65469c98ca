"""
共用測試夾具
"""

import pytest

from pinyinmatch import PinyinEngine


SAMPLE_DICTIONARY = """\
# 測試用詞組字典
钥匙: yào shi
银行: yín háng   # 行 讀 háng
中国: zhōng guó
中国银行: zhōng guó yín háng
绿色: lǜ sè
"""


@pytest.fixture
def dictionary_file(tmp_path):
    path = tmp_path / "phrase_pinyin.txt"
    path.write_text(SAMPLE_DICTIONARY, encoding="utf-8")
    return path


@pytest.fixture
def events():
    """收集引擎事件的 list（搭配 on_event=events.append）"""
    return []


@pytest.fixture
def engine(dictionary_file, events):
    """使用測試字典的詞組策略引擎"""
    eng = PinyinEngine(dictionary_path=dictionary_file, on_event=events.append)
    eng.initialize()
    yield eng
    eng.teardown()


@pytest.fixture
def variant_engine(events):
    """多音字讀音組合展開策略引擎"""
    eng = PinyinEngine(strategy="variant", on_event=events.append)
    eng.initialize()
    yield eng
    eng.teardown()
