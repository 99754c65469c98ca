"""
中文拼音模組

將中文（或中英混合）文字轉為無調拼音與首字母，
並以詞組字典或多音字讀音組合處理多音字，供拼音搜尋比對使用。

主要類別:
- PinyinEngine: 轉寫與比對引擎（宿主的入口）
- PhrasePinyinDict: 詞組拼音字典
- PhraseSegmenter: 最長匹配分詞器
- HeteronymVariantExpander: 多音字讀音組合展開器
- PinyinSearchMatcher: 拼音搜尋比對器
- ChinesePinyinConfig: 拼音配置類別
- ChinesePinyinUtils: 拼音工具函數類別
"""

from __future__ import annotations

import importlib
from typing import Any

_LAZY_IMPORTS = {
    "PinyinEngine": (".engine", "PinyinEngine"),
    "PhrasePinyinDict": (".phrase_dict", "PhrasePinyinDict"),
    "PhraseEntry": (".phrase_dict", "PhraseEntry"),
    "PhraseSegmenter": (".segmenter", "PhraseSegmenter"),
    "HeteronymVariantExpander": (".variant_expander", "HeteronymVariantExpander"),
    "PinyinSearchMatcher": (".matcher", "PinyinSearchMatcher"),
    "PhraseDictionaryStrategy": (".strategies", "PhraseDictionaryStrategy"),
    "HeteronymVariantStrategy": (".strategies", "HeteronymVariantStrategy"),
    "ChinesePinyinConfig": (".config", "ChinesePinyinConfig"),
    "ChinesePinyinUtils": (".utils", "ChinesePinyinUtils"),
}

__all__ = list(_LAZY_IMPORTS.keys())


def __getattr__(name: str) -> Any:
    if name not in _LAZY_IMPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    module_path, attr_name = _LAZY_IMPORTS[name]
    module = importlib.import_module(module_path, __name__)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value


def __dir__() -> list[str]:
    return sorted(set(list(globals().keys()) + list(_LAZY_IMPORTS.keys())))
