"""
pinyinmatch - 中文拼音搜尋比對引擎 (Chinese Pinyin Search Matcher)

核心概念：
- 把候選名稱轉成無調全拼與首字母（多音字以詞組字典或讀音組合處理）
- 使用者輸入的查詢只要是其中任一者的子字串即視為匹配
- 以 LRU 緩存讓「每次按鍵 × 每個候選」的重複查詢保持便宜
- 對宿主永不拋錯：失敗時降級並回傳空字串 / False

官方入口（穩定 API）：
- `pinyinmatch.PinyinEngine`
- `pinyinmatch.PinyinMatchConfig`
"""

# =============================================================================
# Engine 層（官方入口）
# =============================================================================
from pinyinmatch.chinese.engine import PinyinEngine
from pinyinmatch.config import PinyinMatchConfig

# =============================================================================
# 元件（進階用途）
# =============================================================================
from pinyinmatch.chinese.phrase_dict import PhraseEntry, PhrasePinyinDict
from pinyinmatch.chinese.segmenter import PhraseSegmenter
from pinyinmatch.chinese.variant_expander import HeteronymVariantExpander
from pinyinmatch.utils.cache import LRUCache

# =============================================================================
# 日誌與事件
# =============================================================================
from pinyinmatch.core.events import MatchEvent, MatchEventHandler
from pinyinmatch.utils.logger import enable_debug_logging, enable_timing_logging, get_logger

# =============================================================================
# 依賴檢查工具
# =============================================================================
from pinyinmatch.utils.lazy_imports import check_dependencies, is_pypinyin_available

__all__ = [
    # Engine
    "PinyinEngine",
    "PinyinMatchConfig",
    # Components (advanced)
    "PhrasePinyinDict",
    "PhraseEntry",
    "PhraseSegmenter",
    "HeteronymVariantExpander",
    "LRUCache",
    # Logging / events
    "get_logger",
    "enable_debug_logging",
    "enable_timing_logging",
    "MatchEvent",
    "MatchEventHandler",
    # Dependency checks
    "is_pypinyin_available",
    "check_dependencies",
]

__version__ = "0.1.0"
