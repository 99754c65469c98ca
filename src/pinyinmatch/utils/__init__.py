"""
工具模組

提供 LRU 緩存、日誌、計時、依賴檢查等通用工具。
"""

from .cache import LRUCache
from .lazy_imports import (
    PYPINYIN_INSTALL_HINT,
    check_dependencies,
    is_pypinyin_available,
)
from .logger import (
    TimingContext,
    enable_debug_logging,
    enable_timing_logging,
    get_logger,
    log_timing,
    setup_logger,
)

__all__ = [
    # 緩存
    "LRUCache",

    # 日誌工具
    "get_logger",
    "setup_logger",
    "enable_debug_logging",
    "enable_timing_logging",
    "log_timing",
    "TimingContext",

    # 依賴檢查
    "is_pypinyin_available",
    "check_dependencies",
    "PYPINYIN_INSTALL_HINT",
]
