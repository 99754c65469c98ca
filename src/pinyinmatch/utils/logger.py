"""
日誌與計時工具

函式庫預設不輸出任何日誌（package logger 掛 NullHandler），
使用者可透過標準 logging 或 `enable_debug_logging()` 開啟。

使用方式:
    from pinyinmatch.utils.logger import get_logger, TimingContext

    logger = get_logger("engine")
    with TimingContext("warmup", logger=logger):
        ...
"""

from __future__ import annotations

import logging
import time
from functools import wraps
from typing import Callable, Optional

ROOT_LOGGER_NAME = "pinyinmatch"
DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())

_handler: Optional[logging.Handler] = None


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    取得 pinyinmatch 命名空間下的 logger

    Args:
        name: 子模組名稱（如 "engine"、"dictionary"），None 表示根 logger

    Returns:
        logging.Logger: 名稱為 "pinyinmatch.<name>" 的 logger
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(level: int = logging.INFO, fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """
    為根 logger 安裝一個 StreamHandler（重複呼叫只會調整等級）

    Args:
        level: 日誌等級
        fmt: 日誌格式

    Returns:
        logging.Logger: 根 logger
    """
    global _handler

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(_handler)
    _handler.setLevel(level)
    return logger


def enable_debug_logging() -> logging.Logger:
    """開啟 DEBUG 等級日誌（包含降級細節與 traceback）"""
    return setup_logger(level=logging.DEBUG)


def enable_timing_logging() -> logging.Logger:
    """只開啟計時相關日誌"""
    setup_logger(level=logging.DEBUG)
    timing_logger = get_logger("timing")
    timing_logger.setLevel(logging.DEBUG)
    return timing_logger


class TimingContext:
    """
    計時上下文管理器

    離開區塊時以指定等級記錄耗時，並呼叫可選的回呼函數。

    範例:
        >>> with TimingContext("initialize", logger=logger) as t:
        ...     engine.initialize()
        >>> t.elapsed
        0.0123
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        callback: Optional[Callable[[str, float], None]] = None,
    ):
        self.operation = operation
        self.logger = logger or get_logger("timing")
        self.level = level
        self.callback = callback
        self.elapsed = 0.0
        self._start = 0.0

    def __enter__(self) -> "TimingContext":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.elapsed = time.perf_counter() - self._start
        self.logger.log(self.level, f"[Timing] {self.operation}: {self.elapsed * 1000:.2f} ms")

        if self.callback is not None:
            try:
                self.callback(self.operation, self.elapsed)
            except Exception:
                self.logger.exception("on_timing 回呼執行失敗")
        return False


def log_timing(operation: Optional[str] = None, level: int = logging.DEBUG):
    """
    計時裝飾器

    Args:
        operation: 記錄名稱，預設為函數的 qualname
        level: 日誌等級
    """

    def decorator(func: Callable) -> Callable:
        name = operation or func.__qualname__

        @wraps(func)
        def wrapper(*args, **kwargs):
            with TimingContext(name, level=level):
                return func(*args, **kwargs)

        return wrapper

    return decorator
