"""
事件模型（Event Model）

引擎對呼叫端保證「永不拋錯」，但降級不應是「默默」的：
除了寫入日誌，也可透過事件回呼（event handler）取得降級與錯誤資訊。

設計原則：
- 宿主穩定優先：允許降級，但不允許把例外傳回呼叫端。
- 可偵測性：每次降級都會產生一筆事件，方便監控或在測試中斷言。
"""

from __future__ import annotations

from typing import Callable, Literal, TypedDict


class MatchEvent(TypedDict, total=False):
    type: Literal["degraded", "error", "warning"]
    engine: str

    # pipeline / diagnostics
    stage: Literal[
        "dictionary_load",
        "segmentation",
        "pinyin",
        "initials",
        "variants",
        "matches",
        "warmup",
    ]
    text: str
    degrade_reason: str
    exception_type: str
    exception_message: str


MatchEventHandler = Callable[[MatchEvent], None]


def build_exception_event(
    event_type: str,
    stage: str,
    exc: BaseException,
    *,
    engine: str = "pinyin",
    text: str = "",
    degrade_reason: str = "",
) -> MatchEvent:
    """由例外建立事件（只保留型別與訊息，不攜帶 traceback 物件）"""
    event: MatchEvent = {
        "type": event_type,
        "engine": engine,
        "stage": stage,
        "exception_type": type(exc).__name__,
        "exception_message": str(exc),
    }
    if text:
        event["text"] = text
    if degrade_reason:
        event["degrade_reason"] = degrade_reason
    return event
