"""
詞組拼音字典

載入並查詢詞組的正確拼音，用於解決多音字問題
（如「钥匙」讀作 yào shi 而不是 yuè chí）。

資料格式（UTF-8，每行一筆）:
    钥匙: yào shi      # 行尾註解
    # 整行註解

載入失敗時不拋錯：字典初始化為空並記錄警告，
引擎會自動退化為逐字轉寫（多音字可能不準，但基本功能仍可用）。
"""

from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional, Union

from pinyinmatch.core.events import MatchEventHandler, build_exception_event
from pinyinmatch.utils.logger import get_logger, log_timing

from .utils import ChinesePinyinUtils

DEFAULT_RESOURCE_PACKAGE = "pinyinmatch"
DEFAULT_RESOURCE_NAME = "data/phrase_pinyin.txt"


@dataclass(frozen=True)
class PhraseEntry:
    """
    詞組拼音項目

    Attributes:
        phrase: 詞組（如 "钥匙"）
        pinyin: 無調、無分隔的拼音（如 "yaoshi"）
        pinyin_with_spaces: 無調、單一空格分隔的拼音（如 "yao shi"）
    """

    phrase: str
    pinyin: str
    pinyin_with_spaces: str


def read_resource(path: Union[str, Path]) -> Optional[str]:
    """
    以 UTF-8 讀取磁碟上的字典檔（開頭的 BOM 會被略過）

    Returns:
        檔案內容；檔案不存在、無法讀取或解碼失敗時回傳 None（並記錄警告）
    """
    logger = get_logger("dictionary")
    try:
        return Path(path).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"詞組拼音字典讀取失敗: {path} ({type(e).__name__}: {e})")
        return None


def read_default_resource() -> Optional[str]:
    """讀取套件內建的詞組拼音字典"""
    logger = get_logger("dictionary")
    try:
        return (
            resources.files(DEFAULT_RESOURCE_PACKAGE)
            .joinpath(DEFAULT_RESOURCE_NAME)
            .read_text(encoding="utf-8-sig")
        )
    except (OSError, UnicodeDecodeError, ModuleNotFoundError) as e:
        logger.warning(f"內建詞組拼音字典讀取失敗: {DEFAULT_RESOURCE_NAME} ({type(e).__name__}: {e})")
        return None


def parse_phrase_line(line: str, utils: ChinesePinyinUtils) -> Optional[PhraseEntry]:
    """
    解析單行 "词组: 拼音"

    Returns:
        PhraseEntry；空行、註解行或格式不符時回傳 None
    """
    if not line.strip() or line.lstrip().startswith("#"):
        return None

    # 移除行尾註解（首字元之後的 #）
    comment_index = line.find("#")
    if comment_index > 0:
        line = line[:comment_index]

    phrase, sep, raw_pinyin = line.partition(":")
    if not sep:
        return None

    phrase = phrase.strip()
    raw_pinyin = raw_pinyin.strip()
    if not phrase or not raw_pinyin:
        return None

    pinyin_with_spaces = utils.collapse_spaces(utils.strip_tones(raw_pinyin))
    if not pinyin_with_spaces:
        return None

    return PhraseEntry(
        phrase=phrase,
        pinyin=pinyin_with_spaces.replace(" ", ""),
        pinyin_with_spaces=pinyin_with_spaces,
    )


def iter_phrase_entries(
    lines: Iterable[str], utils: Optional[ChinesePinyinUtils] = None
) -> Iterator[PhraseEntry]:
    """逐行解析，略過無效行"""
    utils = utils or ChinesePinyinUtils()
    logger = get_logger("dictionary")

    for line_no, line in enumerate(lines, start=1):
        entry = parse_phrase_line(line, utils)
        if entry is None:
            stripped = line.strip()
            if stripped and not stripped.startswith("#"):
                logger.debug(f"略過無效行 {line_no}: {stripped!r}")
            continue
        yield entry


class PhrasePinyinDict:
    """
    詞組拼音字典

    功能:
    - 由文本、檔案或套件內建資源載入詞組拼音
    - 以詞組原文精確查詢無分隔 / 空格分隔兩種拼音
    - 同一詞組重複出現時保留第一筆

    載入後唯讀；unload() 會清空並回到未載入狀態。

    範例:
        >>> d = PhrasePinyinDict()
        >>> d.load_text("钥匙: yào shi")
        >>> d.try_get_pinyin("钥匙")
        'yaoshi'
        >>> d.try_get_pinyin_with_spaces("钥匙")
        'yao shi'
    """

    def __init__(
        self,
        utils: Optional[ChinesePinyinUtils] = None,
        on_event: Optional[MatchEventHandler] = None,
    ):
        self.utils = utils or ChinesePinyinUtils()
        self._on_event = on_event
        self._logger = get_logger("dictionary")
        self._entries: Dict[str, PhraseEntry] = {}
        self._is_loaded = False

    # ========== 載入 ==========

    @log_timing("PhrasePinyinDict.load_lines")
    def load_lines(self, lines: Iterable[str]) -> int:
        """
        解析已解碼的行

        Returns:
            int: 新增的詞組數量（已載入時不做任何事，回傳 0）
        """
        if self._is_loaded:
            return 0

        added = 0
        for entry in iter_phrase_entries(lines, self.utils):
            if entry.phrase in self._entries:
                continue
            self._entries[entry.phrase] = entry
            added += 1

        self._is_loaded = True
        self._logger.info(f"詞組拼音字典載入完成，共 {len(self._entries)} 個詞組")
        return added

    def load_text(self, text: str) -> int:
        return self.load_lines(text.splitlines())

    def load_file(self, path: Union[str, Path]) -> int:
        """從磁碟載入；失敗時退化為空字典"""
        if self._is_loaded:
            return 0
        return self._load_or_degrade(read_resource(path), source=str(path))

    def load_default(self) -> int:
        """載入套件內建字典；失敗時退化為空字典"""
        if self._is_loaded:
            return 0
        return self._load_or_degrade(read_default_resource(), source=DEFAULT_RESOURCE_NAME)

    def load_empty(self) -> None:
        """不載入任何詞組，直接標記為已載入"""
        if not self._is_loaded:
            self._is_loaded = True

    def _load_or_degrade(self, content: Optional[str], source: str) -> int:
        if content is None:
            self._degrade(source, reason="resource_unavailable")
            return 0

        try:
            return self.load_text(content)
        except Exception as e:
            self._entries.clear()
            self._logger.debug("詞組拼音字典解析失敗", exc_info=True)
            self._degrade(source, reason="parse_failed", exc=e)
            return 0

    def _degrade(self, source: str, reason: str, exc: Optional[BaseException] = None) -> None:
        self._logger.warning(f"詞組拼音字典載入失敗: {source}")
        self._logger.warning("將使用降級模式：僅使用逐字讀音表進行拼音轉換，多音字可能無法正確識別")
        self._is_loaded = True

        if self._on_event is None:
            return
        if exc is not None:
            event = build_exception_event(
                "degraded", "dictionary_load", exc, text=source, degrade_reason=reason
            )
        else:
            event = {
                "type": "degraded",
                "engine": "pinyin",
                "stage": "dictionary_load",
                "text": source,
                "degrade_reason": reason,
            }
        try:
            self._on_event(event)
        except Exception:
            self._logger.exception("on_event 回呼執行失敗")

    def unload(self) -> None:
        """清空字典並回到未載入狀態"""
        self._entries.clear()
        self._is_loaded = False

    # ========== 查詢 ==========

    def get_entry(self, phrase: str) -> Optional[PhraseEntry]:
        return self._entries.get(phrase)

    def try_get_pinyin(self, phrase: str) -> Optional[str]:
        """查詢詞組拼音（無音調，無空格）"""
        entry = self._entries.get(phrase)
        return entry.pinyin if entry is not None else None

    def try_get_pinyin_with_spaces(self, phrase: str) -> Optional[str]:
        """查詢詞組拼音（無音調，空格分隔）"""
        entry = self._entries.get(phrase)
        return entry.pinyin_with_spaces if entry is not None else None

    @property
    def is_loaded(self) -> bool:
        return self._is_loaded

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, phrase: object) -> bool:
        return phrase in self._entries
