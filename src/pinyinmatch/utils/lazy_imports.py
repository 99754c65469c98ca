"""
依賴檢查與延遲導入

pypinyin 的字典載入成本不低，只在第一次真正需要基礎讀音表時才導入。
"""

import importlib.util

PYPINYIN_INSTALL_HINT = (
    "缺少拼音依賴 pypinyin。請執行:\n"
    "  pip install pinyinmatch\n"
    "或單獨安裝:\n"
    "  pip install pypinyin"
)


def is_pypinyin_available() -> bool:
    """檢查 pypinyin 是否可導入（不實際載入）"""
    return importlib.util.find_spec("pypinyin") is not None


def check_dependencies() -> None:
    """
    檢查執行期依賴

    Raises:
        ImportError: 缺少 pypinyin 時，附上安裝提示
    """
    if not is_pypinyin_available():
        raise ImportError(PYPINYIN_INSTALL_HINT)
