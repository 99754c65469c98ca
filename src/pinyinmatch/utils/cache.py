"""
LRU 緩存

每次按鍵都會對每個候選名稱呼叫一次拼音轉換，
以固定容量的 LRU 緩存限制記憶體並讓重複查詢保持 O(1)。

用法：
    from pinyinmatch.utils.cache import LRUCache

    cache = LRUCache(capacity=5000)
    cache.set("钥匙", "yaoshi")
    cache.get("钥匙")   # -> "yaoshi"

注意：未加鎖，僅供單一呼叫執行緒使用。
"""

from collections import OrderedDict
from typing import Any, Dict, Generic, Hashable, List, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class LRUCache(Generic[K, V]):
    """
    固定容量、最近最少使用 (LRU) 淘汰的 key→value 緩存

    - get 命中時將 key 提升為最近使用
    - set 已存在的 key 會原地更新並提升；新 key 超出容量時淘汰一個最久未用的項目
    - 所有操作皆為 O(1)

    範例：
        >>> cache = LRUCache(2)
        >>> cache.set("a", 1); cache.set("b", 2)
        >>> cache.get("a")
        1
        >>> cache.set("c", 3)   # 淘汰 "b"
        >>> "b" in cache
        False
    """

    def __init__(self, capacity: int):
        if capacity <= 0:
            raise ValueError(f"LRUCache capacity must be positive, got {capacity}")

        self._capacity = capacity
        # 順序即新舊：開頭最久未用，結尾最近使用
        self._data: "OrderedDict[K, V]" = OrderedDict()
        self.hits = 0
        self.misses = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, key: K) -> Optional[V]:
        """
        取得緩存值

        Returns:
            命中時回傳值，否則 None
        """
        try:
            value = self._data[key]
        except KeyError:
            self.misses += 1
            return None

        self._data.move_to_end(key)
        self.hits += 1
        return value

    def set(self, key: K, value: V) -> None:
        """新增或更新緩存項目"""
        if key in self._data:
            self._data[key] = value
            self._data.move_to_end(key)
            return

        self._data[key] = value
        if len(self._data) > self._capacity:
            self._data.popitem(last=False)

    def clear(self) -> None:
        """清空所有項目（統計一併歸零）"""
        self._data.clear()
        self.reset_stats()

    def reset_stats(self) -> None:
        """只重置命中統計，不清除緩存內容"""
        self.hits = 0
        self.misses = 0

    def keys(self) -> List[K]:
        """由最久未用到最近使用的 key 列表"""
        return list(self._data.keys())

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0

    def get_stats(self) -> Dict[str, Any]:
        """
        獲取緩存統計信息

        Returns:
            Dict: hits, misses, hit_rate (0.0-1.0), size, maxsize
        """
        return {
            "hits": self.hits,
            "misses": self.misses,
            "hit_rate": self.hit_rate,
            "size": len(self._data),
            "maxsize": self._capacity,
        }

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        # 不影響新舊順序
        return key in self._data

    def __repr__(self) -> str:
        return f"LRUCache(size={len(self._data)}, capacity={self._capacity})"
