# prefix_codes/heap.py
from __future__ import annotations
import logging
from typing import Any, List

from prefix_codes.errors import EmptyStructure, InvalidArgument

__all__ = ["DEFAULT_CAPACITY", "MinHeap"]

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 50


class MinHeap:
    """
    基于数组的二叉最小堆（下标从 1 开始，0 号槽位不用）。

    元素只通过 `<` 比较，要求元素之间满足全序；相等元素的先后
    由其在数组中的位置决定，对固定的操作序列是确定的。

    容量策略：
    - 插入时数组已满 → 容量翻倍；
    - 删除后 size * 4 < capacity 且减半后不低于初始容量 → 容量减半。
    每次操作的扩缩容均摊代价为 O(1)。
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 1:
            raise InvalidArgument("Capacity can't be less than 1.")
        self._floor = capacity
        self._pq: List[Any] = [None] * (capacity + 1)
        self._size = 0

    # ---------- 查询 ----------
    @property
    def capacity(self) -> int:
        """当前可用槽位数（不含 0 号槽位）。"""
        return len(self._pq) - 1

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def peek(self) -> Any:
        """返回最小元素但不删除；堆为空时抛 EmptyStructure。"""
        if self.is_empty():
            raise EmptyStructure("peek from an empty heap")
        return self._pq[1]

    # ---------- 修改 ----------
    def insert(self, item: Any) -> None:
        """追加到末尾后上浮。"""
        if self._size == self.capacity:
            self._resize(2 * self.capacity)
        self._size += 1
        self._pq[self._size] = item
        self._swim(self._size)

    def extract_min(self) -> Any:
        """
        删除并返回最小元素：根与末尾交换，缩小逻辑长度，再下沉。
        堆为空时抛 EmptyStructure。
        """
        if self.is_empty():
            raise EmptyStructure("extract_min from an empty heap")
        smallest = self._pq[1]
        self._exchange(1, self._size)
        self._pq[self._size] = None  # 释放引用
        self._size -= 1
        self._sink(1)
        if self._size * 4 < self.capacity and self.capacity // 2 >= self._floor:
            self._resize(self.capacity // 2)
        return smallest

    # ---------- 内部 ----------
    def _swim(self, k: int) -> None:
        while k > 1 and self._greater(k // 2, k):
            self._exchange(k, k // 2)
            k //= 2

    def _sink(self, k: int) -> None:
        while 2 * k <= self._size:
            j = 2 * k
            if j < self._size and self._greater(j, j + 1):
                j += 1
            if not self._greater(k, j):
                break
            self._exchange(k, j)
            k = j

    def _greater(self, i: int, j: int) -> bool:
        return self._pq[j] < self._pq[i]

    def _exchange(self, i: int, j: int) -> None:
        self._pq[i], self._pq[j] = self._pq[j], self._pq[i]

    def _resize(self, capacity: int) -> None:
        logger.debug("heap resize %d -> %d (size=%d)", self.capacity, capacity, self._size)
        pq: List[Any] = [None] * (capacity + 1)
        pq[1:self._size + 1] = self._pq[1:self._size + 1]
        self._pq = pq
