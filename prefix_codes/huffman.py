# prefix_codes/huffman.py
from __future__ import annotations
import logging
from itertools import count
from typing import Dict, Hashable, List, Optional, Sequence, Tuple

from prefix_codes.heap import MinHeap
from prefix_codes.table import CodeTable, FrequencyTable
from prefix_codes.validate import validate_alphabet

__all__ = ["Node", "build_huffman_tree", "build_codes", "huffman_code"]

logger = logging.getLogger(__name__)


class Node:
    """
    前缀码树节点。叶子带 symbol；内部节点只有 weight（= 左右子树之和）。

    order 为创建序号：频率相同时先创建的节点更小，
    保证同一输入总是得到同一棵树。
    """
    __slots__ = ("weight", "symbol", "left", "right", "order")

    def __init__(self, weight, symbol=None, left=None, right=None, order=0):
        self.weight = weight
        self.symbol = symbol
        self.left = left
        self.right = right
        self.order = order

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __lt__(self, other: "Node") -> bool:
        if self.weight == other.weight:
            return self.order < other.order
        return self.weight < other.weight

    def __repr__(self) -> str:
        if self.is_leaf:
            return f"Node({self.weight:g}, {self.symbol!r})"
        return f"Node({self.weight:g}, left={self.left!r}, right={self.right!r})"


def build_huffman_tree(table: FrequencyTable) -> Optional[Node]:
    """
    构建 Huffman 编码树

    参数:
    - table: 按频率升序排列的频率表

    返回:
    - 树的根节点；空表返回 None，单符号时根就是该叶子
    """
    if len(table) == 0:
        return None

    seq = count()
    heap = MinHeap(capacity=len(table))
    for sym, w in table:
        heap.insert(Node(w, sym, order=next(seq)))

    merges = 0
    while heap.size() > 1:
        first = heap.extract_min()
        second = heap.extract_min()
        heap.insert(Node(first.weight + second.weight, None, first, second, order=next(seq)))
        merges += 1

    logger.debug("huffman: %d leaves, %d merges", len(table), merges)
    return heap.extract_min()


def build_codes(root: Optional[Node]) -> Dict[Hashable, str]:
    """
    构建符号到 Huffman 编码的映射表（字典）

    参数:
    - root: Huffman 树根节点

    返回:
    - codes: dict, 每个符号对应的二进制编码，如 {'a': '010', 'b': '11'}
    """
    codes: Dict[Hashable, str] = {}
    if root is None:
        return codes
    stack: List[Tuple[Node, str]] = [(root, "")]
    while stack:
        node, path = stack.pop()
        if node.is_leaf:
            codes[node.symbol] = path
        else:
            stack.append((node.right, path + "1"))
            stack.append((node.left, path + "0"))
    return codes


def huffman_code(symbols: Sequence[Hashable], weights: Sequence[float]) -> CodeTable:
    """校验输入 -> 排序建表 -> 建树 -> 遍历取码，返回 Huffman 码表。"""
    validate_alphabet(symbols, weights)
    table = FrequencyTable(symbols, weights)
    codes = build_codes(build_huffman_tree(table))
    return CodeTable(codes, method="huffman")
