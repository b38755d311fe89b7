# prefix_codes/shannon_fano.py
from __future__ import annotations
import logging
from typing import Dict, Hashable, List, Sequence, Tuple

import numpy as np

from prefix_codes.table import CodeTable, FrequencyTable
from prefix_codes.validate import validate_alphabet

__all__ = ["SPLIT_TOLERANCE", "find_split", "shannon_fano_codes", "shannon_fano_code"]

logger = logging.getLogger(__name__)

# 两侧距离之差不超过 SPLIT_TOLERANCE * 区间总和时视为相等
SPLIT_TOLERANCE = 1e-12


def find_split(cumulative: np.ndarray, left: int, right: int) -> int:
    """
    在区间 [left, right)（至少 2 个符号）中找分割点 m，left <= m < right-1，
    使左半 [left, m] 的频率和最接近区间总和的一半。

    用前缀和做二分查找：
    - hi: 第一个左半和 >= 一半的分割点；
    - lo: hi 的前一个（左半和 < 一半）。
    只有 hi 更接近（超出舍入误差范围）时才取 hi，距离相同时取不越过一半的 lo；
    若多个分割点的左半和相同（0 频率符号），取其中第一个。
    """
    base = cumulative[left - 1] if left > 0 else 0.0
    total = cumulative[right - 1] - base
    target = base + 0.5 * total
    candidates = cumulative[left:right - 1]

    hi = left + int(np.searchsorted(candidates, target, side="left"))
    lo = hi - 1
    if hi < right - 1:
        if lo < left:
            return hi
        d_hi = cumulative[hi] - target
        d_lo = target - cumulative[lo]
        if d_hi < d_lo - SPLIT_TOLERANCE * total:
            return hi
    return left + int(np.searchsorted(candidates, cumulative[lo], side="left"))


def shannon_fano_codes(table: FrequencyTable) -> Dict[Hashable, str]:
    """
    Shannon-Fano 编码：递归地把有序表按频率对半切分，左 '0' 右 '1'。

    用显式栈代替递归，避免偏斜分布下超出递归深度。
    单符号字母表得到空串；空表得到空字典。
    """
    codes: Dict[Hashable, str] = {}
    n = len(table)
    if n == 0:
        return codes

    symbols = table.symbols
    cumulative = table.cumulative
    stack: List[Tuple[int, int, str]] = [(0, n, "")]
    while stack:
        left, right, path = stack.pop()
        if left + 1 == right:
            codes[symbols[left]] = path
            continue
        m = find_split(cumulative, left, right)
        stack.append((m + 1, right, path + "1"))
        stack.append((left, m + 1, path + "0"))
    return codes


def shannon_fano_code(symbols: Sequence[Hashable], weights: Sequence[float]) -> CodeTable:
    """校验输入 -> 排序建表 -> 切分，返回 Shannon-Fano 码表。"""
    validate_alphabet(symbols, weights)
    table = FrequencyTable(symbols, weights)
    codes = shannon_fano_codes(table)
    logger.debug("shannon-fano: %d symbols, max code length %d",
                 len(codes), max((len(c) for c in codes.values()), default=0))
    return CodeTable(codes, method="shannon-fano")
