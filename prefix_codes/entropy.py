# prefix_codes/entropy.py
from __future__ import annotations
from typing import Dict, Hashable, Mapping, Sequence, Union

import numpy as np

from prefix_codes.huffman import huffman_code
from prefix_codes.shannon_fano import shannon_fano_code
from prefix_codes.table import CodeTable

__all__ = [
    "calculate_entropy",
    "average_code_length",
    "kraft_sum",
    "is_prefix_free",
    "compare_codes",
]

Codes = Union[CodeTable, Mapping[Hashable, str]]


def _code_lengths(codes: Codes) -> np.ndarray:
    items = codes.items()
    return np.array([len(c) for _, c in items], dtype=np.int64)


def calculate_entropy(weights: Sequence[float]) -> float:
    """
    计算分布的 Shannon entropy（bits per symbol）。
    仅对 p>0 的项求和，避免 log2(0)；空分布返回 0.0。
    """
    p = np.asarray(weights, dtype=np.float64)
    m = p > 0
    if not np.any(m):
        return 0.0
    H = -np.sum(p[m] * np.log2(p[m]))
    return float(H)


def average_code_length(codes: Codes, symbols: Sequence[Hashable], weights: Sequence[float]) -> float:
    """加权平均码长 sum_i w_i * len(code_i)。"""
    if len(symbols) == 0:
        return 0.0
    lengths = np.array([len(codes[s]) for s in symbols], dtype=np.float64)
    return float(np.dot(np.asarray(weights, dtype=np.float64), lengths))


def kraft_sum(codes: Codes) -> float:
    """
    Kraft 和：sum 2^(-len(code))。
    前缀码必有 <= 1；完备码（如二进分布下的最优码）等于 1。
    """
    lengths = _code_lengths(codes)
    if lengths.size == 0:
        return 0.0
    return float(np.sum(np.exp2(-lengths.astype(np.float64))))


def is_prefix_free(codes: Codes) -> bool:
    """
    判断码字集合是否无前缀（没有一个码字是另一个的前缀，且互不相同）。
    字典序排序后，若存在前缀关系则必出现在相邻两项之间。
    """
    words = sorted(c for _, c in codes.items())
    return all(not b.startswith(a) for a, b in zip(words, words[1:]))


def compare_codes(symbols: Sequence[Hashable], weights: Sequence[float]) -> Dict[str, float]:
    """
    对同一输入分别构建 Shannon-Fano 与 Huffman 码，返回
    {entropy, shannon_fano, huffman, shannon_fano_redundancy, huffman_redundancy}。
    - redundancy = 平均码长 - entropy
    """
    H = calculate_entropy(weights)
    sf = average_code_length(shannon_fano_code(symbols, weights), symbols, weights)
    hf = average_code_length(huffman_code(symbols, weights), symbols, weights)
    return {
        "entropy": H,
        "shannon_fano": sf,
        "huffman": hf,
        "shannon_fano_redundancy": sf - H,
        "huffman_redundancy": hf - H,
    }
