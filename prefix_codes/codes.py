# prefix_codes/codes.py
from __future__ import annotations
from typing import Callable, Dict, Hashable, Sequence

from prefix_codes.errors import InvalidArgument
from prefix_codes.huffman import huffman_code
from prefix_codes.shannon_fano import shannon_fano_code
from prefix_codes.table import CodeTable

__all__ = ["DEFAULT_METHOD", "METHODS", "build"]

DEFAULT_METHOD = "huffman"

METHODS: Dict[str, Callable[[Sequence[Hashable], Sequence[float]], CodeTable]] = {
    "huffman": huffman_code,
    "shannon-fano": shannon_fano_code,
}


def build(
    symbols: Sequence[Hashable],
    weights: Sequence[float],
    method: str = DEFAULT_METHOD,
) -> CodeTable:
    """
    按指定方法构建前缀码表。
    - method: "huffman"（默认）或 "shannon-fano"
    输入不合法时抛 InvalidInput，不会返回半成品。
    """
    try:
        builder = METHODS[method]
    except KeyError:
        raise InvalidArgument(f"unknown method {method!r}; expected one of {sorted(METHODS)}") from None
    return builder(symbols, weights)
