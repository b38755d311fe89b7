# prefix_codes/table.py
from __future__ import annotations
import copy
from collections import Counter
from typing import Dict, Hashable, Iterator, List, Sequence, Tuple

import numpy as np

from prefix_codes.errors import UnknownSymbol

__all__ = ["FrequencyTable", "CodeTable", "frequencies_from_text"]


class FrequencyTable:
    """
    按频率升序排列的 (symbol, weight) 只读视图，附带前缀和数组。

    - symbols / weights 均为输入的私有深拷贝，调用方之后修改原序列不影响本表；
    - cumulative[i] = weights[0] + ... + weights[i]；
    - 不做任何校验（由 validate.validate_alphabet 负责）；空输入得到空表。
    """

    def __init__(self, symbols: Sequence[Hashable], weights: Sequence[float]):
        syms = copy.deepcopy(list(symbols))
        w = np.array(weights, dtype=np.float64).reshape(-1)  # np.array 总是复制
        order = np.argsort(w, kind="stable")

        self._symbols: Tuple[Hashable, ...] = tuple(syms[i] for i in order)
        self._weights = w[order]
        self._cumulative = np.cumsum(self._weights)
        self._weights.setflags(write=False)
        self._cumulative.setflags(write=False)

    @property
    def symbols(self) -> Tuple[Hashable, ...]:
        return self._symbols

    @property
    def weights(self) -> np.ndarray:
        return self._weights

    @property
    def cumulative(self) -> np.ndarray:
        return self._cumulative

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[Tuple[Hashable, float]]:
        for sym, w in zip(self._symbols, self._weights):
            yield sym, float(w)

    def __repr__(self) -> str:
        pairs = ", ".join(f"{s!r}: {w:g}" for s, w in self)
        return f"FrequencyTable({{{pairs}}})"


class CodeTable:
    """构建结果：符号 -> 比特串（仅含 '0'/'1'），构建后不再修改。"""

    def __init__(self, codes: Dict[Hashable, str], method: str = ""):
        self._codes: Dict[Hashable, str] = dict(codes)
        self.method = method

    def get(self, symbol: Hashable) -> str:
        try:
            return self._codes[symbol]
        except KeyError:
            raise UnknownSymbol(symbol) from None

    __getitem__ = get

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._codes

    def __len__(self) -> int:
        return len(self._codes)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._codes)

    def items(self) -> List[Tuple[Hashable, str]]:
        return list(self._codes.items())

    def lengths(self) -> Dict[Hashable, int]:
        return {s: len(c) for s, c in self._codes.items()}

    def as_dict(self) -> Dict[Hashable, str]:
        return dict(self._codes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CodeTable):
            return NotImplemented
        return self._codes == other._codes

    def __repr__(self) -> str:
        return f"CodeTable(method={self.method!r}, codes={self._codes!r})"


def frequencies_from_text(text: str) -> Tuple[List[str], List[float]]:
    """
    统计文本中每个字符的出现频率（归一化到和为 1）。

    返回:
    - symbols: 按首次出现顺序排列的字符
    - weights: 对应的概率
    """
    counts = Counter(text)
    n = len(text)
    if n == 0:
        return [], []
    symbols = list(counts)
    weights = [counts[ch] / n for ch in symbols]
    return symbols, weights
