# prefix_codes/validate.py
from __future__ import annotations
from typing import Hashable, Sequence

import numpy as np

from prefix_codes.errors import InvalidInput

__all__ = ["SUM_TOLERANCE", "validate_alphabet"]

SUM_TOLERANCE = 1e-5


def validate_alphabet(
    symbols: Sequence[Hashable],
    weights: Sequence[float],
    tolerance: float = SUM_TOLERANCE,
) -> None:
    """
    检查字母表与频率是否可用于构建前缀码，不合法时抛 InvalidInput。

    依次检查：
      1. 两个序列长度一致；
      2. 符号互不相同；
      3. 频率非负；
      4. |sum(weights) - 1| <= tolerance（空字母表跳过此项）。
    只做检查，不复制、不排序。
    """
    if len(symbols) != len(weights):
        raise InvalidInput("Array sizes do not match.")

    if len(set(symbols)) != len(symbols):
        raise InvalidInput("Not all symbols are distinct.")

    try:
        w = np.asarray(weights, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidInput("Frequencies must be real numbers.") from exc
    if not np.all(np.isfinite(w)):
        raise InvalidInput("Frequencies must be finite.")
    if np.any(w < 0):
        raise InvalidInput("Negative frequencies.")

    if w.size and abs(float(w.sum()) - 1.0) > tolerance:
        raise InvalidInput("Sum of frequencies is not equal to 1.")
