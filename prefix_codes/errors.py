# prefix_codes/errors.py
from __future__ import annotations

__all__ = [
    "PrefixCodeError",
    "InvalidInput",
    "InvalidArgument",
    "EmptyStructure",
    "UnknownSymbol",
]


class PrefixCodeError(Exception):
    """本包所有异常的公共基类。"""


class InvalidInput(PrefixCodeError, ValueError):
    """符号/频率数据不合法（长度不一致、符号重复、负频率、总和不为 1）。"""


class InvalidArgument(PrefixCodeError, ValueError):
    """结构参数误用，例如堆容量 < 1。"""


class EmptyStructure(PrefixCodeError, IndexError):
    """对空堆调用 peek / extract_min。"""


class UnknownSymbol(PrefixCodeError, KeyError):
    """查询的符号不在构建码表所用的字母表中。"""
