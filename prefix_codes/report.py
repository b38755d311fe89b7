# prefix_codes/report.py
from __future__ import annotations
from typing import Dict, Hashable, List, Sequence

from prefix_codes.table import CodeTable

__all__ = ["format_code_table", "format_summary"]


def format_code_table(table: CodeTable, symbols: Sequence[Hashable]) -> List[str]:
    """按调用方给出的字母表顺序输出 "symbol : code" 行。"""
    return [f"{s} : {table[s]}" for s in symbols]


def format_summary(stats: Dict[str, float]) -> List[str]:
    """把 entropy.compare_codes 的结果整理成可打印的几行。"""
    H = stats["entropy"]
    return [
        f"{'entropy':<14}: {H:.4f} bits/symbol",
        f"{'shannon-fano':<14}: {stats['shannon_fano']:.4f}  ({stats['shannon_fano_redundancy']:+.4f})",
        f"{'huffman':<14}: {stats['huffman']:.4f}  ({stats['huffman_redundancy']:+.4f})",
    ]
