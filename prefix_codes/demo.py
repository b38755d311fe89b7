#!/usr/bin/env python3
"""
prefix_codes/demo.py

对给定字母表与概率分别构建 Shannon-Fano 码和 Huffman 码并打印：
    symbol : code
以及熵、两种码的平均码长与冗余度。

用法:
    python -m prefix_codes.demo                          # 运行内置示例
    python -m prefix_codes.demo -s a b c -w 0.5 0.25 0.25
    python -m prefix_codes.demo --text "abracadabra"     # 用文本字符频率
"""
from __future__ import annotations
import argparse
import logging
import sys
from typing import Hashable, List, Optional, Sequence, Tuple

from prefix_codes.entropy import compare_codes
from prefix_codes.errors import InvalidInput
from prefix_codes.huffman import huffman_code
from prefix_codes.report import format_code_table, format_summary
from prefix_codes.shannon_fano import shannon_fano_code
from prefix_codes.table import frequencies_from_text

logger = logging.getLogger(__name__)

EXAMPLES: List[Tuple[str, List[float]]] = [
    ("abcd", [0.125, 0.125, 0.25, 0.5]),
    ("abcde", [0.2, 0.1, 0.3, 0.25, 0.15]),
    ("abcde", [0.38461538, 0.17948718, 0.15384616, 0.15384614, 0.12820513]),
    ("56172", [0.3, 0.25, 0.2, 0.15, 0.1]),
    ("abcdefghij", [0.00693, 0.134712, 0.153271, 0.173098, 0.112272,
                    0.067446, 0.111512, 0.037859, 0.099983, 0.102918]),
]


def print_prefix_codes(symbols: Sequence[Hashable], weights: Sequence[float]) -> None:
    """打印一组输入的两种前缀码与统计信息；输入不合法时抛 InvalidInput。"""
    shannon = shannon_fano_code(symbols, weights)
    huffman = huffman_code(symbols, weights)

    print("Shannon-Fano code")
    for line in format_code_table(shannon, symbols):
        print(line)
    print()
    print("Huffman code")
    for line in format_code_table(huffman, symbols):
        print(line)
    print()
    for line in format_summary(compare_codes(symbols, weights)):
        print(line)
    print()


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Shannon-Fano / Huffman prefix code demo")
    ap.add_argument("-s", "--symbols", nargs="+", help="alphabet symbols")
    ap.add_argument("-w", "--weights", nargs="+", type=float, help="probabilities, same order as --symbols")
    ap.add_argument("--text", help="derive the alphabet and probabilities from this text")
    ap.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    args = ap.parse_args(argv)
    if (args.symbols is None) != (args.weights is None):
        ap.error("--symbols and --weights must be given together")
    if args.text is not None and args.symbols is not None:
        ap.error("--text cannot be combined with --symbols/--weights")
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.text is not None:
        inputs = [frequencies_from_text(args.text)]
    elif args.symbols is not None:
        inputs = [(args.symbols, args.weights)]
    else:
        inputs = [(list(s), w) for s, w in EXAMPLES]

    for symbols, weights in inputs:
        logger.debug("alphabet of %d symbols", len(symbols))
        try:
            print_prefix_codes(symbols, weights)
        except InvalidInput as exc:
            print(f"invalid input: {exc}", file=sys.stderr)
            return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
