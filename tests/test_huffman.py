import heapq
import random
from concurrent.futures import ThreadPoolExecutor
from itertools import product

import pytest

from prefix_codes.entropy import average_code_length, calculate_entropy, is_prefix_free, kraft_sum
from prefix_codes.errors import InvalidInput, UnknownSymbol
from prefix_codes.huffman import Node, build_codes, build_huffman_tree, huffman_code
from prefix_codes.shannon_fano import shannon_fano_code
from prefix_codes.table import FrequencyTable

EXAMPLES = [
    ("abcd", [0.125, 0.125, 0.25, 0.5]),
    ("abcde", [0.2, 0.1, 0.3, 0.25, 0.15]),
    ("abcde", [0.38461538, 0.17948718, 0.15384616, 0.15384614, 0.12820513]),
    ("56172", [0.3, 0.25, 0.2, 0.15, 0.1]),
    ("abcdefghij", [0.00693, 0.134712, 0.153271, 0.173098, 0.112272,
                    0.067446, 0.111512, 0.037859, 0.099983, 0.102918]),
]


def _random_distribution(rng: random.Random, n: int) -> list:
    w = [rng.random() for _ in range(n)]
    total = sum(w)
    return [x / total for x in w]


def test_dyadic_alphabet() -> None:
    table = huffman_code("abcd", [0.125, 0.125, 0.25, 0.5])
    assert table.as_dict() == {"d": "0", "c": "10", "a": "110", "b": "111"}
    assert table.lengths() == {"a": 3, "b": 3, "c": 2, "d": 1}
    assert kraft_sum(table) == 1.0
    assert table.method == "huffman"


def test_single_symbol_is_its_own_root() -> None:
    root = build_huffman_tree(FrequencyTable("x", [1.0]))
    assert root.is_leaf
    assert root.symbol == "x"
    table = huffman_code("x", [1.0])
    assert table.get("x") == ""


def test_empty_alphabet() -> None:
    assert build_huffman_tree(FrequencyTable([], [])) is None
    assert build_codes(None) == {}
    table = huffman_code([], [])
    assert len(table) == 0
    with pytest.raises(UnknownSymbol):
        table.get("a")


def test_invalid_input_produces_no_table() -> None:
    with pytest.raises(InvalidInput):
        huffman_code("ab", [0.5, 0.4])


def test_internal_weights_are_child_sums() -> None:
    root = build_huffman_tree(FrequencyTable("abcde", [0.2, 0.1, 0.3, 0.25, 0.15]))
    stack = [root]
    leaves = 0
    while stack:
        node = stack.pop()
        if node.is_leaf:
            leaves += 1
            continue
        assert node.left is not None and node.right is not None
        assert node.weight == pytest.approx(node.left.weight + node.right.weight)
        assert not node.left.weight > node.right.weight
        stack.extend([node.left, node.right])
    assert leaves == 5
    assert root.weight == pytest.approx(1.0)


def test_equal_weights_prefer_older_node() -> None:
    a = Node(0.25, "a", order=0)
    merged = Node(0.25, None, Node(0.125, "x"), Node(0.125, "y"), order=5)
    assert a < merged
    assert not merged < a
    assert Node(0.1, "z", order=9) < a


def test_equal_weights_give_balanced_code() -> None:
    table = huffman_code("abcdefgh", [0.125] * 8)
    assert set(table.lengths().values()) == {3}


@pytest.mark.parametrize("symbols, weights", EXAMPLES)
def test_examples_are_optimal_and_valid(symbols, weights) -> None:
    huffman = huffman_code(symbols, weights)
    shannon = shannon_fano_code(symbols, weights)
    assert is_prefix_free(huffman)
    assert kraft_sum(huffman) == pytest.approx(1.0)
    H = calculate_entropy(weights)
    L = average_code_length(huffman, symbols, weights)
    assert H - 1e-6 <= L < H + 1
    assert L <= average_code_length(shannon, symbols, weights) + 1e-12


@pytest.mark.parametrize("seed", [1, 7, 42, 1337, 2024])
def test_never_longer_than_shannon_fano(seed: int) -> None:
    rng = random.Random(seed)
    n = rng.randint(2, 120)
    symbols = [f"s{i}" for i in range(n)]
    weights = _random_distribution(rng, n)
    huffman = huffman_code(symbols, weights)
    shannon = shannon_fano_code(symbols, weights)
    assert is_prefix_free(huffman)
    assert all(len(huffman[s]) >= 1 for s in symbols)
    assert average_code_length(huffman, symbols, weights) <= (
        average_code_length(shannon, symbols, weights) + 1e-12
    )


def _merge_cost(weights) -> float:
    # sum of all merged weights == weighted length of an optimal code
    heap = list(weights)
    heapq.heapify(heap)
    cost = 0.0
    while len(heap) > 1:
        merged = heapq.heappop(heap) + heapq.heappop(heap)
        cost += merged
        heapq.heappush(heap, merged)
    return cost


def _brute_force_cost(weights) -> float:
    n = len(weights)
    best = float("inf")
    for lengths in product(range(1, n), repeat=n):
        if sum(2.0 ** -l for l in lengths) <= 1.0:
            best = min(best, sum(w * l for w, l in zip(weights, lengths)))
    return best


@pytest.mark.parametrize("seed", [5, 8, 13, 21])
def test_matches_reference_optimal_cost(seed: int) -> None:
    rng = random.Random(seed)
    for _ in range(50):
        n = rng.randint(2, 40)
        symbols = list(range(n))
        weights = _random_distribution(rng, n)
        table = huffman_code(symbols, weights)
        assert average_code_length(table, symbols, weights) == pytest.approx(_merge_cost(weights), abs=1e-9)


@pytest.mark.parametrize("seed", [2, 17, 99])
def test_matches_brute_force_on_small_alphabets(seed: int) -> None:
    rng = random.Random(seed)
    for _ in range(10):
        n = rng.randint(2, 5)
        symbols = list(range(n))
        weights = _random_distribution(rng, n)
        table = huffman_code(symbols, weights)
        assert average_code_length(table, symbols, weights) == pytest.approx(_brute_force_cost(weights), abs=1e-9)


def test_deep_skewed_distribution() -> None:
    n = 1000
    weights = [2.0 ** -i for i in range(1, n)] + [2.0 ** -(n - 1)]
    symbols = list(range(n))
    table = huffman_code(symbols, weights)
    lengths = table.lengths()
    assert lengths[0] == 1
    assert max(lengths.values()) == n - 1
    assert is_prefix_free(table)


def test_repeated_construction_is_deterministic() -> None:
    symbols, weights = EXAMPLES[-1]
    assert huffman_code(symbols, weights) == huffman_code(symbols, weights)


def test_caller_mutation_does_not_leak() -> None:
    symbols = list("abcd")
    weights = [0.125, 0.125, 0.25, 0.5]
    table = huffman_code(symbols, weights)
    symbols[0] = "z"
    weights[3] = 0.0
    assert table.get("a") == "110"
    assert "z" not in table


@pytest.mark.parametrize("seed", [3, 99])
def test_independent_constructions_run_concurrently(seed: int) -> None:
    rng = random.Random(seed)
    inputs = []
    for _ in range(40):
        n = rng.randint(1, 60)
        inputs.append(([f"s{i}" for i in range(n)], _random_distribution(rng, n)))

    expected = [huffman_code(s, w) for s, w in inputs]
    with ThreadPoolExecutor(max_workers=8) as pool:
        concurrent = list(pool.map(lambda args: huffman_code(*args), inputs))
    assert concurrent == expected
