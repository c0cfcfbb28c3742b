import io
import itertools
import numpy as np
import pytest

from bitpack import BitReader
from freqs import ALPH_SIZE, PSEUDO_EOF, count_frequencies
from huffman import build_tree, build_codebook, code_str


def _freqs_of(data: bytes):
    return count_frequencies(BitReader(io.BytesIO(data)))


def _leaves(node):
    if node.is_leaf:
        return [node]
    return _leaves(node.left) + _leaves(node.right)


def _no_single_child(node):
    if node.is_leaf:
        return True
    assert node.left is not None and node.right is not None
    return _no_single_child(node.left) and _no_single_child(node.right)


def test_count_frequencies_shape_and_sentinel():
    freqs = _freqs_of(b"abracadabra")
    assert freqs.shape == (ALPH_SIZE + 1,)
    assert freqs[ord("a")] == 5
    assert freqs[ord("b")] == 2
    assert freqs[ord("z")] == 0
    assert freqs[PSEUDO_EOF] == 1
    assert int(freqs.sum()) == 12


def test_count_frequencies_empty_input_only_sentinel():
    freqs = _freqs_of(b"")
    assert int(freqs.sum()) == 1
    assert freqs[PSEUDO_EOF] == 1


def test_tree_has_one_leaf_per_symbol():
    data = b"hello huffman world"
    freqs = _freqs_of(data)
    root = build_tree(freqs)
    syms = sorted(leaf.sym for leaf in _leaves(root))
    assert syms == sorted(set(data) | {PSEUDO_EOF})
    assert root.freq == len(data) + 1
    assert _no_single_child(root)


def test_codes_are_prefix_free():
    rng = np.random.default_rng(0)
    data = bytes(rng.integers(0, 40, size=2000, dtype=np.uint8))
    codes = build_codebook(build_tree(_freqs_of(data)))
    strs = [code_str(c, L) for c, L in codes.values()]
    assert len(set(strs)) == len(strs)
    for a, b in itertools.permutations(strs, 2):
        assert not b.startswith(a)


def test_known_code_lengths():
    freqs = [0] * (ALPH_SIZE + 1)
    freqs[ord("a")] = 4
    freqs[ord("b")] = 2
    freqs[ord("c")] = 1
    freqs[PSEUDO_EOF] = 1
    codes = build_codebook(build_tree(freqs))
    lengths = {s: L for s, (_, L) in codes.items()}
    assert lengths == {ord("a"): 1, ord("b"): 2, ord("c"): 3, PSEUDO_EOF: 3}


def test_tie_break_is_deterministic():
    freqs = [1] * (ALPH_SIZE + 1)
    assert build_codebook(build_tree(freqs)) == build_codebook(build_tree(list(freqs)))
    # lowest symbols pop first and land on the left
    freqs = [0] * (ALPH_SIZE + 1)
    freqs[10] = freqs[20] = 1
    root = build_tree(freqs)
    assert (root.left.sym, root.right.sym) == (10, 20)


def test_single_symbol_is_wrapped():
    root = build_tree(_freqs_of(b""))
    assert not root.is_leaf
    assert root.left.sym == PSEUDO_EOF
    assert root.right.is_leaf and root.right.freq == 0 and root.right.sym == 0
    codes = build_codebook(root)
    assert codes[PSEUDO_EOF] == (0, 1)


def test_all_zero_frequencies_rejected():
    with pytest.raises(ValueError):
        build_tree([0] * (ALPH_SIZE + 1))
