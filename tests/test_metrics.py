import io
import math
import numpy as np
import pytest

from bitpack import BitReader
from freqs import count_frequencies
from huffman import build_tree, build_codebook
from metrics import entropy_bits, mean_code_length, compression_ratio


def test_entropy_uniform_and_degenerate():
    assert entropy_bits([1, 1, 1, 1]) == pytest.approx(2.0)
    assert entropy_bits([0, 5, 0]) == 0.0
    assert entropy_bits([0, 0]) == 0.0


def test_mean_code_length_within_one_bit_of_entropy():
    rng = np.random.default_rng(1)
    data = bytes(rng.geometric(0.2, size=5000).clip(0, 255).astype(np.uint8))
    freqs = count_frequencies(BitReader(io.BytesIO(data)))
    codes = build_codebook(build_tree(freqs))
    h = entropy_bits(freqs)
    m = mean_code_length(freqs, codes)
    assert h <= m < h + 1


def test_mean_code_length_by_hand():
    codes = {0: (0, 1), 1: (2, 2), 2: (3, 2)}
    assert mean_code_length([2, 1, 1], codes) == pytest.approx(1.5)
    assert mean_code_length([0, 0, 0], codes) == 0.0


def test_compression_ratio():
    assert compression_ratio(100, 25) == 4.0
    assert compression_ratio(100, 0) == 0.0
    assert math.isclose(compression_ratio(3, 2), 1.5)
