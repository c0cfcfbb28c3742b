from typing import Dict, Tuple
import numpy as np

def entropy_bits(freqs) -> float:
    """Shannon entropy (bits/symbol) of a count vector; zero counts ignored."""
    f = np.asarray(freqs, dtype=np.float64)
    f = f[f > 0]
    if f.size == 0:
        return 0.0
    p = f / f.sum()
    return float(-(p * np.log2(p)).sum())

def mean_code_length(freqs, codebook: Dict[int, Tuple[int, int]]) -> float:
    f = np.asarray(freqs, dtype=np.float64)
    total = float(f.sum())
    if total == 0.0:
        return 0.0
    lengths = np.zeros(f.shape[0], dtype=np.float64)
    for sym, (_, L) in codebook.items():
        if sym < lengths.shape[0]:
            lengths[sym] = L
    return float((f * lengths).sum() / total)

def compression_ratio(raw_bytes: int, comp_bytes: int) -> float:
    return raw_bytes / comp_bytes if comp_bytes > 0 else 0.0
