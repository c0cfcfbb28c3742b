import argparse
import os
import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from bitpack import BitReader
from freqs import count_frequencies
from huffman import build_tree, build_codebook

def plot_code_lengths(freqs, codebook, path: str) -> str:
    """
    Two panels over symbols 0..256: counts (log scale) and code length.
    Symbols with no code are drawn at length 0.
    """
    f = np.asarray(freqs, dtype=np.int64)
    syms = np.arange(f.shape[0])
    lengths = np.zeros(f.shape[0], dtype=np.int64)
    for sym, (_, L) in codebook.items():
        if sym < f.shape[0]:
            lengths[sym] = L

    fig = plt.figure(figsize=(10, 5))
    ax = fig.add_subplot(2, 1, 1)
    ax.bar(syms, np.maximum(f, 1), width=1.0, color="tab:blue")
    ax.set_yscale("log")
    ax.set_ylabel("count")
    ax.set_title("Symbol frequency vs Huffman code length", fontsize=9)

    ax = fig.add_subplot(2, 1, 2)
    ax.bar(syms, lengths, width=1.0, color="tab:orange")
    ax.set_xlabel("symbol (256 = EOF)")
    ax.set_ylabel("code length (bits)")

    fig.tight_layout()
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    fig.savefig(path, dpi=150)
    plt.close(fig)
    return path

def main(argv=None) -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", required=True, help="file to analyse")
    ap.add_argument("--output", required=True, help="path to .png")
    args = ap.parse_args(argv)

    with open(args.input, "rb") as f:
        freqs = count_frequencies(BitReader(f))
    codes = build_codebook(build_tree(freqs))
    plot_code_lengths(freqs, codes, args.output)
    print(f"[plot] wrote {args.output}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
