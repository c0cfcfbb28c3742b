import argparse
import os
from bitpack import BitReader, BitWriter
from codec import compress
from freqs import count_frequencies
from huffman import build_tree, build_codebook
from metrics import entropy_bits, mean_code_length, compression_ratio

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Huffman-compress any file.")
    ap.add_argument("--input", required=True, help="path to file to compress")
    ap.add_argument("--output", required=True, help="path to .huf")
    ap.add_argument("--debug", type=int, default=0, help="1 = summary, 4 = per-symbol codes")
    ap.add_argument("--report", action="store_true", help="print entropy / code length / ratio")
    args = ap.parse_args(argv)

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    with open(args.input, "rb") as fin, open(args.output, "wb") as fout:
        stats = compress(BitReader(fin), BitWriter(fout), debug=args.debug)

    raw = stats["input_bytes"]
    comp = os.path.getsize(args.output)
    print(f"[compress] wrote {args.output}")
    print(f"[compress] {raw} -> {comp} bytes, symbols={stats['symbols']}, header_bits={stats['header_bits']}")

    if args.report:
        # second look at the input just for the numbers
        with open(args.input, "rb") as fin:
            freqs = count_frequencies(BitReader(fin))
        codes = build_codebook(build_tree(freqs))
        print(f"[compress] entropy={entropy_bits(freqs):.4f} bits/sym, "
              f"mean_code_len={mean_code_length(freqs, codes):.4f} bits/sym, "
              f"ratio={compression_ratio(raw, comp):.3f}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
