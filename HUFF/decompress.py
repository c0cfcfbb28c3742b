import argparse
import io
import os
import sys
from bitpack import BitReader, BitWriter
from bitstream import HuffError
from codec import decompress

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Restore a file written by compress.py.")
    ap.add_argument("--input", required=True, help="path to .huf")
    ap.add_argument("--output", required=True, help="path to restored file")
    ap.add_argument("--debug", type=int, default=0, help="1 = summary, 4 = per-symbol codes")
    args = ap.parse_args(argv)

    # decode into memory first so a bad stream leaves no output file behind
    buf = io.BytesIO()
    try:
        with open(args.input, "rb") as f:
            stats = decompress(BitReader(f), BitWriter(buf), debug=args.debug)
    except HuffError as exc:
        print(f"[decompress] error: {exc}", file=sys.stderr)
        return 2

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    with open(args.output, "wb") as f:
        f.write(buf.getvalue())
    print(f"[decompress] wrote {args.output} bytes={stats['bits_written'] // 8}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
