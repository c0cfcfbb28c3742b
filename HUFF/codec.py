import io
from bitpack import BitReader, BitWriter, EOS
from freqs import BITS_PER_WORD, PSEUDO_EOF, count_frequencies
from huffman import build_tree, build_codebook, code_str
from bitstream import write_magic, read_magic, write_tree, read_tree, HeaderCorruptError, PayloadTruncatedError

DEBUG_LOW = 1
DEBUG_HIGH = 4

def _sym_label(sym: int) -> str:
    return "EOF" if sym == PSEUDO_EOF else f"0x{sym:02x}"

def compress(br: BitReader, bw: BitWriter, debug: int = 0):
    """
    Two passes over br: count, rewind, encode.
    Returns stats dict: input_bytes, symbols, header_bits, bits_read, bits_written
    """
    # 1) Frequency pass, then rewind for the encode pass
    freqs = count_frequencies(br)
    br.reset()

    # 2) Tree + code table
    root = build_tree(freqs)
    codes = build_codebook(root)  # sym -> (code_int, L)

    if debug >= DEBUG_HIGH:
        for sym in sorted(codes):
            code, L = codes[sym]
            print(f"[compress] {_sym_label(sym)} freq={int(freqs[sym])} code={code_str(code, L)}")

    # 3) Magic + tree header
    write_magic(bw)
    start = bw.bits_written
    write_tree(bw, root)
    header_bits = bw.bits_written - start

    # 4) Payload, terminated by the EOF code
    while True:
        val = br.read_bits(BITS_PER_WORD)
        if val == EOS:
            break
        code, L = codes[val]
        bw.write_bits(L, code)
    code, L = codes[PSEUDO_EOF]
    bw.write_bits(L, code)
    bw.close()

    stats = dict(
        input_bytes=br.bits_read // BITS_PER_WORD,
        symbols=len(codes),
        header_bits=header_bits,
        bits_read=br.bits_read,
        bits_written=bw.bits_written,
    )
    if debug >= DEBUG_LOW:
        print(f"[compress] read {stats['bits_read']} bits, wrote {stats['bits_written']} bits "
              f"(header={header_bits}, symbols={stats['symbols']})")
    return stats

def decompress(br: BitReader, bw: BitWriter, debug: int = 0):
    """
    Returns stats dict: symbols, header_bits, bits_read, bits_written
    Raises FormatError, HeaderCorruptError, PayloadTruncatedError.
    """
    read_magic(br)
    start = br.bits_read
    root = read_tree(br)
    header_bits = br.bits_read - start
    if root.is_leaf:
        raise HeaderCorruptError("Malformed stream: tree has no internal node")

    if debug >= DEBUG_HIGH:
        for sym, (code, L) in sorted(build_codebook(root).items()):
            print(f"[decompress] {_sym_label(sym)} code={code_str(code, L)}")

    cur = root
    while True:
        bit = br.read_bits(1)
        if bit == EOS:
            raise PayloadTruncatedError("Malformed stream: payload ended before EOF code")
        cur = cur.right if bit else cur.left
        if cur.is_leaf:
            if cur.sym == PSEUDO_EOF:
                break
            bw.write_bits(BITS_PER_WORD, cur.sym)
            cur = root
    bw.close()

    stats = dict(
        symbols=len(build_codebook(root)),
        header_bits=header_bits,
        bits_read=br.bits_read,
        bits_written=bw.bits_written,
    )
    if debug >= DEBUG_LOW:
        print(f"[decompress] read {stats['bits_read']} bits, wrote {stats['bits_written']} bits "
              f"(header={header_bits}, symbols={stats['symbols']})")
    return stats

def compress_bytes(data: bytes, debug: int = 0) -> bytes:
    out = io.BytesIO()
    compress(BitReader(io.BytesIO(data)), BitWriter(out), debug=debug)
    return out.getvalue()

def decompress_bytes(blob: bytes, debug: int = 0) -> bytes:
    out = io.BytesIO()
    decompress(BitReader(io.BytesIO(blob)), BitWriter(out), debug=debug)
    return out.getvalue()
