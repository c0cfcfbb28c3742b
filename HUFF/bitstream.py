from bitpack import BitReader, BitWriter, EOS
from freqs import PSEUDO_EOF
from huffman import Node

BITS_PER_INT = 32
SYMBOL_BITS = 9   # 0..255 bytes plus the 256 sentinel
MAX_DEPTH = 1 << (SYMBOL_BITS - 1)   # 257 leaves never sit deeper than 256

HUFF_NUMBER = 0xFACE8200
HUFF_TREE = HUFF_NUMBER | 1   # magic, first 4 bytes of every .huf stream

# Stream layout (MSB-first):
# magic(u32) tree(pre-order: 0 = internal, 1 + sym(9) = leaf) payload(codes..., EOF code) pad

class HuffError(ValueError):
    pass

class FormatError(HuffError):
    """Stream does not start with the HUFF_TREE magic."""

class HeaderCorruptError(HuffError):
    """Stream ran out while the tree header still needed bits."""

class PayloadTruncatedError(HuffError):
    """Stream ran out before the end-of-data code was decoded."""


def write_magic(bw: BitWriter):
    bw.write_bits(BITS_PER_INT, HUFF_TREE)

def read_magic(br: BitReader):
    magic = br.read_bits(BITS_PER_INT)
    if magic == EOS:
        raise FormatError("Malformed stream: too short for magic number")
    if magic != HUFF_TREE:
        raise FormatError(f"Bad magic number (not HUFF): 0x{magic:08x}")

def write_tree(bw: BitWriter, node: Node):
    if node.is_leaf:
        bw.write_bits(1, 1)
        bw.write_bits(SYMBOL_BITS, node.sym)
    else:
        bw.write_bits(1, 0)
        write_tree(bw, node.left)
        write_tree(bw, node.right)

def read_tree(br: BitReader, depth: int = 0) -> Node:
    bit = br.read_bits(1)
    if bit == EOS:
        raise HeaderCorruptError("Malformed stream: tree header truncated")
    if bit == 0:
        if depth >= MAX_DEPTH:
            raise HeaderCorruptError("Malformed stream: tree header too deep")
        left = read_tree(br, depth + 1)
        right = read_tree(br, depth + 1)
        return Node(freq=0, left=left, right=right)
    sym = br.read_bits(SYMBOL_BITS)
    if sym == EOS:
        raise HeaderCorruptError("Malformed stream: tree header truncated in leaf value")
    if sym > PSEUDO_EOF:
        raise HeaderCorruptError(f"Malformed stream: leaf symbol out of range: {sym}")
    return Node(freq=0, sym=sym)
