import numpy as np
from bitpack import BitReader, EOS

BITS_PER_WORD = 8
ALPH_SIZE = 1 << BITS_PER_WORD
PSEUDO_EOF = ALPH_SIZE  # end-of-data sentinel, one past the last byte value

def count_frequencies(br: BitReader) -> np.ndarray:
    """
    Full pass over the input: returns int64 counts of shape (ALPH_SIZE+1,).
    Index PSEUDO_EOF is always 1. Caller rewinds the reader afterwards.
    """
    buf = bytearray()
    while True:
        val = br.read_bits(BITS_PER_WORD)
        if val == EOS:
            break
        buf.append(val)
    data = np.frombuffer(bytes(buf), dtype=np.uint8)
    freqs = np.bincount(data, minlength=ALPH_SIZE + 1).astype(np.int64)
    freqs[PSEUDO_EOF] = 1
    return freqs
