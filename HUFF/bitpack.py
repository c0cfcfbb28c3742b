from typing import BinaryIO

EOS = -1  # returned by read_bits when the stream runs dry


def _check_width(n: int):
    if not (1 <= n <= 32):
        raise ValueError(f"bit width out of range (1..32): {n}")


class BitWriter:
    def __init__(self, f: BinaryIO):
        self._f = f
        self._cur = 0
        self._nbits = 0  # bits currently in _cur (0..7)
        self.bits_written = 0

    def write_bits(self, n: int, value: int):
        """Write the low 'n' bits of value (MSB-first)."""
        _check_width(n)
        if value < 0 or value >> n:
            raise ValueError(f"value {value} does not fit in {n} bits")
        out = bytearray()
        for i in range(n - 1, -1, -1):
            self._cur = (self._cur << 1) | ((value >> i) & 1)
            self._nbits += 1
            if self._nbits == 8:
                out.append(self._cur)
                self._cur = 0
                self._nbits = 0
        if out:
            self._f.write(out)
        self.bits_written += n

    def close(self):
        """Pad remaining bits with zeros and flush the underlying file."""
        if self._nbits > 0:
            self._f.write(bytes([self._cur << (8 - self._nbits)]))
            self._cur = 0
            self._nbits = 0
        self._f.flush()


class BitReader:
    def __init__(self, f: BinaryIO):
        self._f = f
        self._cur = 0
        self._nbits = 0  # unread bits left in _cur
        self.bits_read = 0

    def read_bits(self, n: int) -> int:
        """Read 'n' bits (MSB-first); EOS if fewer than n bits remain."""
        _check_width(n)
        value = 0
        for _ in range(n):
            if self._nbits == 0:
                b = self._f.read(1)
                if not b:
                    return EOS
                self._cur = b[0]
                self._nbits = 8
            self._nbits -= 1
            value = (value << 1) | ((self._cur >> self._nbits) & 1)
        self.bits_read += n
        return value

    def reset(self):
        self._f.seek(0)
        self._cur = 0
        self._nbits = 0
        self.bits_read = 0
