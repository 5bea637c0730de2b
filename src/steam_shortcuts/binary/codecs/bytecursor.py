from __future__ import annotations


class DecodeError(ValueError):
    pass


class TruncatedInputError(DecodeError):
    pass


class Cursor:
    """Forward-only reader over an in-memory byte source. No seeking."""

    __slots__ = ("buf", "pos")

    def __init__(self, data: bytes | bytearray | memoryview):
        self.buf = memoryview(data)
        self.pos = 0

    def remaining(self) -> int: return len(self.buf) - self.pos
    def tell(self) -> int: return self.pos

    def next_byte(self) -> int | None:
        if self.pos >= len(self.buf):
            return None
        b = self.buf[self.pos]
        self.pos += 1
        return b

    def take(self, n: int) -> bytes:
        end = self.pos + n
        if end > len(self.buf):
            raise TruncatedInputError(f"underrun: need {n} at {self.pos}, have {self.remaining()}")
        out = self.buf[self.pos:end].tobytes()
        self.pos = end
        return out

    def read_cstring(self) -> bytes:
        """Bytes up to the next NUL; the NUL is consumed but not returned."""
        start = self.pos
        for i in range(start, len(self.buf)):
            if self.buf[i] == 0:
                self.pos = i + 1
                return self.buf[start:i].tobytes()
        raise TruncatedInputError(f"unterminated cstring at {start}")

    # little-endian: byte 0 -> bits 0..7, byte 1 -> bits 8..15, ...
    def u32le(self) -> int:
        raw = self.take(4)
        value = 0
        for shift, b in enumerate(raw):
            value |= b << (8 * shift)
        return value
