"""
Unsigned 128-bit integer for KSUID payload arithmetic.

Held as two 64-bit halves so every operation is a fixed handful of word
operations. All arithmetic wraps modulo 2**128.
"""

import struct

from ksuid.constants import PAYLOAD_BYTE_LENGTH, TIMESTAMP_BYTE_LENGTH
from ksuid.errors import check_length

MASK64 = 0xFFFFFFFFFFFFFFFF
_WORD = 1 << 64


class Uint128:
    """Immutable unsigned 128-bit value (hi, lo)."""

    __slots__ = ("_hi", "_lo")

    def __init__(self, hi=0, lo=0):
        self._hi = hi & MASK64
        self._lo = lo & MASK64

    @property
    def hi(self):
        return self._hi

    @property
    def lo(self):
        return self._lo

    @classmethod
    def from_bytes(cls, buf):
        """Read a 16-byte big-endian buffer."""
        check_length(buf, PAYLOAD_BYTE_LENGTH, "payload")
        hi, lo = struct.unpack(">QQ", bytes(buf))
        return cls(hi, lo)

    def to_bytes(self):
        """16-byte big-endian form."""
        return struct.pack(">QQ", self._hi, self._lo)

    def overflowing_add(self, other):
        """Return (self + other mod 2**128, carry out of the top bit)."""
        lo = self._lo + other._lo
        carry = 1 if lo >= _WORD else 0
        hi = self._hi + other._hi + carry
        return Uint128(hi, lo), hi >= _WORD

    def overflowing_sub(self, other):
        """Return (self - other mod 2**128, borrow out of the top bit)."""
        if self._lo >= other._lo:
            lo = self._lo - other._lo
            borrow = 0
        else:
            lo = self._lo + _WORD - other._lo
            borrow = 1
        hi = self._hi - other._hi - borrow
        return Uint128(hi, lo), hi < 0

    def add(self, other):
        return self.overflowing_add(other)[0]

    def subtract(self, other):
        return self.overflowing_sub(other)[0]

    def increment(self):
        return self.add(ONE)

    def compare(self, other):
        """Unsigned comparison, high half first. Returns -1, 0 or 1."""
        if self._hi != other._hi:
            return -1 if self._hi < other._hi else 1
        if self._lo != other._lo:
            return -1 if self._lo < other._lo else 1
        return 0

    def equals(self, other):
        return self._hi == other._hi and self._lo == other._lo

    def with_low_bits(self, width, value):
        """Copy with the lowest `width` bits replaced by `value`."""
        mask = (1 << width) - 1
        return Uint128(self._hi, (self._lo & ~mask) | (value & mask))

    def __eq__(self, other):
        if not isinstance(other, Uint128):
            return NotImplemented
        return self.equals(other)

    def __lt__(self, other):
        if not isinstance(other, Uint128):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other):
        if not isinstance(other, Uint128):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, Uint128):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other):
        if not isinstance(other, Uint128):
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self):
        return hash((self._hi, self._lo))

    def __repr__(self):
        return f"Uint128(0x{self._hi:016x}{self._lo:016x})"


ZERO = Uint128(0, 0)
ONE = Uint128(0, 1)
MAX = Uint128(MASK64, MASK64)


def uint128_payload(raw):
    """Payload of a 20-byte KSUID as a Uint128."""
    return Uint128.from_bytes(raw[TIMESTAMP_BYTE_LENGTH:])
