"""
KSUID - K-Sortable Unique Identifier.

20 bytes: 4-byte big-endian timestamp (seconds since the KSUID epoch) followed
by a 16-byte random payload. Text form is 27 base62 characters that sort the
same way as the bytes.
"""

import functools
import math
import struct
import time as _time
from datetime import datetime, timezone

from ksuid import base62
from ksuid.constants import (
    BYTE_LENGTH,
    EPOCH_STAMP,
    MAX_TIMESTAMP,
    PAYLOAD_BYTE_LENGTH,
    TIMESTAMP_BYTE_LENGTH,
)
from ksuid.entropy import fill
from ksuid.errors import BoundsError, KsuidError, check_length
from ksuid.uint128 import MAX as UINT128_MAX, ONE, ZERO, uint128_payload


def _unix_seconds(time):
    """Whole Unix seconds from a datetime (naive means UTC) or a number."""
    if isinstance(time, datetime):
        if time.tzinfo is None:
            time = time.replace(tzinfo=timezone.utc)
        return math.floor(time.timestamp())
    return math.floor(time)


def _check_timestamp(timestamp):
    if not 0 <= timestamp <= MAX_TIMESTAMP:
        raise BoundsError(f"KSUID timestamp {timestamp} is outside [0, {MAX_TIMESTAMP}]", value=timestamp)
    return timestamp


def _join(timestamp, payload):
    return struct.pack(">I", timestamp & MAX_TIMESTAMP) + payload


@functools.total_ordering
class Ksuid:
    """Immutable 20-byte identifier."""

    __slots__ = ("_bytes",)

    def __init__(self, raw):
        if isinstance(raw, str):
            raise TypeError("Ksuid() takes bytes; use Ksuid.parse() for the text form")
        check_length(raw, BYTE_LENGTH)
        self._bytes = bytes(raw)

    # Factories

    @classmethod
    def new(cls, entropy=None):
        """Current time plus a fresh random payload."""
        return cls.random_with_time(_time.time(), entropy)

    @classmethod
    def random_with_time(cls, time, entropy=None):
        """Given time plus a fresh random payload."""
        timestamp = _check_timestamp(_unix_seconds(time) - EPOCH_STAMP)
        return cls(_join(timestamp, fill(PAYLOAD_BYTE_LENGTH, entropy)))

    @classmethod
    def from_parts(cls, time, payload):
        """Given time (datetime or Unix seconds) and 16-byte payload."""
        return cls.from_timestamp(_unix_seconds(time) - EPOCH_STAMP, payload)

    @classmethod
    def from_timestamp(cls, timestamp, payload):
        """Raw KSUID-epoch timestamp and 16-byte payload."""
        check_length(payload, PAYLOAD_BYTE_LENGTH, "KSUID payload")
        return cls(_join(_check_timestamp(timestamp), bytes(payload)))

    @classmethod
    def from_bytes(cls, raw):
        return cls(raw)

    @classmethod
    def parse(cls, text):
        """Parse the 27-character base62 form."""
        return cls(base62.decode(text))

    @classmethod
    def parse_or_nil(cls, text):
        """Like parse, but returns Ksuid.Nil instead of raising."""
        try:
            return cls.parse(text)
        except KsuidError:
            return cls.Nil

    # Accessors

    @property
    def bytes(self):
        return self._bytes

    @property
    def timestamp(self):
        """Seconds since the KSUID epoch, uncorrected."""
        return struct.unpack(">I", self._bytes[:TIMESTAMP_BYTE_LENGTH])[0]

    @property
    def time(self):
        """Creation time as an aware UTC datetime."""
        return datetime.fromtimestamp(self.timestamp + EPOCH_STAMP, tz=timezone.utc)

    @property
    def payload(self):
        return self._bytes[TIMESTAMP_BYTE_LENGTH:]

    def is_nil(self):
        return self._bytes == Ksuid.Nil._bytes

    # Ordering

    def compare(self, other):
        """Byte-wise unsigned comparison. Returns -1, 0 or 1."""
        if self._bytes == other._bytes:
            return 0
        return -1 if self._bytes < other._bytes else 1

    def equals(self, other):
        return self._bytes == other._bytes

    def __eq__(self, other):
        if not isinstance(other, Ksuid):
            return NotImplemented
        return self._bytes == other._bytes

    def __lt__(self, other):
        if not isinstance(other, Ksuid):
            return NotImplemented
        return self._bytes < other._bytes

    def __hash__(self):
        return hash(self._bytes)

    # Neighbours

    def next(self):
        """Successor; a payload wrap carries into the timestamp."""
        timestamp = self.timestamp
        value = uint128_payload(self._bytes).increment()
        if value.equals(ZERO):
            timestamp += 1
        return Ksuid(_join(timestamp, value.to_bytes()))

    def prev(self):
        """Predecessor; a payload wrap borrows from the timestamp."""
        timestamp = self.timestamp
        value, borrow = uint128_payload(self._bytes).overflowing_sub(ONE)
        if borrow:
            timestamp -= 1
        return Ksuid(_join(timestamp, value.to_bytes()))

    # Collections

    @staticmethod
    def sort(ids):
        """Sort a list of KSUIDs in place."""
        ids.sort(key=lambda ksuid: ksuid._bytes)

    @staticmethod
    def is_sorted(ids):
        return all(ids[i - 1].compare(ids[i]) <= 0 for i in range(1, len(ids)))

    def __str__(self):
        return base62.encode(self._bytes)

    def __repr__(self):
        return f"Ksuid('{self}')"


Ksuid.Nil = Ksuid(bytes(BYTE_LENGTH))
Ksuid.Max = Ksuid(_join(MAX_TIMESTAMP, UINT128_MAX.to_bytes()))

NIL = Ksuid.Nil
MAX = Ksuid.Max
