"""Unit tests for the bounded Sequence generator."""

import io
import json

import pytest

from internal.logging import LogLevel, StructuredLogger
from ksuid import Ksuid, Sequence, SequenceExhaustedError
from ksuid.constants import SEQUENCE_CAPACITY


def _low16(ksuid):
    return int.from_bytes(ksuid.bytes[-2:], "big")


class TestSequence:
    """Tests for Sequence emission and bounds."""

    def test_fresh_seed_when_omitted(self):
        seq = Sequence()
        assert isinstance(seq.seed, Ksuid)
        assert not seq.seed.is_nil()

    def test_seed_must_be_ksuid(self):
        """Seeds are checked up front, not on first use."""
        with pytest.raises(TypeError):
            Sequence("abc")
        with pytest.raises(TypeError):
            Sequence(bytes(20))

    def test_emits_counter_in_low_bits(self, seed):
        """Low 16 bits run 0, 1, 2 while the rest matches the seed."""
        seq = Sequence(seed)
        ids = [seq.next() for _ in range(3)]
        assert [_low16(ksuid) for ksuid in ids] == [0, 1, 2]
        for ksuid in ids:
            assert ksuid.timestamp == seed.timestamp
            assert ksuid.bytes[:18] == seed.bytes[:18]

    def test_strictly_increasing(self):
        seq = Sequence()
        previous = seq.next()
        for _ in range(1000):
            current = seq.next()
            assert previous.compare(current) < 0
            previous = current

    def test_capacity(self, seed):
        """Exactly 65536 ids, then every further call fails."""
        seq = Sequence(seed)
        last = None
        for _ in range(SEQUENCE_CAPACITY):
            last = seq.next()
        assert _low16(last) == 0xFFFF
        assert seq.exhausted
        assert seq.remaining == 0
        with pytest.raises(SequenceExhaustedError) as info:
            seq.next()
        assert info.value.context["capacity"] == SEQUENCE_CAPACITY
        with pytest.raises(SequenceExhaustedError):
            seq.next()

    def test_bounds_before_emitting(self, seed):
        """With nothing emitted the lower bound is the seed itself."""
        low, high = Sequence(seed).bounds()
        assert low == seed
        assert high.bytes[:18] == seed.bytes[:18]
        assert _low16(high) == 0xFFFF

    def test_bounds_track_last_emitted(self, seed):
        seq = Sequence(seed)
        seq.next()
        second = seq.next()
        low, high = seq.bounds()
        assert low == second
        assert _low16(low) == 1
        assert _low16(high) == 0xFFFF

    def test_remaining(self, seed):
        seq = Sequence(seed)
        seq.next()
        assert seq.remaining == SEQUENCE_CAPACITY - 1
        assert not seq.exhausted

    def test_iterate_until_exhausted(self, seed):
        """Iteration stops cleanly instead of raising."""
        seq = Sequence(seed)
        for _ in range(SEQUENCE_CAPACITY - 3):
            seq.next()
        assert [_low16(ksuid) for ksuid in seq] == [0xFFFD, 0xFFFE, 0xFFFF]
        assert list(seq) == []

    def test_seed_payload_all_ones(self):
        """High payload bits are kept even when the seed is Max."""
        seq = Sequence(Ksuid.Max)
        first = seq.next()
        assert first.bytes == b"\xff" * 18 + b"\x00\x00"

    def test_exhaustion_is_logged(self, seed):
        stream = io.StringIO()
        StructuredLogger.configure(LogLevel.DEBUG, stream)
        try:
            seq = Sequence(seed)
            for _ in seq:
                pass
            with pytest.raises(SequenceExhaustedError):
                seq.next()
        finally:
            StructuredLogger.configure(LogLevel.INFO)
        records = [json.loads(line) for line in stream.getvalue().splitlines()]
        assert records[0]["msg"] == "sequence created"
        assert records[-1]["msg"] == "sequence exhausted"
        assert records[-1]["level"] == "WARN"
