"""Bounded generator of ordered KSUIDs sharing one seed."""

from internal.logging import get_logger
from ksuid.constants import SEQUENCE_BITS, SEQUENCE_CAPACITY
from ksuid.errors import SequenceExhaustedError
from ksuid.identifier import Ksuid
from ksuid.uint128 import uint128_payload


class Sequence:
    """
    Emits up to 65536 KSUIDs with the seed's timestamp and high 112 payload
    bits, setting the low 16 bits to 0, 1, 2, ... in order.

    Not thread-safe: use one sequence per producer.
    """

    __slots__ = ("seed", "_base", "_count", "_log")

    def __init__(self, seed=None):
        if seed is not None and not isinstance(seed, Ksuid):
            raise TypeError(f"Sequence seed must be a Ksuid, not {type(seed).__name__}")
        self.seed = seed if seed is not None else Ksuid.new()
        self._base = uint128_payload(self.seed.bytes)
        self._count = 0
        self._log = get_logger()
        self._log.debug("sequence created", seed=str(self.seed))

    @property
    def remaining(self):
        return SEQUENCE_CAPACITY - self._count

    @property
    def exhausted(self):
        return self._count >= SEQUENCE_CAPACITY

    def _with_count(self, count):
        payload = self._base.with_low_bits(SEQUENCE_BITS, count)
        return Ksuid.from_timestamp(self.seed.timestamp, payload.to_bytes())

    def next(self):
        """Next KSUID in the sequence; raises once all 65536 are used."""
        if self.exhausted:
            self._log.warn("sequence exhausted", seed=str(self.seed), capacity=SEQUENCE_CAPACITY)
            raise SequenceExhaustedError(f"Sequence exhausted after {SEQUENCE_CAPACITY} ids",
                                         seed=self.seed, capacity=SEQUENCE_CAPACITY)
        ksuid = self._with_count(self._count)
        self._count += 1
        return ksuid

    def bounds(self):
        """(last emitted or seed, seed with low 16 bits at 0xFFFF)."""
        low = self.seed if self._count == 0 else self._with_count(self._count - 1)
        return low, self._with_count(SEQUENCE_CAPACITY - 1)

    def __iter__(self):
        while not self.exhausted:
            yield self.next()
