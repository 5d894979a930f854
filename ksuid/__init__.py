from ksuid.base62 import decode as decode_base62, encode as encode_base62
from ksuid.constants import (
    BYTE_LENGTH,
    EPOCH_STAMP,
    PAYLOAD_BYTE_LENGTH,
    STRING_ENCODED_LENGTH,
    TIMESTAMP_BYTE_LENGTH,
)
from ksuid.errors import (
    AlphabetError,
    BoundsError,
    KsuidError,
    LengthError,
    RandomnessError,
    SequenceExhaustedError,
)
from ksuid.identifier import MAX, NIL, Ksuid
from ksuid.sequence import Sequence
from ksuid.uint128 import Uint128

__all__ = [
    "Ksuid",
    "Sequence",
    "Uint128",
    "NIL",
    "MAX",
    "encode_base62",
    "decode_base62",
    "EPOCH_STAMP",
    "TIMESTAMP_BYTE_LENGTH",
    "PAYLOAD_BYTE_LENGTH",
    "BYTE_LENGTH",
    "STRING_ENCODED_LENGTH",
    "KsuidError",
    "LengthError",
    "AlphabetError",
    "BoundsError",
    "SequenceExhaustedError",
    "RandomnessError",
]
