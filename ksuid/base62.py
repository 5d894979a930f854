"""
Base62 codec for 20-byte KSUIDs.

Conversion runs as schoolbook long division over a list of machine-sized
words, so no step handles a value wider than 38 bits. Both the byte layout and
the digit order are most-significant first and the alphabet is in ASCII order,
so encoded strings sort exactly like the bytes they encode.
"""

import struct

from ksuid.constants import (
    BASE62_CHARACTERS,
    BYTE_LENGTH,
    MAX_STRING_ENCODED,
    STRING_ENCODED_LENGTH,
)
from ksuid.errors import AlphabetError, BoundsError, check_length

_WORD_BASE = 1 << 32
_BASE = 62
_VALUES = {char: index for index, char in enumerate(BASE62_CHARACTERS)}


def base62_value(char):
    """Numeric value of one base62 character."""
    try:
        return _VALUES[char]
    except KeyError:
        raise AlphabetError(f"Invalid base62 character {char!r}", character=char) from None


def _divide(words, src_base, dst_base):
    """One long-division pass; returns (quotient words, remainder)."""
    quotient = []
    remainder = 0
    for word in words:
        value = word + remainder * src_base
        digit, remainder = divmod(value, dst_base)
        # Leading zero words are dropped so each pass shrinks
        if quotient or digit:
            quotient.append(digit)
    return quotient, remainder


def encode(src):
    """Encode 20 bytes as a 27-character base62 string."""
    check_length(src, BYTE_LENGTH)
    words = list(struct.unpack(">5I", bytes(src)))

    out = [BASE62_CHARACTERS[0]] * STRING_ENCODED_LENGTH
    n = STRING_ENCODED_LENGTH
    while words:
        words, remainder = _divide(words, _WORD_BASE, _BASE)
        n -= 1
        out[n] = BASE62_CHARACTERS[remainder]
    return "".join(out)


def decode(text):
    """Decode a 27-character base62 string into 20 bytes."""
    check_length(text, STRING_ENCODED_LENGTH, "encoded KSUID")
    digits = []
    for position, char in enumerate(text):
        try:
            digits.append(_VALUES[char])
        except KeyError:
            raise AlphabetError(f"Invalid base62 character {char!r} at position {position}",
                                character=char, position=position) from None
    if text > MAX_STRING_ENCODED:
        raise BoundsError(f"Encoded KSUID {text} exceeds {MAX_STRING_ENCODED}", value=text)

    out = bytearray(BYTE_LENGTH)
    n = BYTE_LENGTH
    while digits:
        digits, remainder = _divide(digits, _BASE, _WORD_BASE)
        if n < 4:
            raise BoundsError(f"Encoded KSUID {text} does not fit in {BYTE_LENGTH} bytes", value=text)
        out[n - 4:n] = struct.pack(">I", remainder)
        n -= 4
    return bytes(out)
