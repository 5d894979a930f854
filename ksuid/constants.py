"""KSUID layout and encoding constants."""

# KSUID epoch: 2014-05-13
EPOCH_STAMP = 1400000000

TIMESTAMP_BYTE_LENGTH = 4
PAYLOAD_BYTE_LENGTH = 16
BYTE_LENGTH = TIMESTAMP_BYTE_LENGTH + PAYLOAD_BYTE_LENGTH

MAX_TIMESTAMP = 0xFFFFFFFF

STRING_ENCODED_LENGTH = 27
MIN_STRING_ENCODED = "000000000000000000000000000"
MAX_STRING_ENCODED = "aWgEPTl1tmebfsQzFP4bxwgy80V"

BASE62_CHARACTERS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"

# Sequences vary the low 16 payload bits only
SEQUENCE_BITS = 16
SEQUENCE_CAPACITY = 1 << SEQUENCE_BITS
