"""Secure random bytes for KSUID payloads."""

import os

from ksuid.errors import RandomnessError


def random_bytes(length):
    """Return `length` bytes from the OS CSPRNG."""
    try:
        return os.urandom(length)
    except (NotImplementedError, OSError) as exc:
        raise RandomnessError("No secure random source available", requested=length, cause=exc) from exc


def fill(length, entropy=None):
    """Draw `length` bytes from `entropy` (default: random_bytes), checking the size."""
    source = entropy or random_bytes
    buf = source(length)
    if buf is None or len(buf) != length:
        got = None if buf is None else len(buf)
        raise RandomnessError(f"Random source returned {got} bytes, wanted {length}", requested=length)
    return bytes(buf)
