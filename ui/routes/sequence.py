"""Sequence routes: ordered KSUID batches from one seed."""

from fastapi import APIRouter

from ksuid import Ksuid, KsuidError, Sequence
from ui.errors import http_error

router = APIRouter(prefix="/api/v1", tags=["sequence"])

# These will be set by app.py
_config = None
_log = None


def init(generator_config, logger):
    """Initialize with generator config and logger."""
    global _config, _log
    _config = generator_config
    _log = logger


@router.get("/sequence")
async def sequence(seed: str = None, count: int = 1):
    """Emit `count` ids from a sequence seeded with `seed` (fresh if omitted)."""
    if not 1 <= count <= _config.max_count:
        raise http_error(ValueError(f"count must be between 1 and {_config.max_count}"))
    try:
        seq = Sequence(Ksuid.parse(seed) if seed else None)
        ids = [seq.next() for _ in range(count)]
    except KsuidError as exc:
        _log.info("sequence request rejected", error=exc, **exc.context)
        raise http_error(exc) from exc
    low, high = seq.bounds()
    return {
        "seed": str(seq.seed),
        "ids": [str(ksuid) for ksuid in ids],
        "bounds": {"min": str(low), "max": str(high)},
        "remaining": seq.remaining,
    }
