"""Map KSUID errors onto HTTP responses."""

from fastapi import HTTPException, status

from ksuid import RandomnessError, SequenceExhaustedError


def http_error(exc):
    """HTTPException for a KsuidError (or ValueError from a formatter)."""
    if isinstance(exc, SequenceExhaustedError):
        code = status.HTTP_409_CONFLICT
    elif isinstance(exc, RandomnessError):
        code = status.HTTP_503_SERVICE_UNAVAILABLE
    else:
        code = status.HTTP_400_BAD_REQUEST
    detail = exc.to_dict() if hasattr(exc, "to_dict") else {"type": type(exc).__name__, "msg": str(exc)}
    return HTTPException(status_code=code, detail=detail)
