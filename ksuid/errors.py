"""KSUID errors with structured context."""


class KsuidError(Exception):
    """Base error carrying a context dict for structured logging."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.context = context or {}
        self.cause = cause

    def to_dict(self):
        return {"type": type(self).__name__, "msg": str(self), "context": self.context}


class LengthError(KsuidError, ValueError):
    """Buffer or string of the wrong length."""

    def __init__(self, message, expected=None, actual=None, **kwargs):
        context = kwargs.pop("context", {})
        if expected is not None:
            context["expected"] = expected
        if actual is not None:
            context["actual"] = actual
        super().__init__(message, context=context, **kwargs)


class AlphabetError(KsuidError, ValueError):
    """Character outside the base62 alphabet."""

    def __init__(self, message, character=None, position=None, **kwargs):
        context = kwargs.pop("context", {})
        if character is not None:
            context["character"] = character
        if position is not None:
            context["position"] = position
        super().__init__(message, context=context, **kwargs)


class BoundsError(KsuidError, ValueError):
    """Value outside the representable KSUID range."""

    def __init__(self, message, value=None, **kwargs):
        context = kwargs.pop("context", {})
        if value is not None:
            context["value"] = value
        super().__init__(message, context=context, **kwargs)


class SequenceExhaustedError(KsuidError):
    """Sequence has emitted every value its seed allows."""

    def __init__(self, message, seed=None, capacity=None, **kwargs):
        context = kwargs.pop("context", {})
        if seed is not None:
            context["seed"] = str(seed)
        if capacity is not None:
            context["capacity"] = capacity
        super().__init__(message, context=context, **kwargs)


class RandomnessError(KsuidError):
    """Secure random source could not produce bytes."""

    def __init__(self, message, requested=None, **kwargs):
        context = kwargs.pop("context", {})
        if requested is not None:
            context["requested"] = requested
        super().__init__(message, context=context, **kwargs)


def check_length(buf, expected, what="KSUID"):
    """Raise LengthError unless len(buf) == expected."""
    try:
        actual = len(buf)
    except TypeError:
        raise LengthError(f"Valid {what}s are {expected} long, got {type(buf).__name__}",
                          expected=expected) from None
    if actual != expected:
        unit = "characters" if isinstance(buf, str) else "bytes"
        raise LengthError(f"Valid {what}s are {expected} {unit}, got {actual}",
                          expected=expected, actual=actual)
