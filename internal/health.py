"""Health checks for the KSUID service: loop, random source and codec."""

import asyncio
import time
from enum import Enum

from ksuid import Ksuid, KsuidError
from ksuid.base62 import decode, encode
from ksuid.constants import MAX_STRING_ENCODED, PAYLOAD_BYTE_LENGTH
from ksuid.entropy import random_bytes
from utils.timestamp import format_timestamp


class Status(Enum):
    OK = "healthy"
    DEGRADED = "degraded"
    FAIL = "unhealthy"


class CheckResult:
    __slots__ = ("name", "status", "msg", "critical")

    def __init__(self, name, status, msg="", critical=True):
        self.name = name
        self.status = status
        self.msg = msg
        self.critical = critical

    def to_dict(self):
        return {"name": self.name, "status": self.status.value, "msg": self.msg, "critical": self.critical}


class HealthReport:
    __slots__ = ("status", "checks", "uptime", "timestamp")

    def __init__(self, checks, uptime=0):
        self.checks = checks
        self.status = overall_status(checks)
        self.uptime = uptime
        self.timestamp = format_timestamp()

    def to_dict(self):
        return {"status": self.status.value,
                "timestamp": self.timestamp,
                "uptime": round(self.uptime, 1),
                "checks": [check.to_dict() for check in self.checks]}


def overall_status(results):
    """FAIL if a critical check failed, DEGRADED if anything else is off."""
    if any(result.status == Status.FAIL and result.critical for result in results):
        return Status.FAIL
    if any(result.status != Status.OK for result in results):
        return Status.DEGRADED
    return Status.OK


_checker = None


class HealthChecker:
    """Runs registered async checks concurrently; reports are cached for `ttl` seconds."""

    def __init__(self, ttl=1.0, timeout=5.0):
        self._checks = {}
        self._cache = None
        self._cache_time = 0
        self._ttl = ttl
        self._timeout = timeout
        self._start_time = time.time()

    def register(self, name, check_fn, critical=True):
        self._checks[name] = (check_fn, critical)

    async def _run(self, name, check_fn, critical):
        try:
            result = await asyncio.wait_for(check_fn(), timeout=self._timeout)
        except asyncio.TimeoutError:
            result = CheckResult(name, Status.FAIL, "timeout")
        except Exception as exc:
            result = CheckResult(name, Status.FAIL, str(exc))
        result.critical = critical
        return result

    async def check(self):
        now = time.time()
        if self._cache and now - self._cache_time < self._ttl:
            return self._cache

        results = await asyncio.gather(*(self._run(name, check_fn, critical)
                                         for name, (check_fn, critical) in self._checks.items()))
        self._cache = HealthReport(list(results), now - self._start_time)
        self._cache_time = now
        return self._cache


def get_health_checker():
    global _checker
    if not _checker:
        _checker = HealthChecker()
    return _checker


# Checks
async def check_event_loop():
    await asyncio.sleep(0)
    return CheckResult("loop", Status.OK)


def create_entropy_check(source=random_bytes):
    async def check():
        try:
            buf = source(PAYLOAD_BYTE_LENGTH)
        except KsuidError as exc:
            return CheckResult("entropy", Status.FAIL, str(exc))
        if len(buf) != PAYLOAD_BYTE_LENGTH:
            return CheckResult("entropy", Status.FAIL, f"short read {len(buf)}")
        return CheckResult("entropy", Status.OK)
    return check


async def check_codec():
    raw = Ksuid.Max.bytes
    text = encode(raw)
    if text != MAX_STRING_ENCODED:
        return CheckResult("codec", Status.FAIL, f"max encodes to {text}")
    if decode(text) != raw:
        return CheckResult("codec", Status.FAIL, "max round trip")
    return CheckResult("codec", Status.OK)
