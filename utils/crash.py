"""Crash handling: every uncaught exception gets a KSUID crash id."""

import json
import os
import sys
import traceback

from ksuid import Ksuid, KsuidError
from utils.timestamp import format_time

# Default crash log path, can be overridden by configure()
_crash_log = "logs/crash.log"


def configure(crash_file):
    """Set crash log file path from config."""
    global _crash_log
    _crash_log = crash_file


def new_crash_id():
    """Fresh KSUID, or Nil when no random source is left."""
    try:
        return Ksuid.new()
    except KsuidError:
        return Ksuid.Nil


def build_record(crash_id, exc_type, exc_value, exc_tb, context=None):
    record = {
        "id": str(crash_id),
        "timestamp": format_time(crash_id.time),
        "type": exc_type.__name__ if exc_type else "Unknown",
        "msg": str(exc_value) if exc_value is not None else "",
        "traceback": "".join(traceback.format_exception(exc_type, exc_value, exc_tb)) if exc_type else None,
    }
    if isinstance(exc_value, KsuidError):
        record["error_context"] = exc_value.context
    if context:
        record["context"] = context
    return record


def write_crash(record):
    """Append one JSON line to the crash log. Returns False if the write failed."""
    try:
        log_dir = os.path.dirname(_crash_log)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        with open(_crash_log, "a") as f:
            f.write(json.dumps(record, default=str) + "\n")
        return True
    except OSError:
        return False


def log_crash(exc_type, exc_value, exc_tb):
    """sys.excepthook replacement: report to stderr and the crash log."""
    record = build_record(new_crash_id(), exc_type, exc_value, exc_tb)
    sys.stderr.write(f"\n{'=' * 60}\nCRASH [{record['id']}] {record['timestamp']}\n{'=' * 60}\n")
    sys.stderr.write(f"{record['type']}: {record['msg']}\n{'-' * 60}\n{record['traceback'] or ''}{'=' * 60}\n\n")
    write_crash(record)
    return record


def create_async_handler(logger=None):
    """Create an asyncio loop exception handler that records crashes."""
    def handler(loop, context):
        exc = context.get("exception")
        exc_type = type(exc) if exc else None
        record = build_record(new_crash_id(), exc_type, exc, exc.__traceback__ if exc else None,
                              context=str(context.get("message", "")))
        if logger:
            logger.error("Async exception", error=record["msg"], crash_id=record["id"],
                         task=str(context.get("future", "unknown")))
        write_crash(record)
    return handler


def install_crash_handler():
    """Install global sync exception handler."""
    sys.excepthook = log_crash
