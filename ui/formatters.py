"""Render KSUIDs in the output formats the API offers."""

from utils.timestamp import format_time

FORMATS = ("string", "inspect", "time", "timestamp", "payload", "raw", "template")


def to_hex(buf):
    return buf.hex().upper()


def inspect(ksuid):
    """All representations and components of one KSUID."""
    return {
        "string": str(ksuid),
        "raw": to_hex(ksuid.bytes),
        "time": format_time(ksuid.time),
        "timestamp": ksuid.timestamp,
        "payload": to_hex(ksuid.payload),
    }


def render_template(ksuid, template):
    """Fill Go-style placeholders such as {{.String}} and {{.Time}}."""
    fields = inspect(ksuid)
    out = template
    for name in ("String", "Raw", "Time", "Timestamp", "Payload"):
        out = out.replace("{{." + name + "}}", str(fields[name.lower()]))
    return out


def render(ksuid, fmt="string", template=None):
    fmt = (fmt or "string").lower()
    if fmt == "string":
        return str(ksuid)
    if fmt == "inspect":
        return inspect(ksuid)
    if fmt == "time":
        return format_time(ksuid.time)
    if fmt == "timestamp":
        return ksuid.timestamp
    if fmt == "payload":
        return to_hex(ksuid.payload)
    if fmt == "raw":
        return to_hex(ksuid.bytes)
    if fmt == "template":
        if not template:
            raise ValueError("Template string is required for template format")
        return render_template(ksuid, template)
    raise ValueError(f"Invalid format: {fmt}")
