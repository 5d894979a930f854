"""KSUID generation and inspection routes."""

from fastapi import APIRouter, Query
from pydantic import BaseModel

from ksuid import Ksuid, KsuidError
from ui.errors import http_error
from ui.formatters import render

router = APIRouter(prefix="/api/v1/ksuids", tags=["ksuids"])

# These will be set by app.py
_config = None
_log = None


def init(generator_config, logger):
    """Initialize with generator config and logger."""
    global _config, _log
    _config = generator_config
    _log = logger


class SortRequest(BaseModel):
    ids: list[str]


def _parse(text):
    try:
        return Ksuid.parse(text)
    except KsuidError as exc:
        _log.debug("parse rejected", text=text, **exc.context)
        raise http_error(exc) from exc


def _render(ksuid, fmt, template):
    try:
        return render(ksuid, fmt or _config.default_format, template)
    except ValueError as exc:
        raise http_error(exc) from exc


@router.get("")
async def generate(count: int = 1, fmt: str = Query(None, alias="format"), template: str = None):
    """Generate `count` fresh KSUIDs."""
    if not 1 <= count <= _config.max_count:
        raise http_error(ValueError(f"count must be between 1 and {_config.max_count}"))
    try:
        ids = [Ksuid.new() for _ in range(count)]
    except KsuidError as exc:
        _log.error("generation failed", error=exc, **exc.context)
        raise http_error(exc) from exc
    return {"ids": [_render(ksuid, fmt, template) for ksuid in ids]}


@router.post("/sort")
async def sort(request: SortRequest):
    """Parse and sort a list of encoded KSUIDs."""
    ids = [_parse(text) for text in request.ids]
    Ksuid.sort(ids)
    return {"ids": [str(ksuid) for ksuid in ids]}


@router.get("/{text}")
async def show(text: str, fmt: str = Query("inspect", alias="format"), template: str = None):
    """Parse one KSUID and render it."""
    return {"id": text, "value": _render(_parse(text), fmt, template)}


@router.get("/{text}/next")
async def successor(text: str):
    return {"id": text, "next": str(_parse(text).next())}


@router.get("/{text}/prev")
async def predecessor(text: str):
    return {"id": text, "prev": str(_parse(text).prev())}
