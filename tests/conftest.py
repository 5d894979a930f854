"""Pytest fixtures for all tests."""

import pytest
from httpx import AsyncClient, ASGITransport

from ksuid import Ksuid
from ui.app import create_app

# segmentio/ksuid README example
EXAMPLE_STRING = "0ujtsYcgvSTl8PAuAdqWYSMnLOv"
EXAMPLE_RAW = bytes.fromhex("0669F7EFB5A1CD34B5F99D1154FB6853345C9735")


@pytest.fixture
def example():
    """A KSUID with a well-known encoding."""
    return Ksuid(EXAMPLE_RAW)


@pytest.fixture
def seed():
    """Sequence seed with non-zero low 16 bits."""
    return Ksuid.from_timestamp(100, bytes(range(1, 15)) + b"\x12\x34")


@pytest.fixture
async def app():
    """Create test FastAPI app."""
    return create_app()


@pytest.fixture
async def client(app):
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
