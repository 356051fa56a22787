"""Shared test fixtures for the toolbox."""

from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient

from toolbox.core.app import create_app
from toolbox.crypto.credentials import generate_rsa_keypair
from toolbox.crypto.types import KeyPair


@pytest.fixture(autouse=True)
def _set_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set environment variables for test settings."""
    monkeypatch.delenv("TOOLBOX_API_TOKEN", raising=False)
    monkeypatch.setenv("TOOLBOX_LOG_LEVEL", "DEBUG")


@pytest.fixture(scope="session")
def rsa_keypair() -> KeyPair:
    """One 2048-bit keypair shared by the whole run."""
    return generate_rsa_keypair(2048)


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Create an httpx test client for the app."""
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
