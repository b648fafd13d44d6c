"""Root conftest — shared test configuration.

Invariants:
    - Every test gets a freshly built app (create_app), never a shared global
    - HTTP tests go through httpx over ASGITransport, no socket is opened
"""

import os

import pytest
from httpx import ASGITransport, AsyncClient

# Keep a developer's .env or shell from changing test expectations
for _key in [k for k in os.environ if k.upper().startswith("REGISTRATION_API_")]:
    del os.environ[_key]

from registration_api.config import Settings  # noqa: E402
from registration_api.main import create_app  # noqa: E402


@pytest.fixture
def settings():
    return Settings(_env_file=None, log_format="text")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
async def client(app):
    """FastAPI test client bound to a fresh app."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
