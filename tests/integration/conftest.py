import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from config import ApplicationConfig
from invoice_tracker.api.app import create_app


@pytest.fixture
def app():
    """Fresh application, with its own empty invoice store"""
    return create_app(ApplicationConfig)


@pytest_asyncio.fixture
async def client(app):
    """Async HTTP client bound to the application"""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def sync_client(app):
    """Synchronous client, as used by the Dash UI"""
    with TestClient(app) as test_client:
        yield test_client
