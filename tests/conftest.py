import httpx
import pytest
from httpx import ASGITransport

ENDPOINT = "https://api.example.com/validate"
BULK_ENDPOINT = "https://api.example.com/validate-bulk"
API_KEY = "test-api-key"
API_HOST = "example-api-host.com"


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("WHATSAPP_DRIVER", "rapidapi")
    monkeypatch.setenv("WHATSAPP_RAPIDAPI_ENDPOINT", ENDPOINT)
    monkeypatch.setenv("WHATSAPP_RAPIDAPI_BULK_ENDPOINT", BULK_ENDPOINT)
    monkeypatch.setenv("WHATSAPP_RAPIDAPI_KEY", API_KEY)
    monkeypatch.setenv("WHATSAPP_RAPIDAPI_HOST", API_HOST)


@pytest.fixture
async def client(mock_env):
    from whatsapp_validator.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c
