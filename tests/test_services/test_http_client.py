import json

import httpx
import pytest
import respx
from httpx import Response

from whatsapp_validator.exceptions.custom import (
    ApiStatusError,
    DecodeError,
    RateLimitError,
    TransportError,
)
from whatsapp_validator.schemas.rapidapi import RapidApiConfig
from whatsapp_validator.services.http_client import HttpxClient, create_async_client

URL = "https://api.example.com/validate"


@respx.mock
@pytest.mark.asyncio
async def test_send_posts_json_with_headers():
    route = respx.post(URL).mock(
        return_value=Response(200, json={"status": "valid", "phone_number": "1234567890"})
    )

    async with httpx.AsyncClient() as client:
        http = HttpxClient(client)
        data = await http.send(URL, {"phone_number": "1234567890"}, {"x-rapidapi-key": "k"})

    assert data == {"status": "valid", "phone_number": "1234567890"}
    sent = route.calls[0].request
    assert json.loads(sent.content) == {"phone_number": "1234567890"}
    assert sent.headers["x-rapidapi-key"] == "k"
    assert sent.headers["content-type"] == "application/json"


@respx.mock
@pytest.mark.asyncio
async def test_send_get_uses_query_params():
    route = respx.get(URL).mock(return_value=Response(200, json={"ok": True}))

    async with httpx.AsyncClient() as client:
        http = HttpxClient(client)
        data = await http.send(URL, {"phone_number": "1234567890"}, method="get")

    assert data == {"ok": True}
    assert route.calls[0].request.url.params["phone_number"] == "1234567890"


@pytest.mark.asyncio
async def test_send_rejects_unsupported_method():
    async with httpx.AsyncClient() as client:
        http = HttpxClient(client)
        with pytest.raises(ValueError, match="Unsupported HTTP method: TRACE"):
            await http.send(URL, method="trace")


@respx.mock
@pytest.mark.asyncio
async def test_send_network_error():
    respx.post(URL).mock(side_effect=httpx.ConnectError("Network error"))

    async with httpx.AsyncClient() as client:
        http = HttpxClient(client)
        with pytest.raises(TransportError) as exc_info:
            await http.send(URL, {})

    assert "Network error" in exc_info.value.message
    assert exc_info.value.status_code is None


@respx.mock
@pytest.mark.asyncio
async def test_send_timeout_is_transport_error():
    respx.post(URL).mock(side_effect=httpx.ReadTimeout("timed out"))

    async with httpx.AsyncClient() as client:
        http = HttpxClient(client, timeout=1.0)
        with pytest.raises(TransportError):
            await http.send(URL, {})


@respx.mock
@pytest.mark.asyncio
async def test_send_server_error():
    respx.post(URL).mock(return_value=Response(500, text="Server error"))

    async with httpx.AsyncClient() as client:
        http = HttpxClient(client)
        with pytest.raises(ApiStatusError) as exc_info:
            await http.send(URL, {})

    assert exc_info.value.status_code == 500
    assert not isinstance(exc_info.value, RateLimitError)


@respx.mock
@pytest.mark.asyncio
async def test_send_redirect_is_status_error():
    respx.post(URL).mock(
        return_value=Response(302, headers={"Location": "https://x"}, json={"status": "valid"})
    )

    async with httpx.AsyncClient() as client:
        http = HttpxClient(client)
        with pytest.raises(ApiStatusError) as exc_info:
            await http.send(URL, {})

    assert exc_info.value.status_code == 302


@respx.mock
@pytest.mark.asyncio
async def test_send_rate_limit():
    respx.post(URL).mock(return_value=Response(429, text="Rate limited"))

    async with httpx.AsyncClient() as client:
        http = HttpxClient(client, service="RapidAPI")
        with pytest.raises(RateLimitError) as exc_info:
            await http.send(URL, {})

    assert exc_info.value.service == "RapidAPI"
    assert exc_info.value.status_code == 429


@respx.mock
@pytest.mark.asyncio
async def test_send_invalid_json():
    respx.post(URL).mock(return_value=Response(200, text="<html>oops</html>"))

    async with httpx.AsyncClient() as client:
        http = HttpxClient(client)
        with pytest.raises(DecodeError):
            await http.send(URL, {})


@respx.mock
@pytest.mark.asyncio
async def test_send_empty_body_returns_empty_dict():
    respx.post(URL).mock(return_value=Response(200))

    async with httpx.AsyncClient() as client:
        http = HttpxClient(client)
        data = await http.send(URL, {})

    assert data == {}


@pytest.mark.asyncio
async def test_create_async_client_uses_config_timeout():
    config = RapidApiConfig(endpoint=URL, key="k", host="h", timeout=12, retry_attempts=5)

    async with create_async_client(config) as client:
        assert client.timeout.read == 12


@respx.mock
@pytest.mark.asyncio
async def test_send_corrupt_encoding_is_decode_error():
    respx.post(URL).mock(
        return_value=Response(
            200,
            headers={"Content-Encoding": "gzip"},
            stream=httpx.ByteStream(b"not gzip at all"),
        )
    )

    async with httpx.AsyncClient() as client:
        http = HttpxClient(client)
        with pytest.raises(DecodeError):
            await http.send(URL, {})


@respx.mock
@pytest.mark.asyncio
async def test_send_too_many_redirects_is_transport_error():
    respx.post(URL).mock(side_effect=httpx.TooManyRedirects("Exceeded redirects"))

    async with httpx.AsyncClient() as client:
        http = HttpxClient(client)
        with pytest.raises(TransportError):
            await http.send(URL, {})


@pytest.mark.asyncio
async def test_send_invalid_url_is_transport_error():
    async with httpx.AsyncClient() as client:
        http = HttpxClient(client)
        with pytest.raises(TransportError):
            await http.send("https://example.com:99999/validate", {})
