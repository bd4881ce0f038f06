import logging
from typing import Any, Protocol

import httpx

from whatsapp_validator.exceptions.custom import (
    ApiStatusError,
    DecodeError,
    RateLimitError,
    TransportError,
)
from whatsapp_validator.schemas.rapidapi import RapidApiConfig

logger = logging.getLogger(__name__)

SUPPORTED_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")


class HttpClient(Protocol):
    async def send(
        self,
        url: str,
        body: dict | list | None = None,
        headers: dict[str, str] | None = None,
        method: str = "POST",
    ) -> Any: ...


def create_async_client(config: RapidApiConfig) -> httpx.AsyncClient:
    """Shared client whose transport retries failed connections ``retry_attempts`` times."""
    return httpx.AsyncClient(
        timeout=config.timeout,
        transport=httpx.AsyncHTTPTransport(retries=config.retry_attempts),
    )


class HttpxClient:
    def __init__(self, client: httpx.AsyncClient, timeout: float = 30.0, service: str = "WhatsApp API"):
        self._client = client
        self._timeout = timeout
        self._service = service

    async def send(
        self,
        url: str,
        body: dict | list | None = None,
        headers: dict[str, str] | None = None,
        method: str = "POST",
    ) -> Any:
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        request_headers = {"Content-Type": "application/json", **(headers or {})}
        kwargs: dict[str, Any] = {"headers": request_headers, "timeout": self._timeout}
        if method == "GET":
            if body:
                kwargs["params"] = body
        elif body is not None:
            kwargs["json"] = body

        try:
            resp = await self._client.request(method, url, **kwargs)
        except httpx.DecodingError as exc:
            raise DecodeError(f"Invalid API response encoding: {exc}") from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(f"API request failed: {exc}") from exc

        if resp.status_code == 429:
            raise RateLimitError(self._service)
        if not resp.is_success:
            raise ApiStatusError(
                f"API request failed with status code: {resp.status_code}",
                status_code=resp.status_code,
            )

        if not resp.content:
            return {}
        try:
            return resp.json()
        except ValueError as exc:
            logger.debug("Undecodable response from %s: %.200s", url, resp.text)
            raise DecodeError(
                f"Invalid JSON response: {exc}", status_code=resp.status_code
            ) from exc
