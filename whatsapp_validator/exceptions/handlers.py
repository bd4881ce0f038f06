import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import PhoneNumberFormatError, RateLimitError, WhatsAppApiError

logger = logging.getLogger(__name__)


async def phone_number_format_error_handler(
    _request: Request, exc: PhoneNumberFormatError
) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"detail": "Invalid phone number format", "errors": exc.errors},
    )


async def rate_limit_error_handler(_request: Request, exc: RateLimitError) -> JSONResponse:
    logger.warning("Rate limit hit for %s", exc.service)
    return JSONResponse(
        status_code=429,
        content={"detail": f"Rate limit exceeded for {exc.service}"},
    )


async def whatsapp_api_error_handler(_request: Request, exc: WhatsAppApiError) -> JSONResponse:
    logger.error("WhatsApp API error: %s (status=%s)", exc.message, exc.status_code)
    return JSONResponse(
        status_code=502,
        content={"detail": f"WhatsApp API error: {exc.message}"},
    )
