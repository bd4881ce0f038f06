import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI

from whatsapp_validator.config import Settings
from whatsapp_validator.exceptions.custom import (
    PhoneNumberFormatError,
    RateLimitError,
    WhatsAppApiError,
)
from whatsapp_validator.exceptions.handlers import (
    phone_number_format_error_handler,
    rate_limit_error_handler,
    whatsapp_api_error_handler,
)
from whatsapp_validator.routers.validation import router as validation_router
from whatsapp_validator.services.factory import create_validator
from whatsapp_validator.services.http_client import HttpxClient, create_async_client


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    config = settings.rapidapi_config()
    async with create_async_client(config) as client:
        http_client = HttpxClient(client, timeout=config.timeout)
        app.state.validator = create_validator(settings, http_client)

        yield


app = FastAPI(title="WhatsApp Number Validator", lifespan=lifespan)

app.add_exception_handler(PhoneNumberFormatError, phone_number_format_error_handler)
app.add_exception_handler(RateLimitError, rate_limit_error_handler)
app.add_exception_handler(WhatsAppApiError, whatsapp_api_error_handler)

app.include_router(validation_router)
