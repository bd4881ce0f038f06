import logging
from collections.abc import Callable

from whatsapp_validator.config import Settings
from whatsapp_validator.exceptions.custom import ConfigurationError
from whatsapp_validator.services.base import WhatsAppValidator
from whatsapp_validator.services.http_client import HttpClient
from whatsapp_validator.services.rapidapi import RapidApiWhatsAppValidator

DriverBuilder = Callable[[Settings, HttpClient, logging.Logger | None], WhatsAppValidator]


def _build_rapidapi(
    settings: Settings, http_client: HttpClient, logger: logging.Logger | None
) -> WhatsAppValidator:
    return RapidApiWhatsAppValidator(settings.rapidapi_config(), http_client, logger=logger)


DRIVERS: dict[str, DriverBuilder] = {
    "rapidapi": _build_rapidapi,
}


def create_validator(
    settings: Settings,
    http_client: HttpClient,
    logger: logging.Logger | None = None,
) -> WhatsAppValidator:
    builder = DRIVERS.get(settings.driver.lower())
    if builder is None:
        raise ConfigurationError(f"Unsupported WhatsApp validator driver: {settings.driver}")
    return builder(settings, http_client, logger)
