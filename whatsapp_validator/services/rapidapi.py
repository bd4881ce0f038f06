import logging

from pydantic import ValidationError

from whatsapp_validator.exceptions.custom import ConfigurationError, InvalidApiResponseError
from whatsapp_validator.schemas.rapidapi import RapidApiConfig, RemoteResult
from whatsapp_validator.services.base import WhatsAppValidator
from whatsapp_validator.services.formatter import PhoneNumberFormatter
from whatsapp_validator.services.http_client import HttpClient


class RapidApiWhatsAppValidator(WhatsAppValidator):
    driver_name = "rapidapi"

    def __init__(
        self,
        config: RapidApiConfig,
        http_client: HttpClient,
        formatter: PhoneNumberFormatter | None = None,
        logger: logging.Logger | None = None,
    ):
        missing = [name for name in ("endpoint", "key", "host") if not getattr(config, name)]
        if missing:
            raise ConfigurationError(
                f"Missing required RapidAPI configuration: {', '.join(missing)}"
            )

        super().__init__(http_client, formatter=formatter, logger=logger)
        self._config = config
        self._headers = {
            "x-rapidapi-host": config.host,
            "x-rapidapi-key": config.key,
        }

    @property
    def config(self) -> RapidApiConfig:
        return self._config

    def supports_bulk_validation(self) -> bool:
        return bool(self._config.bulk_endpoint)

    async def _perform_validation(self, canonical: str) -> bool:
        data = await self._http.send(
            self._config.endpoint,
            {"phone_number": self._formatter.to_api_form(canonical)},
            self._headers,
        )

        if not isinstance(data, dict) or "status" not in data:
            raise InvalidApiResponseError("Invalid API response: missing status field")
        return data["status"] == "valid"

    async def _perform_bulk_validation(self, canonical_numbers: dict[str, str]) -> dict[str, bool]:
        api_numbers = {
            original: self._formatter.to_api_form(canonical)
            for original, canonical in canonical_numbers.items()
        }
        data = await self._http.send(
            self._config.bulk_endpoint,
            {"phone_numbers": list(api_numbers.values())},
            self._headers,
        )

        if not isinstance(data, list) or not data:
            raise InvalidApiResponseError("Invalid API response: expected array of results")

        requested = set(api_numbers.values())
        validation_map: dict[str, bool] = {}
        for index, entry in enumerate(data):
            try:
                result = RemoteResult.model_validate(entry)
            except ValidationError:
                self._logger.warning("Skipping malformed bulk result at index %d: %r", index, entry)
                continue

            api_number = self._formatter.to_api_form(result.phone_number)
            if api_number not in requested:
                # A representation mismatch (e.g. "00" prefixes) ends up here
                self._logger.warning(
                    "Bulk result for %s matches no requested number", result.phone_number
                )
                continue
            validation_map[api_number] = result.is_valid

        return {
            original: validation_map.get(api_number, False)
            for original, api_number in api_numbers.items()
        }
