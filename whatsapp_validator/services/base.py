import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

from whatsapp_validator.exceptions.custom import WhatsAppApiError
from whatsapp_validator.services.formatter import PhoneNumberFormatter
from whatsapp_validator.services.http_client import HttpClient


class WhatsAppValidator(ABC):
    """Driver-agnostic validation workflow.

    Drivers implement the remote calls (``_perform_validation`` and
    ``_perform_bulk_validation``) and ``supports_bulk_validation``. Formatting
    errors always propagate; remote errors are logged before they propagate,
    except inside degraded bulk mode where each failing number becomes ``False``.
    """

    driver_name: str = ""

    def __init__(
        self,
        http_client: HttpClient,
        formatter: PhoneNumberFormatter | None = None,
        logger: logging.Logger | None = None,
    ):
        self._http = http_client
        self._formatter = formatter or PhoneNumberFormatter()
        self._logger = logger or logging.getLogger(type(self).__module__)

    @abstractmethod
    def supports_bulk_validation(self) -> bool: ...

    @abstractmethod
    async def _perform_validation(self, canonical: str) -> bool: ...

    @abstractmethod
    async def _perform_bulk_validation(self, canonical_numbers: dict[str, str]) -> dict[str, bool]: ...

    async def validate(self, phone_number: str) -> bool:
        canonical = self._formatter.normalize(phone_number)
        try:
            return await self._perform_validation(canonical)
        except WhatsAppApiError as exc:
            self._logger.error(
                "Validation failed for %s: %s", phone_number, exc.message
            )
            raise

    async def validate_bulk(self, phone_numbers: Sequence[str]) -> dict[str, bool]:
        canonical_numbers = self._formatter.normalize_all(phone_numbers)
        if not canonical_numbers:
            return {}

        if not self.supports_bulk_validation():
            return await self._validate_each(canonical_numbers)

        try:
            return await self._perform_bulk_validation(canonical_numbers)
        except WhatsAppApiError as exc:
            self._logger.error(
                "Bulk validation failed for %s: %s", list(phone_numbers), exc.message
            )
            raise

    async def _validate_each(self, canonical_numbers: dict[str, str]) -> dict[str, bool]:
        self._logger.info(
            "Bulk validation unsupported by %s driver, validating %d numbers one by one",
            self.driver_name or type(self).__name__,
            len(canonical_numbers),
        )
        results: dict[str, bool] = {}
        for original, canonical in canonical_numbers.items():
            try:
                results[original] = await self._perform_validation(canonical)
            except WhatsAppApiError as exc:
                self._logger.error(
                    "Validation failed for %s, recording as not validated: %s",
                    original,
                    exc.message,
                )
                results[original] = False
        return results
