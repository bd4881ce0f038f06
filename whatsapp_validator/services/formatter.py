import re
from collections.abc import Iterable

from whatsapp_validator.exceptions.custom import PhoneNumberFormatError

_STRIP_RE = re.compile(r"[^0-9+]")
_NON_DIGIT_RE = re.compile(r"[^0-9]")
CANONICAL_RE = re.compile(r"\+[1-9][0-9]{1,14}")


class PhoneNumberFormatter:
    """Normalizes phone numbers to E.164-like canonical form (``+`` and 2-15 digits)."""

    def normalize(self, raw: str) -> str:
        number = _STRIP_RE.sub("", raw)
        if not number.startswith("+"):
            number = "+" + number

        if not CANONICAL_RE.fullmatch(number):
            raise PhoneNumberFormatError(f"Invalid phone number format: {raw!r}")
        return number

    def normalize_all(self, raws: Iterable[str]) -> dict[str, str]:
        """Normalize every number, keyed by the original string.

        All failures are collected before raising, so the error lists every
        bad entry in the batch.
        """
        formatted: dict[str, str] = {}
        errors: list[str] = []

        for index, raw in enumerate(raws):
            try:
                formatted[raw] = self.normalize(raw)
            except PhoneNumberFormatError as exc:
                errors.append(f"Invalid phone number at index {index}: {exc.message}")

        if errors:
            raise PhoneNumberFormatError("\n".join(errors), errors=errors)
        return formatted

    def to_api_form(self, number: str) -> str:
        return _NON_DIGIT_RE.sub("", number)
