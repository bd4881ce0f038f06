class PhoneNumberFormatError(ValueError):
    def __init__(self, message: str, errors: list[str] | None = None):
        self.message = message
        self.errors = errors if errors is not None else [message]
        super().__init__(message)


class ConfigurationError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class WhatsAppApiError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class TransportError(WhatsAppApiError):
    pass


class ApiStatusError(WhatsAppApiError):
    pass


class RateLimitError(ApiStatusError):
    def __init__(self, service: str):
        self.service = service
        super().__init__(f"Rate limit exceeded for {service}", status_code=429)


class DecodeError(WhatsAppApiError):
    pass


class InvalidApiResponseError(WhatsAppApiError):
    pass
