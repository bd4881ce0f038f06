from pydantic import Field
from pydantic_settings import BaseSettings

from whatsapp_validator.schemas.rapidapi import (
    DEFAULT_BULK_ENDPOINT,
    DEFAULT_ENDPOINT,
    DEFAULT_HOST,
    RapidApiConfig,
)


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    driver: str = Field("rapidapi", validation_alias="WHATSAPP_DRIVER")
    rapidapi_endpoint: str = Field(DEFAULT_ENDPOINT, validation_alias="WHATSAPP_RAPIDAPI_ENDPOINT")
    rapidapi_bulk_endpoint: str = Field(
        DEFAULT_BULK_ENDPOINT, validation_alias="WHATSAPP_RAPIDAPI_BULK_ENDPOINT"
    )
    rapidapi_key: str = Field("", validation_alias="WHATSAPP_RAPIDAPI_KEY")
    rapidapi_host: str = Field(DEFAULT_HOST, validation_alias="WHATSAPP_RAPIDAPI_HOST")
    rapidapi_timeout: float = Field(30.0, validation_alias="WHATSAPP_RAPIDAPI_TIMEOUT")
    rapidapi_retry_attempts: int = Field(3, validation_alias="WHATSAPP_RAPIDAPI_RETRY_ATTEMPTS")
    log_level: str = "INFO"

    def rapidapi_config(self) -> RapidApiConfig:
        return RapidApiConfig(
            endpoint=self.rapidapi_endpoint,
            bulk_endpoint=self.rapidapi_bulk_endpoint,
            key=self.rapidapi_key,
            host=self.rapidapi_host,
            timeout=self.rapidapi_timeout,
            retry_attempts=self.rapidapi_retry_attempts,
        )
