from pydantic import BaseModel

DEFAULT_ENDPOINT = "https://whatsapp-number-validator3.p.rapidapi.com/WhatsappNumberHasItWithToken"
DEFAULT_BULK_ENDPOINT = (
    "https://whatsapp-number-validator3.p.rapidapi.com/WhatsappNumberHasItBulkWithToken"
)
DEFAULT_HOST = "whatsapp-number-validator3.p.rapidapi.com"


class RapidApiConfig(BaseModel):
    model_config = {"frozen": True}

    endpoint: str = ""
    bulk_endpoint: str = ""  # empty -> bulk unsupported
    key: str = ""
    host: str = ""
    timeout: float = 30.0
    retry_attempts: int = 3


class RemoteResult(BaseModel):
    model_config = {"coerce_numbers_to_str": True}

    status: str
    phone_number: str

    @property
    def is_valid(self) -> bool:
        return self.status == "valid"
