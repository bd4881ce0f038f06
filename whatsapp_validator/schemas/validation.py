from pydantic import BaseModel, Field


class ValidateRequest(BaseModel):
    phone_number: str


class ValidateResponse(BaseModel):
    phone_number: str
    is_whatsapp: bool


class BulkValidateRequest(BaseModel):
    phone_numbers: list[str] = Field(min_length=1)


class BulkValidateResponse(BaseModel):
    results: dict[str, bool]
    bulk: bool  # True when the bulk endpoint served the batch


class CapabilitiesResponse(BaseModel):
    driver: str
    supports_bulk_validation: bool
