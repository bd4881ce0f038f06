from fastapi import APIRouter

from whatsapp_validator.dependencies import ValidatorDep
from whatsapp_validator.schemas.validation import (
    BulkValidateRequest,
    BulkValidateResponse,
    CapabilitiesResponse,
    ValidateRequest,
    ValidateResponse,
)

router = APIRouter()


@router.post("/validate", response_model=ValidateResponse)
async def validate_number(request: ValidateRequest, validator: ValidatorDep) -> ValidateResponse:
    is_whatsapp = await validator.validate(request.phone_number)
    return ValidateResponse(phone_number=request.phone_number, is_whatsapp=is_whatsapp)


@router.post("/validate/bulk", response_model=BulkValidateResponse)
async def validate_numbers(
    request: BulkValidateRequest, validator: ValidatorDep
) -> BulkValidateResponse:
    results = await validator.validate_bulk(request.phone_numbers)
    return BulkValidateResponse(results=results, bulk=validator.supports_bulk_validation())


@router.get("/capabilities", response_model=CapabilitiesResponse)
async def capabilities(validator: ValidatorDep) -> CapabilitiesResponse:
    return CapabilitiesResponse(
        driver=validator.driver_name,
        supports_bulk_validation=validator.supports_bulk_validation(),
    )
