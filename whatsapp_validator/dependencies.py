from typing import Annotated

from fastapi import Depends, Request

from whatsapp_validator.services.base import WhatsAppValidator


def get_validator(request: Request) -> WhatsAppValidator:
    return request.app.state.validator


ValidatorDep = Annotated[WhatsAppValidator, Depends(get_validator)]
