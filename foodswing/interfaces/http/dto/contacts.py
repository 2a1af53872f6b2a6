from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from foodswing.domain.contacts.entities import EMAIL_PATTERN
from foodswing.shared.errors.validation_types import ValidationErrorType

from .base import ResponseDTO, SuccessDTO


class ContactRequestDTO(BaseModel):
    name: str = Field(min_length=1, max_length=128)
    email: str = Field(min_length=1, max_length=255)
    message: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        if not EMAIL_PATTERN.match(value):
            raise PydanticCustomError(
                ValidationErrorType.EMAIL_INVALID.value,
                "Please provide a valid email address",
                {"pattern": EMAIL_PATTERN.pattern},
            )
        return value


class ContactDTO(ResponseDTO):
    id: int
    name: str
    email: str
    message: str
    created_at: datetime


class ContactListDTO(SuccessDTO):
    contacts: list[ContactDTO]
