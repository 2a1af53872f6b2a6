from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from .base import ResponseDTO, SuccessDTO


class SignupRequestDTO(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=1, max_length=255)
    # bcrypt only reads the first 72 bytes; longer passwords are accepted as is.
    password: str = Field(min_length=1)


class LoginRequestDTO(BaseModel):
    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1)


class UserDTO(ResponseDTO):
    id: int
    name: str
    email: str


class AuthSuccessDTO(SuccessDTO):
    token: str
    user: UserDTO


class VerifySuccessDTO(SuccessDTO):
    user: dict[str, Any]
