# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ResponseDTO(BaseModel):
    """Response payload serialised with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class SuccessDTO(ResponseDTO):
    success: bool = True
    message: str | None = None

    def to_json(self) -> dict[str, Any]:
        payload = super().to_json()
        if payload.get("message") is None:
            payload.pop("message", None)
        return payload
