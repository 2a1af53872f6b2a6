from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from .base import ResponseDTO, SuccessDTO


class MoodSelectRequestDTO(BaseModel):
    mood: str = Field(min_length=1, max_length=255)


class MoodEntryDTO(ResponseDTO):
    id: int
    user_id: int
    mood: str
    timestamp: datetime


class MoodHistoryDTO(SuccessDTO):
    history: list[MoodEntryDTO]
