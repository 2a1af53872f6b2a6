# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from .base import ResponseDTO, SuccessDTO


class MoodStatDTO(ResponseDTO):
    mood: str
    count: int


class AnalyticsDTO(ResponseDTO):
    total_users: int
    total_mood_selections: int
    total_contacts: int
    mood_stats: list[MoodStatDTO]


class AnalyticsResponseDTO(SuccessDTO):
    analytics: AnalyticsDTO
