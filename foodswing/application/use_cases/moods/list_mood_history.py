# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from foodswing.domain.moods.entities import HISTORY_LIMIT, MoodSelection
from foodswing.domain.moods.repositories import MoodSelectionRepository


class ListMoodHistoryUseCase:
    def __init__(self, *, moods: MoodSelectionRepository, limit: int = HISTORY_LIMIT) -> None:
        self._moods = moods
        self._limit = limit

    def execute(self, user_id: int) -> list[MoodSelection]:
        history = self._moods.list_for_user(user_id, self._limit)
        return list(history)[: self._limit]


__all__ = ["ListMoodHistoryUseCase"]
