# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from foodswing.domain.exceptions import InvariantViolation
from foodswing.domain.moods.entities import KNOWN_MOODS, MoodSelection
from foodswing.domain.moods.repositories import MoodSelectionRepository
from foodswing.shared.errors.base import ValidationError
from foodswing.shared.logging import logger


class RecordMoodUseCase:
    def __init__(self, *, moods: MoodSelectionRepository) -> None:
        self._moods = moods

    def execute(self, user_id: int, mood: str) -> MoodSelection:
        try:
            selection = MoodSelection(
                id=0, user_id=user_id, mood=mood, created_at=datetime.now(UTC)
            )
        except InvariantViolation as exc:
            raise ValidationError(message="Please provide a mood") from exc

        if mood not in KNOWN_MOODS:
            logger.debug(f"moods.record: user={user_id} picked unlisted mood")
        return self._moods.add(selection)
