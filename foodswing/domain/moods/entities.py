# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from foodswing.domain.exceptions import InvariantViolation

# Moods offered by the client picker. The server accepts any non-empty label.
KNOWN_MOODS = ("happy", "sad", "angry", "stressed", "excited")

HISTORY_LIMIT = 50


@dataclass(slots=True, frozen=True)
class MoodSelection:
    """A single mood pick made by a user."""

    id: int
    user_id: int
    mood: str
    created_at: datetime

    def __post_init__(self) -> None:
        if not self.mood or not self.mood.strip():
            raise InvariantViolation("mood must not be empty", field="mood")


@dataclass(slots=True, frozen=True)
class MoodCount:
    mood: str
    count: int
