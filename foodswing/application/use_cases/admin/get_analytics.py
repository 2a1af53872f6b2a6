# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

from foodswing.domain.contacts.repositories import ContactMessageRepository
from foodswing.domain.moods.entities import MoodCount
from foodswing.domain.moods.repositories import MoodSelectionRepository
from foodswing.domain.users.repositories import UserRepository


@dataclass(slots=True, frozen=True)
class Analytics:
    total_users: int
    total_mood_selections: int
    total_contacts: int
    mood_stats: list[MoodCount]


class GetAnalyticsUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        moods: MoodSelectionRepository,
        contacts: ContactMessageRepository,
    ) -> None:
        self._users = users
        self._moods = moods
        self._contacts = contacts

    def execute(self) -> Analytics:
        stats = sorted(self._moods.distribution(), key=lambda s: (-s.count, s.mood))
        return Analytics(
            total_users=self._users.count(),
            total_mood_selections=self._moods.count(),
            total_contacts=self._contacts.count(),
            mood_stats=stats,
        )


__all__ = ["Analytics", "GetAnalyticsUseCase"]
