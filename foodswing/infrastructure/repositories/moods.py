# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy import desc, func
from sqlalchemy.orm import Session

from foodswing.domain.moods.entities import MoodCount
from foodswing.domain.moods.entities import MoodSelection as DomainMoodSelection
from foodswing.domain.moods.repositories import MoodSelectionRepository
from foodswing.infrastructure.db.models import MoodSelection, as_utc
from foodswing.infrastructure.unit_of_work import unit_of_work_scope


class SqlAlchemyMoodSelectionRepository(MoodSelectionRepository):
    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def add(self, selection: DomainMoodSelection) -> DomainMoodSelection:
        with unit_of_work_scope(self._session_factory) as session:
            row = MoodSelection(
                user_id=selection.user_id,
                mood=selection.mood,
                created_at=selection.created_at,
            )
            session.add(row)
            session.flush()
            return self._to_domain(row)

    def list_for_user(self, user_id: int, limit: int) -> list[DomainMoodSelection]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = (
                session.query(MoodSelection)
                .filter(MoodSelection.user_id == user_id)
                .order_by(desc(MoodSelection.created_at), desc(MoodSelection.id))
                .limit(limit)
                .all()
            )
            return [self._to_domain(row) for row in rows]

    def count(self) -> int:
        with unit_of_work_scope(self._session_factory) as session:
            return session.query(MoodSelection).count()

    def distribution(self) -> list[MoodCount]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = (
                session.query(MoodSelection.mood, func.count(MoodSelection.id))
                .group_by(MoodSelection.mood)
                .all()
            )
            return [MoodCount(mood=mood, count=count) for mood, count in rows]

    @staticmethod
    def _to_domain(row: MoodSelection) -> DomainMoodSelection:
        return DomainMoodSelection(
            id=row.id,
            user_id=row.user_id,
            mood=row.mood,
            created_at=as_utc(row.created_at),
        )
