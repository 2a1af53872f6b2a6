# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from foodswing.domain.users.entities import User as DomainUser
from foodswing.domain.users.exceptions import DuplicateEmailError
from foodswing.domain.users.repositories import UserRepository
from foodswing.infrastructure.db.models import User, as_utc
from foodswing.infrastructure.unit_of_work import unit_of_work_scope
from foodswing.shared.logging import logger


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def find_by_email(self, email: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.query(User).filter(User.email == email).first()
            return self._to_domain(row) if row else None

    def find_by_id(self, user_id: int) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(User, user_id)
            return self._to_domain(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        with unit_of_work_scope(self._session_factory) as session:
            row = User(
                name=user.name,
                email=user.email,
                password_hash=user.password_hash,
                created_at=user.created_at,
            )
            session.add(row)
            try:
                session.flush()
            except IntegrityError as exc:
                logger.info("users.add: unique index rejected duplicate email")
                raise DuplicateEmailError() from exc
            session.refresh(row)
            return self._to_domain(row)

    def count(self) -> int:
        with unit_of_work_scope(self._session_factory) as session:
            return session.query(User).count()

    @staticmethod
    def _to_domain(row: User) -> DomainUser:
        return DomainUser(
            id=row.id,
            name=row.name,
            email=row.email,
            password_hash=row.password_hash,
            created_at=as_utc(row.created_at),
        )
