# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy import desc
from sqlalchemy.orm import Session

from foodswing.domain.contacts.entities import ContactMessage as DomainContactMessage
from foodswing.domain.contacts.repositories import ContactMessageRepository
from foodswing.infrastructure.db.models import ContactMessage, as_utc
from foodswing.infrastructure.unit_of_work import unit_of_work_scope


class SqlAlchemyContactMessageRepository(ContactMessageRepository):
    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def add(self, contact: DomainContactMessage) -> DomainContactMessage:
        with unit_of_work_scope(self._session_factory) as session:
            row = ContactMessage(
                name=contact.name,
                email=contact.email,
                message=contact.message,
                created_at=contact.created_at,
            )
            session.add(row)
            session.flush()
            return self._to_domain(row)

    def list_all(self) -> list[DomainContactMessage]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = (
                session.query(ContactMessage)
                .order_by(desc(ContactMessage.created_at), desc(ContactMessage.id))
                .all()
            )
            return [self._to_domain(row) for row in rows]

    def count(self) -> int:
        with unit_of_work_scope(self._session_factory) as session:
            return session.query(ContactMessage).count()

    @staticmethod
    def _to_domain(row: ContactMessage) -> DomainContactMessage:
        return DomainContactMessage(
            id=row.id,
            name=row.name,
            email=row.email,
            message=row.message,
            created_at=as_utc(row.created_at),
        )
