# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Database unit of work implementation."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass
from typing import Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from foodswing.shared.errors.base import StoreError
from foodswing.shared.logging import logger


class UnitOfWork(Protocol):
    """Unit of work protocol for transactional operations."""

    def __enter__(self) -> UnitOfWork: ...

    def __exit__(self, exc_type, exc, tb) -> None: ...

    @property
    def session(self) -> Session: ...


@dataclass(slots=True)
class SqlAlchemyUnitOfWork(AbstractContextManager, UnitOfWork):
    """SQLAlchemy-backed unit of work.

    Commits on a clean exit and rolls back otherwise. Driver errors leave as
    :class:`StoreError`; application errors raised inside the block propagate
    unchanged.
    """

    session_factory: Callable[[], Session]
    _session: Session | None = None

    def __enter__(self) -> SqlAlchemyUnitOfWork:
        self._session = self.session_factory()
        logger.debug("uow: session opened")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        assert self._session is not None
        try:
            if exc:
                logger.warning(f"uow: rollback due to {exc_type.__name__}")
                self._session.rollback()
                if isinstance(exc, SQLAlchemyError):
                    logger.opt(exception=exc).error("uow: store failure")
                    raise StoreError() from exc
            else:
                try:
                    self._session.commit()
                except SQLAlchemyError as commit_exc:
                    logger.exception("uow: commit failed")
                    self._session.rollback()
                    raise StoreError() from commit_exc
                logger.debug("uow: committed")
        finally:
            self._session.close()
            remove = getattr(self.session_factory, "remove", None)
            if remove is not None:
                remove()
            logger.debug("uow: session closed")
            self._session = None

    @property
    def session(self) -> Session:
        if self._session is None:
            msg = "UnitOfWork session accessed before entering context"
            raise RuntimeError(msg)
        return self._session


@contextmanager
def unit_of_work_scope(factory: Callable[[], Session]) -> Iterator[Session]:
    """Provide a context manager yielding a session."""

    with SqlAlchemyUnitOfWork(factory) as uow:
        yield uow.session
