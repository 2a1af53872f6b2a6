# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, scoped_session, sessionmaker
from sqlalchemy.pool import StaticPool

from foodswing.shared.config.settings import DatabaseConfig
from foodswing.shared.logging import logger


class Base(DeclarativeBase):
    pass


def _is_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in url


def build_engine(database: DatabaseConfig) -> Engine:
    url = database.url
    if _is_memory_sqlite(url):
        # One shared connection, otherwise every checkout sees an empty database.
        return create_engine(
            url,
            future=True,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    connect_args: dict[str, object] = {}
    if url.startswith("sqlite"):
        connect_args = {
            "check_same_thread": False,
            "timeout": int(database.pool_timeout),
        }

    return create_engine(
        url,
        echo=False,
        future=True,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
        pool_timeout=database.pool_timeout,
        connect_args=connect_args,
    )


def build_session_factory(engine: Engine) -> scoped_session[Session]:
    return scoped_session(
        sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)
    )


def init_db(engine: Engine) -> None:
    # Models must be registered on Base.metadata before create_all.
    from foodswing.infrastructure.db import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database schema ensured")
