# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from functools import cached_property, partial

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, scoped_session

from foodswing.application.services.password_hashing import \
    BcryptPasswordHasher
from foodswing.application.services.tokens import JwtTokenService
from foodswing.application.use_cases.admin.get_analytics import \
    GetAnalyticsUseCase
from foodswing.application.use_cases.contacts.list_contacts import \
    ListContactsUseCase
from foodswing.application.use_cases.contacts.submit_contact import \
    SubmitContactUseCase
from foodswing.application.use_cases.moods.list_mood_history import \
    ListMoodHistoryUseCase
from foodswing.application.use_cases.moods.record_mood import \
    RecordMoodUseCase
from foodswing.application.use_cases.users.login_user import LoginUserUseCase
from foodswing.application.use_cases.users.register_user import \
    RegisterUserUseCase
from foodswing.application.use_cases.users.verify_session import \
    VerifySessionUseCase
from foodswing.infrastructure.db import build_session_factory
from foodswing.infrastructure.health import check_database
from foodswing.infrastructure.repositories.contacts import \
    SqlAlchemyContactMessageRepository
from foodswing.infrastructure.repositories.moods import \
    SqlAlchemyMoodSelectionRepository
from foodswing.infrastructure.repositories.users import \
    SqlAlchemyUserRepository
from foodswing.interfaces.http.controllers.admin_controller import \
    AdminController
from foodswing.interfaces.http.controllers.auth_controller import \
    AuthController
from foodswing.interfaces.http.controllers.contact_controller import \
    ContactController
from foodswing.interfaces.http.controllers.misc_controller import \
    MiscController
from foodswing.interfaces.http.controllers.mood_controller import \
    MoodController
from foodswing.shared.config import AppConfig


class Container:
    """Wires configuration, repositories, use cases and controllers.

    The configuration and the engine are handed in explicitly so nothing below
    this object reads global configuration.
    """

    def __init__(self, config: AppConfig, engine: Engine) -> None:
        self.config = config
        self.engine = engine

    @cached_property
    def session_factory(self) -> scoped_session[Session]:
        return build_session_factory(self.engine)

    @cached_property
    def password_hasher(self) -> BcryptPasswordHasher:
        return BcryptPasswordHasher(rounds=self.config.auth.bcrypt_rounds)

    @cached_property
    def token_service(self) -> JwtTokenService:
        return JwtTokenService(
            secret=self.config.auth.jwt_secret,
            algorithm=self.config.auth.jwt_algorithm,
            ttl=timedelta(days=self.config.auth.token_ttl_days),
        )

    # Repositories

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.session_factory)

    @cached_property
    def mood_repository(self) -> SqlAlchemyMoodSelectionRepository:
        return SqlAlchemyMoodSelectionRepository(self.session_factory)

    @cached_property
    def contact_repository(self) -> SqlAlchemyContactMessageRepository:
        return SqlAlchemyContactMessageRepository(self.session_factory)

    # Use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def verify_session_use_case(self) -> VerifySessionUseCase:
        return VerifySessionUseCase(tokens=self.token_service)

    @cached_property
    def record_mood_use_case(self) -> RecordMoodUseCase:
        return RecordMoodUseCase(moods=self.mood_repository)

    @cached_property
    def list_mood_history_use_case(self) -> ListMoodHistoryUseCase:
        return ListMoodHistoryUseCase(moods=self.mood_repository)

    @cached_property
    def submit_contact_use_case(self) -> SubmitContactUseCase:
        return SubmitContactUseCase(contacts=self.contact_repository)

    @cached_property
    def list_contacts_use_case(self) -> ListContactsUseCase:
        return ListContactsUseCase(contacts=self.contact_repository)

    @cached_property
    def get_analytics_use_case(self) -> GetAnalyticsUseCase:
        return GetAnalyticsUseCase(
            users=self.user_repository,
            moods=self.mood_repository,
            contacts=self.contact_repository,
        )

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            verify_session=self.verify_session_use_case,
        )

    @cached_property
    def mood_controller(self) -> MoodController:
        return MoodController(
            record_mood=self.record_mood_use_case,
            list_history=self.list_mood_history_use_case,
            verify_session=self.verify_session_use_case,
        )

    @cached_property
    def contact_controller(self) -> ContactController:
        return ContactController(submit_contact=self.submit_contact_use_case)

    @cached_property
    def admin_controller(self) -> AdminController:
        return AdminController(
            list_contacts=self.list_contacts_use_case,
            get_analytics=self.get_analytics_use_case,
            verify_session=self.verify_session_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(database_probe=partial(check_database, self.engine))
