# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from foodswing.domain.users.entities import User
from foodswing.domain.users.exceptions import DuplicateEmailError
from foodswing.domain.users.repositories import PasswordHasher, TokenIssuer, UserRepository
from foodswing.shared.errors.base import ValidationError


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenIssuer,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, name: str, email: str, password: str) -> tuple[User, str]:
        if not name or not email or not password:
            raise ValidationError()
        existing = self._users.find_by_email(email)
        if existing:
            raise DuplicateEmailError()
        now = datetime.now(UTC)
        hashed = self._password_hasher.hash(password)
        user = User(id=0, name=name, email=email, password_hash=hashed, created_at=now)
        # A concurrent signup can still win the race; the repository maps the
        # unique-index violation to DuplicateEmailError.
        persisted = self._users.add(user)
        token = self._tokens.issue(persisted)
        return persisted, token
