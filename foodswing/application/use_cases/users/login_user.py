# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from foodswing.domain.users.entities import User
from foodswing.domain.users.exceptions import InvalidCredentialsError
from foodswing.domain.users.repositories import PasswordHasher, TokenIssuer, UserRepository
from foodswing.shared.errors.base import ValidationError


class LoginUserUseCase:
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
        # Unknown emails are checked against this so both paths pay for a hash.
        self._dummy_hash = password_hasher.hash("foodswing-unknown-user")

    def execute(self, email: str, password: str) -> tuple[User, str]:
        if not email or not password:
            raise ValidationError(message="Please provide email and password")

        user = self._users.find_by_email(email)
        if user is None:
            self._password_hasher.verify(password, self._dummy_hash)
            raise InvalidCredentialsError()

        if not self._password_hasher.verify(password, user.password_hash):
            raise InvalidCredentialsError()

        return user, self._tokens.issue(user)
