# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import SessionClaims, User


class UserRepository(Protocol):
    def find_by_email(self, email: str) -> User | None: ...
    def find_by_id(self, user_id: int) -> User | None: ...
    def add(self, user: User) -> User: ...
    def count(self) -> int: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenIssuer(Protocol):
    def issue(self, user: User) -> str: ...
    def verify(self, token: str) -> SessionClaims: ...
