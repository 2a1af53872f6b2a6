"""Password hashing strategies."""

from __future__ import annotations

import bcrypt

from foodswing.domain.users.repositories import PasswordHasher

# bcrypt only looks at the first 72 bytes of the secret.
_BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


class BcryptPasswordHasher(PasswordHasher):
    def __init__(self, rounds: int = 10) -> None:
        self._rounds = rounds

    def hash(self, password: str) -> str:
        return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=self._rounds)).decode("ascii")

    def verify(self, password: str, hashed: str) -> bool:
        try:
            return bool(bcrypt.checkpw(_encode(password), hashed.encode("ascii")))
        except ValueError:
            return False
