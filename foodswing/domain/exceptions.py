# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from foodswing.shared.errors.base import DomainError


class InvariantViolation(DomainError):
    """An entity was built with values that break one of its rules."""

    code = "invariant_violation"

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message=message, context={"field": field} if field else None)
        self.field = field


__all__ = ["InvariantViolation"]
