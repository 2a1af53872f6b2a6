# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime

from foodswing.domain.exceptions import InvariantViolation

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass(slots=True, frozen=True)
class ContactMessage:
    """Message left through the public contact form."""

    id: int
    name: str
    email: str
    message: str
    created_at: datetime

    def __post_init__(self) -> None:
        for fld in ("name", "email", "message"):
            if not getattr(self, fld):
                raise InvariantViolation("field is required", field=fld)
        if not EMAIL_PATTERN.match(self.email):
            raise InvariantViolation("email is not valid", field="email")
