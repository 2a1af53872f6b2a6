# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .contacts.entities import ContactMessage
from .exceptions import InvariantViolation
from .moods.entities import MoodCount, MoodSelection
from .users.entities import SessionClaims, User

__all__ = [
    "ContactMessage",
    "MoodCount",
    "MoodSelection",
    "SessionClaims",
    "User",
    "InvariantViolation",
]
