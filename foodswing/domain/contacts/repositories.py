# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import ContactMessage


class ContactMessageRepository(Protocol):
    def add(self, contact: ContactMessage) -> ContactMessage: ...
    def list_all(self) -> Sequence[ContactMessage]: ...
    def count(self) -> int: ...
