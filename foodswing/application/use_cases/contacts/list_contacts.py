# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from foodswing.domain.contacts.entities import ContactMessage
from foodswing.domain.contacts.repositories import ContactMessageRepository


class ListContactsUseCase:
    def __init__(self, *, contacts: ContactMessageRepository) -> None:
        self._contacts = contacts

    def execute(self) -> list[ContactMessage]:
        return list(self._contacts.list_all())


__all__ = ["ListContactsUseCase"]
