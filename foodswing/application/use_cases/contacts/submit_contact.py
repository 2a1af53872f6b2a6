# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from foodswing.domain.contacts.entities import ContactMessage
from foodswing.domain.contacts.repositories import ContactMessageRepository
from foodswing.domain.exceptions import InvariantViolation
from foodswing.shared.errors.base import ValidationError


class SubmitContactUseCase:
    def __init__(self, *, contacts: ContactMessageRepository) -> None:
        self._contacts = contacts

    def execute(self, name: str, email: str, message: str) -> ContactMessage:
        try:
            contact = ContactMessage(
                id=0,
                name=name,
                email=email,
                message=message,
                created_at=datetime.now(UTC),
            )
        except InvariantViolation as exc:
            if exc.field == "email" and email:
                raise ValidationError(message="Please provide a valid email address") from exc
            raise ValidationError(message="Please provide all fields") from exc
        return self._contacts.add(contact)
