from __future__ import annotations

from datetime import UTC, datetime
from http import HTTPStatus

import pytest

from foodswing.domain import InvariantViolation
from foodswing.domain.contacts.entities import ContactMessage
from foodswing.domain.moods.entities import MoodSelection
from foodswing.domain.users.exceptions import (DuplicateEmailError,
                                               InvalidCredentialsError,
                                               InvalidTokenError,
                                               MissingTokenError)
from foodswing.shared.errors import DomainError


def test_blank_mood_is_rejected() -> None:
    with pytest.raises(InvariantViolation) as exc_info:
        MoodSelection(id=0, user_id=1, mood="   ", created_at=datetime.now(UTC))

    assert exc_info.value.field == "mood"
    assert exc_info.value.status == HTTPStatus.BAD_REQUEST


def test_contact_with_bad_email_names_the_field() -> None:
    with pytest.raises(InvariantViolation) as exc_info:
        ContactMessage(
            id=0, name="Ann", email="nope", message="hi", created_at=datetime.now(UTC)
        )

    assert exc_info.value.field == "email"
    assert exc_info.value.to_dict()["context"] == {"field": "email"}


@pytest.mark.parametrize(
    "error",
    [
        InvariantViolation("mood must not be empty", field="mood"),
        DuplicateEmailError(),
        InvalidCredentialsError(),
        MissingTokenError(),
        InvalidTokenError(),
    ],
)
def test_domain_errors_share_one_base(error: Exception) -> None:
    assert isinstance(error, DomainError)
