from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from foodswing.application.use_cases.admin.get_analytics import GetAnalyticsUseCase
from foodswing.application.use_cases.contacts.list_contacts import ListContactsUseCase
from foodswing.application.use_cases.contacts.submit_contact import SubmitContactUseCase
from foodswing.application.use_cases.moods.list_mood_history import ListMoodHistoryUseCase
from foodswing.application.use_cases.moods.record_mood import RecordMoodUseCase
from foodswing.domain.moods.entities import HISTORY_LIMIT, MoodCount, MoodSelection
from foodswing.domain.users.entities import User
from foodswing.shared.errors.base import ValidationError
from foodswing.tests.fakes import (InMemoryContactMessageRepository,
                                   InMemoryMoodSelectionRepository,
                                   InMemoryUserRepository)


@pytest.fixture()
def moods() -> InMemoryMoodSelectionRepository:
    return InMemoryMoodSelectionRepository()


@pytest.fixture()
def contacts() -> InMemoryContactMessageRepository:
    return InMemoryContactMessageRepository()


def test_record_mood_appends_selection(moods: InMemoryMoodSelectionRepository) -> None:
    selection = RecordMoodUseCase(moods=moods).execute(1, "happy")

    assert selection.id == 1
    assert selection.mood == "happy"
    assert moods.count() == 1


def test_record_mood_accepts_labels_outside_picker(moods: InMemoryMoodSelectionRepository) -> None:
    RecordMoodUseCase(moods=moods).execute(1, "nostalgic")

    assert moods.rows[0].mood == "nostalgic"


@pytest.mark.parametrize("mood", ["", "   "])
def test_record_mood_rejects_empty(moods: InMemoryMoodSelectionRepository, mood: str) -> None:
    with pytest.raises(ValidationError) as exc_info:
        RecordMoodUseCase(moods=moods).execute(1, mood)

    assert exc_info.value.message == "Please provide a mood"
    assert moods.count() == 0


def test_history_is_capped_and_newest_first(moods: InMemoryMoodSelectionRepository) -> None:
    start = datetime(2024, 1, 1, tzinfo=UTC)
    for i in range(HISTORY_LIMIT + 15):
        moods.add(
            MoodSelection(id=0, user_id=1, mood=f"m{i}", created_at=start + timedelta(minutes=i))
        )
    moods.add(MoodSelection(id=0, user_id=2, mood="other", created_at=start + timedelta(days=9)))

    history = ListMoodHistoryUseCase(moods=moods).execute(1)

    assert len(history) == HISTORY_LIMIT == 50
    assert history[0].mood == f"m{HISTORY_LIMIT + 14}"
    assert all(e.user_id == 1 for e in history)
    stamps = [e.created_at for e in history]
    assert stamps == sorted(stamps, reverse=True)


def test_history_for_user_without_selections_is_empty(
    moods: InMemoryMoodSelectionRepository,
) -> None:
    assert ListMoodHistoryUseCase(moods=moods).execute(42) == []


def test_submit_contact_success(contacts: InMemoryContactMessageRepository) -> None:
    contact = SubmitContactUseCase(contacts=contacts).execute("Ann", "ann@x.com", "Hi!")

    assert contact.id == 1
    assert contacts.count() == 1


@pytest.mark.parametrize(
    ("name", "email", "message", "expected"),
    [
        ("", "ann@x.com", "Hi", "Please provide all fields"),
        ("Ann", "", "Hi", "Please provide all fields"),
        ("Ann", "ann@x.com", "", "Please provide all fields"),
        ("Ann", "not-an-email", "Hi", "Please provide a valid email address"),
        ("Ann", "ann@x", "Hi", "Please provide a valid email address"),
    ],
)
def test_submit_contact_validation(
    contacts: InMemoryContactMessageRepository,
    name: str,
    email: str,
    message: str,
    expected: str,
) -> None:
    with pytest.raises(ValidationError) as exc_info:
        SubmitContactUseCase(contacts=contacts).execute(name, email, message)

    assert exc_info.value.message == expected
    assert contacts.count() == 0


def test_list_contacts_newest_first(contacts: InMemoryContactMessageRepository) -> None:
    submit = SubmitContactUseCase(contacts=contacts)
    first = submit.execute("Ann", "ann@x.com", "first")
    second = submit.execute("Bob", "bob@x.com", "second")

    listed = ListContactsUseCase(contacts=contacts).execute()

    assert [c.id for c in listed] == [second.id, first.id]


def test_analytics_counts_and_distribution(
    moods: InMemoryMoodSelectionRepository, contacts: InMemoryContactMessageRepository
) -> None:
    users = InMemoryUserRepository()
    for i in range(3):
        users.add(
            User(
                id=0,
                name=f"u{i}",
                email=f"u{i}@x.com",
                password_hash="h",
                created_at=datetime.now(UTC),
            )
        )
    record = RecordMoodUseCase(moods=moods)
    for mood in ["sad", "happy", "happy", "angry", "sad", "happy"]:
        record.execute(1, mood)
    SubmitContactUseCase(contacts=contacts).execute("Ann", "ann@x.com", "Hi")

    stats = GetAnalyticsUseCase(users=users, moods=moods, contacts=contacts).execute()

    assert stats.total_users == 3
    assert stats.total_mood_selections == 6
    assert stats.total_contacts == 1
    assert stats.mood_stats == [
        MoodCount(mood="happy", count=3),
        MoodCount(mood="sad", count=2),
        MoodCount(mood="angry", count=1),
    ]
