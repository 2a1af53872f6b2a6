# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.admin.get_analytics import Analytics, GetAnalyticsUseCase
from .use_cases.contacts.list_contacts import ListContactsUseCase
from .use_cases.contacts.submit_contact import SubmitContactUseCase
from .use_cases.moods.list_mood_history import ListMoodHistoryUseCase
from .use_cases.moods.record_mood import RecordMoodUseCase
from .use_cases.users.login_user import LoginUserUseCase
from .use_cases.users.register_user import RegisterUserUseCase
from .use_cases.users.verify_session import VerifySessionUseCase

__all__ = [
    "Analytics",
    "GetAnalyticsUseCase",
    "ListContactsUseCase",
    "ListMoodHistoryUseCase",
    "LoginUserUseCase",
    "RecordMoodUseCase",
    "RegisterUserUseCase",
    "SubmitContactUseCase",
    "VerifySessionUseCase",
]
