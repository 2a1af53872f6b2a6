# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify
from pydantic import ValidationError

from foodswing.application.use_cases.moods.list_mood_history import \
    ListMoodHistoryUseCase
from foodswing.application.use_cases.moods.record_mood import \
    RecordMoodUseCase
from foodswing.application.use_cases.users.verify_session import \
    VerifySessionUseCase
from foodswing.infrastructure.audit import AuditAction, audit_log
from foodswing.infrastructure.auth.session_middleware import (current_user,
                                                              require_auth)
from foodswing.interfaces.http.dto.base import SuccessDTO
from foodswing.interfaces.http.dto.moods import (MoodEntryDTO,
                                                 MoodHistoryDTO,
                                                 MoodSelectRequestDTO)
from foodswing.interfaces.http.utils import json_body
from foodswing.shared.errors.validation import raise_validation_error
from foodswing.shared.logging import logger


class MoodController:
    def __init__(
        self,
        *,
        record_mood: RecordMoodUseCase,
        list_history: ListMoodHistoryUseCase,
        verify_session: VerifySessionUseCase,
    ) -> None:
        self._record_mood = record_mood
        self._list_history = list_history
        self._verify_session = verify_session

    def select(self) -> tuple[Response, int]:
        try:
            dto = MoodSelectRequestDTO.model_validate(json_body())
        except ValidationError as exc:
            raise_validation_error(exc, "Please provide a mood")

        user = current_user()
        selection = self._record_mood.execute(user.user_id, dto.mood)
        audit_log(
            AuditAction.MOOD_SELECTED,
            user_id=user.user_id,
            details={"mood": selection.mood},
        )
        return jsonify(SuccessDTO(message="Mood tracked successfully").to_json()), HTTPStatus.OK

    def history(self) -> tuple[Response, int]:
        user = current_user()
        entries = self._list_history.execute(user.user_id)
        logger.info(f"mood.history: user={user.user_id} returned {len(entries)} entries")
        result = MoodHistoryDTO(
            history=[
                MoodEntryDTO(
                    id=entry.id,
                    user_id=entry.user_id,
                    mood=entry.mood,
                    timestamp=entry.created_at,
                )
                for entry in entries
            ]
        )
        return jsonify(result.to_json()), HTTPStatus.OK

    def as_blueprint(self) -> Blueprint:
        authed = require_auth(self._verify_session)
        bp = Blueprint("mood", __name__, url_prefix="/api/mood")
        bp.add_url_rule("/select", view_func=authed(self.select), methods=["POST"])
        bp.add_url_rule("/history", view_func=authed(self.history), methods=["GET"])
        return bp
