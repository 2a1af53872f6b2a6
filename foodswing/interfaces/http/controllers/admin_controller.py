# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify

from foodswing.application.use_cases.admin.get_analytics import \
    GetAnalyticsUseCase
from foodswing.application.use_cases.contacts.list_contacts import \
    ListContactsUseCase
from foodswing.application.use_cases.users.verify_session import \
    VerifySessionUseCase
from foodswing.infrastructure.auth.session_middleware import (current_user,
                                                              require_auth)
from foodswing.interfaces.http.dto.admin import (AnalyticsDTO,
                                                 AnalyticsResponseDTO,
                                                 MoodStatDTO)
from foodswing.interfaces.http.dto.contacts import ContactDTO, ContactListDTO
from foodswing.shared.logging import logger


class AdminController:
    """Contact inbox and usage analytics.

    These routes only require a valid session. There is no admin role yet, so
    any signed-in user can read every contact message and the aggregates.
    """

    def __init__(
        self,
        *,
        list_contacts: ListContactsUseCase,
        get_analytics: GetAnalyticsUseCase,
        verify_session: VerifySessionUseCase,
    ) -> None:
        self._list_contacts = list_contacts
        self._get_analytics = get_analytics
        self._verify_session = verify_session

    def contacts(self) -> tuple[Response, int]:
        contacts = self._list_contacts.execute()
        logger.info(
            f"admin.contacts: returned {len(contacts)} messages to user={current_user().user_id}"
        )
        result = ContactListDTO(
            contacts=[
                ContactDTO(
                    id=c.id,
                    name=c.name,
                    email=c.email,
                    message=c.message,
                    created_at=c.created_at,
                )
                for c in contacts
            ]
        )
        return jsonify(result.to_json()), HTTPStatus.OK

    def analytics(self) -> tuple[Response, int]:
        stats = self._get_analytics.execute()
        logger.info(f"admin.analytics: requested by user={current_user().user_id}")
        result = AnalyticsResponseDTO(
            analytics=AnalyticsDTO(
                total_users=stats.total_users,
                total_mood_selections=stats.total_mood_selections,
                total_contacts=stats.total_contacts,
                mood_stats=[MoodStatDTO(mood=s.mood, count=s.count) for s in stats.mood_stats],
            )
        )
        return jsonify(result.to_json()), HTTPStatus.OK

    def as_blueprint(self) -> Blueprint:
        authed = require_auth(self._verify_session)
        bp = Blueprint("admin", __name__, url_prefix="/api/admin")
        bp.add_url_rule("/contacts", view_func=authed(self.contacts), methods=["GET"])
        bp.add_url_rule("/analytics", view_func=authed(self.analytics), methods=["GET"])
        return bp
