# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify
from pydantic import ValidationError

from foodswing.application.use_cases.contacts.submit_contact import \
    SubmitContactUseCase
from foodswing.infrastructure.audit import AuditAction, audit_log
from foodswing.interfaces.http.dto.base import SuccessDTO
from foodswing.interfaces.http.dto.contacts import ContactRequestDTO
from foodswing.interfaces.http.utils import get_client_ip, json_body
from foodswing.shared.errors.validation import raise_validation_error


class ContactController:
    def __init__(self, *, submit_contact: SubmitContactUseCase) -> None:
        self._submit_contact = submit_contact

    def submit(self) -> tuple[Response, int]:
        try:
            dto = ContactRequestDTO.model_validate(json_body())
        except ValidationError as exc:
            raise_validation_error(exc, "Please provide all fields")

        contact = self._submit_contact.execute(dto.name, dto.email, dto.message)
        audit_log(
            AuditAction.CONTACT_SUBMITTED,
            ip_address=get_client_ip(),
            details={"contact_id": contact.id},
        )
        payload = SuccessDTO(
            message="Thank you for your message! We'll get back to you soon. 📧"
        ).to_json()
        return jsonify(payload), HTTPStatus.OK

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("contact", __name__, url_prefix="/api")
        bp.add_url_rule("/contact", view_func=self.submit, methods=["POST"])
        return bp
