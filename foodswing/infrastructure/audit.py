# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from enum import Enum
from typing import Any

from foodswing.shared.logging import logger


class AuditAction(str, Enum):
    # Authentication
    SIGNUP = "signup"
    SIGNUP_FAILED = "signup_failed"
    LOGIN_SUCCESS = "login_success"
    LOGIN_FAILED = "login_failed"

    # Activity
    MOOD_SELECTED = "mood_selected"
    CONTACT_SUBMITTED = "contact_submitted"


class AuditLogger:
    @staticmethod
    def log(
        action: AuditAction,
        user_id: int | None = None,
        ip_address: str | None = None,
        details: dict[str, Any] | None = None,
        success: bool = True,
    ) -> None:
        safe_details = _sanitize_details(details) if details else {}

        log_message = (
            f"AUDIT: {action.value} | "
            f"user_id={user_id} | "
            f"ip={ip_address} | "
            f"success={success}"
        )

        if safe_details:
            log_message += f" | details={safe_details}"

        if success:
            logger.info(log_message)
        else:
            logger.warning(log_message)


def _sanitize_details(details: dict[str, Any]) -> dict[str, Any]:
    sensitive_keys = {"password", "token", "secret", "key"}

    sanitized = {}
    for key, value in details.items():
        key_lower = key.lower()

        if any(sensitive in key_lower for sensitive in sensitive_keys):
            sanitized[key] = "***REDACTED***"
        else:
            sanitized[key] = value

    return sanitized


audit = AuditLogger()


def audit_log(
    action: AuditAction,
    user_id: int | None = None,
    ip_address: str | None = None,
    details: dict[str, Any] | None = None,
    success: bool = True,
) -> None:
    audit.log(action, user_id, ip_address, details, success)


__all__ = [
    "AuditAction",
    "AuditLogger",
    "audit",
    "audit_log",
]
