# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from enum import Enum


class ValidationErrorType(str, Enum):
    MISSING = "missing"
    EMAIL_INVALID = "email_invalid"
    TOO_LONG = "string_too_long"


__all__ = ["ValidationErrorType"]
