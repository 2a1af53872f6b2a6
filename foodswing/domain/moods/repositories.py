# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import MoodCount, MoodSelection


class MoodSelectionRepository(Protocol):
    def add(self, selection: MoodSelection) -> MoodSelection: ...
    def list_for_user(self, user_id: int, limit: int) -> Sequence[MoodSelection]: ...
    def count(self) -> int: ...
    def distribution(self) -> Sequence[MoodCount]: ...
