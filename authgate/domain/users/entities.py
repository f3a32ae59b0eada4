# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: int
    username: str
    email: str
    password_hash: str
    created_at: datetime


@dataclass(slots=True, frozen=True)
class Session:
    """Server-side record behind an opaque session identifier."""

    session_id: str
    user_id: int
    username: str
    email: str
    created_at: datetime
