# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from authgate.domain.users.entities import Session
from authgate.domain.users.repositories import SessionStore
from authgate.shared.logging import logger


class InMemorySessionStore(SessionStore):
    """Process-lifetime session registry.

    Entries never expire and are lost on restart. Single-key dict
    operations are atomic under the GIL, so concurrent logins need no lock.
    """

    def __init__(self) -> None:
        self._sessions: dict[str, Session] = {}

    def get(self, session_id: str) -> Session | None:
        if not session_id:
            return None
        return self._sessions.get(session_id)

    def put(self, session: Session) -> None:
        self._sessions[session.session_id] = session
        logger.debug(f"sessions.put: user_id={session.user_id} total={len(self._sessions)}")

    def delete(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)

    def __len__(self) -> int:
        return len(self._sessions)
