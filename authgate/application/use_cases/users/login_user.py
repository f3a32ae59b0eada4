# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime

from authgate.domain.users.entities import Session, User
from authgate.domain.users.exceptions import (InvalidCredentialsError,
                                              MissingCredentialsError)
from authgate.domain.users.repositories import (PasswordHasher, SessionStore,
                                                UserRepository)
from authgate.shared.logging import logger


def generate_session_id() -> str:
    return secrets.token_urlsafe(32)


@dataclass(slots=True, frozen=True)
class LoginResult:
    user: User
    session: Session


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        sessions: SessionStore,
        password_hasher: PasswordHasher,
        session_id_factory: Callable[[], str] = generate_session_id,
    ) -> None:
        self._users = users
        self._sessions = sessions
        self._password_hasher = password_hasher
        self._session_id_factory = session_id_factory

    def execute(self, username: str | None, password: str | None) -> LoginResult:
        username = (username or "").strip()
        if not username or not password:
            raise MissingCredentialsError()

        user = self._users.find_by_username(username)
        # Same error for unknown user and wrong password.
        if user is None or not self._password_hasher.verify(password, user.password_hash):
            logger.info("auth.login: rejected credentials")
            raise InvalidCredentialsError()

        session = Session(
            session_id=self._session_id_factory(),
            user_id=user.id,
            username=user.username,
            email=user.email,
            created_at=datetime.now(UTC),
        )
        self._sessions.put(session)
        logger.info(f"auth.login: ok user_id={user.id}")
        return LoginResult(user=user, session=session)
