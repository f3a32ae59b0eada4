# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from authgate.domain.users.entities import User
from authgate.domain.users.exceptions import (MissingRegistrationFieldsError,
                                              PasswordMismatchError,
                                              UserAlreadyExistsError)
from authgate.domain.users.repositories import PasswordHasher, UserRepository
from authgate.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(
        self,
        username: str | None,
        email: str | None,
        password: str | None,
        confirm_password: str | None,
    ) -> User:
        username = (username or "").strip()
        email = (email or "").strip()
        if not (username and email and password and confirm_password):
            raise MissingRegistrationFieldsError()
        if password != confirm_password:
            raise PasswordMismatchError()

        # Advisory only; the store's unique constraints are authoritative.
        if self._users.find_by_username_or_email(username, email):
            raise UserAlreadyExistsError()

        hashed = self._password_hasher.hash(password)
        user = User(
            id=0,
            username=username,
            email=email,
            password_hash=hashed,
            created_at=datetime.now(UTC),
        )
        persisted = self._users.add(user)
        logger.info(f"auth.register: created user_id={persisted.id}")
        return persisted
