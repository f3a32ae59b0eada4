# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import Session, User


class UserRepository(Protocol):
    """Credential store. Uniqueness of username and email is enforced here."""

    def find_by_username_or_email(self, username: str, email: str) -> User | None: ...
    def find_by_username(self, username: str) -> User | None: ...
    def add(self, user: User) -> User: ...


class SessionStore(Protocol):
    def get(self, session_id: str) -> Session | None: ...
    def put(self, session: Session) -> None: ...
    def delete(self, session_id: str) -> None: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...
