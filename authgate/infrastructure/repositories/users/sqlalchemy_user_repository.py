# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from authgate.domain.users.entities import User as DomainUser
from authgate.domain.users.exceptions import UserAlreadyExistsError
from authgate.domain.users.repositories import UserRepository
from authgate.infrastructure.db.models import User
from authgate.infrastructure.db.session import session_scope
from authgate.infrastructure.exceptions import CredentialStoreError
from authgate.shared.logging import logger


def _to_domain(row: User) -> DomainUser:
    created_at = row.created_at
    # SQLite drops tzinfo on the way back
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=UTC)
    return DomainUser(
        id=row.id,
        username=row.username,
        email=row.email,
        password_hash=row.password_hash,
        created_at=created_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def find_by_username_or_email(self, username: str, email: str) -> DomainUser | None:
        stmt = select(User).where(or_(User.username == username, User.email == email)).limit(1)
        try:
            with session_scope() as session:
                row = session.scalars(stmt).first()
                return _to_domain(row) if row else None
        except SQLAlchemyError as exc:
            logger.error(f"users.find_by_username_or_email failed: {type(exc).__name__}")
            raise CredentialStoreError() from exc

    def find_by_username(self, username: str) -> DomainUser | None:
        stmt = select(User).where(User.username == username).limit(1)
        try:
            with session_scope() as session:
                row = session.scalars(stmt).first()
                return _to_domain(row) if row else None
        except SQLAlchemyError as exc:
            logger.error(f"users.find_by_username failed: {type(exc).__name__}")
            raise CredentialStoreError() from exc

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with session_scope() as session:
                row = User(
                    username=user.username,
                    email=user.email,
                    password_hash=user.password_hash,
                    created_at=user.created_at,
                )
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            logger.info("users.add: uniqueness violation")
            raise UserAlreadyExistsError() from exc
        except SQLAlchemyError as exc:
            logger.error(f"users.add failed: {type(exc).__name__}")
            raise CredentialStoreError() from exc
