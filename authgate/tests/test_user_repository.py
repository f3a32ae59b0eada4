from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime

import pytest
from sqlalchemy.exc import OperationalError

from authgate.domain.users.entities import User
from authgate.domain.users.exceptions import UserAlreadyExistsError
from authgate.infrastructure.db import ENGINE, Base
from authgate.infrastructure.exceptions import CredentialStoreError
from authgate.infrastructure.repositories.users import \
    sqlalchemy_user_repository
from authgate.infrastructure.repositories.users.sqlalchemy_user_repository import \
    SqlAlchemyUserRepository


@pytest.fixture(autouse=True)
def reset_database() -> Iterator[None]:
    Base.metadata.drop_all(bind=ENGINE)
    Base.metadata.create_all(bind=ENGINE)
    yield
    Base.metadata.drop_all(bind=ENGINE)


def _user(username: str, email: str) -> User:
    return User(
        id=0,
        username=username,
        email=email,
        password_hash="digest",
        created_at=datetime.now(UTC),
    )


def test_add_and_find() -> None:
    repo = SqlAlchemyUserRepository()

    created = repo.add(_user("alice", "a@x.com"))

    assert created.id > 0
    assert repo.find_by_username("alice") == created
    assert repo.find_by_username("bob") is None
    assert repo.find_by_username_or_email("someone", "a@x.com") == created
    assert repo.find_by_username_or_email("alice", "other@x.com") == created
    assert repo.find_by_username_or_email("bob", "b@x.com") is None
    assert created.created_at.tzinfo is not None


@pytest.mark.parametrize(("username", "email"), [("alice", "b@x.com"), ("bob", "a@x.com")])
def test_unique_constraints_raise_conflict(username: str, email: str) -> None:
    repo = SqlAlchemyUserRepository()
    repo.add(_user("alice", "a@x.com"))

    with pytest.raises(UserAlreadyExistsError):
        repo.add(_user(username, email))


def test_store_failure_maps_to_infrastructure_error(monkeypatch: pytest.MonkeyPatch) -> None:
    @contextmanager
    def broken_scope():
        raise OperationalError("SELECT 1", {}, Exception("database is down"))
        yield  # pragma: no cover

    monkeypatch.setattr(sqlalchemy_user_repository, "session_scope", broken_scope)
    repo = SqlAlchemyUserRepository()

    with pytest.raises(CredentialStoreError) as exc_info:
        repo.find_by_username("alice")

    assert exc_info.value.status == 500
