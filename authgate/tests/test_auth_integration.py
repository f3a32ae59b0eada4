from __future__ import annotations

from collections.abc import Iterator

import pytest
from flask import Flask

from authgate.app import create_app
from authgate.infrastructure.container import Container
from authgate.infrastructure.db import ENGINE, Base, SessionLocal
from authgate.infrastructure.db.models import User
from authgate.shared.config.settings import (AppConfig, SecurityConfig,
                                             WelcomeConfig)

_ALICE = {
    "username": "alice",
    "email": "a@x.com",
    "password": "Secret1!",
    "confirm-password": "Secret1!",
}


@pytest.fixture(autouse=True)
def reset_database() -> Iterator[None]:
    Base.metadata.drop_all(bind=ENGINE)
    Base.metadata.create_all(bind=ENGINE)
    yield
    Base.metadata.drop_all(bind=ENGINE)


@pytest.fixture()
def app() -> Flask:
    return create_app(Container())


def test_register_login_welcome_flow(app: Flask) -> None:
    with app.test_client() as client:
        register = client.post("/register", json=_ALICE)
        assert register.status_code == 200
        assert register.get_json()["success"] is True

        login = client.post("/login", json={"username": "alice", "password": "Secret1!"})
        assert login.status_code == 200
        assert login.get_json() == {
            "success": True,
            "username": "alice",
            "email": "a@x.com",
            "message": "Login successful",
        }
        assert client.get_cookie("auth_session") is not None

        welcome = client.get("/welcome")
        assert welcome.status_code == 200
        body = welcome.get_data(as_text=True)
        assert "alice" in body
        assert "a@x.com" in body

    session = SessionLocal()
    try:
        row = session.query(User).one()
        assert row.username == "alice"
        assert row.password_hash != "Secret1!"
    finally:
        session.close()


def test_duplicate_registration_is_rejected(app: Flask) -> None:
    with app.test_client() as client:
        assert client.post("/register", json=_ALICE).status_code == 200

        same_email = client.post("/register", json={**_ALICE, "username": "bob"})
        same_username = client.post("/register", json={**_ALICE, "email": "b@x.com"})

    for response in (same_email, same_username):
        assert response.status_code == 400
        assert response.get_json()["error"] == "Username or email already exists"


def test_registration_validation_errors(app: Flask) -> None:
    with app.test_client() as client:
        missing = client.post("/register", json={"username": "alice"})
        mismatch = client.post("/register", json={**_ALICE, "confirm-password": "nope"})

    assert missing.status_code == 400
    assert missing.get_json()["error"] == "All fields are required"
    assert mismatch.status_code == 400
    assert mismatch.get_json()["error"] == "Passwords do not match"


def test_bad_credentials_share_one_message(app: Flask) -> None:
    with app.test_client() as client:
        client.post("/register", json=_ALICE)

        wrong_password = client.post("/login", json={"username": "alice", "password": "wrong"})
        unknown_user = client.post("/login", json={"username": "nobody", "password": "Secret1!"})
        missing = client.post("/login", json={"username": "alice"})

    assert wrong_password.status_code == 400
    assert wrong_password.get_json() == unknown_user.get_json()
    assert wrong_password.get_json()["error"] == "Invalid username or password"
    assert missing.get_json()["error"] == "Username and password are required"


def test_form_encoded_login_with_untrimmed_username(app: Flask) -> None:
    with app.test_client() as client:
        client.post("/register", data={**_ALICE, "username": " alice "})
        login = client.post("/login", data={"username": "alice ", "password": "Secret1!"})

    assert login.status_code == 200
    assert login.get_json()["username"] == "alice"


def test_security_headers_are_set(app: Flask) -> None:
    with app.test_client() as client:
        response = client.get("/")

    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["X-Content-Type-Options"] == "nosniff"


def test_container_config_drives_cookie_and_welcome() -> None:
    config = AppConfig(
        security=SecurityConfig(SESSION_COOKIE_NAME="sid", ENABLE_HSTS=True),
        welcome=WelcomeConfig(WELCOME_REQUIRE_SESSION=True),
    )
    app = create_app(Container(config))

    with app.test_client() as client:
        client.post("/register", json=_ALICE)
        login = client.post("/login", json={"username": "alice", "password": "Secret1!"})
        welcome = client.get("/welcome")

    assert login.status_code == 200
    assert login.headers["Set-Cookie"].startswith("sid=")
    assert welcome.status_code == 200
    assert "alice" in welcome.get_data(as_text=True)
    assert "Strict-Transport-Security" in welcome.headers


def test_long_password_registers_and_logs_in(app: Flask) -> None:
    password = "p" * 200

    with app.test_client() as client:
        register = client.post(
            "/register",
            json={**_ALICE, "password": password, "confirm-password": password},
        )
        login = client.post("/login", json={"username": "alice", "password": password})

    assert register.status_code == 200
    assert login.status_code == 200
