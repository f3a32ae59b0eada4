# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from authgate.application.services.password_hashing import \
    WerkzeugPasswordHasher
from authgate.application.use_cases.users.login_user import LoginUserUseCase
from authgate.application.use_cases.users.register_user import \
    RegisterUserUseCase
from authgate.infrastructure.repositories.users.sqlalchemy_user_repository import \
    SqlAlchemyUserRepository
from authgate.infrastructure.sessions import InMemorySessionStore
from authgate.interfaces.http.controllers.auth_controller import AuthController
from authgate.interfaces.http.controllers.pages_controller import \
    PagesController
from authgate.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config or load_config()

    @property
    def config(self) -> AppConfig:
        return self._config

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(
            method=self._config.hashing.method,
            salt_length=self._config.hashing.salt_length,
        )

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository()

    @cached_property
    def session_store(self) -> InMemorySessionStore:
        return InMemorySessionStore()

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            sessions=self.session_store,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            security=self._config.security,
        )

    @cached_property
    def pages_controller(self) -> PagesController:
        return PagesController(
            sessions=self.session_store,
            welcome=self._config.welcome,
            security=self._config.security,
        )


container = Container()
