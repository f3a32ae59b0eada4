# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _as_bool(value: str | bool) -> bool:
    if isinstance(value, str):
        return value.lower() in ("1", "true", "yes")
    return bool(value)


_NESTED_SETTINGS = SettingsConfigDict(
    env_file=".env",
    env_file_encoding="utf-8",
    extra="ignore",
    validate_by_name=True,
)


class DatabaseConfig(BaseSettings):
    url: str = Field("sqlite:///authgate.db", alias="DATABASE_URL")
    pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")

    model_config = _NESTED_SETTINGS


class HashingConfig(BaseSettings):
    # werkzeug method string; the work factor is part of it and stays fixed
    method: str = Field("scrypt:32768:8:1", alias="PASSWORD_HASH_METHOD")
    salt_length: int = Field(16, ge=8, alias="PASSWORD_SALT_LENGTH")

    model_config = _NESTED_SETTINGS


class SecurityConfig(BaseSettings):
    session_cookie_name: str = Field("auth_session", alias="SESSION_COOKIE_NAME")
    cookie_secure: bool = Field(False, alias="COOKIE_SECURE")
    cookie_samesite: str = Field("Strict", alias="COOKIE_SAMESITE")
    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    model_config = _NESTED_SETTINGS

    @field_validator("cookie_secure", "enable_hsts", mode="before")
    @classmethod
    def _parse_bool(cls, value: str | bool) -> bool:
        return _as_bool(value)


class WelcomeConfig(BaseSettings):
    # Renders username/email without escaping. Legacy compatibility only.
    raw_html: bool = Field(False, alias="WELCOME_RAW_HTML")
    require_session: bool = Field(False, alias="WELCOME_REQUIRE_SESSION")

    model_config = _NESTED_SETTINGS

    @field_validator("raw_html", "require_session", mode="before")
    @classmethod
    def _parse_bool(cls, value: str | bool) -> bool:
        return _as_bool(value)


def _database_config_factory() -> DatabaseConfig:
    return DatabaseConfig()  # type: ignore[call-arg]


def _hashing_config_factory() -> HashingConfig:
    return HashingConfig()  # type: ignore[call-arg]


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig()  # type: ignore[call-arg]


def _welcome_config_factory() -> WelcomeConfig:
    return WelcomeConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    secret_key: str = Field("dev", alias="SECRET_KEY")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")

    database: DatabaseConfig = Field(default_factory=_database_config_factory)
    hashing: HashingConfig = Field(default_factory=_hashing_config_factory)
    security: SecurityConfig = Field(default_factory=_security_config_factory)
    welcome: WelcomeConfig = Field(default_factory=_welcome_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        validate_assignment=True,
        extra="ignore",
    )

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        return _as_bool(value)

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self

        if self.secret_key in ("dev", "development", "test", ""):
            print(
                "\nCRITICAL SECURITY ERROR: Insecure SECRET_KEY detected in production!\n"
                "   SECRET_KEY must be a strong random value in production.\n",
                file=sys.stderr,
            )
            sys.exit(1)

        warnings = []
        if not self.security.cookie_secure:
            warnings.append("Cookie Secure flag is DISABLED (use HTTPS!)")
        if self.welcome.raw_html:
            warnings.append("Welcome page renders user input WITHOUT escaping")
        if not self.security.enable_hsts:
            warnings.append("HSTS is DISABLED (recommended for HTTPS)")

        if warnings:
            print("\nPRODUCTION SECURITY WARNINGS:", file=sys.stderr)
            for warning in warnings:
                print(f"   {warning}", file=sys.stderr)

        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = [
    "AppConfig",
    "DatabaseConfig",
    "HashingConfig",
    "SecurityConfig",
    "WelcomeConfig",
    "load_config",
]
