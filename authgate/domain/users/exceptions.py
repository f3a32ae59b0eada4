# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from authgate.shared.errors.base import AuthError, ConflictError, ValidationError


class MissingRegistrationFieldsError(ValidationError):
    default_code = "missing_fields"
    default_message = "All fields are required"


class PasswordMismatchError(ValidationError):
    default_code = "password_mismatch"
    default_message = "Passwords do not match"


class MissingCredentialsError(ValidationError):
    default_code = "missing_credentials"
    default_message = "Username and password are required"


class UserAlreadyExistsError(ConflictError):
    default_code = "user_already_exists"
    default_message = "Username or email already exists"


class InvalidCredentialsError(AuthError):
    default_code = "invalid_credentials"
    default_message = "Invalid username or password"
