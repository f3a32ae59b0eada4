# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .users.entities import Session, User
from .users.exceptions import (InvalidCredentialsError,
                               MissingCredentialsError,
                               MissingRegistrationFieldsError,
                               PasswordMismatchError, UserAlreadyExistsError)

__all__ = [
    "InvalidCredentialsError",
    "MissingCredentialsError",
    "MissingRegistrationFieldsError",
    "PasswordMismatchError",
    "Session",
    "User",
    "UserAlreadyExistsError",
]
