# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from authgate.shared.errors.base import InfrastructureError


class CredentialStoreError(InfrastructureError):
    def __init__(self, *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__("credential_store_unavailable", context=context)


class PasswordHashingError(InfrastructureError):
    def __init__(self, *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__("password_hashing_failed", context=context)


__all__ = ["CredentialStoreError", "PasswordHashingError"]
