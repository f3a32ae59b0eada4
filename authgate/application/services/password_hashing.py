"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from authgate.domain.users.repositories import PasswordHasher
from authgate.infrastructure.exceptions import PasswordHashingError


class WerkzeugPasswordHasher(PasswordHasher):
    def __init__(self, *, method: str = "scrypt:32768:8:1", salt_length: int = 16) -> None:
        self._method = method
        self._salt_length = salt_length

    def hash(self, password: str) -> str:
        try:
            return str(
                generate_password_hash(
                    password, method=self._method, salt_length=self._salt_length
                )
            )
        except (ValueError, TypeError) as exc:
            raise PasswordHashingError(context={"operation": "hash"}) from exc

    def verify(self, password: str, hashed: str) -> bool:
        try:
            return bool(check_password_hash(hashed, password))
        except (ValueError, TypeError) as exc:
            raise PasswordHashingError(context={"operation": "verify"}) from exc
