"""Application – registration rules for usernames and passwords."""
from __future__ import annotations

import dataclasses
from typing import Any

from passlab.kernel.errors import ValidationError

__all__ = ["PasswordPolicy"]


@dataclasses.dataclass(frozen=True)
class PasswordPolicy:
    """Registration rules checked before anything is hashed."""

    min_username_length: int = 3
    min_password_length: int = 12

    def validate(self, username: str, password: str, confirm_password: str) -> None:
        """Raise :class:`ValidationError` listing every failed rule."""
        errors: list[dict[str, Any]] = []
        if not username or not username.strip():
            errors.append({"field": "username", "message": "Username is required"})
        elif len(username.strip()) < self.min_username_length:
            errors.append({
                "field": "username",
                "message": f"Username must be at least {self.min_username_length} characters",
            })
        if not password:
            errors.append({"field": "password", "message": "Password is required"})
        elif len(password) < self.min_password_length:
            errors.append({
                "field": "password",
                "message": f"Password must be at least {self.min_password_length} characters",
            })
        if password != confirm_password:
            errors.append({"field": "confirm_password", "message": "Passwords do not match"})
        if errors:
            raise ValidationError("Registration data is invalid", errors=errors)
