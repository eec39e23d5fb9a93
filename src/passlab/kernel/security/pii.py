"""Kernel security – keys that must never reach a log record in clear."""
from __future__ import annotations

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "password", "passwd", "plaintext", "confirm_password", "new_password",
    "secret", "token", "salt", "hash", "password_hash", "hashed_password",
    "authorization",
})

__all__ = ["DEFAULT_SENSITIVE_FIELDS"]
