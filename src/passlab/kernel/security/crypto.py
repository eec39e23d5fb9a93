"""Kernel security – PasswordHasher and SaltSource ports."""
from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from passlab.security.passwords.algorithms import Algorithm
    from passlab.security.passwords.record import CredentialRecord


class PasswordHasher(abc.ABC):
    """Port: one-way, algorithm-tagged password hashing."""

    @abc.abstractmethod
    async def hash(
        self, password: str, algorithm: Algorithm | str | None = None
    ) -> CredentialRecord: ...

    @abc.abstractmethod
    async def verify(self, password: str, record: CredentialRecord) -> bool: ...


class SaltSource(Protocol):
    """Port: produce ``length_bytes`` of secure random salt, hex-encoded."""

    def __call__(self, length_bytes: int) -> str: ...


__all__ = ["PasswordHasher", "SaltSource"]
