"""Application – CredentialStore port and its in-memory adapter."""
from __future__ import annotations

import json
from typing import Protocol

from passlab.application.accounts.models import UserAccount
from passlab.kernel.errors import ConflictError, SerializationError

__all__ = ["CredentialStore", "InMemoryCredentialStore"]


class CredentialStore(Protocol):
    async def save(self, account: UserAccount) -> None: ...
    async def find_by_username(self, username: str) -> UserAccount | None: ...
    async def delete(self, username: str) -> bool: ...
    async def list_all(self) -> list[UserAccount]: ...
    async def count(self) -> int: ...
    async def clear(self) -> None: ...


class InMemoryCredentialStore:
    """Non-durable account store; usernames are unique case-insensitively."""

    def __init__(self) -> None:
        self._store: dict[str, UserAccount] = {}

    @staticmethod
    def _key(username: str) -> str:
        return username.strip().casefold()

    async def save(self, account: UserAccount) -> None:
        key = self._key(account.username)
        if key in self._store:
            raise ConflictError(f"Username '{account.username}' is already taken")
        self._store[key] = account

    async def find_by_username(self, username: str) -> UserAccount | None:
        return self._store.get(self._key(username))

    async def delete(self, username: str) -> bool:
        return self._store.pop(self._key(username), None) is not None

    async def list_all(self) -> list[UserAccount]:
        return list(self._store.values())

    async def count(self) -> int:
        return len(self._store)

    async def clear(self) -> None:
        self._store.clear()

    def export_json(self) -> str:
        """Dump every account (hash, salt and algorithm included) as a JSON list."""
        return json.dumps([a.to_dict() for a in self._store.values()], indent=2)

    def import_json(self, text: str) -> int:
        """Replace the store contents with accounts from :meth:`export_json` output."""
        try:
            data = json.loads(text)
        except (TypeError, ValueError) as exc:
            raise SerializationError(
                "Account export is not valid JSON", payload_type="UserAccount", cause=exc
            ) from exc
        if not isinstance(data, list):
            raise SerializationError("Account export must be a JSON list", payload_type="UserAccount")
        accounts = [UserAccount.from_dict(item) for item in data]
        self._store = {self._key(a.username): a for a in accounts}
        return len(self._store)
