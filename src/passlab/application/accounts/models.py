"""Application – UserAccount: a username bound to its credential record."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from passlab.kernel.errors import SerializationError
from passlab.security.passwords import CredentialRecord

__all__ = ["UserAccount"]


@dataclasses.dataclass(frozen=True)
class UserAccount:
    """Stored account: username plus credential record, never the raw password."""

    username: str
    credential: CredentialRecord
    created_at: datetime = dataclasses.field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict[str, str]:
        return {
            "username": self.username,
            **self.credential.to_dict(),
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> UserAccount:
        if not isinstance(data, Mapping):
            raise SerializationError(
                f"Account must be an object, got {type(data).__name__}",
                payload_type=cls.__name__,
            )
        if "username" not in data:
            raise SerializationError("Account is missing field: username", payload_type=cls.__name__)
        if not isinstance(data["username"], str):
            raise SerializationError("Account username must be a string", payload_type=cls.__name__)
        kwargs: dict[str, Any] = {
            "username": data["username"],
            "credential": CredentialRecord.from_dict(data),
        }
        if data.get("created_at"):
            try:
                kwargs["created_at"] = datetime.fromisoformat(data["created_at"])
            except (TypeError, ValueError) as exc:
                raise SerializationError(
                    f"Invalid created_at: {data['created_at']!r}",
                    payload_type=cls.__name__,
                    cause=exc,
                ) from exc
        return cls(**kwargs)
