"""CredentialRecord – the persisted output of a hash operation."""
from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from typing import Any

from passlab.kernel.errors import SerializationError, ValidationError
from passlab.security.passwords.algorithms import Algorithm

__all__ = ["CredentialRecord"]

_FIELDS = ("hash", "salt", "algorithm")


@dataclasses.dataclass(frozen=True)
class CredentialRecord:
    """``(hash, salt, algorithm)`` triple; never stores the plaintext password.

    ``hash`` is lowercase hex for digest algorithms and bcrypt's own modular
    crypt string (``$2b$10$...``) for :attr:`Algorithm.BCRYPT`. ``salt`` is the
    hex salt appended to the password before digesting, and is always empty
    for self-salting algorithms.
    """

    hash: str
    salt: str
    algorithm: Algorithm

    def __post_init__(self) -> None:
        for name in ("hash", "salt"):
            if not isinstance(getattr(self, name), str):
                raise ValidationError(
                    f"Credential {name} must be a string",
                    errors=[{"field": name, "message": "must be a string"}],
                )
        algorithm = Algorithm.parse(self.algorithm)
        object.__setattr__(self, "algorithm", algorithm)
        if not self.hash:
            raise ValidationError(
                "Credential hash must not be empty",
                errors=[{"field": "hash", "message": "empty"}],
            )
        if algorithm.self_salting and self.salt:
            raise ValidationError(
                f"{algorithm} records embed their salt; salt field must be empty",
                errors=[{"field": "salt", "message": "must be empty"}],
            )
        if not algorithm.self_salting and not self.salt:
            raise ValidationError(
                f"{algorithm} records require a salt",
                errors=[{"field": "salt", "message": "required"}],
            )

    def __repr__(self) -> str:
        return f"CredentialRecord(algorithm={self.algorithm.value!r}, hash='***', salt='***')"

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, str]:
        return {"hash": self.hash, "salt": self.salt, "algorithm": self.algorithm.value}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CredentialRecord:
        """Rebuild a record from :meth:`to_dict` output; extra keys are ignored."""
        if not isinstance(data, Mapping):
            raise SerializationError(
                f"Credential record must be a mapping, got {type(data).__name__}",
                payload_type=cls.__name__,
            )
        missing = [name for name in _FIELDS if name not in data]
        if missing:
            raise SerializationError(
                f"Credential record is missing field(s): {', '.join(missing)}",
                payload_type=cls.__name__,
            )
        wrong = [name for name in _FIELDS if not isinstance(data[name], str)]
        if wrong:
            raise SerializationError(
                f"Credential record field(s) must be strings: {', '.join(wrong)}",
                payload_type=cls.__name__,
            )
        return cls(hash=data["hash"], salt=data["salt"], algorithm=data["algorithm"])

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str | bytes) -> CredentialRecord:
        try:
            data = json.loads(text)
        except (TypeError, ValueError) as exc:
            raise SerializationError(
                "Credential record is not valid JSON",
                payload_type=cls.__name__,
                cause=exc,
            ) from exc
        if not isinstance(data, dict):
            raise SerializationError(
                "Credential record JSON must be an object",
                payload_type=cls.__name__,
            )
        return cls.from_dict(data)
