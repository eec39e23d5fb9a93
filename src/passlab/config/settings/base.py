"""Config settings – Settings base class and ``PREFIX_FIELD`` naming."""
from __future__ import annotations

import dataclasses

from passlab.kernel.errors import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base for env-backed settings dataclasses.

    Each field ``name`` maps to the variable ``<_prefix>_<NAME>``. Subclasses
    check their values in :meth:`_validate`, which runs after construction.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Per-field range checks; report failures with :meth:`_reject`."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def _reject(self, field_name: str, reason: str) -> None:
        raise InvalidSettingValueError(field_name, getattr(self, field_name), reason)


__all__ = ["Settings"]
