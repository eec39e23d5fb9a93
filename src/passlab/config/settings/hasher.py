"""Config settings – HasherSettings."""
from __future__ import annotations

import dataclasses
import logging

from passlab.config.settings.base import Settings
from passlab.kernel.errors import UnsupportedAlgorithmError

_MIN_BCRYPT_ROUNDS = 4
_MAX_BCRYPT_ROUNDS = 31
_MD5_MODES = ("legacy-sha256", "md5")


@dataclasses.dataclass
class HasherSettings(Settings):
    """Tunables for :class:`~passlab.security.passwords.DigestPasswordHasher`.

    Read from ``PASSLAB_*`` environment variables by
    :class:`~passlab.config.settings.loaders.EnvSettingsLoader`.
    """

    _prefix: dataclasses.ClassVar[str] = "PASSLAB"

    bcrypt_rounds: int = 10
    salt_bytes: int = 32
    md5_mode: str = "legacy-sha256"
    default_algorithm: str = "SHA-256"
    log_level: str = "INFO"
    json_logs: bool = True

    def _validate(self) -> None:
        if not _MIN_BCRYPT_ROUNDS <= self.bcrypt_rounds <= _MAX_BCRYPT_ROUNDS:
            self._reject(
                "bcrypt_rounds", f"must be between {_MIN_BCRYPT_ROUNDS} and {_MAX_BCRYPT_ROUNDS}"
            )
        if self.salt_bytes < 1:
            self._reject("salt_bytes", "must be positive")
        if self.md5_mode not in _MD5_MODES:
            self._reject("md5_mode", f"expected one of {', '.join(_MD5_MODES)}")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            self._reject("log_level", "unknown log level")

        from passlab.security.passwords.algorithms import Algorithm

        try:
            Algorithm.parse(self.default_algorithm)
        except UnsupportedAlgorithmError:
            self._reject("default_algorithm", "unsupported algorithm")

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level.upper())


__all__ = ["HasherSettings"]
