"""Supported digest schemes and their display metadata."""
from __future__ import annotations

import dataclasses
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from passlab.kernel.errors import UnsupportedAlgorithmError

__all__ = [
    "ALGORITHM_INFO",
    "Algorithm",
    "AlgorithmInfo",
    "Md5Mode",
    "SecurityTier",
]


class Algorithm(str, Enum):
    """Closed set of password hashing schemes.

    Values are the tags persisted alongside each credential record.
    """

    MD5 = "MD5"
    SHA1 = "SHA-1"
    SHA256 = "SHA-256"
    SHA512 = "SHA-512"
    BCRYPT = "bcrypt"

    @property
    def self_salting(self) -> bool:
        """``True`` when the scheme embeds its own salt and cost in the hash."""
        return self is Algorithm.BCRYPT

    @classmethod
    def parse(cls, value: Any) -> Algorithm:
        """Resolve an enum member from a member, wire tag or member name.

        Raises :class:`UnsupportedAlgorithmError` for anything else.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if value == member.value:
                    return member
            key = value.strip().upper().replace("-", "")
            if key in cls.__members__:
                return cls.__members__[key]
        raise UnsupportedAlgorithmError(value)

    def __str__(self) -> str:
        return self.value


class Md5Mode(str, Enum):
    """What the ``MD5`` label actually computes.

    ``LEGACY_SHA256`` reproduces records written by the original system,
    which stored SHA-256 digests under the MD5 tag. ``TRUE_MD5`` computes a
    genuine MD5 digest. Records only verify under the mode that wrote them.
    """

    LEGACY_SHA256 = "legacy-sha256"
    TRUE_MD5 = "md5"


class SecurityTier(str, Enum):
    """Qualitative strength rating shown next to each algorithm."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "very_high"
    HIGHEST = "highest"


@dataclasses.dataclass(frozen=True)
class AlgorithmInfo:
    """Presentation-only metadata for one algorithm."""

    name: str
    description: str
    security_tier: SecurityTier


ALGORITHM_INFO: Mapping[Algorithm, AlgorithmInfo] = MappingProxyType({
    Algorithm.MD5: AlgorithmInfo(
        name="MD5",
        description="128-bit hash (not recommended, for study only)",
        security_tier=SecurityTier.LOW,
    ),
    Algorithm.SHA1: AlgorithmInfo(
        name="SHA-1",
        description="160-bit hash (not recommended for production)",
        security_tier=SecurityTier.MEDIUM,
    ),
    Algorithm.SHA256: AlgorithmInfo(
        name="SHA-256",
        description="256-bit hash (secure)",
        security_tier=SecurityTier.HIGH,
    ),
    Algorithm.SHA512: AlgorithmInfo(
        name="SHA-512",
        description="512-bit hash (very secure)",
        security_tier=SecurityTier.VERY_HIGH,
    ),
    Algorithm.BCRYPT: AlgorithmInfo(
        name="bcrypt",
        description="Adaptive password hash (most secure)",
        security_tier=SecurityTier.HIGHEST,
    ),
})
