"""Security – password hashing and verification."""
from passlab.security.passwords import (
    ALGORITHM_INFO,
    Algorithm,
    AlgorithmInfo,
    CredentialRecord,
    DigestPasswordHasher,
    Md5Mode,
    SecurityTier,
    generate_salt,
    hash_password,
    verify_password,
)

__all__ = [
    "ALGORITHM_INFO",
    "Algorithm",
    "AlgorithmInfo",
    "CredentialRecord",
    "DigestPasswordHasher",
    "Md5Mode",
    "SecurityTier",
    "generate_salt",
    "hash_password",
    "verify_password",
]
