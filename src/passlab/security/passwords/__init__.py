"""Security – salted, algorithm-tagged password hashing."""
from passlab.security.passwords.algorithms import (
    ALGORITHM_INFO,
    Algorithm,
    AlgorithmInfo,
    Md5Mode,
    SecurityTier,
)
from passlab.security.passwords.hasher import (
    DEFAULT_BCRYPT_ROUNDS,
    DigestPasswordHasher,
    digest_hex,
    hash_password,
    verify_password,
)
from passlab.security.passwords.record import CredentialRecord
from passlab.security.passwords.salt import DEFAULT_SALT_BYTES, generate_salt

__all__ = [
    "ALGORITHM_INFO",
    "Algorithm",
    "AlgorithmInfo",
    "CredentialRecord",
    "DEFAULT_BCRYPT_ROUNDS",
    "DEFAULT_SALT_BYTES",
    "DigestPasswordHasher",
    "Md5Mode",
    "SecurityTier",
    "digest_hex",
    "generate_salt",
    "hash_password",
    "verify_password",
]
