"""Kernel security – PasswordHasher / SaltSource ports and sensitive field names."""
from passlab.kernel.security.crypto import PasswordHasher, SaltSource
from passlab.kernel.security.pii import DEFAULT_SENSITIVE_FIELDS

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "PasswordHasher",
    "SaltSource",
]
