"""
passlab – salted, algorithm-tagged password hashing.

Import path convention::

    from passlab.security.passwords import Algorithm, DigestPasswordHasher
    from passlab.kernel.errors import UnsupportedAlgorithmError
    from passlab.application.accounts import AccountService, InMemoryCredentialStore
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
