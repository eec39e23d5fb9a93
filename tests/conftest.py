"""Shared fixtures for the passlab unit tests."""

from __future__ import annotations

import pytest

from passlab.security.passwords import DigestPasswordHasher


@pytest.fixture
def hasher() -> DigestPasswordHasher:
    """Hasher with the bcrypt cost lowered to 4 so tests stay fast."""
    return DigestPasswordHasher(bcrypt_rounds=4)


@pytest.fixture
def zero_salt_hasher() -> DigestPasswordHasher:
    """Hasher whose salt source always returns 32 zero bytes."""
    return DigestPasswordHasher(bcrypt_rounds=4, salt_source=lambda n: "00" * n)
