"""Security – hex salt from the OS CSPRNG."""
from __future__ import annotations

import secrets

from passlab.kernel.errors import EntropySourceUnavailableError

__all__ = ["DEFAULT_SALT_BYTES", "generate_salt"]

DEFAULT_SALT_BYTES = 32


def generate_salt(length_bytes: int = DEFAULT_SALT_BYTES) -> str:
    """Return ``length_bytes`` of CSPRNG output as lowercase hex.

    The result is ``2 * length_bytes`` characters long. Failures of the OS
    random source surface as :class:`EntropySourceUnavailableError`.
    """
    if isinstance(length_bytes, bool) or not isinstance(length_bytes, int) or length_bytes < 1:
        raise ValueError(f"length_bytes must be a positive integer, got {length_bytes!r}")
    try:
        raw = secrets.token_bytes(length_bytes)
    except (OSError, NotImplementedError) as exc:
        raise EntropySourceUnavailableError(cause=exc) from exc
    return raw.hex()
