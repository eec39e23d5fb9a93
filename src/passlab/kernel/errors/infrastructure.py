"""Infrastructure errors: entropy and payload I/O failures."""

from __future__ import annotations

from typing import Any

from passlab.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class EntropySourceUnavailableError(InfrastructureError):
    """The cryptographically secure random source could not supply bytes.

    Fatal to the current hash call; there is no fallback to a weaker source.
    """

    default_code = "entropy_source_unavailable"

    def __init__(
        self,
        message: str = "Secure random source is unavailable",
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)


class SerializationError(InfrastructureError):
    """Failed to serialize or deserialize a payload."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


__all__ = [
    "EntropySourceUnavailableError",
    "InfrastructureError",
    "SerializationError",
]
