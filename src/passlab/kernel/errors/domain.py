"""Domain errors: unsupported algorithms and credential rule violations."""

from __future__ import annotations

from typing import Any

from passlab.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a credential rule / invariant is violated."""

    default_code = "domain_error"


class UnsupportedAlgorithmError(DomainError):
    """The algorithm tag is outside the closed set of supported schemes.

    Never retried and never replaced by a default algorithm.
    """

    default_code = "unsupported_algorithm"

    def __init__(self, algorithm: Any, **kwargs: Any) -> None:
        super().__init__(
            f"Unsupported algorithm: {algorithm!r}",
            detail={"algorithm": str(algorithm)},
            **kwargs,
        )
        self.algorithm = algorithm


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class NotFoundError(DomainError):
    """The requested resource does not exist."""

    default_code = "not_found"

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        **kwargs: Any,
    ) -> None:
        msg = f"{resource} not found"
        if identifier is not None:
            msg = f"{resource} '{identifier}' not found"
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier


class ConflictError(DomainError):
    """The operation conflicts with existing state."""

    default_code = "conflict"


__all__ = [
    "ConflictError",
    "DomainError",
    "NotFoundError",
    "UnsupportedAlgorithmError",
    "ValidationError",
]
