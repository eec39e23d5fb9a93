"""BaseError: code, detail and cause shared by every passlab error."""

from __future__ import annotations

import json
from typing import Any

from passlab.kernel.security.pii import DEFAULT_SENSITIVE_FIELDS

_MASK = "***"


class BaseError(Exception):
    """Root of the passlab error hierarchy.

    ``code`` is a stable slug for callers to branch on (``default_code`` of
    the class unless overridden). ``detail`` carries structured context such
    as the rejected algorithm tag or the failing field. Keys that name
    credential material (``password``, ``salt``, ``hash``, ...) are masked
    whenever the error is serialised, so an error can be logged as-is.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail) if detail else {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """``{"code", "message", "detail"[, "cause"]}`` with credential keys masked."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": {
                k: (_MASK if k.lower() in DEFAULT_SENSITIVE_FIELDS else v)
                for k, v in self.detail.items()
            },
        }
        if self.cause is not None:
            payload["cause"] = f"{type(self.cause).__name__}: {self.cause}"
        return payload


__all__ = ["BaseError"]
