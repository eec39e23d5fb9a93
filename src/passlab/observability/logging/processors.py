"""Observability – credential redaction processor and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog

from passlab.kernel.security import DEFAULT_SENSITIVE_FIELDS


class RedactionProcessor:
    """structlog processor that masks credential material in every event.

    A key matches when its lower-cased, ``-``-to-``_`` form is in the
    sensitive set, so ``Password`` and ``password-hash`` are caught too.
    Nested dicts are walked, including dicts inside lists and tuples such as
    the field errors carried by :class:`~passlab.kernel.errors.ValidationError`.

    Usage::

        structlog.configure(processors=[RedactionProcessor(), ...])
    """

    REDACTED = "[REDACTED]"

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._fields = sensitive_fields or DEFAULT_SENSITIVE_FIELDS

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        return self._redact(event_dict)

    def _is_sensitive(self, key: Any) -> bool:
        return isinstance(key, str) and key.lower().replace("-", "_") in self._fields

    def _redact(self, value: Any) -> Any:
        if isinstance(value, dict):
            return {
                k: (self.REDACTED if self._is_sensitive(k) else self._redact(v))
                for k, v in value.items()
            }
        if isinstance(value, (list, tuple)):
            items = [self._redact(v) for v in value]
            return items if isinstance(value, list) else tuple(items)
        return value


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["RedactionProcessor", "get_logger"]
