"""Observability – AuditLogger.

A dedicated structured-log sink for registration and login outcomes.
"""
from __future__ import annotations

import datetime
from enum import Enum
from typing import Any

from passlab.observability.logging.processors import get_logger


class AuditOutcome(str, Enum):
    """Standardised audit outcomes."""

    SUCCESS = "success"
    FAILURE = "failure"
    DENIED = "denied"
    ERROR = "error"


class AuditLogger:
    """Dedicated structured-log sink for security-sensitive actions.

    All audit entries are emitted at ``WARNING`` level so they pass through
    even restrictive log-level filters.

    Parameters
    ----------
    service:
        Logical service name injected into every audit entry.
    logger:
        Underlying structlog logger. Defaults to one named ``audit``.
    """

    def __init__(self, service: str = "passlab", logger: Any = None) -> None:
        self._service = service
        self._log = logger if logger is not None else get_logger("audit")

    def log_security_event(
        self,
        event_type: str,
        principal: Any = None,
        outcome: AuditOutcome | str = AuditOutcome.SUCCESS,
        description: str = "",
        **extra: Any,
    ) -> None:
        """Record a security event (``"register"``, ``"login"``, ...).

        Parameters
        ----------
        event_type:
            Short identifier; the emitted event is ``audit.<event_type>``.
        principal:
            Optional actor, e.g. the username. Never the password.
        outcome:
            :class:`AuditOutcome` or plain string.
        description:
            Human-readable description of what happened.
        **extra:
            Additional structured fields. Sensitive keys are redacted by the
            logging pipeline.
        """
        entry: dict[str, Any] = {
            "service": self._service,
            "event_type": event_type,
            "outcome": outcome.value if isinstance(outcome, AuditOutcome) else str(outcome),
            "description": description,
            "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            **extra,
        }
        if principal is not None:
            entry["principal_id"] = getattr(principal, "username", None) or str(principal)
        self._log.warning(f"audit.{event_type}", **entry)


__all__ = ["AuditLogger", "AuditOutcome"]
