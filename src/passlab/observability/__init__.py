"""Observability – structured logging and audit trail."""
from passlab.observability.logging import (
    AuditLogger,
    AuditOutcome,
    JsonLoggerFactory,
    RedactionProcessor,
    get_logger,
)

__all__ = [
    "AuditLogger",
    "AuditOutcome",
    "JsonLoggerFactory",
    "RedactionProcessor",
    "get_logger",
]
