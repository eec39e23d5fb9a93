"""Observability – structured logging helpers."""
from passlab.observability.logging.processors import RedactionProcessor, get_logger
from passlab.observability.logging.factory import JsonLoggerFactory
from passlab.observability.logging.audit import AuditLogger, AuditOutcome

__all__ = [
    "AuditLogger",
    "AuditOutcome",
    "JsonLoggerFactory",
    "RedactionProcessor",
    "get_logger",
]
