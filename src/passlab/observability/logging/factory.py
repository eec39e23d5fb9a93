"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from passlab.observability.logging.processors import RedactionProcessor


class JsonLoggerFactory:
    """Configure structlog on top of stdlib logging, redacting sensitive keys."""

    @staticmethod
    def configure(
        level: int = logging.INFO,
        sensitive_fields: frozenset[str] | None = None,
        *,
        json: bool = True,
    ) -> None:
        shared_processors: list[Any] = [
            RedactionProcessor(sensitive_fields),
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]

        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        renderer: Any = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)

    @classmethod
    def from_settings(cls, settings: Any) -> None:
        """Configure from a :class:`~passlab.config.HasherSettings`."""
        cls.configure(level=settings.level, json=settings.json_logs)


__all__ = ["JsonLoggerFactory"]
