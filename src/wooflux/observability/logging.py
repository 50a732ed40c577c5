"""Observability – structlog configuration and the get_logger helper."""
from __future__ import annotations

import logging
from typing import Any

import structlog

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset(
    {"auth_token", "authorization", "password", "secret", "token", "api_key"}
)


class SensitiveFieldsFilter:
    """Replace values of sensitive keys with ``[REDACTED]``.

    Usable as a structlog processor: it is called with
    ``(logger, method_name, event_dict)`` and returns the redacted dict.
    """

    REDACTED = "[REDACTED]"

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._fields = sensitive_fields or DEFAULT_SENSITIVE_FIELDS

    def redact(self, data: dict[str, Any]) -> dict[str, Any]:
        """Recursively redact nested dicts."""
        result: dict[str, Any] = {}
        for k, v in data.items():
            if k.lower() in self._fields:
                result[k] = self.REDACTED
            elif isinstance(v, dict):
                result[k] = self.redact(v)
            else:
                result[k] = v
        return result

    def __call__(
        self,
        logger: Any,  # noqa: ARG002
        method_name: str,  # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        return self.redact(event_dict)


def configure_logging(
    level: int | str = logging.INFO,
    *,
    json_output: bool = True,
    sensitive_fields: frozenset[str] | None = None,
) -> None:
    """Route structlog through stdlib logging with JSON or console output."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    shared_processors: list[Any] = [
        SensitiveFieldsFilter(sensitive_fields),
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
    renderer: Any = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
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


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger, optionally bound to *initial_values*.

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


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "SensitiveFieldsFilter", "configure_logging", "get_logger"]
