"""Structlog configuration for package-wide logging.

Form values routinely carry personal data (SSNs, birth dates, addresses), so
every event goes through `_redact_form_values` before rendering.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

from formkit_gov.settings import Settings, get_settings

if TYPE_CHECKING:
    from structlog.typing import EventDict

_LOGGING_CONFIGURED = False

REDACTED = "[REDACTED]"
SENSITIVE_KEYS = frozenset({"value", "data", "ssn", "date_of_birth", "dateofbirth", "birth_date"})
_MAX_REDACT_DEPTH = 5


def _rename_event_key(
    logger: logging.Logger,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: EventDict,
) -> EventDict:
    """Normalize structlog payload keys.

    Returns:
        The event dictionary with "message" key instead of "event".
    """
    if "event" in event_dict:
        event_dict["message"] = event_dict.pop("event")
    return event_dict


def _redact(payload: Any, depth: int = 0) -> Any:
    if depth > _MAX_REDACT_DEPTH:
        return payload
    if isinstance(payload, dict):
        return {
            key: REDACTED if str(key).lower() in SENSITIVE_KEYS else _redact(item, depth + 1)
            for key, item in payload.items()
        }
    if isinstance(payload, list | tuple):
        return [_redact(item, depth + 1) for item in payload]
    return payload


def _redact_form_values(
    logger: logging.Logger,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: EventDict,
) -> EventDict:
    """Replace candidate field values with a placeholder, including under `extra`."""
    return _redact(event_dict)


def configure_logging(*, settings: Settings | None = None, force: bool = False) -> None:
    """Configure structlog and stdlib logging once for the package.

    Args:
        settings: Settings to read `log_level`, `log_json` and `log_file` from.
        force: Reconfigure even when logging is already set up.
    """
    global _LOGGING_CONFIGURED  # noqa: PLW0603

    if _LOGGING_CONFIGURED and not force:
        return

    config = settings or get_settings()
    log_level = getattr(logging, config.log_level.upper(), logging.WARNING)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file, encoding="utf-8"))

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=handlers,
        force=force,
    )

    renderer: Any = structlog.processors.JSONRenderer()
    if not config.log_json:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            _rename_event_key,
            _redact_form_values,
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _LOGGING_CONFIGURED = True


def get_logger(name: str = "formkit_gov") -> structlog.BoundLogger:
    """Return package logger, configuring logging lazily."""
    if not _LOGGING_CONFIGURED:
        configure_logging()
    return structlog.get_logger(name)
