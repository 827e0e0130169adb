"""Structured logging configuration using structlog.

JSON output for production, console output for development. Modules log
through get_logger() with snake_case event names and keyword fields.

Autologin tokens are full-access credentials. Code must never pass one as a
log field; as a backstop, every string in an event dict is scrubbed of
anything shaped like a token before rendering.
"""

import logging
import re
import sys
from typing import Any

import structlog

# "auth-<token>" path segments and bare 40-char tokens
_AUTOLOGIN = re.compile(r"(?<![a-z0-9])(auth-)?[a-z0-9]{40}(?![a-z0-9])")
REDACTED = "<autologin>"


def redact_autologin(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """structlog processor replacing token-shaped substrings in string values."""
    for key, value in event_dict.items():
        if isinstance(value, str):
            event_dict[key] = _AUTOLOGIN.sub(REDACTED, value)
    return event_dict


def setup_logging(json_output: bool = False, log_level: str = "INFO") -> None:
    """Configure structlog for the feed server and scripts.

    Args:
        json_output: If True, output JSON (production). If False, console format (dev).
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        redact_autologin,
    ]
    if json_output:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # uvicorn and urllib3 log through stdlib; send them to the same stream
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s %(message)s"))
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(numeric_level)


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structlog logger bound with the module name."""
    return structlog.get_logger(name)
