"""Structured logging configuration.

structlog on top of stdlib logging. Request-scoped values bound through
structlog.contextvars (request_id, method, path) are merged into every
event logged while the request is in flight.
"""

import logging
import logging.config
import sys
from datetime import UTC, datetime
from typing import Any

import structlog
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from structlog.stdlib import BoundLogger


def _add_timestamp(
    _logger: object,
    _method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Add ISO 8601 UTC timestamp with timezone offset."""
    event_dict["timestamp"] = datetime.now(UTC).isoformat()
    return event_dict


class LoggingSettings(BaseSettings):
    """Logging settings from environment variables."""

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    # JSON for deployments; LOG_JSON=false gives coloured console output locally
    log_json: bool = Field(default=True, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


def configure_logging(settings: LoggingSettings) -> None:
    """Route structlog and stdlib records through one stdout handler.

    Call once at startup; loggers from get_logger() pick it up.
    """
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        _add_timestamp,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    renderer: Any = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structured": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "processor": renderer,
                    "foreign_pre_chain": shared_processors,
                },
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "structured",
                    "stream": sys.stdout,
                },
            },
            "loggers": {
                "": {
                    "handlers": ["default"],
                    "level": settings.log_level,
                    "propagate": True,
                },
                # uvicorn's access log duplicates request_finished
                "uvicorn.access": {"level": "WARNING"},
            },
        }
    )


configure_logging(LoggingSettings())


def get_logger(name: str) -> BoundLogger:
    """Get a structured logger, typically ``get_logger(__name__)``.

    Example:
        logger = get_logger(__name__)
        logger.info("member_created", member_id=1)
        # {"event": "member_created", "member_id": 1, "level": "info", ...}
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]
