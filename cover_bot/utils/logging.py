# cover_bot/utils/logging.py
import logging
import sys
from typing import Any

import orjson
import structlog

from cover_bot.data.settings import settings

_NOISY_LOGGERS = {
    "aiogram.event": logging.WARNING,
    "httpx": logging.WARNING,
    "google_genai": logging.WARNING,
    "PIL": logging.INFO,
}

_configured = False


def orjson_dumps(value: Any, *, default: Any = None) -> str:
    return orjson.dumps(value, default=default).decode()


def _renderer(json_logs: bool) -> structlog.typing.Processor:
    if json_logs:
        return structlog.processors.JSONRenderer(serializer=orjson_dumps)
    return structlog.dev.ConsoleRenderer()


def configure_logging(level: int | None = None, json_logs: bool | None = None) -> None:
    """
    Routes structlog and stdlib records (aiogram, google-genai) through one
    stdout handler. JSON lines unless stderr is a terminal.
    """
    global _configured

    pre_chain: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    if json_logs is None:
        json_logs = not sys.stderr.isatty()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(foreign_pre_chain=pre_chain, processor=_renderer(json_logs))
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level if level is not None else settings.logging_level)
    for name, noisy_level in _NOISY_LOGGERS.items():
        logging.getLogger(name).setLevel(noisy_level)

    _configured = True


def setup_logger() -> structlog.typing.FilteringBoundLogger:
    """Returns the application logger, configuring logging on first use."""
    if not _configured:
        configure_logging()
    return structlog.get_logger("cover_bot")
