from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Optional, cast

import structlog
from loguru import logger as loguru_logger
from structlog.exceptions import DropEvent
from structlog.stdlib import BoundLogger
from structlog.typing import EventDict, WrappedLogger

from period.config.settings import Settings, get_settings, log_dir


LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {message} | {extra}"
DEFAULT_LOG_FILENAME = "period.log"

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(slots=True)
class LoggingOptions:
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    log_to_file: bool = False
    rotation: str = "10 MB"
    retention: str = "14 days"
    log_path: Optional[Path] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> LoggingOptions:
        level = settings.log_level.upper()
        if level not in _LEVELS:
            level = "INFO"
        return cls(
            level=cast(Literal["DEBUG", "INFO", "WARNING", "ERROR"], level),
            log_to_file=settings.log_to_file,
        )


_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
]

_configured_log_path: Optional[Path] = None


def configure_logging(options: LoggingOptions | None = None) -> Path | None:
    """Replace the loguru sinks with the period console and file sinks.

    Only applications should call this; importing the library leaves the
    host's loguru handlers and structlog configuration untouched.
    Returns the log file path when a file sink was installed.
    """
    global _configured_log_path

    opts = options or LoggingOptions.from_settings(get_settings())

    level = "DEBUG" if opts.debug else opts.level

    loguru_logger.remove()
    loguru_logger.add(
        sys.stderr,
        level=level,
        colorize=True,
        backtrace=opts.debug,
        diagnose=opts.debug,
        format=LOG_FORMAT,
    )

    log_path: Path | None = None
    if opts.log_to_file or opts.log_path is not None:
        log_path = opts.log_path or (log_dir() / DEFAULT_LOG_FILENAME)
        loguru_logger.add(
            log_path,
            level=level,
            rotation=opts.rotation,
            retention=opts.retention,
            encoding="utf-8",
            format=LOG_FORMAT,
        )

    _configured_log_path = log_path
    return log_path


def _log_to_loguru(
    _: WrappedLogger,
    __: str,
    event_dict: EventDict,
) -> EventDict:
    level = str(event_dict.pop("level", "INFO")).upper()
    event = event_dict.pop("event", "")
    timestamp = event_dict.pop("timestamp", None)
    exception = event_dict.pop("exception", None)
    event_dict.pop("stack", None)
    bind_logger = loguru_logger.bind(**event_dict)
    if timestamp:
        bind_logger = bind_logger.bind(timestamp=timestamp)
    bind_logger.opt(depth=6, exception=exception).log(level, event)
    raise DropEvent


def get_logger(*initial_values: object, **initial_kw: object) -> BoundLogger:
    """Return a structlog logger that forwards events to loguru.

    The processor chain is bound to the logger itself, so the global
    structlog configuration is never modified. Level filtering happens in
    whichever loguru sinks are installed.
    """
    log = structlog.wrap_logger(
        None,
        processors=[*_PROCESSORS, _log_to_loguru],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG),
        logger_factory_args=initial_values,
        **initial_kw,
    )
    return cast(BoundLogger, log)


def log_file_path() -> Path | None:
    return _configured_log_path


__all__ = ["LoggingOptions", "configure_logging", "get_logger", "log_file_path"]
