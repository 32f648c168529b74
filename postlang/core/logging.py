"""
Logging — Channel-filtered structured logging for the compiler.

Every module logs through a ChannelLogger bound to one channel
(PIPELINE, LEX, PARSE, VALIDATE, RENDER, ANALYZE, POLICY, SYSTEM).
A message is emitted only when its channel is enabled and the global
level is at least the message's level:

    silent < info < verbose < debug

Environment:
- POSTLANG_LOG_LEVEL: silent/info/verbose/debug (default silent)
- POSTLANG_LOG_FORMAT: console/json
- POSTLANG_LOG_CHANNELS: comma-separated channel names (all if unset)

Records go to stderr; stdout carries compiled posts only.
"""

import logging
import os
import sys
import time
from contextvars import ContextVar
from enum import Enum, IntEnum
from typing import Any, Iterable, Optional, Union

import structlog


class LogLevel(IntEnum):
    SILENT = 0
    INFO = 1
    VERBOSE = 2
    DEBUG = 3

    @classmethod
    def parse(cls, value: str) -> "LogLevel":
        """Unknown names mean silent."""
        return cls.__members__.get(value.strip().upper(), cls.SILENT)


class LogChannel(str, Enum):
    PIPELINE = "PIPELINE"
    LEX = "LEX"
    PARSE = "PARSE"
    VALIDATE = "VALIDATE"
    RENDER = "RENDER"
    ANALYZE = "ANALYZE"
    POLICY = "POLICY"
    SYSTEM = "SYSTEM"


def _channels_from_names(names: Iterable[Union[LogChannel, str]]) -> set[LogChannel]:
    found: set[LogChannel] = set()
    for name in names:
        if isinstance(name, LogChannel):
            found.add(name)
        elif name.strip().upper() in LogChannel.__members__:
            found.add(LogChannel[name.strip().upper()])
    return found


# Active settings, replaced wholesale by configure_logging()
_level = LogLevel.SILENT
_channels: set[LogChannel] = set(LogChannel)
_configured = False

# Key/values merged into every record of the current compile
_bound: ContextVar[dict] = ContextVar("postlang_bound", default={})


def configure_logging(
    level: Union[LogLevel, str, None] = None,
    format: Optional[str] = None,
    channels: Optional[Iterable[Union[LogChannel, str]]] = None,
    force: bool = False,
) -> None:
    """
    Set level, output format and enabled channels.

    Arguments left as None fall back to the POSTLANG_LOG_* environment
    variables. Without ``force`` only the first call has any effect.
    """
    global _level, _channels, _configured

    if _configured and not force:
        return

    if level is None:
        level = os.environ.get("POSTLANG_LOG_LEVEL", "silent")
    _level = LogLevel.parse(level) if isinstance(level, str) else level

    if channels is None:
        raw = os.environ.get("POSTLANG_LOG_CHANNELS", "")
        _channels = _channels_from_names(raw.split(",")) if raw else set()
        _channels = _channels or set(LogChannel)
    else:
        _channels = _channels_from_names(channels)

    format = format or os.environ.get("POSTLANG_LOG_FORMAT", "console")
    renderer = (
        structlog.processors.JSONRenderer()
        if format == "json"
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=logging.DEBUG if _level else logging.CRITICAL + 10,
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    _configured = True


class ChannelLogger:
    """
    Logger for one channel.

    info/verbose/debug are gated by level; warning and error are emitted
    at any level except silent.
    """

    def __init__(self, channel: LogChannel, name: Optional[str] = None, pass_name: Optional[str] = None):
        self.channel = channel
        self.pass_name = pass_name
        self._logger = structlog.get_logger(name or f"postlang.{channel.value.lower()}")

    def enabled(self, level: LogLevel) -> bool:
        """Would a record at this level be emitted?"""
        return self.channel in _channels and _level >= level

    def _fields(self, extra: dict) -> dict:
        fields = {"channel": self.channel.value, **extra, **_bound.get()}
        if self.pass_name:
            fields["pass"] = self.pass_name
        return fields

    def info(self, event: str, **kwargs: Any) -> None:
        if self.enabled(LogLevel.INFO):
            self._logger.info(event, **self._fields(kwargs))

    def verbose(self, event: str, **kwargs: Any) -> None:
        if self.enabled(LogLevel.VERBOSE):
            self._logger.debug(event, **self._fields(kwargs))

    def debug(self, event: str, **kwargs: Any) -> None:
        if self.enabled(LogLevel.DEBUG):
            self._logger.debug(event, **self._fields(kwargs))

    def warning(self, event: str, **kwargs: Any) -> None:
        if _level is not LogLevel.SILENT:
            self._logger.warning(event, **self._fields(kwargs))

    def error(self, event: str, **kwargs: Any) -> None:
        if _level is not LogLevel.SILENT:
            self._logger.error(event, **self._fields(kwargs))


def get_logger(channel: Union[LogChannel, str] = LogChannel.SYSTEM) -> ChannelLogger:
    """Logger for a channel; unknown channel names map to SYSTEM."""
    configure_logging()
    if not isinstance(channel, LogChannel):
        channel = LogChannel.__members__.get(channel.strip().upper(), LogChannel.SYSTEM)
    return ChannelLogger(channel)


# Pass number -> channel
_PASS_CHANNELS = {
    "p10": LogChannel.PARSE,
    "p20": LogChannel.VALIDATE,
    "p30": LogChannel.RENDER,
    "p40": LogChannel.VALIDATE,
}


def get_pass_logger(pass_name: str) -> ChannelLogger:
    """Logger for a pipeline pass, channel picked from its number prefix."""
    configure_logging()
    channel = _PASS_CHANNELS.get(pass_name[:3], LogChannel.PIPELINE)
    return ChannelLogger(channel, name=f"postlang.{pass_name}", pass_name=pass_name)


def bind_request_context(**kwargs: Any) -> None:
    """Attach fields to every record until cleared."""
    _bound.set({**_bound.get(), **kwargs})


def clear_request_context() -> None:
    _bound.set({})


class CompileLogger:
    """Per-compile pipeline logging: binds the request ID and times passes."""

    def __init__(self, request_id: str):
        self.request_id = request_id
        self._log = get_logger(LogChannel.PIPELINE)
        self._started = time.perf_counter()
        self._pass_started: dict[str, float] = {}
        bind_request_context(request_id=request_id)

    def pass_start(self, pass_name: str) -> None:
        self._pass_started[pass_name] = time.perf_counter()
        self._log.verbose("pass_started", pass_name=pass_name)

    def pass_end(self, pass_name: str, **metrics: Any) -> None:
        elapsed = time.perf_counter() - self._pass_started.pop(pass_name, time.perf_counter())
        self._log.info(
            "pass_completed",
            pass_name=pass_name,
            duration_ms=round(elapsed * 1000, 2),
            **metrics,
        )

    def pass_error(self, pass_name: str, error: Exception) -> None:
        self._log.error(
            "pass_failed",
            pass_name=pass_name,
            error=str(error),
            error_type=type(error).__name__,
        )

    def compile_complete(self, status: str, **metrics: Any) -> None:
        self._log.info(
            "compile_complete",
            status=status,
            total_duration_ms=round((time.perf_counter() - self._started) * 1000, 2),
            **metrics,
        )
        clear_request_context()
