"""
Structured Logging — structlog loggers split into channels.

Every logger belongs to one channel:
- COMPILE: schema compilation
- VALIDATE: validation runs and the violations they find
- LOAD: schema and document files read from disk
- SYSTEM: command status, failures

A message is emitted only when its channel is enabled and the configured
level is at least the message's level. The library is silent until
configured; the CLI turns logging on with ``--log-level``.

Environment:
- JSONGUARD_LOG_LEVEL: silent (default), info, verbose or debug
- JSONGUARD_LOG_FORMAT: console (default) or json
- JSONGUARD_LOG_CHANNELS: comma-separated channel names, all when unset
"""

import logging
import os
import sys
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Iterable, Optional, Union

import structlog


class LogLevel(IntEnum):
    """Verbosity, from nothing to everything."""
    SILENT = 0
    INFO = 1
    VERBOSE = 2
    DEBUG = 3

    @classmethod
    def from_string(cls, s: str) -> "LogLevel":
        """Unknown names map to SILENT."""
        aliases = {"warning": cls.INFO, "error": cls.INFO}
        name = s.strip().lower()
        if name in aliases:
            return aliases[name]
        return cls.__members__.get(name.upper(), cls.SILENT)

    @property
    def stdlib_level(self) -> int:
        if self is LogLevel.SILENT:
            return logging.CRITICAL + 10
        if self is LogLevel.INFO:
            return logging.INFO
        return logging.DEBUG


class LogChannel(str, Enum):
    """Subsystem a message comes from."""
    COMPILE = "COMPILE"
    VALIDATE = "VALIDATE"
    LOAD = "LOAD"
    SYSTEM = "SYSTEM"

    @classmethod
    def from_string(cls, s: str) -> Optional["LogChannel"]:
        return cls.__members__.get(s.strip().upper())

    @classmethod
    def parse_list(cls, names: Iterable[Union["LogChannel", str]]) -> frozenset:
        """Parse channel names, dropping unknown ones."""
        channels = set()
        for name in names:
            channel = name if isinstance(name, LogChannel) else cls.from_string(name)
            if channel is not None:
                channels.add(channel)
        return frozenset(channels)


@dataclass(frozen=True)
class LoggingConfig:
    """Active logging configuration."""
    level: LogLevel = LogLevel.SILENT
    format: str = "console"
    channels: frozenset = field(default_factory=lambda: frozenset(LogChannel))

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        raw_channels = os.environ.get("JSONGUARD_LOG_CHANNELS", "")
        channels = LogChannel.parse_list(raw_channels.split(",")) if raw_channels else frozenset()
        return cls(
            level=LogLevel.from_string(os.environ.get("JSONGUARD_LOG_LEVEL", "silent")),
            format=os.environ.get("JSONGUARD_LOG_FORMAT", "console"),
            channels=channels or frozenset(LogChannel),
        )

    def enabled(self, channel: LogChannel, level: LogLevel) -> bool:
        return self.level >= level and channel in self.channels


_active = LoggingConfig()
_configured = False


def _processors(format: str) -> list:
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if format == "json":
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    return processors


def configure_logging(
    level: Union[LogLevel, str, None] = None,
    format: Optional[str] = None,
    channels: Optional[list[Union[LogChannel, str]]] = None,
    force: bool = False,
) -> None:
    """
    Configure structlog and the stdlib root handler.

    Arguments left as None are read from the environment. Output always
    goes to stderr so that reports printed on stdout stay parseable.

    Args:
        level: LogLevel or level name
        format: "console" or "json"
        channels: Channels to enable (all if None)
        force: Reconfigure even if already configured
    """
    global _active, _configured
    if _configured and not force:
        return

    env = LoggingConfig.from_env()
    if isinstance(level, str):
        level = LogLevel.from_string(level)
    _active = LoggingConfig(
        level=env.level if level is None else level,
        format=format or env.format,
        channels=env.channels if channels is None else LogChannel.parse_list(channels),
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=_active.level.stdlib_level,
        force=True,
    )
    structlog.configure(
        processors=_processors(_active.format),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
    _configured = True


class ChannelLogger:
    """
    A structlog logger tied to one channel.

    Filtering is decided per call, so loggers created at import time
    follow later reconfiguration.
    """

    def __init__(self, channel: LogChannel):
        self.channel = channel
        self.name = f"jsonguard.{channel.value.lower()}"
        self._logger = structlog.get_logger(self.name)

    def _should_log(self, level: LogLevel) -> bool:
        return _active.enabled(self.channel, level)

    def _emit(self, level: LogLevel, method: str, event: str, **kwargs) -> None:
        if not self._should_log(level):
            return
        if level > LogLevel.INFO:
            kwargs["verbosity"] = level.name.lower()
        getattr(self._logger, method)(event, channel=self.channel.value, **kwargs)

    def info(self, event: str, **kwargs) -> None:
        self._emit(LogLevel.INFO, "info", event, **kwargs)

    def verbose(self, event: str, **kwargs) -> None:
        self._emit(LogLevel.VERBOSE, "debug", event, **kwargs)

    def debug(self, event: str, **kwargs) -> None:
        self._emit(LogLevel.DEBUG, "debug", event, **kwargs)

    # Warnings and errors ignore the channel filter
    def warning(self, event: str, **kwargs) -> None:
        if _active.level > LogLevel.SILENT:
            self._logger.warning(event, channel=self.channel.value, **kwargs)

    def error(self, event: str, **kwargs) -> None:
        if _active.level > LogLevel.SILENT:
            self._logger.error(event, channel=self.channel.value, **kwargs)


def get_logger(channel: Union[LogChannel, str] = LogChannel.SYSTEM) -> ChannelLogger:
    """
    Logger for ``channel``; unknown names fall back to SYSTEM.

    Creating a logger configures nothing: until ``configure_logging`` is
    called every message is filtered out and the host's stdlib logging
    is left as it was.
    """
    if not isinstance(channel, LogChannel):
        channel = LogChannel.from_string(channel) or LogChannel.SYSTEM
    return ChannelLogger(channel)


def bind_context(**kwargs) -> None:
    """Attach key/values to every message logged from this context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


def get_current_config() -> dict:
    """Snapshot of the active configuration."""
    return {
        "level": _active.level.name,
        "format": _active.format,
        "channels": sorted(channel.value for channel in _active.channels),
    }
