"""
Global logging configuration

LoggingConfig holds the process-wide defaults that loggers fall back to:
the root threshold level, the default formatter and the default handlers.
BasicConfig is the partial override applied by ``configure()``.
"""

import threading
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from hierlog.core.log_level import Level, get_level_for_environment, parse_level
from hierlog.formatters.basic_formatter import BasicFormatter, MessageOnlyFormatter
from hierlog.formatters.colorized_formatter import ColorizedFormatter
from hierlog.formatters.json_formatter import JSONFormatter
from hierlog.handlers.base_handler import Formatter, Handler
from hierlog.handlers.console_handler import ConsoleHandler


@dataclass
class BasicConfig:
    """
    Partial configuration. Fields left as None are not changed.

    ``force`` re-applies the configuration even if one was applied before.
    """

    level: Optional[Union[int, str]] = None
    formatter: Optional[Formatter] = None
    handlers: Optional[Sequence[Handler]] = None
    force: bool = False

    def __post_init__(self):
        """Accept level names."""
        if self.level is not None:
            self.level = parse_level(self.level)

    @classmethod
    def development(cls) -> "BasicConfig":
        """DEBUG level, colorized output."""
        return cls(level=Level.DEBUG, formatter=ColorizedFormatter())

    @classmethod
    def production(cls) -> "BasicConfig":
        """ERROR level, JSON output."""
        return cls(level=Level.ERROR, formatter=JSONFormatter())

    @classmethod
    def testing(cls) -> "BasicConfig":
        """WARNING level, basic format."""
        return cls(level=Level.WARNING, formatter=BasicFormatter())

    @classmethod
    def minimal(cls) -> "BasicConfig":
        """INFO level, message only."""
        return cls(level=Level.INFO, formatter=MessageOnlyFormatter())

    @classmethod
    def for_environment(cls, env: Optional[str] = None) -> "BasicConfig":
        """Level from LEVEL_CONFIGS for the environment, default formatter."""
        return cls(level=get_level_for_environment(env))


PRESETS = {
    "development": BasicConfig.development,
    "production": BasicConfig.production,
    "testing": BasicConfig.testing,
    "minimal": BasicConfig.minimal,
}


class LoggingConfig:
    """
    Process-wide logging defaults.

    The first successful ``configure()`` wins; later calls are ignored
    unless forced. ``handlers`` always returns a copy.
    """

    DEFAULT_LEVEL = Level.WARNING

    def __init__(self):
        self._lock = threading.RLock()
        self._set_defaults()

    def _set_defaults(self) -> None:
        self._configured = False
        self._level: int = int(self.DEFAULT_LEVEL)
        self._formatter: Formatter = BasicFormatter()
        self._handlers: List[Handler] = [ConsoleHandler(formatter=self._formatter)]
        self._default_handlers = True
        self._disabled_level: Optional[int] = None

    @property
    def configured(self) -> bool:
        return self._configured

    @property
    def level(self) -> int:
        return self._level

    @property
    def formatter(self) -> Formatter:
        return self._formatter

    @property
    def handlers(self) -> List[Handler]:
        with self._lock:
            return list(self._handlers)

    @property
    def disabled_level(self) -> Optional[int]:
        """Records at or below this level are dropped everywhere (None = off)."""
        return self._disabled_level

    def configure(self, config: Optional[BasicConfig] = None, **fields) -> bool:
        """
        Apply a partial configuration.

        Args:
            config: BasicConfig instance; keyword fields build one otherwise
            **fields: level, formatter, handlers, force

        Returns:
            True if the configuration was applied, False if it was ignored
            because the system is already configured
        """
        if config is None:
            config = BasicConfig(**fields)

        with self._lock:
            if self._configured and not config.force:
                return False

            if config.level is not None:
                self._level = config.level

            if config.formatter is not None:
                self._formatter = config.formatter
                if config.handlers is None and self._default_handlers:
                    self._handlers = [ConsoleHandler(formatter=self._formatter)]

            if config.handlers is not None:
                self._handlers = list(config.handlers)
                self._default_handlers = False

            self._configured = True
            return True

    def disable(self, level: int = Level.CRITICAL) -> None:
        """Drop records at or below ``level`` process-wide; NOTSET re-enables."""
        with self._lock:
            self._disabled_level = None if level == Level.NOTSET else int(level)

    def reset(self) -> None:
        """Restore built-in defaults."""
        with self._lock:
            self._set_defaults()

    def __repr__(self) -> str:
        return (
            f"LoggingConfig(configured={self._configured}, level={self._level}, "
            f"handlers={len(self._handlers)})"
        )
