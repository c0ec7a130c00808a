"""Logger builder pattern"""

from typing import List, Optional, TYPE_CHECKING, Union
from pathlib import Path

from hierlog.core.logger import Logger
from hierlog.formatters.colorized_formatter import ColorizedFormatter
from hierlog.handlers.base_handler import Formatter, Handler, RecordFilter
from hierlog.handlers.console_handler import ConsoleHandler
from hierlog.handlers.file_handler import FileHandler
from hierlog.handlers.json_handler import JSONHandler

if TYPE_CHECKING:
    from hierlog.core.registry import LoggerRegistry


class LoggerBuilder:
    """
    Builder for a configured logger.

    Formatter and filter settings apply to the built-in handlers created by
    the builder (console, file, JSON); custom handlers are added as given.

    Example:
        logger = (LoggerBuilder()
            .with_name("app.worker")
            .with_level(Level.DEBUG)
            .with_console(colored=True)
            .with_file("logs/worker.log")
            .build())
    """

    def __init__(self, registry: Optional["LoggerRegistry"] = None):
        """
        Initialize builder.

        Args:
            registry: Registry to build into (default: the facade's registry)
        """
        self._registry = registry
        self._name = "root"
        self._level: Optional[Union[int, str]] = None
        self._console_enabled = False
        self._colored = False
        self._file_path: Optional[Path] = None
        self._file_mode = "append"
        self._json_enabled = False
        self._json_pretty = False
        self._formatter: Optional[Formatter] = None
        self._filter: Optional[RecordFilter] = None
        self._custom_handlers: List[Handler] = []
        self._replace_handlers = False

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set logger name."""
        self._name = name or "root"
        return self

    def with_level(self, level: Union[int, str]) -> "LoggerBuilder":
        """Set the logger's own level (names or numbers, as in Logger.set_level)."""
        self._level = level
        return self

    def with_console(self, colored: bool = False) -> "LoggerBuilder":
        """Enable console output."""
        self._console_enabled = True
        self._colored = colored
        return self

    def with_file(self, filepath: str, mode: str = "append") -> "LoggerBuilder":
        """Enable file output."""
        self._file_path = Path(filepath)
        self._file_mode = mode
        return self

    def with_json(self, pretty: bool = False) -> "LoggerBuilder":
        """Enable JSON lines on stdout."""
        self._json_enabled = True
        self._json_pretty = pretty
        return self

    def with_formatter(self, formatter: Formatter) -> "LoggerBuilder":
        """Set the formatter for console and file output."""
        self._formatter = formatter
        return self

    def with_filter(self, log_filter: RecordFilter) -> "LoggerBuilder":
        """
        Set a record filter for the built-in handlers.

        Args:
            log_filter: Predicate (e.g. a BaseFilter subclass)

        Returns:
            Self for method chaining

        Example:
            from hierlog.filters import PatternFilter

            logger = (LoggerBuilder()
                .with_name("api")
                .with_console()
                .with_filter(PatternFilter(r"healthz", exclude=True))
                .build())
        """
        self._filter = log_filter
        return self

    def add_handler(self, handler: Handler) -> "LoggerBuilder":
        """
        Add a custom handler.

        Args:
            handler: Any callable taking a LogRecord

        Returns:
            Self for method chaining
        """
        self._custom_handlers.append(handler)
        return self

    def replace_handlers(self, enabled: bool = True) -> "LoggerBuilder":
        """Remove the logger's existing handlers before adding new ones."""
        self._replace_handlers = enabled
        return self

    def build(self) -> Logger:
        """Configure and return the logger from the registry."""
        registry = self._registry
        if registry is None:
            from hierlog.api import get_registry
            registry = get_registry()

        logger = registry.get_logger(self._name)

        if self._replace_handlers:
            logger.remove_all_handlers()

        if self._level is not None:
            logger.set_level(self._level)

        for handler in self._build_handlers():
            logger.add_handler(handler)

        return logger

    def _build_handlers(self) -> List[Handler]:
        handlers: List[Handler] = []

        if self._console_enabled:
            formatter = self._formatter
            if formatter is None and self._colored:
                formatter = ColorizedFormatter(enabled=True)
            handlers.append(ConsoleHandler(formatter=formatter, log_filter=self._filter))

        if self._file_path:
            handlers.append(FileHandler(
                str(self._file_path),
                mode=self._file_mode,
                formatter=self._formatter,
                log_filter=self._filter,
            ))

        if self._json_enabled:
            handlers.append(JSONHandler(pretty=self._json_pretty, log_filter=self._filter))

        handlers.extend(self._custom_handlers)
        return handlers
