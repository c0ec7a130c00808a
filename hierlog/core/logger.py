"""
Logger - named node in the logger hierarchy

Loggers are created by LoggerRegistry, never directly. Each logger resolves
its effective level through its ancestors, dispatches records to its
handlers (or the global defaults) and propagates them upward.
"""

from __future__ import annotations

import sys
import threading
import weakref
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union

from hierlog.core.log_level import Level, get_effective_level, get_level_name, is_level_enabled, parse_level
from hierlog.core.log_record import ExcInfoArg, LogRecord, create_log_record
from hierlog.handlers.base_handler import Handler

if TYPE_CHECKING:
    from hierlog.core.registry import LoggerRegistry


class Logger:
    """
    Hierarchical logger.

    Propagation rule: a logger without own handlers sends records to the
    global default handlers AND to its parent. With the default
    configuration, a record logged on "app.db" therefore reaches the default
    console handler once per handler-less logger on the path to the first
    ancestor that has handlers (or to root).
    """

    def __init__(self, name: str, registry: "LoggerRegistry"):
        self._name = name
        self._registry = registry
        self._config = registry.config
        self._level: Optional[int] = None
        self._handlers: List[Handler] = []
        self._parent_ref: Optional[weakref.ReferenceType] = None
        self._children: Dict[str, Logger] = {}
        self._disabled = False
        self._lock = threading.RLock()
        self._metrics = {"logged": 0, "handler_errors": 0}

    # ========== Properties ==========

    @property
    def name(self) -> str:
        return self._name

    @property
    def level(self) -> Optional[int]:
        """Own explicit level, or None when inherited."""
        return self._level

    @property
    def effective_level(self) -> int:
        return self.get_effective_level()

    @property
    def parent(self) -> Optional[Logger]:
        return self._parent_ref() if self._parent_ref is not None else None

    @property
    def handlers(self) -> List[Handler]:
        with self._lock:
            return list(self._handlers)

    @property
    def disabled(self) -> bool:
        return self._disabled

    @disabled.setter
    def disabled(self, value: bool) -> None:
        self._disabled = bool(value)

    def get_effective_level(self) -> int:
        """
        Resolve the threshold for this logger.

        Own explicit level, else the nearest ancestor's, else the global
        level. NOTSET is resolved to WARNING.
        """
        logger: Optional[Logger] = self
        while logger is not None:
            if logger._level is not None:
                return get_effective_level(logger._level)
            logger = logger.parent
        return get_effective_level(self._config.level)

    # ========== Configuration Methods ==========

    def set_level(self, level: Union[int, str]) -> None:
        """
        Set the level for this logger.

        Level names are accepted. Numbers are stored as given, including
        values off the named scale. NOTSET removes the override so the level
        is inherited again.
        """
        if isinstance(level, str):
            level = parse_level(level)
        self._level = None if level == Level.NOTSET else int(level)

    def add_handler(self, handler: Handler) -> None:
        with self._lock:
            self._handlers.append(handler)

    def remove_handler(self, handler: Handler) -> None:
        """Remove the first matching handler; no-op if absent."""
        with self._lock:
            try:
                self._handlers.remove(handler)
            except ValueError:
                pass

    def remove_all_handlers(self) -> None:
        with self._lock:
            self._handlers = []

    def _link_child(self, suffix: str, child: Logger) -> None:
        """Wire a child under this logger. Called by the registry only."""
        with self._lock:
            self._children[suffix] = child
        child._parent_ref = weakref.ref(self)

    # ========== Logging Methods ==========

    def is_enabled_for(self, level: int) -> bool:
        """Check if this logger will process a record at the given level."""
        if self._disabled:
            return False
        disabled_level = self._config.disabled_level
        if disabled_level is not None and level <= disabled_level:
            return False
        return is_level_enabled(self.get_effective_level(), level)

    def _log(
        self,
        level: int,
        message: str,
        args: tuple,
        exc_info: ExcInfoArg = None,
        extra: Optional[Dict[str, Any]] = None,
    ) -> None:
        # No record is built for disabled levels
        if not self.is_enabled_for(level):
            return

        record = create_log_record(
            self._name,
            level,
            get_level_name(level),
            message,
            args,
            extra=extra,
            exc_info=exc_info,
        )
        with self._lock:
            self._metrics["logged"] += 1
        self.handle(record)

    def handle(self, record: LogRecord) -> None:
        """
        Dispatch a record to handlers and propagate it.

        Own handlers are used when present, otherwise the global defaults.
        A failing handler is reported on stderr and does not stop the
        remaining handlers. Propagation to the parent happens whenever this
        logger has no own handlers, even though the global defaults already
        ran.
        """
        if self._disabled:
            return

        with self._lock:
            own_handlers = list(self._handlers)

        handlers_to_use = own_handlers if own_handlers else self._config.handlers

        for handler in handlers_to_use:
            try:
                handler(record)
            except Exception as e:
                self._handle_error(e, record)

        parent = self.parent
        if parent is not None and not own_handlers:
            parent.handle(record)

    def _handle_error(self, error: Exception, record: LogRecord) -> None:
        # Reported with print so a broken handler cannot recurse into logging
        with self._lock:
            self._metrics["handler_errors"] += 1
        print(
            f"Error in log handler: {error!r} (logger={self._name}, record={record.name})",
            file=sys.stderr,
        )

    # ========== Public Logging Methods ==========

    def debug(self, message: str, *args: Any, exc_info: ExcInfoArg = None,
              extra: Optional[Dict[str, Any]] = None) -> None:
        self._log(Level.DEBUG, message, args, exc_info, extra)

    def info(self, message: str, *args: Any, exc_info: ExcInfoArg = None,
             extra: Optional[Dict[str, Any]] = None) -> None:
        self._log(Level.INFO, message, args, exc_info, extra)

    def warning(self, message: str, *args: Any, exc_info: ExcInfoArg = None,
                extra: Optional[Dict[str, Any]] = None) -> None:
        self._log(Level.WARNING, message, args, exc_info, extra)

    def warn(self, message: str, *args: Any, exc_info: ExcInfoArg = None,
             extra: Optional[Dict[str, Any]] = None) -> None:
        """Alias for warning."""
        self._log(Level.WARNING, message, args, exc_info, extra)

    def error(self, message: str, *args: Any, exc_info: ExcInfoArg = None,
              extra: Optional[Dict[str, Any]] = None) -> None:
        self._log(Level.ERROR, message, args, exc_info, extra)

    def exception(self, message: str, *args: Any,
                  extra: Optional[Dict[str, Any]] = None) -> None:
        """Log at ERROR with the exception currently being handled."""
        self._log(Level.ERROR, message, args, True, extra)

    def critical(self, message: str, *args: Any, exc_info: ExcInfoArg = None,
                 extra: Optional[Dict[str, Any]] = None) -> None:
        self._log(Level.CRITICAL, message, args, exc_info, extra)

    def fatal(self, message: str, *args: Any, exc_info: ExcInfoArg = None,
              extra: Optional[Dict[str, Any]] = None) -> None:
        """Alias for critical."""
        self._log(Level.CRITICAL, message, args, exc_info, extra)

    def log(self, level: int, message: str, *args: Any, exc_info: ExcInfoArg = None,
            extra: Optional[Dict[str, Any]] = None) -> None:
        """Log with an explicit numeric level."""
        self._log(level, message, args, exc_info, extra)

    # ========== Hierarchy Methods ==========

    def get_child(self, suffix: str) -> Logger:
        """Get or create the logger named ``<name>.<suffix>``."""
        return self._registry.get_logger(f"{self._name}.{suffix}")

    def get_children(self) -> List[Logger]:
        with self._lock:
            return list(self._children.values())

    def has_child(self, suffix: str) -> bool:
        with self._lock:
            return suffix in self._children

    # ========== Utility Methods ==========

    def get_logger_info(self) -> Dict[str, Any]:
        """
        Snapshot of this logger for diagnostics.

        Returns:
            Dictionary with name, level (-1 when unset), effective_level,
            handlers (count), parent (name or None), children (suffixes)
            and disabled
        """
        parent = self.parent
        with self._lock:
            return {
                "name": self._name,
                "level": self._level if self._level is not None else -1,
                "effective_level": self.get_effective_level(),
                "handlers": len(self._handlers),
                "parent": parent.name if parent is not None else None,
                "children": list(self._children.keys()),
                "disabled": self._disabled,
            }

    def get_metrics(self) -> dict:
        """Get logging metrics."""
        with self._lock:
            return self._metrics.copy()

    def __repr__(self) -> str:
        return f"<Logger {self._name} ({get_level_name(self.get_effective_level())})>"
