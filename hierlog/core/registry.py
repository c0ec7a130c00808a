"""
Logger registry

Creates loggers on first request, memoizes them by name and wires the
parent/child links from the dotted names.
"""

from __future__ import annotations

import threading
from typing import Dict, List, Optional, Type

from hierlog.core.logger import Logger
from hierlog.core.logger_config import LoggingConfig

ROOT_LOGGER_NAME = "root"


class LoggerRegistry:
    """
    Name -> Logger map.

    At most one Logger exists per name. Requesting "a.b.c" materializes
    "a" (child of root) and "a.b" first, so every logger has a complete
    parent chain down to root.

    Thread Safety:
        All methods are thread-safe for concurrent access.

    Example:
        registry = LoggerRegistry(LoggingConfig())
        db = registry.get_logger("app.db")
        assert db.parent is registry.get_logger("app")
    """

    def __init__(self, config: Optional[LoggingConfig] = None, logger_class: Type[Logger] = Logger):
        """
        Initialize registry.

        Args:
            config: Global configuration shared by all loggers
            logger_class: Class used to construct loggers
        """
        self._config = config or LoggingConfig()
        self._logger_class = logger_class
        self._loggers: Dict[str, Logger] = {}
        self._root: Optional[Logger] = None
        self._lock = threading.RLock()

    @property
    def config(self) -> LoggingConfig:
        return self._config

    def get_logger(self, name: str) -> Logger:
        """
        Get or create a logger by name.

        Args:
            name: Dotted logger name; "root" is the root logger

        Returns:
            The single Logger instance for ``name``
        """
        with self._lock:
            logger = self._loggers.get(name)
            if logger is not None:
                return logger

            logger = self._logger_class(name, self)
            self._loggers[name] = logger

            if name == ROOT_LOGGER_NAME:
                self._root = logger
            else:
                self._setup_hierarchy(logger, name)

            return logger

    def _setup_hierarchy(self, logger: Logger, name: str) -> None:
        """Link a new logger to its parent. Caller must hold lock."""
        parent_name, _, suffix = name.rpartition(".")
        if parent_name:
            parent = self.get_logger(parent_name)
        else:
            # Direct child of root
            parent = self.get_logger(ROOT_LOGGER_NAME)
            suffix = name
        parent._link_child(suffix, logger)

    def get_root_logger(self) -> Optional[Logger]:
        """Get the root logger, or None if it has not been created yet."""
        return self._root

    def get_all_loggers(self) -> List[Logger]:
        with self._lock:
            return list(self._loggers.values())

    def has_logger(self, name: str) -> bool:
        with self._lock:
            return name in self._loggers

    def clear(self) -> None:
        """Drop all loggers; later requests create new instances."""
        with self._lock:
            self._loggers.clear()
            self._root = None

    def __len__(self) -> int:
        with self._lock:
            return len(self._loggers)

    def __repr__(self) -> str:
        return f"LoggerRegistry(loggers={len(self)})"
