"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

hierlog - Hierarchical logging facade
Named loggers with level inheritance, propagation and pluggable handlers
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from hierlog.core.log_level import Level
from hierlog.core.log_record import LogRecord
from hierlog.core.logger import Logger
from hierlog.core.logger_builder import LoggerBuilder
from hierlog.core.logger_config import BasicConfig, LoggingConfig
from hierlog.core.registry import LoggerRegistry
from hierlog.api import (
    get_logger,
    basic_config,
    apply_preset,
    configure_from_environment,
    set_level,
    add_handler,
    get_child,
    disable,
    reset,
    get_logger_info,
    get_registry,
    get_config,
)

# Import submodules (not all classes by default)
from hierlog import filters
from hierlog import formatters
from hierlog import handlers

__all__ = [
    "Level",
    "LogRecord",
    "Logger",
    "LoggerBuilder",
    "BasicConfig",
    "LoggingConfig",
    "LoggerRegistry",
    "get_logger",
    "basic_config",
    "apply_preset",
    "configure_from_environment",
    "set_level",
    "add_handler",
    "get_child",
    "disable",
    "reset",
    "get_logger_info",
    "get_registry",
    "get_config",
    "filters",
    "formatters",
    "handlers",
]
