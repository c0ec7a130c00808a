"""
Core module for the logger hierarchy

This module contains the fundamental classes:
- Level: Log level scale
- LogRecord: Log record data structure
- LoggingConfig: Global configuration
- Logger: Hierarchical logger
- LoggerRegistry: Name -> Logger registry
- LoggerBuilder: Builder pattern for logger configuration
"""

from hierlog.core.log_level import Level
from hierlog.core.log_record import LogRecord, ExcInfo, create_log_record, clone_log_record
from hierlog.core.logger_config import LoggingConfig, BasicConfig
from hierlog.core.logger import Logger
from hierlog.core.registry import LoggerRegistry
from hierlog.core.logger_builder import LoggerBuilder

__all__ = [
    "Level",
    "LogRecord",
    "ExcInfo",
    "create_log_record",
    "clone_log_record",
    "LoggingConfig",
    "BasicConfig",
    "Logger",
    "LoggerRegistry",
    "LoggerBuilder",
]
