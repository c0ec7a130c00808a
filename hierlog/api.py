"""
Module-level logging API

Thin functions over a default LoggingConfig/LoggerRegistry pair, in the
style of Python's ``logging.getLogger()`` and ``logging.basicConfig()``.
"""

import os
from typing import Any, Dict, List, Optional, Sequence, Union

from hierlog.core.log_level import ENVIRONMENT_VARIABLE, Level, parse_level
from hierlog.core.logger import Logger
from hierlog.core.logger_config import PRESETS, BasicConfig, LoggingConfig
from hierlog.core.registry import ROOT_LOGGER_NAME, LoggerRegistry
from hierlog.handlers.base_handler import Formatter, Handler

_config = LoggingConfig()
_registry = LoggerRegistry(_config)


def get_registry() -> LoggerRegistry:
    """Get the registry used by the module-level functions."""
    return _registry


def get_config() -> LoggingConfig:
    """Get the global configuration used by the module-level functions."""
    return _config


def _resolve(logger_or_name: Union[Logger, str]) -> Logger:
    if isinstance(logger_or_name, Logger):
        return logger_or_name
    return get_logger(logger_or_name)


def get_logger(name: Optional[str] = None) -> Logger:
    """
    Get a logger by name, creating it if needed.

    Args:
        name: Dotted logger name; None or "" returns the root logger

    Returns:
        Logger instance
    """
    return _registry.get_logger(name or ROOT_LOGGER_NAME)


def basic_config(
    config: Optional[BasicConfig] = None,
    *,
    level: Optional[Union[int, str]] = None,
    formatter: Optional[Formatter] = None,
    handlers: Optional[Sequence[Handler]] = None,
    force: bool = False,
) -> bool:
    """
    Configure the logging system.

    Only the first call takes effect unless ``force`` is set. When a level
    is applied it is also set on the root logger.

    Returns:
        True if the configuration was applied
    """
    if config is None:
        config = BasicConfig(level=level, formatter=formatter, handlers=handlers, force=force)

    applied = _config.configure(config)
    if applied and config.level is not None:
        get_logger(ROOT_LOGGER_NAME).set_level(config.level)
    return applied


def apply_preset(name: str, force: bool = False) -> bool:
    """
    Configure from a named preset.

    Args:
        name: "development", "production", "testing" or "minimal"
        force: Override an existing configuration

    Raises:
        ValueError: If the preset is unknown
    """
    try:
        factory = PRESETS[name]
    except KeyError:
        raise ValueError(f"Unknown preset: {name}") from None

    config = factory()
    config.force = force
    return basic_config(config)


def configure_from_environment(env: Optional[str] = None, force: bool = False) -> bool:
    """
    Configure for a deployment environment.

    Preset names use the preset; other environments only set the level
    from LEVEL_CONFIGS.

    Args:
        env: Environment name (default: $HIERLOG_ENV, then "development")
        force: Override an existing configuration
    """
    env = env or os.environ.get(ENVIRONMENT_VARIABLE) or "development"
    if env in PRESETS:
        config = PRESETS[env]()
    else:
        config = BasicConfig.for_environment(env)
    config.force = force
    return basic_config(config)


def set_level(logger_or_name: Union[Logger, str], level: Union[int, str]) -> None:
    """Set the level on a logger or logger name."""
    _resolve(logger_or_name).set_level(level)


def add_handler(logger_or_name: Union[Logger, str], handler: Handler) -> None:
    """Add a handler to a logger or logger name."""
    _resolve(logger_or_name).add_handler(handler)


def get_child(parent: Union[Logger, str], suffix: str) -> Logger:
    """Get ``<parent>.<suffix>``."""
    return _resolve(parent).get_child(suffix)


def disable(level: Union[int, str] = Level.CRITICAL) -> None:
    """
    Drop records at or below ``level`` for every logger.

    ``disable(Level.NOTSET)`` turns the floor off again.
    """
    _config.disable(parse_level(level))


def reset() -> None:
    """Restore the default configuration and drop all loggers."""
    _config.reset()
    _registry.clear()


def get_logger_info() -> List[Dict[str, Any]]:
    """Diagnostic snapshot of every registered logger."""
    return [logger.get_logger_info() for logger in _registry.get_all_loggers()]
