"""
Log level scale and name translation

Numeric values match Python's logging module.
"""

import os
import threading
from enum import IntEnum
from typing import Dict, Optional, Union


class Level(IntEnum):
    """
    Named anchor points on the severity scale.

    Higher numbers are more severe. NOTSET means "inherit from the parent".
    """

    NOTSET = 0
    DEBUG = 10
    INFO = 20
    WARNING = 30
    WARN = 30       # Alias for WARNING
    ERROR = 40
    CRITICAL = 50
    FATAL = 50      # Alias for CRITICAL

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name


# Mapping from numeric level to display name
LEVEL_TO_NAMES: Dict[int, str] = {
    Level.NOTSET: "NOTSET",
    Level.DEBUG: "DEBUG",
    Level.INFO: "INFO",
    Level.WARNING: "WARNING",
    Level.ERROR: "ERROR",
    Level.CRITICAL: "CRITICAL",
}

# Reverse mapping, including aliases
NAME_TO_LEVEL: Dict[str, int] = {
    "NOTSET": Level.NOTSET,
    "DEBUG": Level.DEBUG,
    "INFO": Level.INFO,
    "WARNING": Level.WARNING,
    "WARN": Level.WARNING,
    "ERROR": Level.ERROR,
    "CRITICAL": Level.CRITICAL,
    "FATAL": Level.CRITICAL,
}

_names_lock = threading.Lock()


def get_level_name(level: int) -> str:
    """Get display name for a numeric level ("Level <n>" when unknown)."""
    name = LEVEL_TO_NAMES.get(level)
    if name is None:
        return f"Level {level}"
    return name


def get_level_by_name(name: str) -> Optional[int]:
    """Get numeric level from name (case-insensitive), or None if unknown."""
    return NAME_TO_LEVEL.get(name.upper())


def add_level_name(level: int, name: str) -> None:
    """
    Register a custom level name.

    Records created before the call keep the name they captured.

    Args:
        level: Numeric level
        name: Display name (stored upper-case for lookups)
    """
    with _names_lock:
        LEVEL_TO_NAMES[level] = name
        NAME_TO_LEVEL[name.upper()] = level


def is_valid_level(level: object) -> bool:
    """Check that a value can be used as a level."""
    return isinstance(level, int) and not isinstance(level, bool) and level >= 0


def get_effective_level(level: int, fallback: int = Level.WARNING) -> int:
    """Resolve NOTSET to a concrete level."""
    return int(fallback) if level == Level.NOTSET else int(level)


def is_level_enabled(current_level: int, required_level: int) -> bool:
    """A record passes when its level is at or above the threshold."""
    return current_level <= required_level


def parse_level(level: Union[str, int]) -> int:
    """
    Parse a level from a name or number.

    Unknown names and invalid numbers fall back to INFO. The result is a
    plain int.
    """
    if isinstance(level, str):
        parsed = get_level_by_name(level)
        return int(parsed) if parsed is not None else int(Level.INFO)
    return int(level) if is_valid_level(level) else int(Level.INFO)


# Level per deployment environment
LEVEL_CONFIGS: Dict[str, int] = {
    "development": Level.DEBUG,
    "testing": Level.WARNING,
    "staging": Level.INFO,
    "production": Level.ERROR,
}

ENVIRONMENT_VARIABLE = "HIERLOG_ENV"


def get_level_for_environment(env: Optional[str] = None) -> int:
    """
    Get the level configured for an environment.

    Args:
        env: Environment name (default: $HIERLOG_ENV, then "development")

    Returns:
        Level for the environment, INFO for unknown environments
    """
    environment = env or os.environ.get(ENVIRONMENT_VARIABLE) or "development"
    return int(LEVEL_CONFIGS.get(environment, Level.INFO))
