"""Colorized formatter with ANSI escape codes"""

import sys
from typing import Dict, Optional

from hierlog.core.log_record import LogRecord
from hierlog.formatters.base_formatter import BaseFormatter


COLORS: Dict[str, str] = {
    "DEBUG": "\033[37m",     # White
    "INFO": "\033[36m",      # Cyan
    "WARNING": "\033[33m",   # Yellow
    "ERROR": "\033[31m",     # Red
    "CRITICAL": "\033[91m",  # Bright red
    "RESET": "\033[0m",
    "BOLD": "\033[1m",
    "DIM": "\033[2m",
    "UNDERLINE": "\033[4m",
}

DEFAULT_LEVEL_COLORS: Dict[str, str] = {
    name: COLORS[name] for name in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
}


def should_enable_colors(stream=None) -> bool:
    """Colors are enabled when the stream is a TTY."""
    stream = stream or sys.stdout
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def colorize(text: str, color: str, enabled: bool = True) -> str:
    if not enabled or not color:
        return text
    return f"{color}{text}{COLORS['RESET']}"


class ColorizedFormatter(BaseFormatter):
    """
    Format: "timestamp LEVEL name message" with per-part colors.

    Levels without a configured color are left uncolored.
    """

    def __init__(
        self,
        enabled: Optional[bool] = None,
        level_colors: Optional[Dict[str, str]] = None,
        timestamp_color: str = COLORS["DIM"],
        name_color: str = COLORS["DIM"],
        message_color: str = "",
    ):
        """
        Initialize colorized formatter.

        Args:
            enabled: Force colors on/off (default: detect TTY on stdout)
            level_colors: Level name -> ANSI code
            timestamp_color: ANSI code for the timestamp
            name_color: ANSI code for the logger name
            message_color: ANSI code for the message
        """
        self.enabled = should_enable_colors() if enabled is None else enabled
        self.level_colors = dict(level_colors or DEFAULT_LEVEL_COLORS)
        self.timestamp_color = timestamp_color
        self.name_color = name_color
        self.message_color = message_color

    def format(self, record: LogRecord) -> str:
        timestamp = colorize(
            record.timestamp.isoformat(timespec="milliseconds"),
            self.timestamp_color,
            self.enabled,
        )
        level = colorize(
            record.level_name,
            self.level_colors.get(record.level_name, ""),
            self.enabled,
        )
        name = colorize(record.name, self.name_color, self.enabled)
        message = colorize(record.message, self.message_color, self.enabled)
        return f"{timestamp} {level} {name} {message}"

    def __repr__(self) -> str:
        return f"ColorizedFormatter(enabled={self.enabled})"
