"""
Template-based and composite formatters

Formats log records using a template string with placeholders, or by
combining other formatters.
"""

from typing import Callable

from hierlog.core.log_record import LogRecord
from hierlog.formatters.base_formatter import BaseFormatter


class TemplateFormatter(BaseFormatter):
    """
    Format log records using a customizable template.

    Available placeholders:
        - {timestamp}: ISO timestamp
        - {level}: Level name
        - {level_num}: Numeric level
        - {name}: Logger name
        - {message}: Log message
    """

    DEFAULT_TEMPLATE = "{timestamp} [{level}] {name}: {message}"

    def __init__(self, template: str = None):
        """
        Initialize template formatter.

        Args:
            template: Format template with placeholders. Standard format
                specs work, e.g. "{level:8}".

        Example:
            formatter = TemplateFormatter("{level} - {message}")
        """
        self.template = template or self.DEFAULT_TEMPLATE

    def format(self, record: LogRecord) -> str:
        format_dict = {
            "timestamp": record.timestamp.isoformat(timespec="milliseconds"),
            "level": record.level_name,
            "level_num": record.level,
            "name": record.name,
            "message": record.message,
        }

        try:
            return self.template.format(**format_dict)
        except (KeyError, IndexError, ValueError) as e:
            # Unknown placeholder or bad format spec
            return f"[FORMAT ERROR: {e}] {record.message}"

    def __repr__(self) -> str:
        """String representation."""
        return f"TemplateFormatter(template='{self.template}')"


class CombinedFormatter(BaseFormatter):
    """Join the output of several formatters."""

    def __init__(self, *formatters: Callable[[LogRecord], str], separator: str = " | "):
        self.formatters = list(formatters)
        self.separator = separator

    def format(self, record: LogRecord) -> str:
        return self.separator.join(formatter(record) for formatter in self.formatters)

    def __repr__(self) -> str:
        return f"CombinedFormatter({len(self.formatters)} formatters)"


class ConditionalFormatter(BaseFormatter):
    """Pick one of two formatters per record."""

    def __init__(
        self,
        condition: Callable[[LogRecord], bool],
        true_formatter: Callable[[LogRecord], str],
        false_formatter: Callable[[LogRecord], str],
    ):
        """
        Initialize conditional formatter.

        Args:
            condition: Predicate evaluated for every record
            true_formatter: Used when the predicate holds
            false_formatter: Used otherwise

        Example:
            formatter = ConditionalFormatter(
                lambda r: r.level >= Level.ERROR,
                DetailedFormatter(include_extra=True),
                SimpleFormatter(),
            )
        """
        self.condition = condition
        self.true_formatter = true_formatter
        self.false_formatter = false_formatter

    def format(self, record: LogRecord) -> str:
        if self.condition(record):
            return self.true_formatter(record)
        return self.false_formatter(record)
