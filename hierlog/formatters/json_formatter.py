"""
JSON formatter for structured logging

Formats log records as JSON objects
"""

import json
from typing import Any, Dict, Optional

from hierlog.core.log_record import LogRecord
from hierlog.formatters.base_formatter import BaseFormatter


class JSONFormatter(BaseFormatter):
    """
    Format log records as JSON objects.

    Produces structured log output suitable for log aggregation systems.
    Extra fields are merged into the top-level object.
    """

    def __init__(
        self,
        pretty: bool = False,
        include_all: bool = False,
        field_mapping: Optional[Dict[str, str]] = None,
        ensure_ascii: bool = False,
    ):
        """
        Initialize JSON formatter.

        Args:
            pretty: Indent output with two spaces
            include_all: Also emit ``level_num`` and ``args``
            field_mapping: Rename output keys, e.g. {"message": "msg"}
            ensure_ascii: Escape non-ASCII characters

        Example:
            # Compact JSON (one line per record)
            formatter = JSONFormatter()

            # Keys renamed for an ingestion pipeline
            formatter = JSONFormatter(field_mapping={"timestamp": "@timestamp"})
        """
        self.pretty = pretty
        self.include_all = include_all
        self.field_mapping = dict(field_mapping or {})
        self.ensure_ascii = ensure_ascii

    def build_dict(self, record: LogRecord) -> Dict[str, Any]:
        """Build the mapped dictionary that is serialized for a record."""
        log_dict: Dict[str, Any] = {
            "timestamp": record.timestamp.isoformat(),
            "level": record.level_name,
            "logger": record.name,
            "message": record.message,
        }

        if record.extra:
            log_dict.update(record.extra)

        if record.exc_info is not None:
            log_dict["exception"] = record.exc_info.to_dict()

        if self.include_all:
            log_dict["level_num"] = record.level
            log_dict["args"] = list(record.args)

        return {
            self.field_mapping.get(key, key): value
            for key, value in log_dict.items()
        }

    def format(self, record: LogRecord) -> str:
        """
        Format log record as JSON.

        Values that are not JSON serializable are rendered with ``str()``;
        circular structures fall back to their ``repr()``.
        """
        data = self.build_dict(record)
        indent = 2 if self.pretty else None
        try:
            return json.dumps(
                data, indent=indent, ensure_ascii=self.ensure_ascii, default=str
            )
        except ValueError:
            safe = {key: safe_json_value(value) for key, value in data.items()}
            return json.dumps(
                safe, indent=indent, ensure_ascii=self.ensure_ascii, default=str
            )

    def __repr__(self) -> str:
        """String representation."""
        return f"JSONFormatter(pretty={self.pretty})"


def safe_json_value(value: Any) -> Any:
    """Return value if it serializes, else its repr (e.g. for circular data)."""
    try:
        json.dumps(value, default=str)
    except ValueError:
        return repr(value)
    return value
