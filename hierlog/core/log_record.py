"""
Log record data structure

One record is created per emitted event and is treated as read-only by
every handler that receives it.
"""

import dataclasses
import sys
import traceback
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Tuple, Union


@dataclass(frozen=True)
class ExcInfo:
    """Snapshot of an exception attached to a record."""

    name: str
    message: str
    stack: Optional[str] = None

    @classmethod
    def from_exception(cls, exc: BaseException) -> "ExcInfo":
        """Capture name, message and traceback text of an exception."""
        stack = None
        if exc.__traceback__ is not None:
            stack = "".join(
                traceback.format_exception(type(exc), exc, exc.__traceback__)
            )
        return cls(name=type(exc).__name__, message=str(exc), stack=stack)

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "message": self.message, "stack": self.stack}


@dataclass(frozen=True)
class LogRecord:
    """
    Log record data structure.

    Contains all information about a single logging event. ``level_name``
    is captured at creation time and does not follow later changes to the
    level name mapping.
    """

    name: str
    level: int
    level_name: str
    message: str
    timestamp: datetime = field(default_factory=datetime.now)
    args: Tuple[Any, ...] = ()
    extra: Optional[Dict[str, Any]] = None
    exc_info: Optional[ExcInfo] = None

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log record to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "name": self.name,
            "level": self.level,
            "level_name": self.level_name,
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
            "args": list(self.args),
            "extra": dict(self.extra) if self.extra is not None else None,
            "exc_info": self.exc_info.to_dict() if self.exc_info else None,
        }

    def __str__(self) -> str:
        """String representation."""
        return f"{self.level_name}:{self.name}:{self.message}"


ExcInfoArg = Union[None, bool, BaseException, ExcInfo]


def _resolve_exc_info(exc_info: ExcInfoArg, args: Tuple[Any, ...]) -> Optional[ExcInfo]:
    if exc_info is None:
        # First exception among the positional arguments wins
        for arg in args:
            if isinstance(arg, BaseException):
                return ExcInfo.from_exception(arg)
        return None
    if exc_info is True:
        current = sys.exc_info()[1]
        return ExcInfo.from_exception(current) if current is not None else None
    if exc_info is False:
        return None
    if isinstance(exc_info, ExcInfo):
        return exc_info
    return ExcInfo.from_exception(exc_info)


def create_log_record(
    name: str,
    level: int,
    level_name: str,
    message: str,
    args: Tuple[Any, ...] = (),
    extra: Optional[Dict[str, Any]] = None,
    exc_info: ExcInfoArg = None,
) -> LogRecord:
    """
    Create a new LogRecord.

    Args:
        name: Name of the logger emitting the record
        level: Numeric level
        level_name: Display name of the level
        message: Log message
        args: Additional positional arguments, kept as given
        extra: Optional metadata
        exc_info: Exception to attach. None scans ``args`` for the first
            exception, True captures the exception currently being handled,
            False disables capture.

    Returns:
        New LogRecord instance
    """
    args = tuple(args)
    return LogRecord(
        name=name,
        level=int(level),
        level_name=level_name,
        message=message,
        args=args,
        extra=dict(extra) if extra is not None else None,
        exc_info=_resolve_exc_info(exc_info, args),
    )


def clone_log_record(record: LogRecord, **overrides: Any) -> LogRecord:
    """Copy a record, applying overrides; args, extra and exc_info are not shared."""
    args = overrides.pop("args", record.args)
    extra = overrides.pop("extra", record.extra)
    exc_info = overrides.pop("exc_info", record.exc_info)
    if "level" in overrides:
        overrides["level"] = int(overrides["level"])
    return dataclasses.replace(
        record,
        args=tuple(args),
        extra=dict(extra) if extra is not None else None,
        exc_info=dataclasses.replace(exc_info) if exc_info is not None else None,
        **overrides,
    )


def has_exception(record: LogRecord) -> bool:
    """Check if a record carries exception information."""
    return record.exc_info is not None


def get_exception_string(record: LogRecord) -> Optional[str]:
    """Get the traceback text, or "Name: message" when no traceback exists."""
    if record.exc_info is None:
        return None
    info = record.exc_info
    return info.stack or f"{info.name}: {info.message}"
