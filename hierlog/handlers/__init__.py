"""Handlers module - Log output sinks"""

from hierlog.handlers.base_handler import BaseHandler, Handler
from hierlog.handlers.console_handler import ConsoleHandler
from hierlog.handlers.file_handler import FileHandler
from hierlog.handlers.stream_handler import StreamHandler
from hierlog.handlers.memory_handler import MemoryHandler
from hierlog.handlers.json_handler import JSONHandler

__all__ = [
    "BaseHandler",
    "Handler",
    "ConsoleHandler",
    "FileHandler",
    "StreamHandler",
    "MemoryHandler",
    "JSONHandler",
]
