"""
Log formatters module

Provides various formatter implementations for controlling log output format.
"""

from hierlog.formatters.base_formatter import BaseFormatter
from hierlog.formatters.basic_formatter import (
    BasicFormatter,
    SimpleFormatter,
    MessageOnlyFormatter,
)
from hierlog.formatters.detailed_formatter import DetailedFormatter
from hierlog.formatters.json_formatter import JSONFormatter
from hierlog.formatters.colorized_formatter import ColorizedFormatter
from hierlog.formatters.template_formatter import (
    TemplateFormatter,
    CombinedFormatter,
    ConditionalFormatter,
)

__all__ = [
    "BaseFormatter",
    "BasicFormatter",
    "SimpleFormatter",
    "MessageOnlyFormatter",
    "DetailedFormatter",
    "JSONFormatter",
    "ColorizedFormatter",
    "TemplateFormatter",
    "CombinedFormatter",
    "ConditionalFormatter",
]
