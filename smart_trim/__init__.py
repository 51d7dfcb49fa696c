"""
smart_trim - trims long-form markup to a bounded length.

Keeps HTML balanced and can append a suffix and a "read more" link.
"""

from smart_trim.app_factory import create_trimmer, trim_item, trim_items
from smart_trim.application.services.trimmer import TrimResult, Trimmer
from smart_trim.domain.exceptions import ConfigurationError, SmartTrimError
from smart_trim.domain.value_objects import (
    ContentItem,
    TargetLink,
    TextFormat,
    TrimConfig,
)
from smart_trim.enums import SummaryMode, TrimUnit
from smart_trim.models import FormatterSettings

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "ContentItem",
    "FormatterSettings",
    "SmartTrimError",
    "SummaryMode",
    "TargetLink",
    "TextFormat",
    "TrimConfig",
    "TrimResult",
    "TrimUnit",
    "Trimmer",
    "create_trimmer",
    "trim_item",
    "trim_items",
]
