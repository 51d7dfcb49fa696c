"""
Domain Value Objects

Immutable inputs and settings of the trimming pipeline.
"""

from .content_item import ContentItem, TargetLink
from .text_format import TextFormat
from .trim_config import TrimConfig

__all__ = [
    "ContentItem",
    "TargetLink",
    "TextFormat",
    "TrimConfig",
]
