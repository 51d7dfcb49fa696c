"""
ContentItem and TargetLink - the per-call inputs of the trimmer.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ContentItem:
    """
    One field value to render.

    ``body_format`` names the markup dialect of ``body`` and ``summary``; it
    decides which break points and corrections the summarizer applies.
    """

    body: str = ""
    body_format: Optional[str] = None
    summary: Optional[str] = None

    @property
    def has_summary(self) -> bool:
        """Check if a non-empty summary is present."""
        return bool(self.summary)


@dataclass(frozen=True)
class TargetLink:
    """Location the more link points at."""

    path: str

    def __str__(self) -> str:
        return self.path
