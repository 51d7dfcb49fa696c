"""
ISummarizer Interface - Abstract interface for structure-aware summaries

The trimmer delegates character-budget truncation to this interface so the
boundary heuristics can be replaced without touching the trimming stages.
"""

from abc import ABC, abstractmethod
from typing import Optional


class ISummarizer(ABC):
    """
    Abstract interface for character-budget summarization.

    Implementations return a prefix of the text no longer than the budget,
    preferring paragraph or sentence boundaries, with balanced tags.
    """

    @abstractmethod
    def summarize(self, text: str, text_format: Optional[str], size: int) -> str:
        """
        Summarize text to at most ``size`` characters.

        Args:
            text: Markup to summarize
            text_format: Name of the markup dialect, None if unknown
            size: Character budget; 0 means no limit

        Returns:
            The summary, or ``text`` itself when it already fits
        """
        pass
