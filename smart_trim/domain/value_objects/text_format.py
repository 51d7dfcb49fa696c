"""
TextFormat - what the summarizer needs to know about a markup dialect.
"""

from dataclasses import dataclass
from typing import Optional

from smart_trim.logger import get_logger
from smart_trim.settings import Settings, get_settings

logger = get_logger(__name__)


@dataclass(frozen=True)
class TextFormat:
    """
    Markup dialect flags.

    converts_line_breaks: a bare newline renders as a line break, so it is a
        valid cut point.
    corrects_html: summaries in this dialect get their tags balanced.
    """

    name: Optional[str] = None
    converts_line_breaks: bool = False
    corrects_html: bool = False

    @classmethod
    def resolve(
        cls, name: Optional[str], settings: Optional[Settings] = None
    ) -> "TextFormat":
        """Look up the flags for a format name; unknown names get neither flag."""
        settings = settings or get_settings()
        text_format = cls(
            name=name,
            converts_line_breaks=name in settings.line_break_formats,
            corrects_html=name in settings.html_corrector_formats,
        )
        if name is not None and text_format == cls(name=name):
            logger.debug(f"Text format '{name}' has no registered behaviour")
        return text_format
