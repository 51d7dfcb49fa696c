"""
Truncator - cuts selected text to the configured length.
"""

from dataclasses import dataclass
from typing import Optional

from smart_trim.application.contracts.html_corrector import IHTMLCorrector
from smart_trim.application.contracts.summarizer import ISummarizer
from smart_trim.domain.value_objects.trim_config import TrimConfig
from smart_trim.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class TruncationResult:
    """Dataclass for holding the outcome of one truncation."""

    text: str
    was_shortened: bool


class Truncator:
    """
    Truncates text by words or by characters.

    Dependencies (injected via constructor):
    - ISummarizer: structure-aware cut for character mode
    - IHTMLCorrector: balances tags after a raw word slice
    """

    def __init__(self, summarizer: ISummarizer, corrector: IHTMLCorrector):
        self.summarizer = summarizer
        self.corrector = corrector

    def truncate(
        self, text: str, config: TrimConfig, body_format: Optional[str] = None
    ) -> TruncationResult:
        """
        Truncate ``text`` according to ``config``.

        ``was_shortened`` compares code point lengths of input and output,
        so a summarizer that hands back the text untouched reports no
        shortening.
        """
        if not text:
            return TruncationResult(text="", was_shortened=False)

        if config.is_word_mode:
            output = self._truncate_words(text, config.trim_length)
        else:
            output = self.summarizer.summarize(text, body_format, config.trim_length)

        was_shortened = len(text) != len(output)
        logger.debug(
            f"Truncated {len(text)} -> {len(output)} characters "
            f"({config.trim_unit.value}, limit {config.trim_length})"
        )
        return TruncationResult(text=output, was_shortened=was_shortened)

    def _truncate_words(self, text: str, trim_length: int) -> str:
        words = text.split()
        if len(words) <= trim_length:
            return text

        # A raw word slice can end inside an element.
        return self.corrector.correct(" ".join(words[:trim_length]))
