"""
TextSummarizer - Concrete implementation of ISummarizer

Cuts markup to a character budget, then walks back to the latest paragraph
end, line break or sentence end inside the slice.
"""

from typing import Dict, List, Optional

from smart_trim.application.contracts.html_corrector import IHTMLCorrector
from smart_trim.application.contracts.summarizer import ISummarizer
from smart_trim.core.constants import (
    BREAK_MARKER,
    LINE_BREAK_POINTS,
    NEWLINE_BREAK_POINT,
    PARAGRAPH_BREAK_POINTS,
    SENTENCE_BREAK_POINTS,
)
from smart_trim.domain.value_objects.text_format import TextFormat
from smart_trim.logger import get_logger
from smart_trim.settings import Settings

logger = get_logger(__name__)


class TextSummarizer(ISummarizer):
    """
    Structure-aware summarizer.

    Rules, in order:
      1. An author break marker wins when the text before it fits the
         budget (a budget of 0 means no limit).
      2. Text that already fits is returned unchanged.
      3. Otherwise the text is sliced to the budget and cut at the latest
         break point of the most preferred group found in the slice:
         paragraph ends, then line breaks, then sentence ends. With no
         break point the slice is kept as is.
      4. Formats that correct HTML get the summary balanced.
    """

    def __init__(self, corrector: IHTMLCorrector, settings: Optional[Settings] = None):
        self.corrector = corrector
        self.settings = settings

    def summarize(self, text: str, text_format: Optional[str], size: int) -> str:
        delimiter = text.find(BREAK_MARKER)
        if delimiter == -1 and (size == 0 or len(text) <= size):
            return text

        dialect = TextFormat.resolve(text_format, self.settings)

        if delimiter != -1 and (size == 0 or delimiter <= size):
            logger.debug(f"Summary cut at break marker (offset {delimiter})")
            summary = text[:delimiter]
        else:
            summary = self._cut_at_break_point(text[:size], dialect)

        if dialect.corrects_html:
            summary = self.corrector.correct(summary)
        return summary

    def _break_point_groups(self, dialect: TextFormat) -> List[Dict[str, int]]:
        line_breaks = dict(LINE_BREAK_POINTS)
        if dialect.converts_line_breaks:
            line_breaks[NEWLINE_BREAK_POINT] = 1
        return [PARAGRAPH_BREAK_POINTS, line_breaks, SENTENCE_BREAK_POINTS]

    def _cut_at_break_point(self, summary: str, dialect: TextFormat) -> str:
        # Distances are counted back from the end of the slice.
        max_rpos = len(summary)
        min_rpos = max_rpos

        for points in self._break_point_groups(dialect):
            for point, offset in points.items():
                position = summary.rfind(point)
                if position != -1:
                    rpos = max_rpos - position - len(point)
                    min_rpos = min(rpos + offset, min_rpos)

            if min_rpos != max_rpos:
                logger.debug(f"Summary cut {min_rpos} characters before budget")
                return summary[: max_rpos - min_rpos] if min_rpos else summary

        return summary
