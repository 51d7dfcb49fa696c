"""
Source selection: summary or body.
"""

from dataclasses import dataclass

from smart_trim.domain.value_objects.content_item import ContentItem
from smart_trim.domain.value_objects.trim_config import TrimConfig
from smart_trim.enums import SummaryMode


@dataclass(frozen=True)
class SourceSelection:
    """The text to trim and how it was chosen."""

    text: str
    used_summary: bool

    skip_truncation: bool = False


def select_source(item: ContentItem, config: TrimConfig) -> SourceSelection:
    """
    Pick the text the rest of the pipeline operates on.

    A full summary is authoritative and is never shortened further; a
    trimmed summary goes through truncation like body text.
    """
    if not config.uses_summary or not item.has_summary:
        return SourceSelection(text=item.body or "", used_summary=False)

    return SourceSelection(
        text=item.summary,
        used_summary=True,
        skip_truncation=config.summary_mode == SummaryMode.FULL,
    )
