"""
Trimmer - renders a content item to a bounded length.

Runs the stages in order: source selection, optional sanitizing,
truncation and extension composition. Holds no per-call state, so one
instance can serve any number of items.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from smart_trim.application.services.extension_composer import ExtensionComposer
from smart_trim.application.services.sanitizer import sanitize
from smart_trim.application.services.source_selector import select_source
from smart_trim.application.services.truncator import TruncationResult, Truncator
from smart_trim.domain.value_objects.content_item import ContentItem, TargetLink
from smart_trim.domain.value_objects.trim_config import TrimConfig
from smart_trim.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class TrimResult:
    """Dataclass for holding the rendered markup of one item."""

    markup: str
    was_shortened: bool
    used_summary: bool

    def __str__(self) -> str:
        return self.markup


class Trimmer:
    """
    Summarizes content items.

    Dependencies (injected via constructor):
    - Truncator: cuts the selected text
    - ExtensionComposer: appends suffix and more link
    """

    def __init__(self, truncator: Truncator, composer: ExtensionComposer):
        self.truncator = truncator
        self.composer = composer

    def trim(
        self,
        item: ContentItem,
        config: TrimConfig,
        target_link: Optional[TargetLink] = None,
    ) -> TrimResult:
        """
        Render one content item.

        Args:
            item: Body, format and optional summary
            config: Display options
            target_link: Where the more link points; without one no link is
                rendered

        Returns:
            TrimResult with the final markup
        """
        selection = select_source(item, config)
        text = selection.text

        if config.strip_html:
            text = sanitize(text)

        if selection.skip_truncation:
            result = TruncationResult(text=text, was_shortened=False)
        else:
            result = self.truncator.truncate(text, config, item.body_format)

        markup = self.composer.compose(
            result.text, result.was_shortened, config, target_link
        )

        logger.debug(
            f"Trimmed item with {config}: summary={selection.used_summary}, "
            f"shortened={result.was_shortened}"
        )
        return TrimResult(
            markup=markup,
            was_shortened=result.was_shortened,
            used_summary=selection.used_summary,
        )

    def trim_items(
        self,
        items: Iterable[ContentItem],
        config: TrimConfig,
        target_link: Optional[TargetLink] = None,
    ) -> List[TrimResult]:
        """Render every item of a field, keeping their order."""
        return [self.trim(item, config, target_link) for item in items]
