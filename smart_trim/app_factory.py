"""
Application Factory
Single Responsibility: Build a fully wired Trimmer.
"""
from functools import lru_cache
from typing import Iterable, List, Optional

from injector import Injector

from smart_trim.app_factory_di import TrimmerModule
from smart_trim.application.services.trimmer import TrimResult, Trimmer
from smart_trim.domain.value_objects.content_item import ContentItem, TargetLink
from smart_trim.domain.value_objects.trim_config import TrimConfig
from smart_trim.settings import Settings, get_settings


def create_trimmer(settings: Optional[Settings] = None) -> Trimmer:
    """Create a Trimmer with the BeautifulSoup-backed collaborators."""
    injector = Injector(TrimmerModule(settings or get_settings()))
    return injector.get(Trimmer)


@lru_cache()
def get_default_trimmer() -> Trimmer:
    return create_trimmer()


def trim_item(
    item: ContentItem,
    config: TrimConfig,
    target_link: Optional[TargetLink] = None,
) -> TrimResult:
    """Trim one item with the default trimmer."""
    return get_default_trimmer().trim(item, config, target_link)


def trim_items(
    items: Iterable[ContentItem],
    config: TrimConfig,
    target_link: Optional[TargetLink] = None,
) -> List[TrimResult]:
    """Trim a list of items with the default trimmer, preserving order."""
    return get_default_trimmer().trim_items(items, config, target_link)
