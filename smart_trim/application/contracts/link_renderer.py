"""
ILinkRenderer Interface - Abstract interface for rendering anchors

Link text and paths come from content authors and must be escaped by
implementations.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional


class ILinkRenderer(ABC):
    """Abstract interface for link rendering."""

    @abstractmethod
    def render(
        self, text: str, path: str, attributes: Optional[Dict[str, str]] = None
    ) -> str:
        """
        Render an anchor element.

        Args:
            text: Anchor text (untrusted)
            path: Link target (untrusted)
            attributes: Extra attributes, e.g. ``{"class": "more-link"}``

        Returns:
            Escaped anchor markup
        """
        pass
