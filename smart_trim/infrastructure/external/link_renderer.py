"""
BeautifulSoupLinkRenderer - Concrete implementation of ILinkRenderer
"""

from typing import Dict, Optional

from bs4 import BeautifulSoup

from smart_trim.application.contracts.link_renderer import ILinkRenderer
from smart_trim.core.constants import HTML_PARSER


class BeautifulSoupLinkRenderer(ILinkRenderer):
    """
    Builds anchors as BeautifulSoup tags so the serializer escapes the
    text and attribute values.
    """

    def __init__(self, parser: str = HTML_PARSER):
        self.parser = parser

    def render(
        self, text: str, path: str, attributes: Optional[Dict[str, str]] = None
    ) -> str:
        soup = BeautifulSoup("", self.parser)
        attrs = {"href": path}
        attrs.update(attributes or {})
        anchor = soup.new_tag("a", attrs=attrs)
        anchor.string = text
        return str(anchor)
