"""
BeautifulSoupCorrector - Concrete implementation of IHTMLCorrector

Re-serializing a fragment through BeautifulSoup closes every tag the parser
saw opened and drops closing tags that match nothing.
"""

from bs4 import BeautifulSoup

from smart_trim.application.contracts.html_corrector import IHTMLCorrector
from smart_trim.core.constants import HTML_PARSER


class BeautifulSoupCorrector(IHTMLCorrector):
    """
    Adapter that implements IHTMLCorrector using BeautifulSoup4.

    Void elements come back in XHTML form (``<br/>``) and character
    references are normalized by the serializer.
    """

    def __init__(self, parser: str = HTML_PARSER):
        """
        Initialize the corrector.

        Args:
            parser: BeautifulSoup parser to use (default: "html.parser")
        """
        self.parser = parser

    def correct(self, html_content: str) -> str:
        if not html_content:
            return ""
        return str(BeautifulSoup(html_content, self.parser))
