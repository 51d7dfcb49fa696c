from .beautiful_soup_corrector import BeautifulSoupCorrector
from .link_renderer import BeautifulSoupLinkRenderer
from .text_summarizer import TextSummarizer

__all__ = ["BeautifulSoupCorrector", "BeautifulSoupLinkRenderer", "TextSummarizer"]
