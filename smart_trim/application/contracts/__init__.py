from .html_corrector import IHTMLCorrector
from .link_renderer import ILinkRenderer
from .summarizer import ISummarizer

__all__ = ["IHTMLCorrector", "ILinkRenderer", "ISummarizer"]
