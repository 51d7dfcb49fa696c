"""Plain-text conversion for the strip-HTML option."""

import re

from bs4 import BeautifulSoup
from bs4.dammit import EntitySubstitution

from smart_trim.core.constants import HTML_PARSER, NBSP_CHAR

__all__ = ["sanitize"]

_LINE_BREAKS = re.compile(r"\n|\r|\t")
_EXTRA_SPACES = re.compile(r"\s\s+")


def sanitize(text: str) -> str:
    """Strip tags, line breaks and non-breaking spaces from markup.

    A space goes in front of every ``<`` first so words on either side of a
    removed tag stay apart. The remaining text is re-escaped, which keeps the
    result safe to embed and makes the function idempotent.
    """
    if not text:
        return ""

    soup = BeautifulSoup(text.replace("<", " <"), HTML_PARSER)
    output = EntitySubstitution.substitute_xml(soup.get_text())

    output = _LINE_BREAKS.sub(" ", output)
    # get_text() has already decoded &nbsp; entities to NBSP_CHAR.
    output = output.replace(NBSP_CHAR, " ")

    return _EXTRA_SPACES.sub(" ", output).strip()
