"""
ExtensionComposer - appends the suffix and more link to trimmed text.

The extension goes in front of the closing tag that ends the text, so
``<p>Some text</p>`` becomes ``<p>Some text...</p>``. This is a narrow
pattern match on the end of the string, not an HTML parse: when the text
does not end in a closing tag the extension is simply appended.
"""

import re
from typing import Optional, Tuple

from smart_trim.application.contracts.link_renderer import ILinkRenderer
from smart_trim.core.constants import BREAK_MARKER, DEFAULT_MORE_LINK_CLASS
from smart_trim.domain.value_objects.content_item import TargetLink
from smart_trim.domain.value_objects.trim_config import TrimConfig

# A closing tag at the very end, optionally followed by one newline.
_CLOSING_TAG = re.compile(r"(</[^>]+>)(\n?)\Z")


class ExtensionComposer:
    """Builds the suffix/more-link extension and splices it into the text."""

    def __init__(
        self,
        link_renderer: ILinkRenderer,
        more_link_class: str = DEFAULT_MORE_LINK_CLASS,
    ):
        self.link_renderer = link_renderer
        self.more_link_class = more_link_class

    def compose(
        self,
        text: str,
        was_shortened: bool,
        config: TrimConfig,
        target_link: Optional[TargetLink] = None,
    ) -> str:
        extension = self.build_extension(text, was_shortened, config, target_link)
        return splice_extension(text, extension)

    def build_extension(
        self,
        text: str,
        was_shortened: bool,
        config: TrimConfig,
        target_link: Optional[TargetLink] = None,
    ) -> str:
        """
        Suffix (only when the text was shortened) plus the optional more link.

        One leading period is dropped from the suffix when the text, or the
        part of it in front of its final closing tag, already ends with a
        period. The more link is left out when the text ends at an author
        break marker.
        """
        extension = config.suffix if was_shortened else ""

        if extension.startswith(".") and ends_with_period(text):
            extension = extension[1:]

        if (
            config.show_more_link
            and target_link is not None
            and not text.endswith(BREAK_MARKER)
        ):
            extension += self.link_renderer.render(
                config.more_link_text,
                target_link.path,
                {"class": self.more_link_class},
            )

        return extension


def split_trailing_tag(text: str) -> Optional[Tuple[str, str, str]]:
    """
    Split ``text`` into (body, closing tag, trailing newline) when it ends
    in a closing tag. One whitespace character in front of the tag is
    dropped from the body. Returns None when there is no such tag.
    """
    start = text.rfind("</")
    if start == -1:
        return None

    match = _CLOSING_TAG.match(text, start)
    if not match:
        return None

    body = text[:start]
    if body[-1:].isspace():
        body = body[:-1]
    return body, match.group(1), match.group(2)


def ends_with_period(text: str) -> bool:
    if text.endswith("."):
        return True
    parts = split_trailing_tag(text)
    return parts is not None and parts[0].endswith(".")


def splice_extension(text: str, extension: str) -> str:
    """Insert ``extension`` before the final closing tag, else append it."""
    if not extension:
        return text

    parts = split_trailing_tag(text)
    if parts:
        body, tag, newline = parts
        spliced = body + extension + tag + newline
        if spliced != text:
            return spliced

    return text + extension
