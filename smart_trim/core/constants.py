"""
Constants module for smart_trim.

Markers, break points and defaults shared by the trimming stages.
"""

# =============================================================================
# CONTENT MARKERS
# =============================================================================

# Author-placed cut point inside body text
BREAK_MARKER = "<!--break-->"

NBSP_CHAR = "\u00a0"

# =============================================================================
# FORMATTER DEFAULTS
# =============================================================================

DEFAULT_TRIM_LENGTH = 300
DEFAULT_SUFFIX = "..."
DEFAULT_MORE_LINK_TEXT = "Read more"
DEFAULT_MORE_LINK_CLASS = "more-link"

# =============================================================================
# SUMMARIZER BREAK POINTS
# =============================================================================

# Each entry maps a break point to the number of its trailing characters
# dropped from the summary. Groups are tried in order; the first group with
# any match wins.
PARAGRAPH_BREAK_POINTS = {"</p>": 0}
LINE_BREAK_POINTS = {"<br />": 6, "<br>": 4}
NEWLINE_BREAK_POINT = "\n"
SENTENCE_BREAK_POINTS = {
    ". ": 1,
    "! ": 1,
    "? ": 1,
    "。": 0,
    "؟ ": 1,
}

HTML_PARSER = "html.parser"
