from enum import Enum


class TrimUnit(Enum):
    CHARS = "chars"
    WORDS = "words"


class SummaryMode(Enum):
    FULL = "full"
    TRIM = "trim"
    IGNORE = "ignore"
