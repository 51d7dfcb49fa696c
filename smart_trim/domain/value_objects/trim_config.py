"""
TrimConfig - display options for one trimming call.

Built once per render call and never mutated; the ``with_*`` helpers
return modified copies.
"""

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Optional

from smart_trim.core.constants import (
    DEFAULT_MORE_LINK_TEXT,
    DEFAULT_SUFFIX,
    DEFAULT_TRIM_LENGTH,
)
from smart_trim.domain.exceptions import ConfigurationError
from smart_trim.enums import SummaryMode, TrimUnit

if TYPE_CHECKING:
    from smart_trim.settings import Settings


@dataclass(frozen=True)
class TrimConfig:
    """
    Configuration for trimming a content item.

    ``trim_unit`` and ``summary_mode`` accept either the enum member or its
    string value.
    """

    trim_length: int = DEFAULT_TRIM_LENGTH
    trim_unit: TrimUnit = TrimUnit.CHARS
    suffix: str = DEFAULT_SUFFIX
    show_more_link: bool = False
    more_link_text: str = DEFAULT_MORE_LINK_TEXT
    summary_mode: SummaryMode = SummaryMode.FULL
    strip_html: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        if isinstance(self.trim_length, bool) or not isinstance(self.trim_length, int):
            raise ConfigurationError(
                "trim_length must be an integer", "trim_length", self.trim_length
            )
        if self.trim_length < 0:
            raise ConfigurationError(
                "trim_length must not be negative", "trim_length", self.trim_length
            )

        object.__setattr__(
            self, "trim_unit", _coerce_enum(TrimUnit, self.trim_unit, "trim_unit")
        )
        object.__setattr__(
            self,
            "summary_mode",
            _coerce_enum(SummaryMode, self.summary_mode, "summary_mode"),
        )

    @classmethod
    def from_settings(cls, settings: "Settings") -> "TrimConfig":
        """Create a TrimConfig from the environment defaults."""
        return cls(
            trim_length=settings.default_trim_length,
            trim_unit=settings.default_trim_unit,
            suffix=settings.default_suffix,
            more_link_text=settings.default_more_link_text,
            summary_mode=settings.default_summary_mode,
        )

    @property
    def is_word_mode(self) -> bool:
        """Check if the trim length counts words."""
        return self.trim_unit == TrimUnit.WORDS

    @property
    def has_suffix(self) -> bool:
        """Check if the suffix has any visible characters."""
        return self.suffix.strip() != ""

    @property
    def uses_summary(self) -> bool:
        """Check if a summary, when present, replaces the body."""
        return self.summary_mode != SummaryMode.IGNORE

    def describe(self) -> str:
        """Short human-readable description, e.g. "300 characters with suffix"."""
        unit = "words" if self.is_word_mode else "characters"
        description = f"{self.trim_length} {unit}"
        if self.has_suffix:
            description += " with suffix"
        if self.show_more_link:
            description += ", with more link"
        return description

    def with_trim_length(self, trim_length: int) -> "TrimConfig":
        """Create new TrimConfig with a different trim length."""
        return replace(self, trim_length=trim_length)

    def with_trim_unit(self, trim_unit: TrimUnit) -> "TrimConfig":
        """Create new TrimConfig with a different trim unit."""
        return replace(self, trim_unit=trim_unit)

    def with_more_link(self, text: Optional[str] = None) -> "TrimConfig":
        """Create new TrimConfig that shows the more link."""
        return replace(
            self,
            show_more_link=True,
            more_link_text=self.more_link_text if text is None else text,
        )

    def __str__(self) -> str:
        return (
            f"TrimConfig({self.describe()}, summary={self.summary_mode.value}, "
            f"strip_html={self.strip_html})"
        )


def _coerce_enum(enum_cls, value, key: str):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError as e:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ConfigurationError(
            f"expected one of: {allowed}", key, value, original_exception=e
        ) from e
