"""
Pydantic models for host-supplied formatter settings.

Hosts often store formatter options as loose mappings (numbers as strings,
checkbox groups as dicts). FormatterSettings validates such a mapping and
turns it into a TrimConfig.
"""

from typing import Any, Set

from pydantic import BaseModel, ConfigDict, Field, field_validator

from smart_trim.core.constants import (
    DEFAULT_MORE_LINK_TEXT,
    DEFAULT_SUFFIX,
    DEFAULT_TRIM_LENGTH,
)
from smart_trim.domain.value_objects.trim_config import TrimConfig
from smart_trim.enums import SummaryMode, TrimUnit

STRIP_HTML_OPTION = "text"


class FormatterSettings(BaseModel):
    """Formatter settings as stored by the host."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    trim_length: int = Field(
        default=DEFAULT_TRIM_LENGTH, description="Trim length", ge=0
    )
    trim_type: TrimUnit = Field(default=TrimUnit.CHARS, description="Trim units")
    trim_suffix: str = Field(default=DEFAULT_SUFFIX, description="Suffix")
    more_link: bool = Field(default=False, description="Display more link?")
    more_text: str = Field(
        default=DEFAULT_MORE_LINK_TEXT, description="More link text"
    )
    summary_handler: SummaryMode = Field(
        default=SummaryMode.FULL, description="How a summary is used"
    )
    trim_options: Set[str] = Field(
        default_factory=set, description="Checked additional options"
    )

    @field_validator("summary_handler", mode="before")
    def empty_handler_ignores_summary(cls, v: Any) -> Any:
        """An unset handler falls back to the body, like 'ignore'."""
        if v is None or v == "":
            return SummaryMode.IGNORE
        return v

    @field_validator("trim_options", mode="before")
    def parse_checkboxes(cls, v: Any) -> Any:
        """
        Accept a checkbox mapping ({"text": "text"} checked, {"text": 0}
        unchecked), a list of checked keys, or an empty value.
        """
        if not v:
            return set()
        if isinstance(v, dict):
            return {key for key, checked in v.items() if checked}
        if isinstance(v, str):
            return {v}
        return v

    @property
    def strip_html(self) -> bool:
        return STRIP_HTML_OPTION in self.trim_options

    def to_config(self) -> TrimConfig:
        """Convert to the immutable config used by the trimmer."""
        return TrimConfig(
            trim_length=self.trim_length,
            trim_unit=self.trim_type,
            suffix=self.trim_suffix,
            show_more_link=self.more_link,
            more_link_text=self.more_text,
            summary_mode=self.summary_handler,
            strip_html=self.strip_html,
        )
