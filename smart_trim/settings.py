"""
Pydantic Settings for smart_trim.

Environment-driven defaults for trim configurations and the text format
registry used by the character summarizer.
"""

from functools import lru_cache
from typing import Any, List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings
from pydantic_settings import SettingsConfigDict

from smart_trim.core.constants import (
    DEFAULT_MORE_LINK_CLASS,
    DEFAULT_MORE_LINK_TEXT,
    DEFAULT_SUFFIX,
    DEFAULT_TRIM_LENGTH,
)
from smart_trim.enums import SummaryMode, TrimUnit


class Settings(PydanticBaseSettings):
    """
    Application settings using Pydantic for validation and environment loading.

    Every field can be overridden with a ``SMART_TRIM_`` prefixed environment
    variable, except ``debug_logs_enabled`` which shares the unprefixed
    ``DEBUG_LOGS_ENABLED`` switch read by the logger.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="SMART_TRIM_",
        validate_assignment=True,
        extra="ignore",
        populate_by_name=True,
    )

    # Debug settings
    debug_logs_enabled: bool = Field(
        default=False,
        description="Enable debug logging output",
        validation_alias="DEBUG_LOGS_ENABLED",
    )

    # Trim defaults
    default_trim_length: int = Field(
        default=DEFAULT_TRIM_LENGTH,
        description="Trim length used when a config does not set one",
        ge=0,
    )
    default_trim_unit: TrimUnit = Field(
        default=TrimUnit.CHARS, description="Unit the trim length is counted in"
    )
    default_suffix: str = Field(
        default=DEFAULT_SUFFIX, description="Suffix appended to shortened text"
    )
    default_more_link_text: str = Field(
        default=DEFAULT_MORE_LINK_TEXT, description="Anchor text of the more link"
    )
    default_summary_mode: SummaryMode = Field(
        default=SummaryMode.FULL,
        description="How a summary is used when the content has one",
    )

    more_link_class: str = Field(
        default=DEFAULT_MORE_LINK_CLASS,
        description="CSS class set on the rendered more link",
    )

    # Text formats
    line_break_formats: List[str] = Field(
        default=["plain_text", "restricted_html"],
        description="Formats in which a bare newline counts as a line break",
    )
    html_corrector_formats: List[str] = Field(
        default=["basic_html", "restricted_html", "full_html"],
        description="Formats whose summaries get their tags balanced",
    )

    @field_validator("debug_logs_enabled", mode="before")
    def parse_debug_logs(cls, v: Any) -> bool:
        """Parse debug logs from various string formats with strict validation"""
        if isinstance(v, str):
            lower_v = v.lower()
            if lower_v in ("true", "1", "yes", "on"):
                return True
            elif lower_v in ("false", "0", "no", "off"):
                return False
            else:
                raise ValueError(
                    f"Invalid boolean value: '{v}'. Must be one of: true, false, 1, "
                    "0, yes, no, on, off"
                )
        return bool(v)


@lru_cache()
def get_settings() -> Settings:
    """
    Get the application settings instance (singleton pattern).

    Returns:
        Settings: The application settings instance
    """
    return Settings()


def reload_settings():
    """
    Reload settings by clearing the cache.
    Useful for testing and dynamic configuration changes.
    """
    get_settings.cache_clear()
