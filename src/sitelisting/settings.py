"""
Pydantic v2 settings for listing generation.
Supports .env files and SITELISTING_* environment variables with runtime validation.
"""

from pathlib import Path
from typing import Dict

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from sitelisting.consts import DEFAULT_CONTENT_SELECTOR, DEFAULT_ROW_COUNT


ROOT_PATH = Path(__file__).parent.parent.parent


class ListingSettings(BaseSettings):
    """Listing generation configuration."""

    model_config = SettingsConfigDict(
        env_prefix='SITELISTING_',
        env_file=(ROOT_PATH / '.env'),
        env_file_encoding='utf-8',
        env_nested_delimiter='__',
        extra='ignore',
    )

    log_level         : str         = Field(default="INFO", description="Logging level", pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    resources_path    : Path | None = Field(default=None, description="Root directory listing templates are resolved against; unset means the working directory")
    content_selector  : str         = Field(default=DEFAULT_CONTENT_SELECTOR, description="CSS selector of the container a missing listing target is created in")
    default_row_count : int         = Field(default=DEFAULT_ROW_COUNT, gt=0, description="Rows per page when a listing does not set row-count")

    def resource_path(self, template: str | Path) -> Path:
        """Resolve a template path against the resources directory; absolute paths pass through."""
        path = Path(template)
        if path.is_absolute() or self.resources_path is None:
            return path
        return self.resources_path / path


# Global settings singleton
SETTINGS: Dict[str, ListingSettings] = {}

def get_settings() -> ListingSettings:
    """Retrieve the global settings singleton, creating it from the environment on first access.

    Example:
        >>> settings = get_settings()
        >>> settings.resource_path("listing-grid.ejs.md")
        PosixPath('listing-grid.ejs.md')

    Note:
        Environment changes after the first call are not picked up until `reset_settings()`.
    """
    if (settings := SETTINGS.get("current", None)) is None:
        settings = SETTINGS["current"] = ListingSettings()
    return settings

def reset_settings() -> None:
    """Drop the cached settings so the next `get_settings()` re-reads the environment."""
    SETTINGS.clear()
