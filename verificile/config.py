"""Configuration management with Pydantic and XDG base directory support."""

from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from verificile.utils.paths import get_config_home


class Settings(BaseSettings):
    """Verificile configuration settings.

    Precedence: CLI flag > environment variable > .env file > defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="VERIFICILE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Run modes
    interactive: bool = Field(
        default=False,
        description="Prompt the operator to fix each anomaly as it is found",
    )

    recursive: bool = Field(
        default=False,
        description="Descend into subdirectories of each scan root",
    )

    forensic: bool = Field(
        default=False,
        description="Read-only mode: never rename files or write reports (implies verbose)",
    )

    # Presentation
    verbose: bool = Field(
        default=False,
        description="Print anomalies to the console as they are found",
    )

    debug: bool = Field(
        default=False,
        description="Show detailed per-file processing steps",
    )

    color: bool = Field(
        default=True,
        description="Use ANSI colors in terminal output",
    )

    # Locations
    report_dir: Path | None = Field(
        default=None,
        description="Directory for anomaly reports and rename logs (defaults to CWD)",
    )

    types_file: Path | None = Field(
        default=None,
        description="YAML file with extra content-type to extension mappings",
    )

    config_dir: Path | None = Field(
        default=None,
        description="Override config directory (defaults to XDG_CONFIG_HOME/verificile)",
    )

    def model_post_init(self, __context: Any) -> None:
        """Forensic runs always report anomalies on the console."""
        super().model_post_init(__context)
        if self.forensic:
            self.verbose = True

    def get_config_dir(self) -> Path:
        """Get the config directory (not created)."""
        if self.config_dir:
            return self.config_dir
        return get_config_home() / "verificile"

    def get_report_dir(self) -> Path:
        """Get the directory where reports are written."""
        if self.report_dir:
            return self.report_dir
        return Path.cwd()

    def get_types_file(self) -> Path | None:
        """Return the content-type mapping file, if one is configured or present.

        An explicit ``types_file`` is returned as-is (even if missing, so the
        loader can report it). Otherwise ``<config_dir>/types.yaml`` is used
        when it exists.
        """
        if self.types_file is not None:
            return self.types_file

        default_path = self.get_config_dir() / "types.yaml"
        if default_path.exists():
            return default_path
        return None


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance (useful for testing)."""
    global _settings
    _settings = settings
