"""
Configuration management for the Photo Assistant exposure engine.

Uses pydantic-settings for environment-based configuration with validation.
All settings can be overridden via environment variables with PHA_ prefix.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

from photo_assistant.core.types import StepMode

load_dotenv()


class ExposureSettings(BaseSettings):
    """Settings for scale generation and exposure composition."""

    model_config = SettingsConfigDict(env_prefix="PHA_EXPOSURE_")

    # Validity ceiling for calculated and corrected shutter times (8 hours)
    max_shutter_seconds: float = Field(default=28800.0, gt=0.0)

    # Aperture scale range (f-numbers)
    min_aperture: float = Field(default=1.0, gt=0.0)
    max_aperture: float = Field(default=64.0, gt=0.0)

    # Shutter scale range (seconds)
    fastest_shutter_seconds: float = Field(default=1.0 / 8000.0, gt=0.0)
    slowest_shutter_seconds: float = Field(default=28800.0, gt=0.0)

    # Sensitivity scale range (ISO)
    min_iso: float = Field(default=25.0, gt=0.0)
    max_iso: float = Field(default=102400.0, gt=0.0)

    # Step mode used by the composer when snapping shutter speeds
    default_step_mode: StepMode = Field(default=StepMode.THIRD)

    # Window in which shutter values use the sub-two-second override table
    shutter_override_min: float = Field(default=0.24, gt=0.0)
    shutter_override_max: float = Field(default=2.1, gt=0.0)

    # Preferences file used by load/save helpers when no path is given
    preferences_file: Optional[Path] = Field(default=None)

    @model_validator(mode="after")
    def check_ranges(self) -> "ExposureSettings":
        """Ensure every range is ordered low to high."""
        if self.min_aperture > self.max_aperture:
            raise ValueError("min_aperture must not exceed max_aperture")
        if self.fastest_shutter_seconds > self.slowest_shutter_seconds:
            raise ValueError("fastest_shutter_seconds must not exceed slowest_shutter_seconds")
        if self.min_iso > self.max_iso:
            raise ValueError("min_iso must not exceed max_iso")
        if self.shutter_override_min > self.shutter_override_max:
            raise ValueError("shutter_override_min must not exceed shutter_override_max")
        return self


class Settings(BaseSettings):
    """Main application settings aggregating all subsettings."""

    model_config = SettingsConfigDict(
        env_prefix="PHA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application info
    app_name: str = Field(default="Photo Assistant")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)
    log_file: Optional[Path] = Field(default=None)

    # Data directory for catalogs and preferences
    data_dir: Path = Field(default=Path.home() / ".photo_assistant")

    # Subsettings
    exposure: ExposureSettings = Field(default_factory=ExposureSettings)

    @property
    def preferences_path(self) -> Path:
        """Resolved location of the persisted exposure preferences."""
        path = self.exposure.preferences_file
        if path is None:
            return self.data_dir / "exposure_preferences.json"
        if not path.is_absolute():
            return self.data_dir / path
        return path

    def ensure_directories(self) -> None:
        """Create required directories if they don't exist."""
        self.data_dir.mkdir(parents=True, exist_ok=True)


# Global settings instance - lazy loaded
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if necessary."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def configure(settings: Optional[Settings] = None, **kwargs) -> Settings:
    """
    Configure the global settings.

    Args:
        settings: Optional Settings instance to use directly
        **kwargs: Settings overrides

    Returns:
        The configured Settings instance
    """
    global _settings
    if settings is not None:
        _settings = settings
    elif kwargs:
        _settings = Settings(**kwargs)
    else:
        _settings = Settings()
    return _settings
