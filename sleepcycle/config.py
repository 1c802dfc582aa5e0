"""
Configuration management using Pydantic models loaded from YAML.
"""

from pathlib import Path
from typing import Literal, Optional

import pendulum
import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from .domain.cycle_calculator import (
    BEDTIME_MAX_CYCLES,
    BEDTIME_MIN_CYCLES,
    DEFAULT_RECOMMENDATION_COUNT,
    FALL_ASLEEP_MINUTES,
    MIN_WAKE_CYCLES,
    REM_CYCLE_MINUTES,
    CycleCalculator,
)

Language = Literal["en", "es", "it", "pt"]


class CycleSettings(BaseModel):
    """Sleep cycle constants used by the calculator."""
    cycle_minutes: int = REM_CYCLE_MINUTES
    fall_asleep_minutes: int = FALL_ASLEEP_MINUTES
    min_wake_cycles: int = MIN_WAKE_CYCLES
    bedtime_max_cycles: int = BEDTIME_MAX_CYCLES
    bedtime_min_cycles: int = BEDTIME_MIN_CYCLES

    @field_validator("cycle_minutes", "min_wake_cycles", "bedtime_max_cycles", "bedtime_min_cycles")
    @classmethod
    def validate_positive(cls, value: int) -> int:
        """Ensure cycle length and counts are positive."""
        if value <= 0:
            raise ValueError(f"Value must be greater than zero, got {value}")
        return value

    @field_validator("fall_asleep_minutes")
    @classmethod
    def validate_latency(cls, value: int) -> int:
        """Validate the fall-asleep latency is not negative."""
        if value < 0:
            raise ValueError(f"fall_asleep_minutes must not be negative, got {value}")
        return value

    @model_validator(mode="after")
    def validate_bedtime_range(self) -> "CycleSettings":
        """Ensure the bedtime cycle range is not inverted."""
        if self.bedtime_min_cycles > self.bedtime_max_cycles:
            raise ValueError("bedtime_min_cycles must not exceed bedtime_max_cycles")
        return self

    def build_calculator(self) -> CycleCalculator:
        """Create a calculator using these settings."""
        return CycleCalculator(
            cycle_minutes=self.cycle_minutes,
            fall_asleep_minutes=self.fall_asleep_minutes,
            min_wake_cycles=self.min_wake_cycles,
            bedtime_max_cycles=self.bedtime_max_cycles,
            bedtime_min_cycles=self.bedtime_min_cycles,
        )


class AppConfig(BaseModel):
    """Application configuration."""
    recommendation_count: int = DEFAULT_RECOMMENDATION_COUNT
    language: Language = "en"
    timezone: str = "UTC"
    cycles: CycleSettings = Field(default_factory=CycleSettings)

    @field_validator("recommendation_count")
    @classmethod
    def validate_recommendation_count(cls, value: int) -> int:
        """Keep the number of suggestions within a displayable range."""
        if not 1 <= value <= 10:
            raise ValueError(f"recommendation_count must be between 1 and 10, got {value}")
        return value

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        """Reject timezone names pendulum does not know."""
        try:
            pendulum.timezone(value)
        except Exception as exc:
            raise ValueError(f"Unknown timezone: {value}") from exc
        return value

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"Please create a config.yaml file. See config.example.yaml for reference."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        return cls(**data)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "AppConfig":
        """
        Load an explicit config file, or the default one if it exists.

        Without an explicit path a missing default file is not an error;
        built-in defaults are used instead.
        """
        if config_path is not None:
            return cls.load_from_yaml(config_path)

        default_path = get_default_config_path()
        if default_path.exists():
            return cls.load_from_yaml(default_path)
        return cls()


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for config.yaml in current directory
    current_dir = Path.cwd()
    config_path = current_dir / "config.yaml"

    if not config_path.exists():
        # Try in the project root (parent of the package)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "config.yaml"

    return config_path
