"""Application configuration with pydantic-settings + TOML."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict, TomlConfigSettingsSource

from treecycle.models.enums import LogLevel


def _default_config_dir() -> Path:
    return Path.home() / ".treecycle"


def _default_output_dir() -> Path:
    return Path("output")


class CanvasSettings(BaseSettings):
    """Window / frame geometry."""

    width: int = Field(default=800, ge=200, le=4096)
    height: int = Field(default=600, ge=200, le=4096)
    ground_level: int = Field(default=450, gt=0)
    title: str = "Animated Tree Life Cycle"

    @model_validator(mode="after")
    def _ground_inside_frame(self) -> CanvasSettings:
        if self.ground_level >= self.height:
            msg = f"ground_level ({self.ground_level}) must be above the bottom edge ({self.height})"
            raise ValueError(msg)
        return self

    @property
    def center(self) -> tuple[float, float]:
        return self.width / 2, self.height / 2


class TimingSettings(BaseSettings):
    """Frame rate and per-phase frame counts."""

    fps: int = Field(default=30, gt=0, le=120)
    germination_frames: int = Field(default=60, gt=0)
    leaf_frames: int = Field(default=80, gt=0)
    growth_frames: int = Field(default=150, gt=0)
    flowering_frames: int = Field(default=80, gt=0)
    dispersal_min_frames: int = Field(default=50, ge=0)
    reset_frames: int = Field(default=50, gt=0)

    @property
    def frame_delay(self) -> float:
        """Seconds between frames."""
        return 1.0 / self.fps


class TreeSettings(BaseSettings):
    """Shape of the recursive branch structure."""

    trunk_length: float = Field(default=150.0, gt=0)
    depth: int = Field(default=8, ge=1, le=10)
    branch_angle: float = Field(default=0.3, ge=0.0, le=1.5)
    length_ratio: float = Field(default=0.7, gt=0.0, lt=1.0)
    middle_ratio: float = Field(default=0.8, gt=0.0, le=1.0)
    seedling_scale: float = Field(default=0.15, gt=0.0, lt=1.0)


class SeedSettings(BaseSettings):
    """Falling-seed physics."""

    gravity: float = Field(default=0.5, gt=0)
    spin: float = 0.1
    burial_depth: int = Field(default=80, ge=0)


class CameraSettings(BaseSettings):
    """Zoom/pan effect that follows the falling seed."""

    enabled: bool = True
    max_zoom: float = Field(default=2.0, ge=1.0, le=8.0)
    easing: float = Field(default=0.08, gt=0.0, le=1.0)


class AppConfig(BaseSettings):
    """Root application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="TREECYCLE_",
        env_nested_delimiter="__",
    )

    config_dir: Path = Field(default_factory=_default_config_dir)
    output_dir: Path = Field(default_factory=_default_output_dir)
    seed: int = 42
    log_level: LogLevel = LogLevel.WARNING
    canvas: CanvasSettings = Field(default_factory=CanvasSettings)
    timing: TimingSettings = Field(default_factory=TimingSettings)
    tree: TreeSettings = Field(default_factory=TreeSettings)
    seeds: SeedSettings = Field(default_factory=SeedSettings)
    camera: CameraSettings = Field(default_factory=CameraSettings)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @classmethod
    def settings_customise_sources(cls, settings_cls, **kwargs):  # type: ignore[override]
        toml_path = _default_config_dir() / "config.toml"
        sources = (
            kwargs.get("init_settings"),
            kwargs.get("env_settings"),
        )
        if toml_path.exists():
            sources = (*sources, TomlConfigSettingsSource(settings_cls, toml_file=toml_path))
        return (*sources, kwargs.get("dotenv_settings"), kwargs.get("file_secret_settings"))

    @property
    def seed_home(self) -> tuple[float, float]:
        """Where the first seed of every restart is buried."""
        return self.canvas.width / 2, self.canvas.ground_level + self.seeds.burial_depth


def load_config(**overrides: object) -> AppConfig:
    """Load application config, applying keyword overrides on top."""
    return AppConfig(**overrides)  # type: ignore[arg-type]
