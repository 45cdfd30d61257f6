"""Mini README: Centralised configuration models and helpers for Skysweep.

Structure:
    * SkysweepSettings - pydantic settings describing runtime defaults.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Only the HTTP interface and the CLI read settings. They translate the
    values into explicit arguments (``SurveyConfig`` defaults and a
    ``BatteryPolicy``) so the planner and validator never consult ambient
    state. Environment variables use the ``SKYSWEEP_`` prefix.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SkysweepSettings(BaseSettings):
    """Runtime configuration for the Skysweep planner services."""

    model_config = SettingsConfigDict(
        env_prefix="SKYSWEEP_",
        env_file=".env",
        case_sensitive=False,
    )

    environment: str = Field(
        "development",
        description="Environment label; production disables API debug mode and auto-reload.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level applied by the CLI and the API server.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the planning API to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Default port the planning API exposes.",
        ge=1,
        le=65535,
    )
    default_camera_fov_deg: float = Field(
        84.0,
        description="Camera field of view assumed when a request omits it.",
        gt=0,
        lt=180,
    )
    default_speed_kmh: float = Field(
        30.0,
        description="Cruise speed used for duration and photo estimates when omitted.",
        gt=0,
    )
    default_capture_frequency_hz: float = Field(
        2.0,
        description="Photos captured per second while sweeping.",
        gt=0,
    )
    battery_consumption_per_km: float = Field(
        2.0,
        description="Flat battery consumption model in percentage points per kilometre.",
        gt=0,
    )
    battery_error_threshold: float = Field(
        10.0,
        description="Remaining charge below which a mission is rejected.",
        ge=0,
        le=100,
    )
    battery_warning_threshold: float = Field(
        25.0,
        description="Remaining charge below which a low battery warning is raised.",
        ge=0,
        le=100,
    )

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        """Accept any casing for level names."""

        normalised = value.strip().upper()
        if normalised not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Unsupported log level: {value}")
        return normalised

    @property
    def is_production(self) -> bool:
        """True when the environment label names a production deployment."""

        return self.environment.strip().lower() in {"production", "prod"}


@lru_cache()
def get_settings() -> SkysweepSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return SkysweepSettings()
