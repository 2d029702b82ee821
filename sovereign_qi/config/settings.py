"""
Pilot simulation settings

Values come from the environment or a .env file. The simulation delay
is read from SIMULATION_-prefixed variables.
"""

from enum import Enum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(str, Enum):
    """Supported log output formats."""
    TEXT = "text"
    JSON = "json"


class SimulationConfig(BaseSettings):
    """Simulation engine configuration."""
    model_config = SettingsConfigDict(
        env_prefix="SIMULATION_",
        extra="ignore"
    )

    # Artificial processing delay of a run, in seconds
    delay_seconds: float = Field(default=1.5, gt=0)


class Settings(BaseSettings):
    """Main application settings."""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Application
    app_name: str = "Sovereign Qi"
    debug: bool = False
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.TEXT

    # Demo mode
    seed_demo_pilots: bool = True

    # Sub-configurations
    simulation: SimulationConfig = Field(default_factory=SimulationConfig)

    @classmethod
    def from_env(cls) -> "Settings":
        """Create settings from environment variables."""
        return cls(simulation=SimulationConfig())


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()
