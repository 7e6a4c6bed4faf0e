"""
Configuration settings for speaker statistics.
Only accounting and logging settings; the conference layer configures itself.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dateutil import tz


class StatsSettings(BaseSettings):
    """Speaker stats accounting configuration."""
    model_config = SettingsConfigDict(env_prefix="SPEAKER_STATS_")
    
    clamp_negative_elapsed: bool = Field(
        default=True,
        description="Clamp elapsed time to zero if the clock moves backwards (raise otherwise)"
    )
    verbose_logging: bool = Field(default=False, description="Log every state transition")


class Settings(BaseSettings):
    """Main settings."""
    model_config = SettingsConfigDict(
        extra="ignore"
    )
    
    # Nested settings
    stats: StatsSettings = Field(default_factory=StatsSettings)
    
    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_to_file: bool = Field(default=False, description="Write logs to a rotating file")
    log_dir: str = Field(default="logs", description="Log file directory")
    
    timezone: str = Field(default="auto", description="Timezone for exported snapshots (or 'auto')")
    
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()

    @property
    def tz_info(self):
        """Get timezone info (auto-detected if 'auto')."""
        if self.timezone.lower() == "auto":
            return tz.tzlocal()
        zone = tz.gettz(self.timezone)
        return zone if zone is not None else tz.UTC


# Global settings instance
settings = Settings()
