"""Runtime configuration for Frail."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="FRAIL_", env_file=".env", extra="ignore")

    app_name: str = "frail"
    log_level: str = "INFO"
    default_star: str = Field(
        default="yellow_sun",
        description="Star type a new build session starts with.",
    )
    planet_count: int = Field(default=3, ge=1)
    success_threshold: float = Field(
        default=80.0,
        description="Scores above this count as a successful simulation.",
    )
    telemetry_enabled: bool = True


settings = Settings()
