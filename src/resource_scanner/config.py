"""Runtime configuration for the resource scanner."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="RESOURCE_SCANNER_", env_file=".env", extra="ignore")

    app_name: str = "resource-scanner"
    log_level: str = "INFO"
    energy_per_tile: int = Field(
        default=1,
        ge=0,
        description="Energy charged per tile in the unclipped pattern footprint.",
    )
    world_path: str | None = Field(
        default=None,
        description="JSON world file used by the CLI when --world is not given.",
    )


settings = Settings()
