"""Runtime configuration for the BPQ helper."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="BPQ_HELPER_", env_file=".env", extra="ignore")

    app_name: str = "bpq-helper"
    log_level: LogLevel = "WARNING"
    data_file: str | None = Field(
        default=None,
        description="JSON file with regions and riddles. The bundled Butler PQ data is used when unset.",
    )
    map_width: int = Field(default=6622, description="Pixel width of the reference map image.")
    map_height: int = Field(default=2228, description="Pixel height of the reference map image.")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


settings = Settings()
