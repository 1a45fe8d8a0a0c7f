from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_name: str = "Provider Hours Service"
    database_url: str = Field("sqlite:///./provider_hours.db", alias="DATABASE_URL")
    timezone: str | None = Field(None, alias="TIMEZONE")  # IANA name, overrides utc_offset_hours
    utc_offset_hours: float = Field(-5, alias="UTC_OFFSET_HOURS")  # e.g. 5.5 for UTC+05:30
    wrap_week_ranges: bool = Field(True, alias="WRAP_WEEK_RANGES")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    # listing and profile frontends calling this service directly; empty disables CORS
    cors_origins: list[str] = Field(default_factory=list, alias="CORS_ORIGINS")


def get_settings() -> Settings:
    return Settings()
