from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    database_url: str = Field(alias="DATABASE_URL")

    catalog_base_url: str = Field(default="https://itunes.apple.com/search", alias="CATALOG_BASE_URL")
    catalog_country: str = Field(default="sa", alias="CATALOG_COUNTRY")
    catalog_limit: int = Field(default=30, alias="CATALOG_LIMIT")
    catalog_timeout_seconds: float = Field(default=10.0, alias="CATALOG_TIMEOUT_SECONDS")
    strict_upstream_errors: bool = Field(default=False, alias="STRICT_UPSTREAM_ERRORS")

    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")
    api_host: str = Field(default="0.0.0.0", alias="API_HOST")
    api_port: int = Field(default=3008, alias="API_PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @model_validator(mode="after")
    def validate_required_runtime(self) -> "Settings":
        if not self.database_url.strip():
            raise ValueError("DATABASE_URL is required")
        if not self.catalog_base_url.strip():
            raise ValueError("CATALOG_BASE_URL is required")
        if not self.catalog_country.strip():
            raise ValueError("CATALOG_COUNTRY is required")
        if not 1 <= self.catalog_limit <= 200:
            raise ValueError("CATALOG_LIMIT must be between 1 and 200")
        if self.catalog_timeout_seconds <= 0:
            raise ValueError("CATALOG_TIMEOUT_SECONDS must be > 0")
        if not 1 <= self.api_port <= 65535:
            raise ValueError("API_PORT must be between 1 and 65535")
        self.log_level = self.log_level.strip().upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(LOG_LEVELS)}")
        return self

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
