from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = "sqlite:///./soccer.db"
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    access_log: bool = True
    sql_echo: bool = False

    # Raw database messages in 500 responses for admin endpoints
    expose_storage_errors: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
