import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = Field("INFO", alias="FEAST_LOG_LEVEL")
    fetch_timeout_seconds: float = Field(30.0, alias="FEAST_FETCH_TIMEOUT_SECONDS")
    fetch_max_redirects: int = Field(5, alias="FEAST_FETCH_MAX_REDIRECTS")
    fetch_max_response_bytes: int = Field(10 * 1024 * 1024, alias="FEAST_FETCH_MAX_RESPONSE_BYTES")
    fetch_user_agent: str = Field("feast", alias="FEAST_FETCH_USER_AGENT")
    # Off by default so locally hosted pages can still be imported
    fetch_block_private_hosts: bool = Field(False, alias="FEAST_FETCH_BLOCK_PRIVATE_HOSTS")

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")


logger = logging.getLogger(__name__)


@lru_cache
def get_settings() -> Settings:
    try:
        settings = Settings()
    except PermissionError:
        logger.warning("Unable to read .env; continuing with environment variables only")
        settings = Settings(_env_file=None)
    return settings
