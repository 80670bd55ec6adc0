from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_FEED_URL = "https://s3-eu-west-1.amazonaws.com/feeds.agents-society.com/393-ai-feed-869909566.xml"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PROPERTY_FEED_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    feed_url: str = DEFAULT_FEED_URL
    output_path: str = "public/properties.json"
    request_timeout_seconds: Optional[float] = None
    user_agent: str = "PropertyFeedBot/1.0"
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
