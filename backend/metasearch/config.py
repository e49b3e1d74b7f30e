from pydantic_settings import BaseSettings
from pydantic import Field
from functools import lru_cache
from typing import List, Optional


class Settings(BaseSettings):
    PROJECT_NAME: str = "Meta Search API"
    VERSION: str = "1.0.0"
    # Provider credentials, supplied out-of-band. Missing keys are not
    # checked here; the providers reject the calls instead.
    YOUTUBE_API_KEY: Optional[str] = Field(default=None)
    GOOGLE_API_KEY: Optional[str] = Field(default=None)
    CUSTOM_SEARCH_ENGINE_ID: Optional[str] = Field(default=None)
    # Provider endpoints
    YOUTUBE_API_URL: str = Field(default="https://www.googleapis.com/youtube/v3")
    CUSTOM_SEARCH_API_URL: str = Field(
        default="https://www.googleapis.com/customsearch/v1"
    )
    VIDEO_URL_TEMPLATE: str = Field(
        default="https://www.youtube.com/watch?v={video_id}"
    )
    VIDEO_RESULTS_LIMIT: int = Field(default=5)
    # Server settings
    CORS_ORIGINS: List[str] = Field(default=["*"])
    LOG_DIR: str = Field(default="logs")
    LOG_LEVEL: str = Field(default="INFO")

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"  # This will ignore extra fields in .env


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
