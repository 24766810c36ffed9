# app/config.py
from typing import Optional
from pydantic_settings import BaseSettings
from functools import lru_cache

class Settings(BaseSettings):
    # Server settings
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    RELOAD: bool = False
    LOG_LEVEL: str = "INFO"

    # Upstream settings (used by the /client proxy routes)
    UPSTREAM_BASE_URL: str = "http://localhost:8080/server"
    UPSTREAM_TIMEOUT_SECONDS: Optional[float] = None

    # Stream settings
    STREAM_INTERVAL_SECONDS: float = 1.0
    STREAM_LIMIT: Optional[int] = None
    AGE_THRESHOLD: int = 25

    # Fake data settings
    FAKER_LOCALE: str = "zh_CN"

    class Config:
        env_file = ".env"

@lru_cache()
def get_settings():
    return Settings()
