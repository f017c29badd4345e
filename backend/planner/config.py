"""Typed settings configuration - single source of truth."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Server
    port: int = 5000
    log_level: str = "INFO"

    # UI
    ui_origin: str = "http://localhost:5173"

    # External APIs (mock data is served when the public-data key is unset)
    public_data_api_key: str = ""
    kakao_api_key: str = ""
    public_data_base_url: str = "http://apis.data.go.kr"
    kakao_base_url: str = "https://dapi.kakao.com"

    # Timeouts (seconds)
    feed_timeout_seconds: float = 10.0

    # Simulated latency of mocked feeds (milliseconds)
    mock_feed_delay_ms: int = 500

    # Client storage
    redis_url: str | None = None
    recent_search_limit: int = 5

    @property
    def use_mock_data(self) -> bool:
        """Serve fixture data instead of calling the public-data API."""
        return not self.public_data_api_key


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
