"""Application configuration."""
from functools import lru_cache

from pydantic_settings import BaseSettings

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/123.0.0.0 Safari/537.36"
)


class Settings(BaseSettings):
    """App settings from env (ESSENCE_ prefix)."""

    # Pre-scored JSON endpoint ({q} -> {results}); empty disables that source
    structured_search_url: str = ""
    html_search_url: str = "https://html.duckduckgo.com/html/"
    # Reader proxy that renders a page as Markdown when prefixed to its URL
    markdown_reader_url: str = "https://r.jina.ai/"
    enable_markdown_source: bool = True
    redirect_base_url: str = "https://duckduckgo.com"

    request_timeout_seconds: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT

    log_level: str = "INFO"
    debug: bool = False

    class Config:
        env_file = ".env"
        env_prefix = "ESSENCE_"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()
