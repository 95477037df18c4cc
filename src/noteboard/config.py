from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    cors_origins: list[str] = []
    comment_min_length: int = 2  # Shortest message accepted by comment edits
    default_page_size: int = 10  # Page size for note listings when count is omitted

    model_config = {
        "env_file": [".env"],
        "env_prefix": "NOTEBOARD_",
        "extra": "ignore",
    }
