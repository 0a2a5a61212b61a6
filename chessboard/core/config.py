"""Application settings. Loaded from environment variables (prefix CHESSBOARD_) or a local .env file."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Knobs for the ambient stack. None of these change the rules of the game."""

    model_config = SettingsConfigDict(
        env_prefix="CHESSBOARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"
    log_json: bool = False
    # console adapter: print the destinations of the selected piece under the board
    show_legal_targets: bool = False


@lru_cache
def get_settings() -> Settings:
    """Cached, so every layer sees the same instance"""
    return Settings()
