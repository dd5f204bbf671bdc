"""Configuration settings for Grid Chase."""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Logging
    log_level: str = "INFO"

    # Strategy
    seed: Optional[int] = None

    # Simulator
    board_height: int = 10
    board_width: int = 20
    max_turns: int = 100
    obstacle_count: int = 12
    spy_max_uses: int = 2

    model_config = {"env_file": ".env", "env_prefix": "GRIDCHASE_", "case_sensitive": False}


# Global settings instance
settings = Settings()
