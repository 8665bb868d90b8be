"""
Configuration management using Pydantic Settings.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="MERKLE_",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Merkle Commit"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Request limits
    max_items: int = 100_000
    max_proof_length: int = 256

    # Demo dataset
    sample_items: list[str] = [
        "airdrophunter1@gmail.com",
        "airdrophunter2@gmail.com",
        "airdrophunter3@gmail.com",
    ]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
