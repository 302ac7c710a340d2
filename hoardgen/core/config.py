"""Application configuration using pydantic-settings."""

from pathlib import Path
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Paths
    base_dir: Path = Path(__file__).parent.parent.parent
    data_dir: Path = base_dir / "data"
    packs_dir: Path = data_dir / "packs"

    # Tables
    table_pack_id: str = "ose-generators"

    # Hoard container
    hoard_container_kind: str = "character"
    hoard_container_icon: str = "icons/containers/chest/chest-reinforced-steel-red.webp"
    default_item_icon: str = "icons/commodities/treasure/token-gold-gem-purple.webp"

    # Logging
    log_level: str = "INFO"

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    debug: bool = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
