"""
Configuration for the Big-O analyzer.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env into os.environ
load_dotenv()


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=8000)
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")

    # Groq (AI analysis mode)
    GROQ_API_KEY: str = Field(default="")
    GROQ_MODEL: str = Field(default="meta-llama/llama-4-scout-17b-16e-instruct")
    GROQ_TIMEOUT_SECONDS: float = Field(default=60.0)

    # Generation settings
    MAX_TOKENS: int = Field(default=500)
    TEMPERATURE: float = Field(default=0.2)

    # Request limits
    MAX_CODE_LENGTH: int = Field(default=50_000)

    # CORS
    ALLOWED_ORIGINS: str = Field(default="*")

    @property
    def cors_origins(self) -> list[str]:
        origins = [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]
        if "*" in origins:
            return ["*"]
        return origins

    @property
    def ai_enabled(self) -> bool:
        return bool(self.GROQ_API_KEY.strip())


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()


# Logging setup
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logging.getLogger("httpx").setLevel(logging.WARNING)

logger = logging.getLogger("bigo")
