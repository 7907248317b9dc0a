import os
from dataclasses import dataclass
from functools import lru_cache

import redis
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")

    # Cache
    cache_backend: str = os.getenv("CACHE_BACKEND", "redis")  # "redis" or "memory"
    cache_key_prefix: str = os.getenv("CACHE_KEY_PREFIX", "ai_recipe_cache")

    # Generation provider (Groq, OpenAI-compatible chat completions)
    groq_api_key: str | None = os.getenv("GROQ_API_KEY")
    groq_base_url: str = os.getenv("GROQ_BASE_URL", "https://api.groq.com/openai/v1")
    generation_model: str = os.getenv("GENERATION_MODEL", "llama-3.1-8b-instant")
    generation_temperature: float = float(os.getenv("GENERATION_TEMPERATURE", "0.7"))
    generation_max_tokens: int = int(os.getenv("GENERATION_MAX_TOKENS", "2048"))
    generation_timeout: float = float(os.getenv("GENERATION_TIMEOUT", "30"))
    generation_json_mode: bool = os.getenv("GENERATION_JSON_MODE", "true").lower() == "true"

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_format: str = os.getenv("LOG_FORMAT", "text")  # "text" or "json"

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"

    @property
    def has_api_key(self) -> bool:
        """Check if a provider credential is configured.

        Returns:
            True if GROQ_API_KEY is set to a non-blank value, False otherwise
        """
        return bool(self.groq_api_key and self.groq_api_key.strip())

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.cache_backend not in ("redis", "memory"):
            raise ValueError(f"CACHE_BACKEND must be 'redis' or 'memory', got {self.cache_backend!r}")

        if not 0 <= self.generation_temperature <= 2:
            raise ValueError("GENERATION_TEMPERATURE must be between 0 and 2")

        if self.generation_max_tokens <= 0:
            raise ValueError("GENERATION_MAX_TOKENS must be positive")

        if self.generation_timeout <= 0:
            raise ValueError("GENERATION_TIMEOUT must be positive")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_redis_client() -> redis.Redis:
    """Create a Redis client instance."""
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=True,
    )
