"""Response DTOs for API endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field

from .recipe import GeneratedRecipe


class CacheEntryItem(BaseModel):
    """A cached recipe as exposed by the API."""

    id: str = Field(..., description="Store-assigned entry id")
    fingerprint: str = Field(..., description="Canonical ingredient key")
    ingredients: list[str] = Field(..., description="Ingredients of the first request")
    recipe: GeneratedRecipe = Field(..., description="The cached recipe")
    usage_count: int = Field(..., description="Number of times the entry was used", ge=1)
    created_at: datetime = Field(..., description="When the entry was created")


class CacheLookupResponse(BaseModel):
    """Response DTO for cache lookup."""

    fingerprint: str = Field(..., description="Canonical ingredient key that was looked up")
    is_hit: bool = Field(..., description="Whether an entry exists for the fingerprint")
    entry: CacheEntryItem | None = Field(None, description="The entry, when present")


class CacheStatsResponse(BaseModel):
    """Response DTO for cache statistics."""

    total_entries: int = Field(..., description="Total number of cached recipes", ge=0)
    total_usage: int = Field(..., description="Sum of usage counts over all entries", ge=0)
    backend: str = Field(..., description="Cache backend name")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    cache_healthy: bool = Field(..., description="Whether the cache backend is reachable")
    provider_configured: bool = Field(..., description="Whether a provider credential is set")
