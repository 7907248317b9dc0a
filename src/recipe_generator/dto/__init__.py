"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

GeneratedRecipe is also the schema the parser validates provider output
against, and the payload the cache stores.
"""

from .recipe import GeneratedRecipe, Nutrition
from .requests import CacheLookupRequest, GenerateRecipeRequest
from .responses import (
    CacheEntryItem,
    CacheLookupResponse,
    CacheStatsResponse,
    HealthCheckResponse,
)

__all__ = [
    "GeneratedRecipe",
    "Nutrition",
    "GenerateRecipeRequest",
    "CacheLookupRequest",
    "CacheEntryItem",
    "CacheLookupResponse",
    "CacheStatsResponse",
    "HealthCheckResponse",
]
