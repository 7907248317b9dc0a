"""HTTP handlers for recipe generation and cache inspection.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes, validation, and error handling.
"""

from fastapi import HTTPException, status

from recipe_generator.dto import (
    CacheEntryItem,
    CacheLookupRequest,
    CacheLookupResponse,
    CacheStatsResponse,
    GeneratedRecipe,
    GenerateRecipeRequest,
    HealthCheckResponse,
)
from recipe_generator.entities import CacheEntryEntity
from recipe_generator.errors import ConfigurationError, GenerationFailedError
from recipe_generator.fingerprint import derive_fingerprint
from recipe_generator.services import RecipeGenerationService


def _to_item(entry: CacheEntryEntity) -> CacheEntryItem:
    return CacheEntryItem(
        id=entry.id,
        fingerprint=entry.fingerprint,
        ingredients=entry.ingredients,
        recipe=entry.recipe,
        usage_count=entry.usage_count,
        created_at=entry.created_at,
    )


class RecipeHandler:
    """HTTP handlers for recipe operations.

    Delegates business logic to RecipeGenerationService and maps its single
    failure kind onto HTTP status codes:
    - missing provider credential: 503
    - any other generation failure: 502
    """

    def __init__(self, generation_service: RecipeGenerationService, provider_configured: bool) -> None:
        """Initialize the recipe handler.

        Args:
            generation_service: The generation service (required).
            provider_configured: Whether the provider credential is set, reported by /health.
        """
        self._service = generation_service
        self._provider_configured = provider_configured

    async def generate_recipe(self, request: GenerateRecipeRequest) -> GeneratedRecipe:
        """Handle POST /recipes/generate requests.

        Raises:
            HTTPException: 503 if the provider is not configured, 502 for other failures
        """
        try:
            return await self._service.generate_recipe(
                request.ingredients,
                dietary_restrictions=request.dietary_restrictions,
                cuisine_preference=request.cuisine_preference,
                difficulty=request.difficulty,
            )
        except GenerationFailedError as e:
            status_code = (
                status.HTTP_503_SERVICE_UNAVAILABLE
                if isinstance(e.cause, ConfigurationError)
                else status.HTTP_502_BAD_GATEWAY
            )
            raise HTTPException(
                status_code=status_code,
                detail={"message": str(e), "reason": e.reason, "error": e.detail},
            ) from e

    async def lookup_cache(self, request: CacheLookupRequest) -> CacheLookupResponse:
        """Handle POST /cache/lookup requests."""
        try:
            entry = self._service.lookup(request.ingredients)
        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to look up cache: {e}",
            ) from e

        return CacheLookupResponse(
            fingerprint=derive_fingerprint(request.ingredients),
            is_hit=entry is not None,
            entry=_to_item(entry) if entry is not None else None,
        )

    async def get_stats(self) -> CacheStatsResponse:
        """Handle GET /cache/stats requests."""
        try:
            stats = self._service.get_stats()
        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to get stats: {e}",
            ) from e

        return CacheStatsResponse(
            total_entries=stats.get("total_entries", 0),
            total_usage=stats.get("total_usage", 0),
            backend=stats.get("backend", "unknown"),
        )

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        is_healthy = self._service.is_healthy()
        return HealthCheckResponse(
            status="healthy" if is_healthy else "unhealthy",
            cache_healthy=is_healthy,
            provider_configured=self._provider_configured,
        )
