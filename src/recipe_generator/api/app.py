from typing import Any

from fastapi import FastAPI, Response, status
from fastapi.middleware.cors import CORSMiddleware

from recipe_generator.api.dependencies import HandlerDep, lifespan
from recipe_generator.config import settings
from recipe_generator.dto import (
    CacheLookupRequest,
    CacheLookupResponse,
    CacheStatsResponse,
    GeneratedRecipe,
    GenerateRecipeRequest,
    HealthCheckResponse,
)

app = FastAPI(
    title="AI Recipe Generator API",
    description="Generates recipes from ingredient lists and caches them by ingredient fingerprint",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root() -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": "AI Recipe Generator API",
        "version": "0.1.0",
        "description": "Generates recipes from ingredient lists and caches them by ingredient fingerprint",
        "endpoints": {
            "generate": "/recipes/generate",
            "lookup": "/cache/lookup",
            "stats": "/cache/stats",
            "health": "/health",
            "docs": "/docs",
        },
    }


@app.get("/health", response_model=HealthCheckResponse)
async def health(handler: HandlerDep, response: Response) -> HealthCheckResponse:
    """Health check endpoint. Returns 503 when the cache backend is unreachable."""
    result = await handler.health_check()
    if not result.cache_healthy:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return result


@app.post("/recipes/generate", response_model=GeneratedRecipe)
async def generate_recipe(request: GenerateRecipeRequest, handler: HandlerDep) -> GeneratedRecipe:
    """
    Generate a recipe from ingredients, serving it from cache when possible.

    Args:
        request: Ingredients plus optional dietary restrictions, cuisine and difficulty.

    Returns:
        The generated or cached recipe.
    """
    return await handler.generate_recipe(request)


@app.post("/cache/lookup", response_model=CacheLookupResponse)
async def lookup_cache(request: CacheLookupRequest, handler: HandlerDep) -> CacheLookupResponse:
    """Look up the cached recipe for an ingredient list without counting a use."""
    return await handler.lookup_cache(request)


@app.get("/cache/stats", response_model=CacheStatsResponse)
async def get_stats(handler: HandlerDep) -> CacheStatsResponse:
    """Get cache statistics."""
    return await handler.get_stats()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "recipe_generator.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
