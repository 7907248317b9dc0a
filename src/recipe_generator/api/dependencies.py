"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from recipe_generator.config import settings
from recipe_generator.handlers import RecipeHandler
from recipe_generator.logger import setup_logging
from recipe_generator.protocols import RecipeCacheStore
from recipe_generator.repositories import (
    GroqGenerationClient,
    InMemoryRecipeCacheRepository,
    RedisRecipeCacheRepository,
)
from recipe_generator.services import RecipeGenerationService

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> RecipeHandler:
    """Dependency injection for RecipeHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "recipe_handler", None)
    if handler is None:
        raise RuntimeError("RecipeHandler not initialized. Check lifespan setup.")
    return handler


def build_cache_store() -> RecipeCacheStore:
    """Create the cache store selected by CACHE_BACKEND."""
    if settings.cache_backend == "memory":
        return InMemoryRecipeCacheRepository()
    return RedisRecipeCacheRepository.create()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores them in app.state:
    1. Cache store and generation client (data access)
    2. Service (business logic) - app.state.generation_service
    3. Handler (HTTP endpoints) - app.state.recipe_handler
    """
    setup_logging(settings.log_level, settings.log_format)

    cache_store = build_cache_store()
    generation_client = GroqGenerationClient.create()
    if not generation_client.is_configured:
        logger.warning("GROQ_API_KEY is not set; cache misses will fail until it is configured")

    generation_service = RecipeGenerationService.create(
        cache_store=cache_store,
        generation_client=generation_client,
    )
    recipe_handler = RecipeHandler(
        generation_service=generation_service,
        provider_configured=generation_client.is_configured,
    )

    app.state.generation_service = generation_service
    app.state.recipe_handler = recipe_handler

    logger.info("Cache backend: %s", settings.cache_backend)
    logger.info("Generation model: %s", generation_client.model_name)
    logger.info("Cache healthy: %s", generation_service.is_healthy())

    yield

    await generation_client.close()
    del app.state.recipe_handler
    del app.state.generation_service
    logger.info("Recipe generator shut down")


# Type alias for cleaner dependency injection
HandlerDep = Annotated[RecipeHandler, Depends(get_handler)]
