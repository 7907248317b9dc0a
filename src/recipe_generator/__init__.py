"""Recipe Generator - AI recipe generation with an ingredient-keyed cache.

This package provides a layered architecture for recipe generation:

Layers:
    - protocols: Interface contracts (RecipeCacheStore, GenerationClient)
    - repositories: Data access implementations (Redis, in-memory, Groq)
    - services: Business logic (cache check, generate, parse, store)
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts and the recipe schema)
    - entities: Domain models (internal)

Usage:
    ```python
    from recipe_generator.repositories import GroqGenerationClient, RedisRecipeCacheRepository
    from recipe_generator.services import RecipeGenerationService

    service = RecipeGenerationService.create(
        cache_store=RedisRecipeCacheRepository.create(),
        generation_client=GroqGenerationClient.create(),
    )
    recipe = await service.generate_recipe(["rice", "chicken"])
    ```

For HTTP API:
    ```python
    from recipe_generator.api.app import app
    ```
"""

from recipe_generator.config import get_redis_client, settings
from recipe_generator.dto import GeneratedRecipe, GenerateRecipeRequest, Nutrition
from recipe_generator.entities import CacheEntryEntity
from recipe_generator.errors import (
    ConfigurationError,
    DuplicateFingerprintError,
    EmptyResponseError,
    GenerationFailedError,
    InvalidRecipeStructureError,
    MalformedResponseError,
    ProviderError,
    RecipeGeneratorError,
)
from recipe_generator.fingerprint import derive_fingerprint
from recipe_generator.handlers import RecipeHandler
from recipe_generator.parser import parse_and_validate
from recipe_generator.prompts import build_prompt
from recipe_generator.protocols import GenerationClient, RecipeCacheStore
from recipe_generator.repositories import (
    GroqGenerationClient,
    InMemoryRecipeCacheRepository,
    RedisRecipeCacheRepository,
)
from recipe_generator.services import RecipeGenerationService

__all__ = [
    # Configuration
    "settings",
    "get_redis_client",
    # Protocols (interfaces)
    "RecipeCacheStore",
    "GenerationClient",
    # Services (business logic)
    "RecipeGenerationService",
    # Handlers (HTTP)
    "RecipeHandler",
    # Repositories (data access)
    "RedisRecipeCacheRepository",
    "InMemoryRecipeCacheRepository",
    "GroqGenerationClient",
    # Pipeline steps
    "derive_fingerprint",
    "build_prompt",
    "parse_and_validate",
    # Entities (domain models)
    "CacheEntryEntity",
    # DTOs (API contracts)
    "GeneratedRecipe",
    "Nutrition",
    "GenerateRecipeRequest",
    # Errors
    "RecipeGeneratorError",
    "ConfigurationError",
    "ProviderError",
    "EmptyResponseError",
    "MalformedResponseError",
    "InvalidRecipeStructureError",
    "DuplicateFingerprintError",
    "GenerationFailedError",
]
