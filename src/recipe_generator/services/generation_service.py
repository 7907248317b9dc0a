"""Recipe generation service.

Orchestrates a request through the cache and the generation provider:

    fingerprint -> cache lookup -> hit:  count the use, return cached recipe
                                -> miss: prompt -> provider -> parse -> cache write

A cache write only happens after the provider's answer has been parsed and
validated, so a failed request never leaves a partial entry behind.
"""

import logging

from recipe_generator.dto.recipe import GeneratedRecipe
from recipe_generator.entities import CacheEntryEntity
from recipe_generator.errors import DuplicateFingerprintError, GenerationFailedError
from recipe_generator.fingerprint import derive_fingerprint
from recipe_generator.parser import parse_and_validate
from recipe_generator.prompts import build_prompt
from recipe_generator.protocols import GenerationClient, RecipeCacheStore

logger = logging.getLogger(__name__)


class RecipeGenerationService:
    """Core generation orchestration service.

    This service depends on PROTOCOLS, not concrete implementations:
    - RecipeCacheStore: Redis, in-memory, ...
    - GenerationClient: Groq, or any other provider client

    Example:
        ```python
        from recipe_generator.repositories import GroqGenerationClient, RedisRecipeCacheRepository
        from recipe_generator.services import RecipeGenerationService

        service = RecipeGenerationService.create(
            cache_store=RedisRecipeCacheRepository.create(),
            generation_client=GroqGenerationClient.create(),
        )
        recipe = await service.generate_recipe(["rice", "chicken"], difficulty="easy")
        ```
    """

    def __init__(
        self,
        cache_store: RecipeCacheStore,
        generation_client: GenerationClient,
    ) -> None:
        """Initialize the generation service.

        Args:
            cache_store: Cache storage backend (required).
            generation_client: Text generation provider client (required).
        """
        self._store = cache_store
        self._client = generation_client

    @classmethod
    def create(
        cls,
        cache_store: RecipeCacheStore,
        generation_client: GenerationClient,
    ) -> "RecipeGenerationService":
        """Factory method, mirroring the repositories' create()."""
        return cls(cache_store=cache_store, generation_client=generation_client)

    async def generate_recipe(
        self,
        ingredients: list[str],
        dietary_restrictions: str | None = None,
        cuisine_preference: str | None = None,
        difficulty: str | None = None,
    ) -> GeneratedRecipe:
        """Return a recipe for the ingredients, from cache when possible.

        The optional parameters only shape the prompt on a cache miss; they
        are not part of the cache key, so a cached recipe is returned for the
        same ingredients whatever parameters the caller passes. Cached entries
        never expire.

        Args:
            ingredients: Ingredient names
            dietary_restrictions: Optional dietary restrictions
            cuisine_preference: Optional cuisine
            difficulty: Optional difficulty level

        Returns:
            The generated (or cached) recipe

        Raises:
            GenerationFailedError: If anything fails; the underlying error is
                available as .cause and its message as .detail
        """
        fingerprint = derive_fingerprint(ingredients)

        try:
            entry = self._store.get(fingerprint)
            if entry is not None:
                logger.info("Cache hit for %r (entry %s)", fingerprint, entry.id)
                self._count_use(entry)
                return entry.recipe

            logger.info("Cache miss for %r, generating with %s", fingerprint, self._client.model_name)
            prompt = build_prompt(
                ingredients,
                dietary_restrictions=dietary_restrictions,
                cuisine_preference=cuisine_preference,
                difficulty=difficulty,
            )
            raw_text = await self._client.generate(prompt)
            recipe = parse_and_validate(raw_text)
            self._store_recipe(fingerprint, ingredients, recipe)
            return recipe

        except Exception as e:
            logger.error("AI recipe generation error for %r: %s", fingerprint, e)
            raise GenerationFailedError(e) from e

    def _count_use(self, entry: CacheEntryEntity) -> None:
        """Bump the usage counter; failures are logged and otherwise ignored."""
        try:
            self._store.increment_usage(entry.id)
        except Exception:
            logger.warning("Could not update usage count for entry %s", entry.id, exc_info=True)

    def _store_recipe(
        self,
        fingerprint: str,
        ingredients: list[str],
        recipe: GeneratedRecipe,
    ) -> None:
        try:
            entry = self._store.insert(fingerprint, list(ingredients), recipe)
        except DuplicateFingerprintError:
            # A concurrent request cached this fingerprint first; its entry stays.
            logger.info("Entry for %r was cached concurrently; keeping existing entry", fingerprint)
            return
        logger.debug("Cached recipe %r as entry %s", recipe.title, entry.id)

    def lookup(self, ingredients: list[str]) -> CacheEntryEntity | None:
        """Peek at the cache entry for the ingredients without counting a use.

        Args:
            ingredients: Ingredient names

        Returns:
            The cached entry, or None
        """
        return self._store.get(derive_fingerprint(ingredients))

    def get_stats(self) -> dict:
        """Get cache statistics.

        Returns:
            Dictionary with cache statistics and the generation model
        """
        stats = self._store.get_stats()
        stats["generation_model"] = self._client.model_name
        return stats

    def is_healthy(self) -> bool:
        """Check if the cache backend is reachable."""
        return self._store.health_check()

    @property
    def cache_store(self) -> RecipeCacheStore:
        """Get the underlying cache store (for testing)."""
        return self._store

    @property
    def generation_client(self) -> GenerationClient:
        """Get the underlying generation client (for testing)."""
        return self._client
