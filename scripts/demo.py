#!/usr/bin/env python3
"""
Demo script for the recipe generator.

Generates a recipe for a few ingredient lists against the real provider
(GROQ_API_KEY must be set) using an in-memory cache, then repeats the
requests in a different order to show cache hits.
"""

import asyncio
import time

from recipe_generator import (
    GenerationFailedError,
    GroqGenerationClient,
    InMemoryRecipeCacheRepository,
    RecipeGenerationService,
    derive_fingerprint,
)
from recipe_generator.config import settings


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


async def timed_generate(service: RecipeGenerationService, ingredients: list[str], **params) -> None:
    start = time.time()
    try:
        recipe = await service.generate_recipe(ingredients, **params)
    except GenerationFailedError as e:
        print(f"  ✗ {', '.join(ingredients)}: {e} ({e.reason}: {e.detail})")
        return
    elapsed_ms = (time.time() - start) * 1000
    print(f"  ✓ {recipe.title}  [{derive_fingerprint(ingredients)}]  {elapsed_ms:.0f}ms")
    if recipe.prep_time is not None and recipe.cook_time is not None:
        print(f"    prep {recipe.prep_time}m, cook {recipe.cook_time}m, serves {recipe.servings}")


async def main() -> None:
    if not settings.has_api_key:
        print("GROQ_API_KEY is not set. Add it to your environment or .env file.")
        return

    store = InMemoryRecipeCacheRepository()
    client = GroqGenerationClient.create()
    service = RecipeGenerationService.create(cache_store=store, generation_client=client)

    requests = [
        ["chicken", "rice", "garlic"],
        ["Tomato", "Basil", "Mozzarella"],
        ["eggs", "spinach"],
    ]

    print_section(f"Generating with {client.model_name} (cache misses)")
    for ingredients in requests:
        await timed_generate(service, ingredients)

    print_section("Same ingredients, different order and case (cache hits)")
    for ingredients in requests:
        await timed_generate(service, [item.upper() for item in reversed(ingredients)], difficulty="hard")

    print_section("Cache statistics")
    for key, value in service.get_stats().items():
        print(f"  {key}: {value}")

    await client.close()


if __name__ == "__main__":
    asyncio.run(main())
