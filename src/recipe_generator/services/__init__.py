"""Service layer for business logic.

This layer contains the core business logic and orchestration.
Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from recipe_generator.services import RecipeGenerationService

    service = RecipeGenerationService(cache_store=store, generation_client=client)
    recipe = await service.generate_recipe(["rice", "chicken"])
    ```
"""

from .generation_service import RecipeGenerationService

__all__ = [
    "RecipeGenerationService",
]
