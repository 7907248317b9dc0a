"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (Redis → in-memory, Groq → another provider)
- Unit testing with fake implementations
- Clear separation of concerns

Usage:
    ```python
    from recipe_generator.protocols import GenerationClient, RecipeCacheStore

    store: RecipeCacheStore = RedisRecipeCacheRepository.create()      # works
    store: RecipeCacheStore = InMemoryRecipeCacheRepository()          # also works
    ```
"""

from .cache_store import RecipeCacheStore
from .generation_client import GenerationClient

__all__ = [
    "RecipeCacheStore",
    "GenerationClient",
]
