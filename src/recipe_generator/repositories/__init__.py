"""Repository layer for data access.

This layer abstracts external dependencies (Redis, the generation provider)
behind protocol-based interfaces. This enables:
- Easy swapping of implementations (Redis → in-memory, Groq → another provider)
- Unit testing with fake implementations
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from recipe_generator.protocols import GenerationClient, RecipeCacheStore

from .groq_generation_client import GroqGenerationClient
from .memory_repository import InMemoryRecipeCacheRepository
from .redis_repository import RedisRecipeCacheRepository

__all__ = [
    "RecipeCacheStore",
    "GenerationClient",
    "RedisRecipeCacheRepository",
    "InMemoryRecipeCacheRepository",
    "GroqGenerationClient",
]
