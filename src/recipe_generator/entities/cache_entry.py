"""Cache entry domain entity."""

from dataclasses import dataclass, field
from datetime import datetime

from recipe_generator.dto.recipe import GeneratedRecipe


@dataclass(frozen=True)
class CacheEntryEntity:
    """Domain entity for a cached generated recipe.

    Entries are created once per fingerprint and never updated, except for
    usage_count, which the store bumps on every cache hit. An entity is a
    snapshot: its usage_count does not change after it is read.

    Attributes:
        id: Store-assigned identifier
        fingerprint: Canonical ingredient key (unique within the store)
        ingredients: Ingredient list of the request that created the entry
        recipe: The generated recipe
        usage_count: Number of requests served by this entry (>= 1)
        created_at: When this entry was created
    """

    id: str
    fingerprint: str
    ingredients: list[str]
    recipe: GeneratedRecipe
    usage_count: int = 1
    created_at: datetime = field(default_factory=datetime.now)
