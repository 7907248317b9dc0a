"""Recipe cache storage protocol.

Defines the interface for any key-value backend that maps an ingredient
fingerprint to a generated recipe and its usage counter.

Implementations:
- Redis (default)
- In-process dictionary (development and tests)
"""

from typing import Protocol, runtime_checkable

from recipe_generator.dto.recipe import GeneratedRecipe
from recipe_generator.entities import CacheEntryEntity


@runtime_checkable
class RecipeCacheStore(Protocol):
    """Protocol for recipe cache storage backends.

    The backend must keep at most one entry per fingerprint. Entries never
    expire and their recipe is never rewritten; only usage_count changes.
    """

    def get(self, fingerprint: str) -> CacheEntryEntity | None:
        """Look up the entry for a fingerprint.

        Args:
            fingerprint: Exact fingerprint to match

        Returns:
            The entry, or None if absent
        """
        ...

    def insert(
        self,
        fingerprint: str,
        ingredients: list[str],
        recipe: GeneratedRecipe,
    ) -> CacheEntryEntity:
        """Create a new entry with usage_count = 1.

        The caller is expected to have checked for absence first. This does
        not make concurrent inserts idempotent.

        Args:
            fingerprint: Canonical ingredient key
            ingredients: Ingredient list of the originating request
            recipe: The generated recipe

        Returns:
            The created entry

        Raises:
            DuplicateFingerprintError: If the backend's uniqueness constraint
                rejects the write
        """
        ...

    def increment_usage(self, entry_id: str) -> None:
        """Add one to an entry's usage_count.

        Silently does nothing if the entry no longer exists.

        Args:
            entry_id: The entry's id
        """
        ...

    def count_all(self) -> int:
        """Count cached entries.

        Returns:
            Total number of entries
        """
        ...

    def health_check(self) -> bool:
        """Check if the backend is accessible.

        Returns:
            True if healthy, False otherwise
        """
        ...

    def get_stats(self) -> dict:
        """Get store statistics.

        Returns:
            Dictionary with at least total_entries, total_usage and backend
        """
        ...
