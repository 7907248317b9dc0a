"""In-process implementation of RecipeCacheStore.

Useful for local development without Redis and for tests. Contents are lost
when the process exits.
"""

import threading
import uuid
from dataclasses import replace

from recipe_generator.dto.recipe import GeneratedRecipe
from recipe_generator.entities import CacheEntryEntity
from recipe_generator.errors import DuplicateFingerprintError


class InMemoryRecipeCacheRepository:
    """Dictionary-backed RecipeCacheStore.

    Enforces the same one-entry-per-fingerprint constraint as the Redis
    repository. Safe to share between threads.
    """

    def __init__(self) -> None:
        self._entries: dict[str, CacheEntryEntity] = {}
        self._by_fingerprint: dict[str, str] = {}
        self._lock = threading.Lock()

    def get(self, fingerprint: str) -> CacheEntryEntity | None:
        with self._lock:
            entry_id = self._by_fingerprint.get(fingerprint)
            return self._entries.get(entry_id) if entry_id else None

    def insert(
        self,
        fingerprint: str,
        ingredients: list[str],
        recipe: GeneratedRecipe,
    ) -> CacheEntryEntity:
        with self._lock:
            if fingerprint in self._by_fingerprint:
                raise DuplicateFingerprintError(fingerprint)

            entry = CacheEntryEntity(
                id=uuid.uuid4().hex,
                fingerprint=fingerprint,
                ingredients=list(ingredients),
                recipe=recipe,
                usage_count=1,
            )
            self._entries[entry.id] = entry
            self._by_fingerprint[fingerprint] = entry.id
            return entry

    def increment_usage(self, entry_id: str) -> None:
        with self._lock:
            entry = self._entries.get(entry_id)
            if entry is None:
                return
            self._entries[entry_id] = replace(entry, usage_count=entry.usage_count + 1)

    def count_all(self) -> int:
        with self._lock:
            return len(self._entries)

    def health_check(self) -> bool:
        return True

    def get_stats(self) -> dict:
        with self._lock:
            return {
                "backend": "memory",
                "total_entries": len(self._entries),
                "total_usage": sum(entry.usage_count for entry in self._entries.values()),
            }
