"""Redis implementation of RecipeCacheStore.

Each entry is a hash at ``{prefix}:entry:{id}``. The unique index is a plain
string key ``{prefix}:fingerprint:{fingerprint}`` holding the entry id,
written with SET NX so a second insert for the same fingerprint is rejected.
Entries have no TTL.
"""

import json
import logging
import uuid
from datetime import datetime

import redis

from recipe_generator.config import get_redis_client, settings
from recipe_generator.dto.recipe import GeneratedRecipe
from recipe_generator.entities import CacheEntryEntity
from recipe_generator.errors import DuplicateFingerprintError

logger = logging.getLogger(__name__)


def _text(value: str | bytes) -> str:
    return value.decode() if isinstance(value, bytes) else value


class RedisRecipeCacheRepository:
    """Redis implementation of the RecipeCacheStore protocol.

    This class satisfies the protocol through structural typing - no
    explicit inheritance needed.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        key_prefix: str | None = None,
    ) -> None:
        """Initialize the Redis cache repository.

        Args:
            redis_client: Redis client instance. If None, creates default.
            key_prefix: Prefix for all keys. Defaults to settings.
        """
        self._client = redis_client or get_redis_client()
        self._prefix = key_prefix or settings.cache_key_prefix

    @classmethod
    def create(cls, key_prefix: str | None = None) -> "RedisRecipeCacheRepository":
        """Factory method to create RedisRecipeCacheRepository with defaults.

        Args:
            key_prefix: Key prefix. If None, uses settings.

        Returns:
            Configured RedisRecipeCacheRepository
        """
        return cls(key_prefix=key_prefix)

    def _entry_key(self, entry_id: str) -> str:
        return f"{self._prefix}:entry:{entry_id}"

    def _fingerprint_key(self, fingerprint: str) -> str:
        return f"{self._prefix}:fingerprint:{fingerprint}"

    def get(self, fingerprint: str) -> CacheEntryEntity | None:
        """Look up the entry for a fingerprint.

        Args:
            fingerprint: Exact fingerprint to match

        Returns:
            The entry, or None if absent
        """
        entry_id = self._client.get(self._fingerprint_key(fingerprint))
        if entry_id is None:
            return None

        entry_id = _text(entry_id)
        data = self._client.hgetall(self._entry_key(entry_id))
        if not data:
            logger.warning("Fingerprint index points at missing entry %s", entry_id)
            return None

        fields = {_text(k): _text(v) for k, v in data.items()}
        return CacheEntryEntity(
            id=entry_id,
            fingerprint=fields["fingerprint"],
            ingredients=json.loads(fields["ingredients"]),
            recipe=GeneratedRecipe.model_validate_json(fields["recipe"]),
            usage_count=int(fields["usage_count"]),
            created_at=datetime.fromtimestamp(float(fields["created_at"])),
        )

    def insert(
        self,
        fingerprint: str,
        ingredients: list[str],
        recipe: GeneratedRecipe,
    ) -> CacheEntryEntity:
        """Store a new entry with usage_count = 1.

        The entry hash is written first and the fingerprint index second, so
        a reader that finds the index always finds the entry.

        Raises:
            DuplicateFingerprintError: If the fingerprint is already indexed
            redis.RedisError: If indexing fails; the entry hash is removed first
        """
        entry_id = uuid.uuid4().hex
        entry_key = self._entry_key(entry_id)
        created_at = datetime.now()

        self._client.hset(
            entry_key,
            mapping={
                "fingerprint": fingerprint,
                "ingredients": json.dumps(list(ingredients)),
                "recipe": recipe.model_dump_json(by_alias=True),
                "usage_count": 1,
                "created_at": str(created_at.timestamp()),
            },
        )

        try:
            indexed = self._client.set(self._fingerprint_key(fingerprint), entry_id, nx=True)
        except redis.RedisError:
            self._client.delete(entry_key)
            raise

        if not indexed:
            self._client.delete(entry_key)
            raise DuplicateFingerprintError(fingerprint)

        return CacheEntryEntity(
            id=entry_id,
            fingerprint=fingerprint,
            ingredients=list(ingredients),
            recipe=recipe,
            usage_count=1,
            created_at=created_at,
        )

    def increment_usage(self, entry_id: str) -> None:
        """Add one to an entry's usage_count; no-op if the entry is gone."""
        entry_key = self._entry_key(entry_id)
        if not self._client.exists(entry_key):
            return
        self._client.hincrby(entry_key, "usage_count", 1)

    def _entry_keys(self):
        return self._client.scan_iter(match=f"{self._prefix}:entry:*")

    def count_all(self) -> int:
        """Count total entries in the cache.

        Returns:
            Total number of cached entries
        """
        return sum(1 for _ in self._entry_keys())

    def total_usage(self) -> int:
        """Sum usage_count over all entries."""
        total = 0
        for key in self._entry_keys():
            value = self._client.hget(key, "usage_count")
            if value is not None:
                total += int(_text(value))
        return total

    def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            return False

    def get_stats(self) -> dict:
        """Get repository statistics.

        Returns:
            Dictionary with stats
        """
        return {
            "backend": "redis",
            "key_prefix": self._prefix,
            "total_entries": self.count_all(),
            "total_usage": self.total_usage(),
        }

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client
