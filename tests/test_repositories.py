"""Tests for cache store implementations."""

import json
from fnmatch import fnmatchcase
from unittest.mock import MagicMock

import pytest
import redis

from recipe_generator.dto import GeneratedRecipe
from recipe_generator.errors import DuplicateFingerprintError
from recipe_generator.protocols import RecipeCacheStore
from recipe_generator.repositories import InMemoryRecipeCacheRepository, RedisRecipeCacheRepository
from recipe_generator.services import RecipeGenerationService

from .conftest import FakeGenerationClient


@pytest.fixture
def recipe(recipe_payload) -> GeneratedRecipe:
    return GeneratedRecipe.model_validate(recipe_payload)


class TestInMemoryRepository:
    def test_satisfies_protocol(self, memory_store):
        assert isinstance(memory_store, RecipeCacheStore)

    def test_get_missing(self, memory_store):
        assert memory_store.get("chicken,rice") is None

    def test_insert_then_get_has_usage_one(self, memory_store, recipe):
        created = memory_store.insert("chicken,rice", ["Rice", "Chicken"], recipe)
        fetched = memory_store.get("chicken,rice")

        assert fetched is not None
        assert fetched.id == created.id
        assert fetched.usage_count == 1
        assert fetched.ingredients == ["Rice", "Chicken"]
        assert fetched.recipe == recipe

    def test_increment_usage(self, memory_store, recipe):
        created = memory_store.insert("chicken,rice", ["rice", "chicken"], recipe)
        memory_store.increment_usage(created.id)
        assert memory_store.get("chicken,rice").usage_count == 2

    def test_increment_missing_entry_is_noop(self, memory_store):
        memory_store.increment_usage("does-not-exist")
        assert memory_store.count_all() == 0

    def test_duplicate_insert_is_rejected(self, memory_store, recipe):
        memory_store.insert("chicken,rice", ["rice", "chicken"], recipe)
        with pytest.raises(DuplicateFingerprintError):
            memory_store.insert("chicken,rice", ["chicken", "rice"], recipe)
        assert memory_store.count_all() == 1

    def test_stats(self, memory_store, recipe):
        first = memory_store.insert("chicken,rice", ["rice", "chicken"], recipe)
        memory_store.insert("beef", ["beef"], recipe)
        memory_store.increment_usage(first.id)

        stats = memory_store.get_stats()
        assert stats == {"backend": "memory", "total_entries": 2, "total_usage": 3}
        assert memory_store.health_check()


class TestRedisRepository:
    @pytest.fixture
    def redis_client(self):
        return MagicMock()

    @pytest.fixture
    def repo(self, redis_client):
        return RedisRecipeCacheRepository(redis_client=redis_client, key_prefix="test")

    def test_satisfies_protocol(self, repo):
        assert isinstance(repo, RecipeCacheStore)

    def test_get_missing(self, repo, redis_client):
        redis_client.get.return_value = None
        assert repo.get("chicken,rice") is None
        redis_client.get.assert_called_once_with("test:fingerprint:chicken,rice")

    def test_get_decodes_entry(self, repo, redis_client, recipe):
        redis_client.get.return_value = b"abc123"
        redis_client.hgetall.return_value = {
            b"fingerprint": b"chicken,rice",
            b"ingredients": json.dumps(["Rice", "Chicken"]).encode(),
            b"recipe": recipe.model_dump_json(by_alias=True).encode(),
            b"usage_count": b"3",
            b"created_at": b"1700000000.0",
        }

        entry = repo.get("chicken,rice")

        redis_client.hgetall.assert_called_once_with("test:entry:abc123")
        assert entry.id == "abc123"
        assert entry.ingredients == ["Rice", "Chicken"]
        assert entry.recipe == recipe
        assert entry.usage_count == 3

    def test_get_with_dangling_index(self, repo, redis_client):
        redis_client.get.return_value = "abc123"
        redis_client.hgetall.return_value = {}
        assert repo.get("chicken,rice") is None

    def test_insert_writes_entry_then_index(self, repo, redis_client, recipe):
        redis_client.set.return_value = True

        entry = repo.insert("chicken,rice", ["rice", "chicken"], recipe)

        assert entry.usage_count == 1
        entry_key = f"test:entry:{entry.id}"
        mapping = redis_client.hset.call_args.kwargs["mapping"]
        assert redis_client.hset.call_args.args == (entry_key,)
        assert mapping["fingerprint"] == "chicken,rice"
        assert mapping["usage_count"] == 1
        assert json.loads(mapping["ingredients"]) == ["rice", "chicken"]
        assert json.loads(mapping["recipe"])["prepTime"] == 10
        redis_client.set.assert_called_once_with("test:fingerprint:chicken,rice", entry.id, nx=True)
        redis_client.delete.assert_not_called()

    def test_insert_duplicate_removes_orphan(self, repo, redis_client, recipe):
        redis_client.set.return_value = None

        with pytest.raises(DuplicateFingerprintError):
            repo.insert("chicken,rice", ["rice", "chicken"], recipe)

        orphan_key = redis_client.hset.call_args.args[0]
        redis_client.delete.assert_called_once_with(orphan_key)

    def test_insert_index_failure_removes_orphan(self, repo, redis_client, recipe):
        redis_client.set.side_effect = redis.ConnectionError("connection reset")

        with pytest.raises(redis.ConnectionError):
            repo.insert("chicken,rice", ["rice", "chicken"], recipe)

        orphan_key = redis_client.hset.call_args.args[0]
        redis_client.delete.assert_called_once_with(orphan_key)

    def test_increment_usage(self, repo, redis_client):
        redis_client.exists.return_value = 1
        repo.increment_usage("abc123")
        redis_client.hincrby.assert_called_once_with("test:entry:abc123", "usage_count", 1)

    def test_increment_missing_entry_is_noop(self, repo, redis_client):
        redis_client.exists.return_value = 0
        repo.increment_usage("abc123")
        redis_client.hincrby.assert_not_called()

    def test_stats(self, repo, redis_client):
        redis_client.scan_iter.side_effect = lambda match: iter(["test:entry:a", "test:entry:b"])
        redis_client.hget.side_effect = [b"2", b"5"]

        stats = repo.get_stats()

        assert stats["backend"] == "redis"
        assert stats["total_entries"] == 2
        assert stats["total_usage"] == 7

    def test_health_check(self, repo, redis_client):
        redis_client.ping.return_value = True
        assert repo.health_check()


class InMemoryRedis:
    """Dict-backed stand-in for the redis commands the repository uses.

    Behaves like a client created with decode_responses=True: everything
    comes back as str.
    """

    def __init__(self) -> None:
        self.strings: dict[str, str] = {}
        self.hashes: dict[str, dict[str, str]] = {}

    def get(self, key):
        return self.strings.get(key)

    def set(self, key, value, nx=False):
        if nx and key in self.strings:
            return None
        self.strings[key] = str(value)
        return True

    def hset(self, key, mapping):
        self.hashes.setdefault(key, {}).update({k: str(v) for k, v in mapping.items()})
        return len(mapping)

    def hgetall(self, key):
        return dict(self.hashes.get(key, {}))

    def hget(self, key, field):
        return self.hashes.get(key, {}).get(field)

    def hincrby(self, key, field, amount=1):
        entry = self.hashes.setdefault(key, {})
        entry[field] = str(int(entry.get(field, 0)) + amount)
        return int(entry[field])

    def exists(self, *keys):
        return sum(1 for key in keys if key in self.strings or key in self.hashes)

    def delete(self, *keys):
        removed = 0
        for key in keys:
            removed += int(self.strings.pop(key, None) is not None)
            removed += int(self.hashes.pop(key, None) is not None)
        return removed

    def scan_iter(self, match="*"):
        return iter([key for key in [*self.strings, *self.hashes] if fnmatchcase(key, match)])

    def ping(self):
        return True


class FlakyIndexRedis(InMemoryRedis):
    def set(self, key, value, nx=False):
        raise redis.ConnectionError("connection reset")


class TestRedisRepositoryRoundTrip:
    @pytest.fixture
    def backend(self):
        return InMemoryRedis()

    @pytest.fixture
    def repo(self, backend):
        return RedisRecipeCacheRepository(redis_client=backend, key_prefix="test")

    def test_insert_get_increment_get(self, repo, recipe):
        created = repo.insert("chicken,rice", ["Rice", "Chicken"], recipe)

        first = repo.get("chicken,rice")
        assert first.id == created.id
        assert first.fingerprint == "chicken,rice"
        assert first.ingredients == ["Rice", "Chicken"]
        assert first.recipe == recipe
        assert first.usage_count == 1
        assert abs((first.created_at - created.created_at).total_seconds()) < 0.001

        repo.increment_usage(created.id)
        assert repo.get("chicken,rice").usage_count == 2

    def test_get_missing(self, repo):
        assert repo.get("chicken,rice") is None

    def test_increment_missing_entry_is_noop(self, repo, backend):
        repo.increment_usage("does-not-exist")
        assert backend.hashes == {}

    def test_duplicate_insert_leaves_single_entry(self, repo, recipe):
        original = repo.insert("chicken,rice", ["rice", "chicken"], recipe)

        with pytest.raises(DuplicateFingerprintError):
            repo.insert("chicken,rice", ["chicken", "rice"], recipe)

        assert repo.count_all() == 1
        assert repo.get("chicken,rice").id == original.id

    def test_index_failure_leaves_no_entry(self, recipe):
        backend = FlakyIndexRedis()
        repo = RedisRecipeCacheRepository(redis_client=backend, key_prefix="test")

        with pytest.raises(redis.ConnectionError):
            repo.insert("chicken,rice", ["rice", "chicken"], recipe)

        assert repo.count_all() == 0
        assert backend.hashes == {}

    def test_fractional_times_survive_storage(self, repo, recipe_payload):
        recipe = GeneratedRecipe.model_validate({**recipe_payload, "prepTime": 7.5, "cookTime": 15.0})
        repo.insert("chicken,rice", ["rice", "chicken"], recipe)

        stored = repo.get("chicken,rice").recipe
        assert stored.prep_time == 7.5
        assert stored.cook_time == 15.0

    def test_stats(self, repo, recipe):
        first = repo.insert("chicken,rice", ["rice", "chicken"], recipe)
        repo.insert("beef", ["beef"], recipe)
        repo.increment_usage(first.id)
        repo.increment_usage(first.id)

        assert repo.get_stats() == {
            "backend": "redis",
            "key_prefix": "test",
            "total_entries": 2,
            "total_usage": 4,
        }
        assert repo.health_check()

    @pytest.mark.asyncio
    async def test_service_hit_path(self, repo):
        client = FakeGenerationClient()
        service = RecipeGenerationService(cache_store=repo, generation_client=client)

        generated = await service.generate_recipe(["rice", "chicken"])
        cached = await service.generate_recipe(["Chicken", "RICE"], difficulty="hard")

        assert cached == generated
        assert len(client.prompts) == 1
        assert repo.get("chicken,rice").usage_count == 2
        assert service.get_stats()["total_usage"] == 2
