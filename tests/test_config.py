"""Tests for settings validation."""

import pytest

from recipe_generator.config import Settings


def test_explicit_values():
    settings = Settings(cache_backend="memory", groq_api_key=None, generation_temperature=0.2)
    assert settings.cache_backend == "memory"
    assert settings.generation_temperature == 0.2
    assert not settings.has_api_key


def test_has_api_key():
    assert Settings(groq_api_key="gsk_test").has_api_key
    assert not Settings(groq_api_key="   ").has_api_key


@pytest.mark.parametrize(
    "overrides",
    [
        {"cache_backend": "sqlite"},
        {"generation_temperature": 2.5},
        {"generation_max_tokens": 0},
        {"generation_timeout": 0},
    ],
)
def test_invalid_settings(overrides):
    with pytest.raises(ValueError):
        Settings(**overrides)
