"""Shared fixtures for recipe generator tests."""

import json

import pytest

from recipe_generator.repositories import InMemoryRecipeCacheRepository
from recipe_generator.services import RecipeGenerationService

RECIPE_PAYLOAD = {
    "title": "Chicken Fried Rice",
    "ingredients": ["2 cups cooked rice", "1 chicken breast, diced", "2 tbsp soy sauce"],
    "steps": ["Cook the chicken.", "Add the rice and fry.", "Season with soy sauce."],
    "prepTime": 10,
    "cookTime": 15,
    "servings": 4,
    "nutrition": {"calories": 420, "protein": "28g", "carbs": "50g", "fat": "11g"},
}


class FakeGenerationClient:
    """GenerationClient that replays canned answers and records prompts."""

    def __init__(self, responses: list[str | Exception] | None = None) -> None:
        self.responses = list(responses or [json.dumps(RECIPE_PAYLOAD)])
        self.prompts: list[str] = []
        self.closed = False

    @property
    def model_name(self) -> str:
        return "fake-model"

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        response = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(response, Exception):
            raise response
        return response

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def recipe_payload() -> dict:
    return json.loads(json.dumps(RECIPE_PAYLOAD))


@pytest.fixture
def fake_client() -> FakeGenerationClient:
    return FakeGenerationClient()


@pytest.fixture
def memory_store() -> InMemoryRecipeCacheRepository:
    return InMemoryRecipeCacheRepository()


@pytest.fixture
def service(memory_store, fake_client) -> RecipeGenerationService:
    return RecipeGenerationService(cache_store=memory_store, generation_client=fake_client)
