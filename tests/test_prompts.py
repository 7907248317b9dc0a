"""Tests for prompt construction."""

from recipe_generator.prompts import SYSTEM_PROMPT, build_prompt


def test_lists_ingredients_verbatim():
    prompt = build_prompt(["Chicken Breast", "jasmine rice"])
    assert "using these ingredients: Chicken Breast, jasmine rice." in prompt


def test_contains_fixed_requirements():
    prompt = build_prompt(["rice"])
    assert "Use ONLY the provided ingredients" in prompt
    assert "salt, pepper, oil" in prompt
    assert "prep time and cook time in minutes" in prompt
    assert "4-6 servings" in prompt
    assert "nutritional estimates" in prompt


def test_describes_json_shape():
    prompt = build_prompt(["rice"])
    for key in ('"title"', '"ingredients"', '"steps"', '"prepTime"', '"cookTime"', '"servings"', '"nutrition"',
                '"calories"', '"protein"', '"carbs"', '"fat"'):
        assert key in prompt
    assert "JSON object only" in prompt
    assert "code fences" in prompt


def test_optional_parameters_add_one_line_each():
    prompt = build_prompt(
        ["rice"],
        dietary_restrictions="vegan",
        cuisine_preference="Thai",
        difficulty="easy",
    )
    assert "- Follow these dietary restrictions: vegan" in prompt
    assert "- Style: Thai cuisine" in prompt
    assert "- Difficulty level: easy" in prompt


def test_absent_or_blank_parameters_add_nothing():
    prompt = build_prompt(["rice"], dietary_restrictions="", cuisine_preference="   ", difficulty=None)
    assert "dietary restrictions" not in prompt
    assert "cuisine" not in prompt
    assert "Difficulty level" not in prompt


def test_system_prompt_demands_json():
    assert "JSON only" in SYSTEM_PROMPT
