"""Prompt templates for recipe generation."""

SYSTEM_PROMPT = (
    "You are a professional chef and recipe developer. "
    "Always respond with valid JSON only."
)

RECIPE_JSON_SHAPE = """{
  "title": "Recipe Name",
  "ingredients": ["ingredient 1", "ingredient 2"],
  "steps": ["step 1", "step 2"],
  "prepTime": 15,
  "cookTime": 30,
  "servings": 4,
  "nutrition": {
    "calories": 350,
    "protein": "25g",
    "carbs": "40g",
    "fat": "12g"
  }
}"""


def build_prompt(
    ingredients: list[str],
    dietary_restrictions: str | None = None,
    cuisine_preference: str | None = None,
    difficulty: str | None = None,
) -> str:
    """Render the user instruction for a recipe request.

    Optional parameters that are None or blank add no line.

    Args:
        ingredients: Ingredient names, listed verbatim
        dietary_restrictions: e.g. "vegetarian, no nuts"
        cuisine_preference: e.g. "Italian"
        difficulty: e.g. "easy", "medium" or "hard"

    Returns:
        The prompt text
    """
    requirements = [
        "- Use ONLY the provided ingredients (you can suggest common pantry items like salt, pepper, oil)",
        "- Include prep time and cook time in minutes",
        "- Provide 4-6 servings",
        "- Include basic nutritional estimates",
    ]
    if dietary_restrictions and dietary_restrictions.strip():
        requirements.append(f"- Follow these dietary restrictions: {dietary_restrictions.strip()}")
    if cuisine_preference and cuisine_preference.strip():
        requirements.append(f"- Style: {cuisine_preference.strip()} cuisine")
    if difficulty and difficulty.strip():
        requirements.append(f"- Difficulty level: {difficulty.strip()}")

    return (
        f"Generate a detailed recipe using these ingredients: {', '.join(ingredients)}.\n"
        "\n"
        "Requirements:\n"
        + "\n".join(requirements)
        + "\n\n"
        "Format the response as JSON with this structure:\n"
        f"{RECIPE_JSON_SHAPE}\n"
        "\n"
        "Respond with the JSON object only. Do not wrap it in markdown or code fences "
        "and do not add any text before or after it."
    )
