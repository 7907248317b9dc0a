"""Request DTOs for API endpoints."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _drop_blank(ingredients: list[str]) -> list[str]:
    cleaned = [item.strip() for item in ingredients if item and item.strip()]
    if not cleaned:
        raise ValueError("at least one non-empty ingredient is required")
    return cleaned


class GenerateRecipeRequest(BaseModel):
    """Request DTO for generating a recipe.

    Blank ingredient entries are dropped before the request reaches the
    service layer.
    """

    model_config = ConfigDict(populate_by_name=True)

    ingredients: list[str] = Field(..., description="Ingredients to cook with", min_length=1)
    dietary_restrictions: str | None = Field(
        None,
        alias="dietaryRestrictions",
        description="Dietary restrictions, e.g. 'vegetarian, no nuts'",
    )
    cuisine_preference: str | None = Field(
        None,
        alias="cuisinePreference",
        description="Preferred cuisine, e.g. 'Italian'",
    )
    difficulty: str | None = Field(None, description="Difficulty level: easy, medium or hard")

    @field_validator("ingredients")
    @classmethod
    def drop_blank_ingredients(cls, value: list[str]) -> list[str]:
        return _drop_blank(value)


class CacheLookupRequest(BaseModel):
    """Request DTO for peeking into the cache without counting a use."""

    ingredients: list[str] = Field(..., description="Ingredients to look up", min_length=1)

    @field_validator("ingredients")
    @classmethod
    def drop_blank_ingredients(cls, value: list[str]) -> list[str]:
        return _drop_blank(value)
