"""Recipe schema shared by the parser, the cache and the API."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr

# Any JSON number; strings and booleans are rejected rather than converted.
NonNegativeNumber = Annotated[StrictInt, Field(ge=0)] | Annotated[StrictFloat, Field(ge=0)]
PositiveNumber = Annotated[StrictInt, Field(gt=0)] | Annotated[StrictFloat, Field(gt=0)]


class Nutrition(BaseModel):
    """Per-serving nutrition estimate."""

    model_config = ConfigDict(frozen=True)

    calories: StrictInt | StrictFloat | None = Field(None, description="Calories per serving")
    protein: StrictStr | None = Field(None, description="Protein magnitude, e.g. '25g'")
    carbs: StrictStr | None = Field(None, description="Carbohydrate magnitude, e.g. '40g'")
    fat: StrictStr | None = Field(None, description="Fat magnitude, e.g. '12g'")


class GeneratedRecipe(BaseModel):
    """A recipe produced by the generation provider.

    Required fields must be present and non-empty. Optional fields are None
    when absent and otherwise kept as decoded: 15 stays 15, 12.5 stays 12.5,
    and "15" is rejected. Field names follow the provider's JSON (prepTime,
    cookTime) on the wire.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    title: StrictStr = Field(..., description="Recipe name", min_length=1)
    ingredients: list[StrictStr] = Field(..., description="Ingredient lines", min_length=1)
    steps: list[StrictStr] = Field(..., description="Preparation steps", min_length=1)
    prep_time: NonNegativeNumber | None = Field(None, alias="prepTime", description="Prep time in minutes")
    cook_time: NonNegativeNumber | None = Field(None, alias="cookTime", description="Cook time in minutes")
    servings: PositiveNumber | None = Field(None, description="Number of servings")
    nutrition: Nutrition | None = Field(None, description="Nutrition estimate")
