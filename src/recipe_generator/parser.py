"""Parsing of raw provider output into a GeneratedRecipe.

Language models do not reliably return bare JSON; answers are often wrapped
in prose or code fences. Decoding is a two-step pipeline of result values:
decode the whole text, and if that fails decode the outermost brace-delimited
substring. Only the final outcome is turned into an exception.
"""

import json
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from recipe_generator.dto.recipe import GeneratedRecipe
from recipe_generator.errors import InvalidRecipeStructureError, MalformedResponseError

REQUIRED_FIELDS = ("title", "ingredients", "steps")


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of a single decode attempt: either a value or an error message."""

    value: Any = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def decode_json(text: str) -> DecodeResult:
    """Decode text as JSON without raising."""
    try:
        return DecodeResult(value=json.loads(text))
    except (json.JSONDecodeError, TypeError) as e:
        return DecodeResult(error=str(e))


def extract_json_object(text: str) -> str | None:
    """Return the substring from the first "{" to the last "}", if any."""
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        return None
    return text[start : end + 1]


def decode_recipe_payload(raw_text: str) -> DecodeResult:
    """Run the two-step decode pipeline.

    Returns:
        The direct decode if it succeeds, otherwise the decode of the
        extracted object, otherwise a failed result describing why.
    """
    direct = decode_json(raw_text)
    if direct.ok:
        return direct

    candidate = extract_json_object(raw_text)
    if candidate is None:
        return DecodeResult(error=f"no JSON object found ({direct.error})")

    return decode_json(candidate)


def validate_recipe(payload: Any) -> GeneratedRecipe:
    """Validate a decoded payload against the recipe schema.

    Raises:
        InvalidRecipeStructureError: If the payload is not an object, a required
            field is missing or empty, or an optional field has the wrong type
    """
    if not isinstance(payload, dict):
        raise InvalidRecipeStructureError(
            f"Invalid recipe structure from AI: expected an object, got {type(payload).__name__}"
        )

    missing = [name for name in REQUIRED_FIELDS if not payload.get(name)]
    if missing:
        raise InvalidRecipeStructureError(
            f"Invalid recipe structure from AI: missing or empty {', '.join(missing)}",
            errors=[{"loc": (name,), "msg": "missing or empty"} for name in missing],
        )

    try:
        return GeneratedRecipe.model_validate(payload)
    except ValidationError as e:
        raise InvalidRecipeStructureError(
            f"Invalid recipe structure from AI: {e.error_count()} field error(s)",
            errors=[{"loc": err["loc"], "msg": err["msg"]} for err in e.errors()],
        ) from e


def parse_and_validate(raw_text: str) -> GeneratedRecipe:
    """Turn raw provider text into a validated recipe.

    Args:
        raw_text: The provider's message content

    Returns:
        The validated GeneratedRecipe

    Raises:
        MalformedResponseError: If neither decode attempt yields JSON
        InvalidRecipeStructureError: If the JSON does not describe a recipe
    """
    result = decode_recipe_payload(raw_text)
    if not result.ok:
        raise MalformedResponseError(f"Invalid JSON response from AI: {result.error}", raw_text=raw_text)

    return validate_recipe(result.value)
