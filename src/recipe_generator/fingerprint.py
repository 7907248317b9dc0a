"""Cache key derivation for ingredient lists."""

from collections.abc import Sequence

SEPARATOR = ","


def derive_fingerprint(ingredients: Sequence[str]) -> str:
    """Derive the canonical cache key for an ingredient list.

    Items are lowercased before the code-point sort, so any permutation of the
    same ingredients (ignoring case) maps to the same key. Whitespace is kept
    as supplied. The input is never mutated.

    Args:
        ingredients: Ingredient names as supplied by the caller

    Returns:
        The fingerprint, e.g. "chicken,rice". Empty input yields "".
    """
    return SEPARATOR.join(sorted(item.lower() for item in ingredients))
