"""Error taxonomy for recipe generation.

Components raise the specific kinds below. The generation service wraps
whatever escapes a request into a single GenerationFailedError so callers
only have to handle one kind.
"""

from typing import Any


class RecipeGeneratorError(Exception):
    """Base class for all recipe generator errors."""


class ConfigurationError(RecipeGeneratorError):
    """A required setting (e.g. the provider credential) is missing.

    Fatal and not retryable: it has to be fixed in the deployment configuration.
    """


class ProviderError(RecipeGeneratorError):
    """The text-generation provider failed to answer successfully.

    Attributes:
        status_code: Upstream HTTP status, or None for timeouts and transport errors
        message: Upstream error message (or a description of the failure)
        is_timeout: True when the request exceeded the client timeout
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        is_timeout: bool = False,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.is_timeout = is_timeout
        if status_code is not None:
            super().__init__(f"Provider error {status_code}: {message}")
        else:
            super().__init__(f"Provider error: {message}")


class EmptyResponseError(ProviderError):
    """The provider answered with a success status but no usable content."""

    def __init__(self, message: str = "No content received from provider") -> None:
        super().__init__(message)


class MalformedResponseError(RecipeGeneratorError):
    """Provider content could not be decoded as JSON."""

    def __init__(self, message: str, raw_text: str = "") -> None:
        super().__init__(message)
        self.raw_text = raw_text


class InvalidRecipeStructureError(RecipeGeneratorError):
    """Decoded content does not match the recipe schema."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class DuplicateFingerprintError(RecipeGeneratorError):
    """The cache store already holds an entry for this fingerprint."""

    def __init__(self, fingerprint: str) -> None:
        super().__init__(f"Cache entry already exists for fingerprint {fingerprint!r}")
        self.fingerprint = fingerprint


class GenerationFailedError(RecipeGeneratorError):
    """User-facing failure of a generate_recipe request.

    Attributes:
        cause: The underlying exception
        detail: The underlying exception's message, kept for diagnostics
    """

    DEFAULT_MESSAGE = "Failed to generate recipe. Please try again."

    def __init__(self, cause: BaseException, message: str = DEFAULT_MESSAGE) -> None:
        super().__init__(message)
        self.cause = cause
        self.detail = str(cause) or type(cause).__name__

    @property
    def reason(self) -> str:
        """Name of the underlying error kind (e.g. "ProviderError")."""
        return type(self.cause).__name__
