"""Text generation client protocol.

Defines the interface for the external text-generation provider. The
client sends one prompt and returns the raw text of the answer; parsing is
not its concern.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class GenerationClient(Protocol):
    """Protocol for text-generation providers."""

    @property
    def model_name(self) -> str:
        """Return the model identifier requests are sent to."""
        ...

    async def generate(self, prompt: str) -> str:
        """Generate text for a prompt.

        Args:
            prompt: The user prompt

        Returns:
            The provider's raw message content

        Raises:
            ConfigurationError: If no credential is configured
            ProviderError: On a non-success status, timeout or transport failure
            EmptyResponseError: On a success status without usable content
        """
        ...

    async def close(self) -> None:
        """Release any underlying connections."""
        ...
