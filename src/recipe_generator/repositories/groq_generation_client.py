"""Groq-backed text generation client.

Talks to Groq's OpenAI-compatible chat completions endpoint:

    POST {base_url}/chat/completions
    {"model", "messages": [{"role", "content"}], "temperature", "max_tokens", "response_format"?}

Successful answers look like ``{"choices": [{"message": {"content": ...}}]}``;
failures carry ``{"error": {"message": ...}}``.

The credential and all request parameters are fixed at construction. Nothing
is read from the environment when a request is made, and nothing is retried.
"""

import logging

import httpx

from recipe_generator.config import settings
from recipe_generator.errors import ConfigurationError, EmptyResponseError, ProviderError
from recipe_generator.prompts import SYSTEM_PROMPT

logger = logging.getLogger(__name__)


class GroqGenerationClient:
    """Groq implementation of the GenerationClient protocol.

    This class satisfies the GenerationClient protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        client = GroqGenerationClient.create(api_key="gsk_...")
        raw = await client.generate("Generate a recipe using: rice, chicken")
        await client.close()
        ```
    """

    def __init__(
        self,
        api_key: str | None,
        model_name: str | None = None,
        base_url: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
        timeout: float | None = None,
        json_mode: bool = True,
        system_prompt: str = SYSTEM_PROMPT,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the Groq client.

        Args:
            api_key: Bearer credential. May be None; generate() then fails with
                ConfigurationError instead of calling the provider.
            model_name: Model identifier. Defaults to settings.generation_model.
            base_url: API base URL. Defaults to settings.groq_base_url.
            temperature: Sampling temperature. Defaults to settings.
            max_tokens: Output token ceiling. Defaults to settings.
            timeout: Request timeout in seconds. Defaults to settings.
            json_mode: Ask the provider for a JSON object response.
            system_prompt: Fixed system instruction sent with every prompt.
            http_client: Pre-built async client (mainly for tests).
        """
        self._api_key = api_key
        self._model_name = model_name or settings.generation_model
        self._base_url = (base_url or settings.groq_base_url).rstrip("/")
        self._temperature = settings.generation_temperature if temperature is None else temperature
        self._max_tokens = max_tokens or settings.generation_max_tokens
        self._timeout = timeout or settings.generation_timeout
        self._json_mode = json_mode
        self._system_prompt = system_prompt
        self._client = http_client

    @classmethod
    def create(
        cls,
        api_key: str | None = None,
        model_name: str | None = None,
        base_url: str | None = None,
    ) -> "GroqGenerationClient":
        """Factory method to create GroqGenerationClient from settings.

        Args:
            api_key: Credential. If None, uses settings.groq_api_key.
            model_name: Model name. If None, uses settings.
            base_url: API URL. If None, uses settings.

        Returns:
            Configured GroqGenerationClient
        """
        return cls(
            api_key=api_key if api_key is not None else settings.groq_api_key,
            model_name=model_name,
            base_url=base_url,
            temperature=settings.generation_temperature,
            max_tokens=settings.generation_max_tokens,
            timeout=settings.generation_timeout,
            json_mode=settings.generation_json_mode,
        )

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client.

        Returns:
            The httpx.AsyncClient instance
        """
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    @property
    def model_name(self) -> str:
        """Get the model identifier."""
        return self._model_name

    @property
    def is_configured(self) -> bool:
        """Whether a non-blank credential was supplied."""
        return bool(self._api_key and self._api_key.strip())

    def build_payload(self, prompt: str) -> dict:
        """Build the chat completions request body for a prompt."""
        payload = {
            "model": self._model_name,
            "messages": [
                {"role": "system", "content": self._system_prompt},
                {"role": "user", "content": prompt},
            ],
            "temperature": self._temperature,
            "max_tokens": self._max_tokens,
        }
        if self._json_mode:
            payload["response_format"] = {"type": "json_object"}
        return payload

    async def generate(self, prompt: str) -> str:
        """Send a prompt and return the raw message content.

        Args:
            prompt: The user prompt

        Returns:
            The content of the first choice

        Raises:
            ConfigurationError: If no credential is configured (no request is made)
            ProviderError: On a non-success status, timeout or transport failure
            EmptyResponseError: On a success status without usable content
        """
        if not self.is_configured:
            raise ConfigurationError("GROQ_API_KEY is not configured")

        url = f"{self._base_url}/chat/completions"
        headers = {"Authorization": f"Bearer {self._api_key}"}

        try:
            response = await self.client.post(url, json=self.build_payload(prompt), headers=headers)
        except httpx.TimeoutException as e:
            raise ProviderError(
                f"Request timed out after {self._timeout}s",
                is_timeout=True,
            ) from e
        except httpx.HTTPError as e:
            raise ProviderError(f"Request failed: {e}") from e

        if not response.is_success:
            raise ProviderError(_error_message(response), status_code=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise EmptyResponseError("Provider returned a non-JSON body") from e

        content = _first_choice_content(data)
        if not content or not content.strip():
            raise EmptyResponseError()

        logger.debug("Received %d characters from %s", len(content), self._model_name)
        return content

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None


def _error_message(response: httpx.Response) -> str:
    """Pull the message out of an {"error": {"message": ...}} envelope."""
    try:
        data = response.json()
    except ValueError:
        return response.text or response.reason_phrase

    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if isinstance(error, str) and error:
            return error
    return response.text or response.reason_phrase


def _first_choice_content(data: object) -> str | None:
    if not isinstance(data, dict):
        return None
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    if not isinstance(first, dict):
        return None
    message = first.get("message")
    if not isinstance(message, dict):
        return None
    content = message.get("content")
    return content if isinstance(content, str) else None
