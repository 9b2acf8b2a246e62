"""Base AI provider adapter interface."""
from abc import ABC, abstractmethod


def strip_code_fences(text: str) -> str:
    """Remove literal ```json / ``` markers and surrounding whitespace."""
    return text.replace("```json", "").replace("```", "").strip()


class ProviderAdapter(ABC):
    """Abstract base class for AI vendor clients."""

    name = "provider"

    def __init__(self, model_id: str, **kwargs):
        """
        Initialize the adapter.

        Args:
            model_id: Vendor model name (e.g., "gemini-2.0-flash")
            **kwargs: Additional provider-specific configuration
        """
        self.model_id = model_id
        self.config = kwargs

    @abstractmethod
    async def call_vision(self, prompt: str, image_b64: str) -> str:
        """
        Send a prompt together with a base64 JPEG.

        Returns:
            The first text payload of the response, with code fences removed

        Raises:
            ProviderError: On network failure, non-2xx status or malformed response
        """
        pass

    @abstractmethod
    async def call_text(self, prompt: str) -> str:
        """
        Send a text-only prompt.

        Returns:
            The first text payload of the response, with code fences removed

        Raises:
            ProviderError: On network failure, non-2xx status or malformed response
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(model_id={self.model_id!r})"
