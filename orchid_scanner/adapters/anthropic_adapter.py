"""Anthropic Claude provider adapter (vendor B)."""
from anthropic import APIError, APIStatusError, AsyncAnthropic
from orchid_scanner.adapters.base import ProviderAdapter, strip_code_fences
from orchid_scanner.config import settings
from orchid_scanner.exceptions import ConfigurationError, MalformedResponseError, ProviderError


class AnthropicAdapter(ProviderAdapter):
    """Anthropic Messages API adapter."""

    name = "anthropic"

    def __init__(self, model_id: str = "claude-sonnet-4-20250514", **kwargs):
        super().__init__(model_id, **kwargs)
        self.max_tokens = kwargs.get("max_tokens") or settings.anthropic_max_tokens
        self.client = kwargs.get("client")
        if self.client is None:
            api_key = kwargs.get("api_key") or settings.anthropic_api_key
            if not api_key:
                raise ConfigurationError("Anthropic API key required")
            timeout = kwargs.get("timeout") or settings.ai_timeout_seconds
            # Fallback between vendors is the only retry layer
            self.client = AsyncAnthropic(api_key=api_key, timeout=timeout, max_retries=0)

    async def call_vision(self, prompt: str, image_b64: str) -> str:
        """Identify from a photo: image block followed by the text block."""
        content = [
            {
                "type": "image",
                "source": {"type": "base64", "media_type": "image/jpeg", "data": image_b64},
            },
            {"type": "text", "text": prompt},
        ]
        return await self._create(content)

    async def call_text(self, prompt: str) -> str:
        return await self._create(prompt)

    async def _create(self, content) -> str:
        try:
            message = await self.client.messages.create(
                model=self.model_id,
                max_tokens=self.max_tokens,
                messages=[{"role": "user", "content": content}],
            )
        except APIStatusError as e:
            body = e.response.text if e.response is not None else ""
            raise ProviderError(
                f"Anthropic API error: {e.status_code} - {body}",
                provider=self.name,
                status=e.status_code,
                body=body,
            ) from e
        except APIError as e:
            raise ProviderError(f"Anthropic network error: {e}", provider=self.name) from e
        except Exception as e:
            raise ProviderError(f"Anthropic request failed: {e!r}", provider=self.name) from e

        return strip_code_fences(self._extract_text(message))

    def _extract_text(self, message) -> str:
        for block in getattr(message, "content", None) or []:
            if getattr(block, "type", None) == "text" and isinstance(getattr(block, "text", None), str):
                return block.text
        raise MalformedResponseError(
            "Could not extract text from Anthropic response",
            provider=self.name,
        )
