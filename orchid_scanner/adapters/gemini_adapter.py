"""Google Gemini provider adapter (vendor A)."""
import base64
import binascii
import json
import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types
from orchid_scanner.adapters.base import ProviderAdapter, strip_code_fences
from orchid_scanner.config import settings
from orchid_scanner.exceptions import ConfigurationError, MalformedResponseError, ProviderError


class GeminiAdapter(ProviderAdapter):
    """Google Gemini generateContent adapter."""

    name = "gemini"

    def __init__(self, model_id: str = "gemini-2.0-flash", **kwargs):
        super().__init__(model_id, **kwargs)
        self.client = kwargs.get("client")
        if self.client is None:
            api_key = kwargs.get("api_key") or settings.gemini_api_key
            if not api_key:
                raise ConfigurationError("Gemini API key required")
            timeout = kwargs.get("timeout") or settings.ai_timeout_seconds
            self.client = genai.Client(
                api_key=api_key,
                http_options=types.HttpOptions(timeout=int(timeout * 1000)),
            )

    async def call_vision(self, prompt: str, image_b64: str) -> str:
        """Identify from a photo: text part followed by an inline JPEG part."""
        try:
            image_bytes = base64.b64decode(image_b64)
        except (binascii.Error, ValueError) as e:
            raise ProviderError(f"Gemini: image is not valid base64: {e}", provider=self.name) from e

        contents = [
            types.Content(
                role="user",
                parts=[
                    types.Part.from_text(text=prompt),
                    types.Part.from_bytes(data=image_bytes, mime_type="image/jpeg"),
                ],
            )
        ]
        return await self._generate(contents)

    async def call_text(self, prompt: str) -> str:
        contents = [types.Content(role="user", parts=[types.Part.from_text(text=prompt)])]
        return await self._generate(contents)

    async def _generate(self, contents) -> str:
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model_id,
                contents=contents,
            )
        except genai_errors.APIError as e:
            body = json.dumps(e.details, default=str) if e.details else (e.message or "")
            raise ProviderError(
                f"Gemini API error: {e.code} - {body}",
                provider=self.name,
                status=e.code,
                body=body,
            ) from e
        except (httpx.HTTPError, OSError) as e:
            raise ProviderError(f"Gemini network error: {e}", provider=self.name) from e
        except Exception as e:
            raise ProviderError(f"Gemini request failed: {e!r}", provider=self.name) from e

        return strip_code_fences(self._extract_text(response))

    def _extract_text(self, response) -> str:
        # candidates[0].content.parts[0].text
        try:
            text = response.candidates[0].content.parts[0].text
        except (AttributeError, IndexError, TypeError):
            text = None
        if not isinstance(text, str):
            raise MalformedResponseError(
                "Could not extract text from Gemini response",
                provider=self.name,
            )
        return text
