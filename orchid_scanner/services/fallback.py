"""Ordered two-tier fallback across configured AI providers."""
import logging
from typing import Awaitable, Callable, List
from orchid_scanner.adapters.base import ProviderAdapter
from orchid_scanner.exceptions import ConfigurationError, ProviderError, ProvidersExhaustedError

logger = logging.getLogger(__name__)


class ProviderChain:
    """
    Try providers strictly in order and return the first success.

    Earlier failures are logged as warnings and never surfaced when a later
    provider succeeds. This is sequential, never a race.
    """

    def __init__(self, providers: List[ProviderAdapter]):
        self.providers = list(providers)

    @property
    def configured(self) -> bool:
        return bool(self.providers)

    def require_configured(self) -> None:
        """Raise ConfigurationError when no provider could ever answer."""
        if not self.configured:
            raise ConfigurationError("No AI provider configured (set GEMINI_API_KEY or ANTHROPIC_API_KEY)")

    async def call_vision(self, prompt: str, image_b64: str) -> str:
        return await self._run("vision", lambda p: p.call_vision(prompt, image_b64))

    async def call_text(self, prompt: str) -> str:
        return await self._run("text", lambda p: p.call_text(prompt))

    async def _run(self, operation: str, call: Callable[[ProviderAdapter], Awaitable[str]]) -> str:
        self.require_configured()

        errors: List[ProviderError] = []
        for index, provider in enumerate(self.providers):
            try:
                text = await call(provider)
            except ProviderError as e:
                errors.append(e)
                if index < len(self.providers) - 1:
                    logger.warning(
                        "%s %s call failed, falling back to %s: %s",
                        provider.name,
                        operation,
                        self.providers[index + 1].name,
                        e,
                    )
                continue
            if errors:
                logger.info("%s %s call succeeded after fallback", provider.name, operation)
            return text

        last = errors[-1]
        if len(errors) == 1:
            raise last
        raise ProvidersExhaustedError(f"All AI providers failed. Last error: {last}", errors)
