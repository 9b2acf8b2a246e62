"""Factory for creating provider adapters."""
import logging
from typing import List, Optional
from orchid_scanner.adapters.base import ProviderAdapter
from orchid_scanner.adapters.mock import MockAdapter
from orchid_scanner.adapters.anthropic_adapter import AnthropicAdapter
from orchid_scanner.adapters.gemini_adapter import GeminiAdapter
from orchid_scanner.config import Settings, settings

logger = logging.getLogger(__name__)


def get_provider_adapter(model_id: str, **kwargs) -> ProviderAdapter:
    """
    Create the adapter matching a model identifier.

    Args:
        model_id: Model identifier (e.g., "mock:default", "gemini-2.0-flash", "claude-sonnet-4-20250514")
        **kwargs: Additional configuration for the adapter

    Returns:
        ProviderAdapter instance

    Raises:
        ValueError: If the model id matches no known vendor
    """
    if model_id.startswith("mock:"):
        return MockAdapter(model_id, **kwargs)
    elif "gemini" in model_id.lower() or "google" in model_id.lower():
        return GeminiAdapter(model_id, **kwargs)
    elif "claude" in model_id.lower() or "anthropic" in model_id.lower():
        return AnthropicAdapter(model_id, **kwargs)
    raise ValueError(f"Unknown provider for model id: {model_id}")


def get_configured_providers(cfg: Optional[Settings] = None) -> List[ProviderAdapter]:
    """
    Build the ordered provider list: Gemini first, then Anthropic.

    A vendor is included only when both its API key and model name are set.
    Each slot goes through get_provider_adapter, so a "mock:" model name
    puts a MockAdapter in that slot.
    """
    cfg = cfg or settings
    providers: List[ProviderAdapter] = []
    if cfg.gemini_configured:
        providers.append(get_provider_adapter(
            cfg.gemini_model,
            api_key=cfg.gemini_api_key,
            timeout=cfg.ai_timeout_seconds,
        ))
    if cfg.anthropic_configured:
        providers.append(get_provider_adapter(
            cfg.anthropic_model,
            api_key=cfg.anthropic_api_key,
            timeout=cfg.ai_timeout_seconds,
            max_tokens=cfg.anthropic_max_tokens,
        ))
    logger.info("Configured AI providers: %s", [p.name for p in providers] or "none")
    return providers
