from .base import ProviderAdapter, strip_code_fences
from .mock import MockAdapter
from .anthropic_adapter import AnthropicAdapter
from .gemini_adapter import GeminiAdapter
from .factory import get_provider_adapter, get_configured_providers

__all__ = [
    "ProviderAdapter",
    "strip_code_fences",
    "MockAdapter",
    "AnthropicAdapter",
    "GeminiAdapter",
    "get_provider_adapter",
    "get_configured_providers",
]
