"""Error types raised by the care-profile pipeline."""
from typing import List, Optional


class ScannerError(Exception):
    """Base class for errors surfaced by the pipeline."""


PipelineError = ScannerError


class ConfigurationError(ScannerError):
    """No AI provider is configured."""


class InvalidInputError(ScannerError):
    """Caller input rejected before any network call."""


class ProviderError(ScannerError):
    """A single AI vendor call failed."""

    def __init__(
        self,
        message: str,
        provider: Optional[str] = None,
        status: Optional[int] = None,
        body: Optional[str] = None,
    ):
        super().__init__(message)
        self.provider = provider
        self.status = status
        self.body = body


class MalformedResponseError(ProviderError):
    """Vendor responded successfully but without the expected text payload."""


class ProvidersExhaustedError(ProviderError):
    """Every configured provider failed."""

    def __init__(self, message: str, errors: List[ProviderError]):
        last = errors[-1] if errors else None
        super().__init__(
            message,
            provider=last.provider if last else None,
            status=last.status if last else None,
            body=last.body if last else None,
        )
        self.errors = errors


class ParseError(ScannerError):
    """Provider text could not be decoded into a CareProfile."""

    def __init__(self, message: str, raw_text: str):
        super().__init__(message)
        self.raw_text = raw_text


class ScrapeError(ScannerError):
    """Nursery lookup failed. Never leaves the scraper."""


class RefinementError(ScannerError):
    """Correction round-trip failed. Never leaves the refinement service."""
