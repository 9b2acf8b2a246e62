"""Decode raw provider text into a CareProfile."""
from pydantic import ValidationError
from orchid_scanner.adapters.base import strip_code_fences
from orchid_scanner.exceptions import ParseError
from orchid_scanner.models.care_profile import CareProfile


def parse_profile(raw_text: str) -> CareProfile:
    """
    Parse provider output into the canonical schema.

    Code fences are stripped again here since not every caller goes through an
    adapter. There is no lenient second pass: anything that fails validation
    is a ParseError carrying the original text.
    """
    try:
        return CareProfile.model_validate_json(strip_code_fences(raw_text))
    except ValidationError as e:
        raise ParseError(f"Failed to parse AI response: {e}", raw_text) from e
