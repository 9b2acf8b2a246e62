"""Correct tolerance ranges in a profile using nursery care data."""
import json
import logging
from typing import Any, Dict
from orchid_scanner.adapters.base import strip_code_fences
from orchid_scanner.exceptions import RefinementError, ScannerError
from orchid_scanner.models.care_profile import CareProfile, REFINABLE_NUMERIC_FIELDS
from orchid_scanner.services.fallback import ProviderChain
from orchid_scanner.services.prompts import PromptBuilder

logger = logging.getLogger(__name__)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def select_corrections(data: Dict[str, Any]) -> Dict[str, Any]:
    """Keep only the refinable keys whose values have the right type."""
    updates: Dict[str, Any] = {}
    for name in REFINABLE_NUMERIC_FIELDS:
        if _is_number(data.get(name)):
            updates[name] = float(data[name])
    if isinstance(data.get("temp_range"), str):
        updates["temp_range"] = data["temp_range"]
    return updates


class RefinementService:
    """Best-effort second AI round-trip over temp/humidity fields."""

    def __init__(self, chain: ProviderChain, prompt_builder: PromptBuilder = None):
        self.chain = chain
        self.prompt_builder = prompt_builder or PromptBuilder()

    async def refine(self, profile: CareProfile, snippet: str) -> CareProfile:
        """
        Return ``profile`` with corrected tolerance fields.

        Only temp_min, temp_max, humidity_min, humidity_max and temp_range can
        change, and only when the response carries a correctly typed value.
        Any failure returns the input profile unchanged.
        """
        try:
            updates = await self._request_corrections(profile, snippet)
        except RefinementError as e:
            logger.warning("Refinement for %s skipped: %s", profile.species_name, e)
            return profile

        if not updates:
            return profile
        logger.info(
            "Refined %s from nursery data",
            profile.species_name,
            extra={"refined_fields": sorted(updates)},
        )
        return profile.model_copy(update=updates)

    async def _request_corrections(self, profile: CareProfile, snippet: str) -> Dict[str, Any]:
        prompt = self.prompt_builder.build_refine_prompt(profile, snippet)
        try:
            raw = await self.chain.call_text(prompt)
        except ScannerError as e:
            raise RefinementError(f"provider call failed: {e}") from e

        try:
            data = json.loads(strip_code_fences(raw))
        except json.JSONDecodeError as e:
            raise RefinementError(f"response is not JSON: {e}") from e
        if not isinstance(data, dict):
            raise RefinementError("response is not a JSON object")
        return select_corrections(data)
