"""Prompt templates for AI interactions."""
import json
from typing import List, Optional
from orchid_scanner.models.care_profile import CareProfile, REFINABLE_FIELDS


class PromptBuilder:
    """Builds identification, refinement and recap prompts."""

    SCHEMA_EXAMPLE = """{{
  "species_name": "...",
  "fit_category": "Good Fit",
  "reason": "...",
  "already_owned": false,
  "water_freq": 7,
  "light_requirement": "Medium",
  "temp_range": "10-35C",
  "temp_min": 10.0,
  "temp_max": 35.0,
  "humidity_min": 50.0,
  "humidity_max": 80.0,
  "placement_suggestion": "...",
  "conservation_status": "CITES II",
  "native_region": "Cloud forests of Ecuador",
  "native_latitude": -1.83,
  "native_longitude": -78.18,
  "rest_start_month": 11,
  "rest_end_month": 2,
  "bloom_start_month": 3,
  "bloom_end_month": 5,
  "rest_water_multiplier": 0.3,
  "rest_fertilizer_multiplier": 0.0,
  "active_water_multiplier": 1.0,
  "active_fertilizer_multiplier": 1.0
}}"""

    FIELD_RULES = """RULES:
- Allowed fit_category values: 'Good Fit', 'Bad Fit', 'Caution Fit'.
- light_requirement is one of: 'High', 'Medium', 'Low'.
- placement_suggestion must be one of my zones: {zone_list}.
- conservation_status is 'CITES I', 'CITES II', 'Endangered', 'Vulnerable', or null if unknown/common.
- native_region is a brief description of where the species grows wild.
- native_latitude/native_longitude are approximate decimal coordinates for the center of its native range, or null if unknown.
- temp_min/temp_max are the FULL tolerance range in Celsius: the absolute lowest and highest temperatures the plant survives, not the ideal growing range. temp_range is the same range as a display string (e.g. "10-35C").
- humidity_min/humidity_max are percentages, or null if unknown.
- Seasonal fields use Northern Hemisphere months (1-12). Multipliers are 0.0-1.0 (0.3 = 30% of normal frequency, 0.0 = stop entirely).
- If the species has no distinct rest period or seasonal cycle, set ALL seasonal fields to null. Never fill only some of them."""

    IMAGE_PROMPT_TEMPLATE = """Identify the orchid species in this image.

Think step-by-step:
1. Identify the species with high confidence (look for plant tags).
2. Analyze its natural habitat and care requirements.
3. Compare those requirements against my conditions: {climate_summary}
4. Consider my growing zones: {zone_list}
5. Check whether I already own it. My collection: {existing_species}
6. Determine its native habitat region and the approximate center of its primary native range.
Then evaluate the fit.

Return ONLY valid JSON (no markdown) with this structure:
{schema}

{rules}"""

    NAME_PROMPT_TEMPLATE = """Build a care profile for the orchid species "{species_name}".

Think step-by-step:
1. Confirm the species name (correct obvious misspellings).
2. Analyze its natural habitat and care requirements.
3. Compare those requirements against my conditions: {climate_summary}
4. Consider my growing zones: {zone_list}
5. Check whether I already own it. My collection: {existing_species}
6. Determine its native habitat region and the approximate center of its primary native range.
Then evaluate the fit.
{nursery_section}
Return ONLY valid JSON (no markdown) with this structure:
{schema}

{rules}"""

    NURSERY_SECTION_TEMPLATE = """
IMPORTANT - REAL NURSERY DATA for this species. Prefer it over general knowledge, converting Fahrenheit to Celsius:
{snippet}
"""

    REFINE_PROMPT_TEMPLATE = """A care profile for {species_name} was generated from general knowledge. A specialist nursery publishes this care data for the species:

{snippet}

Current values:
{current_values}

Using the nursery data, correct these values. Temperatures are in Celsius (convert from Fahrenheit where needed). temp_min/temp_max must describe the FULL tolerance range: the absolute survivable lows and highs, not the ideal growing range. temp_range is the same range as a display string like "4-35C".

Return ONLY a JSON object (no markdown) with exactly these keys: temp_min, temp_max, humidity_min, humidity_max, temp_range. Use null for any value the nursery data does not support."""

    CARE_RECAP_TEMPLATE = """Given this {species} orchid's care history over the past 6 months, explain in 2-3 sentences what likely contributed to this {event_type}. Be specific about which care actions helped. Keep the tone warm and encouraging.

Data: {care_summary}"""

    @staticmethod
    def format_zone_list(zone_names: List[str]) -> str:
        return ", ".join(zone_names) if zone_names else "No zones configured"

    def _rules(self, zone_names: List[str]) -> str:
        return self.FIELD_RULES.format(zone_list=self.format_zone_list(zone_names))

    def build_image_prompt(
        self,
        existing_species: List[str],
        climate_summary: str,
        zone_names: List[str],
    ) -> str:
        """Build the vision identification prompt."""
        return self.IMAGE_PROMPT_TEMPLATE.format(
            climate_summary=climate_summary or "not provided",
            zone_list=self.format_zone_list(zone_names),
            existing_species=json.dumps(existing_species),
            schema=self.SCHEMA_EXAMPLE.format(),
            rules=self._rules(zone_names),
        )

    def build_name_prompt(
        self,
        species_name: str,
        existing_species: List[str],
        climate_summary: str,
        zone_names: List[str],
        nursery_snippet: Optional[str] = None,
    ) -> str:
        """Build the name-based prompt, embedding nursery data when present."""
        nursery_section = ""
        if nursery_snippet:
            nursery_section = self.NURSERY_SECTION_TEMPLATE.format(snippet=nursery_snippet)
        return self.NAME_PROMPT_TEMPLATE.format(
            species_name=species_name,
            climate_summary=climate_summary or "not provided",
            zone_list=self.format_zone_list(zone_names),
            existing_species=json.dumps(existing_species),
            nursery_section=nursery_section,
            schema=self.SCHEMA_EXAMPLE.format(),
            rules=self._rules(zone_names),
        )

    def build_refine_prompt(self, profile: CareProfile, snippet: str) -> str:
        """Build the correction prompt for the five tolerance fields."""
        current = {name: getattr(profile, name) for name in REFINABLE_FIELDS}
        return self.REFINE_PROMPT_TEMPLATE.format(
            species_name=profile.species_name,
            snippet=snippet,
            current_values=json.dumps(current, indent=2),
        )

    def build_care_recap_prompt(self, species: str, event_type: str, care_summary: dict) -> str:
        return self.CARE_RECAP_TEMPLATE.format(
            species=species,
            event_type=event_type,
            care_summary=json.dumps(care_summary),
        )
