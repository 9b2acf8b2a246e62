"""Tests for nursery-driven refinement of tolerance fields."""
import json
import pytest
from orchid_scanner.adapters.mock import MockAdapter
from orchid_scanner.exceptions import ProviderError
from orchid_scanner.models.care_profile import CareProfile, REFINABLE_FIELDS
from orchid_scanner.services.fallback import ProviderChain
from orchid_scanner.services.refinement import RefinementService, select_corrections
from tests.conftest import EXPECTED_SNIPPET


def _service(*responses):
    adapter = MockAdapter(responses=list(responses))
    return RefinementService(ProviderChain([adapter])), adapter


def _unchanged_outside(before: CareProfile, after: CareProfile, fields) -> bool:
    return before.model_dump(exclude=set(fields)) == after.model_dump(exclude=set(fields))


@pytest.mark.asyncio
async def test_all_five_keys_overwritten(base_profile_data):
    profile = CareProfile(**base_profile_data)
    service, adapter = _service(json.dumps({
        "temp_min": 4.4,
        "temp_max": 35,
        "humidity_min": 40.0,
        "humidity_max": 90.0,
        "temp_range": "4-35C",
    }))

    refined = await service.refine(profile, EXPECTED_SNIPPET)

    assert refined.temp_min == 4.4
    assert refined.temp_max == 35.0
    assert refined.humidity_min == 40.0
    assert refined.humidity_max == 90.0
    assert refined.temp_range == "4-35C"
    assert _unchanged_outside(profile, refined, REFINABLE_FIELDS)
    assert adapter.calls[0][0] == "text"


@pytest.mark.asyncio
async def test_missing_key_keeps_previous_value(base_profile_data):
    profile = CareProfile(**base_profile_data)
    service, _ = _service('{"temp_max": 35.0, "temp_range": "10-35C"}')

    refined = await service.refine(profile, EXPECTED_SNIPPET)

    assert refined.temp_min == 10.0
    assert refined.temp_max == 35.0
    assert refined.temp_range == "10-35C"
    assert refined.humidity_min == 50.0


@pytest.mark.asyncio
async def test_wrong_typed_values_ignored(base_profile_data):
    profile = CareProfile(**base_profile_data)
    service, _ = _service(json.dumps({
        "temp_min": "4.4",
        "temp_max": None,
        "humidity_min": True,
        "humidity_max": 88,
        "temp_range": 435,
    }))

    refined = await service.refine(profile, EXPECTED_SNIPPET)

    assert refined.temp_min == 10.0
    assert refined.temp_max == 32.0
    assert refined.humidity_min == 50.0
    assert refined.humidity_max == 88.0
    assert refined.temp_range == "10-32C"


@pytest.mark.asyncio
async def test_other_fields_in_response_ignored(base_profile_data):
    profile = CareProfile(**base_profile_data)
    service, _ = _service('{"species_name": "Cattleya loddigesii", "water_freq": 2, "temp_min": 5.0}')

    refined = await service.refine(profile, EXPECTED_SNIPPET)

    assert refined.species_name == "Cattleya walkeriana"
    assert refined.water_freq == 5
    assert refined.temp_min == 5.0


@pytest.mark.asyncio
async def test_provider_failure_returns_input(base_profile_data, caplog):
    profile = CareProfile(**base_profile_data)
    service, _ = _service(ProviderError("Gemini API error: 500 - boom", provider="gemini", status=500))

    refined = await service.refine(profile, EXPECTED_SNIPPET)

    assert refined is profile
    assert any(r.levelname == "WARNING" for r in caplog.records)


@pytest.mark.asyncio
async def test_no_providers_returns_input(base_profile_data):
    profile = CareProfile(**base_profile_data)
    service = RefinementService(ProviderChain([]))

    assert await service.refine(profile, EXPECTED_SNIPPET) is profile


@pytest.mark.asyncio
@pytest.mark.parametrize("raw", ["I could not find data.", "[4.4, 35.0]", "```json\n{broken\n```"])
async def test_unparseable_response_returns_input(base_profile_data, raw):
    profile = CareProfile(**base_profile_data)
    service, _ = _service(raw)

    assert await service.refine(profile, EXPECTED_SNIPPET) is profile


@pytest.mark.asyncio
async def test_prompt_embeds_snippet_and_current_values(base_profile_data):
    profile = CareProfile(**base_profile_data)
    service, adapter = _service("{}")

    await service.refine(profile, EXPECTED_SNIPPET)

    prompt = adapter.calls[0][1]
    assert "Temperature: 40°F min. to 95°F max." in prompt
    assert '"temp_min": 10.0' in prompt
    assert '"temp_range": "10-32C"' in prompt
    assert "FULL tolerance range" in prompt


def test_select_corrections_filters_types():
    assert select_corrections({"temp_min": 3, "temp_max": False, "humidity_min": "x", "extra": 1}) == {"temp_min": 3.0}
