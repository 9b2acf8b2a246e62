"""Tests for bulk reprocessing."""
import json
import pytest
from orchid_scanner.adapters.mock import MockAdapter
from orchid_scanner.config import Settings
from orchid_scanner.exceptions import ProviderError
from orchid_scanner.services.batch import BatchReprocessor
from orchid_scanner.services.fallback import ProviderChain
from orchid_scanner.services.pipeline import CareProfilePipeline


@pytest.mark.asyncio
async def test_failure_does_not_stop_the_run(missing_nursery_scraper, base_profile_data, minimal_profile_data):
    adapter = MockAdapter(responses=[
        json.dumps(base_profile_data),
        ProviderError("Gemini API error: 429 - quota", provider="gemini", status=429),
        json.dumps(minimal_profile_data),
    ])
    pipeline = CareProfilePipeline(
        settings=Settings(),
        chain=ProviderChain([adapter]),
        scraper=missing_nursery_scraper,
    )

    results = await BatchReprocessor(pipeline, batch_size=2, delay_seconds=0).run(
        ["Cattleya walkeriana", "Vanda coerulea", "Dendrobium nobile"],
        climate_summary="Greenhouse",
    )

    assert [r.species_name for r in results] == ["Cattleya walkeriana", "Vanda coerulea", "Dendrobium nobile"]
    assert results[0].profile.species_name == "Cattleya walkeriana"
    assert results[1].profile is None
    assert "429" in results[1].error
    assert results[2].profile.species_name == "Dendrobium nobile"
    assert len(adapter.calls) == 3


@pytest.mark.asyncio
async def test_blank_names_are_reported(missing_nursery_scraper):
    adapter = MockAdapter(responses=[])
    pipeline = CareProfilePipeline(
        settings=Settings(),
        chain=ProviderChain([adapter]),
        scraper=missing_nursery_scraper,
    )

    results = await BatchReprocessor(pipeline, delay_seconds=0).run(["  "])

    assert results[0].error == "Species name is required"
    assert adapter.calls == []
