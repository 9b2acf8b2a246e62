"""Shared fixtures: nursery pages served through httpx.MockTransport and sample profiles."""
import json
import httpx
import pytest
from orchid_scanner.services.nursery import NurseryScraper

NURSERY_BASE = "https://nursery.test"

SEARCH_HTML = """<html><body>
<table class="results">
<tr><td><a href="pictureframe.asp?picid=8231"><img src="thumbs/8231.jpg"></a></td>
<td><a href="pictureframe.asp?picid=8231">Cattleya walkeriana</a></td></tr>
<tr><td><a href="pictureframe.asp?picid=9904">Cattleya walkeriana var. alba</a></td></tr>
</table>
</body></html>"""

DETAIL_HTML = """<html><body>
<h1>Cattleya walkeriana</h1>
<table class="culture">
<tr><td class="culturelabel">Temperature:</td><td class="culturevalue">40°F min. to 95°F max.</td></tr>
<tr><td class="culturelabel">Light Requirements:</td><td class="culturevalue"><b>High</b> light, 3000-4000 fc</td></tr>
<tr><td class="culturelabel">Water Care:</td><td class="culturevalue">Dry out between waterings</td></tr>
<tr><td class="culturelabel">Blooming Season:</td><td class="culturevalue">Fall</td></tr>
<tr><td class="culturelabel">Indigenous to:</td><td class="culturevalue">Brazil</td></tr>
<tr><td class="culturelabel">Size:</td><td class="culturevalue">Mini</td></tr>
</table>
<div id="culturenotes"><ul><li>Mount or pot in <i>coarse</i> bark. Needs a dry winter rest.</li><li>Second note</li></ul></div>
</body></html>"""

EXPECTED_SNIPPET = "\n".join([
    "Temperature: 40°F min. to 95°F max.",
    "Light Requirements: High light, 3000-4000 fc",
    "Water Care: Dry out between waterings",
    "Blooming Season: Fall",
    "Indigenous to: Brazil",
    "Growing Notes: Mount or pot in coarse bark. Needs a dry winter rest.",
])


@pytest.fixture
def nursery_requests():
    """Requests seen by the mock nursery site."""
    return []


@pytest.fixture
def nursery_scraper(nursery_requests):
    """Scraper whose site serves the Cattleya walkeriana pages."""
    def handler(request: httpx.Request) -> httpx.Response:
        nursery_requests.append(request)
        if request.url.path == "/searchresults.asp":
            return httpx.Response(200, text=SEARCH_HTML)
        if request.url.path == "/pictureframe.asp" and request.url.params.get("picid") == "8231":
            return httpx.Response(200, text=DETAIL_HTML)
        return httpx.Response(404, text="Not Found")

    return NurseryScraper(base_url=NURSERY_BASE, timeout=5.0, transport=httpx.MockTransport(handler))


@pytest.fixture
def missing_nursery_scraper(nursery_requests):
    """Scraper whose site never has the species."""
    def handler(request: httpx.Request) -> httpx.Response:
        nursery_requests.append(request)
        return httpx.Response(200, text="<html><body>No results found.</body></html>")

    return NurseryScraper(base_url=NURSERY_BASE, timeout=5.0, transport=httpx.MockTransport(handler))


@pytest.fixture
def base_profile_data():
    """AI profile for Cattleya walkeriana before any nursery refinement."""
    return {
        "species_name": "Cattleya walkeriana",
        "fit_category": "Good Fit",
        "reason": "Brazilian species tolerant of intermediate conditions.",
        "already_owned": False,
        "water_freq": 5,
        "light_requirement": "High",
        "temp_range": "10-32C",
        "temp_min": 10.0,
        "temp_max": 32.0,
        "humidity_min": 50.0,
        "humidity_max": 80.0,
        "placement_suggestion": "Sunroom South Window",
        "conservation_status": "CITES II",
        "native_region": "Cerrado biome of central Brazil",
        "native_latitude": -15.78,
        "native_longitude": -47.93,
        "rest_start_month": 6,
        "rest_end_month": 8,
        "bloom_start_month": 9,
        "bloom_end_month": 11,
        "rest_water_multiplier": 0.3,
        "rest_fertilizer_multiplier": 0.0,
        "active_water_multiplier": 1.0,
        "active_fertilizer_multiplier": 1.0,
    }


@pytest.fixture
def base_profile_json(base_profile_data):
    return json.dumps(base_profile_data)


@pytest.fixture
def minimal_profile_data():
    """Only the required fields."""
    return {
        "species_name": "Dendrobium nobile",
        "fit_category": "Caution Fit",
        "reason": "Needs a cool rest period.",
        "already_owned": True,
        "water_freq": 5,
    }
