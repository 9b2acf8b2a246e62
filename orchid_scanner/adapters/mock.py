"""Mock provider adapter for testing without API calls."""
import json
from typing import List, Optional, Tuple, Union
from orchid_scanner.adapters.base import ProviderAdapter, strip_code_fences
from orchid_scanner.exceptions import ProviderError


class MockAdapter(ProviderAdapter):
    """
    In-process adapter.

    Without ``responses`` it answers every call with a fixed Phalaenopsis
    profile. With ``responses`` it pops one item per call: strings are
    returned (after fence stripping), exceptions are raised. An exhausted
    script raises ProviderError.
    """

    name = "mock"

    DEFAULT_PROFILE = {
        "species_name": "Phalaenopsis bellina",
        "fit_category": "Good Fit",
        "reason": "Warm-growing species that thrives in your conditions.",
        "already_owned": False,
        "water_freq": 7,
        "light_requirement": "Medium",
        "temp_range": "18-30C",
        "placement_suggestion": "Living Room Window",
        "conservation_status": "CITES II",
        "native_region": "Borneo and Peninsular Malaysia",
        "native_latitude": 4.5,
        "native_longitude": 114.7,
        "temp_min": 15.0,
        "temp_max": 35.0,
        "humidity_min": 60.0,
        "humidity_max": 85.0,
    }

    def __init__(
        self,
        model_id: str = "mock:default",
        responses: Optional[List[Union[str, BaseException]]] = None,
        **kwargs,
    ):
        super().__init__(model_id, **kwargs)
        self.name = kwargs.get("name", self.name)
        self.scripted = responses is not None
        self.responses = list(responses or [])
        self.calls: List[Tuple[str, str]] = []

    async def call_vision(self, prompt: str, image_b64: str) -> str:
        self.calls.append(("vision", prompt))
        return self._next()

    async def call_text(self, prompt: str) -> str:
        self.calls.append(("text", prompt))
        return self._next()

    def _next(self) -> str:
        if not self.scripted:
            return json.dumps(self.DEFAULT_PROFILE)
        if not self.responses:
            raise ProviderError(f"{self.name}: no scripted response left", provider=self.name)
        item = self.responses.pop(0)
        if isinstance(item, BaseException):
            raise item
        return strip_code_fences(item)
