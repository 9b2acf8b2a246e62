"""Care profile schema produced by the identification pipeline."""
from enum import Enum
from typing import Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class FitCategory(str, Enum):
    """How well a species suits the grower's conditions."""

    GOOD_FIT = "Good Fit"
    BAD_FIT = "Bad Fit"
    CAUTION_FIT = "Caution Fit"


class LightRequirement(str, Enum):
    """Simplified light vocabulary used to match plants to growing zones."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


def _squash(value: str) -> str:
    return value.replace(" ", "").replace("_", "").replace("-", "").lower()


_FIT_LOOKUP = {_squash(c.value): c for c in FitCategory}
_LIGHT_LOOKUP = {c.value.lower(): c for c in LightRequirement}

SEASONAL_FIELDS = (
    "rest_start_month",
    "rest_end_month",
    "bloom_start_month",
    "bloom_end_month",
    "rest_water_multiplier",
    "rest_fertilizer_multiplier",
    "active_water_multiplier",
    "active_fertilizer_multiplier",
)

REFINABLE_NUMERIC_FIELDS = ("temp_min", "temp_max", "humidity_min", "humidity_max")
REFINABLE_FIELDS = REFINABLE_NUMERIC_FIELDS + ("temp_range",)


class CareProfile(BaseModel):
    """
    Canonical identification result.

    Only the first five fields are required. Optional fields default to None
    when the provider omits them; ``model_fields_set`` tells an omitted field
    apart from an explicit null.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    species_name: str = Field(..., description="Species name, possibly corrected by the model")
    fit_category: FitCategory
    reason: str
    already_owned: bool
    water_freq: int = Field(..., ge=0, description="Days between waterings")

    light_requirement: Optional[LightRequirement] = Field(
        None,
        validation_alias=AliasChoices("light_requirement", "light_req"),
    )
    temp_range: Optional[str] = Field(None, description="Display string, e.g. '18-30C'")
    placement_suggestion: Optional[str] = None
    conservation_status: Optional[str] = Field(None, description="e.g. 'CITES II'; None means unknown/common")

    native_region: Optional[str] = None
    native_latitude: Optional[float] = None
    native_longitude: Optional[float] = None

    # Full survivable tolerance, not the ideal range
    temp_min: Optional[float] = None
    temp_max: Optional[float] = None
    humidity_min: Optional[float] = None
    humidity_max: Optional[float] = None

    rest_start_month: Optional[int] = Field(None, ge=1, le=12)
    rest_end_month: Optional[int] = Field(None, ge=1, le=12)
    bloom_start_month: Optional[int] = Field(None, ge=1, le=12)
    bloom_end_month: Optional[int] = Field(None, ge=1, le=12)
    rest_water_multiplier: Optional[float] = None
    rest_fertilizer_multiplier: Optional[float] = None
    active_water_multiplier: Optional[float] = None
    active_fertilizer_multiplier: Optional[float] = None

    @field_validator("fit_category", mode="before")
    @classmethod
    def _normalize_fit_category(cls, v):
        if isinstance(v, str):
            match = _FIT_LOOKUP.get(_squash(v))
            if match is None:
                raise ValueError(f"Unknown fit category: {v!r}")
            return match
        return v

    @field_validator("light_requirement", mode="before")
    @classmethod
    def _normalize_light(cls, v):
        if not isinstance(v, str):
            return v
        tokens = v.strip().lower().split()
        if len(tokens) == 1 and tokens[0] in _LIGHT_LOOKUP:
            return _LIGHT_LOOKUP[tokens[0]]
        # "High Light", "medium light"
        if len(tokens) == 2 and tokens[1] == "light" and tokens[0] in _LIGHT_LOOKUP:
            return _LIGHT_LOOKUP[tokens[0]]
        raise ValueError(f"Unknown light requirement: {v!r}")

    @property
    def has_seasonal_cycle(self) -> bool:
        return any(getattr(self, name) is not None for name in SEASONAL_FIELDS)
