from .care_profile import (
    CareProfile,
    FitCategory,
    LightRequirement,
    SEASONAL_FIELDS,
    REFINABLE_FIELDS,
)
from .scan import (
    ImageScanRequest,
    NameScanRequest,
    CareLogEntry,
    CareRecapRequest,
    CareRecapResponse,
    BatchItemResult,
)

__all__ = [
    "CareProfile",
    "FitCategory",
    "LightRequirement",
    "SEASONAL_FIELDS",
    "REFINABLE_FIELDS",
    "ImageScanRequest",
    "NameScanRequest",
    "CareLogEntry",
    "CareRecapRequest",
    "CareRecapResponse",
    "BatchItemResult",
]
