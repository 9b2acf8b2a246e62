"""Request/response models for the scan endpoints."""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field
from orchid_scanner.models.care_profile import CareProfile


class ImageScanRequest(BaseModel):
    """Identify a species from a base64-encoded photo."""

    image_base64: str = Field(..., description="Base64 JPEG payload")
    existing_species: List[str] = Field(default_factory=list, description="Species already in the collection")
    climate_summary: str = Field(default="", description="Free-text summary of the grower's conditions")
    zone_names: List[str] = Field(default_factory=list, description="Names of configured growing zones")


class NameScanRequest(BaseModel):
    """Build a care profile from a species name."""

    species_name: str = Field(..., description="Genus and epithet, e.g. 'Cattleya walkeriana'")
    existing_species: List[str] = Field(default_factory=list)
    climate_summary: str = Field(default="")
    zone_names: List[str] = Field(default_factory=list)


class CareLogEntry(BaseModel):
    """One care-log row as read from storage."""

    event_type: str = Field(..., description="e.g. 'Watered', 'Repotted', 'Fertilized'")
    note: Optional[str] = None
    timestamp: datetime


class CareRecapRequest(BaseModel):
    """Ask for a short explanation of what led to an event."""

    species: str = Field(default="Unknown")
    event_type: str = Field(..., description="Event being explained, e.g. 'Bloom'")
    entries: List[CareLogEntry] = Field(default_factory=list, description="Care history, oldest first")


class CareRecapResponse(BaseModel):
    text: str


class BatchItemResult(BaseModel):
    """Outcome of reprocessing one species."""

    species_name: str
    profile: Optional[CareProfile] = None
    error: Optional[str] = None
