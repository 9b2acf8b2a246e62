"""FastAPI main application."""
from typing import Optional
from fastapi import Depends, FastAPI, Header, HTTPException
from orchid_scanner.config import settings
from orchid_scanner.exceptions import (
    ConfigurationError,
    InvalidInputError,
    ParseError,
    ProviderError,
    ScannerError,
)
from orchid_scanner.models.care_profile import CareProfile
from orchid_scanner.models.scan import (
    CareRecapRequest,
    CareRecapResponse,
    ImageScanRequest,
    NameScanRequest,
)
from orchid_scanner.services.pipeline import CareProfilePipeline
from orchid_scanner.services.recap import CareRecapService
from orchid_scanner.utils.logging import configure_logging

configure_logging(settings.log_level)

app = FastAPI(title=settings.app_name, debug=settings.debug)

# Initialize services
pipeline = CareProfilePipeline(settings)
recap_service = CareRecapService(pipeline.chain, pipeline.prompt_builder)


def get_pipeline() -> CareProfilePipeline:
    return pipeline


def get_recap_service() -> CareRecapService:
    return recap_service


async def require_auth(x_user_id: Optional[str] = Header(default=None)) -> str:
    """
    Resolve the calling user.

    Session handling lives in front of this service; it forwards the
    authenticated user id in the X-User-Id header.
    """
    if not x_user_id:
        raise HTTPException(status_code=401, detail="Authentication required")
    return x_user_id


def _to_http_error(e: ScannerError) -> HTTPException:
    if isinstance(e, InvalidInputError):
        return HTTPException(status_code=400, detail=str(e))
    if isinstance(e, ConfigurationError):
        return HTTPException(status_code=503, detail=str(e))
    if isinstance(e, (ProviderError, ParseError)):
        return HTTPException(status_code=502, detail=str(e))
    return HTTPException(status_code=500, detail=str(e))


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": settings.app_name, "version": "1.0.0"}


@app.post("/scan/image", response_model=CareProfile)
async def scan_image(
    request: ImageScanRequest,
    user_id: str = Depends(require_auth),
    scanner: CareProfilePipeline = Depends(get_pipeline),
):
    """Identify an orchid from a photo and evaluate it against the grower's zones."""
    try:
        return await scanner.identify_by_image(
            request.image_base64,
            request.existing_species,
            request.climate_summary,
            request.zone_names,
        )
    except ScannerError as e:
        raise _to_http_error(e) from e


@app.post("/scan/name", response_model=CareProfile)
async def scan_name(
    request: NameScanRequest,
    user_id: str = Depends(require_auth),
    scanner: CareProfilePipeline = Depends(get_pipeline),
):
    """Build a care profile from a species name."""
    try:
        return await scanner.identify_by_name(
            request.species_name,
            request.existing_species,
            request.climate_summary,
            request.zone_names,
        )
    except ScannerError as e:
        raise _to_http_error(e) from e


@app.post("/care/recap", response_model=CareRecapResponse)
async def care_recap(
    request: CareRecapRequest,
    user_id: str = Depends(require_auth),
    service: CareRecapService = Depends(get_recap_service),
):
    """Explain which care actions likely led to an event."""
    text = await service.generate(request.species, request.event_type, request.entries)
    return CareRecapResponse(text=text)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
