"""Sequential bulk reprocessing of species names."""
import asyncio
import logging
from typing import List, Optional
from orchid_scanner.exceptions import ScannerError
from orchid_scanner.models.scan import BatchItemResult
from orchid_scanner.services.pipeline import CareProfilePipeline

logger = logging.getLogger(__name__)


class BatchReprocessor:
    """Drives identify_by_name over many species, pausing between batches."""

    def __init__(
        self,
        pipeline: CareProfilePipeline,
        batch_size: Optional[int] = None,
        delay_seconds: Optional[float] = None,
    ):
        self.pipeline = pipeline
        self.batch_size = max(1, batch_size or pipeline.settings.batch_size)
        self.delay_seconds = pipeline.settings.batch_delay_seconds if delay_seconds is None else delay_seconds

    async def run(
        self,
        species_names: List[str],
        climate_summary: str = "",
        zone_names: Optional[List[str]] = None,
    ) -> List[BatchItemResult]:
        """
        Reprocess every species; one failure never stops the run.

        Returns:
            One BatchItemResult per input name, in input order
        """
        results: List[BatchItemResult] = []
        for start in range(0, len(species_names), self.batch_size):
            if start and self.delay_seconds > 0:
                await asyncio.sleep(self.delay_seconds)
            for name in species_names[start:start + self.batch_size]:
                try:
                    profile = await self.pipeline.identify_by_name(
                        name,
                        existing_species=[],
                        climate_summary=climate_summary,
                        zone_names=zone_names or [],
                    )
                except ScannerError as e:
                    logger.warning("Reprocessing %s failed: %s", name, e)
                    results.append(BatchItemResult(species_name=name, error=str(e)))
                    continue
                results.append(BatchItemResult(species_name=name, profile=profile))

        failed = sum(1 for r in results if r.error)
        logger.info("Batch reprocessing finished: %d ok, %d failed", len(results) - failed, failed)
        return results
