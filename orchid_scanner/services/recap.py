"""Short AI explanation of what care led to an event such as a bloom."""
import logging
from typing import List
from orchid_scanner.exceptions import ScannerError
from orchid_scanner.models.scan import CareLogEntry
from orchid_scanner.services.fallback import ProviderChain
from orchid_scanner.services.prompts import PromptBuilder

logger = logging.getLogger(__name__)

WATERED_EVENT = "Watered"


class CareRecapService:
    """Summarizes recent care history and asks the text path to explain an event."""

    def __init__(self, chain: ProviderChain, prompt_builder: PromptBuilder = None):
        self.chain = chain
        self.prompt_builder = prompt_builder or PromptBuilder()

    @staticmethod
    def summarize(species: str, event_type: str, entries: List[CareLogEntry]) -> dict:
        """Collapse log entries into counts plus the non-watering events."""
        watering_count = 0
        care_events = []
        for entry in entries:
            if entry.event_type == WATERED_EVENT:
                watering_count += 1
            elif entry.event_type:
                care_events.append(f"{entry.event_type}: {entry.note or ''}")
        return {
            "species": species,
            "event_type": event_type,
            "watering_count_6mo": watering_count,
            "care_events": care_events,
            "total_log_entries": len(entries),
        }

    @staticmethod
    def fallback_text(summary: dict) -> str:
        return (
            f"Over the past 6 months: {summary['watering_count_6mo']} waterings, "
            f"{len(summary['care_events'])} care events recorded."
        )

    async def generate(self, species: str, event_type: str, entries: List[CareLogEntry]) -> str:
        """Return the AI recap, or the plain stats sentence if no provider answers."""
        summary = self.summarize(species, event_type, entries)
        prompt = self.prompt_builder.build_care_recap_prompt(species, event_type, summary)
        try:
            text = (await self.chain.call_text(prompt)).strip()
        except ScannerError as e:
            logger.warning("Care recap for %s fell back to stats: %s", species, e)
            return self.fallback_text(summary)
        return text or self.fallback_text(summary)
