"""Care-profile inference pipeline: the two public identification entry points."""
import logging
from typing import List, Optional
from orchid_scanner.adapters.factory import get_configured_providers
from orchid_scanner.config import Settings, settings as default_settings
from orchid_scanner.exceptions import InvalidInputError
from orchid_scanner.models.care_profile import CareProfile
from orchid_scanner.services.fallback import ProviderChain
from orchid_scanner.services.nursery import NurseryScraper
from orchid_scanner.services.parser import parse_profile
from orchid_scanner.services.prompts import PromptBuilder
from orchid_scanner.services.refinement import RefinementService

logger = logging.getLogger(__name__)


class CareProfilePipeline:
    """
    Orchestrates scrape, prompt, AI call, parse and refinement.

    Callers are expected to be authenticated already. Each call is independent;
    the instance only holds configuration and collaborators.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        chain: Optional[ProviderChain] = None,
        scraper: Optional[NurseryScraper] = None,
        prompt_builder: Optional[PromptBuilder] = None,
    ):
        self.settings = settings or default_settings
        self.chain = chain if chain is not None else ProviderChain(get_configured_providers(self.settings))
        self.scraper = scraper or NurseryScraper(
            base_url=self.settings.nursery_base_url,
            timeout=self.settings.scrape_timeout_seconds,
        )
        self.prompt_builder = prompt_builder or PromptBuilder()
        self.refinement = RefinementService(self.chain, self.prompt_builder)

    async def identify_by_image(
        self,
        image_b64: str,
        existing_species: Optional[List[str]] = None,
        climate_summary: str = "",
        zone_names: Optional[List[str]] = None,
    ) -> CareProfile:
        """
        Identify a species from a photo.

        Flow: size check -> vision call -> parse -> nursery scrape by the
        parsed name -> refinement when a snippet was found.

        Raises:
            InvalidInputError: Payload larger than max_image_b64_bytes
            ConfigurationError: No provider configured
            ProviderError: Every provider failed
            ParseError: Provider text does not match the schema
        """
        limit = self.settings.max_image_b64_bytes
        if len(image_b64) > limit:
            raise InvalidInputError(f"Image too large (max {limit // (1024 * 1024)}MB)")

        prompt = self.prompt_builder.build_image_prompt(
            existing_species or [],
            climate_summary,
            zone_names or [],
        )
        raw = await self.chain.call_vision(prompt, image_b64)
        profile = parse_profile(raw)
        logger.info("Identified %s from image", profile.species_name)

        snippet = await self.scraper.fetch_care_snippet(profile.species_name)
        if snippet is None:
            return profile
        return await self.refinement.refine(profile, snippet)

    async def identify_by_name(
        self,
        species_name: str,
        existing_species: Optional[List[str]] = None,
        climate_summary: str = "",
        zone_names: Optional[List[str]] = None,
    ) -> CareProfile:
        """
        Build a profile from a species name.

        Nursery data is scraped first and embedded in the prompt, so there is
        no separate refinement pass on this path.
        """
        species_name = species_name.strip()
        if not species_name:
            raise InvalidInputError("Species name is required")
        self.chain.require_configured()

        snippet = await self.scraper.fetch_care_snippet(species_name)
        if snippet:
            logger.info("Nursery data found for %s", species_name)

        prompt = self.prompt_builder.build_name_prompt(
            species_name,
            existing_species or [],
            climate_summary,
            zone_names or [],
            nursery_snippet=snippet,
        )
        raw = await self.chain.call_text(prompt)
        profile = parse_profile(raw)
        logger.info("Built profile for %s", profile.species_name)
        return profile
