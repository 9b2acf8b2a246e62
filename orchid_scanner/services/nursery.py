"""
Nursery care-sheet scraper.

Looks a species up on the nursery's search page, follows the first product
link, and mines the culture table plus the growing-notes block. Markers and
look-ahead windows below are fixed behavior matched to the nursery's page
layout; swapping in a tree parser only needs to keep ``fetch_care_snippet``.
Every failure resolves to None: this is optional enrichment.
"""

import logging
from typing import Optional

import httpx

from orchid_scanner.config import settings
from orchid_scanner.exceptions import ScrapeError
from orchid_scanner.utils.html import strip_tags

logger = logging.getLogger(__name__)

# Newline-joined "Label: value" lines plus a "Growing Notes: ..." line
NurseryCareSnippet = str

SEARCH_PATH = "/searchresults.asp"
DETAIL_PATH = "/pictureframe.asp"
PRODUCT_LINK_MARKER = "pictureframe.asp?picid="

CARE_LABELS = (
    "Temperature",
    "Light Requirements",
    "Water Care",
    "Blooming Season",
    "Indigenous to",
)
LABEL_CELL_MARKER = 'class="culturelabel"'
FIELD_LOOKAHEAD = 500

NOTES_CONTAINER_MARKER = 'id="culturenotes"'
NOTES_ITEM_OPEN = "<li"
NOTES_ITEM_CLOSE = "</li>"
NOTES_LOOKAHEAD = 2000


def extract_product_id(html: str) -> Optional[str]:
    """Digits immediately after the first product-link marker, or None."""
    start = html.find(PRODUCT_LINK_MARKER)
    if start == -1:
        return None
    pos = start + len(PRODUCT_LINK_MARKER)
    end = pos
    while end < len(html) and html[end] in "0123456789":
        end += 1
    return html[pos:end] or None


def extract_labeled_field(html: str, label: str) -> Optional[str]:
    """
    Text of the value cell following ``"<label>:"``.

    Starts at the first tag after the anchor and stops at the next label cell
    or after FIELD_LOOKAHEAD characters, whichever comes first.
    """
    anchor = html.find(f"{label}:")
    if anchor == -1:
        return None
    tag_start = html.find("<", anchor)
    if tag_start == -1:
        return None
    window = html[tag_start:tag_start + FIELD_LOOKAHEAD]
    stop = window.find(LABEL_CELL_MARKER)
    if stop != -1:
        window = window[:stop]
    text = strip_tags(window).strip()
    return text or None


def extract_growing_notes(html: str) -> Optional[str]:
    """Text of the first list item inside the growing-notes container."""
    container = html.find(NOTES_CONTAINER_MARKER)
    if container == -1:
        return None
    item = html.find(NOTES_ITEM_OPEN, container)
    if item == -1:
        return None
    window = html[item:item + NOTES_LOOKAHEAD]
    stop = window.find(NOTES_ITEM_CLOSE)
    if stop != -1:
        window = window[:stop]
    text = strip_tags(window).strip()
    return text or None


def build_snippet(detail_html: str) -> Optional[NurseryCareSnippet]:
    """Assemble the snippet from a product-detail page, or None if nothing was found."""
    lines = []
    for label in CARE_LABELS:
        value = extract_labeled_field(detail_html, label)
        if value:
            lines.append(f"{label}: {value}")
    notes = extract_growing_notes(detail_html)
    if notes:
        lines.append(f"Growing Notes: {notes}")
    if not lines:
        return None
    return "\n".join(lines)


class NurseryScraper:
    """Fetches a care snippet for a species from the nursery site."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            base_url: Nursery site root; defaults to settings.nursery_base_url
            timeout: Per-request timeout in seconds; defaults to settings.scrape_timeout_seconds
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.base_url = (base_url or settings.nursery_base_url).rstrip("/")
        self.timeout = timeout or settings.scrape_timeout_seconds
        self.transport = transport

    async def fetch_care_snippet(self, species_name: str) -> Optional[NurseryCareSnippet]:
        """
        Return the nursery snippet for ``species_name`` or None.

        Needs at least genus and epithet; a single token returns None without
        touching the network.
        """
        tokens = species_name.split()
        if len(tokens) < 2:
            return None
        genus, epithet = tokens[0], tokens[1]

        try:
            return await self._scrape(genus, epithet)
        except ScrapeError as e:
            logger.debug("Nursery lookup for %s %s found nothing: %s", genus, epithet, e)
            return None

    async def _scrape(self, genus: str, epithet: str) -> NurseryCareSnippet:
        async with httpx.AsyncClient(
            timeout=self.timeout,
            transport=self.transport,
            follow_redirects=True,
        ) as client:
            search_html = await self._get(
                client,
                f"{self.base_url}{SEARCH_PATH}",
                {"genus": genus, "species": epithet},
            )
            product_id = extract_product_id(search_html)
            if product_id is None:
                raise ScrapeError("no product link in search results")

            detail_html = await self._get(
                client,
                f"{self.base_url}{DETAIL_PATH}",
                {"picid": product_id},
            )

        snippet = build_snippet(detail_html)
        if snippet is None:
            raise ScrapeError(f"product {product_id} has no care data")
        return snippet

    async def _get(self, client: httpx.AsyncClient, url: str, params: dict) -> str:
        try:
            r = await client.get(url, params=params)
            r.raise_for_status()
            return r.text
        except httpx.HTTPError as e:
            raise ScrapeError(f"GET {url} failed: {e}") from e
