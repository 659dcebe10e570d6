"""Drives the fetch/parse loop and assembles `HunterData`.

Sequential on purpose: one listing fetch after the other, then one detail
fetch per ability. Network fetches of detail pages are paced by the
downloader; cache hits are not.
"""

from __future__ import annotations

from typing import Dict, Iterable

from prefect.logging import get_logger

from hunter_data.core.errors import ExtractionError
from hunter_data.core.models import AbilitySummary, EntityId, HunterData, Pet, Spell
from hunter_data.core.scraping.downloader import CachedDownloader
from hunter_data.scrapers.base_scraper import PageScraper

logger = get_logger(__name__)

SUMMARY_FIELDS = ("icon", "name", "rank", "screenshot")


class HunterDataAssembler:
    def __init__(
        self,
        downloader: CachedDownloader,
        scraper: PageScraper,
        skip_missing_details: bool = False,
    ):
        self.downloader = downloader
        self.scraper = scraper
        self.skip_missing_details = skip_missing_details

    @staticmethod
    def _decode(data: bytes) -> str:
        return data.decode("utf-8", errors="replace")

    def collect_summaries(
        self, listing_urls: Iterable[str]
    ) -> Dict[EntityId, AbilitySummary]:
        """Fetch and parse every listing page; later pages win on id collisions."""
        summaries: Dict[EntityId, AbilitySummary] = {}
        for url in listing_urls:
            body = self._decode(self.downloader.fetch(url))
            page = self.scraper.parse_ability_list(body)
            logger.info("Parsed %d abilities from %s", len(page), url)
            summaries.update(page)
        return summaries

    def _spell_record(self, ability_id: EntityId, body: str, summary: AbilitySummary):
        try:
            record = self.scraper.parse_ability_details(body)
        except ExtractionError as exc:
            if not self.skip_missing_details:
                raise ExtractionError(str(exc), source=f"ability {ability_id}") from exc
            logger.warning("Skipping ability %s: %s", ability_id, exc)
            return None
        for field in SUMMARY_FIELDS:
            record[field] = getattr(summary, field)
        return record

    def collect_spells(
        self,
        summaries: Dict[EntityId, AbilitySummary],
        pets: Dict[EntityId, Pet] | None = None,
    ) -> tuple[Dict[EntityId, Spell], Dict[EntityId, Pet]]:
        """Fetch every detail page and fold it into (spells, pets)."""
        spells: Dict[EntityId, Spell] = {}
        pets = dict(pets or {})
        for ability_id, summary in summaries.items():
            url = self.scraper.spell_url(ability_id)
            body = self._decode(self.downloader.fetch(url, paced=True))
            record = self._spell_record(ability_id, body, summary)
            if record is not None:
                spells[ability_id] = record
            pets = self.scraper.parse_used_by_pets(pets, body, ability_id)
        return spells, pets

    def build(self, listing_urls: Iterable[str]) -> HunterData:
        summaries = self.collect_summaries(listing_urls)
        spells, pets = self.collect_spells(summaries)
        logger.info(
            "Assembled %d spells and %d pets (cache hits=%d, downloads=%d)",
            len(spells),
            len(pets),
            self.downloader.cache_hits,
            self.downloader.network_fetches,
        )
        return HunterData(pets=pets, spells=spells)
