"""Abstract page scraper (plugin) interface used by the assembler.

Everything that depends on one site's markup lives behind this interface, so
a markup change on the source site means touching one plugin only.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Mapping

from hunter_data.core.models import AbilitySummary, EntityId, Pet, Spell


class PageScraper(ABC):
    """Minimal plugin interface for site-specific scrapers."""

    def __init__(self, spell_url_prefix: str):
        self.spell_url_prefix = spell_url_prefix

    def spell_url(self, ability_id: EntityId) -> str:
        return f"{self.spell_url_prefix}{ability_id}"

    @abstractmethod
    def parse_ability_list(self, body: str) -> Dict[EntityId, AbilitySummary]:
        raise NotImplementedError()

    @abstractmethod
    def parse_ability_details(self, body: str) -> Spell:
        raise NotImplementedError()

    @abstractmethod
    def parse_used_by_pets(
        self, pets: Mapping[EntityId, Pet], body: str, ability_id: EntityId
    ) -> Dict[EntityId, Pet]:
        raise NotImplementedError()
