"""Scraper plugin for `www.wowhead.com` hunter pet pages.

Thin adapter over the extractors; all patterns live in
`hunter_data.extractors`.
"""

from __future__ import annotations

from typing import Dict, Mapping

from hunter_data.core.models import AbilitySummary, EntityId, Pet, Spell
from hunter_data.extractors.ability_details import parse_ability_details
from hunter_data.extractors.ability_list import parse_ability_list
from hunter_data.extractors.used_by import parse_used_by_pets

from .base_scraper import PageScraper


class WowheadScraper(PageScraper):
    DEFAULT_SPELL_URL_PREFIX = "http://www.wowhead.com/spell="

    def __init__(self, spell_url_prefix: str | None = None):
        super().__init__(spell_url_prefix or self.DEFAULT_SPELL_URL_PREFIX)

    def parse_ability_list(self, body: str) -> Dict[EntityId, AbilitySummary]:
        return parse_ability_list(body)

    def parse_ability_details(self, body: str) -> Spell:
        return parse_ability_details(body)

    def parse_used_by_pets(
        self, pets: Mapping[EntityId, Pet], body: str, ability_id: EntityId
    ) -> Dict[EntityId, Pet]:
        return parse_used_by_pets(pets, body, ability_id)
