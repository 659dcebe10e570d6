"""Ability list extractor for the hunter-pet-abilities listing page.

Wowhead ships the listing data to the browser as JSON assignments, so no HTML
parsing is needed. The page source holds fragments like:

    _[160011]={"name_enus":"Agile Reflexes","rank_enus":"Special Ability",
               "icon":"inv_misc_foxkit","screenshot":0};
"""

from __future__ import annotations

import json
import re
from typing import Dict

from pydantic import ValidationError

from hunter_data.core.errors import ExtractionError
from hunter_data.core.models import AbilitySummary, EntityId

ABILITY_ASSIGNMENT = re.compile(r"_\[(\d+)\]=(\{.*?\});", re.DOTALL)


def parse_ability_list(body: str) -> Dict[EntityId, AbilitySummary]:
    """Map every `_[<id>]={...};` fragment in `body` to an `AbilitySummary`.

    A fragment that does not decode aborts the whole extraction.
    """
    abilities: Dict[EntityId, AbilitySummary] = {}
    for raw_id, json_string in ABILITY_ASSIGNMENT.findall(body):
        ability_id = EntityId(raw_id)
        try:
            raw = json.loads(json_string)
            abilities[ability_id] = AbilitySummary.model_validate(
                {**raw, "id": ability_id}
            )
        except (json.JSONDecodeError, ValidationError, TypeError) as exc:
            raise ExtractionError(
                f"invalid ability summary JSON: {exc}", source=f"ability {ability_id}"
            ) from exc
    return abilities
