"""Used-by extractor: which pet families know a given ability.

The spell page configures a Listview widget with the pet list inline:

    new Listview({template: 'pet', id: 'used-by-pet', name: LANG.tab_usedby,
                  tabs: tabsRelated, parent: 'lkljbjkb574',
                  data: [{"armor":5,"damage":5,"diet":17,"icon":"ability_hunter_pet_netherray",
                          "id":34,"name":"Nether Ray","type":2}, ...]});

Many spell pages have no such widget, or one with `data: []`; neither is an
error. The match never leaves the `new Listview({...});` literal that names
`used-by-pet`, so a later widget's data (used-by-npc, ...) is not picked up.
"""

from __future__ import annotations

import json
import re
from typing import Dict, Mapping

from pydantic import ValidationError

from hunter_data.core.errors import ExtractionError
from hunter_data.core.models import EntityId, Pet

# (?:(?!\}\);).)*? stays inside a single widget literal
_IN_WIDGET = r"(?:(?!\}\);).)*?"
USED_BY_PET_LISTVIEW = re.compile(
    rf"new\s*Listview\(\{{{_IN_WIDGET}'used-by-pet'{_IN_WIDGET}"
    rf"data:\s*(\[{_IN_WIDGET}\])\s*\}}\);",
    re.DOTALL,
)


def parse_used_by_pets(
    pets: Mapping[EntityId, Pet], body: str, ability_id: EntityId | str | int
) -> Dict[EntityId, Pet]:
    """Return a copy of `pets` with `ability_id` appended to every listed pet.

    Pets seen for the first time are created from the listview JSON. The
    input mapping and the `Pet` objects in it are never mutated.
    """
    result: Dict[EntityId, Pet] = dict(pets)
    m = USED_BY_PET_LISTVIEW.search(body)
    if m is None:
        return result

    ability_id = EntityId(ability_id)
    try:
        entries = json.loads(m.group(1))
    except json.JSONDecodeError as exc:
        raise ExtractionError(
            f"invalid used-by-pet JSON: {exc}", source=f"ability {ability_id}"
        ) from exc

    for entry in entries:
        try:
            pet_id = EntityId(entry["id"])
            known = result.get(pet_id)
            if known is None:
                fields = {k: v for k, v in entry.items() if k != "spells"}
                result[pet_id] = Pet.model_validate({**fields, "spells": [ability_id]})
            else:
                result[pet_id] = known.model_copy(
                    update={"spells": [*known.spells, ability_id]}
                )
        except (KeyError, TypeError, ValueError, ValidationError) as exc:
            raise ExtractionError(
                f"invalid used-by-pet entry {entry!r}", source=f"ability {ability_id}"
            ) from exc
    return result
