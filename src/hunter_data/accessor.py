"""Read-only lookups over an assembled HunterData table.

Python counterpart of the addon-side accessor. The JSON artifact is loaded
as a callable that returns the table, mirroring the Lua artifact's
`getHunterDataTable()`.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional

from hunter_data.core.models import EntityId

# Call Pet 1..5 spell ids and the stable slot each one summons
CALL_PET_SPELLS = {
    "883": 1,
    "83242": 2,
    "83243": 3,
    "83244": 4,
    "83245": 5,
}


def load_hunter_data_table(path: str | Path) -> Callable[[], Dict[str, Any]]:
    """Load a JSON artifact and return a function producing the table."""
    table = json.loads(Path(path).read_text(encoding="utf-8"))
    if "Pets" not in table or "Spells" not in table:
        raise ValueError(f"{path} is not a hunter data artifact")

    def get_hunter_data_table() -> Dict[str, Any]:
        return table

    return get_hunter_data_table


class HunterDataAccessor:
    def __init__(self, table: Dict[str, Any]):
        self._data = table
        self._pets: Dict[str, Any] = table.get("Pets", {})
        self._spells: Dict[str, Any] = table.get("Spells", {})

    @classmethod
    def from_file(cls, path: str | Path) -> "HunterDataAccessor":
        return cls(load_hunter_data_table(path)())

    def get_pet_id_by_family_name(self, family_name: str) -> Optional[str]:
        """Pet family id for a family name such as "Raptor", or None."""
        for pet_id, pet in self._pets.items():
            if pet.get("name") == family_name:
                return pet_id
        return None

    def get_pet_spells_by_pet_id(self, pet_id: str | int) -> Optional[List[str]]:
        try:
            pet = self._pets.get(EntityId(pet_id))
        except ValueError:
            return None
        if pet is None:
            return None
        return pet.get("spells")

    def get_pet_spell_attribute_by_spell_ids(
        self, spell_ids: Iterable[str | int], key: str
    ) -> List[Any]:
        """Value of `key` for each known spell; unknown ids and keys are skipped."""
        attributes = []
        for spell_id in spell_ids:
            try:
                spell = self._spells.get(EntityId(spell_id))
            except ValueError:
                continue
            if spell is not None and key in spell:
                attributes.append(spell[key])
        return attributes

    def get_call_pet_spells(self) -> Dict[str, int]:
        return dict(CALL_PET_SPELLS)

    def get_hunter_pet_data(self) -> Dict[str, Any]:
        # Prefer adding a specific accessor over handing out the whole table.
        return self._data
