"""Data model for the assembled hunter pet data.

Ids arrive from Wowhead as JSON numbers but are used as mapping keys
everywhere, so they are normalized once into `EntityId` when the raw JSON
is read. After that point every comparison is string-on-string.
"""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic_core import core_schema


class EntityId(str):
    """Opaque identifier for abilities and pets.

    `EntityId(34) == EntityId("34") == "34"`; hashing follows the string.
    """

    __slots__ = ()

    def __new__(cls, value: Any) -> "EntityId":
        if isinstance(value, EntityId):
            return value
        if isinstance(value, bool):
            raise ValueError(f"invalid identifier: {value!r}")
        if isinstance(value, int):
            return super().__new__(cls, str(value))
        if isinstance(value, float) and value.is_integer():
            return super().__new__(cls, str(int(value)))
        if isinstance(value, str) and value.strip():
            return super().__new__(cls, value.strip())
        raise ValueError(f"invalid identifier: {value!r}")

    def __repr__(self) -> str:
        return f"EntityId({str(self)!r})"

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type, handler):
        return core_schema.no_info_plain_validator_function(
            cls, serialization=core_schema.to_string_ser_schema()
        )


# A spell is a loose record: detail-table fields plus the summary fields.
Spell = Dict[str, Any]


class AbilitySummary(BaseModel):
    """One entry of the hunter-pet-abilities listing page.

    Source shape:
    {"name_enus":"Agile Reflexes","rank_enus":"Special Ability",
     "icon":"inv_misc_foxkit","screenshot":0}
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: EntityId
    name: str = Field(default="", alias="name_enus")
    rank: str = Field(default="", alias="rank_enus")
    icon: str = ""
    screenshot: int = 0


class Pet(BaseModel):
    """A pet family. Every attribute of the used-by JSON is kept."""

    model_config = ConfigDict(extra="allow")

    id: EntityId
    name: str = ""
    icon: str = ""
    spells: List[EntityId] = Field(default_factory=list)


class HunterData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    pets: Dict[EntityId, Pet] = Field(default_factory=dict, alias="Pets")
    spells: Dict[EntityId, Spell] = Field(default_factory=dict, alias="Spells")

    def to_table(self) -> Dict[str, Any]:
        """Plain `{"Pets": ..., "Spells": ...}` structure, ready to serialize."""
        return self.model_dump(by_alias=True, mode="json")
