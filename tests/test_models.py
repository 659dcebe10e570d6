import pytest

from hunter_data.core.models import AbilitySummary, EntityId, HunterData, Pet


def test_entity_id_normalizes_numbers_and_strings():
    assert EntityId(34) == EntityId("34") == EntityId(" 34 ") == "34"
    assert EntityId(34.0) == "34"
    assert hash(EntityId(34)) == hash("34")
    assert {"34": "ray"}[EntityId(34)] == "ray"


@pytest.mark.parametrize("bad", [True, None, "", "  ", 1.5, [34]])
def test_entity_id_rejects_invalid_values(bad):
    with pytest.raises(ValueError):
        EntityId(bad)


def test_summary_aliases():
    summary = AbilitySummary.model_validate(
        {"id": 160011, "name_enus": "Agile Reflexes", "rank_enus": "Special Ability"}
    )
    assert summary.id == "160011"
    assert isinstance(summary.id, EntityId)
    assert summary.name == "Agile Reflexes"
    assert summary.rank == "Special Ability"


def test_hunter_data_table_uses_top_level_names():
    data = HunterData(pets={34: Pet(id=34, name="Nether Ray")}, spells={})
    assert data.to_table() == {
        "Pets": {"34": {"id": "34", "name": "Nether Ray", "icon": "", "spells": []}},
        "Spells": {},
    }
