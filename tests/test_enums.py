"""Tests for melee_actions.enums."""

from melee_actions.enums import (
    COSTUME_NAMES,
    LEGAL_STAGES,
    STAGE_NAMES,
    START_CHARACTER_NAMES,
    character_name,
    costume_name,
    frame_character_name,
    stage_name,
)


def test_character_id_systems_differ():
    assert character_name(0) == "Captain Falcon"
    assert frame_character_name(0) == "Mario"
    assert frame_character_name(11) == "Nana"
    assert character_name(99) == "Unknown (99)"
    assert frame_character_name(99) == "Unknown (99)"


def test_stage_names():
    assert stage_name(31) == "Battlefield"
    assert stage_name(21) == "Unknown (21)"
    assert LEGAL_STAGES <= set(STAGE_NAMES)


def test_costumes():
    assert set(COSTUME_NAMES) == set(START_CHARACTER_NAMES.values())
    assert costume_name(2, 1) == "Red"            # Fox
    assert costume_name(19, 4) == "White"         # Sheik uses Zelda's costumes
    assert costume_name(14, 2) == "Orange"        # Ice Climbers
    assert costume_name(2, 9) == "Unknown (9)"
    assert costume_name(99, 0) == "Unknown (0)"
    assert all(c[0] == "Neutral" for c in COSTUME_NAMES.values())
