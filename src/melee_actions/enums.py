"""Melee character, stage and costume ID mappings.

Two character ID systems exist in .slp files:
- Game-start IDs: used in the game start event (start.players[i].character)
- Per-frame IDs: used in per-frame post data (post.character)

Use character_name() for game-start IDs, frame_character_name() for
per-frame IDs. Jump thresholds in melee_actions.segment are keyed by
per-frame IDs, since that is what each Frame carries.
"""

# Game-start character IDs
START_CHARACTER_NAMES = {
    0: "Captain Falcon",
    1: "Donkey Kong",
    2: "Fox",
    3: "Mr. Game & Watch",
    4: "Kirby",
    5: "Bowser",
    6: "Link",
    7: "Luigi",
    8: "Mario",
    9: "Marth",
    10: "Mewtwo",
    11: "Ness",
    12: "Peach",
    13: "Pikachu",
    14: "Ice Climbers",
    15: "Jigglypuff",
    16: "Samus",
    17: "Yoshi",
    18: "Zelda",
    19: "Sheik",
    20: "Falco",
    21: "Young Link",
    22: "Dr. Mario",
    23: "Roy",
    24: "Pichu",
    25: "Ganondorf",
}

# Per-frame character IDs (Popo and Nana are separate characters here)
FRAME_CHARACTER_NAMES = {
    0: "Mario",
    1: "Fox",
    2: "Captain Falcon",
    3: "Donkey Kong",
    4: "Kirby",
    5: "Bowser",
    6: "Link",
    7: "Sheik",
    8: "Ness",
    9: "Peach",
    10: "Popo",
    11: "Nana",
    12: "Pikachu",
    13: "Samus",
    14: "Yoshi",
    15: "Jigglypuff",
    16: "Mewtwo",
    17: "Luigi",
    18: "Marth",
    19: "Zelda",
    20: "Young Link",
    21: "Dr. Mario",
    22: "Falco",
    23: "Pichu",
    24: "Mr. Game & Watch",
    25: "Ganondorf",
    26: "Roy",
}

STAGE_NAMES = {
    2: "Fountain of Dreams",
    3: "Pokemon Stadium",
    4: "Princess Peach's Castle",
    5: "Kongo Jungle",
    6: "Brinstar",
    7: "Corneria",
    8: "Yoshi's Story",
    9: "Onett",
    10: "Mute City",
    11: "Rainbow Cruise",
    12: "Jungle Japes",
    13: "Great Bay",
    14: "Hyrule Temple",
    15: "Brinstar Depths",
    16: "Yoshi's Island",
    17: "Green Greens",
    18: "Fourside",
    19: "Mushroom Kingdom I",
    20: "Mushroom Kingdom II",
    22: "Venom",
    23: "Poke Floats",
    24: "Big Blue",
    25: "Icicle Mountain",
    26: "Icetop",
    27: "Flat Zone",
    28: "Dream Land N64",
    29: "Yoshi's Island N64",
    30: "Kongo Jungle N64",
    31: "Battlefield",
    32: "Final Destination",
}

# Competitive stage list
LEGAL_STAGES = {2, 3, 8, 28, 31, 32}

# Costume index -> colour, keyed by game-start character name.
# Sheik shares Zelda's costumes.
_ZELDA_COSTUMES = ("Neutral", "Red", "Blue", "Green", "White")

COSTUME_NAMES: dict[str, tuple[str, ...]] = {
    "Captain Falcon": ("Neutral", "Black", "Red", "White", "Green", "Blue"),
    "Donkey Kong": ("Neutral", "Black", "Red", "Blue", "Green"),
    "Fox": ("Neutral", "Red", "Blue", "Green"),
    "Mr. Game & Watch": ("Neutral", "Red", "Blue", "Green"),
    "Kirby": ("Neutral", "Yellow", "Blue", "Red", "Green", "White"),
    "Bowser": ("Neutral", "Red", "Blue", "Black"),
    "Link": ("Neutral", "Red", "Blue", "Black", "White"),
    "Luigi": ("Neutral", "White", "Blue", "Red"),
    "Mario": ("Neutral", "Yellow", "Black", "Blue", "Green"),
    "Marth": ("Neutral", "Red", "Green", "Black", "White"),
    "Mewtwo": ("Neutral", "Red", "Blue", "Green"),
    "Ness": ("Neutral", "Yellow", "Blue", "Green"),
    "Peach": ("Neutral", "Daisy", "White", "Blue", "Green"),
    "Pikachu": ("Neutral", "Red", "Party Hat", "Cowboy Hat"),
    "Ice Climbers": ("Neutral", "Green", "Orange", "Red"),
    "Jigglypuff": ("Neutral", "Red", "Blue", "Headband", "Crown"),
    "Samus": ("Neutral", "Pink", "Black", "Green", "Purple"),
    "Yoshi": ("Neutral", "Red", "Blue", "Yellow", "Pink", "Cyan"),
    "Zelda": _ZELDA_COSTUMES,
    "Sheik": _ZELDA_COSTUMES,
    "Falco": ("Neutral", "Red", "Blue", "Green"),
    "Young Link": ("Neutral", "Red", "Blue", "White", "Black"),
    "Dr. Mario": ("Neutral", "Red", "Blue", "Green", "Black"),
    "Roy": ("Neutral", "Red", "Blue", "Green", "Yellow"),
    "Pichu": ("Neutral", "Red", "Blue", "Green"),
    "Ganondorf": ("Neutral", "Red", "Blue", "Green", "Purple"),
}


def character_name(char_id: int) -> str:
    """Resolve a game-start character ID to a name."""
    return START_CHARACTER_NAMES.get(char_id, f"Unknown ({char_id})")


def frame_character_name(char_id: int) -> str:
    """Resolve a per-frame character ID to a name."""
    return FRAME_CHARACTER_NAMES.get(char_id, f"Unknown ({char_id})")


def stage_name(stage_id: int) -> str:
    return STAGE_NAMES.get(stage_id, f"Unknown ({stage_id})")


def costume_name(char_id: int, costume: int) -> str:
    """Resolve a costume index for a game-start character ID."""
    costumes = COSTUME_NAMES.get(character_name(char_id), ())
    if 0 <= costume < len(costumes):
        return costumes[costume]
    return f"Unknown ({costume})"
