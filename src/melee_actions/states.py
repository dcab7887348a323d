"""Closed state catalogues used to classify per-frame action states.

A raw action state id (0-340) belongs to exactly one BroadState. A subset
of raw states are ActionableStates: frames on which a new action may begin.
"""

from enum import Enum


class BroadState(Enum):
    """Coarse behavioral category of a raw action state."""

    ATTACK = "attack"
    AIR = "air"
    AIRDODGE = "airdodge"
    SPECIAL_LANDING = "special_landing"  # from airdodge or special fall
    GROUND = "ground"
    WALK = "walk"
    DASH_RUN = "dash_run"
    SHIELD = "shield"
    LEDGE = "ledge"
    LEDGE_ACTION = "ledge_action"
    HITSTUN = "hitstun"
    GENERIC_INACTIONABLE = "generic_inactionable"
    JUMP_SQUAT = "jump_squat"
    AIR_JUMP = "air_jump"
    CROUCH = "crouch"
    GRAB = "grab"
    ROLL = "roll"
    SPOTDODGE = "spotdodge"


class ActionableState(Enum):
    AIR = "air"
    GROUND = "ground"
    DASH = "dash"
    RUN = "run"
    SHIELD = "shield"
    LEDGE = "ledge"

    def __str__(self) -> str:
        return _ACTIONABLE_LABELS[self]


_ACTIONABLE_LABELS = {
    ActionableState.AIR: "Airborne",
    ActionableState.GROUND: "Grounded",
    ActionableState.DASH: "Dashing",
    ActionableState.RUN: "Running",
    ActionableState.SHIELD: "Shielding",
    ActionableState.LEDGE: "On ledge",
}


class LedgeAction(Enum):
    """Ledge recovery option. Quick and slow variants share one member."""

    GETUP = "getup"
    ATTACK = "attack"
    ROLL = "roll"
    JUMP = "jump"


class GroundAttack(Enum):
    UTILT = "utilt"
    FTILT = "ftilt"
    DTILT = "dtilt"
    JAB = "jab"
    USMASH = "usmash"
    DSMASH = "dsmash"
    FSMASH = "fsmash"
    DASH_ATTACK = "dash_attack"

    def __str__(self) -> str:
        if self is GroundAttack.DASH_ATTACK:
            return "Dash attack"
        return self.value.capitalize()


class AirAttack(Enum):
    NAIR = "nair"
    UAIR = "uair"
    FAIR = "fair"
    BAIR = "bair"
    DAIR = "dair"

    def __str__(self) -> str:
        return self.value.capitalize()


# An attack_type() result: which specific move a raw attack state belongs to.
AttackType = GroundAttack | AirAttack


class Direction(Enum):
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def from_facing(cls, facing: float) -> "Direction":
        """Convert Slippi's facing value (1.0 = right, -1.0 = left)."""
        return cls.LEFT if facing < 0 else cls.RIGHT
