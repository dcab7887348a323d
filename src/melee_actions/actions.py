"""High-level actions: the semantic catalogue the segmenter produces.

A HighLevelAction is an ActionKind plus, for the attack-carrying kinds, the
specific move. Every value has a fixed compact code (0-63) used for storage;
the table below is the single source of truth for that numbering.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

import pandas as pd

from melee_actions.frames import Vector
from melee_actions.states import ActionableState, AirAttack, BroadState, GroundAttack


class ActionKind(Enum):
    GROUND_ATTACK = "ground_attack"
    AERIAL = "aerial"
    JUMP_AERIAL = "jump_aerial"
    FULLHOP = "fullhop"
    FULLHOP_AERIAL = "fullhop_aerial"
    SHORTHOP = "shorthop"
    SHORTHOP_AERIAL = "shorthop_aerial"
    GRAB = "grab"
    GROUND_WAIT = "ground_wait"
    AIR_WAIT = "air_wait"
    AIR_JUMP = "air_jump"
    AIRDODGE = "airdodge"
    LEDGE_WAIT = "ledge_wait"
    LEDGE_DASH = "ledge_dash"
    LEDGE_ROLL = "ledge_roll"
    LEDGE_JUMP = "ledge_jump"
    LEDGE_HOP = "ledge_hop"
    LEDGE_AERIAL = "ledge_aerial"
    LEDGE_GETUP = "ledge_getup"
    LEDGE_ATTACK = "ledge_attack"
    LEDGE_DROP = "ledge_drop"
    WAVEDASH_RIGHT = "wavedash_right"
    WAVEDASH_DOWN = "wavedash_down"
    WAVEDASH_LEFT = "wavedash_left"
    WAVELAND_RIGHT = "waveland_right"
    WAVELAND_DOWN = "waveland_down"
    WAVELAND_LEFT = "waveland_left"
    DASH_LEFT = "dash_left"
    DASH_RIGHT = "dash_right"
    WALK_LEFT = "walk_left"
    WALK_RIGHT = "walk_right"
    SHIELD = "shield"
    SPOTDODGE = "spotdodge"
    ROLL_FORWARD = "roll_forward"
    ROLL_BACKWARD = "roll_backward"
    CROUCH = "crouch"
    HITSTUN = "hitstun"


# Kinds that carry a specific move, and which family of move they take.
ATTACK_KINDS: dict[ActionKind, type] = {
    ActionKind.GROUND_ATTACK: GroundAttack,
    ActionKind.AERIAL: AirAttack,
    ActionKind.JUMP_AERIAL: AirAttack,
    ActionKind.FULLHOP_AERIAL: AirAttack,
    ActionKind.SHORTHOP_AERIAL: AirAttack,
    ActionKind.LEDGE_AERIAL: AirAttack,
}

_LABELS = {
    ActionKind.FULLHOP: "Fullhop",
    ActionKind.SHORTHOP: "Shorthop",
    ActionKind.GRAB: "Grab",
    ActionKind.GROUND_WAIT: "Wait on ground",
    ActionKind.AIR_WAIT: "Wait in air",
    ActionKind.AIR_JUMP: "Air jump",
    ActionKind.AIRDODGE: "Airdodge",
    ActionKind.LEDGE_WAIT: "Wait on ledge",
    ActionKind.LEDGE_DASH: "Ledgedash",
    ActionKind.LEDGE_ROLL: "Ledge roll",
    ActionKind.LEDGE_JUMP: "Ledge jump",
    ActionKind.LEDGE_HOP: "Ledge hop",
    ActionKind.LEDGE_GETUP: "Ledge getup",
    ActionKind.LEDGE_ATTACK: "Ledge attack",
    ActionKind.LEDGE_DROP: "Drop from ledge",
    ActionKind.WAVEDASH_RIGHT: "Wavedash right",
    ActionKind.WAVEDASH_DOWN: "Wavedash down",
    ActionKind.WAVEDASH_LEFT: "Wavedash left",
    ActionKind.WAVELAND_RIGHT: "Waveland right",
    ActionKind.WAVELAND_DOWN: "Waveland down",
    ActionKind.WAVELAND_LEFT: "Waveland left",
    ActionKind.DASH_LEFT: "Dash left",
    ActionKind.DASH_RIGHT: "Dash right",
    ActionKind.WALK_LEFT: "Walk left",
    ActionKind.WALK_RIGHT: "Walk right",
    ActionKind.SHIELD: "Shield",
    ActionKind.SPOTDODGE: "Spotdodge",
    ActionKind.ROLL_FORWARD: "Roll forward",
    ActionKind.ROLL_BACKWARD: "Roll backward",
    ActionKind.CROUCH: "Crouch",
    ActionKind.HITSTUN: "In hit",
}


@dataclass(frozen=True)
class HighLevelAction:
    """One classified action: a kind, plus the move for attack-carrying kinds."""

    kind: ActionKind
    attack: GroundAttack | AirAttack | None = None

    def __post_init__(self):
        expected = ATTACK_KINDS.get(self.kind)
        if expected is None:
            if self.attack is not None:
                raise ValueError(f"{self.kind.name} does not take an attack, got {self.attack!r}")
        elif not isinstance(self.attack, expected):
            raise ValueError(
                f"{self.kind.name} requires a {expected.__name__}, got {self.attack!r}"
            )

    def __str__(self) -> str:
        if self.attack is not None:
            return str(self.attack)
        return _LABELS[self.kind]

    @property
    def code(self) -> int:
        """Compact storage code (0-63)."""
        return _CODE_BY_ACTION[self]

    @classmethod
    def from_code(cls, code: int) -> "HighLevelAction | None":
        """Inverse of ``code``; None for codes outside the table."""
        return _ACTION_BY_CODE.get(code)


# =============================================================================
# Compact code table
# =============================================================================
# The numbering is a stable storage format. Do not reorder.

_GROUND_ATTACK_ORDER = [
    GroundAttack.UTILT, GroundAttack.FTILT, GroundAttack.DTILT, GroundAttack.JAB,
    GroundAttack.USMASH, GroundAttack.DSMASH, GroundAttack.FSMASH, GroundAttack.DASH_ATTACK,
]
_AIR_ATTACK_ORDER = [AirAttack.NAIR, AirAttack.UAIR, AirAttack.FAIR, AirAttack.BAIR, AirAttack.DAIR]


def _build_code_table() -> list[HighLevelAction]:
    table = [HighLevelAction(ActionKind.GROUND_ATTACK, a) for a in _GROUND_ATTACK_ORDER]  # 0-7
    table += [HighLevelAction(ActionKind.AERIAL, a) for a in _AIR_ATTACK_ORDER]            # 8-12
    table += [HighLevelAction(ActionKind.JUMP_AERIAL, a) for a in _AIR_ATTACK_ORDER]       # 13-17
    table.append(HighLevelAction(ActionKind.FULLHOP))                                      # 18
    table += [HighLevelAction(ActionKind.FULLHOP_AERIAL, a) for a in _AIR_ATTACK_ORDER]    # 19-23
    table.append(HighLevelAction(ActionKind.SHORTHOP))                                     # 24
    table += [HighLevelAction(ActionKind.SHORTHOP_AERIAL, a) for a in _AIR_ATTACK_ORDER]   # 25-29
    table += [HighLevelAction(k) for k in (                                                # 30-39
        ActionKind.GRAB, ActionKind.GROUND_WAIT, ActionKind.AIR_WAIT, ActionKind.AIR_JUMP,
        ActionKind.AIRDODGE, ActionKind.LEDGE_WAIT, ActionKind.LEDGE_DASH,
        ActionKind.LEDGE_ROLL, ActionKind.LEDGE_JUMP, ActionKind.LEDGE_HOP,
    )]
    table += [HighLevelAction(ActionKind.LEDGE_AERIAL, a) for a in _AIR_ATTACK_ORDER]      # 40-44
    table += [HighLevelAction(k) for k in (                                                # 45-63
        ActionKind.LEDGE_GETUP, ActionKind.LEDGE_ATTACK, ActionKind.LEDGE_DROP,
        ActionKind.WAVEDASH_RIGHT, ActionKind.WAVEDASH_DOWN, ActionKind.WAVEDASH_LEFT,
        ActionKind.WAVELAND_RIGHT, ActionKind.WAVELAND_DOWN, ActionKind.WAVELAND_LEFT,
        ActionKind.DASH_LEFT, ActionKind.DASH_RIGHT, ActionKind.WALK_LEFT, ActionKind.WALK_RIGHT,
        ActionKind.SHIELD, ActionKind.SPOTDODGE, ActionKind.ROLL_FORWARD,
        ActionKind.ROLL_BACKWARD, ActionKind.CROUCH, ActionKind.HITSTUN,
    )]
    return table


_ACTION_BY_CODE: dict[int, HighLevelAction] = dict(enumerate(_build_code_table()))
_CODE_BY_ACTION: dict[HighLevelAction, int] = {hla: code for code, hla in _ACTION_BY_CODE.items()}

NUM_CODES = len(_ACTION_BY_CODE)


# =============================================================================
# Action record
# =============================================================================

@dataclass(frozen=True)
class Action:
    """A classified span of one player's frames, ``[frame_start, frame_end)``."""

    start_state: BroadState
    actionable_state: ActionableState
    action_taken: HighLevelAction
    frame_start: int
    frame_end: int
    initial_position: Vector
    initial_velocity: Vector

    @property
    def duration(self) -> int:
        return self.frame_end - self.frame_start

    def __str__(self) -> str:
        start = self.start_state.name.title().replace("_", "")
        return f"{start:10}: {str(self.action_taken):15}{self.frame_start} -> {self.frame_end}"


def actions_to_dataframe(actions: Iterable[Action]) -> pd.DataFrame:
    """Flatten a sequence of Actions into one row per action.

    Returns:
        DataFrame with columns frame_start, frame_end, duration, start_state,
        actionable_state, action, kind, attack, code, position_x, position_y,
        velocity_x, velocity_y.
    """
    rows = []
    for a in actions:
        hla = a.action_taken
        rows.append({
            "frame_start": a.frame_start,
            "frame_end": a.frame_end,
            "duration": a.duration,
            "start_state": a.start_state.value,
            "actionable_state": a.actionable_state.value,
            "action": str(hla),
            "kind": hla.kind.value,
            "attack": hla.attack.value if hla.attack is not None else None,
            "code": hla.code,
            "position_x": a.initial_position.x,
            "position_y": a.initial_position.y,
            "velocity_x": a.initial_velocity.x,
            "velocity_y": a.initial_velocity.y,
        })
    columns = [
        "frame_start", "frame_end", "duration", "start_state", "actionable_state",
        "action", "kind", "attack", "code",
        "position_x", "position_y", "velocity_x", "velocity_y",
    ]
    return pd.DataFrame(rows, columns=columns)
