"""Pure classification of raw action states.

broad_state() gives the coarse phase every segmenter dispatch starts from;
the narrower classifiers are only consulted once the phase calls for them.
"""

from melee_actions.action_states import BROAD_STATE_TABLE, RAW_STATE_BY_NAME
from melee_actions.states import (
    ActionableState,
    AirAttack,
    AttackType,
    BroadState,
    GroundAttack,
    LedgeAction,
)

# ---------------------------------------------------------------------------
# Lookup tables
# ---------------------------------------------------------------------------

_CLIFF_CATCH = RAW_STATE_BY_NAME["CLIFF_CATCH"]
_DASH = RAW_STATE_BY_NAME["DASH"]

_ACTIONABLE_BY_BROAD = {
    BroadState.AIR: ActionableState.AIR,
    BroadState.AIR_JUMP: ActionableState.AIR,
    BroadState.GROUND: ActionableState.GROUND,
    BroadState.WALK: ActionableState.GROUND,
    BroadState.CROUCH: ActionableState.GROUND,
    BroadState.SHIELD: ActionableState.SHIELD,
}

_LEDGE_ACTIONS: dict[int, LedgeAction] = {
    254: LedgeAction.GETUP,    # CLIFF_CLIMB_SLOW
    255: LedgeAction.GETUP,    # CLIFF_CLIMB_QUICK
    256: LedgeAction.ATTACK,   # CLIFF_ATTACK_SLOW
    257: LedgeAction.ATTACK,   # CLIFF_ATTACK_QUICK
    258: LedgeAction.ROLL,     # CLIFF_ESCAPE_SLOW
    259: LedgeAction.ROLL,     # CLIFF_ESCAPE_QUICK
    260: LedgeAction.JUMP,     # CLIFF_JUMP_SLOW_1
    261: LedgeAction.JUMP,
    262: LedgeAction.JUMP,     # CLIFF_JUMP_QUICK_1
    263: LedgeAction.JUMP,
}

_ATTACK_TYPES: dict[int, AttackType] = {
    # jab 1-3 and rapid jab start/loop/end
    44: GroundAttack.JAB,
    45: GroundAttack.JAB,
    46: GroundAttack.JAB,
    47: GroundAttack.JAB,
    48: GroundAttack.JAB,
    49: GroundAttack.JAB,
    50: GroundAttack.DASH_ATTACK,
    # f-tilt, all five angles
    51: GroundAttack.FTILT,
    52: GroundAttack.FTILT,
    53: GroundAttack.FTILT,
    54: GroundAttack.FTILT,
    55: GroundAttack.FTILT,
    56: GroundAttack.UTILT,
    57: GroundAttack.DTILT,
    # f-smash, all five angles
    58: GroundAttack.FSMASH,
    59: GroundAttack.FSMASH,
    60: GroundAttack.FSMASH,
    61: GroundAttack.FSMASH,
    62: GroundAttack.FSMASH,
    63: GroundAttack.USMASH,
    64: GroundAttack.DSMASH,
    65: AirAttack.NAIR,
    66: AirAttack.FAIR,
    67: AirAttack.BAIR,
    68: AirAttack.UAIR,
    69: AirAttack.DAIR,
}


# ---------------------------------------------------------------------------
# Classifiers
# ---------------------------------------------------------------------------

def broad_state(state: int) -> BroadState:
    """Coarse category of a raw state. Unrecognized ids are GENERIC_INACTIONABLE."""
    if 0 <= state < len(BROAD_STATE_TABLE):
        return BROAD_STATE_TABLE[state]
    return BroadState.GENERIC_INACTIONABLE


def actionable_state(state: int) -> ActionableState | None:
    """Return the actionable state a new action may begin from, or None.

    Attack, hitstun and other committed animations have none, and neither
    does the single CLIFF_CATCH frame before the ledge hang proper.
    """
    broad = broad_state(state)
    if broad is BroadState.DASH_RUN:
        return ActionableState.DASH if state == _DASH else ActionableState.RUN
    if broad is BroadState.LEDGE:
        return None if state == _CLIFF_CATCH else ActionableState.LEDGE
    return _ACTIONABLE_BY_BROAD.get(broad)


def ledge_action(state: int) -> LedgeAction | None:
    return _LEDGE_ACTIONS.get(state)


def attack_type(state: int) -> AttackType | None:
    """Specific move for an attack state; GroundAttack or AirAttack."""
    return _ATTACK_TYPES.get(state)
