"""Segment a player's frames into high-level actions.

The segmenter walks one player's frames front to back. Whenever the player
is actionable it snapshots an origin, dispatches on the BroadState of the
current frame and lets the matching handler consume frames until it can name
what the player did. Handlers either return a finished Action, None (the
span could not be classified and is dropped), or ask to be re-dispatched
from the new position with the same origin.

"Courtesy" windows give most idle states a few frames of grace: standing
still for 5 frames is a GroundWait, but standing for 2 frames and then
attacking is a ground attack starting on the first standing frame.

Usage:
    from melee_actions.segment import segment
    actions = segment(frames, jump_thresholds={1: 2.1})
"""

import logging
from collections import Counter
from dataclasses import replace
from enum import Enum
from functools import partial
from typing import Mapping, NamedTuple, Sequence

from melee_actions.action_states import MAX_RAW_STATE, RAW_STATE_BY_NAME
from melee_actions.actions import Action, ActionKind, HighLevelAction
from melee_actions.classify import actionable_state, attack_type, broad_state, ledge_action
from melee_actions.cursor import ActionOrigin, FrameCursor
from melee_actions.enums import frame_character_name
from melee_actions.frames import Frame
from melee_actions.states import AirAttack, BroadState, Direction, LedgeAction

logger = logging.getLogger(__name__)

# =============================================================================
# Tunables
# =============================================================================

# Minimum vertical velocity (exclusive) on the last jumpsquat frame for the
# jump to count as a full hop, keyed by per-frame character ID.
#
# No per-character values have been measured yet. Characters missing here
# have their jumps dropped (and logged). Pass measured values through the
# ``jump_thresholds`` argument of segment() / ActionSegmenter.
JUMP_VELOCITY_THRESHOLDS: dict[int, float] = {}

# Landing x-velocity within +/- this is a straight-down waveland
WAVELAND_EPSILON = 0.1

# Longest non-hitstun gap folded into a surrounding hitstun action
HITSTUN_GAP = 5


class Courtesy(NamedTuple):
    timeout: int
    state: BroadState


AIR_COURTESY = Courtesy(10, BroadState.AIR)
AIR_JUMP_COURTESY = Courtesy(10, BroadState.AIR_JUMP)
GROUND_COURTESY = Courtesy(5, BroadState.GROUND)
WALK_COURTESY = Courtesy(5, BroadState.WALK)
SHIELD_COURTESY = Courtesy(5, BroadState.SHIELD)
CROUCH_COURTESY = Courtesy(5, BroadState.CROUCH)
DASH_COURTESY = Courtesy(3, BroadState.DASH_RUN)
LEDGE_COURTESY = Courtesy(15, BroadState.LEDGE)


class CourtesyOutcome(Enum):
    NO_SKIP = "no_skip"        # state changed immediately
    SKIP_SOME = "skip_some"    # state changed inside the window
    SKIP_MAX = "skip_max"      # window fully elapsed


class CourtesyResult(NamedTuple):
    outcome: CourtesyOutcome
    skipped: int


class DroppedSpan(NamedTuple):
    """Frames a handler consumed without producing an action."""

    frame_start: int
    frame_end: int
    start_state: BroadState


def skip_courtesy(cursor: FrameCursor, courtesy: Courtesy) -> CourtesyResult:
    """Consume up to ``courtesy.timeout`` frames of ``courtesy.state``."""
    skipped = cursor.skip_while_at_most(
        lambda st: broad_state(st) is courtesy.state, courtesy.timeout
    )
    if skipped == courtesy.timeout:
        outcome = CourtesyOutcome.SKIP_MAX
    elif skipped == 0:
        outcome = CourtesyOutcome.NO_SKIP
    else:
        outcome = CourtesyOutcome.SKIP_SOME
    return CourtesyResult(outcome, skipped)


# ---------------------------------------------------------------------------
# Fixed actions and remappings
# ---------------------------------------------------------------------------

_ESCAPE_F = RAW_STATE_BY_NAME["ESCAPE_F"]
_ESCAPE_B = RAW_STATE_BY_NAME["ESCAPE_B"]

_K = ActionKind
_FULLHOP = HighLevelAction(_K.FULLHOP)
_SHORTHOP = HighLevelAction(_K.SHORTHOP)

_LEDGE_ACTIONS = {
    LedgeAction.GETUP: HighLevelAction(_K.LEDGE_GETUP),
    LedgeAction.ATTACK: HighLevelAction(_K.LEDGE_ATTACK),
    LedgeAction.ROLL: HighLevelAction(_K.LEDGE_ROLL),
    LedgeAction.JUMP: HighLevelAction(_K.LEDGE_JUMP),
}

_WAVELANDS = {_K.WAVELAND_LEFT, _K.WAVELAND_DOWN, _K.WAVELAND_RIGHT}

# Waveland out of jumpsquat is a wavedash
_WAVEDASH_FOR = {
    _K.WAVELAND_LEFT: HighLevelAction(_K.WAVEDASH_LEFT),
    _K.WAVELAND_DOWN: HighLevelAction(_K.WAVEDASH_DOWN),
    _K.WAVELAND_RIGHT: HighLevelAction(_K.WAVEDASH_RIGHT),
}

# Returned by handlers that want _parse_next to dispatch again with the same
# origin from the cursor's new position.
_REDISPATCH = object()


def _attack_action(kind: ActionKind, attack) -> HighLevelAction:
    """``kind`` for aerials; grounded attacks always stay GroundAttack."""
    if isinstance(attack, AirAttack):
        return HighLevelAction(kind, attack)
    return HighLevelAction(_K.GROUND_ATTACK, attack)


# =============================================================================
# Segmenter
# =============================================================================

class ActionSegmenter:
    """One segmentation pass over one player's frames.

    Args:
        frames: The player's frames in game order.
        jump_thresholds: Per-frame character ID -> full hop velocity cutoff.
            Defaults to JUMP_VELOCITY_THRESHOLDS.

    After run(), ``dropped`` lists every span that was consumed without
    producing an action, and ``unrecognized_states`` counts raw states outside
    the known catalogue (these are treated as inactionable).
    """

    def __init__(
        self,
        frames: Sequence[Frame],
        jump_thresholds: Mapping[int, float] | None = None,
    ):
        self.frames = frames
        self.jump_thresholds = (
            JUMP_VELOCITY_THRESHOLDS if jump_thresholds is None else jump_thresholds
        )
        self.cursor = FrameCursor(frames)
        self.dropped: list[DroppedSpan] = []
        self.unrecognized_states: Counter = Counter()
        self._missing_thresholds: set[int] = set()

        B = BroadState
        self._handlers = {
            B.ATTACK: self._parse_attack,
            B.AIR: partial(self._parse_courtesy, courtesy=AIR_COURTESY,
                           wait_action=HighLevelAction(_K.AIR_WAIT)),
            B.AIRDODGE: self._parse_airdodge,
            B.SPECIAL_LANDING: partial(self._skip_inactionable, state=B.SPECIAL_LANDING),
            B.GROUND: partial(self._parse_courtesy, courtesy=GROUND_COURTESY,
                              wait_action=HighLevelAction(_K.GROUND_WAIT)),
            B.WALK: partial(self._parse_directional, courtesy=WALK_COURTESY,
                            left=_K.WALK_LEFT, right=_K.WALK_RIGHT),
            B.DASH_RUN: partial(self._parse_directional, courtesy=DASH_COURTESY,
                                left=_K.DASH_LEFT, right=_K.DASH_RIGHT),
            B.SHIELD: partial(self._parse_courtesy, courtesy=SHIELD_COURTESY,
                              wait_action=HighLevelAction(_K.SHIELD)),
            B.LEDGE: self._parse_ledge,
            B.LEDGE_ACTION: self._parse_ledge_action,
            B.HITSTUN: self._parse_hitstun,
            B.GENERIC_INACTIONABLE: partial(self._skip_inactionable,
                                            state=B.GENERIC_INACTIONABLE),
            B.JUMP_SQUAT: self._parse_jump_squat,
            B.AIR_JUMP: self._parse_air_jump,
            B.CROUCH: partial(self._parse_courtesy, courtesy=CROUCH_COURTESY,
                              wait_action=HighLevelAction(_K.CROUCH)),
            B.GRAB: partial(self._parse_simple, state=B.GRAB,
                            action=HighLevelAction(_K.GRAB)),
            B.ROLL: self._parse_roll,
            B.SPOTDODGE: partial(self._parse_simple, state=B.SPOTDODGE,
                                 action=HighLevelAction(_K.SPOTDODGE)),
        }

    def run(self) -> list[Action]:
        """Segment every frame. Actions come back ordered and non-overlapping."""
        cursor = self.cursor
        self.unrecognized_states = Counter(
            f.state for f in self.frames if not 0 <= f.state <= MAX_RAW_STATE
        )
        if self.unrecognized_states:
            logger.debug(
                "%d frames with unrecognized states treated as inactionable: %s",
                sum(self.unrecognized_states.values()),
                dict(self.unrecognized_states),
            )

        actions = []
        while True:
            # Mid-animation frames cannot start anything
            cursor.skip_while(lambda st: actionable_state(st) is None)
            if cursor.finished:
                break

            origin = cursor.start_action()
            action = self._parse_next(origin)
            if action is None:
                self._drop(origin)
            else:
                actions.append(action)

        return actions

    def _drop(self, origin: ActionOrigin):
        span = DroppedSpan(origin.frame, self.cursor.position, origin.start_state)
        self.dropped.append(span)
        logger.debug(
            "dropped frames %d-%d starting in %s",
            span.frame_start, span.frame_end, span.start_state.value,
        )

    def _finish(self, origin: ActionOrigin, action: HighLevelAction) -> Action:
        return self.cursor.finish_action(origin, action)

    def _parse_next(self, origin: ActionOrigin) -> Action | None:
        while True:
            state = self.cursor.peek()
            if state is None:
                return None
            result = self._handlers[broad_state(state)](origin)
            if result is not _REDISPATCH:
                return result

    # ------------------------------------------------------------------
    # Shared pieces
    # ------------------------------------------------------------------

    def _parse_courtesy(self, origin, courtesy: Courtesy, wait_action: HighLevelAction):
        if skip_courtesy(self.cursor, courtesy).outcome is CourtesyOutcome.SKIP_MAX:
            self.cursor.skip_broad_state(courtesy.state)
            return self._finish(origin, wait_action)
        return _REDISPATCH

    def _parse_directional(self, origin, courtesy: Courtesy, left: ActionKind, right: ActionKind):
        """Walk and dash: direction is read from the first frame."""
        first = self.cursor.next_frame()
        kind = left if first.direction is Direction.LEFT else right
        return self._parse_courtesy(origin, courtesy, HighLevelAction(kind))

    def _parse_simple(self, origin, state: BroadState, action: HighLevelAction):
        self.cursor.skip_broad_state(state)
        return self._finish(origin, action)

    def _skip_inactionable(self, origin, state: BroadState):
        self.cursor.skip_broad_state(state)
        return None

    def _attack_to_end(self):
        """Classify the attack under the cursor and consume its whole run."""
        state = self.cursor.peek()
        if state is None:
            return None
        attack = attack_type(state)
        if attack is None:
            return None
        self.cursor.skip_broad_state(BroadState.ATTACK)
        return attack

    def _jump_is_full(self) -> bool | None:
        """Consume a jumpsquat run and classify its height.

        None if the stream ends inside the squat or the character has no
        threshold.
        """
        cursor = self.cursor
        last = cursor.next_frame()
        while True:
            state = cursor.peek()
            if state is None:
                return None
            if broad_state(state) is not BroadState.JUMP_SQUAT:
                break
            last = cursor.next_frame()

        threshold = self.jump_thresholds.get(last.character)
        if threshold is None:
            if last.character not in self._missing_thresholds:
                self._missing_thresholds.add(last.character)
                logger.warning(
                    "No jump velocity threshold for character %d (%s); its jumps are dropped",
                    last.character, frame_character_name(last.character),
                )
            return None
        return last.velocity.y > threshold

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _parse_attack(self, origin):
        attack = self._attack_to_end()
        if attack is None:
            return None
        return self._finish(origin, _attack_action(_K.AERIAL, attack))

    def _parse_roll(self, origin):
        state = self.cursor.next()
        if state == _ESCAPE_F:
            action = HighLevelAction(_K.ROLL_FORWARD)
        elif state == _ESCAPE_B:
            action = HighLevelAction(_K.ROLL_BACKWARD)
        else:
            return None
        return self._parse_simple(origin, BroadState.ROLL, action)

    def _parse_airdodge(self, origin):
        cursor = self.cursor
        cursor.skip_broad_state(BroadState.AIRDODGE)
        state = cursor.peek()
        if state is None:
            return None
        if broad_state(state) is not BroadState.SPECIAL_LANDING:
            return self._finish(origin, HighLevelAction(_K.AIRDODGE))

        vx = cursor.next_frame().velocity.x
        if vx < -WAVELAND_EPSILON:
            kind = _K.WAVELAND_LEFT
        elif vx > WAVELAND_EPSILON:
            kind = _K.WAVELAND_RIGHT
        else:
            kind = _K.WAVELAND_DOWN
        cursor.skip_broad_state(BroadState.SPECIAL_LANDING)
        return self._finish(origin, HighLevelAction(kind))

    def _parse_jump_squat(self, origin):
        full = self._jump_is_full()
        if full is None:
            return None
        hop = _FULLHOP if full else _SHORTHOP

        if skip_courtesy(self.cursor, AIR_COURTESY).outcome is CourtesyOutcome.SKIP_MAX:
            return self._finish(origin, hop)

        state = self.cursor.peek()
        if state is None:
            return None
        after = broad_state(state)
        if after is BroadState.ATTACK:
            attack = self._attack_to_end()
            if attack is None:
                return None
            kind = _K.FULLHOP_AERIAL if full else _K.SHORTHOP_AERIAL
            return self._finish(origin, _attack_action(kind, attack))
        if after is BroadState.AIR_JUMP:
            return self._parse_air_jump(origin)
        if after in (BroadState.AIRDODGE, BroadState.SPECIAL_LANDING):
            action = self._parse_airdodge(origin)
            if action is None:
                return None
            wavedash = _WAVEDASH_FOR.get(action.action_taken.kind)
            return replace(action, action_taken=wavedash) if wavedash else action
        if after is BroadState.GRAB:
            return self._parse_simple(origin, BroadState.GRAB, HighLevelAction(_K.GRAB))
        return self._finish(origin, hop)

    def _parse_air_jump(self, origin):
        cursor = self.cursor
        cursor.next()
        if skip_courtesy(cursor, AIR_JUMP_COURTESY).outcome is CourtesyOutcome.SKIP_MAX:
            # so the rest of the jump is not read as a second air jump
            cursor.skip_broad_state(BroadState.AIR_JUMP)
            return self._finish(origin, HighLevelAction(_K.AIR_JUMP))

        state = cursor.peek()
        if state is None:
            return None
        if broad_state(state) is BroadState.ATTACK:
            attack = self._attack_to_end()
            if not isinstance(attack, AirAttack):
                return None
            return self._finish(origin, HighLevelAction(_K.JUMP_AERIAL, attack))
        return self._finish(origin, HighLevelAction(_K.AIR_JUMP))

    def _parse_ledge_action(self, origin):
        state = self.cursor.peek()
        if state is None:
            return None
        action = ledge_action(state)
        if action is None:
            return None
        self.cursor.skip_broad_state(BroadState.LEDGE_ACTION)
        return self._finish(origin, _LEDGE_ACTIONS[action])

    def _parse_hitstun(self, origin):
        """One Hitstun action over a hitstun run and any short gaps inside it."""
        cursor = self.cursor
        while True:
            cursor.skip_broad_state(BroadState.HITSTUN)
            window = cursor.peek_n(HITSTUN_GAP + 1)
            gap = next(
                (i for i, st in enumerate(window) if broad_state(st) is BroadState.HITSTUN),
                None,
            )
            if gap is None:
                break
            cursor.skip_while_at_most(lambda st: True, gap)
        return self._finish(origin, HighLevelAction(_K.HITSTUN))

    def _parse_ledge(self, origin):
        cursor = self.cursor
        if skip_courtesy(cursor, LEDGE_COURTESY).outcome is CourtesyOutcome.SKIP_MAX:
            return self._finish(origin, HighLevelAction(_K.LEDGE_WAIT))

        state = cursor.peek()
        if state is None:
            return None
        after = broad_state(state)
        if after is BroadState.LEDGE_ACTION:
            return self._parse_ledge_action(origin)
        if after is BroadState.HITSTUN:
            return self._parse_hitstun(origin)
        if after is not BroadState.AIR:
            return None

        # Let go of the ledge
        if skip_courtesy(cursor, AIR_COURTESY).outcome is CourtesyOutcome.SKIP_MAX:
            return self._finish(origin, HighLevelAction(_K.LEDGE_DROP))
        state = cursor.peek()
        if state is None:
            return None
        after = broad_state(state)
        if after is BroadState.HITSTUN:
            return self._parse_hitstun(origin)
        if after is not BroadState.AIR_JUMP:
            return self._finish(origin, HighLevelAction(_K.LEDGE_DROP))

        # Double jump out of the drop
        cursor.next()
        if skip_courtesy(cursor, AIR_JUMP_COURTESY).outcome is CourtesyOutcome.SKIP_MAX:
            cursor.skip_broad_state(BroadState.AIR_JUMP)
            return self._finish(origin, HighLevelAction(_K.LEDGE_HOP))
        state = cursor.peek()
        if state is None:
            return None
        after = broad_state(state)
        if after is BroadState.AIRDODGE:
            action = self._parse_airdodge(origin)
            if action is None:
                return None
            if action.action_taken.kind in _WAVELANDS:
                return replace(action, action_taken=HighLevelAction(_K.LEDGE_DASH))
            return action
        if after is BroadState.ATTACK:
            attack = self._attack_to_end()
            if attack is None:
                return None
            return self._finish(origin, _attack_action(_K.LEDGE_AERIAL, attack))
        if after is BroadState.SPECIAL_LANDING:
            cursor.skip_broad_state(BroadState.SPECIAL_LANDING)
            return self._finish(origin, HighLevelAction(_K.LEDGE_DASH))
        if after is BroadState.HITSTUN:
            return self._parse_hitstun(origin)
        return self._finish(origin, HighLevelAction(_K.LEDGE_HOP))


def segment(
    frames: Sequence[Frame],
    jump_thresholds: Mapping[int, float] | None = None,
) -> list[Action]:
    """Segment one player's frames into an ordered list of Actions.

    Args:
        frames: The player's frames in game order.
        jump_thresholds: Per-frame character ID -> full hop velocity cutoff.
            Defaults to JUMP_VELOCITY_THRESHOLDS.

    Returns:
        Actions with strictly ascending, non-overlapping frame ranges. Spans
        that could not be classified produce no action.
    """
    return ActionSegmenter(frames, jump_thresholds).run()
