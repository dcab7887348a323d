"""Tests for melee_actions.segment."""

import logging

import numpy as np
import pytest

from melee_actions.action_states import MAX_RAW_STATE
from melee_actions.actions import ActionKind, HighLevelAction
from melee_actions.cursor import FrameCursor
from melee_actions.segment import (
    GROUND_COURTESY,
    JUMP_VELOCITY_THRESHOLDS,
    ActionSegmenter,
    CourtesyOutcome,
    segment,
    skip_courtesy,
)
from melee_actions.states import ActionableState, AirAttack, BroadState, GroundAttack

from .conftest import THRESHOLDS, make_frames

K = ActionKind
HLA = HighLevelAction

LEFT = {"facing": -1.0}
RIGHT = {"facing": 1.0}


def run(*runs, thresholds=THRESHOLDS):
    return segment(make_frames(*runs), thresholds)


def spans(actions):
    return [(a.action_taken, a.frame_start, a.frame_end) for a in actions]


# ---------------------------------------------------------------------------
# Courtesy windows
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("waits, outcome, skipped", [
    (5, CourtesyOutcome.SKIP_MAX, 5),
    (8, CourtesyOutcome.SKIP_MAX, 5),
    (3, CourtesyOutcome.SKIP_SOME, 3),
    (0, CourtesyOutcome.NO_SKIP, 0),
])
def test_skip_courtesy(waits, outcome, skipped):
    cursor = FrameCursor(make_frames(("WAIT", waits), ("DASH", 1)))
    result = skip_courtesy(cursor, GROUND_COURTESY)
    assert result.outcome is outcome
    assert result.skipped == skipped
    assert cursor.position == skipped


def test_empty_input():
    assert segment([]) == []


# ---------------------------------------------------------------------------
# Idle and movement
# ---------------------------------------------------------------------------

def test_ground_wait_consumes_whole_run(standing):
    actions = segment(standing, THRESHOLDS)
    assert spans(actions) == [(HLA(K.GROUND_WAIT), 0, 8)]
    assert actions[0].start_state is BroadState.GROUND
    assert actions[0].actionable_state is ActionableState.GROUND


def test_air_wait():
    assert spans(run(("FALL", 12))) == [(HLA(K.AIR_WAIT), 0, 12)]


def test_shield():
    assert spans(run(("GUARD", 7))) == [(HLA(K.SHIELD), 0, 7)]


def test_crouch():
    assert spans(run(("SQUAT", 1), ("SQUAT_WAIT", 6))) == [(HLA(K.CROUCH), 0, 7)]


def test_walk_direction_from_first_frame():
    assert spans(run(("WALK_SLOW", 8, LEFT))) == [(HLA(K.WALK_LEFT), 0, 8)]
    assert spans(run(("WALK_FAST", 6, RIGHT))) == [(HLA(K.WALK_RIGHT), 0, 6)]


def test_dash():
    actions = run(("DASH", 6, RIGHT))
    assert spans(actions) == [(HLA(K.DASH_RIGHT), 0, 6)]
    assert actions[0].actionable_state is ActionableState.DASH


def test_dash_into_run_is_one_action():
    assert spans(run(("DASH", 1, LEFT), ("RUN", 10, LEFT))) == [(HLA(K.DASH_LEFT), 0, 11)]


# ---------------------------------------------------------------------------
# Attacks
# ---------------------------------------------------------------------------

def test_ground_attack_starts_on_first_standing_frame():
    actions = run(("WAIT", 2, {"x": 7.0}), ("ATTACK_LW_3", 8))
    assert spans(actions) == [(HLA(K.GROUND_ATTACK, GroundAttack.DTILT), 0, 10)]
    assert actions[0].start_state is BroadState.GROUND
    assert actions[0].initial_position.x == 7.0


def test_dash_attack():
    actions = run(("DASH", 2), ("ATTACK_DASH", 10))
    assert spans(actions) == [(HLA(K.GROUND_ATTACK, GroundAttack.DASH_ATTACK), 0, 12)]


def test_aerial_from_fall():
    actions = run(("FALL", 3), ("ATTACK_AIR_HI", 8))
    assert spans(actions) == [(HLA(K.AERIAL, AirAttack.UAIR), 0, 11)]


def test_jab_sequence_is_one_attack():
    actions = run(("WAIT", 1), ("ATTACK_11", 3), ("ATTACK_12", 3), ("ATTACK_13", 4))
    assert spans(actions) == [(HLA(K.GROUND_ATTACK, GroundAttack.JAB), 0, 11)]


# ---------------------------------------------------------------------------
# Jumps
# ---------------------------------------------------------------------------

def test_fullhop():
    actions = run(("WAIT", 1), ("KNEE_BEND", 3, {"vy": 3.0}), ("JUMP_F", 10))
    assert spans(actions) == [(HLA(K.FULLHOP), 0, 14)]


def test_shorthop():
    actions = run(("WAIT", 1), ("KNEE_BEND", 3, {"vy": 1.0}), ("JUMP_F", 10))
    assert spans(actions) == [(HLA(K.SHORTHOP), 0, 14)]


def test_jump_height_uses_last_squat_frame():
    actions = run(
        ("WAIT", 1), ("KNEE_BEND", 2, {"vy": 9.0}), ("KNEE_BEND", 1, {"vy": 0.5}), ("JUMP_F", 10)
    )
    assert actions[0].action_taken == HLA(K.SHORTHOP)


def test_threshold_is_exclusive():
    actions = run(("WAIT", 1), ("KNEE_BEND", 3, {"vy": 2.0}), ("JUMP_F", 10))
    assert actions[0].action_taken == HLA(K.SHORTHOP)


def test_shorthop_aerial():
    actions = run(
        ("WAIT", 1), ("KNEE_BEND", 3, {"vy": 1.0}), ("JUMP_F", 2),
        ("ATTACK_AIR_N", 8), ("LANDING_AIR_N", 4),
    )
    assert spans(actions) == [(HLA(K.SHORTHOP_AERIAL, AirAttack.NAIR), 0, 14)]


def test_fullhop_aerial():
    actions = run(("WAIT", 1), ("KNEE_BEND", 3, {"vy": 3.0}), ("JUMP_F", 4), ("ATTACK_AIR_B", 9))
    assert spans(actions) == [(HLA(K.FULLHOP_AERIAL, AirAttack.BAIR), 0, 17)]


def test_jump_cancel_grab():
    actions = run(("WAIT", 1), ("KNEE_BEND", 3, {"vy": 1.0}), ("CATCH", 5))
    assert spans(actions) == [(HLA(K.GRAB), 0, 9)]


def test_jump_into_air_jump():
    actions = run(("WAIT", 1), ("KNEE_BEND", 3, {"vy": 3.0}), ("JUMP_F", 2), ("JUMP_AERIAL_F", 12))
    assert spans(actions) == [(HLA(K.AIR_JUMP), 0, 18)]


def test_double_jump_aerial():
    actions = run(("FALL", 1), ("JUMP_AERIAL_F", 2), ("ATTACK_AIR_B", 6))
    assert spans(actions) == [(HLA(K.JUMP_AERIAL, AirAttack.BAIR), 0, 9)]


def test_air_jump_then_other_action_is_air_jump():
    actions = run(("FALL", 1), ("JUMP_AERIAL_F", 2), ("FALL", 3))
    assert spans(actions)[0] == (HLA(K.AIR_JUMP), 0, 3)


def test_air_jump_into_grounded_attack_is_dropped():
    segmenter = ActionSegmenter(make_frames(("FALL", 1), ("JUMP_AERIAL_F", 2), ("ATTACK_11", 3)), THRESHOLDS)
    assert segmenter.run() == []
    assert [(d.frame_start, d.frame_end) for d in segmenter.dropped] == [(0, 6)]


def test_missing_threshold_drops_jump(caplog):
    frames = make_frames(
        ("WAIT", 1), ("KNEE_BEND", 3, {"vy": 3.0}), ("JUMP_F", 10), ("LANDING", 4),
        ("WAIT", 1), ("KNEE_BEND", 3, {"vy": 3.0}), ("JUMP_F", 10),
    )
    segmenter = ActionSegmenter(frames, jump_thresholds={})
    with caplog.at_level(logging.WARNING, logger="melee_actions.segment"):
        actions = segmenter.run()

    assert spans(actions) == [(HLA(K.AIR_WAIT), 4, 14), (HLA(K.AIR_WAIT), 22, 32)]
    assert [(d.frame_start, d.frame_end) for d in segmenter.dropped] == [(0, 4), (18, 22)]
    assert segmenter.dropped[0].start_state is BroadState.GROUND
    # one warning per character, not per jump
    assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 1


def test_default_thresholds_are_unpopulated():
    assert JUMP_VELOCITY_THRESHOLDS == {}


# ---------------------------------------------------------------------------
# Airdodges, wavelands, wavedashes
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("vx, kind", [
    (-2.0, K.WAVELAND_LEFT),
    (2.0, K.WAVELAND_RIGHT),
    (0.0, K.WAVELAND_DOWN),
    (0.05, K.WAVELAND_DOWN),
])
def test_waveland(vx, kind):
    actions = run(("FALL", 1), ("ESCAPE_AIR", 3), ("LANDING_FALL_SPECIAL", 4, {"vx": vx}))
    assert spans(actions) == [(HLA(kind), 0, 8)]


@pytest.mark.parametrize("vx, kind", [
    (-2.0, K.WAVEDASH_LEFT),
    (2.0, K.WAVEDASH_RIGHT),
    (0.0, K.WAVEDASH_DOWN),
])
def test_wavedash(vx, kind):
    actions = run(
        ("WAIT", 1), ("KNEE_BEND", 3, {"vy": 1.0}),
        ("ESCAPE_AIR", 2), ("LANDING_FALL_SPECIAL", 4, {"vx": vx}),
    )
    assert spans(actions) == [(HLA(kind), 0, 10)]


def test_wavedash_after_short_air_time():
    actions = run(
        ("WAIT", 1), ("KNEE_BEND", 3, {"vy": 1.0}), ("JUMP_F", 2),
        ("ESCAPE_AIR", 2), ("LANDING_FALL_SPECIAL", 4, {"vx": 1.0}),
    )
    assert spans(actions) == [(HLA(K.WAVEDASH_RIGHT), 0, 12)]


def test_airdodge_without_landing():
    actions = run(("FALL", 1), ("ESCAPE_AIR", 5), ("FALL_SPECIAL", 10))
    assert spans(actions) == [(HLA(K.AIRDODGE), 0, 6)]


# ---------------------------------------------------------------------------
# Shield options and grabs
# ---------------------------------------------------------------------------

def test_roll_backward():
    assert spans(run(("GUARD", 2), ("ESCAPE_B", 5))) == [(HLA(K.ROLL_BACKWARD), 0, 7)]


def test_roll_forward():
    assert spans(run(("GUARD", 1), ("ESCAPE_F", 5))) == [(HLA(K.ROLL_FORWARD), 0, 6)]


def test_spotdodge():
    assert spans(run(("GUARD", 2), ("ESCAPE", 4))) == [(HLA(K.SPOTDODGE), 0, 6)]


def test_grab():
    assert spans(run(("WAIT", 2), ("CATCH", 6))) == [(HLA(K.GRAB), 0, 8)]


# ---------------------------------------------------------------------------
# Ledge
# ---------------------------------------------------------------------------

def test_ledge_wait_then_getup():
    actions = run(("CLIFF_CATCH", 1), ("CLIFF_WAIT", 20), ("CLIFF_CLIMB_QUICK", 5))
    assert spans(actions) == [
        (HLA(K.LEDGE_WAIT), 1, 16),
        (HLA(K.LEDGE_GETUP), 16, 26),
    ]
    assert actions[0].actionable_state is ActionableState.LEDGE


@pytest.mark.parametrize("state, kind", [
    ("CLIFF_ATTACK_SLOW", K.LEDGE_ATTACK),
    ("CLIFF_ESCAPE_QUICK", K.LEDGE_ROLL),
    ("CLIFF_JUMP_QUICK_1", K.LEDGE_JUMP),
])
def test_ledge_actions(state, kind):
    assert spans(run(("CLIFF_WAIT", 4), (state, 10))) == [(HLA(kind), 0, 14)]


def test_ledgedash():
    actions = run(
        ("CLIFF_WAIT", 3), ("FALL", 2), ("JUMP_AERIAL_F", 2),
        ("ESCAPE_AIR", 3), ("LANDING_FALL_SPECIAL", 4, {"vx": 1.5}),
    )
    assert spans(actions) == [(HLA(K.LEDGE_DASH), 0, 14)]


def test_ledgedash_straight_into_landing():
    actions = run(
        ("CLIFF_WAIT", 3), ("FALL", 2), ("JUMP_AERIAL_F", 2), ("LANDING_FALL_SPECIAL", 6),
    )
    assert spans(actions) == [(HLA(K.LEDGE_DASH), 0, 13)]


def test_ledge_aerial():
    actions = run(("CLIFF_WAIT", 3), ("FALL", 2), ("JUMP_AERIAL_F", 2), ("ATTACK_AIR_F", 6))
    assert spans(actions) == [(HLA(K.LEDGE_AERIAL, AirAttack.FAIR), 0, 13)]


def test_ledge_hop():
    actions = run(("CLIFF_WAIT", 3), ("FALL", 2), ("JUMP_AERIAL_F", 12))
    assert spans(actions) == [(HLA(K.LEDGE_HOP), 0, 17)]


def test_ledge_drop():
    actions = run(("CLIFF_WAIT", 2), ("FALL", 12))
    assert spans(actions) == [(HLA(K.LEDGE_DROP), 0, 12)]


def test_ledge_drop_into_other_state():
    actions = run(("CLIFF_WAIT", 2), ("FALL", 3), ("ESCAPE_AIR", 5), ("FALL_SPECIAL", 5))
    assert spans(actions)[0] == (HLA(K.LEDGE_DROP), 0, 5)


def test_hit_off_ledge():
    actions = run(("CLIFF_WAIT", 3), ("DAMAGE_N_1", 4), ("FALL", 8))
    assert spans(actions)[0] == (HLA(K.HITSTUN), 0, 7)
    assert actions[0].start_state is BroadState.LEDGE


def test_ledge_into_unhandled_state_is_dropped():
    segmenter = ActionSegmenter(make_frames(("CLIFF_WAIT", 2), ("DEAD_DOWN", 3)), THRESHOLDS)
    assert segmenter.run() == []
    assert [(d.frame_start, d.frame_end) for d in segmenter.dropped] == [(0, 2)]
    assert segmenter.dropped[0].start_state is BroadState.LEDGE


# ---------------------------------------------------------------------------
# Hitstun
# ---------------------------------------------------------------------------

def test_hitstun_absorbs_short_gap():
    actions = run(
        ("WAIT", 1), ("DAMAGE_N_1", 4), ("WAIT", 2), ("DAMAGE_N_1", 3), ("LANDING", 3),
    )
    assert spans(actions) == [(HLA(K.HITSTUN), 0, 10)]


def test_hitstun_absorbs_gap_at_tolerance():
    actions = run(
        ("WAIT", 1), ("DAMAGE_N_1", 4), ("WAIT", 5), ("DAMAGE_N_1", 3), ("LANDING", 3),
    )
    assert spans(actions) == [(HLA(K.HITSTUN), 0, 13)]


def test_hitstun_does_not_absorb_long_gap():
    actions = run(
        ("WAIT", 1), ("DAMAGE_N_1", 4), ("WAIT", 6), ("DAMAGE_N_1", 3), ("LANDING", 3),
    )
    assert spans(actions)[:2] == [
        (HLA(K.HITSTUN), 0, 5),
        (HLA(K.GROUND_WAIT), 5, 11),
    ]


# ---------------------------------------------------------------------------
# Robustness
# ---------------------------------------------------------------------------

def test_unrecognized_states_are_counted():
    segmenter = ActionSegmenter(make_frames((400, 5), ("WAIT", 6)), THRESHOLDS)
    actions = segmenter.run()
    assert spans(actions) == [(HLA(K.GROUND_WAIT), 5, 11)]
    assert segmenter.unrecognized_states == {400: 5}


def test_truncated_tail_is_dropped():
    segmenter = ActionSegmenter(make_frames(("WAIT", 3)), THRESHOLDS)
    assert segmenter.run() == []
    assert len(segmenter.dropped) == 1


def test_random_streams_are_ordered_and_non_overlapping():
    rng = np.random.default_rng(1234)
    pool = list(range(MAX_RAW_STATE + 1)) + [341, 365, 400]
    for _ in range(25):
        runs = [
            (int(rng.choice(pool)), int(rng.integers(1, 20)),
             {"vx": float(rng.normal()), "vy": float(rng.normal() * 3),
              "facing": float(rng.choice([-1.0, 1.0]))})
            for _ in range(60)
        ]
        frames = make_frames(*runs)
        actions = segment(frames, THRESHOLDS)
        for a in actions:
            assert 0 <= a.frame_start < a.frame_end <= len(frames)
        for prev, nxt in zip(actions, actions[1:]):
            assert prev.frame_end <= nxt.frame_start
