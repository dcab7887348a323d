"""Tests for melee_actions.cursor."""

import pytest

from melee_actions.action_states import RAW_STATE_BY_NAME
from melee_actions.actions import ActionKind, HighLevelAction
from melee_actions.cursor import FrameCursor
from melee_actions.states import ActionableState, BroadState

from .conftest import make_frames

S = RAW_STATE_BY_NAME


def test_empty_cursor():
    cursor = FrameCursor([])
    assert cursor.finished
    assert cursor.peek() is None
    assert cursor.peek_frame() is None
    assert cursor.next() is None
    assert cursor.next_frame() is None
    assert list(cursor.peek_n(5)) == []


def test_peek_does_not_consume():
    cursor = FrameCursor(make_frames(("WAIT", 1), ("FALL", 1)))
    assert cursor.peek() == S["WAIT"]
    assert cursor.peek() == S["WAIT"]
    assert cursor.position == 0
    assert cursor.next() == S["WAIT"]
    assert cursor.next_frame().state == S["FALL"]
    assert cursor.finished


def test_peek_n_is_bounded():
    cursor = FrameCursor(make_frames(("WAIT", 2), ("FALL", 1)))
    assert list(cursor.peek_n(10)) == [S["WAIT"], S["WAIT"], S["FALL"]]
    assert list(cursor.peek_n(1)) == [S["WAIT"]]
    assert cursor.position == 0


def test_skip_while_stops_at_first_mismatch():
    cursor = FrameCursor(make_frames(("WAIT", 3), ("FALL", 2)))
    cursor.skip_while(lambda st: st == S["WAIT"])
    assert cursor.position == 3
    assert cursor.peek() == S["FALL"]
    cursor.skip_while(lambda st: True)
    assert cursor.finished


def test_skip_while_at_most_returns_consumed_count():
    cursor = FrameCursor(make_frames(("WAIT", 8), ("FALL", 1)))
    assert cursor.skip_while_at_most(lambda st: st == S["WAIT"], 5) == 5
    assert cursor.position == 5
    assert cursor.skip_while_at_most(lambda st: st == S["WAIT"], 5) == 3
    assert cursor.position == 8
    assert cursor.skip_while_at_most(lambda st: st == S["WAIT"], 5) == 0
    assert cursor.peek() == S["FALL"]


def test_skip_while_at_most_at_end_of_stream():
    cursor = FrameCursor(make_frames(("WAIT", 2)))
    assert cursor.skip_while_at_most(lambda st: True, 5) == 2
    assert cursor.finished


def test_skip_broad_state():
    cursor = FrameCursor(make_frames(("WALK_SLOW", 2), ("WALK_FAST", 2), ("WAIT", 1)))
    cursor.skip_broad_state(BroadState.WALK)
    assert cursor.position == 4


def test_start_and_finish_action():
    cursor = FrameCursor(make_frames(("WAIT", 2, {"x": 4.0, "vx": 0.5}), ("FALL", 3)))
    origin = cursor.start_action()
    assert origin.frame == 0
    assert origin.start_state is BroadState.GROUND
    assert origin.actionable_state is ActionableState.GROUND
    assert origin.position.x == 4.0
    assert origin.velocity.x == 0.5

    cursor.skip_while(lambda st: True)
    action = cursor.finish_action(origin, HighLevelAction(ActionKind.GROUND_WAIT))
    assert (action.frame_start, action.frame_end) == (0, 5)
    assert action.initial_position.x == 4.0
    assert action.start_state is BroadState.GROUND


def test_start_action_rejects_inactionable_frame():
    cursor = FrameCursor(make_frames(("ATTACK_11", 3)))
    with pytest.raises(ValueError):
        cursor.start_action()


def test_start_action_rejects_finished_cursor(standing):
    cursor = FrameCursor(standing)
    cursor.skip_while(lambda st: True)
    with pytest.raises(ValueError):
        cursor.start_action()
