"""Shared pytest fixtures and frame builders for melee-actions tests."""

from pathlib import Path
from types import SimpleNamespace

import pyarrow as pa
import pytest

from melee_actions.action_states import RAW_STATE_BY_NAME
from melee_actions.frames import Frame, Vector
from melee_actions.states import Direction

FIXTURE_DIR = Path(__file__).parent / "fixtures"
TEST_SLP = FIXTURE_DIR / "test_game.slp"

requires_replay = pytest.mark.skipif(
    not TEST_SLP.exists(), reason="real .slp fixture not available"
)

# Fox (per-frame ID) with a made-up full hop cutoff
CHAR = 1
THRESHOLDS = {CHAR: 2.0}


def make_frames(*runs, character: int = CHAR) -> list[Frame]:
    """Build a frame list from (state, count) or (state, count, overrides) runs.

    ``state`` is a raw state name ("WAIT") or ID. ``overrides`` may set vx, vy,
    facing, x and y; everything else is zero and facing right.
    """
    frames = []
    for run in runs:
        state, count, *rest = run
        overrides = rest[0] if rest else {}
        state_id = RAW_STATE_BY_NAME[state] if isinstance(state, str) else state
        for i in range(count):
            frames.append(Frame(
                character=character,
                port=0,
                direction=Direction.from_facing(overrides.get("facing", 1.0)),
                velocity=Vector(overrides.get("vx", 0.0), overrides.get("vy", 0.0)),
                hit_velocity=Vector(0.0, 0.0),
                position=Vector(overrides.get("x", 0.0), overrides.get("y", 0.0)),
                state=state_id,
                anim_frame=float(i),
            ))
    return frames


def fake_port(states: list[int], character: int = CHAR, vx: float = 0.0):
    """A peppi_py-shaped port with leader.post arrays for the given states."""
    n = len(states)

    def floats(value):
        return pa.array([value] * n, type=pa.float32())

    post = SimpleNamespace(
        state=pa.array(states, type=pa.uint16()),
        character=pa.array([character] * n, type=pa.uint8()),
        position=SimpleNamespace(x=floats(0.0), y=floats(10.0)),
        direction=floats(1.0),
        state_age=pa.array([float(i) for i in range(n)], type=pa.float32()),
        airborne=pa.array([False] * n),
        velocities=SimpleNamespace(
            self_x_air=floats(0.0),
            self_y=floats(0.0),
            knockback_x=floats(0.0),
            knockback_y=floats(0.0),
            self_x_ground=floats(vx),
        ),
    )
    return SimpleNamespace(leader=SimpleNamespace(post=post))


def fake_player(port: int, character: int, costume: int = 0):
    return SimpleNamespace(
        port=SimpleNamespace(value=port), character=character, costume=costume
    )


def fake_game(players, ports=None, stage: int = 31, n_frames: int = 0):
    """A stand-in for read_slippi()'s result: start info plus optional frames."""
    frames = None
    if ports is not None:
        frames = SimpleNamespace(
            id=pa.array(list(range(-123, -123 + n_frames)), type=pa.int32()),
            ports=ports,
        )
    return SimpleNamespace(
        start=SimpleNamespace(stage=stage, players=players),
        frames=frames,
    )


@pytest.fixture
def standing():
    """Eight frames of standing still."""
    return make_frames(("WAIT", 8))
