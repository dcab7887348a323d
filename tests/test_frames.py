"""Tests for melee_actions.frames."""

import numpy as np
import pandas as pd

from melee_actions.frames import extract_player_frames, frames_from_dataframe
from melee_actions.states import Direction

from .conftest import fake_game, fake_player, fake_port


def test_frames_from_dataframe_velocity_components():
    df = pd.DataFrame({
        "frame": [-123, -122],
        "state": [14, 29],
        "character": [1, 1],
        "position_x": [1.0, 2.0],
        "position_y": [0.0, 5.0],
        "direction": [-1.0, 1.0],
        "state_age": [3.0, 0.0],
        "airborne": [False, True],
        "velocity_self_x_air": [9.0, -0.5],
        "velocity_self_y": [0.0, 2.5],
        "velocity_self_x_ground": [1.25, 9.0],
        "velocity_knockback_x": [0.0, 4.0],
        "velocity_knockback_y": [0.0, -1.0],
        "port": [2, 2],
    })
    grounded, airborne = frames_from_dataframe(df)

    assert grounded.state == 14
    assert grounded.direction is Direction.LEFT
    assert grounded.velocity.x == 1.25  # ground component on the ground
    assert grounded.anim_frame == 3.0
    assert grounded.port == 2

    assert airborne.direction is Direction.RIGHT
    assert airborne.velocity == (-0.5, 2.5)
    assert airborne.hit_velocity == (4.0, -1.0)
    assert airborne.position == (2.0, 5.0)


def test_frames_from_dataframe_missing_columns():
    df = pd.DataFrame({
        "state": [14.0, np.nan],
        "character": [2, 2],
        "position_x": [0.0, 0.0],
        "position_y": [0.0, 0.0],
        "direction": [1.0, 1.0],
    })
    frames = frames_from_dataframe(df)
    assert [f.state for f in frames] == [14, 0]
    assert all(f.velocity == (0.0, 0.0) for f in frames)
    assert all(f.hit_velocity == (0.0, 0.0) for f in frames)


def test_frames_from_empty_dataframe():
    assert frames_from_dataframe(pd.DataFrame()) == []


def test_extract_player_frames_columns():
    game = fake_game(
        [fake_player(0, 2)], ports=[fake_port([14, 14, 29], vx=0.75)], n_frames=3
    )
    df = extract_player_frames(game, 0)
    for col in ["frame", "state", "character", "position_x", "position_y", "direction",
                "state_age", "airborne", "velocity_self_x_air", "velocity_self_y",
                "velocity_self_x_ground", "velocity_knockback_x", "velocity_knockback_y",
                "port"]:
        assert col in df.columns, f"Missing column: {col}"
    assert list(df["frame"]) == [-123, -122, -121]
    assert list(df["state"]) == [14, 14, 29]

    frames = frames_from_dataframe(df)
    assert len(frames) == 3
    assert frames[0].velocity.x == 0.75


def test_extract_player_frames_empty_slot():
    game = fake_game([fake_player(0, 2)], ports=[None], n_frames=0)
    assert extract_player_frames(game, 0).empty
