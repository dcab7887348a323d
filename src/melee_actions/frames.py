"""Per-frame player records, and their extraction from peppi_py replays.

The segmenter only ever reads Frame records. Replays are first flattened into
a per-frame DataFrame (extract_player_frames), which frames_from_dataframe()
then turns into Frames; any DataFrame with the same columns works, which is
how tests and notebooks feed hand-built data in.
"""

from dataclasses import dataclass
from typing import NamedTuple

import numpy as np
import pandas as pd
import pyarrow as pa

from melee_actions.states import Direction


class Vector(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True)
class Frame:
    """One player's post-frame state on a single game frame."""

    character: int          # per-frame character ID (see enums.FRAME_CHARACTER_NAMES)
    port: int
    direction: Direction
    velocity: Vector
    hit_velocity: Vector
    position: Vector
    state: int              # raw action state ID
    anim_frame: float


def _arrow_to_numpy(arr: pa.Array) -> np.ndarray:
    """Convert a PyArrow array to numpy, handling nulls."""
    if arr.null_count == 0:
        return arr.to_numpy(zero_copy_only=False)
    # For arrays with nulls, convert to pandas (which handles nullable dtypes)
    return arr.to_pandas().values


# Velocity components decoded from post-frame data (Slippi 3.5.0+)
VELOCITY_FIELDS = ["self_x_air", "self_y", "knockback_x", "knockback_y", "self_x_ground"]


def extract_player_frames(game, port_slot: int) -> pd.DataFrame:
    """Extract the fields Frame records are built from for one player.

    Args:
        game: A peppi-py game object from read_slippi().
        port_slot: Index of the player in game.frames.ports.

    Returns:
        DataFrame with one row per frame: frame, state, character, position_x,
        position_y, direction, state_age, airborne, velocity_* (when the
        replay carries velocities) and port. Empty if the slot has no data.
    """
    port_data = game.frames.ports[port_slot]
    if port_data is None or port_data.leader is None:
        return pd.DataFrame()

    post = port_data.leader.post
    data = {"frame": _arrow_to_numpy(game.frames.id)}

    data["state"] = _arrow_to_numpy(post.state)
    data["character"] = _arrow_to_numpy(post.character)
    data["position_x"] = _arrow_to_numpy(post.position.x)
    data["position_y"] = _arrow_to_numpy(post.position.y)
    data["direction"] = _arrow_to_numpy(post.direction)
    if post.state_age is not None:
        data["state_age"] = _arrow_to_numpy(post.state_age)
    if post.airborne is not None:
        data["airborne"] = _arrow_to_numpy(post.airborne)

    # Older replays leave velocities out entirely
    if post.velocities is not None:
        for vfield in VELOCITY_FIELDS:
            arr = getattr(post.velocities, vfield, None)
            if arr is not None:
                data[f"velocity_{vfield}"] = _arrow_to_numpy(arr)

    df = pd.DataFrame(data)
    df["port"] = port_slot
    return df


def _column(df: pd.DataFrame, name: str, default: float) -> np.ndarray:
    if name not in df.columns:
        return np.full(len(df), default, dtype=float)
    return df[name].fillna(default).to_numpy(dtype=float)


def frames_from_dataframe(df: pd.DataFrame) -> list[Frame]:
    """Convert a per-frame DataFrame into Frame records, in row order.

    Missing velocity columns read as 0.0 and a missing state as 0. Horizontal
    self-velocity comes from the ground component on grounded frames and the
    air component otherwise; hit velocity is the knockback vector.
    """
    if df.empty:
        return []

    vx_air = _column(df, "velocity_self_x_air", 0.0)
    if "airborne" in df.columns and "velocity_self_x_ground" in df.columns:
        grounded = ~df["airborne"].fillna(True).astype(bool).to_numpy()
        vx = np.where(grounded, _column(df, "velocity_self_x_ground", 0.0), vx_air)
    else:
        vx = vx_air

    columns = zip(
        _column(df, "character", 0).astype(int),
        _column(df, "port", 0).astype(int),
        _column(df, "direction", 1.0),
        vx,
        _column(df, "velocity_self_y", 0.0),
        _column(df, "velocity_knockback_x", 0.0),
        _column(df, "velocity_knockback_y", 0.0),
        _column(df, "position_x", 0.0),
        _column(df, "position_y", 0.0),
        _column(df, "state", 0).astype(int),
        _column(df, "state_age", 0.0),
    )
    return [
        Frame(
            character=int(char),
            port=int(port),
            direction=Direction.from_facing(facing),
            velocity=Vector(float(vel_x), float(vel_y)),
            hit_velocity=Vector(float(kb_x), float(kb_y)),
            position=Vector(float(pos_x), float(pos_y)),
            state=int(state),
            anim_frame=float(age),
        )
        for char, port, facing, vel_x, vel_y, kb_x, kb_y, pos_x, pos_y, state, age in columns
    ]
