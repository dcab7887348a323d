"""Pair an opponent's actions with the player's responses to them.

Both players' action lists are walked once, side by side. Each pair links
an opponent action to the first player action that starts strictly after it.
"""

from typing import NamedTuple, Sequence

import pandas as pd

from melee_actions.actions import Action


class Interaction(NamedTuple):
    opponent_initiation: Action
    player_response: Action


def align_indices(
    player_actions: Sequence[Action],
    opponent_actions: Sequence[Action],
) -> list[tuple[int, int]]:
    """Two-pointer alignment, as (opponent_index, player_index) pairs.

    Each pair is an opponent action and the first player action starting
    strictly after it. Once a pair is recorded, opponent actions starting no
    later than that response are skipped, so every response is used at most
    once and the next pair begins after it.
    """
    pairs = []
    if not player_actions or not opponent_actions:
        return pairs

    i = j = 0
    n_opp, n_player = len(opponent_actions), len(player_actions)
    while True:
        initiation = opponent_actions[i]
        while player_actions[j].frame_start <= initiation.frame_start:
            j += 1
            if j == n_player:
                return pairs
        response = player_actions[j]

        pairs.append((i, j))

        while opponent_actions[i].frame_start <= response.frame_start:
            i += 1
            if i == n_opp:
                return pairs


def align(
    player_actions: Sequence[Action],
    opponent_actions: Sequence[Action],
) -> list[Interaction]:
    """Pair opponent initiations with player responses.

    Args:
        player_actions: The player's actions, ascending by frame_start.
        opponent_actions: The opponent's actions, ascending by frame_start.

    Returns:
        Interactions referencing the input Actions (nothing is copied).
        Empty if either input is empty.
    """
    return [
        Interaction(opponent_actions[i], player_actions[j])
        for i, j in align_indices(player_actions, opponent_actions)
    ]


def interactions_to_dataframe(
    player_actions: Sequence[Action],
    opponent_actions: Sequence[Action],
) -> pd.DataFrame:
    """One row per aligned pair, with the reaction time in frames.

    Returns:
        DataFrame with columns opponent_index, player_index, initiation,
        response, initiation_frame, response_frame, reaction_frames.
    """
    rows = []
    for i, j in align_indices(player_actions, opponent_actions):
        initiation = opponent_actions[i]
        response = player_actions[j]
        rows.append({
            "opponent_index": i,
            "player_index": j,
            "initiation": str(initiation.action_taken),
            "response": str(response.action_taken),
            "initiation_frame": initiation.frame_start,
            "response_frame": response.frame_start,
            "reaction_frames": response.frame_start - initiation.frame_start,
        })
    columns = [
        "opponent_index", "player_index", "initiation", "response",
        "initiation_frame", "response_frame", "reaction_frames",
    ]
    return pd.DataFrame(rows, columns=columns)
