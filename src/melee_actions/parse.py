"""Read .slp replays (via peppi_py) into match info, Frames and Actions.

Only 1v1 replays are supported: every reader returns None for games that do
not have exactly two players. Players are addressed by Port.LOW / Port.HIGH,
the lower and higher of the two occupied controller ports.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Mapping

from peppi_py import read_slippi

from melee_actions.actions import Action
from melee_actions.enums import character_name, costume_name, stage_name
from melee_actions.frames import Frame, extract_player_frames, frames_from_dataframe
from melee_actions.segment import segment

logger = logging.getLogger(__name__)


class Port(Enum):
    LOW = 0
    HIGH = 1


@dataclass(frozen=True)
class MatchInfo:
    stage_id: int
    stage_name: str
    low_port: int
    low_character: str
    low_costume: str
    high_port: int
    high_character: str
    high_costume: str


@dataclass
class Game:
    low_port_frames: list[Frame]
    high_port_frames: list[Frame]
    info: MatchInfo

    def frames(self, port: Port) -> list[Frame]:
        return self.low_port_frames if port is Port.LOW else self.high_port_frames


def _port_number(player) -> int:
    return player.port.value if hasattr(player.port, "value") else player.port


def _two_players(game) -> list[tuple[int, object]] | None:
    """(port_slot, player) for both players, lower port first; None unless 1v1."""
    active = [(i, p) for i, p in enumerate(game.start.players) if p is not None]
    if len(active) != 2:
        return None
    return sorted(active, key=lambda item: _port_number(item[1]))


def _match_info(game, players) -> MatchInfo:
    (_, low), (_, high) = players
    return MatchInfo(
        stage_id=game.start.stage,
        stage_name=stage_name(game.start.stage),
        low_port=_port_number(low),
        low_character=character_name(low.character),
        low_costume=costume_name(low.character, low.costume),
        high_port=_port_number(high),
        high_character=character_name(high.character),
        high_costume=costume_name(high.character, high.costume),
    )


def read_match_info(filepath: str | Path) -> MatchInfo | None:
    """Read stage and player info without decoding frames."""
    game = read_slippi(str(filepath), skip_frames=True)
    players = _two_players(game)
    if players is None:
        return None
    return _match_info(game, players)


def read_info_in_dir(directory: str | Path) -> list[tuple[Path, MatchInfo]]:
    """MatchInfo for every readable 1v1 .slp file directly inside ``directory``.

    Files that fail to parse are logged and skipped.
    """
    directory = Path(directory)
    results = []
    errors = []
    for filepath in sorted(directory.glob("*.slp")):
        if not filepath.is_file():
            continue
        try:
            info = read_match_info(filepath)
        except Exception as e:
            errors.append((filepath.name, str(e)))
            continue
        if info is not None:
            results.append((filepath, info))

    if errors:
        logger.warning("%d files failed to parse in %s:", len(errors), directory)
        for name, err in errors[:10]:
            logger.warning("  %s: %s", name, err)
    return results


def read_game(filepath: str | Path) -> Game | None:
    """Decode a 1v1 replay into both players' Frames plus match info."""
    game = read_slippi(str(filepath))
    players = _two_players(game)
    if players is None:
        return None

    (low_slot, _), (high_slot, _) = players
    return Game(
        low_port_frames=frames_from_dataframe(extract_player_frames(game, low_slot)),
        high_port_frames=frames_from_dataframe(extract_player_frames(game, high_slot)),
        info=_match_info(game, players),
    )


def parse_game(
    filepath: str | Path,
    port: Port,
    jump_thresholds: Mapping[int, float] | None = None,
) -> list[Action] | None:
    """Segment one player of a 1v1 replay into Actions.

    Args:
        filepath: Path to .slp file.
        port: Which of the two players to segment.
        jump_thresholds: Forwarded to segment().

    Returns:
        The player's actions, or None if the replay is not a 1v1.
    """
    game = read_game(filepath)
    if game is None:
        return None
    return segment(game.frames(port), jump_thresholds)
