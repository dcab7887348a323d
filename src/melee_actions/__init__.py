"""Melee replay action segmentation and interaction alignment."""

from melee_actions.action_states import RAW_STATE_BY_NAME, RAW_STATE_NAMES, RAW_STATES, state_name
from melee_actions.actions import (
    Action,
    ActionKind,
    HighLevelAction,
    actions_to_dataframe,
)
from melee_actions.classify import actionable_state, attack_type, broad_state, ledge_action
from melee_actions.cursor import ActionOrigin, FrameCursor
from melee_actions.enums import (
    COSTUME_NAMES,
    FRAME_CHARACTER_NAMES,
    LEGAL_STAGES,
    STAGE_NAMES,
    START_CHARACTER_NAMES,
    character_name,
    costume_name,
    frame_character_name,
    stage_name,
)
from melee_actions.frames import Frame, Vector, extract_player_frames, frames_from_dataframe
from melee_actions.interactions import Interaction, align, align_indices, interactions_to_dataframe
from melee_actions.parse import (
    Game,
    MatchInfo,
    Port,
    parse_game,
    read_game,
    read_info_in_dir,
    read_match_info,
)
from melee_actions.segment import (
    JUMP_VELOCITY_THRESHOLDS,
    ActionSegmenter,
    Courtesy,
    CourtesyOutcome,
    DroppedSpan,
    segment,
    skip_courtesy,
)
from melee_actions.states import (
    ActionableState,
    AirAttack,
    BroadState,
    Direction,
    GroundAttack,
    LedgeAction,
)
