"""Forward-only cursor over one player's frames, used by the segmenter."""

from dataclasses import dataclass
from typing import Callable, Iterator, Sequence

from melee_actions.actions import Action, HighLevelAction
from melee_actions.classify import actionable_state, broad_state
from melee_actions.frames import Frame, Vector
from melee_actions.states import ActionableState, BroadState


@dataclass(frozen=True)
class ActionOrigin:
    """Snapshot of the frame an action starts on.

    Only FrameCursor.start_action() creates these, and finish_action() needs
    one, so an action cannot be finished without having been started.
    """

    frame: int
    start_state: BroadState
    actionable_state: ActionableState
    position: Vector
    velocity: Vector


class FrameCursor:
    """Zero-copy view over a frame sequence with a moving position.

    Nothing is ever sliced or copied; all lookahead reads the underlying
    sequence in place.
    """

    def __init__(self, frames: Sequence[Frame]):
        self._frames = frames
        self._pos = 0

    @property
    def position(self) -> int:
        """Index of the next unconsumed frame."""
        return self._pos

    @property
    def finished(self) -> bool:
        return self._pos >= len(self._frames)

    def peek(self) -> int | None:
        frame = self.peek_frame()
        return frame.state if frame is not None else None

    def peek_frame(self) -> Frame | None:
        if self.finished:
            return None
        return self._frames[self._pos]

    def peek_n(self, n: int) -> Iterator[int]:
        """Lazily yield up to ``n`` upcoming states without consuming them."""
        end = min(self._pos + n, len(self._frames))
        return (self._frames[i].state for i in range(self._pos, end))

    def next(self) -> int | None:
        frame = self.next_frame()
        return frame.state if frame is not None else None

    def next_frame(self) -> Frame | None:
        if self.finished:
            return None
        frame = self._frames[self._pos]
        self._pos += 1
        return frame

    def skip_while(self, pred: Callable[[int], bool]) -> None:
        """Consume frames while the next frame's state satisfies ``pred``."""
        frames = self._frames
        while self._pos < len(frames) and pred(frames[self._pos].state):
            self._pos += 1

    def skip_while_at_most(self, pred: Callable[[int], bool], max_frames: int) -> int:
        """Like skip_while, but stop after ``max_frames``. Returns the count consumed."""
        start = self._pos
        frames = self._frames
        limit = min(start + max_frames, len(frames))
        while self._pos < limit and pred(frames[self._pos].state):
            self._pos += 1
        return self._pos - start

    def skip_broad_state(self, state: BroadState) -> None:
        self.skip_while(lambda st: broad_state(st) is state)

    # ------------------------------------------------------------------
    # Action building
    # ------------------------------------------------------------------

    def start_action(self) -> ActionOrigin:
        """Snapshot the current frame as the origin of a new action.

        Raises:
            ValueError: if the cursor is finished or the current frame is not
                one an action can start on. Callers check actionable_state()
                first.
        """
        frame = self.peek_frame()
        if frame is None:
            raise ValueError("start_action() called on a finished cursor")
        actionable = actionable_state(frame.state)
        if actionable is None:
            raise ValueError(
                f"frame {self._pos} (state {frame.state}) cannot start an action"
            )
        return ActionOrigin(
            frame=self._pos,
            start_state=broad_state(frame.state),
            actionable_state=actionable,
            position=frame.position,
            velocity=frame.velocity,
        )

    def finish_action(self, origin: ActionOrigin, action: HighLevelAction) -> Action:
        """Close the action started at ``origin`` at the current position."""
        return Action(
            start_state=origin.start_state,
            actionable_state=origin.actionable_state,
            action_taken=action,
            frame_start=origin.frame,
            frame_end=self._pos,
            initial_position=origin.position,
            initial_velocity=origin.velocity,
        )
