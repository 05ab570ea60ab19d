"""Keyframe tracks and brick transitions derived from a frame history."""

from dataclasses import dataclass
from typing import Iterable, Literal, Sequence

from ..game.bricks import Brick, BrickStatus
from ..game.render_context import RenderContext
from ..game.timeline import FrameState
from ._svg_shared import _tl_num_key_time


@dataclass(frozen=True)
class BrickTransition:
    """A single step switch from the brick's initial look to its cleared look."""

    frame_index: int
    time: float
    attribute: Literal["opacity", "fill"]
    start_value: str
    end_value: str

    @property
    def key_times(self) -> tuple[float, float, float, float]:
        # The repeated control point makes the switch instantaneous.
        return (0.0, self.time, self.time, 1.0)

    @property
    def values(self) -> tuple[str, str, str, str]:
        return (self.start_value, self.start_value, self.end_value, self.end_value)


@dataclass(frozen=True)
class TimelineEncoding:
    duration: float
    ball_x: tuple[float, ...]
    ball_y: tuple[float, ...]
    paddle_x: tuple[float, ...]
    brick_transitions: tuple[BrickTransition | None, ...]


def encode_timeline(
    frames: Sequence[FrameState],
    bricks: Sequence[Brick],
    ghost_bricks: bool,
    context: RenderContext,
    frame_duration: float,
) -> TimelineEncoding:
    """
    Turn a frame history into keyframe tracks.

    Args:
        frames: Snapshots in simulation order
        bricks: Bricks in the order their statuses appear in each snapshot
        ghost_bricks: Cleared bricks turn to the base color instead of vanishing
        context: Theme providing the before/after colors for ghost bricks
        frame_duration: Seconds between two snapshots

    Returns:
        Per-frame ball/paddle values and one optional transition per brick
    """
    transitions = []
    for index, brick in enumerate(bricks):
        cleared_at = _tl_first_cleared_index(frame.bricks[index] for frame in frames)
        if cleared_at is None:
            transitions.append(None)
            continue
        transitions.append(
            _tl_brick_transition(brick, cleared_at, len(frames), ghost_bricks, context)
        )

    return TimelineEncoding(
        duration=len(frames) * frame_duration,
        ball_x=tuple(frame.ball_x for frame in frames),
        ball_y=tuple(frame.ball_y for frame in frames),
        paddle_x=tuple(frame.paddle_x for frame in frames),
        brick_transitions=tuple(transitions),
    )


def transition_time(frame_index: int, frame_count: int) -> float:
    """Normalized time of a frame; a single-frame history has everything at 0."""
    if frame_count <= 1:
        return 0.0
    return frame_index / (frame_count - 1)


def _tl_first_cleared_index(statuses: Iterable[BrickStatus]) -> int | None:
    for index, status in enumerate(statuses):
        if status != "visible":
            return index
    return None


def _tl_brick_transition(
    brick: Brick,
    frame_index: int,
    frame_count: int,
    ghost_bricks: bool,
    context: RenderContext,
) -> BrickTransition:
    time = transition_time(frame_index, frame_count)
    if ghost_bricks:
        return BrickTransition(
            frame_index=frame_index,
            time=time,
            attribute="fill",
            start_value=context.color_for_class(brick.color_class),
            end_value=context.base_color,
        )
    return BrickTransition(
        frame_index=frame_index,
        time=time,
        attribute="opacity",
        start_value="1",
        end_value="0",
    )


def _tl_key_times(key_times: Sequence[float]) -> str:
    return ";".join(_tl_num_key_time(value) for value in key_times)


def _tl_has_distinct_floats(values: Sequence[float], eps: float = 1e-9) -> bool:
    if not values:
        return False
    first = values[0]
    return any(abs(value - first) > eps for value in values[1:])
