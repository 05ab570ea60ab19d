"""Frame snapshots handed from the simulator to the output encoders."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .bricks import Brick, BrickStatus
from .config import GameConfig
from .layout import BoardLayout
from .render_context import RenderContext

if TYPE_CHECKING:
    from .game_state import GameState


@dataclass(frozen=True)
class FrameState:
    ball_x: float
    ball_y: float
    paddle_x: float
    bricks: tuple[BrickStatus, ...]


@dataclass(frozen=True)
class SimulationTimeline:
    """A finished simulation plus everything needed to draw it."""

    frames: tuple[FrameState, ...]
    bricks: tuple[Brick, ...]
    layout: BoardLayout
    config: GameConfig
    context: RenderContext
    ghost_bricks: bool

    @property
    def frame_duration(self) -> float:
        """Seconds between two retained frames."""
        return self.config.seconds_per_frame * self.config.animate_step

    @property
    def duration(self) -> float:
        """Seconds the whole animation lasts before looping."""
        return len(self.frames) * self.frame_duration


def snapshot_frame(game_state: "GameState") -> FrameState:
    """Build an immutable snapshot from the current game state."""
    return FrameState(
        ball_x=game_state.ball.x,
        ball_y=game_state.ball.y,
        paddle_x=game_state.paddle.x,
        bricks=tuple(brick.status for brick in game_state.bricks),
    )
