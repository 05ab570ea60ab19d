"""Immutable simulation geometry and timing."""

from dataclasses import dataclass

from ..constants import (
    ANIMATE_STEP,
    BALL_LAUNCH_ANGLE,
    BALL_RADIUS,
    BALL_SPEED,
    BALL_START_OFFSET,
    BRICK_GAP,
    BRICK_RADIUS,
    BRICK_SIZE,
    DEFAULT_FPS,
    MAX_FRAMES,
    NUM_DAYS,
    PADDING,
    PADDLE_BRICK_GAP,
    PADDLE_HEIGHT,
    PADDLE_RADIUS,
    PADDLE_WIDTH,
)


@dataclass(frozen=True)
class GameConfig:
    """Geometry, speeds and limits shared by the simulator and the encoders."""

    padding: float = PADDING
    rows: int = NUM_DAYS
    brick_size: float = BRICK_SIZE
    brick_gap: float = BRICK_GAP
    brick_radius: float = BRICK_RADIUS
    paddle_width: float = PADDLE_WIDTH
    paddle_height: float = PADDLE_HEIGHT
    paddle_radius: float = PADDLE_RADIUS
    paddle_brick_gap: float = PADDLE_BRICK_GAP
    ball_radius: float = BALL_RADIUS
    ball_speed: float = BALL_SPEED
    launch_angle: float = BALL_LAUNCH_ANGLE
    ball_start_offset: float = BALL_START_OFFSET
    fps: int = DEFAULT_FPS
    animate_step: int = ANIMATE_STEP
    max_frames: int = MAX_FRAMES

    def __post_init__(self) -> None:
        if self.fps <= 0:
            raise ValueError(f"fps must be positive (got {self.fps})")
        if self.animate_step <= 0:
            raise ValueError(f"animate_step must be positive (got {self.animate_step})")
        if self.max_frames <= 0:
            raise ValueError(f"max_frames must be positive (got {self.max_frames})")

    @property
    def seconds_per_frame(self) -> float:
        return 1.0 / self.fps

    @property
    def cell_step(self) -> float:
        """Distance between the origins of two neighbouring bricks."""
        return self.brick_size + self.brick_gap

    def get_cell_position(self, column: int, row: int) -> tuple[float, float]:
        """Top-left pixel position of the brick at a calendar cell."""
        return (
            column * self.cell_step + self.padding,
            row * self.cell_step + self.padding,
        )


DEFAULT_CONFIG = GameConfig()
