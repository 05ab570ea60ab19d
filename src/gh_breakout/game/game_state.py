"""Game state management for the ball, paddle and bricks."""

import math
from dataclasses import replace
from typing import Sequence

from .bricks import Brick
from .collision import circle_rect_collision
from .config import GameConfig


class Ball:
    """Ball moving at constant speed inside the padded playfield."""

    def __init__(self, x: float, y: float, speed: float, angle: float):
        self.x = x
        self.y = y
        self.velocity_x = speed * math.cos(angle)
        self.velocity_y = speed * math.sin(angle)


class Paddle:
    """Paddle that follows the ball horizontally; its y is fixed by the layout."""

    def __init__(self, x: float, y: float):
        self.x = x
        self.y = y

    def track(self, ball_x: float, width: float, config: GameConfig) -> None:
        """Center under the ball, clamped inside the padding. No inertia."""
        self.x = max(
            config.padding,
            min(width - config.padding - config.paddle_width, ball_x - config.paddle_width / 2),
        )


class GameState:
    """Manages the current state of one simulation run."""

    def __init__(
        self,
        bricks: Sequence[Brick],
        width: float,
        height: float,
        paddle_y: float,
        ghost_bricks: bool,
        config: GameConfig,
    ):
        """
        Initialize game state with fresh copies of the bricks.

        Args:
            bricks: Bricks to play against (left untouched)
            width: Canvas width
            height: Canvas height
            paddle_y: Top edge of the paddle
            ghost_bricks: Whether bricks without commits are pass-through decoration
            config: Geometry and speeds
        """
        self.width = width
        self.height = height
        self.ghost_bricks = ghost_bricks
        self.config = config
        self.bricks: list[Brick] = [replace(brick) for brick in bricks]
        self.ball = Ball(
            x=width / 2,
            y=height - config.ball_start_offset,
            speed=config.ball_speed,
            angle=config.launch_angle,
        )
        self.paddle = Paddle(x=(width - config.paddle_width) / 2, y=paddle_y)
        self._remaining = sum(1 for brick in self.bricks if brick.is_breakable(ghost_bricks))

    def is_complete(self) -> bool:
        """Check if every breakable brick has been cleared."""
        return self._remaining == 0

    def animate(self) -> None:
        """Advance the game by one frame."""
        config = self.config
        ball = self.ball
        radius = config.ball_radius

        self.paddle.track(ball.x, self.width, config)

        ball.x += ball.velocity_x
        ball.y += ball.velocity_y

        # Walls are tested against the position one more step ahead.
        next_x = ball.x + ball.velocity_x
        if next_x > self.width - config.padding - radius or next_x < config.padding + radius:
            ball.velocity_x = -ball.velocity_x

        if ball.y + ball.velocity_y < config.padding + radius:
            ball.velocity_y = -ball.velocity_y

        self._bounce_off_paddle()
        self._hit_first_brick()

        ball.x = max(config.padding + radius, min(self.width - config.padding - radius, ball.x))
        ball.y = max(config.padding + radius, min(self.height - config.padding - radius, ball.y))

    def _bounce_off_paddle(self) -> None:
        ball = self.ball
        radius = self.config.ball_radius
        paddle_y = self.paddle.y
        next_bottom = ball.y + ball.velocity_y + radius
        if ball.velocity_y > 0 and next_bottom >= paddle_y and ball.y + radius <= paddle_y:
            ball.velocity_y = -abs(ball.velocity_y)
            # Sit on the paddle edge instead of sinking into it
            ball.y = paddle_y - radius

    def _hit_first_brick(self) -> None:
        """Clear the first overlapping brick in list order; at most one per frame."""
        ball = self.ball
        config = self.config
        for brick in self.bricks:
            if not brick.is_breakable(self.ghost_bricks):
                continue
            if circle_rect_collision(
                ball.x,
                ball.y,
                config.ball_radius,
                brick.x,
                brick.y,
                config.brick_size,
                config.brick_size,
            ):
                ball.velocity_y = -ball.velocity_y
                brick.status = "hidden"
                self._remaining -= 1
                break
