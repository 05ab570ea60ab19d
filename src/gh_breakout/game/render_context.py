"""Rendering configuration and theming."""

from dataclasses import dataclass
from typing import Sequence

from ..constants import (
    DARK_BACKGROUND_COLOR,
    DEFAULT_BALL_COLOR,
    DEFAULT_PADDLE_COLOR,
    GITHUB_DARK_PALETTE,
    GITHUB_LIGHT_PALETTE,
    LIGHT_BACKGROUND_COLOR,
)

PALETTE_SIZE = len(GITHUB_LIGHT_PALETTE)


@dataclass(frozen=True)
class RenderContext:
    """Colors used to draw bricks, paddle and ball.

    Bricks are keyed by palette index: the API reports light-theme colors, and
    a day's index in ``GITHUB_LIGHT_PALETTE`` selects the same slot in
    ``brick_colors``.
    """

    brick_colors: tuple[str, ...]
    paddle_color: str = DEFAULT_PADDLE_COLOR
    ball_color: str = DEFAULT_BALL_COLOR
    background_color: str = LIGHT_BACKGROUND_COLOR

    def __post_init__(self) -> None:
        if len(self.brick_colors) != PALETTE_SIZE:
            raise ValueError(
                f"Brick palette needs exactly {PALETTE_SIZE} colors "
                f"(got {len(self.brick_colors)})"
            )

    @classmethod
    def lightmode(cls) -> "RenderContext":
        return cls(brick_colors=GITHUB_LIGHT_PALETTE)

    @classmethod
    def darkmode(cls) -> "RenderContext":
        return cls(brick_colors=GITHUB_DARK_PALETTE, background_color=DARK_BACKGROUND_COLOR)

    @classmethod
    def custom(
        cls,
        brick_colors: Sequence[str] | None = None,
        paddle_color: str | None = None,
        ball_color: str | None = None,
    ) -> "RenderContext":
        """Build a theme from user colors, falling back to the light defaults."""
        return cls(
            brick_colors=tuple(brick_colors) if brick_colors else GITHUB_LIGHT_PALETTE,
            paddle_color=paddle_color or DEFAULT_PADDLE_COLOR,
            ball_color=ball_color or DEFAULT_BALL_COLOR,
        )

    @property
    def base_color(self) -> str:
        """Color of an empty day, also used for emptied ghost bricks."""
        return self.brick_colors[0]

    def palette_index(self, day_color: str) -> int:
        """Palette slot of a day color reported by GitHub; unknown colors map to 0."""
        lowered = day_color.lower()
        for index, color in enumerate(GITHUB_LIGHT_PALETTE):
            if color.lower() == lowered:
                return index
        return 0

    def color_class(self, day_color: str) -> str:
        return f"c{self.palette_index(day_color)}"

    def color_for_class(self, color_class: str) -> str:
        index = int(color_class.removeprefix("c"))
        if 0 <= index < len(self.brick_colors):
            return self.brick_colors[index]
        return self.base_color
