"""Canvas dimensions derived from the calendar size."""

from dataclasses import dataclass

from .config import DEFAULT_CONFIG, GameConfig


@dataclass(frozen=True)
class BoardLayout:
    width: float
    height: float
    paddle_y: float

    @classmethod
    def for_columns(cls, column_count: int, config: GameConfig = DEFAULT_CONFIG) -> "BoardLayout":
        """
        Size the canvas so the brick grid sits flush inside the padding.

        Args:
            column_count: Number of calendar weeks
            config: Geometry to lay out

        Returns:
            Layout with the paddle placed below the last brick row
        """
        width = column_count * config.cell_step + config.padding * 2 - config.brick_gap
        bricks_height = config.rows * config.cell_step - config.brick_gap
        paddle_y = config.padding + bricks_height + config.paddle_brick_gap
        height = paddle_y + config.paddle_height + config.padding
        return cls(width=width, height=height, paddle_y=paddle_y)
