"""Bricks built from contribution calendar days."""

from dataclasses import dataclass
from typing import Literal

from ..github_client import ContributionData
from .config import DEFAULT_CONFIG, GameConfig
from .render_context import RenderContext

BrickStatus = Literal["visible", "hidden"]


@dataclass
class Brick:
    """One calendar day on the board. Only ``status`` changes during a game."""

    x: float
    y: float
    color_class: str
    has_commit: bool = True
    status: BrickStatus = "visible"

    def is_breakable(self, ghost_bricks: bool) -> bool:
        """Whether the ball can still clear this brick.

        With ghost bricks enabled, days without contributions are decoration
        the ball passes through.
        """
        return self.status == "visible" and (not ghost_bricks or self.has_commit)


def build_bricks(
    contribution_data: ContributionData,
    context: RenderContext,
    config: GameConfig = DEFAULT_CONFIG,
) -> list[Brick]:
    """
    Create one brick per populated day, column by column.

    Args:
        contribution_data: The GitHub contribution data
        context: Theme used to resolve color classes
        config: Geometry used to position bricks

    Returns:
        Bricks in week-major, weekday-minor order
    """
    bricks: list[Brick] = []
    for week_idx, week in enumerate(contribution_data["weeks"]):
        days = week["days"]
        for day_idx in range(config.rows):
            day = days[day_idx] if day_idx < len(days) else None
            if day is None:
                continue
            x, y = config.get_cell_position(week_idx, day_idx)
            bricks.append(
                Brick(
                    x=x,
                    y=y,
                    color_class=context.color_class(day["color"]),
                    has_commit=day["count"] > 0,
                )
            )
    return bricks
