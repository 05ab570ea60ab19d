"""Shared animation orchestration used by the CLI."""

from .game.bricks import build_bricks
from .game.config import DEFAULT_CONFIG, GameConfig
from .game.layout import BoardLayout
from .game.render_context import RenderContext
from .game.simulator import Simulator
from .game.timeline import SimulationTimeline
from .github_client import ContributionData
from .output import resolve_output_provider
from .output.base import OutputProvider


def build_timeline(
    data: ContributionData,
    context: RenderContext,
    *,
    ghost_bricks: bool = True,
    config: GameConfig = DEFAULT_CONFIG,
) -> SimulationTimeline:
    """Lay out the board for the contribution data and simulate a full game."""
    layout = BoardLayout.for_columns(len(data["weeks"]), config)
    bricks = build_bricks(data, context, config)
    simulator = Simulator(
        bricks,
        layout.width,
        layout.height,
        layout.paddle_y,
        ghost_bricks,
        config,
    )
    return SimulationTimeline(
        frames=tuple(simulator.run()),
        bricks=tuple(bricks),
        layout=layout,
        config=config,
        context=context,
        ghost_bricks=ghost_bricks,
    )


def encode_animation(
    data: ContributionData,
    output_path: str,
    *,
    context: RenderContext,
    ghost_bricks: bool = True,
    config: GameConfig = DEFAULT_CONFIG,
    provider: OutputProvider | None = None,
) -> bytes:
    """Encode animation bytes for the given theme and output path."""
    target_provider = provider or resolve_output_provider(output_path)
    timeline = build_timeline(data, context, ghost_bricks=ghost_bricks, config=config)
    return target_provider.encode(timeline)
