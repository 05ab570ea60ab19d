"""Breakout simulation for GitHub contribution visualization."""

from .bricks import Brick, BrickStatus, build_bricks
from .collision import circle_rect_collision
from .config import DEFAULT_CONFIG, GameConfig
from .game_state import Ball, GameState, Paddle
from .layout import BoardLayout
from .raster_animation import generate_raster_frames
from .render_context import RenderContext
from .renderer import Renderer
from .simulator import Simulator, simulate
from .timeline import FrameState, SimulationTimeline, snapshot_frame

__all__ = [
    "Ball",
    "BoardLayout",
    "Brick",
    "BrickStatus",
    "build_bricks",
    "circle_rect_collision",
    "DEFAULT_CONFIG",
    "FrameState",
    "GameConfig",
    "GameState",
    "generate_raster_frames",
    "Paddle",
    "Renderer",
    "RenderContext",
    "SimulationTimeline",
    "simulate",
    "Simulator",
    "snapshot_frame",
]
