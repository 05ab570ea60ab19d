"""Raster (Pillow) animation frame generators built on top of simulation timelines."""

from typing import Iterator

from PIL import Image

from .renderer import Renderer
from .timeline import SimulationTimeline


def generate_raster_frames(timeline: SimulationTimeline) -> Iterator[Image.Image]:
    """Render raster frame payloads from a simulation timeline."""
    renderer = Renderer(timeline)
    for frame in timeline.frames:
        yield renderer.render_frame(frame)
