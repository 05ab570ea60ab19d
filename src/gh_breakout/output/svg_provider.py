"""SVG output provider."""

from ..game.timeline import SimulationTimeline
from ._svg_timeline_encoder import encode_svg_timeline_sequence
from .base import OutputProvider


class SvgOutputProvider(OutputProvider):
    """Output provider for animated timeline SVG format."""

    def encode(self, timeline: SimulationTimeline) -> bytes:
        if not isinstance(timeline, SimulationTimeline):
            raise TypeError(
                "SVG output only supports simulation timelines "
                f"(got {type(timeline).__name__})"
            )
        if not timeline.frames:
            return b""
        return encode_svg_timeline_sequence(timeline)
