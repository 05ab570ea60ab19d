"""Base class for output format providers."""

from abc import ABC, abstractmethod
from io import BytesIO

from ..game.raster_animation import generate_raster_frames
from ..game.timeline import SimulationTimeline


class OutputProvider(ABC):
    """Abstract base class for output format providers."""

    def __init__(self, path: str = ""):
        """
        Initialize the provider with an output file path.

        Args:
            path: Path to the output file
        """
        self.path = path

    @abstractmethod
    def encode(self, timeline: SimulationTimeline) -> bytes:
        """
        Encode a finished simulation into the output format.

        Args:
            timeline: Frame history together with its layout and theme

        Returns:
            Encoded output as bytes
        """
        raise NotImplementedError

    def write(self, data: bytes) -> None:
        """
        Write encoded data to a file.

        Args:
            data: Encoded data to write
        """
        if not self.path:
            raise ValueError("Output path not set")
        with open(self.path, "wb") as f:
            f.write(data)


class PillowSequenceOutputProvider(OutputProvider, ABC):
    """Template output provider for Pillow-supported animated image formats."""

    @property
    @abstractmethod
    def output_format(self) -> str:
        """Pillow format identifier (for example, ``gif`` or ``webp``)."""
        raise NotImplementedError

    def encode(self, timeline: SimulationTimeline) -> bytes:
        frame_list = list(generate_raster_frames(timeline))
        if not frame_list:
            return b""

        buffer = BytesIO()
        frame_list[0].save(
            buffer,
            format=self.output_format,
            save_all=True,
            append_images=frame_list[1:],
            duration=max(1, round(timeline.frame_duration * 1000)),
            loop=0,
            **self.save_options,
        )
        return buffer.getvalue()

    @property
    def save_options(self) -> dict[str, object]:
        """Additional Pillow ``save`` kwargs for this format."""
        return {}
