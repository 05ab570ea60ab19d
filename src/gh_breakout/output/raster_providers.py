"""GIF and WebP output providers."""

from .base import PillowSequenceOutputProvider


class GifOutputProvider(PillowSequenceOutputProvider):
    """Output provider for GIF format.

    GIF delays are stored in hundredths of a second, so 30 fps plays back at
    roughly 33 ms per frame.
    """

    @property
    def output_format(self) -> str:
        return "gif"

    @property
    def save_options(self) -> dict[str, object]:
        return {"optimize": False, "disposal": 1}


class WebPOutputProvider(PillowSequenceOutputProvider):
    """Output provider for lossless animated WebP."""

    @property
    def output_format(self) -> str:
        return "webp"

    @property
    def save_options(self) -> dict[str, object]:
        return {"lossless": True, "quality": 100, "method": 4}
