"""Tests for output providers."""

from dataclasses import replace

import pytest

from gh_breakout.animation_pipeline import build_timeline, encode_animation
from gh_breakout.game import RenderContext, SimulationTimeline
from gh_breakout.game.config import DEFAULT_CONFIG
from gh_breakout.game.raster_animation import generate_raster_frames
from gh_breakout.github_client import ContributionData
from gh_breakout.output import (
    GifOutputProvider,
    SvgOutputProvider,
    WebPOutputProvider,
    output_path_for_format,
    resolve_output_provider,
)

SHORT_CONFIG = replace(DEFAULT_CONFIG, max_frames=12)

SAMPLE_DATA: ContributionData = {
    "username": "testuser",
    "total_contributions": 4,
    "weeks": [
        {"days": [{"color": "#9be9a8", "count": 1, "date": "2024-01-01"}] * 7},
        {"days": [{"color": "#216e39", "count": 3, "date": "2024-01-08"}] * 7},
    ],
}


def create_test_timeline(ghost_bricks: bool = False) -> SimulationTimeline:
    return build_timeline(
        SAMPLE_DATA, RenderContext.lightmode(), ghost_bricks=ghost_bricks, config=SHORT_CONFIG
    )


def test_raster_frames_match_timeline() -> None:
    """Raster adapter should render one image per snapshot at canvas size."""
    timeline = create_test_timeline()

    frames = list(generate_raster_frames(timeline))

    assert len(frames) == len(timeline.frames) == 12
    assert frames[0].size == (57, 242)


def test_gif_provider_encodes_frames() -> None:
    """GifOutputProvider should encode frames to GIF format."""
    result = GifOutputProvider("test_output.gif").encode(create_test_timeline())

    assert result.startswith(b"GIF89")


def test_webp_provider_encodes_frames() -> None:
    """WebPOutputProvider should encode frames to WebP format."""
    result = WebPOutputProvider("test_output.webp").encode(create_test_timeline(ghost_bricks=True))

    # WebP files start with RIFF....WEBP
    assert result.startswith(b"RIFF")
    assert b"WEBP" in result


def test_svg_provider_encodes_timeline() -> None:
    """SvgOutputProvider should encode a timeline into an animated SVG."""
    result = SvgOutputProvider().encode(create_test_timeline())

    assert result.startswith(b"<svg")
    assert b"<animate " in result
    assert b"\n" not in result


def test_svg_provider_empty_timeline() -> None:
    """SvgOutputProvider should return nothing for a timeline without frames."""
    timeline = replace(create_test_timeline(), frames=())

    assert SvgOutputProvider().encode(timeline) == b""


def test_svg_provider_rejects_non_timeline_payloads() -> None:
    provider = SvgOutputProvider()

    with pytest.raises(TypeError, match="SVG output only supports simulation timelines"):
        provider.encode(object())  # type: ignore[arg-type]


def test_provider_write_requires_path(tmp_path) -> None:
    with pytest.raises(ValueError, match="Output path not set"):
        SvgOutputProvider().write(b"<svg/>")

    output_path = tmp_path / "out.svg"
    SvgOutputProvider(str(output_path)).write(b"<svg/>")
    assert output_path.read_bytes() == b"<svg/>"


def test_encode_animation_uses_extension() -> None:
    encoded = encode_animation(
        SAMPLE_DATA, "light.gif", context=RenderContext.lightmode(), config=SHORT_CONFIG
    )

    assert encoded.startswith(b"GIF89")


@pytest.mark.parametrize(
    ("path", "provider_class"),
    [
        ("output.gif", GifOutputProvider),
        ("output.webp", WebPOutputProvider),
        ("output.svg", SvgOutputProvider),
        ("output.SVG", SvgOutputProvider),
        ("output.WEBP", WebPOutputProvider),
    ],
)
def test_resolve_output_provider(path: str, provider_class: type) -> None:
    """resolve_output_provider should pick providers by extension, case-insensitively."""
    assert isinstance(resolve_output_provider(path), provider_class)


def test_resolve_unsupported_format() -> None:
    with pytest.raises(ValueError, match="Unsupported output format"):
        resolve_output_provider("output.mp4")


def test_output_path_for_format() -> None:
    assert output_path_for_format("svg", "output/dark") == "output/dark.svg"
    assert output_path_for_format("GIF", "light") == "light.gif"
    with pytest.raises(ValueError, match="Invalid format"):
        output_path_for_format("png")
