"""Timeline/object-based SVG encoder."""

from typing import Sequence

from ..game.bricks import Brick
from ..game.render_context import RenderContext
from ..game.timeline import SimulationTimeline
from ._svg_shared import _tl_minify, _tl_num, _tl_pixel
from ._svg_tracks import (
    BrickTransition,
    TimelineEncoding,
    _tl_has_distinct_floats,
    _tl_key_times,
    encode_timeline,
)


def encode_svg_timeline_sequence(timeline: SimulationTimeline) -> bytes:
    """Encode a simulation timeline into a compact animated SVG.

    Pipeline:
    1. Derive keyframe tracks and brick transitions from the frame history.
    2. Assemble style, brick symbol, bricks, paddle and ball.
    3. Strip insignificant whitespace.
    """
    return _tl_minify(render_svg_document(timeline)).encode("utf-8")


def render_svg_document(timeline: SimulationTimeline) -> str:
    """Assemble the unminified SVG document for a timeline."""
    if not timeline.frames:
        raise ValueError("SVG timeline requires at least one frame")

    encoding = encode_timeline(
        timeline.frames,
        timeline.bricks,
        timeline.ghost_bricks,
        timeline.context,
        timeline.frame_duration,
    )
    config = timeline.config
    width = _tl_num(timeline.layout.width)
    height = _tl_num(timeline.layout.height)
    duration = f"{_tl_num(encoding.duration)}s"

    parts: list[str] = [
        f'<svg width="{width}" height="{height}" viewBox="0 0 {width} {height}" '
        f'xmlns="http://www.w3.org/2000/svg">',
        _tl_palette_style(timeline.context),
        "<defs>",
        '  <symbol id="brick">',
        f'    <rect x="0" y="0" width="{_tl_num(config.brick_size)}" '
        f'height="{_tl_num(config.brick_size)}" rx="{_tl_num(config.brick_radius)}"/>',
        "  </symbol>",
        "</defs>",
    ]
    parts.extend(
        _tl_brick_elements(timeline.bricks, encoding.brick_transitions, timeline.context, duration)
    )
    parts.append(_tl_paddle_element(timeline, encoding, duration))
    parts.append(_tl_ball_element(timeline, encoding, duration))
    parts.append("</svg>")
    return "\n".join(parts)


def _tl_palette_style(context: RenderContext) -> str:
    rules = "".join(f".c{index}{{fill:{color}}}" for index, color in enumerate(context.brick_colors))
    return f"<style>{rules}</style>"


def _tl_brick_elements(
    bricks: Sequence[Brick],
    transitions: Sequence[BrickTransition | None],
    context: RenderContext,
    duration: str,
) -> list[str]:
    elements: list[str] = []
    for brick, transition in zip(bricks, transitions):
        position = f'x="{_tl_num(brick.x)}" y="{_tl_num(brick.y)}"'
        if transition is None:
            elements.append(f'<use href="#brick" {position} class="{brick.color_class}" opacity="1"/>')
            continue

        animate = (
            f'<animate attributeName="{transition.attribute}" '
            f'values="{";".join(transition.values)}" '
            f'keyTimes="{_tl_key_times(transition.key_times)}" '
            f'dur="{duration}" fill="freeze" repeatCount="indefinite"/>'
        )
        if transition.attribute == "fill":
            # A class rule would override the animated fill attribute.
            elements.append(
                f'<use href="#brick" {position} fill="{transition.start_value}">{animate}</use>'
            )
        else:
            elements.append(
                f'<use href="#brick" {position} class="{brick.color_class}">{animate}</use>'
            )
    return elements


def _tl_paddle_element(
    timeline: SimulationTimeline, encoding: TimelineEncoding, duration: str
) -> str:
    config = timeline.config
    # The paddle never leaves its row, so only x is animated.
    return (
        f'<g transform="translate(0,{_tl_num(timeline.layout.paddle_y)})">'
        f'<rect x="{_tl_pixel(encoding.paddle_x[0])}" y="0" '
        f'width="{_tl_num(config.paddle_width)}" height="{_tl_num(config.paddle_height)}" '
        f'rx="{_tl_num(config.paddle_radius)}" fill="{timeline.context.paddle_color}">'
        f'{_tl_scalar_animate("x", encoding.paddle_x, duration)}'
        "</rect></g>"
    )


def _tl_ball_element(
    timeline: SimulationTimeline, encoding: TimelineEncoding, duration: str
) -> str:
    return (
        f'<circle cx="{_tl_pixel(encoding.ball_x[0])}" cy="{_tl_pixel(encoding.ball_y[0])}" '
        f'r="{_tl_num(timeline.config.ball_radius)}" fill="{timeline.context.ball_color}">'
        f'{_tl_scalar_animate("cx", encoding.ball_x, duration)}'
        f'{_tl_scalar_animate("cy", encoding.ball_y, duration)}'
        "</circle>"
    )


def _tl_scalar_animate(attribute_name: str, values: Sequence[float], duration: str) -> str:
    if not _tl_has_distinct_floats(values):
        return ""
    value_text = ";".join(_tl_pixel(value) for value in values)
    return (
        f'<animate attributeName="{attribute_name}" values="{value_text}" '
        f'dur="{duration}" repeatCount="indefinite"/>'
    )
