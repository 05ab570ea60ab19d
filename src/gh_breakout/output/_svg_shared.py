"""Shared helpers for SVG output encoding."""

import re
from functools import lru_cache

_WHITESPACE_RUN_RE = re.compile(r"\s{2,}")
_INTER_TAG_WHITESPACE_RE = re.compile(r">\s+<")


@lru_cache(maxsize=8192)
def _tl_num(value: float) -> str:
    if isinstance(value, int):
        return str(value)
    if abs(value - round(value)) < 1e-9:
        return str(int(round(value)))
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    return text or "0"


@lru_cache(maxsize=8192)
def _tl_num_key_time(value: float) -> str:
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return text or "0"


def _tl_pixel(value: float) -> str:
    """Whole-pixel coordinate for keyframe values."""
    text = f"{value:.0f}"
    return "0" if text == "-0" else text


def _tl_minify(svg_markup: str) -> str:
    """Collapse whitespace runs and drop whitespace between tags."""
    minimized = _WHITESPACE_RUN_RE.sub(" ", svg_markup)
    minimized = _INTER_TAG_WHITESPACE_RE.sub("><", minimized)
    return minimized.replace("\n", "")
