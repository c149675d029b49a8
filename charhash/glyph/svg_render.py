#!/usr/bin/env python3
"""
SVG renderer

Wraps a Glyph's stroke paths into a standalone, single-line SVG document.
Output is byte-stable: attribute order is fixed and numbers go through ``fmt``.
"""

from typing import Optional

from pydantic import BaseModel, Field, ValidationError

from charhash.core import get_logger

from .layout_engine import generate_glyph
from .sdk import (
    DEFAULT_BG,
    DEFAULT_FG,
    DEFAULT_PAD,
    DEFAULT_SIZE,
    DEFAULT_STROKE,
    VIEWBOX,
    Glyph,
    InvalidOption,
    round_half_up,
)
from .svg_geom import fmt

log = get_logger("charhash.render")


class RenderOptions(BaseModel):
    """Output options. Numbers must be finite; size and stroke positive, pad non-negative."""

    size: float = Field(DEFAULT_SIZE, gt=0, allow_inf_nan=False)
    stroke: float = Field(DEFAULT_STROKE, gt=0, allow_inf_nan=False)
    pad: float = Field(DEFAULT_PAD, ge=0, allow_inf_nan=False)
    fg: str = DEFAULT_FG
    bg: str = DEFAULT_BG


def build_options(**values) -> RenderOptions:
    """RenderOptions from loose values; None means default. Failures raise InvalidOption."""
    clean = {k: v for k, v in values.items() if v is not None}
    try:
        return RenderOptions(**clean)
    except ValidationError as e:
        first = e.errors()[0]
        field = first["loc"][0] if first.get("loc") else "option"
        raise InvalidOption(f"--{field}: {first['msg']} (got {first.get('input')!r})") from e


def escape_attr(value) -> str:
    return (
        str(value)
        .replace("&", "&amp;")
        .replace('"', "&quot;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
    )


def _num(value: float) -> str:
    return escape_attr(fmt(value))


def render_svg(
    glyph: Glyph,
    size: float = DEFAULT_SIZE,
    stroke: float = DEFAULT_STROKE,
    fg: str = DEFAULT_FG,
    bg: Optional[str] = DEFAULT_BG,
) -> str:
    """
    Serialize ``glyph`` into an SVG document.

    The background rect is emitted only when ``bg`` is set and not "none".
    ``vector-effect="non-scaling-stroke"`` keeps the stroke width constant
    whatever the output size.
    """
    bg_rect = ""
    if bg and bg != "none":
        bg_rect = f'<rect x="0" y="0" width="{VIEWBOX}" height="{VIEWBOX}" fill="{escape_attr(bg)}"/>'

    path_els = "".join(f'<path d="{d}" />' for d in glyph.paths)

    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{_num(size)}" height="{_num(size)}" '
        f'viewBox="0 0 {glyph.viewbox} {glyph.viewbox}" fill="none">'
        + bg_rect
        + f'<g stroke="{escape_attr(fg)}" stroke-width="{_num(stroke)}" stroke-linecap="round" '
        'stroke-linejoin="round" vector-effect="non-scaling-stroke">'
        + path_els
        + "</g>"
        + "</svg>"
    )


def generate_svg(seed: str, **options) -> str:
    """
    One call from seed to document.

    Accepts ``size``, ``stroke``, ``pad`` (output pixels), ``fg`` and ``bg``;
    the size is rounded to whole pixels before use.
    """
    opts = build_options(**options)
    size = round_half_up(opts.size) or DEFAULT_SIZE
    glyph = generate_glyph(seed, size=size, pad_px=opts.pad)
    log.debug(f"rendering seed={glyph.seed} paths={len(glyph.paths)} size={size}")
    return render_svg(glyph, size=size, stroke=opts.stroke, fg=opts.fg, bg=opts.bg)
