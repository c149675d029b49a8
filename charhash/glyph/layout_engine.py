#!/usr/bin/env python3
"""
Layout Engine for the glyph generator

Chooses how the padded canvas is subdivided (single, left-right, top-bottom,
enclosure), fills each slot from the motif catalog, then hands the result to
the stroke filler. Everything is driven by one SeededStream, so a seed and a
padding value fully determine the ordered path list.

All units are viewBox units on the fixed VIEWBOX x VIEWBOX canvas.
"""

import math
from enum import Enum
from typing import List, Optional, Tuple

from charhash.core import get_logger
from charhash.utils.seed import normalize_seed

from .motif_generators import (
    OPEN_SIDES,
    Motif,
    draw_enclosure,
    draw_motif,
    pick_left_radical,
    pick_main_motif,
)
from .prng import SeededStream
from .sdk import (
    DEFAULT_PAD,
    DEFAULT_SIZE,
    MAX_PAD_PX,
    MAX_PAD_VB,
    VIEWBOX,
    Glyph,
    InvalidOption,
    Region,
    canvas_bounds,
)
from .stroke_filler import FillStats, fill_strokes
from .svg_geom import clamp

log = get_logger("charhash.layout")


class Layout(str, Enum):
    SINGLE = "single"
    LEFT_RIGHT = "lr"
    TOP_BOTTOM = "tb"
    ENCLOSURE = "enclose"


# Pick order is part of the seed-to-glyph mapping
LAYOUTS: Tuple[Layout, ...] = (
    Layout.SINGLE,
    Layout.LEFT_RIGHT,
    Layout.TOP_BOTTOM,
    Layout.ENCLOSURE,
)


class LayoutEngine:
    """Composes one glyph's layout into ``paths`` from a single owned stream."""

    def __init__(self, rng: SeededStream):
        self._rng = rng
        self.layout: Optional[Layout] = None
        self.motifs: List[Motif] = []

    def _draw(self, motif: Motif, region: Region, paths: List[str]) -> None:
        self.motifs.append(motif)
        draw_motif(motif, self._rng, region, paths)

    def _draw_main(self, region: Region, paths: List[str]) -> None:
        self._draw(pick_main_motif(self._rng), region, paths)

    def compose(self, bounds: Region, paths: List[str]) -> Layout:
        rng = self._rng
        self.layout = rng.pick(LAYOUTS)

        if self.layout is Layout.SINGLE:
            self._single(bounds, paths)
        elif self.layout is Layout.LEFT_RIGHT:
            self._left_right(bounds, paths)
        elif self.layout is Layout.TOP_BOTTOM:
            self._top_bottom(bounds, paths)
        else:
            self._enclosure(bounds, paths)

        log.debug(
            f"layout={self.layout.value} motifs={[m.value for m in self.motifs]} strokes={len(paths)}"
        )
        return self.layout

    def _single(self, bounds: Region, paths: List[str]) -> None:
        rng = self._rng
        if rng.chance(0.38):
            top, rest = bounds.split_tb(0.26 + rng.next() * 0.08)
            self._draw(Motif.GRASS_TOP, top, paths)
            self._draw_main(rest.inset(rest.w * 0.03), paths)
        else:
            self._draw_main(bounds.inset(bounds.w * 0.04), paths)

    def _left_right(self, bounds: Region, paths: List[str]) -> None:
        rng = self._rng
        left, right = bounds.split_lr(0.30 + rng.next() * 0.10)
        self._draw(pick_left_radical(rng), left.inset(left.w * 0.10), paths)

        rr = right.inset(right.w * 0.06)
        if rng.chance(0.30):
            top, rest = rr.split_tb(0.22 + rng.next() * 0.10)
            self._draw(Motif.CROSS, top, paths)
            self._draw_main(rest, paths)
        else:
            self._draw_main(rr, paths)

    def _top_bottom(self, bounds: Region, paths: List[str]) -> None:
        rng = self._rng
        top, bottom = bounds.split_tb(0.36 + rng.next() * 0.10)
        if rng.chance(0.55):
            self._draw(Motif.GRASS_TOP, top.inset(top.h * 0.10), paths)
        else:
            self._draw(Motif.CROSS, top.inset(top.h * 0.12), paths)
        self._draw_main(bottom.inset(bottom.w * 0.06), paths)

    def _enclosure(self, bounds: Region, paths: List[str]) -> None:
        rng = self._rng
        open_side = rng.pick(OPEN_SIDES)
        draw_enclosure(rng, bounds, paths, open_side)
        inner = bounds.inset(bounds.w * (0.18 + rng.next() * 0.05))
        self._draw_main(inner, paths)


def _check_pad(pad: float) -> float:
    if not math.isfinite(pad) or pad < 0 or pad > MAX_PAD_VB:
        raise InvalidOption(f"Padding must be between 0 and {MAX_PAD_VB} viewBox units, got {pad}.")
    return pad


def compose_glyph(seed: str, pad: float) -> Tuple[List[str], Layout, FillStats]:
    """Run the full pipeline and also report the layout and filler statistics."""
    seed_hex = normalize_seed(seed)
    _check_pad(pad)
    rng = SeededStream(seed_hex)
    bounds = canvas_bounds(pad)
    paths: List[str] = []

    layout = LayoutEngine(rng).compose(bounds, paths)
    stats = fill_strokes(rng, bounds, paths)
    log.debug(f"seed={seed_hex} pad={pad} paths={len(paths)} draws={rng.draws}")
    return paths, layout, stats


def generate_glyph_paths(seed: str, pad: float) -> List[str]:
    """Ordered stroke path ``d`` strings for ``seed`` with ``pad`` viewBox units of padding."""
    paths, _, _ = compose_glyph(seed, pad)
    return paths


def pad_to_viewbox(pad_px: float, size: float) -> float:
    """Convert output-pixel padding into viewBox units so it looks the same at any size."""
    pad_px = clamp(float(pad_px or 0), 0, MAX_PAD_PX)
    return clamp((pad_px * VIEWBOX) / max(1, float(size or DEFAULT_SIZE)), 0, MAX_PAD_VB)


def generate_glyph(seed: str, size: float = DEFAULT_SIZE, pad_px: float = DEFAULT_PAD) -> Glyph:
    seed_hex = normalize_seed(seed)
    pad = pad_to_viewbox(pad_px, size)
    return Glyph(seed=seed_hex, pad=pad, paths=generate_glyph_paths(seed_hex, pad))
