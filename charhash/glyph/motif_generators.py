#!/usr/bin/env python3
"""
Procedural Motif Generators

The component catalog: a closed set of named motifs, each drawn into a Region
by exactly one handler. Handlers append 1-6 stroke paths (the stacked bars up
to 2 * lines + 2: 8 for a trigram, 14 for a hexagram) and consume the
generation stream in a fixed order, so the same stream state always yields the
same strokes. Dots are clipped to the handler's region.

Families:
- box/grid ideographs (mouth, sun, field) and stroke clusters (tree, cross, eight)
- stacked bars (trigram, hexagram) sharing one generator
- zodiac-like and alchemical-like symbols
- radicals that only appear in fixed layout slots (water, person, hand, grass)
"""

import math
from enum import Enum
from typing import Callable, Dict, List, Tuple

from charhash.core import get_logger

from .prng import SeededStream
from .sdk import Region
from .svg_geom import (
    add,
    lerp,
    polyline,
    stroke_arc,
    stroke_circle,
    stroke_dot,
    stroke_hook_down,
    stroke_line,
    stroke_sweep,
    stroke_wave_h,
)

log = get_logger("charhash.motifs")

PI = math.pi

Paths = List[str]


class Motif(str, Enum):
    # CJK-like bases
    SUN = "sun"
    FIELD = "field"
    MOUTH = "mouth"
    TREE = "tree"
    CROSS = "cross"
    EIGHT = "eight"
    # Stacked bars
    HEXAGRAM = "hexagram"
    TRIGRAM = "trigram"
    # Zodiac-like
    ARIES = "aries"
    TAURUS = "taurus"
    GEMINI = "gemini"
    AQUARIUS = "aquarius"
    SAGITTARIUS = "sagittarius"
    # Alchemical-like
    ALCH_SUN = "alch_sun"
    MERCURY = "mercury"
    SULFUR = "sulfur"
    AIR = "air"
    EARTH = "earth"
    # Slot-only radicals
    WATER_LEFT = "water_left"
    PERSON_LEFT = "person_left"
    HAND_LEFT = "hand_left"
    GRASS_TOP = "grass_top"


# Pick order is part of the seed-to-glyph mapping; append, never reorder
MAIN_MOTIFS: Tuple[Motif, ...] = (
    Motif.SUN,
    Motif.FIELD,
    Motif.MOUTH,
    Motif.TREE,
    Motif.CROSS,
    Motif.EIGHT,
    Motif.HEXAGRAM,
    Motif.TRIGRAM,
    Motif.ARIES,
    Motif.TAURUS,
    Motif.GEMINI,
    Motif.AQUARIUS,
    Motif.SAGITTARIUS,
    Motif.ALCH_SUN,
    Motif.MERCURY,
    Motif.SULFUR,
    Motif.AIR,
    Motif.EARTH,
)

LEFT_RADICALS: Tuple[Motif, ...] = (Motif.WATER_LEFT, Motif.PERSON_LEFT, Motif.HAND_LEFT)

OPEN_SIDES: Tuple[str, ...] = ("bottom", "left", "right", "top")


# ============================================================================
# BOX / GRID IDEOGRAPHS
# ============================================================================


def _corners(b: Region) -> Tuple[float, float, float, float]:
    return b.x, b.x + b.w, b.y, b.y + b.h


def draw_mouth(rng: SeededStream, b: Region, paths: Paths) -> None:
    """口-like: three sides, then either an inner bar or (rarely) the closing side."""
    bb = b.inset(min(b.w, b.h) * 0.12)
    x1, x2, y1, y2 = _corners(bb)
    add(paths, polyline([(x1, y1), (x2, y1), (x2, y2), (x1, y2)]))
    if rng.chance(0.55):
        y = lerp(y1, y2, 0.55)
        add(paths, stroke_line(lerp(x1, x2, 0.12), y, lerp(x1, x2, 0.88), y))
    elif rng.chance(0.25):
        add(paths, stroke_line(x1, y1, x1, y2))


def draw_sun(rng: SeededStream, b: Region, paths: Paths) -> None:
    """日-like: closed box with two inner bars."""
    bb = b.inset(min(b.w, b.h) * 0.10)
    x1, x2, y1, y2 = _corners(bb)
    add(paths, polyline([(x1, y1), (x2, y1), (x2, y2), (x1, y2), (x1, y1)]))
    y_a = lerp(y1, y2, 0.38)
    y_b = lerp(y1, y2, 0.68)
    add(paths, stroke_line(lerp(x1, x2, 0.12), y_a, lerp(x1, x2, 0.88), y_a))
    add(paths, stroke_line(lerp(x1, x2, 0.12), y_b, lerp(x1, x2, 0.88), y_b))


def draw_field(rng: SeededStream, b: Region, paths: Paths) -> None:
    """田-like: closed box split by one vertical and one horizontal."""
    bb = b.inset(min(b.w, b.h) * 0.10)
    x1, x2, y1, y2 = _corners(bb)
    add(paths, polyline([(x1, y1), (x2, y1), (x2, y2), (x1, y2), (x1, y1)]))
    xm = lerp(x1, x2, 0.50)
    ym = lerp(y1, y2, 0.52)
    add(paths, stroke_line(xm, y1, xm, y2))
    add(paths, stroke_line(x1, ym, x2, ym))


# ============================================================================
# STROKE CLUSTERS
# ============================================================================


def draw_tree(rng: SeededStream, b: Region, paths: Paths) -> None:
    """木-like: trunk, crossbar, two falling sweeps."""
    cx = b.x + b.w * 0.50
    add(paths, stroke_line(cx, b.y + b.h * 0.12, cx, b.y + b.h * 0.92))
    y = b.y + b.h * 0.42
    add(paths, stroke_line(b.x + b.w * 0.18, y, b.x + b.w * 0.82, y))
    add(paths, stroke_sweep(cx, y, b.x + b.w * 0.22, b.y + b.h * 0.80, -1))
    add(paths, stroke_sweep(cx, y, b.x + b.w * 0.78, b.y + b.h * 0.80, +1))


def draw_cross(rng: SeededStream, b: Region, paths: Paths) -> None:
    """十-like: the bar height floats between 38% and 56% of the region."""
    cx = b.x + b.w * 0.52
    add(paths, stroke_line(cx, b.y + b.h * 0.14, cx, b.y + b.h * 0.88))
    y = b.y + b.h * (0.38 + rng.next() * 0.18)
    add(paths, stroke_line(b.x + b.w * 0.18, y, b.x + b.w * 0.84, y))


def draw_eight(rng: SeededStream, b: Region, paths: Paths) -> None:
    x = b.x + b.w * 0.50
    y = b.y + b.h * 0.26
    add(paths, stroke_sweep(x, y, b.x + b.w * 0.26, b.y + b.h * 0.86, -1))
    add(paths, stroke_sweep(x, y, b.x + b.w * 0.76, b.y + b.h * 0.86, +1))


# ============================================================================
# STACKED BARS
# ============================================================================


def draw_bars(rng: SeededStream, b: Region, paths: Paths, lines: int = 3) -> None:
    """
    Trigram / hexagram: ``lines`` evenly spaced bars, each broken in the middle
    with probability 0.45, and a 25% chance of vertical side rails.
    """
    x1 = b.x + b.w * 0.14
    x2 = b.x + b.w * 0.86
    gap = b.h / (lines + 1)
    half_break = b.w * 0.06
    for i in range(lines):
        y = b.y + gap * (i + 1)
        if not rng.chance(0.45):
            add(paths, stroke_line(x1, y, x2, y))
        else:
            xm = (x1 + x2) / 2
            add(paths, stroke_line(x1, y, xm - half_break, y))
            add(paths, stroke_line(xm + half_break, y, x2, y))
    if rng.chance(0.25):
        add(paths, stroke_line(b.x + b.w * 0.10, b.y + gap * 0.8, b.x + b.w * 0.10, b.y + b.h - gap * 0.8))
        add(paths, stroke_line(b.x + b.w * 0.90, b.y + gap * 0.8, b.x + b.w * 0.90, b.y + b.h - gap * 0.8))


def draw_trigram(rng: SeededStream, b: Region, paths: Paths) -> None:
    draw_bars(rng, b, paths, 3)


def draw_hexagram(rng: SeededStream, b: Region, paths: Paths) -> None:
    draw_bars(rng, b, paths, 6)


# ============================================================================
# ZODIAC-LIKE
# ============================================================================


def draw_aries(rng: SeededStream, b: Region, paths: Paths) -> None:
    """♈-ish: two horn arcs, sometimes a stem."""
    cx = b.x + b.w * 0.50
    y0 = b.y + b.h * 0.74
    r = min(b.w, b.h) * 0.30
    add(paths, stroke_arc(cx - r * 0.55, y0, r * 0.78, PI * 1.15, PI * 1.95, True))
    add(paths, stroke_arc(cx + r * 0.55, y0, r * 0.78, PI * 1.05, PI * 0.25, False))
    if rng.chance(0.35):
        add(paths, stroke_line(cx, b.y + b.h * 0.32, cx, b.y + b.h * 0.86))


def draw_taurus(rng: SeededStream, b: Region, paths: Paths) -> None:
    """♉-ish: circle under a horn arc."""
    cx = b.x + b.w * 0.50
    cy = b.y + b.h * 0.62
    r = min(b.w, b.h) * 0.22
    add(paths, stroke_circle(cx, cy, r))
    hr = min(b.w, b.h) * 0.32
    add(paths, stroke_arc(cx, cy - r * 0.55, hr, PI * 1.10, PI * 1.90, True))


def draw_gemini(rng: SeededStream, b: Region, paths: Paths) -> None:
    """♊-ish: twin pillars capped top and bottom."""
    x_l = b.x + b.w * 0.34
    x_r = b.x + b.w * 0.66
    y1 = b.y + b.h * 0.18
    y2 = b.y + b.h * 0.88
    add(paths, stroke_line(x_l, y1, x_l, y2))
    add(paths, stroke_line(x_r, y1, x_r, y2))
    add(paths, stroke_arc((x_l + x_r) / 2, y1, (x_r - x_l) * 0.60, PI, 0, True))
    add(paths, stroke_arc((x_l + x_r) / 2, y2, (x_r - x_l) * 0.60, 0, PI, True))


def draw_aquarius(rng: SeededStream, b: Region, paths: Paths) -> None:
    x1 = b.x + b.w * 0.12
    x2 = b.x + b.w * 0.88
    add(paths, stroke_wave_h(rng, x1, x2, b.y + b.h * 0.40, b.h * 0.06, 3))
    add(paths, stroke_wave_h(rng, x1, x2, b.y + b.h * 0.66, b.h * 0.06, 3))


def draw_sagittarius(rng: SeededStream, b: Region, paths: Paths) -> None:
    """♐-ish: rising arrow with a two-stroke head, sometimes a crossbar."""
    x1 = b.x + b.w * 0.22
    y1 = b.y + b.h * 0.78
    x2 = b.x + b.w * 0.82
    y2 = b.y + b.h * 0.22
    add(paths, stroke_sweep(x1, y1, x2, y2, +1))
    add(paths, stroke_line(x2, y2, x2 - b.w * 0.10, y2))
    add(paths, stroke_line(x2, y2, x2, y2 + b.h * 0.10))
    if rng.chance(0.35):
        xm = lerp(x1, x2, 0.45)
        ym = lerp(y1, y2, 0.45)
        add(paths, stroke_line(xm - b.w * 0.14, ym, xm + b.w * 0.14, ym))


# ============================================================================
# ALCHEMICAL-LIKE
# ============================================================================


def draw_alch_sun(rng: SeededStream, b: Region, paths: Paths) -> None:
    """☉-ish: circle with a center dot."""
    cx = b.x + b.w * 0.50
    cy = b.y + b.h * 0.52
    r = min(b.w, b.h) * 0.30
    add(paths, stroke_circle(cx, cy, r))
    add(paths, stroke_dot(rng, cx, cy, r * 0.06, clip=b))


def draw_mercury(rng: SeededStream, b: Region, paths: Paths) -> None:
    """☿-ish: crescent over a circle over a cross."""
    cx = b.x + b.w * 0.50
    cy = b.y + b.h * 0.52
    r = min(b.w, b.h) * 0.22
    add(paths, stroke_circle(cx, cy, r))
    add(paths, stroke_arc(cx, cy - r * 1.05, r * 0.90, PI * 1.10, PI * 1.90, True))
    y_cross = cy + r * 1.25
    add(paths, stroke_line(cx, cy + r * 0.85, cx, y_cross + r * 0.40))
    add(paths, stroke_line(cx - r * 0.55, y_cross, cx + r * 0.55, y_cross))


def _triangle(cx: float, y_apex: float, y_base: float, width: float) -> str:
    return polyline([
        (cx, y_apex),
        (cx - width / 2, y_base),
        (cx + width / 2, y_base),
        (cx, y_apex),
    ])


def draw_sulfur(rng: SeededStream, b: Region, paths: Paths) -> None:
    """Triangle standing on a small cross."""
    cx = b.x + b.w * 0.50
    y_tri = b.y + b.h * 0.62
    w = b.w * 0.46
    add(paths, _triangle(cx, b.y + b.h * 0.18, y_tri, w))
    y_cross = b.y + b.h * 0.76
    add(paths, stroke_line(cx, y_tri, cx, b.y + b.h * 0.92))
    add(paths, stroke_line(cx - w * 0.22, y_cross, cx + w * 0.22, y_cross))


def draw_air(rng: SeededStream, b: Region, paths: Paths) -> None:
    """Upward triangle with a bar."""
    cx = b.x + b.w * 0.50
    y_top = b.y + b.h * 0.18
    y_bot = b.y + b.h * 0.86
    w = b.w * 0.56
    add(paths, _triangle(cx, y_top, y_bot, w))
    y_bar = lerp(y_top, y_bot, 0.62)
    add(paths, stroke_line(cx - w * 0.30, y_bar, cx + w * 0.30, y_bar))


def draw_earth(rng: SeededStream, b: Region, paths: Paths) -> None:
    """Downward triangle with a bar."""
    cx = b.x + b.w * 0.50
    y_top = b.y + b.h * 0.18
    y_bot = b.y + b.h * 0.86
    w = b.w * 0.56
    add(paths, _triangle(cx, y_bot, y_top, w))
    y_bar = lerp(y_top, y_bot, 0.38)
    add(paths, stroke_line(cx - w * 0.30, y_bar, cx + w * 0.30, y_bar))


# ============================================================================
# RADICALS
# ============================================================================


def draw_water_left(rng: SeededStream, b: Region, paths: Paths) -> None:
    """氵-ish: three stacked dots."""
    x = b.x + b.w * 0.58
    add(paths, stroke_dot(rng, x, b.y + b.h * 0.18, b.w * 0.10, clip=b))
    add(paths, stroke_dot(rng, x - b.w * 0.08, b.y + b.h * 0.46, b.w * 0.12, clip=b))
    add(paths, stroke_dot(rng, x + b.w * 0.02, b.y + b.h * 0.76, b.w * 0.14, clip=b))


def draw_person_left(rng: SeededStream, b: Region, paths: Paths) -> None:
    """亻-ish: a post with a short sweep."""
    x = b.x + b.w * 0.58
    add(paths, stroke_line(x, b.y + b.h * 0.10, x, b.y + b.h * 0.92))
    add(paths, stroke_sweep(x, b.y + b.h * 0.40, b.x + b.w * 0.78, b.y + b.h * 0.86, +1))


def draw_hand_left(rng: SeededStream, b: Region, paths: Paths) -> None:
    """扌-ish: hooked post and two bars."""
    x = b.x + b.w * 0.56
    add(paths, stroke_hook_down(x, b.y + b.h * 0.10, b.y + b.h * 0.92, -1, b.w * 0.12))
    y_a = b.y + b.h * 0.34
    y_b = b.y + b.h * 0.54
    add(paths, stroke_line(b.x + b.w * 0.28, y_a, b.x + b.w * 0.88, y_a))
    add(paths, stroke_line(b.x + b.w * 0.22, y_b, b.x + b.w * 0.78, y_b))


def draw_grass_top(rng: SeededStream, b: Region, paths: Paths) -> None:
    """艹-ish: two short bars and a center post."""
    y = b.y + b.h * 0.36
    add(paths, stroke_line(b.x + b.w * 0.12, y, b.x + b.w * 0.46, y))
    add(paths, stroke_line(b.x + b.w * 0.54, y, b.x + b.w * 0.88, y))
    add(paths, stroke_line(b.x + b.w * 0.50, b.y + b.h * 0.16, b.x + b.w * 0.50, b.y + b.h * 0.62))


def draw_enclosure(rng: SeededStream, b: Region, paths: Paths, open_side: str) -> None:
    """
    Surrounding frame (囗/门-ish) with ``open_side`` left open, drawn as one path
    of two runs from a shared corner. A 35% chance adds a short inner gate post.
    """
    if open_side not in OPEN_SIDES:
        raise ValueError(f"Unknown open side: {open_side}")
    bb = b.inset(min(b.w, b.h) * 0.08)
    x1, x2, y1, y2 = _corners(bb)
    gap = min(bb.w, bb.h) * 0.26

    if open_side == "bottom":
        runs = [[(x1, y1), (x2, y1), (x2, y2)], [(x1, y1), (x1, y2)]]
    elif open_side == "top":
        runs = [[(x1, y2), (x2, y2), (x2, y1)], [(x1, y2), (x1, y1)]]
    elif open_side == "right":
        runs = [[(x1, y1), (x2, y1)], [(x1, y1), (x1, y2), (x2, y2)]]
    else:
        runs = [[(x2, y1), (x1, y1)], [(x2, y1), (x2, y2), (x1, y2)]]
    add(paths, " ".join(polyline(run) for run in runs))

    if rng.chance(0.35):
        x = lerp(x1, x2, 0.72) if open_side == "left" else lerp(x1, x2, 0.28)
        add(paths, stroke_line(x, y1 + gap * 0.55, x, y2 - gap * 0.40))


# ============================================================================
# DISPATCH
# ============================================================================

MotifHandler = Callable[[SeededStream, Region, Paths], None]

MOTIF_HANDLERS: Dict[Motif, MotifHandler] = {
    Motif.SUN: draw_sun,
    Motif.FIELD: draw_field,
    Motif.MOUTH: draw_mouth,
    Motif.TREE: draw_tree,
    Motif.CROSS: draw_cross,
    Motif.EIGHT: draw_eight,
    Motif.HEXAGRAM: draw_hexagram,
    Motif.TRIGRAM: draw_trigram,
    Motif.ARIES: draw_aries,
    Motif.TAURUS: draw_taurus,
    Motif.GEMINI: draw_gemini,
    Motif.AQUARIUS: draw_aquarius,
    Motif.SAGITTARIUS: draw_sagittarius,
    Motif.ALCH_SUN: draw_alch_sun,
    Motif.MERCURY: draw_mercury,
    Motif.SULFUR: draw_sulfur,
    Motif.AIR: draw_air,
    Motif.EARTH: draw_earth,
    Motif.WATER_LEFT: draw_water_left,
    Motif.PERSON_LEFT: draw_person_left,
    Motif.HAND_LEFT: draw_hand_left,
    Motif.GRASS_TOP: draw_grass_top,
}

_unhandled = set(Motif) - set(MOTIF_HANDLERS)
if _unhandled:
    raise RuntimeError(f"Motifs without a handler: {sorted(m.value for m in _unhandled)}")


def draw_motif(motif: Motif, rng: SeededStream, b: Region, paths: Paths) -> None:
    before = len(paths)
    MOTIF_HANDLERS[motif](rng, b, paths)
    log.debug(f"motif={motif.value} strokes={len(paths) - before}")


def pick_main_motif(rng: SeededStream) -> Motif:
    return rng.pick(MAIN_MOTIFS)


def pick_left_radical(rng: SeededStream) -> Motif:
    return rng.pick(LEFT_RADICALS)
