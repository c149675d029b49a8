#!/usr/bin/env python3
"""
SVG Geometry Primitives

Stateless builders for single stroke paths in viewBox units. Each primitive
returns one SVG path ``d`` string; circles come back as one path made of two
half arcs. Primitives that add organic jitter take the generation stream as
their first argument and draw from it in a fixed order.

Numbers are printed through ``fmt`` so output stays compact and byte-stable:
integers without a decimal point, everything else rounded to one decimal.
"""

import math
from typing import List, Optional, Tuple

from .prng import SeededStream
from .sdk import Region

Point = Tuple[float, float]


# ============================================================================
# NUMBER FORMATTING & PATH COMMANDS
# ============================================================================


def fmt(n: float) -> str:
    if float(n).is_integer():
        return str(int(n))
    r = math.floor(n * 10 + 0.5) / 10
    if r.is_integer():
        return str(int(r))
    return repr(r)


def _p(x: float, y: float) -> str:
    return f"{fmt(x)} {fmt(y)}"


def move_to(x: float, y: float) -> str:
    return f"M {_p(x, y)}"


def line_to(x: float, y: float) -> str:
    return f"L {_p(x, y)}"


def quad_to(cx: float, cy: float, x: float, y: float) -> str:
    return f"Q {_p(cx, cy)} {_p(x, y)}"


def arc_to(
    rx: float,
    ry: float,
    rotation: float,
    large_arc: bool,
    sweep: bool,
    x: float,
    y: float,
) -> str:
    return (
        f"A {fmt(rx)} {fmt(ry)} {fmt(rotation)} "
        f"{1 if large_arc else 0} {1 if sweep else 0} {_p(x, y)}"
    )


def polyline(points: List[Point]) -> str:
    """Open polyline: move to the first point, line to the rest."""
    (x0, y0), rest = points[0], points[1:]
    return " ".join([move_to(x0, y0)] + [line_to(x, y) for x, y in rest])


# ============================================================================
# UTILITY FUNCTIONS
# ============================================================================


def clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def polar(cx: float, cy: float, r: float, ang: float) -> Point:
    return (cx + r * math.cos(ang), cy + r * math.sin(ang))


def jitter(rng: SeededStream, v: float, amount: float) -> float:
    return v + (rng.next() * 2 - 1) * amount


def grid_point(rng: SeededStream, b: Region, gx: int, gy: int, grid_n: int, j: float) -> Point:
    """Snap to cell (gx, gy) of a grid_n x grid_n lattice over ``b``, jitter, clamp to ``b``."""
    x = b.x + (b.w * gx) / (grid_n - 1)
    y = b.y + (b.h * gy) / (grid_n - 1)
    return (
        clamp(jitter(rng, x, j), b.x, b.x + b.w),
        clamp(jitter(rng, y, j), b.y, b.y + b.h),
    )


def add(paths: List[str], d: Optional[str]) -> None:
    if d and isinstance(d, str):
        paths.append(d)


# ============================================================================
# STROKE PRIMITIVES
# ============================================================================


def stroke_line(x1: float, y1: float, x2: float, y2: float) -> str:
    return f"{move_to(x1, y1)} {line_to(x2, y2)}"


def stroke_hook_down(x: float, y1: float, y2: float, hook_dir: int, hook_size: float) -> str:
    """Vertical stroke down that flicks sideways (``hook_dir`` -1 or +1) at the end."""
    mid_y = lerp(y1, y2, 0.82)
    hx = x + hook_dir * hook_size
    hy = y2 - hook_size * 0.25
    c1x = x + hook_dir * hook_size * 0.15
    c1y = lerp(mid_y, y2, 0.7)
    return f"{move_to(x, y1)} {line_to(x, mid_y)} {quad_to(c1x, c1y, hx, hy)}"


def stroke_sweep(x1: float, y1: float, x2: float, y2: float, bow: float) -> str:
    """Quadratic sweep; the control point leans off the chord by ``bow``."""
    cx = lerp(x1, x2, 0.55) + bow * (y2 - y1) * 0.12
    cy = lerp(y1, y2, 0.45) - bow * (x2 - x1) * 0.12
    return f"{move_to(x1, y1)} {quad_to(cx, cy, x2, y2)}"


def stroke_dot(
    rng: SeededStream, x: float, y: float, r: float, clip: Optional[Region] = None
) -> str:
    """
    A dot as a tiny curved stroke, never a filled circle.

    The tail lands up to ``r`` sideways and roughly ``r`` below the anchor. When
    ``clip`` is given the tail is clamped into it.
    """
    x2 = x + (rng.next() * 2 - 1) * r
    y2 = y + r * (0.9 + rng.next() * 0.3)
    if clip is not None:
        x2 = clamp(x2, clip.x, clip.x2)
        y2 = clamp(y2, clip.y, clip.y2)
    return f"{move_to(x, y)} {quad_to((x + x2) / 2, (y + y2) / 2, x2, y2)}"


def stroke_circle(cx: float, cy: float, r: float) -> str:
    """Full circle as two half arcs: rightmost point, through leftmost, and back."""
    a0 = polar(cx, cy, r, 0)
    a1 = polar(cx, cy, r, math.pi)
    return (
        f"{move_to(*a0)} "
        f"{arc_to(r, r, 0, False, True, *a1)} "
        f"{arc_to(r, r, 0, False, True, *a0)}"
    )


def stroke_arc(
    cx: float, cy: float, r: float, a_start: float, a_end: float, sweep: bool = True
) -> str:
    s = polar(cx, cy, r, a_start)
    e = polar(cx, cy, r, a_end)
    large = abs(a_end - a_start) > math.pi
    return f"{move_to(*s)} {arc_to(r, r, 0, large, sweep, *e)}"


def stroke_wave_h(
    rng: SeededStream, x1: float, x2: float, y: float, amp: float, cycles: float
) -> str:
    """Horizontal wave of 2 * cycles quadratic humps, each amplitude jittered 85-115%."""
    n = max(1, int(math.floor(cycles)))
    dx = (x2 - x1) / (n * 2)
    parts = [move_to(x1, y)]
    for i in range(n * 2):
        x_mid = x1 + dx * (i + 0.5)
        x_end = x1 + dx * (i + 1)
        direction = -1 if i % 2 == 0 else 1
        a = amp * (0.85 + rng.next() * 0.3)
        parts.append(quad_to(x_mid, y + direction * a, x_end, y))
    return " ".join(parts)
