#!/usr/bin/env python3
"""
Stroke Filler

Density pass run after layout composition: keeps adding grid-snapped strokes
until the glyph holds a stream-drawn target count, then sometimes ties the
composition together with a centerline.
"""

from dataclasses import dataclass
from typing import List, Tuple

from charhash.core import get_logger

from .prng import SeededStream
from .sdk import Region
from .svg_geom import (
    add,
    grid_point,
    stroke_circle,
    stroke_dot,
    stroke_hook_down,
    stroke_line,
    stroke_sweep,
    stroke_wave_h,
)

log = get_logger("charhash.filler")

MIN_TARGET = 10
MAX_TARGET = 22
ATTEMPTS_PER_TARGET = 10
GRID_N = 5
CENTERLINE_CHANCE = 0.25

STROKE_KINDS: Tuple[str, ...] = ("h", "v", "d1", "d2", "hook", "dot", "wave", "circle")


@dataclass
class FillStats:
    target: int
    attempts: int
    added: int
    centerline: bool = False


def fill_strokes(rng: SeededStream, b: Region, paths: List[str]) -> FillStats:
    """
    Top ``paths`` up to a target drawn from [MIN_TARGET, MAX_TARGET].

    Horizontal and vertical candidates shorter than 30% of the region are
    discarded; the loop gives up after ``target * ATTEMPTS_PER_TARGET`` tries.
    """
    target = rng.int_in(MIN_TARGET, MAX_TARGET)
    j = min(b.w, b.h) * 0.035
    start = len(paths)
    attempts = 0

    while len(paths) < target and attempts < target * ATTEMPTS_PER_TARGET:
        attempts += 1
        kind = rng.pick(STROKE_KINDS)
        ax, ay = grid_point(rng, b, rng.int_in(0, GRID_N - 1), rng.int_in(0, GRID_N - 1), GRID_N, j)
        bx, by = grid_point(rng, b, rng.int_in(0, GRID_N - 1), rng.int_in(0, GRID_N - 1), GRID_N, j)

        if kind == "h":
            x1, x2 = min(ax, bx), max(ax, bx)
            if x2 - x1 < b.w * 0.30:
                continue
            add(paths, stroke_line(x1, ay, x2, ay))
        elif kind == "v":
            y1, y2 = min(ay, by), max(ay, by)
            if y2 - y1 < b.h * 0.30:
                continue
            add(paths, stroke_line(ax, y1, ax, y2))
        elif kind == "d1":
            # rising /
            x1 = b.x + b.w * (0.20 + rng.next() * 0.20)
            y1 = b.y + b.h * (0.70 + rng.next() * 0.18)
            x2 = b.x + b.w * (0.70 + rng.next() * 0.20)
            y2 = b.y + b.h * (0.18 + rng.next() * 0.20)
            add(paths, stroke_sweep(x1, y1, x2, y2, -1))
        elif kind == "d2":
            # falling \
            x1 = b.x + b.w * (0.22 + rng.next() * 0.20)
            y1 = b.y + b.h * (0.20 + rng.next() * 0.20)
            x2 = b.x + b.w * (0.72 + rng.next() * 0.20)
            y2 = b.y + b.h * (0.74 + rng.next() * 0.18)
            add(paths, stroke_sweep(x1, y1, x2, y2, +1))
        elif kind == "hook":
            x = b.x + b.w * (0.35 + rng.next() * 0.40)
            hook_dir = -1 if rng.chance(0.5) else 1
            hook_size = b.w * (0.10 + rng.next() * 0.06)
            add(paths, stroke_hook_down(x, b.y + b.h * 0.12, b.y + b.h * 0.90, hook_dir, hook_size))
        elif kind == "dot":
            x = b.x + b.w * (0.20 + rng.next() * 0.60)
            y = b.y + b.h * (0.15 + rng.next() * 0.70)
            r = b.w * (0.10 + rng.next() * 0.05)
            add(paths, stroke_dot(rng, x, y, r, clip=b))
        elif kind == "wave":
            y = b.y + b.h * (0.20 + rng.next() * 0.60)
            amp = b.h * (0.03 + rng.next() * 0.03)
            cycles = 2 + rng.int_in(0, 2)
            add(paths, stroke_wave_h(rng, b.x + b.w * 0.18, b.x + b.w * 0.82, y, amp, cycles))
        else:
            cx = b.x + b.w * (0.30 + rng.next() * 0.40)
            cy = b.y + b.h * (0.30 + rng.next() * 0.40)
            r = min(b.w, b.h) * (0.10 + rng.next() * 0.10)
            add(paths, stroke_circle(cx, cy, r))

    stats = FillStats(target=target, attempts=attempts, added=len(paths) - start)
    if len(paths) < target:
        log.warning(f"filler gave up at {len(paths)}/{target} strokes after {attempts} attempts")

    if rng.chance(CENTERLINE_CHANCE):
        cx = b.x + b.w * 0.50
        add(paths, stroke_line(cx, b.y + b.h * 0.10, cx, b.y + b.h * 0.92))
        stats.centerline = True

    log.debug(
        f"filler target={stats.target} attempts={stats.attempts} "
        f"added={stats.added} centerline={stats.centerline}"
    )
    return stats
