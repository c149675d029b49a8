#!/usr/bin/env python3
"""
Core SDK for the glyph generator

Single source of truth for canvas constants, option defaults, the Region and
Glyph value types, and the input error kinds. Nothing in here draws.
"""

import math
from dataclasses import dataclass, field
from typing import List, Tuple


# ============================================================================
# CONSTANTS
# ============================================================================

VIEWBOX = 1000

DEFAULT_SIZE = 256
DEFAULT_STROKE = 16
DEFAULT_PAD = 14
DEFAULT_FG = "black"
DEFAULT_BG = "none"

# Requested pixel padding and the resulting viewBox padding are both capped
MAX_PAD_PX = 400
MAX_PAD_VB = 220


# ============================================================================
# ERRORS
# ============================================================================


class GlyphInputError(ValueError):
    """Base class for input rejected before any generation work starts."""


class InvalidSeed(GlyphInputError):
    pass


class InvalidOption(GlyphInputError):
    pass


class UnknownOption(GlyphInputError):
    pass


class TooManyArguments(GlyphInputError):
    pass


# ============================================================================
# VALUE TYPES
# ============================================================================


@dataclass(frozen=True)
class Region:
    """Axis-aligned rectangle in viewBox units. Splits and insets return new regions."""

    x: float
    y: float
    w: float
    h: float

    @property
    def x2(self) -> float:
        return self.x + self.w

    @property
    def y2(self) -> float:
        return self.y + self.h

    def inset(self, m: float) -> "Region":
        return Region(self.x + m, self.y + m, self.w - 2 * m, self.h - 2 * m)

    def split_lr(self, ratio: float) -> Tuple["Region", "Region"]:
        """Left child gets round(w * ratio); the right child takes the remainder."""
        w_left = round_half_up(self.w * ratio)
        return (
            Region(self.x, self.y, w_left, self.h),
            Region(self.x + w_left, self.y, self.w - w_left, self.h),
        )

    def split_tb(self, ratio: float) -> Tuple["Region", "Region"]:
        """Top child gets round(h * ratio); the bottom child takes the remainder."""
        h_top = round_half_up(self.h * ratio)
        return (
            Region(self.x, self.y, self.w, h_top),
            Region(self.x, self.y + h_top, self.w, self.h - h_top),
        )

    def contains(self, x: float, y: float, tolerance: float = 0.0) -> bool:
        return (
            self.x - tolerance <= x <= self.x2 + tolerance
            and self.y - tolerance <= y <= self.y2 + tolerance
        )


@dataclass
class Glyph:
    """One generated glyph: fixed canvas, effective padding, ordered stroke paths."""

    seed: str
    pad: float
    paths: List[str] = field(default_factory=list)
    viewbox: int = VIEWBOX

    @property
    def bounds(self) -> Region:
        return canvas_bounds(self.pad)


def canvas_bounds(pad: float) -> Region:
    return Region(pad, pad, VIEWBOX - pad * 2, VIEWBOX - pad * 2)


def round_half_up(v: float) -> int:
    """Round half up, matching the rounding the split rule was tuned with."""
    return int(math.floor(v + 0.5))

