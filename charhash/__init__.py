"""
character-hash

Deterministic 64-bit key -> ideographic/occult SVG glyph generator.
"""

from .glyph.layout_engine import Layout, LayoutEngine, generate_glyph, generate_glyph_paths
from .glyph.motif_generators import MAIN_MOTIFS, Motif
from .glyph.prng import SeededStream, make_stream
from .glyph.sdk import (
    VIEWBOX,
    Glyph,
    GlyphInputError,
    InvalidOption,
    InvalidSeed,
    Region,
    TooManyArguments,
    UnknownOption,
)
from .glyph.svg_render import RenderOptions, generate_svg, render_svg
from .utils.seed import normalize_seed

__version__ = "0.1.0"
__all__ = [
    "VIEWBOX",
    "Glyph",
    "Region",
    "GlyphInputError",
    "InvalidSeed",
    "InvalidOption",
    "UnknownOption",
    "TooManyArguments",
    "SeededStream",
    "make_stream",
    "Motif",
    "MAIN_MOTIFS",
    "Layout",
    "LayoutEngine",
    "generate_glyph",
    "generate_glyph_paths",
    "RenderOptions",
    "render_svg",
    "generate_svg",
    "normalize_seed",
]
