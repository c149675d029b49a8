import argparse
from typing import List, Optional

from charhash.glyph.sdk import (
    DEFAULT_BG,
    DEFAULT_FG,
    DEFAULT_PAD,
    DEFAULT_SIZE,
    DEFAULT_STROKE,
    InvalidOption,
    TooManyArguments,
    UnknownOption,
)

EXAMPLES = """
Examples:
  character-hash 0123456789abcdef > glyph.svg
  character-hash 0x0123456789ABCDEF glyph.svg
  character-hash deadbeefcafebabe --size 512 --stroke 18 --fg "#111" --bg "white" --pad 20 > deadbeef.svg
"""


class GlyphArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting, so main() owns the exit status."""

    def error(self, message):
        raise InvalidOption(message)


def build_parser(defaults=None) -> argparse.ArgumentParser:
    """
    Parser for ``character-hash <16-hex-chars> [out.svg] [options]``.

    ``defaults`` is any object with size/stroke/pad/fg/bg attributes (a
    GlyphConfig); missing values fall back to the built-in defaults. Numeric
    options are kept as strings here and validated by RenderOptions.
    """
    ap = GlyphArgumentParser(
        prog="character-hash",
        description="Deterministically map a 64-bit key to an ideographic SVG glyph.",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )
    ap.add_argument("positionals", nargs="*", metavar="ARG",
                    help="16-hex-character key (optional 0x prefix), then an optional output file")
    ap.add_argument("--out", default=None, metavar="FILE", help="Write SVG to a file instead of stdout")
    ap.add_argument("--size", default=getattr(defaults, "size", DEFAULT_SIZE), metavar="PX",
                    help=f"Output width/height in px (default: {DEFAULT_SIZE})")
    ap.add_argument("--stroke", default=getattr(defaults, "stroke", DEFAULT_STROKE), metavar="PX",
                    help=f"Stroke width in px (default: {DEFAULT_STROKE})")
    ap.add_argument("--pad", default=getattr(defaults, "pad", DEFAULT_PAD), metavar="PX",
                    help=f"Padding in output px, converted to viewBox units (default: {DEFAULT_PAD})")
    ap.add_argument("--fg", default=getattr(defaults, "fg", DEFAULT_FG), metavar="COLOR",
                    help=f"Stroke color (default: {DEFAULT_FG})")
    ap.add_argument("--bg", default=getattr(defaults, "bg", DEFAULT_BG), metavar="COLOR|none",
                    help=f"Background fill (default: {DEFAULT_BG})")
    ap.add_argument("-h", "--help", action="store_true", help="Show help")
    return ap


def parse_cli(ap: argparse.ArgumentParser, argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse strictly: unknown options raise UnknownOption, a third positional
    raises TooManyArguments, a missing option value raises InvalidOption.
    """
    args, extras = ap.parse_known_intermixed_args(argv)
    unknown = [a for a in extras if a.startswith("-")]
    if unknown:
        raise UnknownOption(f"Unknown option: {unknown[0]}")
    if extras or len(args.positionals) > 2:
        raise TooManyArguments("Too many positional arguments.")
    args.key = args.positionals[0] if args.positionals else None
    if args.out is None and len(args.positionals) > 1:
        args.out = args.positionals[1]
    return args
