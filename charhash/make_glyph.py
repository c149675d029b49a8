#!/usr/bin/env python3
"""
character-hash command line

Maps a 16-hex-character (64-bit) key to a deterministic ideographic glyph and
writes it as SVG to stdout or a file.

Usage:
    character-hash <16-hex-chars> [out.svg] [--size PX] [--stroke PX] [--pad PX] [--fg COLOR] [--bg COLOR|none]
    python -m charhash.make_glyph deadbeefcafebabe --out deadbeef.svg
"""

import os
import sys
from typing import List, Optional

from pydantic import ValidationError

from charhash.cli.args import build_parser, parse_cli
from charhash.core import configure_logging, get_logger, load_config
from charhash.glyph.sdk import GlyphInputError, InvalidOption, InvalidSeed
from charhash.glyph.svg_render import build_options, generate_svg
from charhash.utils.seed import normalize_seed

log = get_logger("charhash.cli")


def _fail(message: str, usage: Optional[str] = None) -> int:
    sys.stderr.write(f"{message}\n")
    if usage:
        sys.stderr.write(f"\n{usage}")
    return 1


def write_output(svg: str, out: Optional[str]) -> None:
    if out:
        out_path = os.path.join(os.getcwd(), out)
        with open(out_path, "w", encoding="utf-8") as f:
            f.write(svg)
        log.info(f"Wrote {len(svg)} bytes to {out_path}")
    else:
        sys.stdout.write(svg)


def main(argv: Optional[List[str]] = None) -> int:
    try:
        cfg = load_config()
    except (ValidationError, ValueError, FileNotFoundError) as e:
        return _fail(f"Invalid configuration: {e}")
    configure_logging(cfg)

    parser = build_parser(cfg)
    try:
        args = parse_cli(parser, argv)
    except GlyphInputError as e:
        return _fail(str(e), parser.format_help())

    if args.help:
        sys.stdout.write(parser.format_help())
        return 0

    try:
        seed = normalize_seed(args.key)
    except InvalidSeed as e:
        return _fail(str(e), parser.format_help())

    try:
        opts = build_options(size=args.size, stroke=args.stroke, pad=args.pad, fg=args.fg, bg=args.bg)
    except InvalidOption as e:
        return _fail(str(e))

    svg = generate_svg(seed, **opts.model_dump())
    try:
        write_output(svg, args.out)
    except OSError as e:
        log.error(f"Failed to write {args.out}: {e}")
        return _fail(f"Could not write {args.out}: {e}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
