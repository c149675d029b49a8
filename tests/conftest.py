"""
Test configuration and fixtures for the glyph generator.

This module provides pytest fixtures and environment isolation so that:
- CHARHASH_* overrides in the developer's shell never leak into tests
- seed samples are reproducible across runs
- emitted path data can be checked coordinate by coordinate
"""

import os
import random
import re
import sys

import pytest

# Ensure repo root is on sys.path
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from charhash.glyph.prng import SeededStream  # noqa: E402

# Coordinates are printed with one decimal, so a point may sit 0.05 past a bound
FMT_TOLERANCE = 0.05 + 1e-9

GOLDEN_DIR = os.path.join(os.path.dirname(__file__), "golden")


class ZeroStream(SeededStream):
    """Stream that always draws 0.0: every pick lands on the first item, every chance fires."""

    def next(self) -> float:
        self.draws += 1
        return 0.0


_TOKEN = re.compile(r"[MLQA]|-?\d+(?:\.\d+)?")
_ARITY = {"M": 2, "L": 2, "Q": 4, "A": 7}


def extract_points(d):
    """
    Return every (x, y) point a path command places: M/L endpoints, Q control
    and end points, A endpoints. Arc radii, rotation and flags are skipped.
    """
    tokens = _TOKEN.findall(d)
    points = []
    i = 0
    while i < len(tokens):
        cmd = tokens[i]
        if cmd not in _ARITY:
            raise ValueError(f"Unexpected token {cmd!r} in path {d!r}")
        args = [float(t) for t in tokens[i + 1:i + 1 + _ARITY[cmd]]]
        if len(args) != _ARITY[cmd]:
            raise ValueError(f"Truncated {cmd} command in path {d!r}")
        if cmd == "A":
            points.append((args[5], args[6]))
        else:
            points.extend(zip(args[0::2], args[1::2]))
        i += 1 + _ARITY[cmd]
    return points


@pytest.fixture
def path_points():
    return extract_points


@pytest.fixture(scope="session")
def random_seeds():
    """1,000 reproducible canonical seeds."""
    rnd = random.Random(20240611)
    return [f"{rnd.getrandbits(64):016x}" for _ in range(1000)]


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Drop CHARHASH_* variables so config defaults are what tests see."""
    for key in list(os.environ):
        if key.startswith("CHARHASH_"):
            monkeypatch.delenv(key, raising=False)
