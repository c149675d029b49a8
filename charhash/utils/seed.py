# charhash/utils/seed.py
import re
from typing import Optional

from charhash.glyph.sdk import InvalidSeed

_HEX64 = re.compile(r"^[0-9a-fA-F]{16}$")

SEED_HINT = (
    'Expected a 16-hex-character string (64-bit), e.g. "0123456789abcdef" or '
    '"0xDEADBEEFCAFEBABE".'
)


def normalize_seed(raw: Optional[str]) -> str:
    """
    Canonical seed form: 16 lowercase hex digits.
      - Surrounding whitespace is ignored.
      - An optional 0x / 0X prefix is stripped.
      - Anything other than exactly 16 hex digits raises InvalidSeed.
    """
    if not isinstance(raw, str) or not raw.strip():
        raise InvalidSeed(SEED_HINT)
    s = raw.strip()
    if s[:2] in ("0x", "0X"):
        s = s[2:]
    if not _HEX64.fullmatch(s):
        raise InvalidSeed(SEED_HINT)
    return s.lower()
