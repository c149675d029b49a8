import pytest

from charhash.glyph.sdk import GlyphInputError, InvalidSeed
from charhash.utils.seed import SEED_HINT, normalize_seed


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("0123456789abcdef", "0123456789abcdef"),
        ("0123456789ABCDEF", "0123456789abcdef"),
        ("0x0123456789abcdef", "0123456789abcdef"),
        ("0XDEADBEEFCAFEBABE", "deadbeefcafebabe"),
        ("  deadbeefcafebabe\n", "deadbeefcafebabe"),
    ],
)
def test_normalize_seed(raw, expected):
    assert normalize_seed(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [
        None,
        "",
        "   ",
        "xyz",
        "abc",
        "0x",
        "0123456789abcdef0",
        "0123456789abcde",
        "0123456789abcdeg",
        "0x0x0123456789ab",
        "0123456789abcdef\nff",
    ],
)
def test_invalid_seeds(raw):
    with pytest.raises(InvalidSeed) as exc:
        normalize_seed(raw)
    assert str(exc.value) == SEED_HINT


def test_invalid_seed_is_a_value_error():
    assert issubclass(InvalidSeed, GlyphInputError)
    assert issubclass(InvalidSeed, ValueError)
