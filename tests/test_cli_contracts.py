import pytest

from charhash.cli.args import build_parser, parse_cli
from charhash.core import GlyphConfig
from charhash.glyph.sdk import InvalidOption, TooManyArguments, UnknownOption
from charhash.glyph.svg_render import generate_svg
from charhash.make_glyph import main

SEED = "0123456789abcdef"


def test_cli_flags_present():
    ap = build_parser()
    args = parse_cli(
        ap,
        [
            SEED,
            "--size",
            "512",
            "--stroke",
            "18",
            "--pad",
            "20",
            "--fg",
            "#111",
            "--bg",
            "white",
            "--out",
            "g.svg",
        ],
    )
    assert args.key == SEED
    assert args.size == "512"
    assert args.stroke == "18"
    assert args.pad == "20"
    assert args.fg == "#111"
    assert args.bg == "white"
    assert args.out == "g.svg"
    assert not args.help


def test_defaults_come_from_config():
    ap = build_parser(GlyphConfig(size=64, fg="red"))
    args = parse_cli(ap, [SEED])
    assert args.size == 64
    assert args.fg == "red"
    assert args.out is None


def test_options_may_precede_positionals():
    args = parse_cli(build_parser(), ["--size", "64", SEED, "out.svg"])
    assert args.key == SEED
    assert args.out == "out.svg"


def test_explicit_out_wins_over_positional():
    args = parse_cli(build_parser(), [SEED, "a.svg", "--out", "b.svg"])
    assert args.out == "b.svg"


def test_negative_values_reach_validation():
    args = parse_cli(build_parser(), [SEED, "--size", "-5", "--pad", "-1"])
    assert args.size == "-5"
    assert args.pad == "-1"


@pytest.mark.parametrize(
    "argv, exc",
    [
        ([SEED, "--bogus"], UnknownOption),
        ([SEED, "a.svg", "b.svg"], TooManyArguments),
        ([SEED, "--size"], InvalidOption),
        ([SEED, "--siz", "5"], UnknownOption),
    ],
)
def test_parse_errors(argv, exc):
    with pytest.raises(exc):
        parse_cli(build_parser(), argv)


def test_main_writes_svg_to_stdout(capsys):
    assert main([SEED]) == 0
    out = capsys.readouterr().out
    assert out == generate_svg(SEED)


def test_main_writes_positional_output_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([SEED, "glyph.svg", "--size", "512"]) == 0
    assert (tmp_path / "glyph.svg").read_text(encoding="utf-8") == generate_svg(SEED, size=512)
    assert capsys.readouterr().out == ""


def test_main_writes_out_flag_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["0xDEADBEEFCAFEBABE", "--out", "d.svg", "--bg", "white"]) == 0
    text = (tmp_path / "d.svg").read_text(encoding="utf-8")
    assert text == generate_svg("deadbeefcafebabe", bg="white")


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["xyz"],
        ["abc"],
        [SEED, "--size", "-5"],
        [SEED, "--size", "abc"],
        [SEED, "--pad", "-1"],
        [SEED, "--stroke", "0"],
        [SEED, "--bogus"],
        [SEED, "a.svg", "b.svg"],
        [SEED, "--fg"],
    ],
)
def test_main_usage_errors_exit_1(argv, capsys):
    assert main(argv) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err


def test_invalid_seed_message(capsys):
    assert main(["xyz"]) == 1
    assert "16-hex-character" in capsys.readouterr().err


def test_help_exits_0(capsys):
    assert main(["--help"]) == 0
    out = capsys.readouterr().out
    assert "character-hash" in out
    assert "--size" in out


def test_unwritable_output_exits_1(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main([SEED, "missing_dir/g.svg"]) == 1
