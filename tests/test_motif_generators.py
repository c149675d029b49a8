"""
Tests for the motif catalog: dispatch completeness, stroke counts and
confinement of every motif to the region it is given.
"""

import pytest

from charhash.glyph.motif_generators import (
    LEFT_RADICALS,
    MAIN_MOTIFS,
    MOTIF_HANDLERS,
    OPEN_SIDES,
    Motif,
    draw_bars,
    draw_enclosure,
    draw_motif,
    pick_left_radical,
    pick_main_motif,
)
from charhash.glyph.prng import SeededStream
from charhash.glyph.sdk import Region

from conftest import ZeroStream

SEEDS = ["0000000000000000", "ffffffffffffffff", "0123456789abcdef", "deadbeefcafebabe", "8badf00d00c0ffee"]

BAR_LINES = {Motif.TRIGRAM: 3, Motif.HEXAGRAM: 6}

REGIONS = [
    Region(100, 100, 800, 800),
    Region(80, 300, 780, 420),  # wide, like a top-bottom lower slot
    Region(300, 90, 480, 820),  # tall, like a left-right right slot
]


class TestCatalogShape:
    def test_every_motif_has_a_handler(self):
        assert set(MOTIF_HANDLERS) == set(Motif)

    def test_main_catalog(self):
        assert len(MAIN_MOTIFS) == 18
        assert len(set(MAIN_MOTIFS)) == 18
        assert MAIN_MOTIFS[0] is Motif.SUN
        assert MAIN_MOTIFS[-1] is Motif.EARTH

    def test_slot_lists_are_disjoint_from_main(self):
        assert not set(LEFT_RADICALS) & set(MAIN_MOTIFS)
        assert Motif.GRASS_TOP not in MAIN_MOTIFS

    def test_picks_come_from_their_lists(self):
        rng = SeededStream("0123456789abcdef")
        assert {pick_main_motif(rng) for _ in range(600)} == set(MAIN_MOTIFS)
        assert {pick_left_radical(rng) for _ in range(100)} == set(LEFT_RADICALS)


class TestMotifOutput:
    @pytest.mark.parametrize("motif", list(Motif))
    def test_stroke_count(self, motif):
        # every bar may break in two, plus two rails
        most = BAR_LINES[motif] * 2 + 2 if motif in BAR_LINES else 6
        for seed in SEEDS:
            paths = []
            draw_motif(motif, SeededStream(seed), REGIONS[0], paths)
            assert 1 <= len(paths) <= most, f"{motif.value} emitted {len(paths)} strokes"

    @pytest.mark.parametrize("motif", MAIN_MOTIFS)
    def test_main_motifs_stay_in_region(self, motif, path_points):
        for region in REGIONS:
            for seed in SEEDS:
                paths = []
                draw_motif(motif, SeededStream(seed), region, paths)
                for d in paths:
                    for x, y in path_points(d):
                        assert region.contains(x, y, tolerance=0.05), (motif.value, region, d)

    @pytest.mark.parametrize("motif", LEFT_RADICALS)
    def test_left_radicals_stay_in_narrow_region(self, motif, path_points):
        region = Region(70, 70, 220, 830)
        for seed in SEEDS:
            paths = []
            draw_motif(motif, SeededStream(seed), region, paths)
            for d in paths:
                for x, y in path_points(d):
                    assert region.contains(x, y, tolerance=0.05)

    @pytest.mark.parametrize("motif", [Motif.WATER_LEFT, Motif.ALCH_SUN])
    def test_dots_clipped_to_short_region(self, motif, path_points):
        # dot tails hang up to 1.2 r below the anchor, far past a region this flat
        region = Region(100, 400, 300, 40)
        for seed in SEEDS:
            paths = []
            draw_motif(motif, SeededStream(seed), region, paths)
            for d in paths:
                for x, y in path_points(d):
                    assert region.contains(x, y, tolerance=0.05), (motif.value, d)

    def test_append_only(self):
        paths = ["M 0 0 L 1 1"]
        draw_motif(Motif.FIELD, SeededStream(SEEDS[0]), REGIONS[0], paths)
        assert paths[0] == "M 0 0 L 1 1"
        assert len(paths) == 4

    def test_same_stream_state_same_strokes(self):
        a, b = [], []
        draw_motif(Motif.AQUARIUS, SeededStream(SEEDS[3]), REGIONS[1], a)
        draw_motif(Motif.AQUARIUS, SeededStream(SEEDS[3]), REGIONS[1], b)
        assert a == b


class TestBars:
    def test_bar_count_for_trigram_and_hexagram(self):
        for lines in (3, 6):
            for seed in SEEDS:
                paths = []
                draw_bars(SeededStream(seed), REGIONS[0], paths, lines)
                # each bar is one or two strokes, plus zero or two rails
                assert lines <= len(paths) <= 2 * lines + 2

    @pytest.mark.parametrize("motif, strokes", [(Motif.TRIGRAM, 8), (Motif.HEXAGRAM, 14)])
    def test_every_bar_broken_with_rails(self, motif, strokes):
        paths = []
        draw_motif(motif, ZeroStream(SEEDS[0]), REGIONS[0], paths)
        assert len(paths) == strokes

    def test_always_solid_when_break_never_fires(self, monkeypatch):
        rng = SeededStream(SEEDS[0])
        monkeypatch.setattr(rng, "chance", lambda p: False)
        paths = []
        draw_bars(rng, REGIONS[0], paths, 6)
        assert len(paths) == 6


class TestEnclosure:
    @pytest.mark.parametrize("side", OPEN_SIDES)
    def test_frame_is_one_path_of_two_runs(self, side):
        paths = []
        draw_enclosure(SeededStream(SEEDS[2]), REGIONS[0], paths, side)
        assert paths[0].count("M") == 2
        assert len(paths) in (1, 2)

    def test_unknown_side_rejected(self):
        with pytest.raises(ValueError):
            draw_enclosure(SeededStream(SEEDS[2]), REGIONS[0], [], "middle")
