import pytest

from ghost_tab.text import pad_to, strip_ansi, truncate_end, truncate_middle, visible_width
from ghost_tab.theme import paint


class TestWidth:
    def test_escapes_are_zero_width(self):
        assert visible_width(paint("hello", 209, bold=True)) == 5

    def test_wide_characters_count_two(self):
        assert visible_width("日本") == 4

    def test_box_glyphs_are_narrow(self):
        assert visible_width("┌─│▎⬡◂▸⏎↑↓←→█▀▄▬") == 16

    def test_strip_ansi(self):
        assert strip_ansi("\x1b[1;38;5;208mhi\x1b[0m") == "hi"

    def test_pad_to(self):
        padded = pad_to(paint("ab", 166), 5)
        assert visible_width(padded) == 5
        assert padded.endswith("   ")
        assert pad_to("toolong", 3) == "toolong"


class TestTruncate:
    def test_end(self):
        assert truncate_end("abcdef", 6) == "abcdef"
        assert truncate_end("abcdef", 4) == "abc…"
        assert truncate_end("abcdef", 1) == "…"
        assert truncate_end("abcdef", 0) == ""

    def test_middle(self):
        assert truncate_middle("abcdefghij", 10) == "abcdefghij"
        assert truncate_middle("abcdefghij", 5) == "ab…ij"
        assert truncate_middle("abcdefghij", 6) == "abc…ij"

    @pytest.mark.parametrize("width", range(0, 12))
    def test_middle_never_exceeds_width_with_wide_chars(self, width):
        out = truncate_middle("日本語のプロジェクト", width)
        assert visible_width(out) <= width


def test_paint_sgr():
    assert paint("x", 209) == "\x1b[38;5;209mx\x1b[0m"
    assert paint("x", 166, bold=True) == "\x1b[1;38;5;166mx\x1b[0m"
    assert paint("x", 178, dim=True) == "\x1b[2;38;5;178mx\x1b[0m"
    assert paint("", 209) == ""
