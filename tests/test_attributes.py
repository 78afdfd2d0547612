# test_attributes.py

import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from attrtext.text import Attributes, Color, Mode
from attrtext.text.attributes import coalesce


BOLD = Attributes(bold=True)
INVERT = Attributes(invert=True)
BLUE = Attributes(color=Color.BLUE)
RED = Attributes(color=Color.RED)


class TestMerged:
    """Combining attribute sets."""

    def test_flags_are_ored(self):
        assert Attributes(bold=True, invert=True) == BOLD.merged(INVERT)
        assert Attributes(invert=True, color=Color.BLUE) == BLUE.merged(INVERT)

    def test_flags_commute(self):
        samples = [BOLD, INVERT, BLUE, RED, Attributes(), Attributes(bold=True, color=Color.RED)]
        for a in samples:
            for b in samples:
                assert a.merged(b).bold == b.merged(a).bold
                assert a.merged(b).invert == b.merged(a).invert

    def test_receiver_color_wins(self):
        assert BLUE.merged(RED).color is Color.BLUE
        assert RED.merged(BLUE).color is Color.RED

    def test_missing_color_is_filled_from_other(self):
        assert Attributes().merged(RED).color is Color.RED
        on_green = Attributes(background=Color.GREEN)
        assert BOLD.merged(on_green).background is Color.GREEN
        assert on_green.merged(Attributes(background=Color.RED)).background is Color.GREEN

    def test_merge_does_not_mutate(self):
        BOLD.merged(BLUE)
        assert BOLD == Attributes(bold=True)
        assert BLUE == Attributes(color=Color.BLUE)

    def test_coalesce(self):
        assert coalesce(None, 2) == 2
        assert coalesce(1, 2) == 1
        assert coalesce(None, None) is None
        assert coalesce(False, True) is False


class TestMarkup:
    """Markup output is nested tags in a fixed order."""

    def test_plain_text_is_untouched(self):
        assert Attributes().render_with_mode("Hello", Mode.MARKUP) == "Hello"

    def test_bold(self):
        assert BOLD.render_with_mode("Hello", Mode.MARKUP) == "<b>Hello</b>"

    def test_bold_and_color(self):
        attrs = Attributes(bold=True, color=Color.BLUE)
        assert attrs.render_with_mode("Hello", Mode.MARKUP) == "<b><fg:Blue>Hello</fg:Blue></b>"

    def test_tag_nesting_order(self):
        attrs = Attributes(bold=True, invert=True, color=Color.GREEN, background=Color.DARK_RED)
        assert attrs.render_with_mode("x", Mode.MARKUP) == (
            "<b><invert><bg:DarkRed><fg:Green>x</fg:Green></bg:DarkRed></invert></b>"
        )

    def test_background_only(self):
        attrs = Attributes(background=Color.DARK_GREY)
        assert attrs.render_with_mode("x", Mode.MARKUP) == "<bg:DarkGrey>x</bg:DarkGrey>"


class TestTerminal:
    """Terminal output uses SGR escape codes."""

    def test_plain_text_is_untouched(self):
        assert Attributes().render("Hello") == "Hello"

    def test_bold(self):
        assert BOLD.render("Hello") == "\x1b[1mHello\x1b[0m"

    def test_bold_and_color(self):
        assert Attributes(bold=True, color=Color.BLUE).render("Hello") == "\x1b[1;94mHello\x1b[0m"

    def test_code_order(self):
        attrs = Attributes(bold=True, invert=True, color=Color.BLUE, background=Color.DARK_RED)
        assert attrs.render("x") == "\x1b[1;7;94;41mx\x1b[0m"

    def test_dark_colors_use_standard_codes(self):
        assert Attributes(color=Color.DARK_GREEN).render("x") == "\x1b[32mx\x1b[0m"
        assert Attributes(background=Color.GREY).render("x") == "\x1b[47mx\x1b[0m"

    def test_render_defaults_to_terminal(self):
        attrs = Attributes(invert=True, color=Color.CYAN)
        assert attrs.render("x") == attrs.render_with_mode("x", Mode.TERMINAL)


class TestColor:

    def test_display_names(self):
        assert str(Color.BLUE) == "Blue"
        assert str(Color.DARK_MAGENTA) == "DarkMagenta"
        assert str(Color.DARK_GREY) == "DarkGrey"

    def test_parse(self):
        assert Color.parse("Blue") is Color.BLUE
        assert Color.parse("darkred") is Color.DARK_RED
        assert Color.parse("DARK_YELLOW") is Color.DARK_YELLOW

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            Color.parse("Chartreuse")
