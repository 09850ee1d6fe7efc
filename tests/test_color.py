"""Tests for the color parser and the rgba / color sanitizers."""
from __future__ import annotations

import pytest

from customizer.sanitization.color import sanitize_color, sanitize_rgba
from customizer.sanitization.color_parser import ColorValue, parse_color


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


class TestParseColorModes:
    def test_hex(self) -> None:
        color = parse_color("#FF0000")
        assert (color.red, color.green, color.blue, color.mode) == (255, 0, 0, "hex")

    def test_short_hex_expanded(self) -> None:
        assert parse_color("#0f0").hex == "#00ff00"

    def test_hex_without_hash(self) -> None:
        assert parse_color("0000ff").hex == "#0000ff"

    def test_rgb(self) -> None:
        color = parse_color("rgb(10, 20, 30)")
        assert (color.red, color.green, color.blue, color.mode) == (10, 20, 30, "rgb")

    def test_rgba(self) -> None:
        color = parse_color("rgba(10,20,30,0.5)")
        assert color.alpha == 0.5
        assert color.mode == "rgba"

    def test_space_separated_rgb_with_slash_alpha(self) -> None:
        color = parse_color("rgba(10 20 30 / 50%)")
        assert (color.red, color.green, color.blue, color.alpha) == (10, 20, 30, 0.5)

    def test_hsl(self) -> None:
        color = parse_color("hsl(120, 100%, 50%)")
        assert (color.red, color.green, color.blue, color.mode) == (0, 255, 0, "hsl")

    def test_hsla(self) -> None:
        color = parse_color("hsla(240deg, 100%, 50%, 0.25)")
        assert (color.blue, color.alpha, color.mode) == (255, 0.25, "hsla")

    def test_named_color(self) -> None:
        color = parse_color("Orange")
        assert (color.hex, color.mode) == ("#ffa500", "hex")

    def test_transparent_keyword(self) -> None:
        color = parse_color("transparent")
        assert color.alpha == 0.0
        assert color.mode == "rgba"

    def test_sequence(self) -> None:
        assert parse_color((1, 2, 3)).to_css() == "rgb(1,2,3)"
        assert parse_color([1, 2, 3, 0.4]).to_css() == "rgba(1,2,3,0.4)"

    def test_color_value_passes_through(self) -> None:
        color = ColorValue.from_rgb(1, 2, 3)
        assert parse_color(color) is color


class TestParseColorDegradesToHex:
    def test_channels_clamped(self) -> None:
        assert parse_color("rgb(300, -5, 128)").to_css() == "rgb(255,0,128)"

    def test_garbage_reads_as_hex(self) -> None:
        # "zz12" keeps "12", padded to "120000"
        assert parse_color("zz12").hex == "#120000"

    def test_empty_is_black(self) -> None:
        assert parse_color("").hex == "#000000"

    def test_none_is_black(self) -> None:
        assert parse_color(None).hex == "#000000"

    def test_long_hex_truncated(self) -> None:
        assert parse_color("#11223344").hex == "#112233"


class TestColorValueToCss:
    _RED = ColorValue.from_rgb(255, 0, 0, mode="hex")

    def test_hex(self) -> None:
        assert self._RED.to_css("hex") == "#ff0000"

    def test_rgb(self) -> None:
        assert self._RED.to_css("rgb") == "rgb(255,0,0)"

    def test_rgba(self) -> None:
        assert self._RED.to_css("rgba") == "rgba(255,0,0,1)"

    def test_hsl(self) -> None:
        assert self._RED.to_css("hsl") == "hsl(0,100%,50%)"

    def test_hsla(self) -> None:
        assert self._RED.to_css("hsla") == "hsla(0,100%,50%,1)"

    def test_default_mode(self) -> None:
        assert self._RED.to_css() == "#ff0000"

    def test_unknown_mode(self) -> None:
        with pytest.raises(ValueError):
            self._RED.to_css("cmyk")


# ---------------------------------------------------------------------------
# Sanitizers
# ---------------------------------------------------------------------------


class TestSanitizeRgba:
    def test_hex_to_rgba(self) -> None:
        assert sanitize_rgba("#FF0000") == "rgba(255,0,0,1)"

    def test_hex_and_hsl_agree(self) -> None:
        assert sanitize_rgba("#ff0000") == sanitize_rgba("hsl(0, 100%, 50%)")

    def test_named_and_rgb_agree(self) -> None:
        assert sanitize_rgba("blue") == sanitize_rgba("rgb(0,0,255)")

    def test_alpha_kept(self) -> None:
        assert sanitize_rgba("rgba(0, 0, 0, .3)") == "rgba(0,0,0,0.3)"

    def test_custom_parser_is_used(self) -> None:
        calls = []

        def parser(value):
            calls.append(value)
            return ColorValue.from_rgb(1, 2, 3)

        assert sanitize_rgba("anything", parse_color=parser) == "rgba(1,2,3,1)"
        assert calls == ["anything"]


class TestSanitizeColor:
    def test_empty(self) -> None:
        assert sanitize_color("") == ""

    def test_none(self) -> None:
        assert sanitize_color(None) == ""

    def test_transparent(self) -> None:
        assert sanitize_color("transparent") == "transparent"

    def test_padded_transparent(self) -> None:
        assert sanitize_color("  transparent ") == "transparent"

    def test_transparent_is_case_sensitive(self) -> None:
        # Falls through to the parser, which reads it as a zero-alpha rgba
        assert sanitize_color("Transparent") == "rgba(0,0,0,0)"

    def test_hex_keeps_hex_mode(self) -> None:
        result = sanitize_color("#FF0000")
        assert result == "#ff0000"
        assert parse_color(result).to_css("rgba") == parse_color("#FF0000").to_css("rgba")

    def test_rgba_keeps_rgba_mode(self) -> None:
        assert sanitize_color("rgba(255, 255, 255, 0.8)") == "rgba(255,255,255,0.8)"

    def test_hsl_keeps_hsl_mode(self) -> None:
        assert sanitize_color("hsl(200, 50%, 40%)") == "hsl(200,50%,40%)"

    def test_parser_not_called_for_keywords(self) -> None:
        def parser(value):
            raise AssertionError("parser should not run")

        assert sanitize_color("", parse_color=parser) == ""
        assert sanitize_color("transparent", parse_color=parser) == "transparent"
