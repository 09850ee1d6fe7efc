"""Color parser used by the ``rgba`` and ``color`` sanitizers.

Reads the color notations a color control can submit and returns a
:class:`ColorValue` that remembers which notation it came from (its
*mode*), so it can be written back either in that notation or in another.

Accepted input
--------------
- hex: ``#rgb`` / ``#rrggbb``, with or without the ``#``;
- functional: ``rgb()``, ``rgba()``, ``hsl()``, ``hsla()`` with comma or
  space separated arguments (``%`` allowed for channels and alpha, ``deg``
  for hue);
- the basic CSS named colors and ``transparent``;
- ``(r, g, b)`` / ``(r, g, b, a)`` sequences.

Anything else is read as a damaged hex string: non-hex characters are
dropped, three digits are expanded and the rest is padded with ``0`` or cut
to six digits.  Parsing therefore never fails; garbage becomes a color.

Output is written without spaces (``rgba(255,0,0,0.5)``), the format the
CMS stores.
"""
from __future__ import annotations

import colorsys
import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass

logger = logging.getLogger(__name__)

MODES = frozenset({"hex", "rgb", "rgba", "hsl", "hsla"})

# CSS Level 1 keywords plus orange.
NAMED_COLORS: dict[str, str] = {
    "black": "#000000",
    "silver": "#c0c0c0",
    "gray": "#808080",
    "grey": "#808080",
    "white": "#ffffff",
    "maroon": "#800000",
    "red": "#ff0000",
    "purple": "#800080",
    "fuchsia": "#ff00ff",
    "green": "#008000",
    "lime": "#00ff00",
    "olive": "#808000",
    "yellow": "#ffff00",
    "navy": "#000080",
    "blue": "#0000ff",
    "teal": "#008080",
    "aqua": "#00ffff",
    "orange": "#ffa500",
}

_FUNCTION_RE = re.compile(r"^(rgba?|hsla?)\s*\(\s*(.*?)\s*\)$")
_ARG_SPLIT_RE = re.compile(r"\s*[,/]\s*|\s+")
_NUMBER_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)")
_HEX_RE = re.compile(r"#?(?:[0-9a-f]{3}|[0-9a-f]{6})")
_NON_HEX_RE = re.compile(r"[^0-9a-f]")


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _read_number(token: str) -> float:
    match = _NUMBER_RE.match(token)
    return float(match.group(0)) if match else 0.0


def _read_channel(token: str) -> int:
    """Read an RGB channel: ``0..255`` or a percentage."""
    number = _read_number(token)
    if token.endswith("%"):
        number = number * 255 / 100
    return int(round(_clamp(number, 0, 255)))


def _read_alpha(token: str) -> float:
    number = _read_number(token)
    if token.endswith("%"):
        number = number / 100
    return _clamp(number, 0.0, 1.0)


def _read_hue(token: str) -> float:
    return _read_number(token) % 360


def _read_percent(token: str) -> float:
    return _clamp(_read_number(token), 0.0, 100.0)


def _format_number(value: float) -> str:
    return f"{value:g}"


@dataclass(frozen=True, slots=True)
class ColorValue:
    """A parsed color in RGB and HSL terms, tagged with its source notation."""

    red: int
    green: int
    blue: int
    alpha: float = 1.0
    hue: float = 0.0
    saturation: float = 0.0
    lightness: float = 0.0
    mode: str = "hex"

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int, alpha: float = 1.0, *, mode: str = "rgb") -> ColorValue:
        hue, lightness, saturation = colorsys.rgb_to_hls(red / 255, green / 255, blue / 255)
        return cls(
            red=red,
            green=green,
            blue=blue,
            alpha=alpha,
            hue=hue * 360,
            saturation=saturation * 100,
            lightness=lightness * 100,
            mode=mode,
        )

    @classmethod
    def from_hsl(
        cls, hue: float, saturation: float, lightness: float, alpha: float = 1.0, *, mode: str = "hsl"
    ) -> ColorValue:
        red, green, blue = colorsys.hls_to_rgb(hue / 360, lightness / 100, saturation / 100)
        return cls(
            red=int(round(red * 255)),
            green=int(round(green * 255)),
            blue=int(round(blue * 255)),
            alpha=alpha,
            hue=hue,
            saturation=saturation,
            lightness=lightness,
            mode=mode,
        )

    @classmethod
    def from_hex(cls, text: str) -> ColorValue:
        digits = _NON_HEX_RE.sub("", text.lower())
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        digits = digits.ljust(6, "0")[:6]
        return cls.from_rgb(
            int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16), mode="hex"
        )

    @property
    def hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def to_css(self, mode: str | None = None) -> str:
        """Render the color in *mode* (default: the color's own mode)."""
        mode = mode or self.mode
        if mode not in MODES:
            raise ValueError(f"Unknown color mode: {mode!r}")
        if mode == "hex":
            return self.hex
        if mode == "rgb":
            return f"rgb({self.red},{self.green},{self.blue})"
        if mode == "rgba":
            return f"rgba({self.red},{self.green},{self.blue},{_format_number(self.alpha)})"

        hsl = f"{round(self.hue)},{round(self.saturation)}%,{round(self.lightness)}%"
        if mode == "hsl":
            return f"hsl({hsl})"
        return f"hsla({hsl},{_format_number(self.alpha)})"


def _parse_function(name: str, body: str) -> ColorValue:
    args = [arg for arg in _ARG_SPLIT_RE.split(body) if arg]
    args += ["0"] * (3 - len(args))
    alpha = _read_alpha(args[3]) if len(args) > 3 else 1.0

    if name.startswith("rgb"):
        return ColorValue.from_rgb(
            _read_channel(args[0]), _read_channel(args[1]), _read_channel(args[2]), alpha, mode=name
        )
    return ColorValue.from_hsl(
        _read_hue(args[0]), _read_percent(args[1]), _read_percent(args[2]), alpha, mode=name
    )


def _parse_sequence(value: Sequence) -> ColorValue:
    channels = [_read_channel(str(part)) for part in value[:3]]
    channels += [0] * (3 - len(channels))
    if len(value) > 3:
        return ColorValue.from_rgb(*channels, _read_alpha(str(value[3])), mode="rgba")
    return ColorValue.from_rgb(*channels, mode="rgb")


def parse_color(value: object) -> ColorValue:
    """Parse *value* into a :class:`ColorValue`.  Never raises."""
    if isinstance(value, ColorValue):
        return value
    if isinstance(value, Sequence) and not isinstance(value, str):
        return _parse_sequence(value)

    text = "" if value is None else str(value).strip().lower()

    if text == "transparent":
        return ColorValue.from_rgb(0, 0, 0, 0.0, mode="rgba")
    if text in NAMED_COLORS:
        return ColorValue.from_hex(NAMED_COLORS[text])

    match = _FUNCTION_RE.match(text)
    if match:
        return _parse_function(match.group(1), match.group(2))

    if not _HEX_RE.fullmatch(text):
        logger.debug("parse_color: unrecognised notation (length=%d), reading as hex", len(text))
    return ColorValue.from_hex(text)
