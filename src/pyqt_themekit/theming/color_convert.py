"""
Color representation and conversion.

Canonical colors are ``#rrggbb`` strings in lowercase. RGB triples are
integers in [0, 255]; HSL triples are ``(h, s, l)`` floats with hue in
degrees [0, 360) and saturation/lightness in percent [0, 100].
"""

import logging
import math
import re
from typing import Optional, Tuple

from pyqt_themekit.protocols.engine_config import get_engine_config
from pyqt_themekit.theming.exceptions import ValidationError

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]
HSL = Tuple[float, float, float]

_HEX_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{6}$")
_HEX_GROUP_RE = re.compile(r"^[0-9a-fA-F]{2}$")


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def is_valid_hex(value: str) -> bool:
    """Return True if ``value`` is a well-formed ``#rrggbb`` color (any case)."""
    return isinstance(value, str) and bool(_HEX_COLOR_RE.match(value))


def normalize_hex(value: str) -> str:
    """
    Return the canonical lowercase form of a well-formed hex color.

    Raises:
        ValidationError: If ``value`` is not a ``#rrggbb`` string
    """
    if not is_valid_hex(value):
        raise ValidationError(f"Not a hex color: {value!r}")
    return value.lower()


def hex_to_rgb(hex_color: str, strict: Optional[bool] = None) -> RGB:
    """
    Convert a hex color to an RGB tuple.

    Parsing is lenient by default: each two-digit group that is not valid
    hex resolves to channel value 0 rather than failing. With ``strict``
    (or ``ThemeEngineConfig.strict_hex``) malformed input raises instead.

    Args:
        hex_color: Hex color string (e.g., "#0ea5e9")
        strict: Override the configured strictness

    Returns:
        RGB tuple (r, g, b) with values 0-255

    Raises:
        ValidationError: In strict mode, if ``hex_color`` is malformed
    """
    if strict is None:
        strict = get_engine_config().strict_hex

    if strict and not is_valid_hex(hex_color):
        raise ValidationError(f"Not a hex color: {hex_color!r}")

    digits = hex_color[1:] if hex_color.startswith("#") else hex_color
    channels = []
    for start in (0, 2, 4):
        group = digits[start:start + 2]
        if _HEX_GROUP_RE.match(group):
            channels.append(int(group, 16))
        else:
            logger.debug(f"Malformed hex group {group!r} in {hex_color!r}, using 0")
            channels.append(0)
    return channels[0], channels[1], channels[2]


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """
    Convert RGB channels to a canonical hex color string.

    Each channel is rounded to the nearest integer (halves round up) and
    clamped to [0, 255] before encoding.

    Returns:
        str: Hex color string (e.g., "#ff0000")
    """
    r, g, b = (int(_clamp(_round_half_up(c), 0, 255)) for c in (r, g, b))
    return f"#{r:02x}{g:02x}{b:02x}"


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    """Convert RGB channels (0-255) to an HSL triple."""
    r, g, b = r / 255.0, g / 255.0, b / 255.0
    high = max(r, g, b)
    low = min(r, g, b)
    lightness = (high + low) / 2

    if high == low:
        return 0.0, 0.0, lightness * 100

    delta = high - low
    if lightness > 0.5:
        saturation = delta / (2 - high - low)
    else:
        saturation = delta / (high + low)

    if high == r:
        hue = (g - b) / delta + (6 if g < b else 0)
    elif high == g:
        hue = (b - r) / delta + 2
    else:
        hue = (r - g) / delta + 4

    return (hue * 60) % 360, saturation * 100, lightness * 100


def hex_to_hsl(hex_color: str, strict: Optional[bool] = None) -> HSL:
    """Convert a hex color to an HSL triple; hue is 0 for grays."""
    return rgb_to_hsl(*hex_to_rgb(hex_color, strict=strict))


def hsl_to_rgb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """
    Convert an HSL triple to unrounded RGB channels (0-255 floats).

    Hue is taken modulo 360; saturation and lightness are clamped to
    [0, 100]. Uses the chroma/midpoint form
    ``f(n) = l - a * max(-1, min(k - 3, 9 - k, 1))`` for every channel.
    """
    h = h % 360
    s = _clamp(s, 0, 100) / 100
    l = _clamp(l, 0, 100) / 100
    a = s * min(l, 1 - l)

    def channel(n: int) -> float:
        k = (n + h / 30) % 12
        return (l - a * max(-1.0, min(k - 3, 9 - k, 1.0))) * 255

    return channel(0), channel(8), channel(4)


def hsl_to_hex(h: float, s: float, l: float) -> str:
    """Convert an HSL triple to a canonical hex color string."""
    return rgb_to_hex(*hsl_to_rgb(h, s, l))
