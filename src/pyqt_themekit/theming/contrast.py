"""
WCAG contrast evaluation.

Relative luminance and contrast ratio as defined by WCAG 2.x, with the
fixed AA (4.5:1) and AAA (7:1) thresholds for normal text.
"""

import logging
from dataclasses import dataclass
from typing import Dict

from pyqt_themekit.theming.color_convert import hex_to_rgb

logger = logging.getLogger(__name__)

AA_MIN_RATIO = 4.5
AAA_MIN_RATIO = 7.0


@dataclass(frozen=True)
class ContrastResult:
    """Contrast ratio of a text/background pair and the WCAG levels it meets."""
    ratio: float
    aa: bool
    aaa: bool


def _linearize(channel: int) -> float:
    value = channel / 255.0
    return value / 12.92 if value <= 0.03928 else ((value + 0.055) / 1.055) ** 2.4


def relative_luminance(color: str) -> float:
    """
    Calculate the relative luminance of a hex color.

    Args:
        color: Hex color string

    Returns:
        float: Luminance in [0, 1]
    """
    r, g, b = (_linearize(c) for c in hex_to_rgb(color))
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(color1: str, color2: str) -> float:
    """
    Calculate the WCAG contrast ratio between two colors.

    The result is symmetric in its arguments and lies in [1, 21].
    """
    l1 = relative_luminance(color1)
    l2 = relative_luminance(color2)
    ratio = (max(l1, l2) + 0.05) / (min(l1, l2) + 0.05)
    # Float summation of the channel weights can overshoot by an ulp
    return min(ratio, 21.0)


def check_contrast(text: str, bg: str) -> ContrastResult:
    """
    Evaluate text legibility against a background.

    Args:
        text: Foreground (text) hex color
        bg: Background hex color

    Returns:
        ContrastResult: ratio plus AA/AAA pass flags
    """
    ratio = contrast_ratio(text, bg)
    return ContrastResult(ratio=ratio, aa=ratio >= AA_MIN_RATIO, aaa=ratio >= AAA_MIN_RATIO)


def check_theme_contrast(theme) -> Dict[str, ContrastResult]:
    """Check a palette's text against both of its surface colors."""
    results = {
        "text_on_bg": check_contrast(theme.text, theme.bg),
        "text_on_secondary": check_contrast(theme.text, theme.secondary),
    }
    failing = [key for key, result in results.items() if not result.aa]
    if failing:
        logger.debug(f"Theme {theme.name!r} fails AA for {failing}")
    return results
