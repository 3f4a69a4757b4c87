"""
Randomized palette synthesis.

Builds a coherent four-color palette from a single draw sequence of an
injected random generator, so a seeded generator reproduces the same
palettes.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional, Tuple

from pyqt_themekit.theming.color_convert import hsl_to_hex
from pyqt_themekit.theming.theme_models import CustomTheme

logger = logging.getLogger(__name__)

DARK_MODE_PROBABILITY = 0.8

# Lightness bands (percent), [low, high)
DARK_BG_LIGHTNESS: Tuple[float, float] = (5, 15)
LIGHT_BG_LIGHTNESS: Tuple[float, float] = (93, 98)
DARK_TEXT_LIGHTNESS: Tuple[float, float] = (88, 98)
LIGHT_TEXT_LIGHTNESS: Tuple[float, float] = (8, 20)
SECONDARY_LIGHTNESS_OFFSET: Tuple[float, float] = (5, 13)

# Accent is vivid in either mode
ACCENT_HUE_OFFSET: Tuple[float, float] = (10, 50)
ACCENT_SATURATION: Tuple[float, float] = (60, 95)
ACCENT_LIGHTNESS: Tuple[float, float] = (50, 65)

# Moderate saturation keeps surfaces tinted but not loud
BG_SATURATION: Tuple[float, float] = (15, 45)
TEXT_SATURATION: Tuple[float, float] = (5, 25)
SECONDARY_SATURATION: Tuple[float, float] = (15, 40)


@dataclass(frozen=True)
class SynthesizedPalette:
    """A generated theme and the mode it was generated in."""
    theme: CustomTheme
    dark_mode: bool
    base_hue: float


class PaletteSynthesizer:
    """
    Generates random but self-consistent palettes.

    The random source is injected; pass ``random.Random(seed)`` for
    reproducible output.

    Usage:
        synth = PaletteSynthesizer(random.Random(42))
        palette = synth.generate().theme
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng if rng is not None else random.Random()

    def _between(self, band: Tuple[float, float]) -> float:
        low, high = band
        return low + self._rng.random() * (high - low)

    def generate(self, name: str = "Random") -> SynthesizedPalette:
        """
        Draw one palette.

        Args:
            name: Name given to the generated theme

        Returns:
            SynthesizedPalette: theme plus the dark/light decision
        """
        rng = self._rng
        base_hue = rng.random() * 360
        dark_mode = rng.random() < DARK_MODE_PROBABILITY

        if dark_mode:
            bg_lightness = self._between(DARK_BG_LIGHTNESS)
            text_lightness = self._between(DARK_TEXT_LIGHTNESS)
            secondary_lightness = bg_lightness + self._between(SECONDARY_LIGHTNESS_OFFSET)
        else:
            bg_lightness = self._between(LIGHT_BG_LIGHTNESS)
            text_lightness = self._between(LIGHT_TEXT_LIGHTNESS)
            secondary_lightness = bg_lightness - self._between(SECONDARY_LIGHTNESS_OFFSET)

        direction = 1 if rng.random() < 0.5 else -1
        accent_hue = (base_hue + direction * self._between(ACCENT_HUE_OFFSET)) % 360
        accent = hsl_to_hex(accent_hue, self._between(ACCENT_SATURATION), self._between(ACCENT_LIGHTNESS))

        bg = hsl_to_hex(base_hue, self._between(BG_SATURATION), bg_lightness)
        text = hsl_to_hex(base_hue, self._between(TEXT_SATURATION), text_lightness)
        secondary = hsl_to_hex(base_hue, self._between(SECONDARY_SATURATION), secondary_lightness)

        theme = CustomTheme(name=name, bg=bg, text=text, accent=accent, secondary=secondary)
        logger.debug(f"Synthesized {'dark' if dark_mode else 'light'} palette {theme.colors}")
        return SynthesizedPalette(theme=theme, dark_mode=dark_mode, base_hue=base_hue)

    def generate_many(self, count: int, name_prefix: str = "Random") -> list:
        """Draw ``count`` palettes named ``"<prefix> 1"``, ``"<prefix> 2"``, ..."""
        return [self.generate(f"{name_prefix} {index + 1}") for index in range(count)]
