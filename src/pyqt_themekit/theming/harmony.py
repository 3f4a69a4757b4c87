"""Hue-rotation color harmonies derived from an accent color."""

from dataclasses import dataclass
from typing import Dict, Tuple

from pyqt_themekit.theming.color_convert import hex_to_hsl, hsl_to_hex

# Rotations in degrees, applied modulo 360
HARMONY_ROTATIONS: Dict[str, Tuple[float, ...]] = {
    "complementary": (180,),
    "analogous": (30, -30),
    "triadic": (120, 240),
    "split_complementary": (150, 210),
}


@dataclass(frozen=True)
class HarmonyColor:
    """A derived color: its hex encoding plus the HSL it was built from."""
    hex: str
    hue: float
    saturation: float
    lightness: float


@dataclass(frozen=True)
class Harmonies:
    """All harmonies of one accent color."""
    source: str
    complementary: Tuple[HarmonyColor, ...]
    analogous: Tuple[HarmonyColor, ...]
    triadic: Tuple[HarmonyColor, ...]
    split_complementary: Tuple[HarmonyColor, ...]

    def as_dict(self) -> Dict[str, Tuple[str, ...]]:
        """Return harmony name -> hex colors, for display layers."""
        return {
            name: tuple(color.hex for color in getattr(self, name))
            for name in HARMONY_ROTATIONS
        }


def rotate_hue(accent: str, degrees: float) -> HarmonyColor:
    """Rotate the hue of ``accent`` keeping its saturation and lightness."""
    h, s, l = hex_to_hsl(accent)
    hue = (h + degrees) % 360
    if hue >= 360:
        # -tiny % 360 rounds up to 360.0
        hue = 0.0
    return HarmonyColor(hex=hsl_to_hex(hue, s, l), hue=hue, saturation=s, lightness=l)


def generate_harmonies(accent: str) -> Harmonies:
    """
    Derive complementary, analogous, triadic and split-complementary colors.

    Only the hue changes; every harmonic keeps the accent's exact saturation
    and lightness. Background and text colors play no part.

    Args:
        accent: Hex accent color

    Returns:
        Harmonies: derived colors grouped by relationship
    """
    groups = {
        name: tuple(rotate_hue(accent, degrees) for degrees in rotations)
        for name, rotations in HARMONY_ROTATIONS.items()
    }
    return Harmonies(source=accent, **groups)
