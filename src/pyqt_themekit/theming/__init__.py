"""
Theme color engine.

Color conversion, WCAG contrast, harmonies, random palette synthesis,
the saved-theme store and the live preview controller.
"""

from .color_convert import hex_to_rgb, rgb_to_hex, hex_to_hsl, hsl_to_hex, normalize_hex, is_valid_hex
from .contrast import ContrastResult, relative_luminance, contrast_ratio, check_contrast, check_theme_contrast
from .exceptions import (
    ThemeEngineError,
    ValidationError,
    IndexRangeError,
    CapacityExceeded,
    ParseError,
    PersistenceFailure,
)
from .harmony import HarmonyColor, Harmonies, generate_harmonies
from .palette_synth import PaletteSynthesizer, SynthesizedPalette
from .palette_store import PaletteStore
from .preview_controller import PreviewController, PreviewState
from .result import Result
from .theme_models import CustomTheme, TOKEN_NAMES, get_preset, list_presets

__all__ = [
    "hex_to_rgb",
    "rgb_to_hex",
    "hex_to_hsl",
    "hsl_to_hex",
    "normalize_hex",
    "is_valid_hex",
    "ContrastResult",
    "relative_luminance",
    "contrast_ratio",
    "check_contrast",
    "check_theme_contrast",
    "ThemeEngineError",
    "ValidationError",
    "IndexRangeError",
    "CapacityExceeded",
    "ParseError",
    "PersistenceFailure",
    "HarmonyColor",
    "Harmonies",
    "generate_harmonies",
    "PaletteSynthesizer",
    "SynthesizedPalette",
    "PaletteStore",
    "PreviewController",
    "PreviewState",
    "Result",
    "CustomTheme",
    "TOKEN_NAMES",
    "get_preset",
    "list_presets",
]
