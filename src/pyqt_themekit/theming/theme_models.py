"""
Custom theme model and built-in presets.

A custom theme is a named four-token palette: background, text, accent and
secondary. Themes are immutable; edits produce a new theme.
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, List, Mapping, Tuple

from pyqt_themekit.protocols.engine_config import get_engine_config
from pyqt_themekit.theming.color_convert import RGB, hex_to_rgb, is_valid_hex
from pyqt_themekit.theming.exceptions import ValidationError

logger = logging.getLogger(__name__)

# Style token names, in the order they are applied to a sink
TOKEN_NAMES: Tuple[str, ...] = ("bg-color", "text-color", "accent-color", "secondary-color")
COLOR_FIELDS: Tuple[str, ...] = ("bg", "text", "accent", "secondary")


@dataclass(frozen=True)
class CustomTheme:
    """
    Named four-color palette.

    Attributes:
        name: Display name, 1 to ``max_name_length`` characters
        bg: Background color
        text: Text color
        accent: Accent color (buttons, links, focus)
        secondary: Secondary surface color (cards, panels)
    """

    name: str
    bg: str = "#0f172a"
    text: str = "#f8fafc"
    accent: str = "#3b82f6"
    secondary: str = "#1e293b"

    def __post_init__(self):
        object.__setattr__(self, "name", validate_theme_name(self.name))
        for field_name in COLOR_FIELDS:
            value = getattr(self, field_name)
            if not is_valid_hex(value):
                raise ValidationError(f"Invalid {field_name} color {value!r} in theme {self.name!r}")
            # Canonical lowercase storage
            object.__setattr__(self, field_name, value.lower())

    @property
    def colors(self) -> Tuple[str, str, str, str]:
        """The four colors in token order."""
        return self.bg, self.text, self.accent, self.secondary

    def to_rgb(self) -> Dict[str, RGB]:
        """Return field name -> RGB tuple for every color."""
        return {field_name: hex_to_rgb(getattr(self, field_name)) for field_name in COLOR_FIELDS}

    def to_tokens(self) -> Dict[str, str]:
        """Map the palette onto the four style token names."""
        return dict(zip(TOKEN_NAMES, self.colors))

    def with_colors(self, **colors: str) -> "CustomTheme":
        """Return a copy with some colors replaced."""
        return replace(self, **colors)

    def renamed(self, name: str) -> "CustomTheme":
        return replace(self, name=name)

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, **{f: getattr(self, f) for f in COLOR_FIELDS}}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CustomTheme":
        """
        Build a theme from an imported or persisted record.

        Args:
            data: Mapping with ``name`` and the four color fields

        Returns:
            CustomTheme: Validated theme with a trimmed name

        Raises:
            ValidationError: If the record is not a mapping, the name is blank
                or too long, or any color is malformed
        """
        if not isinstance(data, Mapping):
            raise ValidationError(f"Theme record must be an object, got {type(data).__name__}")

        name = data.get("name")
        if not isinstance(name, str):
            raise ValidationError("Theme record is missing a name")

        colors = {}
        for field_name in COLOR_FIELDS:
            value = data.get(field_name)
            if not isinstance(value, str):
                raise ValidationError(f"Theme record {name!r} is missing {field_name}")
            colors[field_name] = value

        return cls(name=name, **colors)


def validate_theme_name(name: str) -> str:
    """
    Trim and validate a theme name.

    Raises:
        ValidationError: If the name is blank or longer than allowed
    """
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Enter a name for your theme")
    name = name.strip()
    max_length = get_engine_config().max_name_length
    if len(name) > max_length:
        raise ValidationError(f"Theme name must be at most {max_length} characters")
    return name


# ========== BUILT-IN PRESETS ==========

DEFAULT_THEME = CustomTheme(name="Default")

_PRESETS: Dict[str, CustomTheme] = {
    "dark": CustomTheme("Dark", bg="#0f172a", text="#f8fafc", accent="#3b82f6", secondary="#1e293b"),
    "light": CustomTheme("Light", bg="#f8fafc", text="#0f172a", accent="#2563eb", secondary="#e2e8f0"),
    "rave": CustomTheme("Rave", bg="#12001f", text="#fdf4ff", accent="#e879f9", secondary="#2e1065"),
    "neon": CustomTheme("Neon", bg="#050816", text="#e0f2fe", accent="#22d3ee", secondary="#0f1f3d"),
    "hacker": CustomTheme("Hacker", bg="#000000", text="#22c55e", accent="#4ade80", secondary="#0a1a0a"),
    "toxic": CustomTheme("Toxic", bg="#0c0f00", text="#ecfccb", accent="#a3e635", secondary="#1a2e05"),
    "candy": CustomTheme("Candy", bg="#fff1f2", text="#4c0519", accent="#f472b6", secondary="#ffe4e6"),
}


def list_presets() -> List[str]:
    """Return the keys of the built-in themes."""
    return list(_PRESETS)


def get_preset(key: str) -> CustomTheme:
    """
    Return a built-in theme by key (e.g. ``"dark"``).

    Raises:
        ValidationError: If no preset has that key
    """
    try:
        return _PRESETS[key.lower()]
    except KeyError:
        raise ValidationError(f"Unknown preset {key!r}; expected one of {list_presets()}") from None
