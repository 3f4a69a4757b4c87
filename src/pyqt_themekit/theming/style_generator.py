"""
QStyleSheet Generator for custom themes

Generates QStyleSheet strings from the four palette tokens so a preview
reaches widgets that ignore QPalette (styled buttons, inputs, lists).
"""

import logging
from typing import Mapping

from pyqt_themekit.theming.color_convert import hex_to_hsl, hsl_to_hex
from pyqt_themekit.theming.contrast import contrast_ratio

logger = logging.getLogger(__name__)


def shift_lightness(color: str, delta: float) -> str:
    """Return ``color`` with its HSL lightness moved by ``delta`` percent."""
    h, s, l = hex_to_hsl(color)
    return hsl_to_hex(h, s, l + delta)


def readable_on(color: str) -> str:
    """Pick black or white, whichever contrasts more with ``color``."""
    if contrast_ratio(color, "#ffffff") >= contrast_ratio(color, "#000000"):
        return "#ffffff"
    return "#000000"


class StyleSheetGenerator:
    """
    Generates QStyleSheet strings from palette tokens.

    Tokens use the names from ``theme_models.TOKEN_NAMES``.
    """

    def __init__(self, tokens: Mapping[str, str]):
        """
        Initialize the style generator with palette tokens.

        Args:
            tokens: Mapping of token name to hex color
        """
        self.tokens = dict(tokens)

    def update_tokens(self, tokens: Mapping[str, str]):
        self.tokens = dict(tokens)

    def generate_button_style(self) -> str:
        """
        Generate QStyleSheet for buttons with all states.

        Returns:
            str: QStyleSheet for button styling
        """
        accent = self.tokens["accent-color"]
        return f"""
            QPushButton {{
                background-color: {accent};
                color: {readable_on(accent)};
                border: none;
                border-radius: 3px;
                padding: 5px;
            }}
            QPushButton:hover {{
                background-color: {shift_lightness(accent, 8)};
            }}
            QPushButton:pressed {{
                background-color: {shift_lightness(accent, -8)};
            }}
        """

    def generate_input_style(self) -> str:
        """Generate QStyleSheet for line edits, spin boxes and combo boxes."""
        t = self.tokens
        return f"""
            QLineEdit, QSpinBox, QDoubleSpinBox, QComboBox {{
                background-color: {t["secondary-color"]};
                color: {t["text-color"]};
                border: 1px solid {shift_lightness(t["secondary-color"], 10)};
                border-radius: 3px;
                padding: 5px;
            }}
            QLineEdit:focus, QSpinBox:focus, QDoubleSpinBox:focus, QComboBox:focus {{
                border: 1px solid {t["accent-color"]};
            }}
        """

    def generate_list_style(self) -> str:
        t = self.tokens
        return f"""
            QTreeWidget, QListWidget, QTableWidget {{
                background-color: {t["secondary-color"]};
                color: {t["text-color"]};
                border: none;
                selection-background-color: {t["accent-color"]};
                selection-color: {readable_on(t["accent-color"])};
            }}
        """

    def generate_complete_application_style(self) -> str:
        """
        Generate the complete application stylesheet.

        Returns:
            str: QStyleSheet covering windows, buttons, inputs and lists
        """
        t = self.tokens
        base = f"""
            QWidget {{
                background-color: {t["bg-color"]};
                color: {t["text-color"]};
            }}
            QGroupBox, QFrame {{
                background-color: {t["secondary-color"]};
            }}
        """
        style = base + self.generate_button_style() + self.generate_input_style() + self.generate_list_style()
        logger.debug(f"Generated application stylesheet ({len(style)} chars)")
        return style
