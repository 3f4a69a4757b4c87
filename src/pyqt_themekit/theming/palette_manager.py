"""
Style-token sinks for live theme previews.

Provides the two token appliers the preview controller drives: a Qt applier
that pushes the four palette tokens into a QApplication (QPalette plus
stylesheet) and falls back to the host's base theme on clear, and an in-memory sink
for headless hosting and tests.
"""

import logging
import threading
from typing import Callable, Dict, Mapping, Optional, Tuple

from PyQt6.QtGui import QColor, QPalette
from PyQt6.QtWidgets import QApplication

from pyqt_themekit.protocols.token_sink import TokenApplierABC
from pyqt_themekit.theming.color_convert import hex_to_rgb
from pyqt_themekit.theming.exceptions import ThemeEngineError, ValidationError
from pyqt_themekit.theming.style_generator import StyleSheetGenerator, readable_on
from pyqt_themekit.theming.theme_models import TOKEN_NAMES

logger = logging.getLogger(__name__)


def _check_tokens(tokens: Mapping[str, str]) -> Dict[str, str]:
    missing = [name for name in TOKEN_NAMES if name not in tokens]
    if missing:
        raise ValidationError(f"Palette is missing tokens: {missing}")
    return {name: tokens[name] for name in TOKEN_NAMES}


class InMemoryTokenSink(TokenApplierABC):
    """
    Dict-backed token sink.

    Holds the externally selected base theme tokens plus an optional
    override layer. ``resolved()`` is what a renderer would display.
    """

    def __init__(self, base_tokens: Optional[Mapping[str, str]] = None):
        self.base_tokens: Dict[str, str] = dict(base_tokens or {})
        self._overrides: Dict[str, str] = {}
        self._lock = threading.Lock()

    def apply(self, tokens: Mapping[str, str]) -> None:
        tokens = _check_tokens(tokens)
        with self._lock:
            self._overrides = tokens

    def clear(self) -> None:
        with self._lock:
            self._overrides = {}

    @property
    def overrides(self) -> Dict[str, str]:
        with self._lock:
            return dict(self._overrides)

    def resolved(self) -> Dict[str, str]:
        """Base tokens with any override layered on top."""
        with self._lock:
            return {**self.base_tokens, **self._overrides}

    def current_tokens(self) -> Dict[str, str]:
        return self.resolved()


class QtStyleTokenApplier(TokenApplierABC):
    """
    Applies palette tokens to a QApplication.

    Clearing falls back to the base theme the host currently has selected,
    never to a remembered earlier state. The host reports its base either
    through ``set_base()`` whenever it switches themes, or through a
    ``base_provider`` callable read at clear time. Without either, the
    application's look when a preview starts is used as the base.
    """

    def __init__(self, app: Optional[QApplication] = None, apply_stylesheet: bool = True,
                 base_provider: Optional[Callable[[], Tuple[QPalette, str]]] = None):
        """
        Initialize the applier.

        Args:
            app: QApplication instance (uses QApplication.instance() if None)
            apply_stylesheet: Also install a generated application stylesheet
            base_provider: Returns the host's current base (palette, stylesheet)
        """
        self._app = app
        self.apply_stylesheet = apply_stylesheet
        self.base_provider = base_provider
        self._base_palette: Optional[QPalette] = None
        self._base_stylesheet: str = ""
        self._host_sets_base = False
        self._tokens: Dict[str, str] = {}
        self._lock = threading.Lock()

    @property
    def app(self) -> Optional[QApplication]:
        return self._app if self._app is not None else QApplication.instance()

    @staticmethod
    def _qcolor(color: str) -> QColor:
        return QColor(*hex_to_rgb(color))

    def create_palette(self, tokens: Mapping[str, str]) -> QPalette:
        """
        Create a QPalette from palette tokens.

        Returns:
            QPalette: Palette with window, base, button and selection roles set
        """
        bg = self._qcolor(tokens["bg-color"])
        text = self._qcolor(tokens["text-color"])
        accent = self._qcolor(tokens["accent-color"])
        secondary = self._qcolor(tokens["secondary-color"])

        palette = QPalette()
        palette.setColor(QPalette.ColorRole.Window, bg)
        palette.setColor(QPalette.ColorRole.WindowText, text)
        palette.setColor(QPalette.ColorRole.Base, secondary)
        palette.setColor(QPalette.ColorRole.AlternateBase, bg)
        palette.setColor(QPalette.ColorRole.Text, text)
        palette.setColor(QPalette.ColorRole.Button, secondary)
        palette.setColor(QPalette.ColorRole.ButtonText, text)
        palette.setColor(QPalette.ColorRole.Highlight, accent)
        palette.setColor(QPalette.ColorRole.HighlightedText,
                         self._qcolor(readable_on(tokens["accent-color"])))
        palette.setColor(QPalette.ColorRole.ToolTipBase, secondary)
        palette.setColor(QPalette.ColorRole.ToolTipText, text)
        palette.setColor(QPalette.ColorRole.Link, accent)
        return palette

    def set_base(self, palette: QPalette, stylesheet: str = "") -> None:
        """
        Record the host's newly selected base theme.

        While a preview is active the base is only remembered and shows up on
        clear; otherwise it is installed right away.
        """
        app = self.app
        with self._lock:
            self._base_palette = QPalette(palette)
            self._base_stylesheet = stylesheet
            self._host_sets_base = True
            if not self._tokens and app is not None:
                app.setPalette(self._base_palette)
                app.setStyleSheet(stylesheet)
        logger.debug("Updated base theme")

    def apply(self, tokens: Mapping[str, str]) -> None:
        """
        Apply all four tokens to the application as one update.

        Raises:
            ThemeEngineError: If there is no QApplication to apply to
        """
        tokens = _check_tokens(tokens)
        app = self.app
        if app is None:
            raise ThemeEngineError("No QApplication instance found, cannot apply palette")

        with self._lock:
            if not self._tokens and not self._host_sets_base and self.base_provider is None:
                # Entering a preview: the app's current look is the base
                self._base_palette = QPalette(app.palette())
                self._base_stylesheet = app.styleSheet()

            app.setPalette(self.create_palette(tokens))
            if self.apply_stylesheet:
                app.setStyleSheet(StyleSheetGenerator(tokens).generate_complete_application_style())
            self._tokens = tokens

        logger.debug("Applied preview palette to application")

    def clear(self) -> None:
        """Remove the preview and reinstall the host's current base theme."""
        app = self.app
        with self._lock:
            if app is not None and self._tokens:
                if self.base_provider is not None:
                    palette, stylesheet = self.base_provider()
                else:
                    palette, stylesheet = self._base_palette, self._base_stylesheet
                if palette is not None:
                    app.setPalette(palette)
                app.setStyleSheet(stylesheet or "")
                logger.debug("Restored base application palette")
            self._tokens = {}

    def current_tokens(self) -> Dict[str, str]:
        with self._lock:
            return dict(self._tokens)
