"""
Preview/apply controller.

Drives a live palette override on a shared style-token sink and guarantees
that the override is removed when the theme tool is left. The controller
owns no color math; it only sequences ``apply``/``clear`` on its applier.
"""

import logging
from enum import Enum
from typing import Optional

from pyqt_themekit.protocols.engine_config import get_engine_config
from pyqt_themekit.protocols.token_sink import TokenApplier
from pyqt_themekit.theming.exceptions import ThemeEngineError
from pyqt_themekit.theming.result import Result
from pyqt_themekit.theming.theme_models import CustomTheme

logger = logging.getLogger(__name__)


class PreviewState(Enum):
    IDLE = "idle"
    PREVIEWING = "previewing"


class PreviewController:
    """
    Two-state machine over a token applier: Idle and Previewing.

    ``apply`` always overwrites all four tokens; ``revert`` always clears
    them, falling back to the sink's externally selected base theme.
    ``teardown`` reverts exactly once if a preview is active and is safe to
    call from every exit path.

    Usage:
        with PreviewController(QtStyleTokenApplier(app)) as preview:
            preview.apply(theme)
        # override removed here
    """

    def __init__(self, applier: TokenApplier, debounce_ms: Optional[int] = None):
        """
        Initialize the controller.

        Args:
            applier: Sink capability with ``apply(tokens)`` and ``clear()``
            debounce_ms: Delay for ``schedule_apply`` (config default if None)
        """
        self.applier = applier
        self._state = PreviewState.IDLE
        self._active_theme: Optional[CustomTheme] = None
        self._pending_theme: Optional[CustomTheme] = None
        self._debounce_ms = debounce_ms if debounce_ms is not None else get_engine_config().preview_debounce_ms
        self._debounce = None

    @property
    def state(self) -> PreviewState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state is PreviewState.PREVIEWING

    @property
    def active_theme(self) -> Optional[CustomTheme]:
        return self._active_theme

    @property
    def has_pending_apply(self) -> bool:
        return self._debounce is not None and self._debounce.is_pending

    def apply(self, theme: CustomTheme) -> Result:
        """
        Override the sink with ``theme``'s four tokens.

        Supersedes any earlier preview or scheduled apply.

        Returns:
            Result: success with the applied theme
        """
        self._cancel_pending()
        try:
            self.applier.apply(theme.to_tokens())
        except ThemeEngineError as e:
            logger.warning(f"Could not preview theme {theme.name!r}: {e}")
            return Result.failure(e)
        self._active_theme = theme
        self._state = PreviewState.PREVIEWING
        logger.info(f"Previewing theme {theme.name!r}")
        return Result.success(theme)

    def revert(self) -> Result:
        """
        Clear the overridden tokens and return to Idle.

        Wins over any pending scheduled apply. Clearing is absolute; no
        earlier override is restored.
        """
        self._cancel_pending()
        was_active = self.is_active
        self.applier.clear()
        self._active_theme = None
        self._state = PreviewState.IDLE
        if was_active:
            logger.info("Reverted theme preview")
        return Result.success(was_active)

    def teardown(self) -> None:
        """End interaction with the tool; reverts only if a preview is active."""
        self._cancel_pending()
        if self.is_active:
            self.revert()

    # ========== DEBOUNCED PREVIEW ==========

    def schedule_apply(self, theme: CustomTheme) -> None:
        """
        Apply ``theme`` after the debounce delay.

        Rapid successive calls (slider drags) collapse into one apply of the
        latest theme. Requires a running Qt event loop to fire.
        """
        if self._debounce is None:
            # Import here to keep the controller usable without Qt
            from pyqt_themekit.core.debounce_timer import DebounceTimer
            self._debounce = DebounceTimer(delay_ms=self._debounce_ms, handler=self._apply_pending)
        self._pending_theme = theme
        self._debounce.trigger()

    def flush_pending(self) -> None:
        """Apply a scheduled theme now instead of waiting for the timer."""
        if self._debounce is not None:
            self._debounce.flush()

    def _apply_pending(self) -> None:
        theme = self._pending_theme
        self._pending_theme = None
        if theme is not None:
            self.apply(theme)

    def _cancel_pending(self) -> None:
        if self._debounce is not None:
            self._debounce.cancel()
        self._pending_theme = None

    # ========== LIFECYCLE ==========

    def bind_to_application(self, app) -> None:
        """Tear down the preview when the Qt application is about to quit."""
        app.aboutToQuit.connect(self.teardown)

    def __enter__(self) -> "PreviewController":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.teardown()
