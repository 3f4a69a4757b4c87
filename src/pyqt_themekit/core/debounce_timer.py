"""Trailing debounce timer for slider-driven previews."""

from typing import Callable, Optional
from PyQt6.QtCore import QTimer


class DebounceTimer:
    """
    Trailing debounce timer.

    Each ``trigger()`` restarts the countdown; the handler fires once, after
    ``delay_ms`` without further triggers. ``cancel()`` drops a pending
    firing, ``flush()`` runs it immediately if one is pending.

    Usage:
        self._debounce = DebounceTimer(delay_ms=150, handler=self._apply_latest)

        def on_slider_moved(self, value):
            self._latest = value
            self._debounce.trigger()
    """

    def __init__(self, delay_ms: int, handler: Callable[[], None]):
        self._delay_ms = delay_ms
        self._handler = handler
        self._timer: Optional[QTimer] = None

    @property
    def delay_ms(self) -> int:
        return self._delay_ms

    @property
    def is_pending(self) -> bool:
        return self._timer is not None and self._timer.isActive()

    def trigger(self):
        """Start or restart the countdown."""
        if self._timer is None:
            self._timer = QTimer()
            self._timer.setSingleShot(True)
            self._timer.timeout.connect(self._handler)
        self._timer.start(self._delay_ms)

    def cancel(self):
        """Drop a pending firing."""
        if self._timer is not None:
            self._timer.stop()

    def flush(self):
        """Fire now if a trigger is pending."""
        if self.is_pending:
            self.cancel()
            self._handler()
