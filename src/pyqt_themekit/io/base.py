"""Protocols for theme persistence backends."""

from typing import Protocol

from pyqt_themekit.theming.result import Result


class ThemeBackend(Protocol):
    """Device-local text store for the saved theme list.

    Backends never raise for I/O problems: they return a failed ``Result``
    carrying a ``PersistenceFailure`` and let the store decide what to do.
    """

    def read(self) -> Result:
        """Return the stored text, or ``Result.success(None)`` if nothing was saved yet."""
        ...

    def write(self, text: str) -> Result:
        ...
