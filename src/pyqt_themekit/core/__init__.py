"""
Core PyQt6 utilities.

Small Qt helpers with no theme-specific logic.
"""

from .debounce_timer import DebounceTimer

__all__ = [
    "DebounceTimer",
]
