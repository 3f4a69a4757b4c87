"""Persistence backends for saved themes."""

from .base import ThemeBackend
from .json_file_backend import JsonFileThemeBackend
from .memory_backend import MemoryThemeBackend

__all__ = [
    "ThemeBackend",
    "JsonFileThemeBackend",
    "MemoryThemeBackend",
]
