"""Base configuration for the theme engine.

Provides hooks for applications to customize store location, slot count
and color parsing behavior.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class ThemeEngineConfig:
    """Configuration for theme engine behavior.

    Applications can subclass this to provide custom configuration.

    Attributes:
        store_file: Location of the persisted custom theme list
        max_slots: Maximum number of saved custom themes
        max_name_length: Maximum length of a custom theme name
        strict_hex: Reject malformed hex colors instead of zero-filling them
        preview_debounce_ms: Delay before a scheduled live preview is applied
    """

    store_file: Optional[str] = None
    max_slots: int = 10
    max_name_length: int = 30
    strict_hex: bool = False
    preview_debounce_ms: int = 150

    def resolve_store_file(self) -> Path:
        """Return the configured store file or the per-user default."""
        if self.store_file:
            return Path(self.store_file)
        return Path.home() / ".cache" / "pyqt_themekit" / "custom_themes.json"


# Global config instance (set by application)
_engine_config: Optional[ThemeEngineConfig] = None


def set_engine_config(config: Optional[ThemeEngineConfig]) -> None:
    """Set the global theme engine configuration.

    Args:
        config: ThemeEngineConfig instance, or None to restore defaults
    """
    global _engine_config
    _engine_config = config


def get_engine_config() -> ThemeEngineConfig:
    """Get the current theme engine configuration.

    Returns:
        Current ThemeEngineConfig or default if not set
    """
    if _engine_config is None:
        return ThemeEngineConfig()
    return _engine_config
