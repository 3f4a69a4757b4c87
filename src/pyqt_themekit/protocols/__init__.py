"""
Engine protocols and configuration.

The token-sink capability the preview controller drives, and the global
engine configuration hooks.
"""

from .engine_config import ThemeEngineConfig, set_engine_config, get_engine_config
from .token_sink import TokenApplier, TokenApplierABC

__all__ = [
    "ThemeEngineConfig",
    "set_engine_config",
    "get_engine_config",
    "TokenApplier",
    "TokenApplierABC",
]
