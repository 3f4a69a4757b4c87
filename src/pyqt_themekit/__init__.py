"""
pyqt-themekit: theme color engine for PyQt6 applications.

Converts between color representations, evaluates WCAG contrast, derives
color harmonies, synthesizes random coherent palettes, keeps a bounded
store of named palettes and drives live previews with guaranteed revert.

Architecture:
- Tier 1 (Color math): conversion, contrast, harmony, synthesis; pure Python
- Tier 2 (Persistence): PaletteStore over pluggable text backends
- Tier 3 (Preview): PreviewController over a token-sink capability
- Tier 4 (Qt): QApplication token applier, stylesheet generation, debouncing
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
