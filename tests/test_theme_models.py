"""Tests for the custom theme model and presets."""

import pytest

from pyqt_themekit.theming import CustomTheme, TOKEN_NAMES, ValidationError, get_preset, list_presets


def test_colors_are_canonicalized():
    theme = CustomTheme(name="Upper", bg="#0F172A", text="#F8FAFC", accent="#3B82F6", secondary="#1E293B")
    assert theme.colors == ("#0f172a", "#f8fafc", "#3b82f6", "#1e293b")


def test_invalid_color_rejected():
    with pytest.raises(ValidationError):
        CustomTheme(name="Bad", bg="#12")


def test_to_tokens(sample_theme):
    tokens = sample_theme.to_tokens()
    assert tuple(tokens) == TOKEN_NAMES
    assert tokens["accent-color"] == "#0ea5e9"


def test_with_colors_returns_new_theme(sample_theme):
    edited = sample_theme.with_colors(accent="#ff0000")
    assert edited.accent == "#ff0000"
    assert sample_theme.accent == "#0ea5e9"


def test_from_dict_round_trip(sample_theme):
    assert CustomTheme.from_dict(sample_theme.to_dict()) == sample_theme


@pytest.mark.parametrize("record", [
    "not a record",
    {"bg": "#000000", "text": "#ffffff", "accent": "#ff0000", "secondary": "#111111"},
    {"name": "   ", "bg": "#000000", "text": "#ffffff", "accent": "#ff0000", "secondary": "#111111"},
    {"name": "x" * 31, "bg": "#000000", "text": "#ffffff", "accent": "#ff0000", "secondary": "#111111"},
    {"name": "No accent", "bg": "#000000", "text": "#ffffff", "secondary": "#111111"},
    {"name": "Bad bg", "bg": "black", "text": "#ffffff", "accent": "#ff0000", "secondary": "#111111"},
])
def test_from_dict_rejects_malformed(record):
    with pytest.raises(ValidationError):
        CustomTheme.from_dict(record)


def test_presets():
    assert "dark" in list_presets()
    assert get_preset("Dark").bg == "#0f172a"
    with pytest.raises(ValidationError):
        get_preset("sepia")


@pytest.mark.parametrize("name", ["", "   ", "x" * 31])
def test_constructor_rejects_bad_name(name):
    with pytest.raises(ValidationError):
        CustomTheme(name=name)


def test_constructor_trims_name():
    assert CustomTheme(name="  Dusk ").name == "Dusk"
