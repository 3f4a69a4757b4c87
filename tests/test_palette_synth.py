"""Tests for randomized palette synthesis."""

import random

from pyqt_themekit.theming import PaletteSynthesizer, check_contrast
from pyqt_themekit.theming.color_convert import hex_to_hsl


def test_same_seed_same_palettes():
    first = PaletteSynthesizer(random.Random(42)).generate_many(5)
    second = PaletteSynthesizer(random.Random(42)).generate_many(5)
    assert [p.theme for p in first] == [p.theme for p in second]


def test_generated_names():
    palettes = PaletteSynthesizer(random.Random(1)).generate_many(3, name_prefix="Mix")
    assert [p.theme.name for p in palettes] == ["Mix 1", "Mix 2", "Mix 3"]


def test_dark_mode_fraction(seeded_rng):
    synth = PaletteSynthesizer(seeded_rng)
    dark = sum(synth.generate().dark_mode for _ in range(1000))
    assert 0.75 <= dark / 1000 <= 0.85


def test_lightness_bands(seeded_rng):
    synth = PaletteSynthesizer(seeded_rng)
    for _ in range(300):
        palette = synth.generate()
        theme = palette.theme
        bg_l = hex_to_hsl(theme.bg)[2]
        text_l = hex_to_hsl(theme.text)[2]
        secondary_l = hex_to_hsl(theme.secondary)[2]
        if palette.dark_mode:
            assert 4 <= bg_l <= 16
            assert 87 <= text_l <= 99
            assert bg_l < secondary_l <= bg_l + 14
        else:
            assert 92 <= bg_l <= 99
            assert 7 <= text_l <= 21
            assert bg_l - 14 <= secondary_l < bg_l


def test_accent_is_vivid(seeded_rng):
    synth = PaletteSynthesizer(seeded_rng)
    for _ in range(300):
        palette = synth.generate()
        h, s, l = hex_to_hsl(palette.theme.accent)
        assert 49 <= l <= 66
        assert s >= 55
        offset = min((h - palette.base_hue) % 360, (palette.base_hue - h) % 360)
        assert 8 <= offset <= 52


def test_default_pairing_is_readable(seeded_rng):
    synth = PaletteSynthesizer(seeded_rng)
    for _ in range(200):
        theme = synth.generate().theme
        assert check_contrast(theme.text, theme.bg).aa
