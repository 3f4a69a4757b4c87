"""Tests for hue-rotation harmonies."""

import pytest

from pyqt_themekit.theming.color_convert import hex_to_hsl
from pyqt_themekit.theming.harmony import generate_harmonies


def test_complementary_of_red_is_cyan():
    harmonies = generate_harmonies("#ff0000")
    assert harmonies.complementary[0].hex == "#00ffff"


def test_triadic_of_red():
    harmonies = generate_harmonies("#ff0000")
    assert [c.hex for c in harmonies.triadic] == ["#00ff00", "#0000ff"]


def test_rotations():
    harmonies = generate_harmonies("#3b82f6")
    h, _, _ = hex_to_hsl("#3b82f6")
    expected = {
        "complementary": [180],
        "analogous": [30, -30],
        "triadic": [120, 240],
        "split_complementary": [150, 210],
    }
    for name, rotations in expected.items():
        hues = [c.hue for c in getattr(harmonies, name)]
        assert hues == pytest.approx([(h + r) % 360 for r in rotations])


@pytest.mark.parametrize("accent", ["#3b82f6", "#0ea5e9", "#a3e635", "#808080", "#1e1e1e"])
def test_saturation_and_lightness_preserved(accent):
    _, s, l = hex_to_hsl(accent)
    harmonies = generate_harmonies(accent)
    for colors in (harmonies.complementary, harmonies.analogous,
                   harmonies.triadic, harmonies.split_complementary):
        for color in colors:
            assert color.saturation == s
            assert color.lightness == l
            assert 0 <= color.hue < 360


def test_as_dict():
    result = generate_harmonies("#ff0000").as_dict()
    assert set(result) == {"complementary", "analogous", "triadic", "split_complementary"}
    assert len(result["analogous"]) == 2
