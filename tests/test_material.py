import logging

import pytest

from shade_swatch.color import Color
from shade_swatch.material import (
    _TUNINGS,
    BlendStrength,
    NoTuning,
    ShadeRange,
    SwatchMode,
    WhiteOffset,
    material_accent_from,
    material_color_from,
    material_primary_from,
    tuning_for,
)
from shade_swatch.palette import AccentPalette, PrimaryPalette
from shade_swatch.swatches import (
    map_swatch_by_alpha_blend,
    map_swatch_by_opacity,
    map_swatch_by_shade,
)


def test_modes_are_closed():
    assert [m.value for m in SwatchMode] == ["shade", "desaturate", "fade", "complements"]


def test_every_mode_has_a_tuning():
    assert set(_TUNINGS) == set(SwatchMode)


@pytest.mark.parametrize("mode", list(SwatchMode))
def test_every_mode_builds_both_variants(mode, steel):
    primary = material_color_from(steel, mode)
    accent = material_color_from(steel, mode, is_primary=False)
    assert isinstance(primary, PrimaryPalette)
    assert isinstance(accent, AccentPalette)
    assert primary.value == accent.value == steel.value


def test_unknown_mode(steel):
    with pytest.raises(ValueError):
        material_color_from(steel, "sepia")


def test_mode_by_name(steel):
    assert material_color_from(steel, "fade") == material_color_from(steel, SwatchMode.fade)


def test_parses_color_specs(steel):
    assert material_primary_from("#6496c8", "shade") == material_primary_from(steel, "shade")


@pytest.mark.parametrize(
    "mode, factor, expected",
    [
        ("shade", None, ShadeRange(-100, 100)),
        ("shade", 50, ShadeRange(-25, 25)),
        ("shade", 51.0, ShadeRange(-25, 25)),
        ("shade", -7.0, ShadeRange(3, -3)),
        ("desaturate", None, BlendStrength(None)),
        ("desaturate", 0.5, BlendStrength(0.5)),
        ("fade", None, WhiteOffset(0)),
        ("fade", 12.9, WhiteOffset(12)),
        ("fade", -3.7, WhiteOffset(-3)),
        ("complements", 42.0, NoTuning()),
    ],
)
def test_tuning_for(mode, factor, expected):
    assert tuning_for(mode, factor) == expected


def test_shade_factor_is_range_width(grey):
    palette = material_primary_from(grey, SwatchMode.shade, 50)
    assert palette.shade50 == grey.with_white(25)
    assert palette.shade500 == grey
    assert palette.as_dict() == map_swatch_by_shade(grey, min_step=-25, max_step=25)


def test_desaturate_factor_is_strength(steel):
    palette = material_primary_from(steel, SwatchMode.desaturate, 0.5)
    assert palette.as_dict() == map_swatch_by_alpha_blend(steel, strength=0.5)
    assert palette.shade500 == steel.with_alpha(128)


def test_desaturate_default_keeps_primary(steel):
    assert material_primary_from(steel, SwatchMode.desaturate).shade500 == steel
    assert material_accent_from(steel, SwatchMode.desaturate).shade200 == steel


def test_fade_truncates_factor(steel):
    palette = material_primary_from(steel, SwatchMode.fade, 20.9)
    assert palette.as_dict() == map_swatch_by_opacity(steel, add=20)


def test_complements_ignore_factor(steel):
    assert material_primary_from(steel, "complements") == material_primary_from(steel, "complements", 42)
    assert material_accent_from(steel, "complements").shade200 == steel.complementary(5)[0]


def test_aliases(steel):
    assert material_primary_from(steel, "shade", 80) == material_color_from(steel, "shade", 80, True)
    assert material_accent_from(steel, "shade", 80) == material_color_from(steel, "shade", 80, False)


def test_identity_is_input_not_a_shade(steel):
    faded = steel.with_alpha(90)
    palette = material_primary_from(faded, "fade")
    assert palette.value == faded.value
    assert palette.primary == faded
    assert palette.value not in {c.value for c in palette.colors}


def test_logs_choice(steel, caplog):
    caplog.set_level(logging.DEBUG, logger="shade_swatch.material")
    material_accent_from(steel, "shade", 10)
    assert "accent swatch" in caplog.text
    assert "ShadeRange(min_step=-5, max_step=5)" in caplog.text
