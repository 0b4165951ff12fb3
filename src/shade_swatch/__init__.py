"""shade-swatch: Material-style shade palettes generated from one color."""

import logging

from .charts import compare, figure, save, swatch
from .color import Color, alpha_from_strength
from .material import (
    SwatchMode,
    material_accent_from,
    material_color_from,
    material_primary_from,
)
from .palette import AccentPalette, Palette, PrimaryPalette
from .swatches import (
    map_swatch_by_alpha_blend,
    map_swatch_by_complements,
    map_swatch_by_opacity,
    map_swatch_by_shade,
)
from .theme import (
    LAYOUT,
    SHADE_COUNT_ACCENT,
    SHADE_COUNT_PRIMARY,
    SHADE_KEYS_ACCENT,
    SHADE_KEYS_PRIMARY,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "compare",
    "figure",
    "save",
    "swatch",
    "Color",
    "alpha_from_strength",
    "SwatchMode",
    "material_accent_from",
    "material_color_from",
    "material_primary_from",
    "AccentPalette",
    "Palette",
    "PrimaryPalette",
    "map_swatch_by_alpha_blend",
    "map_swatch_by_complements",
    "map_swatch_by_opacity",
    "map_swatch_by_shade",
    "LAYOUT",
    "SHADE_COUNT_ACCENT",
    "SHADE_COUNT_PRIMARY",
    "SHADE_KEYS_ACCENT",
    "SHADE_KEYS_PRIMARY",
]
