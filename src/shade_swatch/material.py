"""Build primary and accent palettes from one color and a :class:`SwatchMode`.

The loose ``factor`` argument means something different in every mode, so
it is converted up front into one tuning value per mode:

- ``shade``: :class:`ShadeRange`, the factor is the full width of the
  ``with_white`` range (half on each side of zero)
- ``desaturate``: :class:`BlendStrength`, the factor is the blend strength
- ``fade``: :class:`WhiteOffset`, the factor truncated to an int
- ``complements``: :class:`NoTuning`, the factor is ignored

With :attr:`SwatchMode.fade`, ``shade500`` does not resemble the input
color; the final shade (900, or 700 for accents) does.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .color import Color
from .palette import AccentPalette, Palette, PrimaryPalette
from .swatches import (
    map_swatch_by_alpha_blend,
    map_swatch_by_complements,
    map_swatch_by_opacity,
    map_swatch_by_shade,
)

log = logging.getLogger(__name__)


class SwatchMode(str, Enum):
    shade = "shade"
    desaturate = "desaturate"
    fade = "fade"
    complements = "complements"


@dataclass(frozen=True)
class ShadeRange:
    min_step: int = -100
    max_step: int = 100

    @classmethod
    def from_factor(cls, factor: float | None) -> ShadeRange:
        if factor is None:
            return cls()
        half = math.trunc(factor / 2)
        return cls(-half, half)

    def swatch(self, color: Color, is_primary: bool) -> dict[int, Color]:
        return map_swatch_by_shade(
            color, min_step=self.min_step, max_step=self.max_step, is_primary=is_primary,
        )


@dataclass(frozen=True)
class BlendStrength:
    strength: Any = None

    @classmethod
    def from_factor(cls, factor: float | None) -> BlendStrength:
        return cls(factor)

    def swatch(self, color: Color, is_primary: bool) -> dict[int, Color]:
        return map_swatch_by_alpha_blend(color, strength=self.strength, is_primary=is_primary)


@dataclass(frozen=True)
class WhiteOffset:
    add: int = 0

    @classmethod
    def from_factor(cls, factor: float | None) -> WhiteOffset:
        return cls(0 if factor is None else math.trunc(factor))

    def swatch(self, color: Color, is_primary: bool) -> dict[int, Color]:
        return map_swatch_by_opacity(color, add=self.add, is_primary=is_primary)


@dataclass(frozen=True)
class NoTuning:
    @classmethod
    def from_factor(cls, factor: float | None) -> NoTuning:
        return cls()

    def swatch(self, color: Color, is_primary: bool) -> dict[int, Color]:
        return map_swatch_by_complements(color, is_primary=is_primary)


Tuning = ShadeRange | BlendStrength | WhiteOffset | NoTuning

_TUNINGS: dict[SwatchMode, type] = {
    SwatchMode.shade: ShadeRange,
    SwatchMode.desaturate: BlendStrength,
    SwatchMode.fade: WhiteOffset,
    SwatchMode.complements: NoTuning,
}


def tuning_for(mode: SwatchMode | str, factor: float | None = None) -> Tuning:
    """Resolve ``factor`` into the tuning value ``mode`` understands.

    Raises ValueError for anything that is not a :class:`SwatchMode`.
    """
    return _TUNINGS[SwatchMode(mode)].from_factor(factor)


def material_color_from(
    color: Any,
    mode: SwatchMode | str,
    factor: float | None = None,
    is_primary: bool = True,
) -> Palette:
    """Generate a :class:`PrimaryPalette` (or :class:`AccentPalette` when
    ``is_primary`` is False) whose identity is ``color``.

    ``color`` is anything :meth:`Color.parse` accepts.
    """
    primary = Color.parse(color)
    mode = SwatchMode(mode)
    tuning = tuning_for(mode, factor)
    log.debug("Building %s swatch for %s with %r",
              "primary" if is_primary else "accent", primary, tuning)
    swatch = tuning.swatch(primary, is_primary)
    palette_cls = PrimaryPalette if is_primary else AccentPalette
    return palette_cls(primary.value, swatch)


def material_primary_from(
    color: Any, mode: SwatchMode | str, factor: float | None = None,
) -> PrimaryPalette:
    """Ten-shade palette; see :func:`material_color_from`."""
    return material_color_from(color, mode, factor, True)


def material_accent_from(
    color: Any, mode: SwatchMode | str, factor: float | None = None,
) -> AccentPalette:
    """Five-shade accent palette; see :func:`material_color_from`."""
    return material_color_from(color, mode, factor, False)
