"""Swatch mapping functions: primary color in, ``{shade key: Color}`` out.

Each function returns a fresh dict keyed by the ten primary shade keys
(50-900) or, with ``is_primary=False``, the five accent keys
(50, 100, 200, 400, 700), always in ascending key order.
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Any

from .color import Color, alpha_from_strength, round_half_away
from .theme import BLACK, WHITE, shade_count, shade_keys

_WHITE = Color.from_value(WHITE)
_BLACK = Color.from_value(BLACK)

# Blend weights: key -> (background, share of primary's alpha).
# A None background marks the key that keeps primary itself.
_BLEND_PRIMARY = MappingProxyType({
    50: (_WHITE, 0.15),
    100: (_WHITE, 0.25),
    200: (_WHITE, 0.40),
    300: (_WHITE, 0.60),
    400: (_WHITE, 0.80),
    500: (None, 1.00),
    600: (_BLACK, 0.70),
    700: (_BLACK, 0.50),
    800: (_BLACK, 0.30),
    900: (_BLACK, 0.15),
})

_BLEND_ACCENT = MappingProxyType({
    50: (_WHITE, 0.40),
    100: (_WHITE, 0.75),
    200: (None, 1.00),
    400: (_BLACK, 0.60),
    700: (_BLACK, 0.20),
})

# Complement index for each key. Lighter keys take the back half of the
# wheel, the mid key takes index 0 (primary's own hue).
_COMPLEMENT_PRIMARY = MappingProxyType({
    50: 5, 100: 6, 200: 7, 300: 8, 400: 9,
    500: 0, 600: 1, 700: 2, 800: 3, 900: 4,
})

_COMPLEMENT_ACCENT = MappingProxyType({
    50: 3, 100: 4, 200: 0, 400: 1, 700: 2,
})


def map_swatch_by_shade(
    primary: Color,
    *,
    min_step: int = -100,
    max_step: int = 100,
    is_primary: bool = True,
) -> dict[int, Color]:
    """Step ``primary.with_white()`` linearly from ``max_step`` toward ``min_step``.

    The range is split into one step per shade, so with ten shades and the
    default range the steps are 100, 80, ... 0 (key 500), ... -80.

    Key 500 only stays ``primary`` unchanged when ``min_step == -max_step``.
    The five accent shades split the range into fifths, so accent key 200
    gets half a spacing above zero (+20 for the default range).
    """
    count = shade_count(is_primary)
    delta = (max_step - min_step) / count
    return {
        key: primary.with_white(math.trunc(max_step - i * delta))
        for i, key in enumerate(shade_keys(is_primary))
    }


def map_swatch_by_alpha_blend(
    primary: Color,
    *,
    strength: Any = None,
    is_primary: bool = True,
) -> dict[int, Color]:
    """Composite ``primary`` over white (light keys) or black (dark keys).

    ``strength`` picks the alpha every shade ends up with (see
    :func:`~shade_swatch.color.alpha_from_strength`); by default it is
    primary's own alpha. The mid key is ``primary.with_alpha(alpha)``
    exactly.
    """
    alpha = alpha_from_strength(strength)
    if alpha is None:
        alpha = primary.alpha
    table = _BLEND_PRIMARY if is_primary else _BLEND_ACCENT

    swatch = {}
    for key, (background, weight) in table.items():
        if background is None:
            swatch[key] = primary.with_alpha(alpha)
            continue
        foreground = primary.with_alpha(round_half_away(alpha * weight))
        swatch[key] = Color.alpha_blend(foreground, background).with_alpha(alpha)
    return swatch


def map_swatch_by_opacity(
    primary: Color,
    *,
    add: int = 0,
    is_primary: bool = True,
) -> dict[int, Color]:
    """Ramp opacity up with each shade, optionally lightening by ``add``.

    The first shade gets half a step, so for primaries the opacities are
    0.05, 0.1, 0.2, ... 0.9 of primary's own. Key 500 is therefore *not*
    primary; the last key comes closest to it.
    """
    keys = shade_keys(is_primary)
    count = len(keys)
    delta = 1.0 / (count if is_primary else count - 1)
    base = primary.with_white(add)
    return {
        key: base.with_opacity(primary.opacity * delta * (0.5 if idx == 0 else idx))
        for idx, key in enumerate(keys)
    }


def map_swatch_by_complements(
    primary: Color,
    *,
    is_primary: bool = True,
) -> dict[int, Color]:
    """Spread ``primary.complementary(n)`` across the shade keys.

    Raises ValueError if the generator does not return exactly one color
    per shade.
    """
    count = shade_count(is_primary)
    complements = primary.complementary(count)
    if len(complements) != count:
        raise ValueError(
            f"Expected {count} complementary colors, got {len(complements)}"
        )
    table = _COMPLEMENT_PRIMARY if is_primary else _COMPLEMENT_ACCENT
    return {key: complements[table[key]] for key in shade_keys(is_primary)}

