"""Immutable 8-bit ARGB color and the primitives the swatch generators use.

Parsing and formatting go through ``matplotlib.colors`` so anything
matplotlib understands ("#6496c8", "tab:blue", (0.4, 0.6, 0.8)) is a valid
input. Channel math is plain integer arithmetic on 0-255 values.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Integral, Real
from typing import Any

import matplotlib.colors as mcolors
import numpy as np

_CHANNELS = ("red", "green", "blue", "alpha")


def round_half_away(x: float) -> int:
    """Round half away from zero (not Python's banker's rounding)."""
    return int(math.floor(abs(x) + 0.5)) * (1 if x >= 0 else -1)


def _clamp8(x: int) -> int:
    return max(0, min(255, x))


def alpha_from_strength(strength: Any) -> int | None:
    """Convert a blend strength into a 0-255 alpha, or None to keep the source alpha.

    Integers are alpha levels and are clamped. Floats between 0.0 and 1.0
    are fractions of full opacity; larger floats are alpha levels.
    """
    if strength is None:
        return None
    if isinstance(strength, bool):
        raise TypeError(f"Strength must be a number, not {strength!r}")
    if isinstance(strength, Integral):
        return _clamp8(int(strength))
    if isinstance(strength, Real):
        value = float(strength)
        if 0.0 <= value <= 1.0:
            return round_half_away(value * 255)
        return _clamp8(round_half_away(value))
    raise TypeError(f"Strength must be a number, not {type(strength).__name__}")


@dataclass(frozen=True)
class Color:
    """A color with 8-bit red, green, blue and alpha channels."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in _CHANNELS:
            value = getattr(self, name)
            if not isinstance(value, Integral) or not 0 <= value <= 255:
                raise ValueError(f"{name} must be an int in 0-255, got {value!r}")

    # -- construction ------------------------------------------------------

    @classmethod
    def from_value(cls, value: int) -> Color:
        """Decode a 32-bit ARGB integer (0xAARRGGBB)."""
        value &= 0xFFFFFFFF
        return cls(
            (value >> 16) & 0xFF,
            (value >> 8) & 0xFF,
            value & 0xFF,
            (value >> 24) & 0xFF,
        )

    @classmethod
    def from_rgba_floats(
        cls, r: float, g: float, b: float, a: float = 1.0,
    ) -> Color:
        """Build from 0.0-1.0 channel floats, as matplotlib returns them."""
        return cls(*(_clamp8(round_half_away(c * 255)) for c in (r, g, b, a)))

    @classmethod
    def parse(cls, spec: Any) -> Color:
        """Coerce a Color, ARGB int, or any matplotlib color spec to a Color."""
        if isinstance(spec, Color):
            return spec
        if isinstance(spec, Integral) and not isinstance(spec, bool):
            return cls.from_value(int(spec))
        try:
            rgba = mcolors.to_rgba(spec)
        except (ValueError, TypeError) as e:
            raise ValueError(f"Cannot parse color: {spec!r}") from e
        return cls.from_rgba_floats(*rgba)

    # -- accessors ---------------------------------------------------------

    @property
    def value(self) -> int:
        """The 32-bit ARGB encoding."""
        return (self.alpha << 24) | (self.red << 16) | (self.green << 8) | self.blue

    @property
    def opacity(self) -> float:
        return self.alpha / 255.0

    @property
    def rgba(self) -> tuple[float, float, float, float]:
        """Channels as 0.0-1.0 floats, the form matplotlib expects."""
        return (self.red / 255.0, self.green / 255.0, self.blue / 255.0, self.opacity)

    def to_hex(self, keep_alpha: bool = False) -> str:
        return mcolors.to_hex(self.rgba, keep_alpha=keep_alpha)

    def relative_luminance(self) -> float:
        """WCAG relative luminance, used to pick readable label colors."""
        channels = np.array(self.rgba[:3])
        linear = np.where(
            channels <= 0.03928, channels / 12.92, ((channels + 0.055) / 1.055) ** 2.4,
        )
        return float(linear @ np.array([0.2126, 0.7152, 0.0722]))

    # -- transforms --------------------------------------------------------

    def with_alpha(self, alpha: int) -> Color:
        return Color(self.red, self.green, self.blue, alpha)

    def with_opacity(self, opacity: float) -> Color:
        if not 0.0 <= opacity <= 1.0:
            raise ValueError(f"Opacity must be in 0.0-1.0, got {opacity!r}")
        return self.with_alpha(round_half_away(255.0 * opacity))

    def with_white(self, add: int) -> Color:
        """Add ``add`` to every RGB channel, clamped. Negative values darken."""
        return Color(
            _clamp8(self.red + add),
            _clamp8(self.green + add),
            _clamp8(self.blue + add),
            self.alpha,
        )

    def complementary(self, count: int) -> list[Color]:
        """``count`` colors with hues evenly spaced around the HSV wheel.

        Index 0 keeps this color's hue; saturation, value and alpha are
        shared by every entry.
        """
        if count < 1:
            raise ValueError(f"count must be positive, got {count}")
        h, s, v = mcolors.rgb_to_hsv(np.array(self.rgba[:3]))
        hues = (h + np.arange(count) / count) % 1.0
        hsv = np.column_stack([hues, np.full(count, s), np.full(count, v)])
        return [
            Color.from_rgba_floats(r, g, b, self.opacity)
            for r, g, b in mcolors.hsv_to_rgb(hsv)
        ]

    @staticmethod
    def alpha_blend(foreground: Color, background: Color) -> Color:
        """Composite ``foreground`` over ``background`` (source-over)."""
        alpha = foreground.alpha
        if alpha == 0:
            return background
        inv_alpha = 255 - alpha
        back_alpha = background.alpha
        if back_alpha == 255:
            return Color(
                (alpha * foreground.red + inv_alpha * background.red) // 255,
                (alpha * foreground.green + inv_alpha * background.green) // 255,
                (alpha * foreground.blue + inv_alpha * background.blue) // 255,
                255,
            )
        back_alpha = (back_alpha * inv_alpha) // 255
        out_alpha = alpha + back_alpha
        return Color(
            (foreground.red * alpha + background.red * back_alpha) // out_alpha,
            (foreground.green * alpha + background.green * back_alpha) // out_alpha,
            (foreground.blue * alpha + background.blue * back_alpha) // out_alpha,
            out_alpha,
        )

    def __str__(self) -> str:
        return self.to_hex(keep_alpha=self.alpha != 255)
