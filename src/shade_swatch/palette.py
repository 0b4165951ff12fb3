"""Palette containers handed to the theming layer.

A palette is read-only: an identity ``value`` (the primary color's ARGB
integer) plus the shade map produced by one of the swatch functions.
"""

from __future__ import annotations

import zlib
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from matplotlib.colors import ListedColormap

from .color import Color
from .theme import SHADE_KEYS_ACCENT, SHADE_KEYS_PRIMARY


def _shade(key: int) -> property:
    return property(lambda self: self[key], doc=f"The color at shade {key}.")


class Palette(Mapping):
    """Immutable ``{shade key: Color}`` mapping with an identity value."""

    KEYS: tuple[int, ...] = ()

    def __init__(self, value: int, swatch: Mapping[int, Color]) -> None:
        if sorted(swatch) != list(self.KEYS):
            raise ValueError(
                f"{type(self).__name__} needs shade keys {list(self.KEYS)}, "
                f"got {sorted(swatch)}"
            )
        self._value = value & 0xFFFFFFFF
        self._swatch = MappingProxyType({key: swatch[key] for key in self.KEYS})

    def __getitem__(self, key: int) -> Color:
        return self._swatch[key]

    def __iter__(self) -> Iterator[int]:
        return iter(self._swatch)

    def __len__(self) -> int:
        return len(self._swatch)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Palette):
            return NotImplemented
        return (
            type(self) is type(other)
            and self._value == other._value
            and dict(self._swatch) == dict(other._swatch)
        )

    def __hash__(self) -> int:
        return hash((type(self), self._value, tuple(self._swatch.items())))

    def __repr__(self) -> str:
        shades = ", ".join(f"{k}: {c}" for k, c in self._swatch.items())
        return f"{type(self).__name__}(0x{self._value:08X}, {{{shades}}})"

    @property
    def value(self) -> int:
        return self._value

    @property
    def primary(self) -> Color:
        """The color this palette was generated from."""
        return Color.from_value(self._value)

    @property
    def colors(self) -> list[Color]:
        return list(self._swatch.values())

    def hex_colors(self, keep_alpha: bool = False) -> list[str]:
        return [c.to_hex(keep_alpha=keep_alpha) for c in self._swatch.values()]

    def as_dict(self) -> dict[int, Color]:
        return dict(self._swatch)

    def to_cmap(self, name: str | None = None) -> ListedColormap:
        """A matplotlib colormap stepping through the shades, lightest first.

        The default name is derived from the shades, so equal palettes share
        a name.
        """
        if name is None:
            digest = zlib.crc32(",".join(self.hex_colors(keep_alpha=True)).encode())
            name = f"swatch_{self._value:08x}_{digest:08x}"
        return ListedColormap([c.rgba for c in self._swatch.values()], name=name)


class PrimaryPalette(Palette):
    """Ten shades, 50 through 900."""

    KEYS = SHADE_KEYS_PRIMARY

    shade50 = _shade(50)
    shade100 = _shade(100)
    shade200 = _shade(200)
    shade300 = _shade(300)
    shade400 = _shade(400)
    shade500 = _shade(500)
    shade600 = _shade(600)
    shade700 = _shade(700)
    shade800 = _shade(800)
    shade900 = _shade(900)


class AccentPalette(Palette):
    """Five shades: 50, 100, 200, 400 and 700."""

    KEYS = SHADE_KEYS_ACCENT

    shade50 = _shade(50)
    shade100 = _shade(100)
    shade200 = _shade(200)
    shade400 = _shade(400)
    shade700 = _shade(700)
