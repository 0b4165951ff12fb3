"""Translate palettes into matplotlib rcParams."""

from __future__ import annotations

import matplotlib as mpl
import matplotlib.pyplot as plt

from .palette import Palette
from .theme import LAYOUT

# Base rcParams for swatch previews, independent of any palette
STYLE: dict = {
    # Figure
    "figure.figsize": LAYOUT["figsize"],
    "figure.dpi": LAYOUT["dpi"],
    "figure.facecolor": LAYOUT["bg"],
    "figure.edgecolor": "none",
    "savefig.dpi": LAYOUT["dpi"],
    "savefig.facecolor": LAYOUT["bg"],
    "savefig.edgecolor": "none",
    "savefig.bbox": "tight",
    "savefig.pad_inches": 0.2,

    # Axes
    "axes.facecolor": LAYOUT["bg"],
    "axes.edgecolor": LAYOUT["border"],
    "axes.titlesize": LAYOUT["title_size"],
    "axes.titleweight": "bold",
    "axes.titlecolor": LAYOUT["text_dark"],
    "axes.labelsize": LAYOUT["label_size"],
    "axes.labelcolor": LAYOUT["text_dark"],

    # Ticks
    "xtick.labelsize": LAYOUT["label_size"],
    "ytick.labelsize": LAYOUT["label_size"],
    "xtick.color": LAYOUT["text_dark"],
    "ytick.color": LAYOUT["text_dark"],

    # Font
    "font.family": "sans-serif",
    "font.size": LAYOUT["label_size"],
}


def palette_style(palette: Palette) -> dict:
    """rcParams that theme plots with ``palette``.

    The color cycle runs from the mid shade outward so consecutive series
    stay distinguishable; chrome uses the darkest and lightest shades.
    The palette's colormap is registered so ``image.cmap`` resolves.
    """
    hexes = palette.hex_colors(keep_alpha=True)
    mid = len(hexes) // 2
    cycle = [hexes[mid]]
    for offset in range(1, len(hexes)):
        for i in (mid + offset, mid - offset):
            if 0 <= i < len(hexes):
                cycle.append(hexes[i])
    darkest, lightest = hexes[-1], hexes[0]
    cmap = palette.to_cmap()
    if cmap.name not in mpl.colormaps:
        mpl.colormaps.register(cmap)
    return {
        "axes.prop_cycle": mpl.cycler(color=cycle),
        "axes.edgecolor": darkest,
        "axes.titlecolor": darkest,
        "grid.color": lightest,
        "image.cmap": cmap.name,
    }


def apply(palette: Palette | None = None) -> None:
    """Apply the base style, and ``palette``'s colors if given, globally."""
    plt.rcParams.update(STYLE)
    if palette is not None:
        plt.rcParams.update(palette_style(palette))
