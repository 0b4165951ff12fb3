"""Swatch preview charts: swatch(), compare(), figure(), save()."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt
import numpy as np

from .material import SwatchMode, material_color_from
from .palette import Palette
from .style import apply
from .theme import LAYOUT

log = logging.getLogger(__name__)

# Default output directory, overridable per call or via the environment
_CHARTS_DIR = Path(os.environ.get("SHADE_SWATCH_OUTPUT_DIR", "charts"))


def _ensure_style() -> None:
    """Apply the swatch style. Runs on every call, so it resets base rcParams."""
    apply()


def figure(
    figsize: tuple[float, float] | None = None,
    nrows: int = 1,
    squeeze: bool = True,
) -> tuple[plt.Figure, Any]:
    """Create a styled (fig, ax) pair. Escape hatch for custom charts.

    With ``nrows > 1`` (or ``squeeze=False``) ``ax`` is an array of axes.
    """
    _ensure_style()
    fig, ax = plt.subplots(nrows, 1, figsize=figsize, squeeze=squeeze)
    return fig, ax


def save(
    fig: plt.Figure,
    filename: str,
    output_dir: str | Path | None = None,
) -> Path:
    """Save a figure to the charts directory (or a custom directory).

    Returns the path to the saved file.
    """
    dest = Path(output_dir) if output_dir else _CHARTS_DIR
    dest.mkdir(parents=True, exist_ok=True)
    path = dest / filename
    fig.savefig(path)
    plt.close(fig)
    log.info("Wrote %s", path)
    return path


def _label_color(palette: Palette, key: int) -> str:
    shade = palette[key]
    # Faint shades show the light background through them
    if shade.alpha < 128 or shade.relative_luminance() > 0.4:
        return LAYOUT["text_dark"]
    return LAYOUT["text_light"]


def _draw(ax: plt.Axes, palette: Palette, label: str | None = None) -> None:
    keys = list(palette)
    x = np.arange(len(keys))
    ax.bar(
        x,
        np.ones(len(keys)),
        width=1.0 - LAYOUT["patch_gap"],
        color=[c.rgba for c in palette.colors],
        edgecolor="none",
    )
    for xi, key in zip(x, keys):
        ax.text(
            xi, 0.5, f"{key}\n{palette[key].to_hex()}",
            ha="center", va="center",
            fontsize=LAYOUT["label_size"],
            color=_label_color(palette, key),
        )
    ax.set_xlim(-0.5, len(keys) - 0.5)
    ax.set_ylim(0, 1)
    ax.set_xticks([])
    ax.set_yticks([])
    for spine in ax.spines.values():
        spine.set_visible(False)
    if label:
        ax.set_ylabel(label, rotation=0, ha="right", va="center")


def swatch(
    palette: Palette,
    *,
    title: str | None = None,
    filename: str | None = None,
    output_dir: str | Path | None = None,
    figsize: tuple[float, float] | None = None,
) -> tuple[plt.Figure, plt.Axes]:
    """One row of labeled patches, lightest shade on the left."""
    fig, ax = figure(figsize=figsize)
    _draw(ax, palette)

    if title:
        ax.set_title(title)

    if filename:
        save(fig, filename, output_dir)

    return fig, ax


def compare(
    color: Any,
    modes: Iterable[SwatchMode | str] = tuple(SwatchMode),
    *,
    factor: float | None = None,
    is_primary: bool = True,
    title: str | None = None,
    filename: str | None = None,
    output_dir: str | Path | None = None,
) -> tuple[plt.Figure, np.ndarray]:
    """One swatch row per mode for the same input color."""
    modes = [SwatchMode(m) for m in modes]
    if not modes:
        raise ValueError("compare() needs at least one mode")
    width = LAYOUT["figsize"][0]
    fig, axes = figure(
        figsize=(width, LAYOUT["row_height"] * len(modes)),
        nrows=len(modes),
        squeeze=False,
    )
    axes = axes[:, 0]

    for ax, mode in zip(axes, modes):
        palette = material_color_from(color, mode, factor, is_primary)
        _draw(ax, palette, label=mode.value)

    if title:
        fig.suptitle(title)

    if filename:
        save(fig, filename, output_dir)

    return fig, axes
