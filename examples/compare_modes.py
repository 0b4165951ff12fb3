"""Example: the four swatch modes side by side for one color."""

import shade_swatch as ss

ss.compare(
    "#6496c8",
    title="Swatch Modes for #6496c8",
    filename="compare-modes.svg",
)
