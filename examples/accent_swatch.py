"""Example: a five-shade accent palette at half strength."""

import shade_swatch as ss

accent = ss.material_accent_from("tab:orange", ss.SwatchMode.desaturate, 0.5)

ss.swatch(
    accent,
    title="Accent, 50% Strength",
    filename="accent-swatch.svg",
)
