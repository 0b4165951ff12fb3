"""Example: theme a plain line chart with a generated palette."""

import matplotlib.pyplot as plt
import numpy as np

import shade_swatch as ss
from shade_swatch.style import apply

palette = ss.material_primary_from("#2E4D37", ss.SwatchMode.shade, 160)
apply(palette)

t = np.linspace(0, 2 * np.pi, 200)

fig, ax = plt.subplots()
for k in range(1, 6):
    ax.plot(t, np.sin(t + k * 0.4) * (1 + 0.1 * k), label=f"Phase {k}")

ax.set_title("Phase Shifts")
ax.set_xlabel("Angle (rad)")
ax.legend(loc="upper right")

ss.save(fig, "themed-lines.svg")
