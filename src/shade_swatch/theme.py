"""Pure data: shade keys, backgrounds, and layout constants.

No third-party imports: the key tables are plain tuples so any consumer
(matplotlib, CSS generators, Qt) can read them without pulling in the
color math.
"""

from types import MappingProxyType

# Material "primary" swatch: ten shades, lightest first
SHADE_KEYS_PRIMARY = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900)
SHADE_COUNT_PRIMARY = len(SHADE_KEYS_PRIMARY)

# Material "accent" swatch: five shades, lightest first
SHADE_KEYS_ACCENT = (50, 100, 200, 400, 700)
SHADE_COUNT_ACCENT = len(SHADE_KEYS_ACCENT)

# Opaque compositing backgrounds as ARGB integers
WHITE = 0xFFFFFFFF
BLACK = 0xFF000000

# Swatch preview layout
LAYOUT = MappingProxyType({
    "figsize": (8.5, 1.6),    # one palette row
    "row_height": 1.1,        # inches per extra row in compare()
    "dpi": 80,
    "title_size": 12,
    "label_size": 8,
    "patch_gap": 0.06,        # fraction of a cell left blank between patches
    "text_light": "#FFFFFF",
    "text_dark": "#2B2B2B",
    "bg": "#EBE1C3",
    "border": "#C4B892",
})


def shade_keys(is_primary: bool = True) -> tuple[int, ...]:
    """Ordered shade keys for the primary or accent variant."""
    return SHADE_KEYS_PRIMARY if is_primary else SHADE_KEYS_ACCENT


def shade_count(is_primary: bool = True) -> int:
    return SHADE_COUNT_PRIMARY if is_primary else SHADE_COUNT_ACCENT
