import re

# Tailwind 500
DEFAULT_HEX = (
    "#ec4899",  # pink
    "#f59e0b",  # amber
    "#3b82f6",  # blue
    "#f97316",  # orange
    "#10b981",  # emerald
)

# Tailwind 100
LIGHT_HEX = (
    "#fce7f3",
    "#fef3c7",
    "#dbeafe",
    "#ffedd5",
    "#d1fae5",
)

# Tailwind 600
DARK_HEX = (
    "#db2777",
    "#d97706",
    "#2563eb",
    "#ea580c",
    "#059669",
)

FALLBACK_HEX = "#ec4899"

PALETTES = {
    "default": DEFAULT_HEX,
    "light": LIGHT_HEX,
    "dark": DARK_HEX,
}

_HEX_PREFIX = re.compile(r"(?:0[xX])?([0-9a-fA-F]*)")

def palette_by_name(name: str):
    try:
        return PALETTES[name]
    except KeyError:
        raise ValueError(f"unknown palette {name!r}") from None

def parse_hex(text: str):
    """'#ec4899' or 'ec4899' -> (236, 72, 153). Leading whitespace is skipped, unparsable input is black."""
    digits = _HEX_PREFIX.match(text.strip("#").lstrip()).group(1)
    value = int(digits, 16) if digits else 0
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF

def to_hex(rgb) -> str:
    r, g, b = rgb
    return f"#{int(r) & 0xFF:02x}{int(g) & 0xFF:02x}{int(b) & 0xFF:02x}"

def resolve_color(palette, index: int):
    """
    Pick palette[index mod len]. A missing or empty palette falls back
    to DEFAULT_HEX, so the lookup never fails.
    """
    colors = palette if palette else DEFAULT_HEX
    return colors[int(index) % len(colors)]
