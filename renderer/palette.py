"""
Colour table — the only place colour *values* live.

The timeline engine deals in colour names; painters (the text preview,
or any external renderer) resolve them here.
"""

from __future__ import annotations

DEFAULT_COLOR = "white"

COLORS: dict[str, str] = {
    "green":  "#22c55e",
    "red":    "#ef4444",
    "yellow": "#eab308",
    "gray":   "#6b7280",
    "white":  "#e5e5e5",
    "cyan":   "#06b6d4",
    "blue":   "#3b82f6",
}

# Spellings that should land on a known entry
_ALIASES: dict[str, str] = {
    "grey": "gray",
}


def resolve_color(name: str | None, fallback: str = DEFAULT_COLOR) -> str:
    """
    Resolve a colour name to its hex value.

    Accepts a palette name (case-insensitive) or a hex string (#RRGGBB),
    which is passed through unchanged. Unknown names fall back to
    ``fallback`` (default: white).
    """
    if not name:
        return COLORS[fallback]
    key = name.strip().lower()
    key = _ALIASES.get(key, key)
    if key in COLORS:
        return COLORS[key]
    if key.startswith("#") and len(key) in (7, 9):
        return name
    return COLORS[fallback]
