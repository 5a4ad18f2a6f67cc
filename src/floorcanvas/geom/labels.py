"""Room label rules.

Generators often append the room size to its name, as in
``"Bedroom 1 (12' x 10')"``. The renderer shows such a suffix on its own
line in a smaller font. This module isolates the rule deciding what counts
as a dimension suffix.
"""

from __future__ import annotations

import math
import re

# Trailing "(...)" group separated from the rest of the name by whitespace
_PAREN_SUFFIX = re.compile(r"^(?P<head>.*\S)\s+(?P<token>\([^()]*\))$")

# A number followed by a unit marker, or two numbers joined by x
_MEASUREMENT = re.compile(
    r"\d(?:\.\d+)?\s*(?:['\"′″]|ft\b|m\b|[x×]\s*\d)",
    re.IGNORECASE,
)


def _is_bare_measurement(token: str) -> bool:
    # Fragments of a parenthesised group are never split off on their own
    if "(" in token or ")" in token:
        return False
    return _MEASUREMENT.search(token) is not None


def split_room_label(name: str) -> tuple[str, ...]:
    """Split a room name into display lines.

    Args:
        name: Raw room name.

    Returns:
        ``(head, dimension)`` when the name ends with a dimension token,
        ``(name,)`` otherwise, and an empty tuple for a blank name.

    Examples:
        >>> split_room_label("Bedroom 1 (12' x 10')")
        ('Bedroom 1', "(12' x 10')")
        >>> split_room_label("Kitchen")
        ('Kitchen',)
    """
    text = name.strip()
    if not text:
        return ()

    match = _PAREN_SUFFIX.match(text)
    if match and any(ch.isdigit() for ch in match.group("token")):
        return (match.group("head"), match.group("token"))

    parts = text.rsplit(None, 1)
    if len(parts) == 2 and _is_bare_measurement(parts[1]):
        return (parts[0], parts[1])

    return (text,)


def format_square_footage(value: float) -> str | None:
    """Format an area for display, or return None if it is not finite."""
    if not math.isfinite(value):
        return None
    if float(value).is_integer():
        return f"{int(value):,} sq ft"
    return f"{value:,.1f} sq ft"
