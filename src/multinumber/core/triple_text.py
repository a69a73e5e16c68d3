"""Text representation of an x/y/z triple and caret-to-field lookup."""

from __future__ import annotations

from collections.abc import Sequence

FIELD_COUNT = 3
SEPARATOR = ","
_JOINER = SEPARATOR + " "

# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


def format_number(value: float, decimals: int = 3) -> str:
    """Round *value* for display, dropping a trailing ``.0``."""
    # Adding 0.0 turns -0.0 into 0.0.
    rounded = round(value, decimals) + 0.0
    text = repr(rounded)
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_triple(values: Sequence[float], decimals: int = 3) -> str:
    """Join three values as ``"x, y, z"``."""
    return _JOINER.join(format_number(v, decimals) for v in values)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def _parse_part(part: str) -> float | None:
    # float() accepts digit grouping underscores; typed numbers may not use them.
    if "_" in part:
        return None
    try:
        return float(part.strip())
    except ValueError:
        return None


def parse_triple(text: str) -> list[float | None] | None:
    """Parse ``"x, y, z"`` into per-field values.

    Returns ``None`` when *text* does not split into exactly three parts.
    Otherwise returns one entry per field, ``None`` where that part is not a
    number so the caller can leave the field untouched.
    """
    parts = text.split(SEPARATOR)
    if len(parts) != FIELD_COUNT:
        return None
    return [_parse_part(p) for p in parts]


# ---------------------------------------------------------------------------
# Caret lookup
# ---------------------------------------------------------------------------


def locate_field(text: str, caret: int) -> int:
    """Return the index of the field the caret at offset *caret* sits in."""
    commas = text.count(SEPARATOR, 0, max(caret, 0))
    return min(commas, FIELD_COUNT - 1)
