"""Coercion helpers for loosely typed payload fields."""

import math

_TRUE_LABELS = {"true", "yes", "y", "1"}
_FALSE_LABELS = {"false", "no", "n", "0"}


def coerce_number(raw: object) -> float | None:
    """Parse a number or numeric string; blanks and garbage become None."""
    if isinstance(raw, bool) or raw is None:
        return None
    if isinstance(raw, int | float):
        number = float(raw)
    elif isinstance(raw, str):
        text = raw.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def coerce_int(raw: object) -> int | None:
    number = coerce_number(raw)
    if number is None:
        return None
    return int(round(number))


def coerce_bool(raw: object) -> bool | None:
    """Parse booleans stored as bools, 0/1 or yes/no labels."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, int | float):
        return raw != 0
    if isinstance(raw, str):
        text = raw.strip().lower()
        if text in _TRUE_LABELS:
            return True
        if text in _FALSE_LABELS:
            return False
    return None
