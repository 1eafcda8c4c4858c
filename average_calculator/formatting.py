from __future__ import annotations

from typing import Dict, Iterable

from .window import Snapshot


EMPTY_SENTINEL = "Empty"


# whole numbers at or above this magnitude switch to exponent notation
EXPONENT_THRESHOLD = 1e21


def format_number(x: float) -> str:
    # 3.0 -> "3", 2.5 -> "2.5", 1e21 -> "1e+21", 1e-07 -> "1e-7"
    x = float(x)
    if x.is_integer() and abs(x) < EXPONENT_THRESHOLD:
        return str(int(x))
    s = repr(x)
    if "e" not in s:
        return s
    mantissa, exp = s.split("e")
    sign = "-" if exp.startswith("-") else "+"
    digits = exp.lstrip("+-").lstrip("0") or "0"
    return f"{mantissa}e{sign}{digits}"


def format_window(values: Iterable[float], empty: str = EMPTY_SENTINEL) -> str:
    parts = [format_number(v) for v in values]
    if not parts:
        return empty
    return ", ".join(parts)


def format_average(x: float, decimals: int = 2) -> str:
    return f"{float(x):.{int(decimals)}f}"


def render_snapshot(snap: Snapshot, decimals: int = 2) -> Dict[str, str]:
    """Display strings for the four result fields."""
    return {
        "previous": format_window(snap.previous_window),
        "current": format_window(snap.current_window),
        "added": format_window(snap.added_samples),
        "average": format_average(snap.average, decimals),
    }
