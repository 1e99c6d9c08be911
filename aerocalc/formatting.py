# aerocalc/formatting.py

"""
Number formatting for result cards and tables.
"""

import math


def format_number(value, decimals=2):
    """
    Human readable number: fixed point for ordinary magnitudes,
    exponent form for very small or very large ones.
    """
    if value is None:
        return "N/A"
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if math.isnan(value):
        return "N/A"
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"
    if value == 0:
        return "0"
    if abs(value) < 1e-3 or abs(value) > 1e4:
        return f"{value:.{decimals}e}"
    return f"{value:.{decimals}f}"


def format_duration(seconds):
    """Seconds -> "1 d 2 h 3 min 4 s", dropping leading zero units."""
    if seconds is None or math.isnan(seconds):
        return "N/A"
    if seconds < 0:
        raise ValueError("Duration cannot be negative.")

    remaining = int(round(seconds))
    parts = []
    for label, size in (("d", 86400), ("h", 3600), ("min", 60)):
        count, remaining = divmod(remaining, size)
        if count or parts:
            parts.append(f"{count} {label}")
    parts.append(f"{remaining} s")
    return " ".join(parts)

