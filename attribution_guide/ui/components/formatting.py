"""
Utility helpers for formatting numeric values, currency strings, and percentages.
"""

from __future__ import annotations

from typing import Optional

SCALE_FACTORS = [
    (1_000_000_000_000, "T", "Trillion"),
    (1_000_000_000, "B", "Billion"),
    (1_000_000, "M", "Million"),
    (1_000, "K", "Thousand"),
]
CURRENCY_SYMBOLS = {"$", "€", "£", "¥"}


def _scale_value(value: float, long_suffix: bool = False):
    for factor, short, long in SCALE_FACTORS:
        if abs(value) >= factor:
            return value / factor, f" {long}" if long_suffix else short
    return value, ""


def format_number(
    value: Optional[float],
    decimals: int = 0,
    compact: bool = False,
    long_suffix: bool = False,
) -> str:
    if value is None:
        return "–"
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return "–"
    suffix = ""
    if compact:
        numeric, suffix = _scale_value(numeric, long_suffix=long_suffix)
    return f"{numeric:,.{decimals}f}{suffix}"


def format_currency(
    value: Optional[float],
    currency: str = "$",
    decimals: int = 0,
    compact: bool = True,
) -> str:
    formatted = format_number(value, decimals=decimals, compact=compact)
    if formatted == "–":
        return formatted
    # Symbols hug the number ("$4.5M"), ISO codes are spaced ("USD 4.5M")
    if currency in CURRENCY_SYMBOLS:
        return f"{currency}{formatted}"
    return f"{currency} {formatted}"


def format_percent(value: Optional[float], decimals: int = 0) -> str:
    if value is None:
        return "–"
    try:
        return f"{value:.{decimals}f}%"
    except (TypeError, ValueError):
        return "–"
