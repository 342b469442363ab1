"""
Display formatting shared by notifications and the dashboard.
Numbers follow pt-BR conventions: "." groups thousands, "," separates decimals.
"""

from __future__ import annotations

_MAX_FRACTION_DIGITS = 3


def format_amount(amount: float) -> str:
    """
    Format a number like JavaScript's toLocaleString('pt-BR').

    Examples:
        >>> format_amount(1500)
        '1.500'
        >>> format_amount(1234.5)
        '1.234,5'
    """
    text = f"{abs(amount):,.{_MAX_FRACTION_DIGITS}f}"
    whole, _, frac = text.partition(".")
    frac = frac.rstrip("0")
    whole = whole.replace(",", ".")
    out = f"{whole},{frac}" if frac else whole
    if amount < 0 and out.strip("0.,"):
        out = "-" + out
    return out


def shorten_address(address: str) -> str:
    """Return the first 6 and last 4 characters of an address joined by an ellipsis."""
    return f"{address[:6]}...{address[-4:]}"
