"""Number formatting for budget amounts."""

_SUFFIXES = (
    (1_000_000_000_000, "T"),
    (1_000_000_000, "B"),
    (1_000_000, "M"),
    (1_000, "K"),
)


def format_compact_number(value: float) -> str:
    """Format a large number with a T/B/M/K suffix.

    Values of 100 units or more in their suffix are shown without decimals.

    Examples:
        >>> format_compact_number(500_000_000_000)
        '500B'
        >>> format_compact_number(56_300_000_000)
        '56.3B'
    """
    abs_value = abs(value)
    sign = "-" if value < 0 else ""

    for scale, suffix in _SUFFIXES:
        if abs_value >= scale:
            num = abs_value / scale
            text = f"{num:.0f}" if num >= 100 else f"{num:.1f}"
            return f"{sign}{text}{suffix}"

    return f"{sign}{abs_value:,.0f}"


def format_currency(value: float, symbol: str) -> str:
    """Format an amount with a currency symbol, e.g. ``$500B`` or ``-$2.5M``."""
    formatted = format_compact_number(abs(value))
    return f"-{symbol}{formatted}" if value < 0 else f"{symbol}{formatted}"


def format_percent(fraction: float) -> str:
    """Format a 0-1 fraction as a percentage with one decimal."""
    return f"{fraction * 100:.1f}%"
