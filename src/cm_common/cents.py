"""Integer cents helpers for the marketplace.

Stored and transacted amounts are int cents. Rates are fractions (0.065 = 6.5%).
Every rate x cents product is rounded half-up exactly once, via Decimal, so
repeated calls recomputed from the same integer never drift.
"""

from decimal import ROUND_HALF_UP, Decimal


def _as_decimal(value: int | float | Decimal) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() keeps 0.065 as 0.065 instead of its binary expansion
    return Decimal(str(value))


def round_half_up(value: int | float | Decimal) -> int:
    """Round to the nearest integer, halves away from zero: 2.5 -> 3, -2.5 -> -3."""
    return int(_as_decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def apply_rate(cents: int, rate: float | Decimal) -> int:
    """Return round_half_up(cents * rate)."""
    return round_half_up(_as_decimal(cents) * _as_decimal(rate))


def dollars_to_cents(dollars: int | float | Decimal) -> int:
    """12.345 -> 1235. Used for tier fees and form input."""
    return round_half_up(_as_decimal(dollars) * 100)


def cents_to_display(cents: int) -> str:
    """Convert cents to display string: 6500 -> '$65.00', -1200 -> '-$12.00'."""
    if cents < 0:
        abs_cents = -cents
        return f"-${abs_cents // 100:,}.{abs_cents % 100:02d}"
    return f"${cents // 100:,}.{cents % 100:02d}"


def format_cents(cents: int) -> str:
    """Plain two-decimal dollars without grouping: 123456 -> '$1234.56'."""
    sign = "-" if cents < 0 else ""
    abs_cents = abs(cents)
    return f"{sign}${abs_cents // 100}.{abs_cents % 100:02d}"


def format_fee_rate(rate: float) -> str:
    """0.065 -> '6.50%'."""
    pct = (_as_decimal(rate) * 100).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{pct}%"
