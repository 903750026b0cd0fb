"""Half-up rounding for values shown on the dashboard."""

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round *value* to *ndigits* decimals, halves away from zero.

    Unlike ``round()`` (halves to even), ``round_half_up(400.5) == 401.0``.
    """
    quantum = Decimal(1).scaleb(-ndigits)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))
