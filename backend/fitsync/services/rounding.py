"""Half-up rounding used for every reported engine value.

The built-in ``round`` rounds halves to even (``round(185.5) == 186`` but
``round(184.5) == 184``); targets and totals shown to users round halves up.
"""

from decimal import Decimal, ROUND_HALF_UP


def round_half_up(value: float, digits: int = 0) -> float:
    """Round ``value`` to ``digits`` decimal places, halves away from zero."""
    exponent = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(value)).quantize(exponent, rounding=ROUND_HALF_UP))


def round_int(value: float) -> int:
    """Round ``value`` to the nearest integer, halves away from zero."""
    return int(round_half_up(value, 0))
