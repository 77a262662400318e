from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext

CENT = Decimal("0.01")


def round_two_places(value: Decimal) -> Decimal:
    # Half away from zero; a result of zero drops its sign.
    with localcontext() as ctx:
        # Enough digits for the integer part plus two places.
        ctx.prec = max(ctx.prec, max(value.adjusted(), 0) + 3)
        cents = value.quantize(CENT, rounding=ROUND_HALF_UP)
        if cents.is_zero():
            return abs(cents)
    return cents


def format_two_places(value: Decimal) -> str:
    return f"{round_two_places(value):.2f}"
