from decimal import ROUND_HALF_UP, Decimal, localcontext


def format_amount(value: int | float, currency: str = "$") -> str:
    d = Decimal(str(value))
    with localcontext() as ctx:
        # room for every integer digit plus two decimals
        ctx.prec = max(ctx.prec, d.adjusted() + 3)
        d = d.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if d < 0 else ""
    return f"{sign}{currency}{abs(d):,.2f}"
