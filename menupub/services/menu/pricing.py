from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Any

# fr-FR groups thousands with a narrow no-break space
THOUSANDS_SEPARATOR = "\u202f"
CURRENCY_SUFFIX = " €"

_CENTS = Decimal("0.01")


def coerce_price(price: Any) -> Decimal:
    """Anything that is not a finite number counts as free."""
    if price is None or isinstance(price, bool):
        return Decimal("0")
    try:
        value = Decimal(str(price).strip())
    except (InvalidOperation, ValueError):
        return Decimal("0")
    if not value.is_finite():
        return Decimal("0")
    return value


def format_price(price: Any) -> str:
    """
    Format a price the way the French menu shows it, whatever the
    display language: `1234.5` -> `1 234,50 €`.
    """
    value = coerce_price(price)
    with localcontext() as ctx:
        # room for every integer digit plus the cents
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        value = value.quantize(_CENTS, rounding=ROUND_HALF_UP)
    formatted = f"{value:,.2f}"
    formatted = formatted.replace(",", THOUSANDS_SEPARATOR).replace(".", ",")
    return f"{formatted}{CURRENCY_SUFFIX}"
