from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

ZERO = Decimal("0")
CENTS = Decimal("0.01")

# Largest magnitude a form field may carry. Anything at or past it is treated
# as unparseable so that int() and quantize() stay within decimal precision.
MAX_FORM_MAGNITUDE = Decimal("1e12")


def to_cents(amount: Decimal) -> Decimal:
    """Round a monetary amount to cents for presentation (ROUND_HALF_UP)."""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def parse_decimal(raw: object) -> Decimal | None:
    """
    Best-effort conversion of a form value to Decimal.

    Accepts Decimals, ints and numeric strings; thousands separators and a
    leading "$" are stripped ("35,000" and "$35,000" both parse). Returns None for
    anything empty, non-numeric, non-finite or with a magnitude of 1e12 or more
    ("1e30" included). Floats go through str() so that 0.1 becomes Decimal("0.1")
    rather than its binary expansion.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, Decimal):
        value = raw
    elif isinstance(raw, int):
        value = Decimal(raw)
    elif isinstance(raw, float):
        value = Decimal(str(raw))
    elif isinstance(raw, str):
        cleaned = raw.replace(",", "").replace("$", "").strip()
        if not cleaned:
            return None
        try:
            value = Decimal(cleaned)
        except InvalidOperation:
            return None
    else:
        return None

    if not value.is_finite() or value.copy_abs() >= MAX_FORM_MAGNITUDE:
        return None
    return value
