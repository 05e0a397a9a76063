from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from auto_budget.domain.money import ZERO


@dataclass(frozen=True, slots=True)
class FeeScheme:
    """Taxes and dealer fees added on top of the vehicle price before financing."""

    name: str
    tax_rate: Decimal
    flat_fee: Decimal = ZERO

    def compute(self, price: Decimal) -> Decimal:
        return max(price, ZERO) * self.tax_rate + self.flat_fee


FLAT_PERCENT = FeeScheme(name="flat_8", tax_rate=Decimal("0.08"))
PERCENT_PLUS_FLAT = FeeScheme(
    name="pct_8_5_plus_500",
    tax_rate=Decimal("0.085"),
    flat_fee=Decimal("500"),
)

FEE_SCHEMES: dict[str, FeeScheme] = {
    scheme.name: scheme for scheme in (FLAT_PERCENT, PERCENT_PLUS_FLAT)
}


def compute_taxes_and_fees(price: Decimal, scheme: FeeScheme) -> Decimal:
    return scheme.compute(price)
