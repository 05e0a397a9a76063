"""Named pricing profiles.

The payment screen and the plan-comparison grid were priced with different
assumptions: fee scheme, rate table and lease residual all differ between them.
Rather than silently unifying them, each combination is a named profile chosen
when a use case is constructed.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from auto_budget.domain.errors import NotFoundError
from auto_budget.domain.fees import FLAT_PERCENT, PERCENT_PLUS_FLAT, FeeScheme
from auto_budget.domain.rates import COARSE_5_BAND, FLAT_8_BAND, TIERED_8_BAND, RateTable


@dataclass(frozen=True, slots=True)
class PricingProfile:
    name: str
    rate_table: RateTable
    fee_scheme: FeeScheme
    residual_pct: Decimal
    charge_mileage: bool


STANDARD = PricingProfile(
    name="standard",
    rate_table=TIERED_8_BAND,
    fee_scheme=FLAT_PERCENT,
    residual_pct=Decimal("0.50"),
    charge_mileage=False,
)

COMPARISON = PricingProfile(
    name="comparison",
    rate_table=FLAT_8_BAND,
    fee_scheme=PERCENT_PLUS_FLAT,
    residual_pct=Decimal("0.55"),
    charge_mileage=True,
)

SIMPLE = PricingProfile(
    name="simple",
    rate_table=COARSE_5_BAND,
    fee_scheme=FLAT_PERCENT,
    residual_pct=Decimal("0.50"),
    charge_mileage=False,
)

PROFILES: dict[str, PricingProfile] = {
    profile.name: profile for profile in (STANDARD, COMPARISON, SIMPLE)
}


def get_profile(name: str) -> PricingProfile:
    """
    Look up a profile by name.

    Raises:
        NotFoundError: If no profile has that name
    """
    try:
        return PROFILES[name]
    except KeyError:
        raise NotFoundError(resource="PricingProfile", identifier=name) from None
