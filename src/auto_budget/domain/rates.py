from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from auto_budget.domain.errors import ValidationError
from auto_budget.domain.inputs import (
    DEFAULT_CREDIT_SCORE,
    LEASE_TERMS,
    MAX_CREDIT_SCORE,
    PlanType,
)
from auto_budget.domain.money import ZERO

APR_CEILING = Decimal("0.18")
LONG_TERM_MONTHS = 72


class RateBand(str, Enum):
    EXCELLENT = "excellent"
    GREAT = "great"
    VERY_GOOD = "very_good"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"
    VERY_POOR = "very_poor"
    EXTREMELY_POOR = "extremely_poor"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class BandRate:
    band: RateBand
    min_score: int
    label: str
    apr: Decimal
    long_term_apr: Decimal | None = None

    def apr_for_term(self, term_months: int) -> Decimal:
        if self.long_term_apr is not None and term_months >= LONG_TERM_MONTHS:
            return self.long_term_apr
        return self.apr


@dataclass(frozen=True, slots=True)
class RateTable:
    """
    Credit score bands mapped to APRs.

    Bands are ordered by descending lower bound and matched first-match: the
    first band whose `min_score` is <= the score wins. Scores under every bound
    land in `fallback`, which carries the worst rate of the table. Terms of 72
    months or more use a band's `long_term_apr` when it has one.
    """

    name: str
    bands: tuple[BandRate, ...]
    fallback: BandRate

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """
        Check the table against the pricing policy.

        Raises:
            ValidationError: If bounds are not strictly descending, a rate lies
                outside [0, APR_CEILING], a long-term rate undercuts its base rate,
                or a better band is priced above a worse one
        """
        if not self.bands:
            raise ValidationError(f"rate table '{self.name}' has no bands")

        bounds = [band.min_score for band in self.bands]
        if any(lower >= higher for higher, lower in zip(bounds, bounds[1:])):
            raise ValidationError(f"rate table '{self.name}' bounds must be strictly descending")

        rows = (*self.bands, self.fallback)
        for row in rows:
            for apr in (row.apr, row.long_term_apr):
                if apr is not None and not ZERO <= apr <= APR_CEILING:
                    raise ValidationError(
                        f"rate table '{self.name}' APR {apr} for {row.band.value} "
                        f"is outside [0, {APR_CEILING}]"
                    )
            if row.long_term_apr is not None and row.long_term_apr < row.apr:
                raise ValidationError(
                    f"rate table '{self.name}' long-term APR for {row.band.value} "
                    "must not be lower than its base APR"
                )

        for better, worse in zip(rows, rows[1:]):
            if better.apr > worse.apr or better.apr_for_term(LONG_TERM_MONTHS) > worse.apr_for_term(
                LONG_TERM_MONTHS
            ):
                raise ValidationError(
                    f"rate table '{self.name}' prices {better.band.value} above {worse.band.value}"
                )

    @property
    def lowest_rate(self) -> Decimal:
        return self.bands[0].apr

    @property
    def highest_rate(self) -> Decimal:
        return self.fallback.apr_for_term(LONG_TERM_MONTHS)

    def band_for(self, credit_score: int | None) -> BandRate:
        if credit_score is None:
            credit_score = DEFAULT_CREDIT_SCORE
        credit_score = min(credit_score, MAX_CREDIT_SCORE)

        for band in self.bands:
            if credit_score >= band.min_score:
                return band
        return self.fallback

    def resolve_apr(
        self,
        credit_score: int | None,
        term_months: int,
        plan_type: PlanType = PlanType.LOAN,
    ) -> Decimal:
        """Rate for a score and term. Lease terms past the longest lease are priced as that lease."""
        if plan_type is PlanType.LEASE:
            term_months = min(term_months, max(LEASE_TERMS))
        apr = self.band_for(credit_score).apr_for_term(term_months)
        return min(apr, APR_CEILING)


def _band(band: RateBand, min_score: int, label: str, apr: str, long_term_apr: str | None = None) -> BandRate:
    return BandRate(
        band=band,
        min_score=min_score,
        label=label,
        apr=Decimal(apr),
        long_term_apr=Decimal(long_term_apr) if long_term_apr is not None else None,
    )


COARSE_5_BAND = RateTable(
    name="coarse_5_band",
    bands=(
        _band(RateBand.EXCELLENT, 800, "Excellent (800+)", "0.0299"),
        _band(RateBand.VERY_GOOD, 740, "Very Good (740-799)", "0.0399"),
        _band(RateBand.GOOD, 670, "Good (670-739)", "0.0599"),
        _band(RateBand.FAIR, 580, "Fair (580-669)", "0.0799"),
        _band(RateBand.POOR, 300, "Poor (300-579)", "0.1199"),
    ),
    fallback=_band(RateBand.UNKNOWN, 0, "Unknown", "0.1199"),
)

TIERED_8_BAND = RateTable(
    name="tiered_8_band",
    bands=(
        _band(RateBand.EXCELLENT, 720, "Excellent (720+)", "0.0872", "0.0972"),
        _band(RateBand.GREAT, 690, "Great (690-719)", "0.0947", "0.1049"),
        _band(RateBand.VERY_GOOD, 670, "Very Good (670-689)", "0.1024", "0.1126"),
        _band(RateBand.GOOD, 650, "Good (650-669)", "0.1118", "0.1221"),
        _band(RateBand.FAIR, 630, "Fair (630-649)", "0.1236", "0.1341"),
        _band(RateBand.POOR, 610, "Poor (610-629)", "0.1359", "0.1467"),
        _band(RateBand.VERY_POOR, 580, "Very Poor (580-609)", "0.1498", "0.1608"),
        _band(RateBand.EXTREMELY_POOR, 520, "Extremely Poor (520-579)", "0.1649", "0.1800"),
    ),
    fallback=_band(RateBand.UNKNOWN, 0, "Unknown", "0.1649", "0.1800"),
)

# Same bands as the tiered table without the long-term surcharge.
FLAT_8_BAND = RateTable(
    name="flat_8_band",
    bands=tuple(
        BandRate(band=row.band, min_score=row.min_score, label=row.label, apr=row.apr)
        for row in TIERED_8_BAND.bands
    ),
    fallback=BandRate(
        band=RateBand.UNKNOWN,
        min_score=0,
        label="Unknown",
        apr=TIERED_8_BAND.fallback.apr,
    ),
)

RATE_TABLES: dict[str, RateTable] = {
    table.name: table for table in (COARSE_5_BAND, TIERED_8_BAND, FLAT_8_BAND)
}
