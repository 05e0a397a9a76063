from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from auto_budget.domain.errors import ValidationError


@dataclass(frozen=True, slots=True)
class Trim:
    name: str
    price: Decimal


@dataclass(frozen=True, slots=True)
class VehicleModel:
    name: str
    base_price: Decimal
    category: str
    trims: tuple[Trim, ...] = ()

    def trim(self, name: str) -> Trim | None:
        return next((trim for trim in self.trims if trim.name == name), None)


@dataclass(frozen=True, slots=True)
class VehicleFilters:
    category: str | None = None
    price_min: Decimal | None = None
    price_max: Decimal | None = None

    def validate(self) -> None:
        """
        Validate filter parameters.

        Raises:
            ValidationError: If price bounds are not Decimals or are inverted
        """
        # Guardrails: prevent float leakage past boundary
        for field_name in ("price_min", "price_max"):
            value = getattr(self, field_name)
            if value is not None and not isinstance(value, Decimal):
                raise ValidationError(
                    f"{field_name} must be Decimal or None (no floats past the boundary)"
                )

        if (
            self.price_min is not None
            and self.price_max is not None
            and self.price_min > self.price_max
        ):
            raise ValidationError(
                errors=[
                    {
                        "field": "price_min",
                        "message": "Must be less than or equal to price_max",
                        "code": "INVALID_RANGE",
                    }
                ]
            )
