from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from auto_budget.domain.vehicle import Trim, VehicleModel


class VehicleCatalog(ABC):
    """
    Port for the read-only vehicle line-up.

    The budgeting engine only needs it to seed an MSRP; it never writes to it.

    Contract:
        - list_models() preserves catalog order
        - Lookups are exact on model and trim names
        - in_price_range() keeps only trims inside the inclusive range and
          drops models left without trims
    """

    @abstractmethod
    def list_models(self) -> list[VehicleModel]: ...

    @abstractmethod
    def get_model(self, name: str) -> VehicleModel | None: ...

    def get_trim(self, model_name: str, trim_name: str) -> Trim | None:
        model = self.get_model(model_name)
        if model is None:
            return None
        return model.trim(trim_name)

    @abstractmethod
    def by_category(self, category: str) -> list[VehicleModel]: ...

    @abstractmethod
    def in_price_range(
        self, price_min: Decimal | None, price_max: Decimal | None
    ) -> list[VehicleModel]: ...
