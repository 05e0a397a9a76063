from __future__ import annotations

from dataclasses import dataclass, field

from auto_budget.domain.vehicle import VehicleFilters, VehicleModel
from auto_budget.ports.vehicle_catalog import VehicleCatalog


@dataclass(frozen=True, slots=True)
class SearchVehiclesRequest:
    filters: VehicleFilters = field(default_factory=VehicleFilters)


@dataclass(frozen=True, slots=True)
class SearchVehiclesResponse:
    models: list[VehicleModel]


class SearchVehicles:
    """
    Browse the vehicle line-up by category and price range.

    Filters combine with AND semantics: the price range narrows trims, the
    category narrows models.
    """

    def __init__(self, vehicle_catalog: VehicleCatalog) -> None:
        self._catalog = vehicle_catalog

    def execute(self, request: SearchVehiclesRequest) -> SearchVehiclesResponse:
        """
        Raises:
            ValidationError: If the price range is invalid
        """
        filters = request.filters
        filters.validate()

        if filters.price_min is not None or filters.price_max is not None:
            models = self._catalog.in_price_range(filters.price_min, filters.price_max)
        else:
            models = self._catalog.list_models()

        if filters.category:
            wanted = {model.name for model in self._catalog.by_category(filters.category)}
            models = [model for model in models if model.name in wanted]

        return SearchVehiclesResponse(models=models)
