"""Select vehicle use case."""

from __future__ import annotations

from dataclasses import dataclass

from auto_budget.domain.errors import NotFoundError
from auto_budget.domain.inputs import DEFAULT_YEAR, VehicleSelection
from auto_budget.ports.vehicle_catalog import VehicleCatalog


@dataclass(frozen=True, slots=True)
class SelectVehicleRequest:
    """Vehicle picked on the first screen. An empty trim means the base model."""

    model: str
    trim: str = ""
    year: str = DEFAULT_YEAR
    color: str = ""


class SelectVehicle:
    """
    Use case that turns a model/trim pick into a VehicleSelection.

    Responsibilities:
    - Seed the MSRP from the model's base price
    - Replace it with the trim price when a trim is named
    - Raise NotFoundError for models or trims the catalog does not carry
    """

    def __init__(self, vehicle_catalog: VehicleCatalog) -> None:
        self._catalog = vehicle_catalog

    def execute(self, request: SelectVehicleRequest) -> VehicleSelection:
        """
        Execute the selection.

        Raises:
            NotFoundError: If the model, or the named trim, is not in the catalog
        """
        model = self._catalog.get_model(request.model)
        if model is None:
            raise NotFoundError(resource="VehicleModel", identifier=request.model)

        selection = VehicleSelection(
            model=model.name,
            msrp=model.base_price,
            year=request.year,
            color=request.color,
        )

        if not request.trim:
            return selection

        trim = self._catalog.get_trim(model.name, request.trim)
        if trim is None:
            raise NotFoundError(resource="Trim", identifier=request.trim, model=model.name)

        return selection.with_trim(trim.name, trim.price)
