"""Get vehicle model by name use case."""

from __future__ import annotations

from dataclasses import dataclass

from auto_budget.domain.errors import NotFoundError, ValidationError
from auto_budget.domain.vehicle import VehicleModel
from auto_budget.ports.vehicle_catalog import VehicleCatalog


@dataclass(frozen=True, slots=True)
class GetVehicleModelRequest:
    """Request to get a vehicle model by name."""

    model: str


@dataclass(frozen=True, slots=True)
class GetVehicleModelResponse:
    """Response containing the requested model and its trims."""

    model: VehicleModel


class GetVehicleModel:
    """
    Use case for retrieving a single vehicle model.

    Responsibilities:
    - Reject blank model names
    - Delegate to the catalog for data access
    - Raise NotFoundError if the model doesn't exist
    """

    def __init__(self, vehicle_catalog: VehicleCatalog) -> None:
        """
        Initialize use case with dependencies.

        Args:
            vehicle_catalog: Read-only vehicle line-up
        """
        self._catalog = vehicle_catalog

    def execute(self, request: GetVehicleModelRequest) -> GetVehicleModelResponse:
        """
        Execute the lookup.

        Args:
            request: Request containing the model name

        Returns:
            GetVehicleModelResponse with the model

        Raises:
            ValidationError: If the model name is blank
            NotFoundError: If no model has that name
        """
        name = request.model.strip()
        if not name:
            raise ValidationError(
                errors=[
                    {
                        "field": "model",
                        "message": "Must not be blank",
                        "code": "REQUIRED",
                    }
                ]
            )

        model = self._catalog.get_model(name)

        if model is None:
            raise NotFoundError(resource="VehicleModel", identifier=name)

        return GetVehicleModelResponse(model=model)
