from __future__ import annotations

from decimal import Decimal

from auto_budget.domain.inputs import VehicleSelection
from auto_budget.domain.vehicle import VehicleFilters, VehicleModel
from auto_budget.entrypoints.http.dtos.vehicles import (
    SelectVehicleRequestDTO,
    TrimDTO,
    VehicleListResponseDTO,
    VehicleModelDTO,
    VehicleSearchQueryDTO,
    VehicleSelectionDTO,
)
from auto_budget.use_cases.search_vehicles import SearchVehiclesRequest, SearchVehiclesResponse
from auto_budget.use_cases.select_vehicle import SelectVehicleRequest


class VehicleMapper:
    """Maps between REST DTOs and domain models for the vehicle catalog."""

    @staticmethod
    def to_domain_filters(dto: VehicleSearchQueryDTO) -> VehicleFilters:
        """
        Converts query params to domain filters, handling Decimal conversion.

        Args:
            dto: Query parameters (prices already pattern-checked by Pydantic)

        Returns:
            VehicleFilters: Domain filters with Decimal prices
        """
        return VehicleFilters(
            category=dto.category,
            price_min=Decimal(dto.price_min) if dto.price_min else None,
            price_max=Decimal(dto.price_max) if dto.price_max else None,
        )

    @staticmethod
    def to_domain_request(dto: VehicleSearchQueryDTO) -> SearchVehiclesRequest:
        return SearchVehiclesRequest(filters=VehicleMapper.to_domain_filters(dto))

    @staticmethod
    def to_select_request(dto: SelectVehicleRequestDTO) -> SelectVehicleRequest:
        return SelectVehicleRequest(
            model=dto.model,
            trim=dto.trim,
            year=dto.year,
            color=dto.color,
        )

    @staticmethod
    def to_model_response(model: VehicleModel) -> VehicleModelDTO:
        """Decimal → str at the boundary."""
        return VehicleModelDTO(
            name=model.name,
            base_price=str(model.base_price),
            category=model.category,
            trims=[TrimDTO(name=trim.name, price=str(trim.price)) for trim in model.trims],
        )

    @staticmethod
    def to_list_response(result: SearchVehiclesResponse) -> VehicleListResponseDTO:
        return VehicleListResponseDTO(
            models=[VehicleMapper.to_model_response(model) for model in result.models],
            total=len(result.models),
        )

    @staticmethod
    def to_selection_response(selection: VehicleSelection) -> VehicleSelectionDTO:
        return VehicleSelectionDTO(
            model=selection.model,
            trim=selection.trim,
            msrp=str(selection.msrp),
            year=selection.year,
            color=selection.color,
        )
