from fastapi import APIRouter, Depends

from auto_budget.entrypoints.http.dependencies import (
    get_search_vehicles_use_case,
    get_select_vehicle_use_case,
    get_vehicle_model_use_case,
)
from auto_budget.entrypoints.http.dtos.vehicles import (
    SelectVehicleRequestDTO,
    VehicleListResponseDTO,
    VehicleModelDTO,
    VehicleSearchQueryDTO,
    VehicleSelectionDTO,
)
from auto_budget.entrypoints.http.error_responses import ErrorResponse
from auto_budget.entrypoints.http.mappers.vehicle_mapper import VehicleMapper
from auto_budget.use_cases.get_vehicle_model import GetVehicleModel, GetVehicleModelRequest
from auto_budget.use_cases.search_vehicles import SearchVehicles
from auto_budget.use_cases.select_vehicle import SelectVehicle


router = APIRouter(tags=["Vehicles"])


@router.get(
    "/vehicles",
    response_model=VehicleListResponseDTO,
    summary="Browse the vehicle line-up",
    description="""
    List models with their trims.

    ## Filters
    - category: case-insensitive exact match (sedan, suv, hybrid, minivan, truck)
    - price_min / price_max: inclusive, applied to trims; models with no trim in
      range are left out
    """,
    responses={422: {"model": ErrorResponse, "description": "Validation error"}},
)
def list_vehicles(
    query: VehicleSearchQueryDTO = Depends(),
    use_case: SearchVehicles = Depends(get_search_vehicles_use_case),
) -> VehicleListResponseDTO:
    """Parse → execute → map → return."""
    request = VehicleMapper.to_domain_request(query)
    result = use_case.execute(request)
    return VehicleMapper.to_list_response(result)


@router.get(
    "/vehicles/{model}",
    response_model=VehicleModelDTO,
    summary="Get one model with its trims",
    responses={404: {"model": ErrorResponse, "description": "Model not found"}},
)
def get_vehicle(
    model: str,
    use_case: GetVehicleModel = Depends(get_vehicle_model_use_case),
) -> VehicleModelDTO:
    result = use_case.execute(GetVehicleModelRequest(model=model))
    return VehicleMapper.to_model_response(result.model)


@router.post(
    "/vehicles/select",
    response_model=VehicleSelectionDTO,
    summary="Resolve the MSRP for a model and trim",
    description="""
    Returns the vehicle selection the rest of the wizard carries forward.
    The MSRP is the model's base price, or the trim price when a trim is given.
    """,
    responses={404: {"model": ErrorResponse, "description": "Model or trim not found"}},
)
def select_vehicle(
    payload: SelectVehicleRequestDTO,
    use_case: SelectVehicle = Depends(get_select_vehicle_use_case),
) -> VehicleSelectionDTO:
    selection = use_case.execute(VehicleMapper.to_select_request(payload))
    return VehicleMapper.to_selection_response(selection)
