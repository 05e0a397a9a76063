"""
Dependency injection for FastAPI routes.

Use cases are cheap and stateless, so each request builds its own. Only the
read-only vehicle catalog is a cached singleton. Pricing profiles are resolved
from the environment on every call, so tests can switch them with monkeypatch.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from auto_budget import config
from auto_budget.adapters.in_memory_vehicle_catalog import InMemoryVehicleCatalog
from auto_budget.ports.vehicle_catalog import VehicleCatalog
from auto_budget.use_cases.assess_budget import AssessBudget
from auto_budget.use_cases.calculate_payment_quote import CalculatePaymentQuote
from auto_budget.use_cases.enumerate_plans import EnumeratePlans
from auto_budget.use_cases.get_vehicle_model import GetVehicleModel
from auto_budget.use_cases.search_vehicles import SearchVehicles
from auto_budget.use_cases.select_vehicle import SelectVehicle


@lru_cache(maxsize=1)
def get_vehicle_catalog() -> VehicleCatalog:
    """Shared read-only catalog seeded with the Toyota line-up."""
    return InMemoryVehicleCatalog()


def get_search_vehicles_use_case(
    catalog: VehicleCatalog = Depends(get_vehicle_catalog),
) -> SearchVehicles:
    return SearchVehicles(vehicle_catalog=catalog)


def get_vehicle_model_use_case(
    catalog: VehicleCatalog = Depends(get_vehicle_catalog),
) -> GetVehicleModel:
    return GetVehicleModel(vehicle_catalog=catalog)


def get_select_vehicle_use_case(
    catalog: VehicleCatalog = Depends(get_vehicle_catalog),
) -> SelectVehicle:
    return SelectVehicle(vehicle_catalog=catalog)


def get_calculate_payment_quote_use_case() -> CalculatePaymentQuote:
    """
    Factory for the payment schedule endpoint.

    Returns:
        CalculatePaymentQuote: priced with AUTO_BUDGET_QUOTE_PROFILE
    """
    return CalculatePaymentQuote(profile=config.quote_profile())


def get_assess_budget_use_case() -> AssessBudget:
    """
    Factory for the quote endpoint.

    Returns:
        AssessBudget: quote calculator priced with AUTO_BUDGET_QUOTE_PROFILE
    """
    return AssessBudget(calculate_quote=get_calculate_payment_quote_use_case())


def get_enumerate_plans_use_case() -> EnumeratePlans:
    """
    Factory for the plan-comparison endpoints.

    Returns:
        EnumeratePlans: grid priced with AUTO_BUDGET_COMPARISON_PROFILE
    """
    return EnumeratePlans(profile=config.comparison_profile())
