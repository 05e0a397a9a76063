from __future__ import annotations

import os

from auto_budget.domain.errors import NotFoundError
from auto_budget.domain.profiles import PROFILES, PricingProfile, get_profile

DEFAULT_QUOTE_PROFILE = "standard"
DEFAULT_COMPARISON_PROFILE = "comparison"
DEFAULT_LOG_LEVEL = "INFO"


def _profile_from_env(variable: str, default: str) -> PricingProfile:
    name = os.getenv(variable) or default

    try:
        return get_profile(name)
    except NotFoundError:
        raise RuntimeError(
            f"{variable}={name!r} is not a known pricing profile "
            f"(expected one of {sorted(PROFILES)})"
        ) from None


def quote_profile() -> PricingProfile:
    return _profile_from_env("AUTO_BUDGET_QUOTE_PROFILE", DEFAULT_QUOTE_PROFILE)


def comparison_profile() -> PricingProfile:
    return _profile_from_env("AUTO_BUDGET_COMPARISON_PROFILE", DEFAULT_COMPARISON_PROFILE)


def log_level() -> str:
    return (os.getenv("AUTO_BUDGET_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
