from __future__ import annotations

from decimal import Decimal

from auto_budget.domain.inputs import Rebates
from auto_budget.domain.money import ZERO

REBATE_AMOUNT = Decimal("500")


def rebate_total(rebates: Rebates) -> Decimal:
    """Military and college rebates are independent and stack."""
    active = sum(1 for flag in (rebates.military, rebates.college) if flag)
    return REBATE_AMOUNT * active


def effective_price(msrp: Decimal, rebates: Rebates) -> Decimal:
    """Price after rebates, never below zero."""
    return max(msrp - rebate_total(rebates), ZERO)
