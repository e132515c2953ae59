"""Plan catalogue: bandwidth and monthly fee per plan type"""

from decimal import Decimal
from typing import Dict, NamedTuple, Union

from app.core.exceptions import InvalidInputError
from app.models.enums import PlanType


class PlanTerms(NamedTuple):
    bandwidth_mbps: int
    monthly_fee: Decimal


PLAN_CATALOGUE: Dict[PlanType, PlanTerms] = {
    PlanType.BASIC: PlanTerms(bandwidth_mbps=10, monthly_fee=Decimal("800.00")),
    PlanType.STANDARD: PlanTerms(bandwidth_mbps=50, monthly_fee=Decimal("1100.00")),
    PlanType.PREMIUM: PlanTerms(bandwidth_mbps=100, monthly_fee=Decimal("1400.00")),
}


def resolve_plan(plan_type: Union[PlanType, str, None]) -> PlanTerms:
    """
    Look up the terms for a plan.

    Raises:
        InvalidInputError: plan_type is missing or not a known plan
    """
    try:
        return PLAN_CATALOGUE[PlanType(plan_type)]
    except (ValueError, KeyError):
        raise InvalidInputError("Invalid plan type")
