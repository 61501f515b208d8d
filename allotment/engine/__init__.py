"""Engine package for bounded, consistent budget allocation.

This package provides components for:
- Creating and editing allocation snapshots
- Rebalancing sub-services under their floors
- Deriving per-service metrics and tiers
- Bulk presets (even, random, minimum)
"""

from allotment.engine.allocation import (
    finalize,
    initialize,
    reopen,
    set_all_allocations,
    set_currency_symbol,
    update_service_allocation,
    update_sub_allocation,
)
from allotment.engine.metrics import (
    allocated_total,
    allocation_info,
    can_finalize,
    discretionary_budget,
    is_at_minimum,
    is_sub_at_minimum,
    range_percentage,
    remaining,
    status_description,
    sub_range_percentage,
    tier_level,
    tier_statuses,
    tier_transition,
)
from allotment.engine.models import AllocationInfo, TierTransition
from allotment.engine.presets import distribute_evenly, randomize, reset_to_minimum

__all__ = [
    "initialize",
    "update_service_allocation",
    "update_sub_allocation",
    "set_all_allocations",
    "finalize",
    "reopen",
    "set_currency_symbol",
    "allocated_total",
    "remaining",
    "discretionary_budget",
    "range_percentage",
    "tier_level",
    "is_at_minimum",
    "sub_range_percentage",
    "is_sub_at_minimum",
    "can_finalize",
    "status_description",
    "tier_statuses",
    "allocation_info",
    "tier_transition",
    "AllocationInfo",
    "TierTransition",
    "distribute_evenly",
    "randomize",
    "reset_to_minimum",
]
