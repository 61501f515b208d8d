"""
Derived queries over an allocation snapshot.

All functions are pure: they read a state and return a value.
"""

from __future__ import annotations

from typing import Optional

from allotment.catalog import Catalog, Service, default_catalog
from allotment.engine.models import CURRENT, LOCKED, UNLOCKED, AllocationInfo, TierTransition
from allotment.settings import Settings, get_settings
from allotment.state import AllocationState


def catalog_for(state: AllocationState) -> Catalog:
    """Catalog the state was built from (built-in catalog if None)."""
    return state.catalog if state.catalog is not None else default_catalog()


def allocated_total(state: AllocationState) -> float:
    """Sum of all top-level allocations."""
    return sum(state.allocations.values())


def remaining(state: AllocationState) -> float:
    """Budget not yet allocated to any service."""
    return state.total_budget - allocated_total(state)


def discretionary_budget(state: AllocationState) -> float:
    """Budget left once every service sits at its minimum."""
    return state.total_budget - catalog_for(state).minimum_required


def range_percentage(state: AllocationState, service: Service) -> float:
    """Fraction (0-1) of the service's own maximum currently allocated."""
    if service.max_allocation <= 0:
        return 0.0
    return max(0.0, min(1.0, state.allocation(service.id) / service.max_allocation))


def tier_level(state: AllocationState, service: Service) -> int:
    """Highest tier level whose threshold is reached (0 if none)."""
    percentage = range_percentage(state, service)

    for tier in reversed(service.tiers):
        if percentage >= tier.threshold:
            return tier.level

    return 0


def is_at_minimum(state: AllocationState, service: Service) -> bool:
    """True when the allocation equals the service minimum exactly."""
    return state.allocation(service.id) == service.min_allocation


def sub_range_percentage(state: AllocationState, service_id: str, sub_service_id: str) -> float:
    """Share (0-1) of the parent allocation held by one sub-service."""
    parent = state.allocation(service_id)
    if parent <= 0:
        return 0.0
    return state.sub_allocation(service_id, sub_service_id) / parent


def is_sub_at_minimum(
    state: AllocationState,
    service_id: str,
    sub_service_id: str,
    settings: Optional[Settings] = None,
) -> bool:
    """True when a sub-service holds no more than its floor share (within tolerance)."""
    sub = catalog_for(state).sub_service(service_id, sub_service_id)
    if sub is None:
        return False
    settings = settings or get_settings()
    return sub_range_percentage(state, service_id, sub_service_id) <= sub.min_share + settings.sub_minimum_tolerance


def can_finalize(state: AllocationState, settings: Optional[Settings] = None) -> bool:
    """
    True when the budget is spent closely enough to be submitted.

    The remaining amount may be a hair negative (rounding) and at most
    ``finalize_max_unallocated_share`` of the total budget.
    """
    settings = settings or get_settings()
    left = remaining(state)
    return (
        -settings.finalize_overspend_tolerance
        <= left
        <= state.total_budget * settings.finalize_max_unallocated_share
    )


def status_description(percentage: float) -> str:
    """Human-readable band for a range percentage."""
    if percentage <= 0.25:
        return "Minimum Viable"
    if percentage <= 0.5:
        return "Basic Operations"
    if percentage <= 0.75:
        return "Modernization"
    return "World Class"


def tier_statuses(state: AllocationState, service: Service) -> dict[int, str]:
    """Map each tier level to locked, unlocked or current."""
    current = tier_level(state, service)
    statuses = {}
    for tier in service.tiers:
        if tier.level == current:
            statuses[tier.level] = CURRENT
        elif tier.level < current:
            statuses[tier.level] = UNLOCKED
        else:
            statuses[tier.level] = LOCKED
    return statuses


def allocation_info(state: AllocationState, service: Service) -> AllocationInfo:
    """Bundle the per-service metrics into one record."""
    percentage = range_percentage(state, service)
    return AllocationInfo(
        service_id=service.id,
        amount=state.allocation(service.id),
        percentage=percentage,
        current_tier=tier_level(state, service),
        tier_status=tier_statuses(state, service),
        at_minimum=is_at_minimum(state, service),
        status=status_description(percentage),
    )


def tier_transition(before: AllocationState, after: AllocationState, service: Service) -> TierTransition:
    """Describe which tiers a service gained or lost between two snapshots."""
    previous_level = tier_level(before, service)
    current_level = tier_level(after, service)

    gained = tuple(t for t in service.tiers if previous_level < t.level <= current_level)
    lost = tuple(t for t in service.tiers if current_level < t.level <= previous_level)

    return TierTransition(
        service_id=service.id,
        previous_level=previous_level,
        current_level=current_level,
        gained=gained,
        lost=lost,
    )
