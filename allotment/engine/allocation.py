"""
Allocation operations - bounded, consistent edits to an allocation snapshot.

Usage:
    state = initialize(catalog, 500_000_000_000)
    state = update_service_allocation(state, "health", 120_000_000_000)
    state = update_sub_allocation(state, "health", "hospitals", 60_000_000_000)

Every operation returns a new state. Updates never raise: unknown ids and
NaN amounts are no-ops, out-of-range amounts are clamped.
"""

from __future__ import annotations

import logging
import math
from typing import Mapping

from allotment.catalog import Catalog, Service
from allotment.engine.metrics import allocated_total, catalog_for
from allotment.engine.redistribution import absorb_residual, distribute_with_floors
from allotment.state import AllocationState

logger = logging.getLogger(__name__)


def _sub_floors(service: Service, amount: float) -> dict[str, float]:
    return {sub.id: amount * sub.min_share for sub in service.sub_services}


def default_sub_allocations(service: Service, amount: float) -> dict[str, float]:
    """Split an amount across a service's sub-services by default share."""
    return {sub.id: amount * sub.default_share for sub in service.sub_services}


def derive_sub_allocations(catalog: Catalog, allocations: Mapping[str, float]) -> dict[str, dict[str, float]]:
    """Default-share sub-allocations for every service that has sub-services."""
    return {
        service.id: default_sub_allocations(service, allocations.get(service.id, 0.0))
        for service in catalog
        if service.has_sub_services
    }


def initialize(catalog: Catalog, total_budget: float, currency_symbol: str = "$") -> AllocationState:
    """
    Create the session's starting state.

    Every service starts at its minimum and sub-allocations at their default
    shares.

    Raises:
        ValueError: if the catalog minimums do not fit in ``total_budget``
    """
    minimum_required = catalog.minimum_required
    if minimum_required > total_budget:
        raise ValueError(
            f"Budget {total_budget:,.2f} cannot cover catalog minimums of {minimum_required:,.2f}"
        )

    allocations = {service.id: service.min_allocation for service in catalog}
    return AllocationState(
        total_budget=total_budget,
        currency_symbol=currency_symbol,
        allocations=allocations,
        sub_allocations=derive_sub_allocations(catalog, allocations),
        is_finalized=False,
        catalog=catalog,
    )


def _rescale_sub_allocations(service: Service, current: Mapping[str, float], amount: float) -> dict[str, float]:
    current_total = sum(current.get(sub.id, 0.0) for sub in service.sub_services)

    if current_total > 0:
        # Keep the user's relative emphasis
        scale = amount / current_total
        scaled = {sub.id: current.get(sub.id, 0.0) * scale for sub in service.sub_services}
        return absorb_residual(scaled, amount, _sub_floors(service, amount))

    return default_sub_allocations(service, amount)


def update_service_allocation(state: AllocationState, service_id: str, amount: float) -> AllocationState:
    """
    Set one service's allocation, clamped to its band and the free budget.

    The legal range is ``[min_allocation, min(max_allocation, headroom)]``
    where headroom is the unallocated budget plus what this service already
    holds. Sub-allocations are scaled proportionally to the new amount, or
    derived from default shares when they currently sum to zero.

    Args:
        state: Current snapshot
        service_id: Service to edit
        amount: Requested amount

    Returns:
        New snapshot (the same one for unknown ids or NaN amounts)
    """
    service = catalog_for(state).get(service_id)
    if service is None:
        logger.debug(f"Ignoring allocation update for unknown service {service_id!r}")
        return state

    amount = float(amount)
    if math.isnan(amount):
        logger.debug(f"Ignoring NaN allocation update for {service_id}")
        return state

    current = state.allocation(service_id)
    headroom = state.total_budget - allocated_total(state) + current
    ceiling = min(service.max_allocation, headroom)
    new_amount = max(service.min_allocation, min(amount, ceiling))

    if new_amount != amount:
        logger.debug(f"Clamped {service_id} from {amount:,.2f} to {new_amount:,.2f}")

    allocations = dict(state.allocations)
    allocations[service_id] = new_amount

    overshoot = sum(allocations.values()) - state.total_budget
    if overshoot > 0 and new_amount > current:
        # Rounding in the headroom sum
        new_amount = max(service.min_allocation, new_amount - overshoot)
        allocations[service_id] = new_amount

    sub_allocations = dict(state.sub_allocations)
    if service.has_sub_services:
        sub_allocations[service_id] = _rescale_sub_allocations(
            service, state.sub_allocations.get(service_id, {}), new_amount
        )

    return state.replace(allocations=allocations, sub_allocations=sub_allocations, is_finalized=False)


def update_sub_allocation(
    state: AllocationState,
    service_id: str,
    sub_service_id: str,
    amount: float,
) -> AllocationState:
    """
    Set one sub-service's amount and rebalance its siblings.

    The amount is clamped between the sub-service's own floor and what is
    left once every sibling keeps its floor. The rest of the parent amount
    goes to the siblings in proportion to their current amounts (or their
    default shares when those are all zero), with any sibling that would
    drop under its floor pinned there.

    Args:
        state: Current snapshot
        service_id: Parent service
        sub_service_id: Sub-service to edit
        amount: Requested amount

    Returns:
        New snapshot whose sub-allocations for ``service_id`` sum to the
        parent allocation (the same snapshot for unknown ids or NaN)
    """
    service = catalog_for(state).get(service_id)
    if service is None or not service.has_sub_services:
        logger.debug(f"Ignoring sub-allocation update for {service_id!r}: no such service with sub-services")
        return state

    target = service.sub_service(sub_service_id)
    if target is None:
        logger.debug(f"Ignoring sub-allocation update for unknown sub-service {service_id}.{sub_service_id}")
        return state

    amount = float(amount)
    if math.isnan(amount):
        logger.debug(f"Ignoring NaN sub-allocation update for {service_id}.{sub_service_id}")
        return state

    parent = state.allocation(service_id)
    siblings = [sub for sub in service.sub_services if sub.id != sub_service_id]

    if not siblings:
        # An only child always holds the whole parent amount
        clamped = parent
    else:
        floor = parent * target.min_share
        ceiling = parent - sum(parent * sub.min_share for sub in siblings)
        clamped = max(floor, min(amount, ceiling))

    if clamped != amount:
        logger.debug(f"Clamped {service_id}.{sub_service_id} from {amount:,.2f} to {clamped:,.2f}")

    current = state.sub_allocations.get(service_id, {})
    floors = {sub.id: parent * sub.min_share for sub in siblings}
    weights = {sub.id: current.get(sub.id, 0.0) for sub in siblings}
    if sum(weights.values()) <= 0:
        weights = {sub.id: sub.default_share for sub in siblings}

    others = distribute_with_floors(parent - clamped, weights, floors)

    new_subs = {
        sub.id: clamped if sub.id == sub_service_id else others[sub.id]
        for sub in service.sub_services
    }
    new_subs = absorb_residual(new_subs, parent, _sub_floors(service, parent))

    sub_allocations = dict(state.sub_allocations)
    sub_allocations[service_id] = new_subs
    return state.replace(sub_allocations=sub_allocations, is_finalized=False)


def _trim_overshoot(catalog: Catalog, allocations: dict[str, float], budget: float) -> None:
    overshoot = sum(allocations.values()) - budget
    if overshoot <= 0:
        return
    for service in reversed(list(catalog)):
        amount = allocations.get(service.id, 0.0)
        if amount - overshoot >= service.min_allocation:
            allocations[service.id] = amount - overshoot
            return


def set_all_allocations(state: AllocationState, amounts: Mapping[str, float]) -> AllocationState:
    """
    Replace many allocations at once and re-derive every sub-allocation.

    Known ids take the requested amount clamped to their band; unknown ids
    and NaN amounts are ignored and services not mentioned keep their
    amount. If the result overspends the budget, every service gives back
    the same fraction of what it holds above its minimum.

    Args:
        state: Current snapshot
        amounts: Requested amount per service id

    Returns:
        New snapshot with sub-allocations at default shares
    """
    catalog = catalog_for(state)
    allocations = dict(state.allocations)

    for service_id, amount in amounts.items():
        service = catalog.get(service_id)
        if service is None:
            logger.debug(f"Ignoring bulk allocation for unknown service {service_id!r}")
            continue
        amount = float(amount)
        if math.isnan(amount):
            continue
        allocations[service_id] = max(service.min_allocation, min(amount, service.max_allocation))

    total = sum(allocations.values())
    if total > state.total_budget:
        minimums = sum(catalog.get(sid).min_allocation for sid in allocations if sid in catalog)
        discretionary = total - minimums
        factor = max(0.0, (state.total_budget - minimums) / discretionary) if discretionary > 0 else 0.0
        logger.debug(f"Bulk allocation overspends by {total - state.total_budget:,.2f}; scaling by {factor:.4f}")
        for service in catalog:
            if service.id in allocations:
                extra = allocations[service.id] - service.min_allocation
                allocations[service.id] = service.min_allocation + extra * factor
        _trim_overshoot(catalog, allocations, state.total_budget)

    return state.replace(
        allocations=allocations,
        sub_allocations=derive_sub_allocations(catalog, allocations),
        is_finalized=False,
    )


def finalize(state: AllocationState) -> AllocationState:
    """Mark the budget as submitted."""
    return state.replace(is_finalized=True)


def reopen(state: AllocationState) -> AllocationState:
    """Re-open a finalized budget for editing."""
    return state.replace(is_finalized=False)


def set_currency_symbol(state: AllocationState, symbol: str) -> AllocationState:
    """Change the display currency symbol; amounts are untouched."""
    return state.replace(currency_symbol=symbol)
