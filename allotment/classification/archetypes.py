"""Primary identity (archetype) from the largest allocations."""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from allotment.classification.models import Identity, RankedAllocation
from allotment.config.identities import ARCHETYPES, COMPOUND_ARCHETYPES, DEFAULT_ARCHETYPE
from allotment.engine.metrics import catalog_for
from allotment.settings import Settings, get_settings
from allotment.state import AllocationState

logger = logging.getLogger(__name__)


def ranked_allocations(state: AllocationState) -> list[RankedAllocation]:
    """Services by allocation, largest first; ties keep catalog order."""
    entries = [RankedAllocation(service.id, state.allocation(service.id)) for service in catalog_for(state)]
    return sorted(entries, key=lambda entry: entry.amount, reverse=True)


def primary_and_secondary(
    state: AllocationState,
) -> tuple[Optional[RankedAllocation], Optional[RankedAllocation]]:
    """The two largest allocations (None where the catalog is too small)."""
    ranked = ranked_allocations(state)
    primary = ranked[0] if ranked else None
    secondary = ranked[1] if len(ranked) > 1 else None
    return primary, secondary


def compound_key(first_id: str, second_id: str) -> str:
    """Order-independent key for a pair of services."""
    return "-".join(sorted((first_id, second_id)))


def has_discretionary_spending(state: AllocationState) -> bool:
    """True when at least one service is above its minimum."""
    return any(state.allocation(service.id) > service.min_allocation for service in catalog_for(state))


def identity(
    state: AllocationState,
    settings: Optional[Settings] = None,
    archetypes: Optional[Mapping[str, dict]] = None,
    compound_archetypes: Optional[Mapping[str, dict]] = None,
) -> Optional[Identity]:
    """
    Derive the user's archetype.

    Returns None when nothing distinguishes the budget: the top allocation
    is zero or every service sits at its minimum. When the runner-up is
    within ``compound_threshold`` of the leader (as a fraction of the
    leader's amount) and the pair has a compound archetype, that one wins.
    Otherwise the leader's own archetype is used, or the generic default.

    Args:
        state: Current snapshot
        settings: Thresholds (uses the module settings if None)
        archetypes: Single-service table (built-in table if None)
        compound_archetypes: Pair table (built-in table if None)
    """
    settings = settings or get_settings()
    archetypes = ARCHETYPES if archetypes is None else archetypes
    compound_archetypes = COMPOUND_ARCHETYPES if compound_archetypes is None else compound_archetypes

    primary, secondary = primary_and_secondary(state)
    if primary is None or primary.amount <= 0 or not has_discretionary_spending(state):
        return None

    if secondary is not None and secondary.amount > 0:
        gap = (primary.amount - secondary.amount) / primary.amount
        if gap <= settings.compound_threshold:
            key = compound_key(primary.service_id, secondary.service_id)
            compound = compound_archetypes.get(key)
            if compound:
                return Identity(
                    id=key,
                    name=compound["name"],
                    description=compound["description"],
                    emoji=compound.get("emoji", ""),
                    is_compound=True,
                    primary_id=primary.service_id,
                    secondary_id=secondary.service_id,
                )
            logger.debug(f"No compound archetype for {key}, falling back to {primary.service_id}")

    archetype = archetypes.get(primary.service_id, DEFAULT_ARCHETYPE)
    return Identity(
        id=primary.service_id,
        name=archetype["name"],
        description=archetype["description"],
        emoji=archetype.get("emoji", ""),
        is_compound=False,
        primary_id=primary.service_id,
    )
