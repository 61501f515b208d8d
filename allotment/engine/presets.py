"""
Bulk allocation presets: distribute evenly, randomize, reset.

Each preset starts every service at its minimum, spreads the discretionary
budget (total minus all minimums) and goes through set_all_allocations.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from allotment.engine.allocation import set_all_allocations
from allotment.engine.metrics import catalog_for, discretionary_budget
from allotment.state import AllocationState

logger = logging.getLogger(__name__)


def _spread(state: AllocationState, weights: np.ndarray) -> dict[str, float]:
    catalog = catalog_for(state)
    discretionary = max(0.0, discretionary_budget(state))
    total_weight = float(weights.sum())

    amounts = {}
    for service, weight in zip(catalog, weights):
        share = discretionary * float(weight) / total_weight if total_weight > 0 else 0.0
        max_addable = service.max_allocation - service.min_allocation
        amounts[service.id] = service.min_allocation + min(share, max_addable)
    return amounts


def distribute_evenly(state: AllocationState) -> AllocationState:
    """Give every service the same slice of the discretionary budget, capped at its max."""
    weights = np.ones(len(catalog_for(state)))
    return set_all_allocations(state, _spread(state, weights))


def randomize(
    state: AllocationState,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> AllocationState:
    """
    Split the discretionary budget by random weights, each service capped at its max.

    Args:
        state: Current snapshot
        seed: Seed for a fresh generator (ignored when ``rng`` is given)
        rng: Generator to draw weights from
    """
    rng = rng or np.random.default_rng(seed)
    weights = rng.random(len(catalog_for(state)))
    logger.debug(f"Randomizing allocations with weights {np.round(weights, 3).tolist()}")
    return set_all_allocations(state, _spread(state, weights))


def reset_to_minimum(state: AllocationState) -> AllocationState:
    """Put every service back at its minimum."""
    return set_all_allocations(state, {service.id: service.min_allocation for service in catalog_for(state)})
