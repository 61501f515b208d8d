"""
BudgetSession - Single source of truth for the live allocation state.

Usage:
    session = BudgetSession()
    session.update_service("health", 120_000_000_000)
    session.update_sub("health", "hospitals", 60_000_000_000)
    print(session.identity())

The session holds the one mutable reference in the process. Every edit runs
an engine function over the current snapshot and publishes the result.
"""

from __future__ import annotations

import logging
from typing import Callable, Mapping, Optional

from allotment import classification, engine
from allotment.catalog import Catalog, default_catalog
from allotment.settings import Settings, get_settings
from allotment.state import AllocationState
from allotment.utils.decorators import singleton

logger = logging.getLogger(__name__)


@singleton
class BudgetSession:
    """Process-wide holder of the current allocation snapshot."""

    def __init__(self, catalog: Optional[Catalog] = None, settings: Optional[Settings] = None):
        """Initialize the session with optional dependencies.

        Args:
            catalog: Catalog to allocate over (built-in catalog if None)
            settings: Settings instance (module settings if None)
        """
        self._catalog = catalog or default_catalog()
        self._settings = settings or get_settings()
        self._state = self._fresh_state()

    def _fresh_state(self) -> AllocationState:
        return engine.initialize(self._catalog, self._settings.fixed_budget, self._settings.currency_symbol)

    @property
    def state(self) -> AllocationState:
        return self._state

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def _publish(self, new_state: AllocationState) -> AllocationState:
        previous, self._state = self._state, new_state
        if new_state is previous:
            return new_state

        for service in self._catalog:
            transition = engine.tier_transition(previous, new_state, service)
            for tier in transition.gained:
                logger.info(f"Unlocked: {tier.perk} ({service.id} tier {tier.level})")
            for tier in transition.lost:
                logger.info(f"Lost: {tier.perk} ({service.id} tier {tier.level})")
        return new_state

    def _apply(self, description: str, operation: Callable[[AllocationState], AllocationState]) -> AllocationState:
        logger.debug(description)
        return self._publish(operation(self._state))

    # ------------------------------------------------------------------
    # Edits
    # ------------------------------------------------------------------

    def update_service(self, service_id: str, amount: float) -> AllocationState:
        return self._apply(
            f"Set {service_id} to {amount}",
            lambda state: engine.update_service_allocation(state, service_id, amount),
        )

    def update_sub(self, service_id: str, sub_service_id: str, amount: float) -> AllocationState:
        return self._apply(
            f"Set {service_id}.{sub_service_id} to {amount}",
            lambda state: engine.update_sub_allocation(state, service_id, sub_service_id, amount),
        )

    def set_all(self, amounts: Mapping[str, float]) -> AllocationState:
        return self._apply(
            f"Bulk set {len(amounts)} allocations",
            lambda state: engine.set_all_allocations(state, amounts),
        )

    def distribute_evenly(self) -> AllocationState:
        return self._apply("Distribute evenly", engine.distribute_evenly)

    def randomize(self, seed: Optional[int] = None) -> AllocationState:
        return self._apply(f"Randomize (seed={seed})", lambda state: engine.randomize(state, seed=seed))

    def reset_to_minimum(self) -> AllocationState:
        return self._apply("Reset to minimum", engine.reset_to_minimum)

    def set_currency_symbol(self, symbol: str) -> AllocationState:
        return self._apply(f"Currency symbol {symbol}", lambda state: engine.set_currency_symbol(state, symbol))

    def finalize(self) -> AllocationState:
        logger.info("Budget finalized")
        return self._apply("Finalize", engine.finalize)

    def reopen(self) -> AllocationState:
        return self._apply("Reopen", engine.reopen)

    def restart(self) -> AllocationState:
        """Discard the current snapshot and start over."""
        logger.info("Session restarted")
        self._state = self._fresh_state()
        return self._state

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def can_finalize(self) -> bool:
        return engine.can_finalize(self._state, settings=self._settings)

    def is_sub_at_minimum(self, service_id: str, sub_service_id: str) -> bool:
        return engine.is_sub_at_minimum(self._state, service_id, sub_service_id, settings=self._settings)

    def identity(self) -> Optional[classification.Identity]:
        return classification.identity(self._state, settings=self._settings)

    def traits(self) -> list[classification.Trait]:
        return classification.traits(self._state, settings=self._settings)

    def style(self) -> Optional[classification.Style]:
        return classification.style(self._state, settings=self._settings)

    def summary(self) -> classification.Classification:
        return classification.summarize(self._state, settings=self._settings)
