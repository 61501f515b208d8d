"""Tests for allocation edits.

These tests verify the engine operations:
1. Initialization at minimums
2. Service updates clamped to band and budget
3. Sub-service updates with floor-aware sibling rebalancing
4. Bulk replacement with proportional scale-down
"""

import math

import numpy as np
import pytest

from allotment import AllocationState, engine
from allotment.catalog import load_catalog

B = 1_000_000_000


class TestInitialize:
    """Tests for the starting state."""

    def test_every_service_at_minimum(self, catalog, state):
        for service in catalog:
            assert state.allocation(service.id) == service.min_allocation

    def test_sub_allocations_at_default_shares(self, catalog, state):
        health = catalog.get("health")
        for sub in health.sub_services:
            assert state.sub_allocation("health", sub.id) == pytest.approx(
                health.min_allocation * sub.default_share
            )

    def test_not_finalized(self, state):
        assert state.is_finalized is False
        assert state.currency_symbol == "$"

    def test_remaining_is_discretionary(self, state):
        assert engine.remaining(state) == pytest.approx(170 * B)
        assert engine.discretionary_budget(state) == pytest.approx(170 * B)

    def test_budget_below_minimums_raises(self, catalog):
        with pytest.raises(ValueError, match="cannot cover"):
            engine.initialize(catalog, 300 * B)

    def test_initial_state_is_valid(self, state, check_invariants):
        check_invariants(state)


class TestUpdateServiceAllocation:
    """Tests for update_service_allocation."""

    def test_clamps_to_max(self, small_state):
        state = engine.update_service_allocation(small_state, "A", 1000)
        assert state.allocation("A") == 100

    def test_clamps_to_min(self, small_state):
        state = engine.update_service_allocation(small_state, "A", 1)
        assert state.allocation("A") == 10

    def test_sub_allocations_follow_parent(self, small_state):
        state = engine.update_service_allocation(small_state, "A", 50)
        assert state.sub_allocation("A", "X") == pytest.approx(30)
        assert state.sub_allocation("A", "Y") == pytest.approx(20)

    def test_clamps_to_remaining_budget(self, state):
        state = engine.update_service_allocation(state, "social", 275 * B)
        # 170B discretionary plus social's own 68.75B minimum
        assert state.allocation("social") == pytest.approx(238.75 * B)
        assert engine.remaining(state) == pytest.approx(0, abs=1e-3)

    def test_headroom_counts_own_allocation(self, state):
        state = engine.update_service_allocation(state, "social", 238.75 * B)
        state = engine.update_service_allocation(state, "social", 200 * B)
        state = engine.update_service_allocation(state, "health", 100 * B)
        assert state.allocation("social") == pytest.approx(200 * B)
        assert state.allocation("health") == pytest.approx(95 * B)

    def test_keeps_user_emphasis_on_resize(self, state):
        state = engine.update_service_allocation(state, "education", 100 * B)
        state = engine.update_sub_allocation(state, "education", "research", 40 * B)
        before = {sub: state.sub_allocation("education", sub) / 100 for sub in state.sub_allocations["education"]}

        state = engine.update_service_allocation(state, "education", 150 * B)

        for sub, share in before.items():
            assert state.sub_allocation("education", sub) == pytest.approx(share * 150, rel=1e-9)

    def test_unknown_service_is_noop(self, state):
        assert engine.update_service_allocation(state, "space-program", 10 * B) is state

    def test_nan_is_noop(self, state):
        assert engine.update_service_allocation(state, "health", math.nan) is state

    def test_infinity_is_clamped(self, state):
        up = engine.update_service_allocation(state, "debt", math.inf)
        down = engine.update_service_allocation(up, "debt", -math.inf)
        assert up.allocation("debt") == 125 * B
        assert down.allocation("debt") == 50 * B

    def test_input_state_unchanged(self, state):
        engine.update_service_allocation(state, "health", 100 * B)
        assert state.allocation("health") == 56.25 * B

    def test_edit_clears_finalized(self, state):
        state = engine.finalize(state)
        state = engine.update_service_allocation(state, "health", 100 * B)
        assert state.is_finalized is False

    def test_invariants_hold_after_many_edits(self, state, check_invariants):
        for service_id, amount in [
            ("health", 200 * B),
            ("social", 300 * B),
            ("debt", 0),
            ("education", 150 * B),
            ("health", 60 * B),
            ("infrastructure", 140 * B),
        ]:
            state = engine.update_service_allocation(state, service_id, amount)
            check_invariants(state)


class TestUpdateSubAllocation:
    """Tests for update_sub_allocation."""

    def test_clamps_to_own_floor(self, small_state):
        state = engine.update_service_allocation(small_state, "A", 50)
        state = engine.update_sub_allocation(state, "A", "X", 5)
        assert state.sub_allocation("A", "X") == pytest.approx(15)
        assert state.sub_allocation("A", "Y") == pytest.approx(35)

    def test_clamps_to_sibling_floors(self, small_state):
        state = engine.update_service_allocation(small_state, "A", 50)
        state = engine.update_sub_allocation(state, "A", "X", 100)
        assert state.sub_allocation("A", "X") == pytest.approx(40)
        assert state.sub_allocation("A", "Y") == pytest.approx(10)

    def test_sibling_pinned_at_floor(self, three_way_catalog):
        state = engine.initialize(three_way_catalog, 100)
        state = engine.update_service_allocation(state, "B", 100)
        assert state.sub_allocation("B", "P") == pytest.approx(50)
        assert state.sub_allocation("B", "Q") == pytest.approx(30)
        assert state.sub_allocation("B", "R") == pytest.approx(20)

        state = engine.update_sub_allocation(state, "B", "P", 70)

        # Naive split would leave Q at 24, under its 30 floor
        assert state.sub_allocation("B", "P") == pytest.approx(60)
        assert state.sub_allocation("B", "Q") == pytest.approx(30)
        assert state.sub_allocation("B", "R") == pytest.approx(10)

    def test_zero_siblings_use_default_shares(self, three_way_catalog):
        state = AllocationState(
            total_budget=100,
            allocations={"B": 100},
            sub_allocations={"B": {"P": 100, "Q": 0, "R": 0}},
            catalog=three_way_catalog,
        )

        state = engine.update_sub_allocation(state, "B", "P", 50)

        assert state.sub_allocation("B", "P") == pytest.approx(50)
        assert state.sub_allocation("B", "Q") == pytest.approx(30)
        assert state.sub_allocation("B", "R") == pytest.approx(20)

    def test_only_child_holds_parent_amount(self, tiers):
        catalog = load_catalog(
            [
                {
                    "id": "solo",
                    "min_allocation": 10,
                    "max_allocation": 100,
                    "tiers": tiers,
                    "sub_services": [{"id": "Z", "default_share": 1.0, "min_share": 0.5}],
                }
            ]
        )
        state = engine.initialize(catalog, 100)
        state = engine.update_service_allocation(state, "solo", 80)

        state = engine.update_sub_allocation(state, "solo", "Z", 5)

        assert state.sub_allocation("solo", "Z") == pytest.approx(80)

    def test_parent_allocation_unchanged(self, state):
        before = state.allocation("health")
        state = engine.update_sub_allocation(state, "health", "hospitals", 40 * B)
        assert state.allocation("health") == before

    def test_sum_matches_parent(self, state, catalog, check_invariants):
        state = engine.update_service_allocation(state, "infrastructure", 120 * B)
        for sub in catalog.get("infrastructure").sub_services:
            state = engine.update_sub_allocation(state, "infrastructure", sub.id, 80 * B)
            check_invariants(state)

    def test_unknown_sub_service_is_noop(self, state):
        assert engine.update_sub_allocation(state, "health", "dentistry", 1 * B) is state

    def test_unknown_service_is_noop(self, state):
        assert engine.update_sub_allocation(state, "nope", "hospitals", 1 * B) is state

    def test_nan_is_noop(self, state):
        assert engine.update_sub_allocation(state, "health", "hospitals", math.nan) is state

    def test_other_services_untouched(self, state):
        state = engine.update_sub_allocation(state, "health", "hospitals", 30 * B)
        assert state.sub_allocation("education", "schools") == pytest.approx(37.5 * B * 0.35)


class TestSetAllAllocations:
    """Tests for bulk replacement."""

    def test_scales_overspend_above_minimums(self, catalog, state, check_invariants):
        amounts = {service.id: service.max_allocation for service in catalog}

        state = engine.set_all_allocations(state, amounts)

        factor = 170 / 915
        assert engine.allocated_total(state) == pytest.approx(500 * B, rel=1e-9)
        assert state.allocation("health") == pytest.approx((56.25 + 168.75 * factor) * B, rel=1e-9)
        assert state.allocation("debt") == pytest.approx((50 + 75 * factor) * B, rel=1e-9)
        check_invariants(state)

    def test_within_budget_kept_as_requested(self, state):
        state = engine.set_all_allocations(state, {"health": 100 * B, "education": 80 * B})
        assert state.allocation("health") == 100 * B
        assert state.allocation("education") == 80 * B

    def test_unmentioned_services_keep_amount(self, state):
        state = engine.update_service_allocation(state, "defense", 60 * B)
        state = engine.set_all_allocations(state, {"health": 100 * B})
        assert state.allocation("defense") == 60 * B

    def test_amounts_clamped_to_band(self, state):
        state = engine.set_all_allocations(state, {"debt": 1 * B, "governance": 999 * B})
        assert state.allocation("debt") == 50 * B
        assert state.allocation("governance") == 110 * B

    def test_unknown_and_nan_ignored(self, state):
        result = engine.set_all_allocations(state, {"nope": 10 * B, "health": math.nan})
        assert dict(result.allocations) == dict(state.allocations)

    def test_sub_allocations_reset_to_defaults(self, state):
        state = engine.update_sub_allocation(state, "health", "hospitals", 30 * B)
        state = engine.set_all_allocations(state, {"health": 100 * B})
        assert state.sub_allocation("health", "hospitals") == pytest.approx(40 * B)


class TestFinalize:
    """Tests for the finalized flag and currency symbol."""

    def test_finalize_and_reopen(self, state):
        finalized = engine.finalize(state)
        assert finalized.is_finalized is True
        assert engine.reopen(finalized).is_finalized is False

    def test_finalize_keeps_amounts(self, state):
        assert dict(engine.finalize(state).allocations) == dict(state.allocations)

    def test_currency_symbol(self, state):
        state = engine.set_currency_symbol(state, "€")
        assert state.currency_symbol == "€"
        assert state.allocation("health") == 56.25 * B


# =============================================================================
# Properties over edit sequences
# =============================================================================


def _random_edits(state, rng, steps):
    """Apply a seeded mix of service and sub-service edits, yielding each state."""
    catalog = state.catalog
    services = list(catalog)
    amounts = [-math.inf, math.inf, -50 * B, 0.0, 1e15]

    for _ in range(steps):
        service = services[rng.integers(len(services))]
        if rng.random() < 0.2:
            amount = amounts[rng.integers(len(amounts))]
        else:
            amount = float(rng.uniform(-0.2, 1.3) * service.max_allocation)

        if service.has_sub_services and rng.random() < 0.5:
            sub = service.sub_services[rng.integers(len(service.sub_services))]
            state = engine.update_sub_allocation(state, service.id, sub.id, amount * 0.6)
        else:
            state = engine.update_service_allocation(state, service.id, amount)
        yield state


class TestEditSequences:
    """Invariants over long, seeded sequences of mixed edits."""

    @pytest.mark.parametrize("seed", [0, 7, 2024])
    def test_invariants_hold(self, state, seed, check_invariants):
        rng = np.random.default_rng(seed)
        for current in _random_edits(state, rng, 400):
            check_invariants(current)

    def test_sums_stay_anchored(self, catalog, state):
        rng = np.random.default_rng(99)
        for current in _random_edits(state, rng, 3000):
            pass

        total = sum(current.allocations.values())
        assert total - current.total_budget <= 8 * math.ulp(current.total_budget)
        for service in catalog:
            parent = current.allocation(service.id)
            subs = current.sub_allocations[service.id]
            assert abs(sum(subs.values()) - parent) <= 2 * math.ulp(parent)

    def test_update_to_current_amount_is_idempotent(self, catalog, state):
        rng = np.random.default_rng(5)
        for current in _random_edits(state, rng, 50):
            pass

        for service in catalog:
            again = engine.update_service_allocation(current, service.id, current.allocation(service.id))

            assert dict(again.allocations) == pytest.approx(dict(current.allocations), rel=1e-12)
            assert again.is_finalized == current.is_finalized
            for sub in service.sub_services:
                assert again.sub_allocation(service.id, sub.id) == pytest.approx(
                    current.sub_allocation(service.id, sub.id), rel=1e-12
                )


class TestTierMonotonic:
    """tier_level never drops as an allocation grows."""

    @pytest.mark.parametrize("service_id", ["debt", "health", "social", "governance"])
    def test_sweep_across_thresholds(self, catalog, service_id):
        service = catalog.get(service_id)
        state = engine.initialize(catalog, 2000 * B)
        previous = -1
        seen = set()

        for amount in np.linspace(service.min_allocation, service.max_allocation, 201):
            state = engine.update_service_allocation(state, service_id, float(amount))
            level = engine.tier_level(state, service)
            assert level >= previous
            previous = level
            seen.add(level)

        assert previous == 4
        assert seen >= {2, 3, 4}

    @pytest.mark.parametrize("amount,expected", [(24.99, 0), (25, 1), (50, 2), (74.99, 2), (75, 3), (100, 4)])
    def test_each_threshold(self, tiers, amount, expected):
        catalog = load_catalog([{"id": "T", "min_allocation": 0, "max_allocation": 100, "tiers": tiers}])
        state = engine.update_service_allocation(engine.initialize(catalog, 100), "T", amount)
        assert engine.tier_level(state, catalog.get("T")) == expected
