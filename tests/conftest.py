"""Pytest configuration and fixtures."""

import pytest

from allotment import BudgetSession, engine
from allotment.catalog import default_catalog, load_catalog
from allotment.settings import Settings

BUDGET = 500_000_000_000.0

TIERS = [
    {"level": 1, "name": "One", "threshold": 0.25, "perk": "Perk 1"},
    {"level": 2, "name": "Two", "threshold": 0.50, "perk": "Perk 2"},
    {"level": 3, "name": "Three", "threshold": 0.75, "perk": "Perk 3"},
    {"level": 4, "name": "Four", "threshold": 1.00, "perk": "Perk 4"},
]


@pytest.fixture(autouse=True)
def clear_session():
    """Drop the BudgetSession singleton between tests."""
    BudgetSession._clear()
    yield
    BudgetSession._clear()


@pytest.fixture
def tiers():
    """Four evenly spaced tiers for hand-built catalogs."""
    return TIERS


@pytest.fixture
def settings():
    """Settings with built-in defaults."""
    return Settings()


@pytest.fixture
def catalog():
    """The built-in eight-service catalog."""
    return default_catalog()


@pytest.fixture
def state(catalog):
    """Fresh state over the built-in catalog with the default budget."""
    return engine.initialize(catalog, BUDGET)


@pytest.fixture
def small_catalog():
    """One service A (10..100) split into X (default 60%, floor 30%) and Y (40%, 20%)."""
    return load_catalog(
        [
            {
                "id": "A",
                "min_allocation": 10,
                "max_allocation": 100,
                "tiers": TIERS,
                "sub_services": [
                    {"id": "X", "default_share": 0.6, "min_share": 0.3},
                    {"id": "Y", "default_share": 0.4, "min_share": 0.2},
                ],
            }
        ]
    )


@pytest.fixture
def small_state(small_catalog):
    """Fresh state over small_catalog with a budget of 100."""
    return engine.initialize(small_catalog, 100)


@pytest.fixture
def three_way_catalog():
    """Service B (0..100) with P (50%, floor 10%), Q (30%, 30%), R (20%, 10%)."""
    return load_catalog(
        [
            {
                "id": "B",
                "min_allocation": 0,
                "max_allocation": 100,
                "tiers": TIERS,
                "sub_services": [
                    {"id": "P", "default_share": 0.5, "min_share": 0.1},
                    {"id": "Q", "default_share": 0.3, "min_share": 0.3},
                    {"id": "R", "default_share": 0.2, "min_share": 0.1},
                ],
            }
        ]
    )


@pytest.fixture
def check_invariants():
    """Return a function asserting every allocation invariant on a state."""

    def check(state):
        catalog = state.catalog
        total = sum(state.allocations.values())
        assert total <= state.total_budget * (1 + 1e-12)

        for service in catalog:
            amount = state.allocation(service.id)
            assert service.min_allocation <= amount <= service.max_allocation

            if not service.has_sub_services:
                continue
            subs = state.sub_allocations[service.id]
            assert sum(subs.values()) == pytest.approx(amount, rel=1e-9, abs=1e-6)
            for sub in service.sub_services:
                floor = amount * sub.min_share
                assert subs[sub.id] >= floor - max(1e-6, amount * 1e-9)

    return check
