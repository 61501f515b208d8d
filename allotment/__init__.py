"""
Allotment - Hierarchical budget allocation simulator.

Usage:
    from allotment import BudgetSession, engine, classification

    # Work with the live session
    session = BudgetSession()
    session.update_service("education", 100_000_000_000)
    session.update_sub("education", "research", 40_000_000_000)
    print(session.identity(), session.traits(), session.style())

    # Or with pure snapshots
    state = engine.initialize(load_catalog(), 500_000_000_000)
    state = engine.update_service_allocation(state, "health", 90_000_000_000)
"""

from allotment import classification, engine
from allotment.catalog import Catalog, CatalogError, Service, SubService, Tier, default_catalog, load_catalog
from allotment.session import BudgetSession
from allotment.settings import Settings, get_settings
from allotment.state import AllocationState

__all__ = [
    "AllocationState",
    "BudgetSession",
    "Catalog",
    "CatalogError",
    "Service",
    "SubService",
    "Tier",
    "Settings",
    "classification",
    "default_catalog",
    "engine",
    "get_settings",
    "load_catalog",
]
