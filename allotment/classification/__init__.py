"""Classification package: identity, traits and style of a budget.

All functions are pure reads over an allocation snapshot.
"""

from typing import Optional

from allotment.classification.archetypes import compound_key, identity, primary_and_secondary, ranked_allocations
from allotment.classification.governance import style
from allotment.classification.models import (
    Classification,
    Identity,
    RankedAllocation,
    Style,
    Trait,
    TraitRule,
)
from allotment.classification.policy_traits import default_trait_rules, traits
from allotment.settings import Settings
from allotment.state import AllocationState


def summarize(state: AllocationState, settings: Optional[Settings] = None) -> Classification:
    """Identity, traits and style in one record."""
    return Classification(
        identity=identity(state, settings=settings),
        traits=tuple(traits(state, settings=settings)),
        style=style(state, settings=settings),
    )


__all__ = [
    "Classification",
    "Identity",
    "RankedAllocation",
    "Style",
    "Trait",
    "TraitRule",
    "compound_key",
    "default_trait_rules",
    "identity",
    "primary_and_secondary",
    "ranked_allocations",
    "style",
    "summarize",
    "traits",
]
