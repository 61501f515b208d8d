"""Policy traits from sub-service shares."""

from __future__ import annotations

from typing import Iterable, Optional

from allotment.classification.models import Trait, TraitRule
from allotment.config.identities import POLICY_TRAITS
from allotment.engine.metrics import sub_range_percentage
from allotment.settings import Settings, get_settings
from allotment.state import AllocationState


def default_trait_rules() -> list[TraitRule]:
    """Trait rules from the built-in table, in registration order."""
    return [TraitRule.from_dict(item) for item in POLICY_TRAITS]


def traits(
    state: AllocationState,
    rules: Optional[Iterable[TraitRule]] = None,
    settings: Optional[Settings] = None,
) -> list[Trait]:
    """
    Active traits, most notable first.

    A rule is active when its parent service has a positive allocation and
    the sub-service share reaches the rule's threshold. Active traits are
    ranked by how far they exceed their threshold (ties keep registration
    order) and cut to ``max_traits``.
    """
    settings = settings or get_settings()
    rules = default_trait_rules() if rules is None else rules

    active = []
    for rule in rules:
        if state.allocation(rule.service_id) <= 0:
            continue
        percentage = sub_range_percentage(state, rule.service_id, rule.sub_service_id)
        if percentage >= rule.threshold:
            active.append(Trait(rule=rule, percentage=percentage))

    active.sort(key=lambda trait: trait.excess, reverse=True)
    return active[: settings.max_traits]
