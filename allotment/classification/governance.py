"""Governance style from aggregate allocation statistics."""

from __future__ import annotations

from typing import Optional

from allotment.classification.models import Style
from allotment.config.identities import STYLES
from allotment.engine.metrics import catalog_for, is_at_minimum, sub_range_percentage, tier_level
from allotment.settings import Settings, get_settings
from allotment.state import AllocationState

TOP_TIER = 4


def _style(style_id: str) -> Style:
    entry = STYLES[style_id]
    return Style(id=style_id, name=entry["name"], emoji=entry.get("emoji", ""))


def style(state: AllocationState, settings: Optional[Settings] = None) -> Optional[Style]:
    """
    Overall style label, or None.

    Checked in order: enough services at minimum ("Focused"), enough
    services at the top tier ("Ambitious"), a large foreign-aid share of
    governance ("Internationalist").
    """
    settings = settings or get_settings()
    catalog = catalog_for(state)

    at_minimum = sum(1 for service in catalog if is_at_minimum(state, service))
    at_top_tier = sum(1 for service in catalog if tier_level(state, service) == TOP_TIER)
    aid_share = sub_range_percentage(
        state,
        settings.internationalist_service_id,
        settings.internationalist_sub_service_id,
    )

    if at_minimum >= settings.focused_min_services:
        return _style("focused")

    if at_top_tier >= settings.ambitious_min_services:
        return _style("ambitious")

    if aid_share >= settings.internationalist_share:
        return _style("internationalist")

    return None
