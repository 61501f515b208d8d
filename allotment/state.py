"""Immutable allocation snapshot."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping, Optional

if TYPE_CHECKING:
    from allotment.catalog import Catalog


def _freeze(amounts: Mapping[str, float]) -> Mapping[str, float]:
    return MappingProxyType({key: float(value) for key, value in amounts.items()})


@dataclass(frozen=True)
class AllocationState:
    """
    Amounts assigned to every service and sub-service at one point in time.

    Instances are never mutated; engine operations return new snapshots.
    The mappings are read-only views over private copies. ``catalog`` is the
    registry the snapshot was built from; it does not take part in equality.
    """

    total_budget: float
    currency_symbol: str = "$"
    allocations: Mapping[str, float] = field(default_factory=dict)
    sub_allocations: Mapping[str, Mapping[str, float]] = field(default_factory=dict)
    is_finalized: bool = False
    catalog: Optional["Catalog"] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, "allocations", _freeze(self.allocations))
        object.__setattr__(
            self,
            "sub_allocations",
            MappingProxyType({sid: _freeze(subs) for sid, subs in self.sub_allocations.items()}),
        )

    def allocation(self, service_id: str) -> float:
        """Current amount for a service (0 if unknown)."""
        return self.allocations.get(service_id, 0.0)

    def sub_allocation(self, service_id: str, sub_service_id: str) -> float:
        """Current amount for a sub-service (0 if unknown)."""
        return self.sub_allocations.get(service_id, {}).get(sub_service_id, 0.0)

    def replace(self, **changes) -> "AllocationState":
        """Return a copy with the given fields replaced."""
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> dict:
        """Convert to plain dictionaries."""
        return {
            "total_budget": self.total_budget,
            "currency_symbol": self.currency_symbol,
            "allocations": dict(self.allocations),
            "sub_allocations": {sid: dict(subs) for sid, subs in self.sub_allocations.items()},
            "is_finalized": self.is_finalized,
        }
