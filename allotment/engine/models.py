"""Data models for the engine package."""

from dataclasses import dataclass, field

from allotment.catalog import Tier

# Tier status values
LOCKED = "locked"
UNLOCKED = "unlocked"
CURRENT = "current"


@dataclass(frozen=True)
class AllocationInfo:
    """Per-service view of an allocation, ready for rendering."""

    service_id: str
    amount: float
    percentage: float  # 0-1 of the service's own maximum
    current_tier: int  # 0-4
    tier_status: dict[int, str] = field(default_factory=dict)  # level -> locked/unlocked/current
    at_minimum: bool = False
    status: str = ""  # Human-readable band, e.g. "Modernization"


@dataclass(frozen=True)
class TierTransition:
    """Tiers gained or lost by one service between two snapshots."""

    service_id: str
    previous_level: int
    current_level: int
    gained: tuple[Tier, ...] = ()
    lost: tuple[Tier, ...] = ()

    @property
    def changed(self) -> bool:
        return self.previous_level != self.current_level
