"""Data models for the classification package."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class RankedAllocation:
    """A service and its amount, as ranked for identity lookup."""

    service_id: str
    amount: float


@dataclass(frozen=True)
class Identity:
    """Archetype derived from the largest allocation(s)."""

    id: str  # Service id, or "a-b" compound key
    name: str
    description: str
    emoji: str
    is_compound: bool
    primary_id: str
    secondary_id: Optional[str] = None


@dataclass(frozen=True)
class TraitRule:
    """Activates when a sub-service's share of its parent reaches ``threshold``."""

    id: str
    service_id: str
    sub_service_id: str
    threshold: float
    name: str = ""
    description: str = ""
    emoji: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "TraitRule":
        return cls(
            id=data["id"],
            service_id=data["service_id"],
            sub_service_id=data["sub_service_id"],
            threshold=float(data["threshold"]),
            name=data.get("name", ""),
            description=data.get("description", ""),
            emoji=data.get("emoji", ""),
        )


@dataclass(frozen=True)
class Trait:
    """An active trait and how far past its threshold the share sits."""

    rule: TraitRule
    percentage: float

    @property
    def excess(self) -> float:
        return self.percentage - self.rule.threshold

    @property
    def name(self) -> str:
        return self.rule.name


@dataclass(frozen=True)
class Style:
    """Aggregate governance style label."""

    id: str
    name: str
    emoji: str = ""


@dataclass(frozen=True)
class Classification:
    """Everything the result screen shows about a budget."""

    identity: Optional[Identity]
    traits: tuple[Trait, ...] = field(default_factory=tuple)
    style: Optional[Style] = None
