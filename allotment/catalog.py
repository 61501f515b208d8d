"""
Catalog - Validated, indexed registry of services and sub-services.

Usage:
    catalog = load_catalog()
    health = catalog.get("health")
    hospitals = catalog.sub_service("health", "hospitals")

The catalog is read-only. Every static invariant is checked when it is
built, so the engine can rely on it without re-validating on each edit.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Optional

from allotment.config.services import SERVICES

# Tolerance for the sum of sub-service floors
_SHARE_EPSILON = 1e-9


class CatalogError(ValueError):
    """Raised when static catalog data breaks one of its invariants."""

    def __init__(self, message: str, service_id: Optional[str] = None):
        self.service_id = service_id
        if service_id:
            message = f"{service_id}: {message}"
        super().__init__(message)


@dataclass(frozen=True)
class Tier:
    """An unlockable milestone reached at a fraction of the service maximum."""

    level: int  # 1..4
    threshold: float  # Fraction of max_allocation
    name: str = ""
    perk: str = ""
    benefit: str = ""


@dataclass(frozen=True)
class SubService:
    """A child category sharing its parent's allocation."""

    id: str
    default_share: float
    min_share: float
    name: str = ""

    def __post_init__(self):
        if not 0 <= self.min_share <= self.default_share <= 1:
            raise CatalogError(
                f"sub-service {self.id!r} needs 0 <= min_share <= default_share <= 1, "
                f"got min={self.min_share}, default={self.default_share}"
            )


@dataclass(frozen=True)
class Service:
    """A top-level budget category with its own bounds and tier ladder."""

    id: str
    min_allocation: float
    max_allocation: float
    tiers: tuple[Tier, ...] = ()
    sub_services: tuple[SubService, ...] = ()
    name: str = ""
    description: str = ""
    _sub_index: dict[str, SubService] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self):
        self._validate_bounds()
        self._validate_tiers()
        self._validate_sub_services()
        object.__setattr__(self, "_sub_index", {sub.id: sub for sub in self.sub_services})

    def _validate_bounds(self) -> None:
        if not 0 <= self.min_allocation <= self.max_allocation:
            raise CatalogError(
                f"needs 0 <= min_allocation <= max_allocation, "
                f"got min={self.min_allocation}, max={self.max_allocation}",
                self.id,
            )

    def _validate_tiers(self) -> None:
        for previous, current in zip(self.tiers, self.tiers[1:]):
            if current.threshold <= previous.threshold:
                raise CatalogError("tier thresholds must be strictly increasing", self.id)

    def _validate_sub_services(self) -> None:
        seen: set[str] = set()
        for sub in self.sub_services:
            if sub.id in seen:
                raise CatalogError(f"duplicate sub-service id {sub.id!r}", self.id)
            seen.add(sub.id)

        floor_total = sum(sub.min_share for sub in self.sub_services)
        if floor_total > 1 + _SHARE_EPSILON:
            raise CatalogError(f"sub-service min shares sum to {floor_total:.4f} (> 1)", self.id)

    @property
    def has_sub_services(self) -> bool:
        return bool(self.sub_services)

    def sub_service(self, sub_service_id: str) -> Optional[SubService]:
        """Look up a sub-service by id, or None."""
        return self._sub_index.get(sub_service_id)

    def tier(self, level: int) -> Optional[Tier]:
        for tier in self.tiers:
            if tier.level == level:
                return tier
        return None


class Catalog:
    """Ordered registry of services with O(1) lookup by id."""

    def __init__(self, services: Iterable[Service]):
        self._services: tuple[Service, ...] = tuple(services)
        self._index: dict[str, Service] = {}
        for service in self._services:
            if service.id in self._index:
                raise CatalogError("duplicate service id", service.id)
            self._index[service.id] = service

    def __iter__(self) -> Iterator[Service]:
        return iter(self._services)

    def __len__(self) -> int:
        return len(self._services)

    def __contains__(self, service_id: object) -> bool:
        return service_id in self._index

    def __repr__(self) -> str:
        return f"Catalog({', '.join(self.service_ids)})"

    @property
    def service_ids(self) -> tuple[str, ...]:
        return tuple(service.id for service in self._services)

    def get(self, service_id: str) -> Optional[Service]:
        """Look up a service by id, or None."""
        return self._index.get(service_id)

    def sub_service(self, service_id: str, sub_service_id: str) -> Optional[SubService]:
        """Look up a sub-service by parent and child id, or None."""
        service = self._index.get(service_id)
        if service is None:
            return None
        return service.sub_service(sub_service_id)

    @property
    def minimum_required(self) -> float:
        """Sum of every service's minimum allocation."""
        return sum(service.min_allocation for service in self._services)


def _build_service(data: dict[str, Any]) -> Service:
    return Service(
        id=data["id"],
        name=data.get("name", ""),
        description=data.get("description", ""),
        min_allocation=float(data["min_allocation"]),
        max_allocation=float(data["max_allocation"]),
        tiers=tuple(
            Tier(
                level=int(tier["level"]),
                threshold=float(tier["threshold"]),
                name=tier.get("name", ""),
                perk=tier.get("perk", ""),
                benefit=tier.get("benefit", ""),
            )
            for tier in data.get("tiers", [])
        ),
        sub_services=tuple(
            SubService(
                id=sub["id"],
                name=sub.get("name", ""),
                default_share=float(sub["default_share"]),
                min_share=float(sub["min_share"]),
            )
            for sub in data.get("sub_services", [])
        ),
    )


def load_catalog(data: Optional[list[dict[str, Any]]] = None) -> Catalog:
    """
    Build a validated catalog from plain service dicts.

    Args:
        data: Service definitions shaped like allotment.config.SERVICES
              (uses the built-in catalog if None)

    Returns:
        Catalog instance

    Raises:
        CatalogError: if any static invariant is broken
    """
    return Catalog(_build_service(item) for item in (SERVICES if data is None else data))


@functools.lru_cache(maxsize=None)
def default_catalog() -> Catalog:
    """Return the built-in catalog, loaded once per process."""
    return load_catalog()
