"""
Allotment Configuration Package

Contains the static catalog and the identity tables.
"""

from allotment.config.identities import (
    ARCHETYPES,
    COMPOUND_ARCHETYPES,
    DEFAULT_ARCHETYPE,
    POLICY_TRAITS,
    STYLES,
)
from allotment.config.services import SERVICES

__all__ = [
    "SERVICES",
    "ARCHETYPES",
    "COMPOUND_ARCHETYPES",
    "DEFAULT_ARCHETYPE",
    "POLICY_TRAITS",
    "STYLES",
]
