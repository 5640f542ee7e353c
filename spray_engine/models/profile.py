"""Spray type profiles (wind thresholds per chemical class)."""
from attrs import frozen
from typing import Dict, List, Optional

from spray_engine.config import SPRAY_TYPE_WIND_LIMITS, DEFAULT_SPRAY_TYPE


@frozen
class SprayTypeProfile:
    """Wind thresholds (mph) for one class of agrochemical."""

    name: str
    perfect_max_mph: float  # upper bound for ideal conditions
    risky_max_mph: float  # upper bound for marginal conditions

    def to_dict(self) -> dict:
        """Convert to serializable dictionary."""
        return {
            "name": self.name,
            "perfectMax": self.perfect_max_mph,
            "riskyMax": self.risky_max_mph,
        }


SPRAY_TYPE_PROFILES: Dict[str, SprayTypeProfile] = {
    name: SprayTypeProfile(name=name, perfect_max_mph=perfect, risky_max_mph=risky)
    for name, (perfect, risky) in SPRAY_TYPE_WIND_LIMITS.items()
}


def resolve_spray_profile(spray_type: Optional[str]) -> SprayTypeProfile:
    """
    Look up the profile for a spray type label.

    Unknown or empty labels fall back to the herbicide profile.
    """
    key = (spray_type or "").strip().lower()
    return SPRAY_TYPE_PROFILES.get(key, SPRAY_TYPE_PROFILES[DEFAULT_SPRAY_TYPE])


def list_spray_profiles() -> List[SprayTypeProfile]:
    """Return all built-in profiles in table order."""
    return list(SPRAY_TYPE_PROFILES.values())
