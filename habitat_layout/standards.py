"""Crewed habitat standards used by the scorer and compliance engine.

Figures follow the Moon to Mars architecture and NextSTEP habitability
guidelines as summarised for early design trades:

* net habitable volume per crew member (Stromgren et al.)
* functional area minimum / recommended floor areas
* mission envelopes for crew size and duration
* construction technology readiness (MMPACT roadmap)
* life-support targets (ECLSS)
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, NamedTuple, Optional, Tuple

NHV_FRACTION = 0.8

NHV_PER_CREW: Mapping[str, float] = MappingProxyType(
    {
        "shortStay": 20.0,
        "longDuration": 25.0,
    }
)
LONG_DURATION_THRESHOLD_DAYS = 180


class AreaRequirement(NamedTuple):
    min_area: float
    recommended: float


FUNCTIONAL_AREA_REQUIREMENTS: Mapping[str, AreaRequirement] = MappingProxyType(
    {
        "sleep": AreaRequirement(4, 6),
        "hygiene": AreaRequirement(3, 4),
        "medical": AreaRequirement(6, 8),
        "galley": AreaRequirement(6, 8),
        "dining": AreaRequirement(8, 10),
        "exercise": AreaRequirement(10, 12),
        "work": AreaRequirement(8, 10),
        "control": AreaRequirement(6, 8),
        "recreation": AreaRequirement(10, 12),
        "storage": AreaRequirement(6, 8),
        "greenhouse": AreaRequirement(12, 15),
        "eclss": AreaRequirement(8, 10),
    }
)
DEFAULT_AREA_REQUIREMENT = AreaRequirement(4, 6)


class AdjacencyRequirement(NamedTuple):
    areas: Tuple[str, str]
    reason: str


MUST_BE_NEAR: Tuple[AdjacencyRequirement, ...] = (
    AdjacencyRequirement(("galley", "dining"), "Meal preparation and consumption workflow"),
    AdjacencyRequirement(("sleep", "hygiene"), "Morning and evening routines"),
    AdjacencyRequirement(("medical", "sleep"), "Emergency access"),
    AdjacencyRequirement(("work", "control"), "Operational efficiency"),
)

MUST_BE_FAR: Tuple[AdjacencyRequirement, ...] = (
    AdjacencyRequirement(("sleep", "exercise"), "Noise disturbance"),
    AdjacencyRequirement(("sleep", "work"), "Work-life separation"),
    AdjacencyRequirement(("galley", "hygiene"), "Hygiene concerns"),
    AdjacencyRequirement(("dining", "hygiene"), "Hygiene concerns"),
)


class MissionEnvelope(NamedTuple):
    name: str
    duration: Tuple[int, int]
    crew_size: Tuple[int, int]
    eva_frequency: str
    construction: Tuple[str, ...]
    reference: str


class LaunchConstraints(NamedTuple):
    launch_vehicle: str
    fairing_diameter_m: float
    fairing_length_m: float
    mass_limit_t: float
    deployment: str


MISSION_ENVELOPES: Mapping[str, MissionEnvelope] = MappingProxyType(
    {
        "lunar-surface": MissionEnvelope(
            "Lunar Surface Habitat", (30, 180), (2, 6), "high",
            ("prefab", "inflatable", "isl"), "Artemis Base Camp Requirements",
        ),
        "mars-transit": MissionEnvelope(
            "Mars Transit Habitat", (180, 360), (4, 6), "none",
            ("prefab", "inflatable"), "Deep Space Transport Design",
        ),
        "mars-surface": MissionEnvelope(
            "Mars Surface Habitat", (500, 1000), (4, 12), "medium",
            ("isl", "hybrid", "prefab"), "Mars Surface Habitat Standards",
        ),
        "gateway": MissionEnvelope(
            "Lunar Gateway Module", (30, 90), (2, 4), "low",
            ("prefab",), "Lunar Gateway Specifications",
        ),
    }
)
GENERIC_ENVELOPE = MissionEnvelope(
    "Generic Habitat", (30, 180), (2, 6), "medium", (), "Generic crew accommodation envelope"
)

LAUNCH_CONSTRAINTS: Mapping[str, LaunchConstraints] = MappingProxyType(
    {
        "lunar-surface": LaunchConstraints("SLS Block 1B", 8.4, 19.1, 42, "Single launch"),
        "mars-transit": LaunchConstraints("Starship", 9.0, 18.0, 100, "Orbital assembly"),
        "mars-surface": LaunchConstraints("Starship", 9.0, 18.0, 100, "Pre-deployment"),
        "gateway": LaunchConstraints("Falcon Heavy", 5.2, 13.2, 16, "Commercial launch"),
    }
)

RADIATION_SHIELDING_G_CM2: Mapping[str, float] = MappingProxyType(
    {
        "lunar-surface": 20,
        "mars-transit": 30,
        "mars-surface": 25,
        "gateway": 15,
    }
)


class Technology(NamedTuple):
    name: str
    trl: int
    mass_efficiency: float
    volume_efficiency: float


TECHNOLOGY_READINESS: Mapping[str, Technology] = MappingProxyType(
    {
        "prefab": Technology("Pre-fabricated", 9, 0.8, 0.75),
        "inflatable": Technology("Inflatable Softgoods", 7, 0.6, 0.9),
        "isl": Technology("In-Situ Manufacturing", 4, 0.3, 0.95),
        "hybrid": Technology("Hybrid Approach", 5, 0.7, 0.85),
    }
)
# unknown construction methods are treated as an unproven rigid shell
UNKNOWN_TECHNOLOGY = Technology("Unrecognised", 1, 0.5, 0.75)

LIFE_SUPPORT: Mapping[str, Dict[str, object]] = MappingProxyType(
    {
        "water_recycling": {"minimum": 0.85, "target": 0.98, "reference": "ECLSS Standards"},
        "oxygen_generation": {"capacity": 0.83, "backup": 2, "reference": "OGS Requirements"},
        "co2_removal": {"rate": 1.0, "reference": "CDRA Specifications"},
        "food_production": {"required": 2.5, "supplemental": 1.0, "reference": "Food System Planning"},
    }
)


def normalize_key(name: Optional[str]) -> str:
    """``lunarSurface``/``lunar_surface``/``Lunar Surface`` -> ``lunar-surface``."""
    if not name:
        return ""
    out = []
    prev = ""
    for ch in str(name).strip():
        if ch in " _":
            out.append("-")
        else:
            if ch.isupper() and prev.islower():
                out.append("-")
            out.append(ch.lower())
        prev = ch
    return "".join(out)


def mission_envelope(mission_type: Optional[str]) -> MissionEnvelope:
    return MISSION_ENVELOPES.get(normalize_key(mission_type), GENERIC_ENVELOPE)


def technology(construction: Optional[str]) -> Technology:
    return TECHNOLOGY_READINESS.get(normalize_key(construction), UNKNOWN_TECHNOLOGY)
