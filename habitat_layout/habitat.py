"""Pressure-vessel geometry and the habitat summary handed to the compliance engine."""

from __future__ import annotations

import math
from typing import Callable, Dict, NamedTuple

from .compliance import net_habitable_volume
from .models import HabitatSummary
from .standards import technology

GRAVITY_M_S2 = 9.81


class StructureTemplate(NamedTuple):
    volume: Callable[[float, float], float]
    floor_area: Callable[[float, float, int], float]
    mass_factor: float


STRUCTURES: Dict[str, StructureTemplate] = {
    "cylinder": StructureTemplate(
        lambda d, l: math.pi * (d / 2) ** 2 * l,
        lambda d, l, levels: math.pi * (d / 2) ** 2 * levels,
        35,
    ),
    "sphere": StructureTemplate(
        lambda d, l: 4 / 3 * math.pi * (d / 2) ** 3,
        lambda d, l, levels: 4 * math.pi * (d / 2) ** 2 * 0.6,
        40,
    ),
    "torus": StructureTemplate(
        lambda d, l: 2 * math.pi ** 2 * (d / 2) * (l / 4) ** 2,
        lambda d, l, levels: 4 * math.pi ** 2 * (d / 2) * (l / 4) * 0.8,
        45,
    ),
    "modular": StructureTemplate(
        lambda d, l: 4 * math.pi * (d / 4) ** 2 * (l / 2),
        lambda d, l, levels: 4 * math.pi * (d / 4) ** 2 * levels,
        38,
    ),
    "horizontal": StructureTemplate(
        lambda d, l: math.pi * (d / 2) ** 2 * l,
        lambda d, l, levels: math.pi * (d / 2) ** 2 * levels,
        36,
    ),
    "vertical": StructureTemplate(
        lambda d, l: math.pi * (d / 2) ** 2 * l,
        lambda d, l, levels: math.pi * (d / 2) ** 2 * levels,
        37,
    ),
}


def artificial_gravity(diameter: float, rotation_rpm: float) -> float:
    """Spin gravity at the rim in g, capped at 1 g."""
    if rotation_rpm == 0:
        return 0.0
    radius = diameter / 2
    omega = rotation_rpm * 2 * math.pi / 60
    return min(omega * omega * radius / GRAVITY_M_S2, 1.0)


def summarize(
    structure: str = "cylinder",
    diameter: float = 8.0,
    length: float = 12.0,
    levels: int = 2,
    construction: str = "prefab",
    crew_size: int = 4,
    rotation_rpm: float = 0.0,
) -> HabitatSummary:
    """Derive volume, mass and NHV figures for a habitat shell.

    Unknown structures fall back to the cylinder template.
    """
    template = STRUCTURES.get(structure, STRUCTURES["cylinder"])
    volume = template.volume(diameter, length)
    floor_area = template.floor_area(diameter, length, levels)
    nhv = net_habitable_volume(volume, construction)
    mass = volume * template.mass_factor * technology(construction).mass_efficiency / 1000
    return HabitatSummary(
        structure=structure,
        diameter=diameter,
        length=length,
        levels=levels,
        construction=construction,
        volume=volume,
        floor_area=floor_area,
        net_habitable_volume=nhv,
        mass=mass,
        volume_per_crew=nhv / crew_size if crew_size > 0 else None,
        artificial_gravity=artificial_gravity(diameter, rotation_rpm),
        rotation_rpm=rotation_rpm,
    )
