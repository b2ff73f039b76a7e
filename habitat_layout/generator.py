"""Baseline interior layout for a mission."""

from __future__ import annotations

import math
from typing import List

from .models import AreaPlacements, HabitatSummary, MissionSummary, Position

ESSENTIAL_AREAS = ("control", "eclss", "storage", "galley", "dining")
CREW_AREAS = ("sleep", "hygiene")
MISSION_AREAS = ("medical", "work")
LONG_DURATION_AREAS = ("exercise", "recreation")
EXTENDED_DURATION_AREAS = ("greenhouse",)

RING_FACTOR = 0.7
WALL_MARGIN_M = 1.0
DEFAULT_DIAMETER_M = 8.0


def required_areas(mission: MissionSummary) -> List[str]:
    """Area types a mission needs, one entry per type."""

    areas: List[str] = [*ESSENTIAL_AREAS, *CREW_AREAS, *MISSION_AREAS]
    if mission.duration > 180:
        areas.extend(LONG_DURATION_AREAS)
    if mission.duration > 360:
        areas.extend(EXTENDED_DURATION_AREAS)
    return areas


def ring_positions(count: int, diameter: float) -> List[Position]:
    radius = (diameter / 2 - WALL_MARGIN_M) * RING_FACTOR
    if count == 0:
        return []
    step = 2 * math.pi / count
    return [
        Position(x=math.cos(i * step) * radius, y=0.0, z=math.sin(i * step) * radius)
        for i in range(count)
    ]


def default_layout(mission: MissionSummary, habitat: HabitatSummary | None = None) -> AreaPlacements:
    """Place every required area evenly around a ring inside the hull."""

    diameter = habitat.diameter if habitat is not None and habitat.diameter else DEFAULT_DIAMETER_M
    types = required_areas(mission)
    placements = AreaPlacements()
    for area_type, position in zip(types, ring_positions(len(types), diameter)):
        placements.place(area_type, position)  # type: ignore[arg-type]
    return placements
