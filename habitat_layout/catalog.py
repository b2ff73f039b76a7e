"""Functional area catalogue and equipment reference figures."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from .models import AreaTemplate

AREA_TYPES: Tuple[str, ...] = (
    "sleep",
    "hygiene",
    "medical",
    "galley",
    "dining",
    "exercise",
    "work",
    "control",
    "recreation",
    "storage",
    "greenhouse",
    "eclss",
)

AREA_TEMPLATES: Mapping[str, AreaTemplate] = MappingProxyType(
    {
        "sleep": AreaTemplate(
            name="Sleep Quarters",
            min_area_m2=4,
            recommended_area_m2=6,
            category="crew-support",
            privacy="high",
            noise_sensitive=True,
            equipment=("sleep-station", "storage", "desk"),
        ),
        "hygiene": AreaTemplate(
            name="Hygiene Facility",
            min_area_m2=3,
            recommended_area_m2=4,
            category="crew-support",
            privacy="medium",
            noise_sensitive=False,
            equipment=("water-recycler", "shower", "sink"),
        ),
        "medical": AreaTemplate(
            name="Medical Bay",
            min_area_m2=6,
            recommended_area_m2=8,
            category="crew-support",
            privacy="medium",
            noise_sensitive=True,
            equipment=("medical-bed", "monitor", "cabinet"),
        ),
        "galley": AreaTemplate(
            name="Galley",
            min_area_m2=6,
            recommended_area_m2=8,
            category="sustenance",
            privacy="low",
            noise_sensitive=False,
            equipment=("galley-equipment", "storage", "prep-table"),
        ),
        "dining": AreaTemplate(
            name="Dining Area",
            min_area_m2=8,
            recommended_area_m2=10,
            category="sustenance",
            privacy="low",
            noise_sensitive=False,
            equipment=("table", "chairs", "storage"),
        ),
        "exercise": AreaTemplate(
            name="Exercise Area",
            min_area_m2=10,
            recommended_area_m2=12,
            category="well-being",
            privacy="low",
            noise_sensitive=False,
            equipment=("exercise-equipment", "treadmill", "weights"),
        ),
        "work": AreaTemplate(
            name="Workstation/Lab",
            min_area_m2=8,
            recommended_area_m2=10,
            category="operations",
            privacy="medium",
            noise_sensitive=True,
            equipment=("lab-equipment", "computer", "storage"),
        ),
        "control": AreaTemplate(
            name="Control Station",
            min_area_m2=6,
            recommended_area_m2=8,
            category="operations",
            privacy="medium",
            noise_sensitive=True,
            equipment=("control-consoles", "monitors", "chair"),
        ),
        "recreation": AreaTemplate(
            name="Recreation Area",
            min_area_m2=10,
            recommended_area_m2=12,
            category="well-being",
            privacy="low",
            noise_sensitive=False,
            equipment=("sofa", "entertainment", "table"),
        ),
        "storage": AreaTemplate(
            name="Storage",
            min_area_m2=6,
            recommended_area_m2=8,
            category="operations",
            privacy="low",
            noise_sensitive=False,
            equipment=("shelves", "racks", "containers"),
        ),
        "greenhouse": AreaTemplate(
            name="Food Production",
            min_area_m2=12,
            recommended_area_m2=15,
            category="sustenance",
            privacy="low",
            noise_sensitive=False,
            equipment=("plant-rack", "grow-lights", "irrigation"),
        ),
        "eclss": AreaTemplate(
            name="Life Support",
            min_area_m2=8,
            recommended_area_m2=10,
            category="operations",
            privacy="low",
            noise_sensitive=False,
            equipment=("oxygen-system", "co2-scrubber", "water-recycler"),
        ),
    }
)

EQUIPMENT_NAMES: Dict[str, str] = {
    "sleep-station": "Sleep Station",
    "exercise-equipment": "Exercise Equipment",
    "galley-equipment": "Galley Equipment",
    "lab-equipment": "Laboratory Equipment",
    "control-consoles": "Control Consoles",
    "oxygen-system": "Oxygen Generation System",
    "water-recycler": "Water Recycling System",
    "co2-scrubber": "CO2 Scrubbing System",
}

EQUIPMENT_POWER_W: Dict[str, float] = {
    "sleep-station": 50,
    "exercise-equipment": 200,
    "galley-equipment": 300,
    "lab-equipment": 150,
    "control-consoles": 100,
    "oxygen-system": 500,
    "water-recycler": 400,
    "co2-scrubber": 300,
}

EQUIPMENT_MASS_KG: Dict[str, float] = {
    "sleep-station": 80,
    "exercise-equipment": 120,
    "galley-equipment": 150,
    "lab-equipment": 200,
    "control-consoles": 100,
    "oxygen-system": 300,
    "water-recycler": 250,
    "co2-scrubber": 180,
}

DEFAULT_EQUIPMENT_POWER_W = 100.0
DEFAULT_EQUIPMENT_MASS_KG = 100.0


def area_template(area_type: str) -> AreaTemplate:
    return AREA_TEMPLATES[area_type]


def equipment_profile(equipment_type: str) -> Dict[str, object]:
    """Display name, power draw and mass estimate for one equipment item."""
    return {
        "type": equipment_type,
        "name": EQUIPMENT_NAMES.get(equipment_type, equipment_type),
        "power_w": EQUIPMENT_POWER_W.get(equipment_type, DEFAULT_EQUIPMENT_POWER_W),
        "mass_kg": EQUIPMENT_MASS_KG.get(equipment_type, DEFAULT_EQUIPMENT_MASS_KG),
    }


def area_equipment_budget(area_type: str) -> Dict[str, float]:
    """Summed power and mass of an area's default equipment."""
    template = area_template(area_type)
    power = sum(EQUIPMENT_POWER_W.get(item, DEFAULT_EQUIPMENT_POWER_W) for item in template.equipment)
    mass = sum(EQUIPMENT_MASS_KG.get(item, DEFAULT_EQUIPMENT_MASS_KG) for item in template.equipment)
    return {"power_w": power, "mass_kg": mass}
