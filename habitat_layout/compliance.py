"""Standards compliance checks for a habitat and mission pairing."""

from __future__ import annotations

import logging
import math
from typing import Dict, List, Mapping, Optional

from .geometry import round_half_up
from .models import (
    Assessment,
    ComplianceReport,
    CrewValidation,
    HabitatSummary,
    MissionConstraintCheck,
    MissionSummary,
)
from .standards import (
    DEFAULT_AREA_REQUIREMENT,
    FUNCTIONAL_AREA_REQUIREMENTS,
    LAUNCH_CONSTRAINTS,
    LIFE_SUPPORT,
    LONG_DURATION_THRESHOLD_DAYS,
    NHV_FRACTION,
    NHV_PER_CREW,
    RADIATION_SHIELDING_G_CM2,
    AreaRequirement,
    MissionEnvelope,
    mission_envelope,
    normalize_key,
    technology,
)

logger = logging.getLogger(__name__)


def net_habitable_volume(total_volume: float, construction: Optional[str]) -> float:
    """Usable volume after structure and equipment for a construction method."""
    nhv = total_volume * technology(construction).volume_efficiency * NHV_FRACTION
    return max(0.0, nhv)


def validate_crew_accommodation(
    mission_type: Optional[str], crew_size: int, duration: int
) -> CrewValidation:
    envelope = mission_envelope(mission_type)
    crew_min, crew_max = envelope.crew_size
    dur_min, dur_max = envelope.duration

    issues: List[str] = []
    if not (crew_min <= crew_size <= crew_max):
        issues.append(f"Crew size {crew_size} outside recommended range [{crew_min}-{crew_max}]")
    if not (dur_min <= duration <= dur_max):
        issues.append(
            f"Mission duration {duration} days outside recommended range [{dur_min}-{dur_max}]"
        )
    return CrewValidation(valid=not issues, issues=issues)


def _volume_assessment(habitat: HabitatSummary, mission: MissionSummary) -> tuple[Assessment, float]:
    key = "longDuration" if mission.duration > LONG_DURATION_THRESHOLD_DAYS else "shortStay"
    required = NHV_PER_CREW[key] * mission.crew_size
    actual = net_habitable_volume(habitat.volume, habitat.construction)
    ratio = actual / required if required > 0 else math.inf
    figures = f"{actual:.1f} m³ vs {required:g} m³ required"

    if ratio >= 1:
        assessment = Assessment(
            category="Volume",
            status="compliant",
            score=100,
            message=f"Net Habitable Volume exceeds requirements ({figures})",
        )
    elif ratio >= 0.8:
        assessment = Assessment(
            category="Volume",
            status="warning",
            score=round_half_up(ratio * 100),
            message=f"Net Habitable Volume marginal ({figures})",
        )
    else:
        assessment = Assessment(
            category="Volume",
            status="non-compliant",
            score=round_half_up(ratio * 100),
            message=f"Insufficient Net Habitable Volume ({figures})",
        )
    return assessment, ratio


def _mission_assessment(validation: CrewValidation) -> Assessment:
    if validation.valid:
        return Assessment(
            category="Mission",
            status="compliant",
            score=100,
            message="Mission parameters within recommended ranges",
        )
    return Assessment(
        category="Mission",
        status="warning",
        score=70,
        message="Mission parameters outside optimal ranges",
        details=list(validation.issues),
    )


def _technology_assessment(trl: int) -> Assessment:
    if trl >= 7:
        return Assessment(
            category="Technology",
            status="compliant",
            score=100,
            message=f"Construction technology at TRL {trl} - Ready for implementation",
        )
    if trl >= 5:
        return Assessment(
            category="Technology",
            status="warning",
            score=70,
            message=f"Construction technology at TRL {trl} - Requires development",
        )
    return Assessment(
        category="Technology",
        status="non-compliant",
        score=40,
        message=f"Construction technology at TRL {trl} - Not ready for mission use",
    )


def generate_compliance_report(habitat: HabitatSummary, mission: MissionSummary) -> ComplianceReport:
    """Volume, mission envelope and technology readiness assessment."""

    volume, ratio = _volume_assessment(habitat, mission)
    validation = validate_crew_accommodation(mission.destination, mission.crew_size, mission.duration)
    trl = technology(habitat.construction).trl
    assessments = (volume, _mission_assessment(validation), _technology_assessment(trl))

    recommendations: List[str] = []
    if ratio < 0.9:
        recommendations.append("Increase habitat volume to meet Net Habitable Volume requirements")
    if trl < 7:
        recommendations.append("Consider alternative construction methods with higher TRL")
    if not validation.valid:
        recommendations.append("Review mission parameters for optimal crew performance")

    overall = round_half_up(sum(a.score for a in assessments) / len(assessments))
    logger.debug(
        "Compliance for %s/%s: %s",
        mission.destination,
        habitat.construction,
        {a.category: a.status for a in assessments},
    )
    return ComplianceReport(
        mission=mission,
        habitat=habitat,
        assessments=assessments,
        overall_score=overall,
        recommendations=tuple(recommendations),
    )


def validate_mission_constraints(
    habitat: HabitatSummary, mission: MissionSummary
) -> MissionConstraintCheck:
    """Launch envelope plus crew accommodation checks for the destination."""

    issues: List[str] = []
    launch = LAUNCH_CONSTRAINTS.get(normalize_key(mission.destination))
    if launch is not None:
        vehicle = launch.launch_vehicle
        if habitat.diameter is not None and habitat.diameter > launch.fairing_diameter_m:
            issues.append(
                f"Diameter ({habitat.diameter:.1f}m) exceeds {vehicle} fairing "
                f"({launch.fairing_diameter_m}m)"
            )
        if habitat.length is not None and habitat.length > launch.fairing_length_m:
            issues.append(
                f"Length ({habitat.length:.1f}m) exceeds {vehicle} fairing ({launch.fairing_length_m}m)"
            )
        if habitat.mass is not None and habitat.mass > launch.mass_limit_t:
            issues.append(f"Mass ({habitat.mass:.1f}t) exceeds {vehicle} capacity ({launch.mass_limit_t}t)")

    issues.extend(
        validate_crew_accommodation(mission.destination, mission.crew_size, mission.duration).issues
    )
    return MissionConstraintCheck(
        valid=not issues,
        issues=issues,
        launch=launch._asdict() if launch is not None else {},
    )


def standards_status(mission: MissionSummary, construction: Optional[str] = None) -> Dict[str, str]:
    """Headline statuses for the NHV, MMPACT and NextSTEP banners."""

    validation = validate_crew_accommodation(mission.destination, mission.crew_size, mission.duration)
    trl = technology(construction or mission.construction).trl
    nextstep_ok = mission.crew_size <= 6 and mission.duration <= 360
    return {
        "nhv": "Compliant" if validation.valid else "Review Required",
        "mmpact": "Compatible" if trl >= 6 else "Tech Development",
        "nextstep": "Compliant" if nextstep_ok else "Extended Mission",
    }


def area_requirements(area_type: str) -> AreaRequirement:
    return FUNCTIONAL_AREA_REQUIREMENTS.get(area_type, DEFAULT_AREA_REQUIREMENT)


def mission_standards(mission_type: str) -> MissionEnvelope:
    return mission_envelope(mission_type)


def life_support_requirements() -> Mapping[str, Dict[str, object]]:
    return LIFE_SUPPORT


def radiation_requirement(destination: str) -> Optional[float]:
    return RADIATION_SHIELDING_G_CM2.get(normalize_key(destination))


class ComplianceEngine:
    """Thin object facade for hosts that prefer an injectable evaluator."""

    net_habitable_volume = staticmethod(net_habitable_volume)
    validate_crew_accommodation = staticmethod(validate_crew_accommodation)
    generate_compliance_report = staticmethod(generate_compliance_report)
    validate_mission_constraints = staticmethod(validate_mission_constraints)
    standards_status = staticmethod(standards_status)
    area_requirements = staticmethod(area_requirements)
    mission_standards = staticmethod(mission_standards)
    life_support_requirements = staticmethod(life_support_requirements)
    radiation_requirement = staticmethod(radiation_requirement)
