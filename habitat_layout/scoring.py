"""Layout fitness and qualitative audits."""

from __future__ import annotations

import math
from itertools import combinations
from typing import Dict, List, Optional, Sequence

from .adjacency import DEFAULT_MODEL, AdjacencyModel
from .geometry import clamp, planar_distance, round_half_up
from .models import (
    Finding,
    LayoutIssue,
    OptimizationReport,
    PlacedArea,
    PrivacyRating,
    ScoringSettings,
    TrafficFlowRating,
)
from .standards import MUST_BE_FAR, MUST_BE_NEAR

HIGH_TRAFFIC_AREAS = ("galley", "dining", "hygiene", "control")
PRIVATE_AREAS = ("sleep", "medical", "hygiene")


def _band(value: float, labels: Sequence[str]) -> str:
    if value >= 0.8:
        return labels[0]
    if value >= 0.6:
        return labels[1]
    if value >= 0.4:
        return labels[2]
    return labels[3]


def score_band(score: int) -> str:
    """CSS-style band the host uses to colour a 0-100 score."""
    if score >= 80:
        return "good"
    if score >= 60:
        return "fair"
    return "poor"


def _unique_by_type(areas: Sequence[PlacedArea]) -> List[PlacedArea]:
    seen: Dict[str, PlacedArea] = {}
    for area in areas:
        seen.setdefault(area.type, area)
    return list(seen.values())


def _first_of_type(areas: Sequence[PlacedArea], area_type: str) -> Optional[PlacedArea]:
    for area in areas:
        if area.type == area_type:
            return area
    return None


class LayoutScorer:
    """Adjacency-driven layout scoring.

    Every method is a pure function of the areas passed in; area types that
    are not present are skipped.
    """

    def __init__(
        self,
        model: AdjacencyModel | None = None,
        settings: ScoringSettings | None = None,
    ) -> None:
        self.model = model or DEFAULT_MODEL
        self.settings = settings or ScoringSettings()

    def adjust_for_distance(self, base_score: int, distance: float) -> float:
        radius = self.settings.reference_radius_m
        if base_score > 0:
            return base_score * max(0.0, (radius - distance) / radius)
        if base_score < 0:
            # NOTE: penalty magnitude grows with distance, unbounded past the radius
            return base_score * max(0.0, distance / radius)
        return 0.0

    def pair_score(self, area_a: PlacedArea, area_b: PlacedArea) -> float:
        found = self.model.score(area_a.type, area_b.type)
        if found is None:
            return 0.0
        base_score, _ = found
        distance = planar_distance(area_a.position, area_b.position)
        return self.adjust_for_distance(base_score, distance)

    def layout_score(self, areas: Sequence[PlacedArea]) -> int:
        if len(areas) < 2:
            return 0
        pair_scores = [self.pair_score(a, b) for a, b in combinations(areas, 2)]
        average = sum(pair_scores) / len(pair_scores)
        normalized = clamp(
            (average + self.settings.score_offset) * self.settings.score_scale, 0.0, 100.0
        )
        return round_half_up(normalized)

    def _accessibility(self, area: PlacedArea, areas: Sequence[PlacedArea]) -> float:
        distances = [
            planar_distance(area.position, other.position) for other in areas if other is not area
        ]
        mean_distance = sum(distances) / len(distances) if distances else 0.0
        return max(0.0, 1.0 - mean_distance / self.settings.accessibility_scale_m)

    def _isolation(self, area: PlacedArea, areas: Sequence[PlacedArea]) -> float:
        min_distance = math.inf
        for other in areas:
            if other is area or other.type in PRIVATE_AREAS:
                continue
            min_distance = min(min_distance, planar_distance(area.position, other.position))
        return min(1.0, min_distance / self.settings.reference_radius_m)

    def traffic_flow(self, areas: Sequence[PlacedArea]) -> TrafficFlowRating:
        areas = _unique_by_type(areas)
        flow = sum(
            self._accessibility(area, areas) for area in areas if area.type in HIGH_TRAFFIC_AREAS
        )
        average = flow / len(HIGH_TRAFFIC_AREAS)
        return _band(average, ("Excellent", "Good", "Fair", "Poor"))  # type: ignore[return-value]

    def privacy_zones(self, areas: Sequence[PlacedArea]) -> PrivacyRating:
        areas = _unique_by_type(areas)
        privacy = sum(self._isolation(area, areas) for area in areas if area.type in PRIVATE_AREAS)
        average = privacy / len(PRIVATE_AREAS)
        return _band(average, ("Excellent", "Good", "Adequate", "Inadequate"))  # type: ignore[return-value]

    def audit(self, areas: Sequence[PlacedArea]) -> List[Finding]:
        """Check must-be-near and must-be-far pairs.

        An empty list means the layout meets every rule that applies.
        """
        findings: List[Finding] = []
        radius = self.settings.reference_radius_m
        separation = self.settings.min_separation_m

        for requirement in MUST_BE_NEAR:
            first, second = requirement.areas
            area_a = _first_of_type(areas, first)
            area_b = _first_of_type(areas, second)
            if area_a is None or area_b is None:
                continue
            distance = planar_distance(area_a.position, area_b.position)
            if distance > radius:
                findings.append(
                    Finding(
                        severity="warning",
                        message=f"{first} and {second} are too far apart",
                        reason=requirement.reason,
                        recommendation="Consider moving closer together",
                    )
                )
            else:
                findings.append(
                    Finding(
                        severity="success",
                        message=f"{first} and {second} properly adjacent",
                        reason=requirement.reason,
                    )
                )

        for requirement in MUST_BE_FAR:
            first, second = requirement.areas
            area_a = _first_of_type(areas, first)
            area_b = _first_of_type(areas, second)
            if area_a is None or area_b is None:
                continue
            if planar_distance(area_a.position, area_b.position) < separation:
                findings.append(
                    Finding(
                        severity="error",
                        message=f"{first} and {second} are too close",
                        reason=requirement.reason,
                        recommendation="Increase separation distance",
                    )
                )
        return findings

    def adjacency_compliance(self, areas: Sequence[PlacedArea]) -> int:
        """Percentage of area pairs with a positive adjacency contribution."""
        pairs = list(combinations(areas, 2))
        if not pairs:
            return 100
        compliant = sum(1 for a, b in pairs if self.pair_score(a, b) > 0)
        return round_half_up(compliant / len(pairs) * 100)

    def identify_issues(self, areas: Sequence[PlacedArea]) -> List[LayoutIssue]:
        issues: List[LayoutIssue] = []
        separation = self.settings.min_separation_m
        for rule in self.model.critical_conflicts(self.settings.critical_conflict_threshold):
            area_a = _first_of_type(areas, rule.pair[0])
            area_b = _first_of_type(areas, rule.pair[1])
            if area_a is None or area_b is None:
                continue
            if planar_distance(area_a.position, area_b.position) < separation:
                name_a = area_a.template.name
                name_b = area_b.template.name
                issues.append(
                    LayoutIssue(
                        description=f"{name_a} and {name_b} are too close",
                        severity="high",
                        suggestion=(
                            f"Increase separation between {name_a} and {name_b} "
                            f"to at least {separation:g} meters"
                        ),
                    )
                )
        return issues

    def recommendations(self, areas: Sequence[PlacedArea]) -> List[Dict[str, str]]:
        recs = [
            {"issue": issue.description, "severity": issue.severity, "suggestion": issue.suggestion}
            for issue in self.identify_issues(areas)
        ]
        if not recs:
            recs.append(
                {
                    "issue": "No major layout issues identified",
                    "severity": "low",
                    "suggestion": "Current layout meets NASA habitability guidelines",
                }
            )
        return recs

    def optimization_report(self, areas: Sequence[PlacedArea]) -> OptimizationReport:
        return OptimizationReport(
            overall_score=self.layout_score(areas),
            traffic_flow=self.traffic_flow(areas),
            privacy_zones=self.privacy_zones(areas),
            adjacency_compliance=self.adjacency_compliance(areas),
            recommendations=self.recommendations(areas),
            areas=[
                {
                    "type": area.type,
                    "position": area.position.as_list(),
                    "category": area.template.category,
                }
                for area in areas
            ],
        )


DEFAULT_SCORER = LayoutScorer()
