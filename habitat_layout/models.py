"""Core data models for habitat interior layouts and compliance reports."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, Iterable, List, Literal, Optional, Tuple

from pydantic import BaseModel, Field, validator

AreaType = Literal[
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
]

AreaCategory = Literal["crew-support", "sustenance", "well-being", "operations"]
PrivacyLevel = Literal["low", "medium", "high"]
Severity = Literal["success", "warning", "error"]
ComplianceStatus = Literal["compliant", "warning", "non-compliant"]
TrafficFlowRating = Literal["Excellent", "Good", "Fair", "Poor"]
PrivacyRating = Literal["Excellent", "Good", "Adequate", "Inadequate"]
SnapshotSource = Literal["optimize", "alternative"]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AreaTemplate(BaseModel):
    """Static attributes shared by every area of one type."""

    name: str
    min_area_m2: float = Field(..., gt=0)
    recommended_area_m2: float = Field(..., gt=0)
    category: AreaCategory
    privacy: PrivacyLevel
    noise_sensitive: bool
    equipment: Tuple[str, ...] = ()

    class Config:
        frozen = True


class Position(BaseModel):
    """Point inside the habitat; ``y`` is the vertical (level) axis."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    class Config:
        frozen = True

    def as_list(self) -> List[float]:
        return [self.x, self.y, self.z]


class PlacedArea(BaseModel):
    """One functional area positioned in the habitat."""

    type: AreaType
    position: Position = Field(default_factory=Position)

    class Config:
        frozen = True

    @property
    def template(self) -> AreaTemplate:
        from .catalog import area_template

        return area_template(self.type)

    def moved_to(self, position: Position) -> "PlacedArea":
        return PlacedArea(type=self.type, position=position)


class AreaPlacements(BaseModel):
    """Host-side area registry keyed by type.

    At most one area per type is tracked; placing a second area of the same
    type replaces the first one.
    """

    placed: Dict[AreaType, PlacedArea] = Field(default_factory=dict)

    @validator("placed")
    def _keys_match_types(cls, value: Dict[str, PlacedArea]) -> Dict[str, PlacedArea]:
        for key, area in value.items():
            if key != area.type:
                raise ValueError(f"placement key {key!r} does not match area type {area.type!r}")
        return value

    @classmethod
    def from_areas(cls, areas: Iterable[PlacedArea]) -> "AreaPlacements":
        placements = cls()
        for area in areas:
            placements.place(area.type, area.position)
        return placements

    def place(self, area_type: AreaType, position: Position) -> PlacedArea:
        area = PlacedArea(type=area_type, position=position)
        self.placed[area_type] = area
        return area

    def remove(self, area_type: str) -> Optional[PlacedArea]:
        return self.placed.pop(area_type, None)  # type: ignore[arg-type]

    def get(self, area_type: str) -> Optional[PlacedArea]:
        return self.placed.get(area_type)  # type: ignore[call-overload]

    def areas(self) -> List[PlacedArea]:
        return list(self.placed.values())

    def apply(self, areas: Iterable[PlacedArea]) -> None:
        """Copy positions back onto already placed types."""
        for area in areas:
            if area.type in self.placed:
                self.placed[area.type] = area

    def __len__(self) -> int:
        return len(self.placed)

    def __contains__(self, area_type: object) -> bool:
        return area_type in self.placed


class ScoringSettings(BaseModel):
    """Distances and scaling used by the layout scorer."""

    reference_radius_m: float = Field(8.0, gt=0)
    min_separation_m: float = Field(4.0, ge=0)
    accessibility_scale_m: float = Field(10.0, gt=0)
    score_offset: float = 5.0
    score_scale: float = 10.0
    critical_conflict_threshold: int = -3


class AnnealingSettings(BaseModel):
    """Simulated annealing schedule and alternative-layout parameters."""

    iterations: int = Field(100, ge=0)
    initial_temperature: float = Field(1.0, gt=0)
    cooling_rate: float = Field(0.95, gt=0, lt=1)
    history_window: int = Field(3, ge=1)
    fallback_radius_m: float = Field(5.0, gt=0)
    spread_factor: float = Field(0.8, gt=0, le=1)


class AdjacencyRule(BaseModel):
    """Desirability of placing two area types near each other."""

    pair: Tuple[AreaType, AreaType]
    score: int
    reason: str

    class Config:
        frozen = True


class Finding(BaseModel):
    severity: Severity
    message: str
    reason: str
    recommendation: Optional[str] = None


class LayoutIssue(BaseModel):
    description: str
    severity: Literal["low", "medium", "high"]
    suggestion: str


class LayoutSnapshot(BaseModel):
    """Frozen capture of a layout and its score."""

    areas: Tuple[PlacedArea, ...]
    score: int
    source: SnapshotSource = "optimize"
    timestamp: datetime = Field(default_factory=utcnow)

    class Config:
        frozen = True


class OptimizationStep(BaseModel):
    """A single annealing iteration."""

    iteration: int
    score: int
    accepted: bool
    temperature: float


class OptimizationResult(BaseModel):
    """Optimizer output bundle."""

    areas: List[PlacedArea]
    before_score: int
    after_score: int
    steps: List[OptimizationStep] = Field(default_factory=list)


class Alternative(BaseModel):
    areas: List[PlacedArea]
    score: int
    description: str


class OptimizationReport(BaseModel):
    timestamp: datetime = Field(default_factory=utcnow)
    overall_score: int
    traffic_flow: TrafficFlowRating
    privacy_zones: PrivacyRating
    adjacency_compliance: int
    recommendations: List[Dict[str, str]]
    areas: List[Dict[str, object]]


class HabitatSummary(BaseModel):
    """Habitat figures supplied by the host."""

    volume: float
    construction: str
    mass: Optional[float] = None
    structure: Optional[str] = None
    diameter: Optional[float] = None
    length: Optional[float] = None
    levels: Optional[int] = None
    floor_area: Optional[float] = None
    net_habitable_volume: Optional[float] = None
    volume_per_crew: Optional[float] = None
    artificial_gravity: Optional[float] = None
    rotation_rpm: Optional[float] = None

    class Config:
        extra = "allow"


class MissionSummary(BaseModel):
    """Mission parameters supplied by the host."""

    destination: str = "lunar-surface"
    crew_size: int = 4
    duration: int = 180
    construction: Optional[str] = None
    eva_frequency: Optional[int] = None

    class Config:
        extra = "allow"


class CrewValidation(BaseModel):
    valid: bool
    issues: List[str] = Field(default_factory=list)


class MissionConstraintCheck(BaseModel):
    valid: bool
    issues: List[str] = Field(default_factory=list)
    launch: Dict[str, object] = Field(default_factory=dict)


class Assessment(BaseModel):
    category: str
    status: ComplianceStatus
    score: int = Field(..., ge=0, le=100)
    message: str
    details: List[str] = Field(default_factory=list)

    class Config:
        frozen = True


class ComplianceReport(BaseModel):
    """Result of one compliance evaluation."""

    timestamp: datetime = Field(default_factory=utcnow)
    mission: MissionSummary
    habitat: HabitatSummary
    assessments: Tuple[Assessment, ...]
    overall_score: int
    recommendations: Tuple[str, ...] = ()

    class Config:
        frozen = True

    def assessment(self, category: str) -> Optional[Assessment]:
        for item in self.assessments:
            if item.category == category:
                return item
        return None
