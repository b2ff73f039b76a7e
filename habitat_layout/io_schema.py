"""JSON import/export helpers for the CLI and web host."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError, validator

from .models import (
    AreaPlacements,
    ComplianceReport,
    Finding,
    HabitatSummary,
    MissionSummary,
    OptimizationReport,
    PlacedArea,
)


class HabitatConfig(BaseModel):
    structure: str = "cylinder"
    diameter: float = Field(8.0, gt=0)
    length: float = Field(12.0, gt=0)
    levels: int = Field(2, ge=1)
    construction: str = "prefab"
    rotation_rpm: float = 0.0


class DesignConfig(BaseModel):
    """Seed configuration written by ``init`` and read by ``generate``."""

    mission: MissionSummary = Field(default_factory=MissionSummary)
    habitat: HabitatConfig = Field(default_factory=HabitatConfig)
    seed: int = 42


class DesignFile(BaseModel):
    """A saved design: placed areas plus the habitat and mission they sit in."""

    areas: List[PlacedArea] = Field(default_factory=list)
    habitat: Optional[HabitatSummary] = None
    mission: Optional[MissionSummary] = None

    @validator("areas")
    def _one_area_per_type(cls, value: List[PlacedArea]) -> List[PlacedArea]:
        # later entries replace earlier ones, as in AreaPlacements
        return AreaPlacements.from_areas(value).areas()

    def placements(self) -> AreaPlacements:
        return AreaPlacements.from_areas(self.areas)


def to_jsonable(model: BaseModel) -> Dict[str, Any]:
    return json.loads(json.dumps(model.dict(), default=str))


def dumps(model: BaseModel) -> str:
    return json.dumps(model.dict(), indent=2, sort_keys=True, default=str)


def parse_design(data: Dict[str, Any]) -> DesignFile:
    try:
        return DesignFile.parse_obj(data)
    except ValidationError as exc:
        raise ValueError(f"Design payload invalid: {exc}") from exc


def load_design(path: Path | str) -> DesignFile:
    return parse_design(json.loads(Path(path).read_text()))


def save_design(design: DesignFile, path: Path | str) -> None:
    Path(path).write_text(dumps(design))


def load_config(path: Path | str) -> DesignConfig:
    data = json.loads(Path(path).read_text())
    try:
        return DesignConfig.parse_obj(data)
    except ValidationError as exc:
        raise ValueError(f"Config file invalid: {exc}") from exc


def design_schema() -> Dict[str, Any]:
    return DesignFile.schema()


def export_markdown(
    report: OptimizationReport,
    findings: List[Finding],
    compliance: ComplianceReport | None = None,
) -> str:
    lines: List[str] = []
    lines.append("# Habitat Layout Summary")
    lines.append("")
    lines.append(f"- Layout score: {report.overall_score}%")
    lines.append(f"- Traffic flow: {report.traffic_flow}")
    lines.append(f"- Privacy zones: {report.privacy_zones}")
    lines.append(f"- Adjacency compliance: {report.adjacency_compliance}%")
    lines.append("")
    lines.append("## Areas")
    lines.append("| Area | Category | Position (x, y, z) |")
    lines.append("| --- | --- | --- |")
    for area in report.areas:
        x, y, z = area["position"]  # type: ignore[misc]
        lines.append(f"| {area['type']} | {area['category']} | {x:.2f}, {y:.2f}, {z:.2f} |")
    lines.append("")
    lines.append("## Habitability Feedback")
    if not findings:
        lines.append("- ✅ Layout meets NASA habitability guidelines")
    for finding in findings:
        prefix = {"success": "✅", "warning": "⚠️", "error": "❌"}[finding.severity]
        lines.append(f"- {prefix} {finding.message} ({finding.reason})")
    lines.append("")
    lines.append("## Recommendations")
    for rec in report.recommendations:
        lines.append(f"- [{rec['severity']}] {rec['issue']}: {rec['suggestion']}")

    if compliance is not None:
        lines.append("")
        lines.append("## Standards Compliance")
        lines.append(f"Overall score: {compliance.overall_score}")
        lines.append("")
        lines.append("| Category | Status | Score | Message |")
        lines.append("| --- | --- | --- | --- |")
        for item in compliance.assessments:
            lines.append(f"| {item.category} | {item.status} | {item.score} | {item.message} |")
            for detail in item.details:
                lines.append(f"|  |  |  | {detail} |")
        for rec in compliance.recommendations:
            lines.append(f"- {rec}")
    return "\n".join(lines)
