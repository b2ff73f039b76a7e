"""Habitat interior layout scoring, optimization and standards compliance."""

from .models import (  # noqa: F401
    AreaPlacements,
    ComplianceReport,
    HabitatSummary,
    MissionSummary,
    PlacedArea,
    Position,
)
from .adjacency import AdjacencyModel  # noqa: F401
from .scoring import LayoutScorer  # noqa: F401
from .optimizer import LayoutOptimizer, optimize_layout  # noqa: F401
from .compliance import ComplianceEngine, generate_compliance_report  # noqa: F401
from .generator import default_layout  # noqa: F401

__all__ = [
    "AreaPlacements",
    "ComplianceReport",
    "HabitatSummary",
    "MissionSummary",
    "PlacedArea",
    "Position",
    "AdjacencyModel",
    "LayoutScorer",
    "LayoutOptimizer",
    "optimize_layout",
    "ComplianceEngine",
    "generate_compliance_report",
    "default_layout",
]
