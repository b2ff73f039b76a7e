"""Simulated annealing over area positions and random alternative layouts."""

from __future__ import annotations

import logging
import math
import random
from typing import List, Optional, Sequence, Tuple

from .models import (
    Alternative,
    AnnealingSettings,
    AreaPlacements,
    HabitatSummary,
    LayoutSnapshot,
    OptimizationResult,
    OptimizationStep,
    PlacedArea,
    Position,
    SnapshotSource,
)
from .scoring import DEFAULT_SCORER, LayoutScorer

logger = logging.getLogger(__name__)

LAYOUT_DESCRIPTIONS = (
    (80, "Excellent layout with optimal adjacencies and traffic flow"),
    (60, "Good layout with most critical adjacencies satisfied"),
    (40, "Fair layout with some adjacency issues to address"),
)
POOR_DESCRIPTION = "Poor layout requiring significant optimization"


def describe_score(score: int) -> str:
    for threshold, text in LAYOUT_DESCRIPTIONS:
        if score >= threshold:
            return text
    return POOR_DESCRIPTION


def _swap_positions(areas: Sequence[PlacedArea], rng: random.Random) -> List[PlacedArea]:
    """Neighbor layout: two areas trade positions, identities stay put."""
    neighbor = list(areas)
    first, second = rng.sample(range(len(neighbor)), 2)
    neighbor[first] = areas[first].moved_to(areas[second].position)
    neighbor[second] = areas[second].moved_to(areas[first].position)
    return neighbor


class LayoutOptimizer:
    """Searches position assignments that maximise the layout score.

    The random source is injectable; pass ``seed`` or a ``random.Random`` to
    make runs reproducible. Snapshots of optimized and alternative layouts
    accumulate in :attr:`history`.
    """

    def __init__(
        self,
        scorer: LayoutScorer | None = None,
        settings: AnnealingSettings | None = None,
        rng: random.Random | None = None,
        seed: int | None = None,
    ) -> None:
        self.scorer = scorer or DEFAULT_SCORER
        self.settings = settings or AnnealingSettings()
        self.rng = rng or random.Random(seed)
        self._history: List[LayoutSnapshot] = []

    @property
    def history(self) -> Tuple[LayoutSnapshot, ...]:
        return tuple(self._history)

    def recent(self, window: int | None = None) -> List[LayoutSnapshot]:
        if window is None:
            window = self.settings.history_window
        if window <= 0:
            return []
        return self._history[-window:]

    def _record(self, areas: Sequence[PlacedArea], score: int, source: SnapshotSource) -> None:
        self._history.append(LayoutSnapshot(areas=tuple(areas), score=score, source=source))

    def optimize(self, areas: Sequence[PlacedArea]) -> OptimizationResult:
        """Anneal for a fixed number of iterations and return the last accepted layout.

        The result is not guaranteed to beat the starting layout: there is no
        best-so-far tracking.
        """
        start = list(areas)
        if len(start) < 2:
            return OptimizationResult(areas=start, before_score=0, after_score=0)

        current = start
        current_score = self.scorer.layout_score(current)
        before_score = current_score
        temperature = self.settings.initial_temperature
        steps: List[OptimizationStep] = []

        for iteration in range(1, self.settings.iterations + 1):
            neighbor = _swap_positions(current, self.rng)
            neighbor_score = self.scorer.layout_score(neighbor)
            accept = neighbor_score > current_score or (
                math.exp((neighbor_score - current_score) / max(temperature, 1e-12))
                > self.rng.random()
            )
            if accept:
                current = neighbor
                current_score = neighbor_score
            steps.append(
                OptimizationStep(
                    iteration=iteration,
                    score=current_score,
                    accepted=accept,
                    temperature=temperature,
                )
            )
            temperature *= self.settings.cooling_rate

        self._record(start, before_score, "optimize")
        logger.info("Layout optimized. Score went from %s to %s", before_score, current_score)
        return OptimizationResult(
            areas=current, before_score=before_score, after_score=current_score, steps=steps
        )

    def _placement_radius(self, habitat: Optional[HabitatSummary]) -> float:
        if habitat is not None and habitat.diameter:
            return habitat.diameter / 2 - 1
        return self.settings.fallback_radius_m

    def random_layout(
        self, areas: Sequence[PlacedArea], habitat: HabitatSummary | None = None
    ) -> List[PlacedArea]:
        radius = self._placement_radius(habitat)
        layout = []
        for area in areas:
            angle = self.rng.random() * math.pi * 2
            distance = self.rng.random() * radius * self.settings.spread_factor
            position = Position(
                x=math.cos(angle) * distance,
                y=area.position.y,
                z=math.sin(angle) * distance,
            )
            layout.append(area.moved_to(position))
        return layout

    def generate_alternatives(
        self,
        areas: Sequence[PlacedArea],
        count: int = 3,
        habitat: HabitatSummary | None = None,
    ) -> List[Alternative]:
        if not areas:
            return []
        alternatives = []
        for _ in range(count):
            layout = self.random_layout(areas, habitat)
            score = self.scorer.layout_score(layout)
            alternatives.append(Alternative(areas=layout, score=score, description=describe_score(score)))
        alternatives.sort(key=lambda alt: alt.score, reverse=True)
        for alt in alternatives:
            self._record(alt.areas, alt.score, "alternative")
        logger.debug("Generated %d alternative layouts: %s", len(alternatives), [a.score for a in alternatives])
        return alternatives

    def apply_alternative(self, index: int, placements: AreaPlacements) -> AreaPlacements:
        """Apply a snapshot from the trailing history window to ``placements``.

        Indices outside the window leave the placements untouched.
        """
        window = self.recent()
        if 0 <= index < len(window):
            placements.apply(window[index].areas)
        else:
            logger.debug("No layout snapshot at index %s (window holds %d)", index, len(window))
        return placements


def optimize_layout(
    areas: Sequence[PlacedArea],
    settings: AnnealingSettings | None = None,
    seed: int | None = None,
) -> OptimizationResult:
    """One-off annealing run with a fresh optimizer."""
    return LayoutOptimizer(settings=settings, seed=seed).optimize(areas)
