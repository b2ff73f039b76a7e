"""Adjacency desirability table between functional area types."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Tuple

from .models import AdjacencyRule

DEFAULT_RULES: Tuple[AdjacencyRule, ...] = (
    # critical adjacencies
    AdjacencyRule(pair=("galley", "dining"), score=5, reason="Food preparation and consumption workflow"),
    AdjacencyRule(pair=("sleep", "hygiene"), score=5, reason="Morning and evening routines"),
    AdjacencyRule(pair=("work", "control"), score=5, reason="Operational efficiency"),
    AdjacencyRule(pair=("medical", "sleep"), score=4, reason="Emergency access"),
    # beneficial
    AdjacencyRule(pair=("eclss", "storage"), score=3, reason="Supply access for life support"),
    AdjacencyRule(pair=("work", "storage"), score=3, reason="Equipment and supply access"),
    AdjacencyRule(pair=("exercise", "recreation"), score=3, reason="Activity grouping"),
    AdjacencyRule(pair=("greenhouse", "eclss"), score=2, reason="Life support integration"),
    # avoid
    AdjacencyRule(pair=("sleep", "exercise"), score=-4, reason="Noise disturbance during rest"),
    AdjacencyRule(pair=("sleep", "work"), score=-4, reason="Work-life separation"),
    AdjacencyRule(pair=("galley", "hygiene"), score=-5, reason="Hygiene concerns"),
    AdjacencyRule(pair=("dining", "hygiene"), score=-5, reason="Hygiene concerns"),
    AdjacencyRule(pair=("medical", "exercise"), score=-3, reason="Activity conflict"),
    AdjacencyRule(pair=("control", "recreation"), score=-2, reason="Distraction from operations"),
)


class AdjacencyModel:
    """Symmetric lookup of pairwise adjacency scores.

    Pairs without a rule are neutral and return ``None``.
    """

    def __init__(self, rules: Iterable[AdjacencyRule] = DEFAULT_RULES) -> None:
        table = {}
        for rule in rules:
            table[rule.pair] = rule
        self._table: Mapping[Tuple[str, str], AdjacencyRule] = MappingProxyType(table)

    def rule(self, type_a: str, type_b: str) -> Optional[AdjacencyRule]:
        return self._table.get((type_a, type_b)) or self._table.get((type_b, type_a))

    def score(self, type_a: str, type_b: str) -> Optional[Tuple[int, str]]:
        rule = self.rule(type_a, type_b)
        if rule is None:
            return None
        return rule.score, rule.reason

    def rules(self) -> Iterator[AdjacencyRule]:
        return iter(self._table.values())

    def critical_conflicts(self, threshold: int = -3) -> Iterator[AdjacencyRule]:
        """Rules scoring strictly below ``threshold``."""
        return (rule for rule in self._table.values() if rule.score < threshold)

    def __len__(self) -> int:
        return len(self._table)


DEFAULT_MODEL = AdjacencyModel()
