from habitat_layout.adjacency import DEFAULT_MODEL, AdjacencyModel
from habitat_layout.models import AdjacencyRule


def test_lookup_is_symmetric():
    assert DEFAULT_MODEL.score("galley", "dining") == (5, "Food preparation and consumption workflow")
    assert DEFAULT_MODEL.score("dining", "galley") == DEFAULT_MODEL.score("galley", "dining")
    assert DEFAULT_MODEL.score("hygiene", "galley")[0] == -5


def test_missing_pair_is_neutral():
    assert DEFAULT_MODEL.score("greenhouse", "medical") is None
    assert DEFAULT_MODEL.score("sleep", "sleep") is None


def test_critical_conflicts_below_threshold():
    pairs = {rule.pair for rule in DEFAULT_MODEL.critical_conflicts(-3)}
    assert pairs == {
        ("sleep", "exercise"),
        ("sleep", "work"),
        ("galley", "hygiene"),
        ("dining", "hygiene"),
    }


def test_custom_rule_table():
    model = AdjacencyModel([AdjacencyRule(pair=("storage", "eclss"), score=1, reason="test")])
    assert len(model) == 1
    assert model.score("eclss", "storage") == (1, "test")
    assert model.score("galley", "dining") is None
