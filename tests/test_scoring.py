import random

import pytest

from habitat_layout.models import PlacedArea, Position
from habitat_layout.scoring import DEFAULT_SCORER, LayoutScorer, score_band


def area(area_type: str, x: float = 0.0, z: float = 0.0, y: float = 0.0) -> PlacedArea:
    return PlacedArea(type=area_type, position=Position(x=x, y=y, z=z))


def test_positive_pair_reward_vanishes_at_reference_radius():
    scorer = LayoutScorer()
    for distance in (8.0, 8.5, 12.0, 40.0):
        assert scorer.pair_score(area("galley"), area("dining", x=distance)) == 0
    assert scorer.pair_score(area("galley"), area("dining", x=6.0, z=8.0)) == 0


def test_positive_pair_reward_scales_with_proximity():
    scorer = LayoutScorer()
    assert scorer.pair_score(area("galley"), area("dining")) == pytest.approx(5.0)
    assert scorer.pair_score(area("galley"), area("dining", x=4.0)) == pytest.approx(2.5)


def test_vertical_offset_is_ignored():
    assert DEFAULT_SCORER.pair_score(area("galley"), area("dining", y=5.0)) == pytest.approx(5.0)


def test_negative_pair_penalty_grows_with_distance():
    scorer = LayoutScorer()
    assert scorer.pair_score(area("sleep"), area("exercise")) == 0
    assert scorer.pair_score(area("sleep"), area("exercise", x=4.0)) == pytest.approx(-2.0)
    assert scorer.pair_score(area("sleep"), area("exercise", x=16.0)) == pytest.approx(-8.0)


def test_unlisted_pair_is_neutral():
    assert DEFAULT_SCORER.pair_score(area("greenhouse"), area("medical", x=1.0)) == 0


def test_layout_score_needs_two_areas():
    assert DEFAULT_SCORER.layout_score([]) == 0
    assert DEFAULT_SCORER.layout_score([area("galley")]) == 0


def test_layout_score_normalisation():
    assert DEFAULT_SCORER.layout_score([area("galley"), area("dining")]) == 100
    assert DEFAULT_SCORER.layout_score([area("galley"), area("dining", x=4.0)]) == 75
    assert DEFAULT_SCORER.layout_score([area("galley"), area("hygiene", x=8.0)]) == 0
    assert DEFAULT_SCORER.layout_score([area("storage"), area("medical")]) == 50


def test_layout_score_ignores_order():
    areas = [
        area("sleep", 1.0, 2.0),
        area("hygiene", -1.5, 0.5),
        area("galley", 3.0, -2.0),
        area("dining", 2.5, -3.0),
        area("work", -3.0, 3.0),
        area("control", -2.0, 4.0),
    ]
    expected = DEFAULT_SCORER.layout_score(areas)
    rng = random.Random(3)
    for _ in range(5):
        shuffled = list(areas)
        rng.shuffle(shuffled)
        assert DEFAULT_SCORER.layout_score(shuffled) == expected
    assert 0 <= expected <= 100


def test_traffic_flow_divides_by_all_high_traffic_types():
    assert DEFAULT_SCORER.traffic_flow([area("galley")]) == "Poor"
    assert DEFAULT_SCORER.traffic_flow([area("galley"), area("dining")]) == "Fair"
    assert DEFAULT_SCORER.traffic_flow([area("galley"), area("dining"), area("hygiene")]) == "Good"
    full = [area("galley"), area("dining"), area("hygiene"), area("control")]
    assert DEFAULT_SCORER.traffic_flow(full) == "Excellent"


def test_traffic_flow_penalises_spread_out_layouts():
    spread = [area("galley"), area("dining", x=10.0), area("hygiene", z=10.0), area("control", x=-10.0)]
    assert DEFAULT_SCORER.traffic_flow(spread) == "Poor"


def test_privacy_zones_bands():
    secluded = [area("sleep"), area("medical"), area("hygiene"), area("galley", x=8.0)]
    assert DEFAULT_SCORER.privacy_zones(secluded) == "Excellent"
    assert DEFAULT_SCORER.privacy_zones([area("sleep"), area("galley", x=8.0)]) == "Inadequate"
    # no public areas at all: isolation clamps to 1
    assert DEFAULT_SCORER.privacy_zones([area("sleep"), area("medical")]) == "Good"
    assert DEFAULT_SCORER.privacy_zones([]) == "Inadequate"


def test_audit_reports_success_and_error():
    areas = [area("sleep"), area("hygiene", x=3.0), area("galley", x=3.0, z=2.0)]
    findings = DEFAULT_SCORER.audit(areas)

    assert [f.severity for f in findings] == ["success", "error"]
    assert findings[0].message == "sleep and hygiene properly adjacent"
    assert findings[1].message == "galley and hygiene are too close"
    assert findings[1].reason == "Hygiene concerns"


def test_audit_warns_when_required_pair_is_far():
    findings = DEFAULT_SCORER.audit([area("galley"), area("dining", x=10.0)])
    assert len(findings) == 1
    assert findings[0].severity == "warning"
    assert findings[0].reason == "Meal preparation and consumption workflow"


def test_audit_empty_when_no_rule_applies():
    assert DEFAULT_SCORER.audit([area("storage"), area("eclss", x=1.0)]) == []


def test_adjacency_compliance_percentage():
    assert DEFAULT_SCORER.adjacency_compliance([]) == 100
    assert DEFAULT_SCORER.adjacency_compliance([area("galley"), area("dining")]) == 100
    assert DEFAULT_SCORER.adjacency_compliance([area("galley"), area("dining"), area("storage")]) == 33


def test_identify_issues_only_for_critical_conflicts():
    issues = DEFAULT_SCORER.identify_issues([area("galley"), area("hygiene", x=2.0)])
    assert len(issues) == 1
    assert issues[0].severity == "high"
    assert issues[0].description == "Galley and Hygiene Facility are too close"
    assert "at least 4 meters" in issues[0].suggestion

    # medical/exercise scores -3, which is not below the threshold
    assert DEFAULT_SCORER.identify_issues([area("medical"), area("exercise", x=1.0)]) == []


def test_recommendations_fall_back_to_all_clear():
    recs = DEFAULT_SCORER.recommendations([area("galley"), area("dining")])
    assert recs == [
        {
            "issue": "No major layout issues identified",
            "severity": "low",
            "suggestion": "Current layout meets NASA habitability guidelines",
        }
    ]


def test_optimization_report_summarises_layout():
    areas = [area("galley"), area("dining", x=1.0), area("hygiene", x=2.0)]
    report = DEFAULT_SCORER.optimization_report(areas)
    assert report.overall_score == DEFAULT_SCORER.layout_score(areas)
    assert report.traffic_flow == DEFAULT_SCORER.traffic_flow(areas)
    assert report.areas[1] == {"type": "dining", "position": [1.0, 0.0, 0.0], "category": "sustenance"}
    assert report.recommendations[0]["severity"] == "high"


def test_score_band():
    assert score_band(80) == "good"
    assert score_band(60) == "fair"
    assert score_band(59) == "poor"


def test_repeated_types_count_once_in_bands():
    single = [area("sleep"), area("galley", x=9.0)]
    repeated = [area("sleep"), area("sleep", z=0.5), area("sleep", z=-0.5), area("galley", x=9.0)]

    assert DEFAULT_SCORER.privacy_zones(repeated) == DEFAULT_SCORER.privacy_zones(single)
    assert DEFAULT_SCORER.traffic_flow(repeated) == DEFAULT_SCORER.traffic_flow(single)
