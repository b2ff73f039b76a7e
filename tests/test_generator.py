import math

import pytest

from habitat_layout.generator import default_layout, required_areas, ring_positions
from habitat_layout.habitat import artificial_gravity, summarize
from habitat_layout.models import HabitatSummary, MissionSummary


@pytest.mark.parametrize("duration, count", [(90, 9), (180, 9), (200, 11), (400, 12)])
def test_required_areas_grow_with_duration(duration, count):
    areas = required_areas(MissionSummary(duration=duration))
    assert len(areas) == count
    assert len(set(areas)) == count
    assert ("greenhouse" in areas) == (duration > 360)


def test_ring_positions_are_evenly_spaced():
    positions = ring_positions(4, 8.0)
    assert len(positions) == 4
    for pos in positions:
        assert math.hypot(pos.x, pos.z) == pytest.approx(2.1)
        assert pos.y == 0.0
    assert positions[0].x == pytest.approx(2.1)
    assert positions[1].z == pytest.approx(2.1)
    assert ring_positions(0, 8.0) == []


def test_default_layout_places_each_type_once():
    placements = default_layout(MissionSummary(duration=400))
    assert len(placements) == 12
    assert "greenhouse" in placements
    assert len({a.type for a in placements.areas()}) == 12


def test_default_layout_uses_habitat_diameter():
    shell = HabitatSummary(volume=400.0, construction="prefab", diameter=12.0)
    placements = default_layout(MissionSummary(), shell)
    for area in placements.areas():
        assert math.hypot(area.position.x, area.position.z) == pytest.approx(3.5)


def test_cylinder_summary():
    summary = summarize("cylinder", diameter=8.0, length=12.0, levels=2, construction="prefab", crew_size=4)
    volume = math.pi * 16 * 12
    assert summary.volume == pytest.approx(volume)
    assert summary.net_habitable_volume == pytest.approx(volume * 0.75 * 0.8)
    assert summary.volume_per_crew == pytest.approx(volume * 0.6 / 4)
    assert summary.mass == pytest.approx(volume * 35 * 0.8 / 1000)
    assert summary.floor_area == pytest.approx(math.pi * 16 * 2)
    assert summary.artificial_gravity == 0.0


def test_sphere_summary():
    summary = summarize("sphere", diameter=6.0, construction="inflatable")
    assert summary.volume == pytest.approx(4 / 3 * math.pi * 27)
    assert summary.net_habitable_volume == pytest.approx(summary.volume * 0.9 * 0.8)


def test_unknown_structure_falls_back_to_cylinder():
    summary = summarize("pyramid", diameter=8.0, length=12.0)
    assert summary.volume == pytest.approx(math.pi * 16 * 12)
    assert summary.structure == "pyramid"


def test_artificial_gravity():
    assert artificial_gravity(100.0, 0.0) == 0.0
    omega = 4 * 2 * math.pi / 60
    assert artificial_gravity(100.0, 4.0) == pytest.approx(omega ** 2 * 50 / 9.81)
    assert artificial_gravity(100.0, 30.0) == 1.0


def test_zero_crew_has_no_per_crew_volume():
    assert summarize(crew_size=0).volume_per_crew is None
