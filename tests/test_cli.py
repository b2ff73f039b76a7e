import json
import subprocess
import sys
from pathlib import Path

import pytest

from habitat_layout.cli import main

ROOT = Path(__file__).resolve().parents[1]
CLI = [sys.executable, "-m", "habitat_layout.cli"]


def run(args, check=True):
    return subprocess.run(CLI + args, check=check, capture_output=True, text=True, cwd=ROOT)


@pytest.mark.integration
def test_cli_quickstart(tmp_path: Path):
    config_path = tmp_path / "config.json"
    layout_path = tmp_path / "layout.json"
    opt_path = tmp_path / "layout_opt.json"

    run(["init", "--out", str(config_path)])
    run(["generate", "--config", str(config_path), "--out", str(layout_path)])
    audit = run(["audit", "--in", str(layout_path)], check=False)
    assert audit.returncode in (0, 1)

    run(["optimize", "--in", str(layout_path), "--iters", "20", "--seed", "7", "--out", str(opt_path)])
    payload = json.loads(run(["score", "--in", str(opt_path)]).stdout)
    assert 0 <= payload["overall_score"] <= 100
    assert len(payload["areas"]) == 9

    compliance = json.loads(run(["comply", "--in", str(opt_path)]).stdout)
    assert compliance["overall_score"] == 100

    markdown = run(["export", "--in", str(opt_path), "--format", "md"]).stdout
    assert markdown.startswith("# Habitat Layout Summary")
    assert "## Standards Compliance" in markdown


def test_alternatives_apply_writes_design(tmp_path: Path, capsys):
    config_path = tmp_path / "config.json"
    layout_path = tmp_path / "layout.json"
    applied_path = tmp_path / "applied.json"

    assert main(["init", "--out", str(config_path)]) == 0
    assert main(["generate", "--config", str(config_path), "--out", str(layout_path)]) == 0
    capsys.readouterr()

    code = main(
        ["alternatives", "--in", str(layout_path), "--seed", "3", "--apply", "0", "--out", str(applied_path)]
    )
    assert code == 0
    options = json.loads(capsys.readouterr().out)
    assert [o["option"] for o in options] == [1, 2, 3]

    saved = json.loads(applied_path.read_text())
    original = json.loads(layout_path.read_text())
    assert sorted(a["type"] for a in saved["areas"]) == sorted(a["type"] for a in original["areas"])
    assert saved["mission"] == original["mission"]


def test_export_json(tmp_path: Path, capsys):
    config_path = tmp_path / "config.json"
    layout_path = tmp_path / "layout.json"
    out_path = tmp_path / "summary.json"
    main(["init", "--out", str(config_path)])
    main(["generate", "--config", str(config_path), "--out", str(layout_path)])

    assert main(["export", "--in", str(layout_path), "--format", "json", "--out", str(out_path)]) == 0
    data = json.loads(out_path.read_text())
    assert set(data) == {"layout", "findings", "compliance"}
    assert [a["category"] for a in data["compliance"]["assessments"]] == ["Volume", "Mission", "Technology"]


def test_comply_requires_habitat_and_mission(tmp_path: Path, capsys):
    design_path = tmp_path / "bare.json"
    design_path.write_text(json.dumps({"areas": [{"type": "sleep"}]}))

    assert main(["comply", "--in", str(design_path)]) == 1
    assert "habitat" in capsys.readouterr().err


def test_invalid_design_reports_error(tmp_path: Path, capsys):
    design_path = tmp_path / "bad.json"
    design_path.write_text(json.dumps({"areas": [{"type": "airlock"}]}))

    assert main(["score", "--in", str(design_path)]) == 1
    assert capsys.readouterr().err.startswith("Error: Design payload invalid")


def test_schema_lists_design_fields(capsys):
    assert main(["schema"]) == 0
    schema = json.loads(capsys.readouterr().out)
    assert set(schema["properties"]) == {"areas", "habitat", "mission"}


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out


def test_score_keeps_one_area_per_type(tmp_path: Path, capsys):
    repeated = tmp_path / "repeated.json"
    single = tmp_path / "single.json"
    sleep_rows = [
        {"type": "sleep", "position": {"x": 0, "y": 0, "z": z}} for z in (0.5, -0.5, 0.0)
    ]
    galley = {"type": "galley", "position": {"x": 9, "y": 0, "z": 0}}
    repeated.write_text(json.dumps({"areas": sleep_rows + [galley]}))
    single.write_text(json.dumps({"areas": [sleep_rows[-1], galley]}))

    assert main(["score", "--in", str(repeated)]) == 0
    repeated_report = json.loads(capsys.readouterr().out)
    assert main(["score", "--in", str(single)]) == 0
    single_report = json.loads(capsys.readouterr().out)

    assert len(repeated_report["areas"]) == 2
    assert repeated_report["areas"][0]["position"] == [0.0, 0.0, 0.0]
    for key in ("overall_score", "traffic_flow", "privacy_zones", "adjacency_compliance"):
        assert repeated_report[key] == single_report[key]
