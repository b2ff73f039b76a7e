import logging
import threading
from typing import Any, Dict, List, Optional, Tuple

from flask import Flask, jsonify, request

from habitat_layout.catalog import AREA_TEMPLATES, area_equipment_budget, equipment_profile
from habitat_layout.compliance import (
    generate_compliance_report,
    life_support_requirements,
    radiation_requirement,
    standards_status,
    validate_mission_constraints,
)
from habitat_layout.generator import default_layout
from habitat_layout.habitat import summarize
from habitat_layout.io_schema import export_markdown, parse_design, to_jsonable
from habitat_layout.models import AreaPlacements, HabitatSummary, MissionSummary, PlacedArea
from habitat_layout.optimizer import LayoutOptimizer
from habitat_layout.scoring import DEFAULT_SCORER, score_band

logger = logging.getLogger(__name__)

# Flask setup
app = Flask(__name__)

# Optimizer history backs "apply alternative"; one per process
_optimizer = LayoutOptimizer()
_optimizer_lock = threading.Lock()


def _payload() -> Dict[str, Any]:
    return request.get_json(force=True, silent=True) or {}


def _parse_areas(payload: Dict[str, Any]) -> List[PlacedArea]:
    design = parse_design({"areas": payload.get("areas") or []})
    # one area per type: later entries replace earlier ones
    return AreaPlacements.from_areas(design.areas).areas()


def _parse_context(payload: Dict[str, Any]) -> Tuple[Optional[HabitatSummary], Optional[MissionSummary]]:
    design = parse_design({"habitat": payload.get("habitat"), "mission": payload.get("mission")})
    return design.habitat, design.mission


def _layout_metrics(areas: List[PlacedArea]) -> Dict[str, Any]:
    score = DEFAULT_SCORER.layout_score(areas)
    return {
        "score": score,
        "band": score_band(score),
        "traffic_flow": DEFAULT_SCORER.traffic_flow(areas),
        "privacy_zones": DEFAULT_SCORER.privacy_zones(areas),
    }


@app.errorhandler(ValueError)
def _bad_request(exc: ValueError):
    logger.warning("Rejected payload: %s", exc)
    return jsonify({"error": str(exc)}), 400


@app.route("/api/catalog", methods=["GET"])
def catalog():
    areas = []
    for area_type, template in AREA_TEMPLATES.items():
        areas.append(
            {
                "type": area_type,
                **template.dict(),
                "equipment_budget": area_equipment_budget(area_type),
                "equipment_details": [equipment_profile(item) for item in template.equipment],
            }
        )
    return jsonify({"areas": areas, "life_support": dict(life_support_requirements())})


@app.route("/api/habitat/summary", methods=["POST"])
def habitat_summary():
    payload = _payload()
    mission = MissionSummary.parse_obj(payload.get("mission") or {})
    geometry = payload.get("habitat") or {}
    habitat = summarize(
        structure=str(geometry.get("structure", "cylinder")),
        diameter=float(geometry.get("diameter", 8.0)),
        length=float(geometry.get("length", 12.0)),
        levels=int(geometry.get("levels", 2)),
        construction=str(geometry.get("construction", mission.construction or "prefab")),
        crew_size=mission.crew_size,
        rotation_rpm=float(geometry.get("rotation_rpm", 0.0)),
    )
    return jsonify({"habitat": to_jsonable(habitat)})


@app.route("/api/layout/auto_generate", methods=["POST"])
def auto_generate_layout():
    habitat, mission = _parse_context(_payload())
    placements = default_layout(mission or MissionSummary(), habitat)
    areas = placements.areas()
    return jsonify({"areas": [to_jsonable(a) for a in areas], **_layout_metrics(areas)})


@app.route("/api/layout/score", methods=["POST"])
def score_layout():
    areas = _parse_areas(_payload())
    findings = DEFAULT_SCORER.audit(areas)
    return jsonify(
        {
            **_layout_metrics(areas),
            "findings": [f.dict() for f in findings],
            "compliant": not findings,
        }
    )


@app.route("/api/layout/report", methods=["POST"])
def layout_report():
    areas = _parse_areas(_payload())
    return jsonify(to_jsonable(DEFAULT_SCORER.optimization_report(areas)))


@app.route("/api/layout/optimize", methods=["POST"])
def optimize_layout():
    payload = _payload()
    areas = _parse_areas(payload)
    if not areas:
        return jsonify({"error": "Please add functional areas to the layout first"}), 400
    with _optimizer_lock:
        if payload.get("seed") is not None:
            _optimizer.rng.seed(int(payload["seed"]))
        result = _optimizer.optimize(areas)
    return jsonify(
        {
            "areas": [to_jsonable(a) for a in result.areas],
            "before_score": result.before_score,
            "after_score": result.after_score,
            **_layout_metrics(result.areas),
        }
    )


@app.route("/api/layout/alternatives", methods=["POST"])
def layout_alternatives():
    payload = _payload()
    areas = _parse_areas(payload)
    habitat, _ = _parse_context(payload)
    count = int(payload.get("count", 3))
    with _optimizer_lock:
        alternatives = _optimizer.generate_alternatives(areas, count=count, habitat=habitat)
    return jsonify({"alternatives": [to_jsonable(alt) for alt in alternatives]})


@app.route("/api/layout/apply_alternative", methods=["POST"])
def apply_alternative():
    payload = _payload()
    placements = AreaPlacements.from_areas(_parse_areas(payload))
    index = int(payload.get("index", -1))
    with _optimizer_lock:
        placements = _optimizer.apply_alternative(index, placements)
    areas = placements.areas()
    return jsonify({"areas": [to_jsonable(a) for a in areas], **_layout_metrics(areas)})


@app.route("/api/compliance/report", methods=["POST"])
def compliance_report():
    habitat, mission = _parse_context(_payload())
    if habitat is None or mission is None:
        return jsonify({"error": "habitat and mission payloads required"}), 400
    report = generate_compliance_report(habitat, mission)
    return jsonify(to_jsonable(report))


@app.route("/api/mission/validate", methods=["POST"])
def mission_validate():
    habitat, mission = _parse_context(_payload())
    if habitat is None or mission is None:
        return jsonify({"error": "habitat and mission payloads required"}), 400
    check = validate_mission_constraints(habitat, mission)
    return jsonify(
        {
            **to_jsonable(check),
            "status": standards_status(mission, habitat.construction),
            "radiation_g_cm2": radiation_requirement(mission.destination),
        }
    )


@app.route("/api/design/export", methods=["POST"])
def export_design():
    payload = _payload()
    areas = _parse_areas(payload)
    habitat, mission = _parse_context(payload)
    compliance = None
    if habitat is not None and mission is not None:
        compliance = generate_compliance_report(habitat, mission)
    report = DEFAULT_SCORER.optimization_report(areas)
    markdown = export_markdown(report, DEFAULT_SCORER.audit(areas), compliance)
    return jsonify({"markdown": markdown})


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    app.run(host="0.0.0.0", port=5000, debug=True, use_reloader=False)
