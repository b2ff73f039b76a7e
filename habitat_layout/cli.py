"""Command line interface for the habitat_layout toolkit."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from .compliance import generate_compliance_report
from .generator import default_layout
from .habitat import summarize
from .io_schema import (
    DesignConfig,
    DesignFile,
    design_schema,
    dumps,
    export_markdown,
    load_config,
    load_design,
    save_design,
)
from .models import AnnealingSettings
from .optimizer import LayoutOptimizer
from .scoring import DEFAULT_SCORER

DEFAULT_CONFIG_PATH = Path("examples/seed_config.json")
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _write_json(path: Path, data: Any) -> None:
    path.write_text(json.dumps(data, indent=2, sort_keys=True))


def _require_compliance_inputs(design: DesignFile) -> None:
    if design.habitat is None or design.mission is None:
        raise ValueError("design file needs both 'habitat' and 'mission' for compliance")


def cmd_init(args: argparse.Namespace) -> int:
    path = Path(args.out or DEFAULT_CONFIG_PATH)
    if not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
    _write_json(path, DesignConfig().dict())
    print(f"Wrote seed configuration to {path}")
    return 0


def cmd_generate(args: argparse.Namespace) -> int:
    config = load_config(args.config)
    geometry = config.habitat
    habitat = summarize(
        structure=geometry.structure,
        diameter=geometry.diameter,
        length=geometry.length,
        levels=geometry.levels,
        construction=geometry.construction,
        crew_size=config.mission.crew_size,
        rotation_rpm=geometry.rotation_rpm,
    )
    placements = default_layout(config.mission, habitat)
    design = DesignFile(areas=placements.areas(), habitat=habitat, mission=config.mission)
    save_design(design, args.out)
    print(f"Generated layout with {len(placements)} areas saved to {args.out}")
    return 0


def cmd_score(args: argparse.Namespace) -> int:
    design = load_design(args.input)
    report = DEFAULT_SCORER.optimization_report(design.areas)
    print(dumps(report))
    return 0


def cmd_audit(args: argparse.Namespace) -> int:
    design = load_design(args.input)
    findings = DEFAULT_SCORER.audit(design.areas)
    if not findings:
        print("Layout meets NASA habitability guidelines")
        return 0
    for finding in findings:
        print(f"[{finding.severity}] {finding.message} - {finding.reason}")
    return 1 if any(f.severity == "error" for f in findings) else 0


def cmd_optimize(args: argparse.Namespace) -> int:
    design = load_design(args.input)
    settings = AnnealingSettings(iterations=args.iters)
    optimizer = LayoutOptimizer(settings=settings, seed=args.seed)
    result = optimizer.optimize(design.areas)
    placements = design.placements()
    placements.apply(result.areas)
    save_design(DesignFile(areas=placements.areas(), habitat=design.habitat, mission=design.mission), args.out)
    print(
        f"Optimized layout saved to {args.out}; score {result.before_score} -> {result.after_score}"
    )
    return 0


def cmd_alternatives(args: argparse.Namespace) -> int:
    design = load_design(args.input)
    optimizer = LayoutOptimizer(seed=args.seed)
    alternatives = optimizer.generate_alternatives(design.areas, count=args.count, habitat=design.habitat)
    if args.apply is not None:
        placements = optimizer.apply_alternative(args.apply, design.placements())
        save_design(
            DesignFile(areas=placements.areas(), habitat=design.habitat, mission=design.mission),
            args.out or args.input,
        )
    payload = [
        {"option": idx + 1, "score": alt.score, "description": alt.description}
        for idx, alt in enumerate(alternatives)
    ]
    print(json.dumps(payload, indent=2))
    return 0


def cmd_comply(args: argparse.Namespace) -> int:
    design = load_design(args.input)
    _require_compliance_inputs(design)
    report = generate_compliance_report(design.habitat, design.mission)  # type: ignore[arg-type]
    print(dumps(report))
    compliant = all(a.status != "non-compliant" for a in report.assessments)
    return 0 if compliant else 1


def cmd_export(args: argparse.Namespace) -> int:
    design = load_design(args.input)
    report = DEFAULT_SCORER.optimization_report(design.areas)
    findings = DEFAULT_SCORER.audit(design.areas)
    compliance = None
    if design.habitat is not None and design.mission is not None:
        compliance = generate_compliance_report(design.habitat, design.mission)

    if args.format == "md":
        output = export_markdown(report, findings, compliance)
    elif args.format == "json":
        data = {
            "layout": json.loads(dumps(report)),
            "findings": [f.dict() for f in findings],
            "compliance": json.loads(dumps(compliance)) if compliance else None,
        }
        output = json.dumps(data, indent=2)
    else:
        raise ValueError(f"Unsupported export format: {args.format}")

    if args.out:
        Path(args.out).write_text(output)
    else:
        print(output)
    return 0


def cmd_schema(args: argparse.Namespace) -> int:
    print(json.dumps(design_schema(), indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="habitat_layout")
    parser.add_argument("--log-level", default="WARNING")
    sub = parser.add_subparsers(dest="command")

    p_init = sub.add_parser("init", help="write seed configuration")
    p_init.add_argument("--out", default=None)
    p_init.set_defaults(func=cmd_init)

    p_gen = sub.add_parser("generate", help="generate default layout for a mission")
    p_gen.add_argument("--config", required=True)
    p_gen.add_argument("--out", required=True)
    p_gen.set_defaults(func=cmd_generate)

    p_score = sub.add_parser("score", help="score layout")
    p_score.add_argument("--in", dest="input", required=True)
    p_score.set_defaults(func=cmd_score)

    p_audit = sub.add_parser("audit", help="check adjacency rules")
    p_audit.add_argument("--in", dest="input", required=True)
    p_audit.set_defaults(func=cmd_audit)

    p_opt = sub.add_parser("optimize", help="optimize layout")
    p_opt.add_argument("--in", dest="input", required=True)
    p_opt.add_argument("--iters", type=int, default=100)
    p_opt.add_argument("--out", required=True)
    p_opt.add_argument("--seed", type=int, default=None)
    p_opt.set_defaults(func=cmd_optimize)

    p_alt = sub.add_parser("alternatives", help="generate ranked random layouts")
    p_alt.add_argument("--in", dest="input", required=True)
    p_alt.add_argument("--count", type=int, default=3)
    p_alt.add_argument("--seed", type=int, default=None)
    p_alt.add_argument("--apply", type=int, default=None, help="index of the option to apply")
    p_alt.add_argument("--out", default=None)
    p_alt.set_defaults(func=cmd_alternatives)

    p_comply = sub.add_parser("comply", help="standards compliance report")
    p_comply.add_argument("--in", dest="input", required=True)
    p_comply.set_defaults(func=cmd_comply)

    p_exp = sub.add_parser("export", help="export design summary")
    p_exp.add_argument("--in", dest="input", required=True)
    p_exp.add_argument("--format", choices=["md", "json"], required=True)
    p_exp.add_argument("--out", default=None)
    p_exp.set_defaults(func=cmd_export)

    p_schema = sub.add_parser("schema", help="print design file JSON schema")
    p_schema.set_defaults(func=cmd_schema)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format=LOG_FORMAT, stream=sys.stderr)
    if not hasattr(args, "func"):
        parser.print_help()
        return 1
    try:
        return int(args.func(args))
    except Exception as exc:  # pragma: no cover - CLI top-level handler
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
