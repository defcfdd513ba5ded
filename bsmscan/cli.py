from __future__ import annotations

import argparse
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List

import yaml
from rich.console import Console
from rich.table import Table

from bsmscan.config import load_scan_config
from bsmscan.constraints.stu import STU
from bsmscan.models import MODELS
from bsmscan.oblique.fit import GFITTER_2018, chisq
from bsmscan.scan import build_pipeline, check_points, read_points, setup_logging, write_results

console = Console()


def _timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def _parse_assignments(items: List[str]) -> Dict[str, float]:
    values = {}
    for item in items:
        name, sep, value = item.partition("=")
        if not sep:
            raise argparse.ArgumentTypeError(f"Expected name=value, got {item}")
        values[name.strip()] = float(value)
    return values


def cmd_check(args: argparse.Namespace) -> None:
    config = load_scan_config(
        Path(args.default_config),
        Path(args.config) if args.config else None,
        {
            "model": args.model,
            "results_root": args.out_dir,
            "severities": {STU.constraint_id: args.stu} if args.stu else None,
        },
    )
    run_dir = Path(config.results_root) / f"check_{_timestamp()}"
    setup_logging(run_dir, config.log_level)
    model = MODELS[config.model]
    pipeline = build_pipeline(model, config)
    points = read_points(Path(args.input), model)
    summary = check_points(points, pipeline)

    out_path = Path(args.out) if args.out else run_dir / "valid_points.tsv"
    write_results(summary, out_path)
    (run_dir / "config_used.yaml").write_text(yaml.safe_dump(config.model_dump(mode="json")))
    console.log(f"{summary.n_valid}/{summary.n_points} points valid, written to {out_path}")


def cmd_stu(args: argparse.Namespace) -> None:
    model = MODELS[args.model]
    point = model.from_row(_parse_assignments(args.param))
    constraint = STU(model, "ignore", chisq_crit=args.chisq_crit, mhref=args.mhref)
    constraint(point)

    table = Table(title=f"Oblique parameters ({model.description})")
    table.add_column("quantity")
    table.add_column("value", justify="right")
    for key, value in point.data.items():
        table.add_row(key, f"{value:.6g}")
    console.print(table)


def cmd_chisq(args: argparse.Namespace) -> None:
    value = chisq(args.S, args.T, args.U, GFITTER_2018)
    console.print(f"chisq = {value:.6g}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bsmscan")
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Run the constraints on a table of parameter points")
    check.add_argument("--input", required=True, help="tab separated points, first column is the id")
    check.add_argument("--model", choices=sorted(MODELS))
    check.add_argument("--out")
    check.add_argument("--out-dir")
    check.add_argument("--config")
    check.add_argument("--default-config", default="default_config.yaml")
    check.add_argument("--STU", dest="stu", help="severity of the STU constraint: apply, ignore or skip")
    check.set_defaults(func=cmd_check)

    stu = sub.add_parser("stu", help="Oblique parameters of a single point")
    stu.add_argument("--model", choices=sorted(MODELS), required=True)
    stu.add_argument("--param", nargs="+", required=True, help="input parameters as name=value")
    stu.add_argument("--chisq-crit", type=float, default=7.81)
    stu.add_argument("--mhref", type=float, default=GFITTER_2018.mhref)
    stu.set_defaults(func=cmd_stu)

    fit = sub.add_parser("chisq", help="Chi-square of S, T, U against the electroweak fit")
    fit.add_argument("S", type=float)
    fit.add_argument("T", type=float)
    fit.add_argument("U", type=float)
    fit.set_defaults(func=cmd_chisq)

    return parser


def main(argv: List[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
