"""Run parameter points through a constraint pipeline and collect the survivors."""
from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Tuple, Type

import pandas as pd
from rich.logging import RichHandler

from bsmscan.config import ScanConfig
from bsmscan.constraints.pipeline import Pipeline
from bsmscan.constraints.stu import STU
from bsmscan.models.base import Model, ParameterPoint

logger = logging.getLogger(__name__)


@dataclass
class CheckSummary:
    results: pd.DataFrame
    n_points: int
    n_valid: int
    rejected: Dict[str, int] = field(default_factory=dict)


def setup_logging(output_dir: Path | None = None, level: str = "INFO") -> Path | None:
    """Log to the console and, if ``output_dir`` is given, to ``logs.txt`` in it."""
    handlers: List[logging.Handler] = [RichHandler(show_path=False)]
    log_path = None
    if output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)
        log_path = output_dir / "logs.txt"
        file_handler = logging.FileHandler(log_path, mode="w")
        file_handler.setFormatter(logging.Formatter("[%(asctime)s] %(name)s %(message)s", datefmt="%Y-%m-%d %H:%M:%S"))
        handlers.append(file_handler)
    logging.basicConfig(level=level.upper(), format="%(message)s", handlers=handlers, force=True)
    return log_path


def build_pipeline(model: Type[Model], config: ScanConfig) -> Pipeline:
    return Pipeline(
        [
            STU(
                model,
                config.severity(STU.constraint_id),
                chisq_crit=config.stu.critical_value(),
                mhref=config.stu.mhref,
            ),
        ]
    )


def check_points(points: Iterable[Tuple[str, ParameterPoint]], pipeline: Pipeline) -> CheckSummary:
    """Apply ``pipeline`` to each point; valid points end up as rows of the result table."""
    rows = []
    rejected: Counter = Counter()
    n_points = 0
    for point_id, point in points:
        n_points += 1
        failed = pipeline.first_failure(point)
        if failed is not None:
            rejected[failed] += 1
            continue
        row = {"id": point_id}
        row.update(point.parameters())
        row.update(point.data.to_dict())
        rows.append(row)
    n_valid = len(rows)
    logger.info("%d of %d points passed %s", n_valid, n_points, ", ".join(pipeline.ids))
    for constraint_id, count in rejected.items():
        logger.info("  %s rejected %d points", constraint_id, count)
    results = pd.DataFrame(rows)
    if not results.empty:
        results = results.set_index("id")
    return CheckSummary(results=results, n_points=n_points, n_valid=n_valid, rejected=dict(rejected))


def read_points(path: Path, model: Type[Model]) -> List[Tuple[str, ParameterPoint]]:
    """Read points from a tab separated table whose first column is the point id."""
    table = pd.read_csv(path, sep="\t", index_col=0, float_precision="round_trip")
    missing = set(model.input_columns) - set(table.columns)
    if missing:
        raise ValueError(f"Missing columns {sorted(missing)} in {path}")
    return [(str(point_id), model.from_row(row)) for point_id, row in table.iterrows()]


def write_results(summary: CheckSummary, out_path: Path) -> None:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    summary.results.to_csv(out_path, sep="\t")
