from bsmscan.constraints.base import Constraint
from bsmscan.constraints.pipeline import Pipeline
from bsmscan.constraints.severity import Severity, parse_severity
from bsmscan.constraints.stu import STU

__all__ = ["Constraint", "Pipeline", "STU", "Severity", "parse_severity"]
