from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import ClassVar, Union

from bsmscan.constraints.severity import Severity, parse_severity
from bsmscan.models.base import ParameterPoint

logger = logging.getLogger(__name__)


class Constraint(ABC):
    """Base class of all constraints.

    Subclasses set a unique ``constraint_id`` and implement :meth:`apply`,
    which returns whether the point passes and may store results in
    ``point.data``. Calling the constraint handles the severity::

        class MassGap(Constraint):
            constraint_id = "MassGap"

            def apply(self, point):
                point.data.put("gap", point.mHp - point.mA)
                return abs(point.data["gap"]) < 200.0

        ok = MassGap("ignore")(point)

    A constraint that reads annotations written by another one has to run
    after it in the pipeline; this is documented on the constraint and not
    checked.
    """

    constraint_id: ClassVar[str] = ""

    def __init__(self, severity: Union[Severity, int, str]) -> None:
        self.severity = parse_severity(severity)

    @abstractmethod
    def apply(self, point: ParameterPoint) -> bool:
        ...

    def __call__(self, point: ParameterPoint) -> bool:
        if self.severity is Severity.skip:
            return True
        passed = bool(self.apply(point))
        logger.debug("%s: %s (%s)", self.constraint_id, "pass" if passed else "fail", self.severity)
        if self.severity is Severity.ignore:
            point.data.put(f"valid_{self.constraint_id}", 1.0 if passed else 0.0)
            return True
        return passed

    def __repr__(self) -> str:
        return f"{type(self).__name__}(severity={self.severity})"
