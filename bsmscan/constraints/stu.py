from __future__ import annotations

from typing import Type, Union

from bsmscan import constants
from bsmscan.constraints.base import Constraint
from bsmscan.constraints.severity import Severity
from bsmscan.models.base import Model, ParameterPoint
from bsmscan.oblique.engine import ObliqueEngine
from bsmscan.oblique.fit import GFITTER_2018, FitReference, chisq


class STU(Constraint):
    """Constraint from the oblique parameters S, T and U.

    Stores ``S``, ``T``, ``U`` and their chi-square against the electroweak
    fit as ``STU_chisq``. The point passes if ``model.ewp_valid`` holds and
    the chi-square is below ``chisq_crit``.

    Keeps one :class:`ObliqueEngine` with reusable workspaces, so a single
    instance must not be used from several threads at once.
    """

    constraint_id = "STU"

    def __init__(
        self,
        model: Type[Model],
        severity: Union[Severity, int, str],
        chisq_crit: float = constants.CHISQ_2SIGMA_3D,
        mhref: float = GFITTER_2018.mhref,
        fit: FitReference = GFITTER_2018,
    ) -> None:
        super().__init__(severity)
        self.model = model
        self.chisq_crit = chisq_crit
        self.fit = fit
        self.engine = ObliqueEngine(model.n_hzero, model.n_hplus, mhref=mhref)

    def apply(self, point: ParameterPoint) -> bool:
        result = self.engine.evaluate(self.model.stu_input(point))
        point.data.put("S", result.S)
        point.data.put("T", result.T)
        point.data.put("U", result.U)
        point.data.put("STU_chisq", chisq(result.S, result.T, result.U, self.fit))
        # NaN fails the comparison
        return self.model.ewp_valid(point) and point.data["STU_chisq"] < self.chisq_crit
