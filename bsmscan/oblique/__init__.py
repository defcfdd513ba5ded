from bsmscan.oblique.engine import ObliqueEngine
from bsmscan.oblique.fit import GFITTER_2018, FitReference, chisq, critical_chisq
from bsmscan.oblique.loops import F, G, G2, func_f
from bsmscan.oblique.parameters import ObliqueInput, ObliqueResult

__all__ = [
    "F",
    "FitReference",
    "G",
    "G2",
    "GFITTER_2018",
    "ObliqueEngine",
    "ObliqueInput",
    "ObliqueResult",
    "chisq",
    "critical_chisq",
    "func_f",
]
