"""Physical constants and fit thresholds used throughout bsmscan (GeV units)."""
from __future__ import annotations

import math

GF = 1.1663787e-5  # Fermi constant
V_EW = 1.0 / math.sqrt(math.sqrt(2.0) * GF)
PI = 3.14159265359

# on-shell gauge boson masses
M_W = 80.385
M_Z = 91.1876
M_W_SQ = M_W * M_W
M_Z_SQ = M_Z * M_Z

# on-shell weak mixing angle
S2TW = 1.0 - M_W_SQ / M_Z_SQ
C2TW = 1.0 - S2TW

# critical chi-square values chisq_crit(n sigma, dof)
CHISQ_2SIGMA_2D = 6.18
CHISQ_3SIGMA_2D = 11.83
CHISQ_2SIGMA_3D = 7.81
