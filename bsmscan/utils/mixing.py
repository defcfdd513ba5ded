from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np


def mix_mat_3d(a1: float, a2: float, a3: float) -> np.ndarray:
    """Orthogonal 3x3 mixing matrix R from three angles.

    Rows are mass eigenstates, columns gauge eigenstates. Same
    parametrisation as arXiv:1612.01309.
    """
    c1, s1 = np.cos(a1), np.sin(a1)
    c2, s2 = np.cos(a2), np.sin(a2)
    c3, s3 = np.cos(a3), np.sin(a3)
    return np.array(
        [
            [c1 * c2, s1 * c2, s2],
            [-(s1 * c3 + c1 * s2 * s3), c1 * c3 - s1 * s2 * s3, c2 * s3],
            [s1 * s3 - c1 * s2 * c3, -(c1 * s3 + s1 * s2 * c3), c2 * c3],
        ]
    )


def mix_mat_angles_3d(mix_mat: np.ndarray) -> Tuple[float, float, float]:
    """Inverse of :func:`mix_mat_3d` for a matrix in normal form; angles in [-pi/2, pi/2)."""
    return (
        float(np.arctan(mix_mat[0, 1] / mix_mat[0, 0])),
        float(np.arcsin(mix_mat[0, 2])),
        float(np.arctan(mix_mat[1, 2] / mix_mat[2, 2])),
    )


def mix_mat_normal_form_3d(mix_mat: np.ndarray) -> np.ndarray:
    # row sign flips leave the physics unchanged
    out = np.array(mix_mat, dtype=float)
    if out[0, 0] < 0:
        out[0] *= -1
    if out[2, 2] < 0:
        out[2] *= -1
    if np.linalg.det(out) < 0:
        out[1] *= -1
    return out


def ordered_mix_mat_3d(a1: float, a2: float, a3: float, masses: Sequence[float]) -> Tuple[np.ndarray, np.ndarray]:
    """Mixing matrix with rows sorted by ascending mass, in normal form.

    Returns the sorted masses alongside the matrix.
    """
    order = np.argsort(np.asarray(masses, dtype=float), kind="stable")
    mix = mix_mat_3d(a1, a2, a3)[order]
    return np.asarray(masses, dtype=float)[order], mix_mat_normal_form_3d(mix)
