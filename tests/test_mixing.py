import numpy as np
import pytest

from bsmscan.utils.mixing import mix_mat_3d, mix_mat_angles_3d, mix_mat_normal_form_3d, ordered_mix_mat_3d


def test_mix_mat_is_orthogonal():
    R = mix_mat_3d(0.3, -1.1, 0.7)
    assert np.allclose(R @ R.T, np.eye(3))
    assert np.linalg.det(R) == pytest.approx(1.0)


def test_angles_roundtrip():
    angles = (0.4, -0.2, 1.3)
    assert mix_mat_angles_3d(mix_mat_3d(*angles)) == pytest.approx(angles)


def test_normal_form_flips_rows():
    R = mix_mat_3d(0.4, -0.2, 1.3)
    flipped = R.copy()
    flipped[0] *= -1
    flipped[2] *= -1
    normal = mix_mat_normal_form_3d(flipped)
    assert np.allclose(normal, R)
    # input untouched
    assert flipped[0, 0] < 0


def test_ordered_by_mass():
    masses, R = ordered_mix_mat_3d(0.4, -0.2, 1.3, [500.0, 125.0, 300.0])
    assert list(masses) == [125.0, 300.0, 500.0]
    reference = mix_mat_3d(0.4, -0.2, 1.3)
    # rows follow their masses up to a sign
    assert np.allclose(np.abs(R[0]), np.abs(reference[1]))
    assert np.allclose(np.abs(R[1]), np.abs(reference[2]))
    assert np.allclose(np.abs(R[2]), np.abs(reference[0]))
    assert R[0, 0] >= 0 and R[2, 2] >= 0
    assert np.linalg.det(R) == pytest.approx(1.0)
