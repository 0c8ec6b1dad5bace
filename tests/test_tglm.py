import math

import numpy as np
import pytest

from corefx import tglm


def _apply(m, point):
    """Transform a 3D point by a column-major flat matrix."""
    mat = np.asarray(m, dtype=np.float64).reshape(4, 4).T
    x, y, z = point
    return mat @ np.array([x, y, z, 1.0])


def test_clamp_scalar():
    assert tglm.clamp(5.0, 0.0, 1.0) == 1.0
    assert tglm.clamp(-1.0, 0.0, 1.0) == 0.0
    assert tglm.clamp(0.5, 0.0, 1.0) == 0.5


def test_clamp_vector_scalar_bounds():
    result = tglm.clamp([-2.0, 0.25, 9.0], 0.0, 1.0)
    assert result.tolist() == [0.0, 0.25, 1.0]


def test_clamp_vector_vector_bounds():
    result = tglm.clamp([-2.0, 9.0], [0.0, 2.0], [1.0, 3.0])
    assert result.tolist() == [0.0, 3.0]


def test_clamp_vec4():
    result = tglm.clamp([-1.0, 0.5, 2.0, 0.75], 0.0, 1.0)
    assert result.tolist() == [0.0, 0.5, 1.0, 0.75]


def test_identity_is_diagonal():
    m = tglm.identity()
    assert m.shape == (16,)
    assert np.array_equal(m.reshape(4, 4), np.eye(4))


def test_translate_identity_sets_translation_column():
    m = tglm.translate(tglm.identity(), (2.0, 3.0, 4.0))
    assert m[12:16].tolist() == [2.0, 3.0, 4.0, 1.0]
    assert np.array_equal(m[:12], tglm.identity()[:12])


def test_translate_does_not_modify_input():
    original = tglm.identity()
    tglm.translate(original, (1.0, 1.0, 1.0))
    assert np.array_equal(original, tglm.identity())


def test_translate_moves_point():
    m = tglm.translate(tglm.identity(), (2.0, -3.0, 4.0))
    assert np.allclose(_apply(m, (1.0, 1.0, 1.0))[:3], [3.0, -2.0, 5.0])


def test_scale_scales_columns():
    m = tglm.scale(tglm.identity(), (2.0, 3.0, 4.0))
    assert np.allclose(np.diag(m.reshape(4, 4)), [2.0, 3.0, 4.0, 1.0])


def test_dot_and_norm2_agree():
    v = [1.5, -2.0, 0.5]
    assert tglm.norm2(v) == pytest.approx(tglm.dot(v, v))


def test_length_and_norm_agree():
    for v in ([3.0, 4.0], [1.0, 2.0, 2.0], [1.0, 1.0, 1.0, 1.0]):
        assert tglm.length(v) == pytest.approx(tglm.norm(v))
        assert tglm.length(v) ** 2 == pytest.approx(tglm.norm2(v), rel=1e-6)


def test_length_pythagorean():
    assert tglm.length([3.0, 4.0]) == pytest.approx(5.0)


def test_dot_size_mismatch_raises():
    with pytest.raises(ValueError):
        tglm.dot([1.0, 2.0], [1.0, 2.0, 3.0])


def test_length_rejects_bad_size():
    with pytest.raises(ValueError):
        tglm.length([1.0, 2.0, 3.0, 4.0, 5.0])


def test_normalize_unit_length():
    for v in ([3.0, 4.0], [1.0, -2.0, 7.0]):
        assert tglm.norm(tglm.normalize(v)) == pytest.approx(1.0, rel=1e-6)


def test_normalize_zero_vector_stays_zero():
    assert tglm.normalize([0.0, 0.0, 0.0]).tolist() == [0.0, 0.0, 0.0]
    assert tglm.normalize([0.0, 0.0]).tolist() == [0.0, 0.0]


def test_normalize_rejects_vec4():
    with pytest.raises(ValueError):
        tglm.normalize([1.0, 0.0, 0.0, 0.0])


def test_mat_mul_identity():
    m = tglm.translate(tglm.scale(tglm.identity(), (2.0, 3.0, 4.0)), (1.0, 2.0, 3.0))
    assert np.allclose(tglm.mat_mul(m, tglm.identity()), m)
    assert np.allclose(tglm.mat_mul(tglm.identity(), m), m)


def test_bad_matrix_raises():
    with pytest.raises(ValueError):
        tglm.translate([1.0, 2.0, 3.0], (0.0, 0.0, 0.0))


def test_rotate_zero_angle_is_identity():
    m = tglm.rotate(tglm.identity(), 0.0, (0.0, 0.0, 1.0))
    assert np.allclose(m, tglm.identity())


def test_rotate_matches_rotate_z():
    for angle in (0.3, 1.2, -2.5):
        a = tglm.rotate(tglm.identity(), angle, (0.0, 0.0, 1.0))
        b = tglm.rotate_z(tglm.identity(), angle)
        assert np.allclose(a, b, atol=1e-6)


def test_rotate_axis_need_not_be_unit():
    a = tglm.rotate(tglm.identity(), 0.7, (0.0, 0.0, 5.0))
    b = tglm.rotate(tglm.identity(), 0.7, (0.0, 0.0, 1.0))
    assert np.allclose(a, b, atol=1e-6)


def test_rotate_preserves_translation():
    m = tglm.translate(tglm.identity(), (5.0, 6.0, 7.0))
    r = tglm.rotate(m, 1.0, (1.0, 1.0, 0.0))
    assert np.allclose(r[12:16], m[12:16])


def test_rotate_z_quarter_turn_maps_x_to_y():
    m = tglm.rotate_z(tglm.identity(), math.pi / 2)
    assert np.allclose(_apply(m, (1.0, 0.0, 0.0))[:3], [0.0, 1.0, 0.0], atol=1e-6)


def test_rotate_y_is_orthonormal():
    m = tglm.rotate_y(tglm.identity(), 0.9).reshape(4, 4)
    assert np.allclose(m @ m.T, np.eye(4), atol=1e-6)


def test_ortho_maps_corners():
    proj = tglm.ortho(0.0, 800.0, 600.0, 0.0, -1.0, 1.0)
    assert np.allclose(_apply(proj, (0.0, 600.0, 0.0))[:2], [-1.0, -1.0])
    assert np.allclose(_apply(proj, (800.0, 0.0, 0.0))[:2], [1.0, 1.0])


def test_ortho_rejects_degenerate_planes():
    with pytest.raises(ValueError):
        tglm.ortho(1.0, 1.0, 0.0, 1.0, -1.0, 1.0)


def test_sprite_model_no_rotation():
    m = tglm.sprite_model((10.0, 20.0), (30.0, 40.0), 0.0)
    assert np.allclose(_apply(m, (0.0, 0.0, 0.0))[:2], [10.0, 20.0])
    assert np.allclose(_apply(m, (1.0, 1.0, 0.0))[:2], [40.0, 60.0])


def test_sprite_model_half_turn_rotates_about_centre():
    m = tglm.sprite_model((10.0, 20.0), (30.0, 40.0), math.pi)
    assert np.allclose(_apply(m, (0.0, 0.0, 0.0))[:2], [40.0, 60.0], atol=1e-4)
    assert np.allclose(_apply(m, (0.5, 0.5, 0.0))[:2], [25.0, 40.0], atol=1e-4)