import numpy as np

from corefx import tglm
from corefx.rect import Rect


def test_defaults_are_zero():
    r = Rect()
    assert (r.x, r.y, r.w, r.h) == (0, 0, 0, 0)


def test_position_and_size():
    r = Rect(1, 2, 3, 4)
    assert r.position() == (1, 2)
    assert r.size() == (3, 4)


def test_fields_are_mutable():
    r = Rect(1, 2, 3, 4)
    r.x = 7
    r.h = 9
    assert r.position() == (7, 2)
    assert r.size() == (3, 9)


def test_equality():
    assert Rect(1, 2, 3, 4) == Rect(x=1, y=2, w=3, h=4)
    assert not Rect(1, 2, 3, 4) == Rect(1, 2, 3, 5)


def test_rect_drives_sprite_model():
    r = Rect(5, 6, 7, 8)
    m = tglm.sprite_model(r.position(), r.size(), 0.0)
    corner = np.asarray(m, dtype=np.float64).reshape(4, 4).T @ np.array([1.0, 1.0, 0.0, 1.0])
    assert np.allclose(corner[:2], [r.x + r.w, r.y + r.h])