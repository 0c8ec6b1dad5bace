import pytest

from corefx import texture as texture_module
from corefx.texture import Texture2D


class FakeGL:
    GL_TEXTURE_2D = 0x0DE1
    GL_REPEAT = 0x2901
    GL_LINEAR = 0x2601
    GL_TEXTURE_WRAP_S = 0x2802
    GL_TEXTURE_WRAP_T = 0x2803
    GL_TEXTURE_MIN_FILTER = 0x2801
    GL_TEXTURE_MAG_FILTER = 0x2800
    GL_UNSIGNED_BYTE = 0x1401
    GL_RGB = 0x1907
    GL_RGBA = 0x1908

    def __init__(self):
        self.next_id = 7
        self.bound = []
        self.images = []
        self.params = {}

    def gen_texture(self):
        value = self.next_id
        self.next_id += 1
        return value

    def bind_texture(self, target, texture_id):
        self.bound.append(texture_id)

    def tex_image_2d(self, target, level, internal, width, height, border, fmt, kind, data):
        self.images.append(
            {
                "internal": internal,
                "width": width,
                "height": height,
                "format": fmt,
                "type": kind,
                "data": data,
            }
        )

    def tex_parameteri(self, target, pname, value):
        self.params[pname] = value


@pytest.fixture
def fake_gl(monkeypatch):
    fake = FakeGL()
    monkeypatch.setattr(texture_module, "gl", fake)
    return fake


def test_defaults(fake_gl):
    tex = Texture2D(FakeGL.GL_RGBA, FakeGL.GL_RGBA, "img.png")
    assert tex.id == 7
    assert tex.path == "img.png"
    assert (tex.width, tex.height) == (0, 0)
    assert tex.wrap_s == tex.wrap_t == FakeGL.GL_REPEAT
    assert tex.filter_min == tex.filter_mag == FakeGL.GL_LINEAR


def test_each_texture_gets_its_own_id(fake_gl):
    a = Texture2D(FakeGL.GL_RGB, FakeGL.GL_RGB, "a.png")
    b = Texture2D(FakeGL.GL_RGB, FakeGL.GL_RGB, "b.png")
    assert b.id == a.id + 1


def test_generate_uploads_and_unbinds(fake_gl):
    tex = Texture2D(FakeGL.GL_RGB, FakeGL.GL_RGB, "a.png")
    pixels = bytes(range(12))
    tex.generate(2, 2, pixels)
    assert (tex.width, tex.height) == (2, 2)
    image = fake_gl.images[-1]
    assert image["data"] == pixels
    assert image["internal"] == FakeGL.GL_RGB
    assert image["format"] == FakeGL.GL_RGB
    assert image["type"] == FakeGL.GL_UNSIGNED_BYTE
    assert fake_gl.bound == [tex.id, 0]


def test_generate_sets_parameters(fake_gl):
    tex = Texture2D(FakeGL.GL_RGBA, FakeGL.GL_RGBA, "a.png")
    tex.wrap_s = 0x812F
    tex.generate(1, 1, b"\x00\x00\x00\x00")
    assert fake_gl.params[FakeGL.GL_TEXTURE_WRAP_S] == tex.wrap_s == 0x812F
    assert fake_gl.params[FakeGL.GL_TEXTURE_WRAP_T] == FakeGL.GL_REPEAT
    assert fake_gl.params[FakeGL.GL_TEXTURE_MIN_FILTER] == FakeGL.GL_LINEAR
    assert fake_gl.params[FakeGL.GL_TEXTURE_MAG_FILTER] == FakeGL.GL_LINEAR


def test_generate_without_data(fake_gl):
    tex = Texture2D(FakeGL.GL_RGB, FakeGL.GL_RGB, "a.png")
    tex.generate(4, 3, None)
    assert (tex.width, tex.height) == (4, 3)
    assert fake_gl.images[-1]["data"] is None
    assert fake_gl.images[-1]["width"] == tex.width


def test_generate_negative_size_raises(fake_gl):
    tex = Texture2D(FakeGL.GL_RGB, FakeGL.GL_RGB, "a.png")
    with pytest.raises(ValueError):
        tex.generate(-1, 2, None)


def test_bind(fake_gl):
    tex = Texture2D(FakeGL.GL_RGB, FakeGL.GL_RGB, "a.png")
    tex.bind()
    assert fake_gl.bound == [tex.id]