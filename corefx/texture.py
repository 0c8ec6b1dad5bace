"""2D OpenGL textures."""

from __future__ import annotations

from typing import Optional

from corefx.shader import gl


class Texture2D:
    """A GL texture object with its formats, wrap and filter modes."""

    def __init__(self, internal_format: int, image_format: int, path: str) -> None:
        self.path = str(path)
        self.width = 0
        self.height = 0
        self.wrap_s = gl.GL_REPEAT
        self.wrap_t = gl.GL_REPEAT
        self.filter_min = gl.GL_LINEAR
        self.filter_mag = gl.GL_LINEAR
        self.internal_format = internal_format
        self.image_format = image_format
        self.id = gl.gen_texture()

    def generate(self, width: int, height: int, data: Optional[bytes]) -> None:
        """Upload ``width`` x ``height`` pixels of unsigned bytes and set parameters."""
        if width < 0 or height < 0:
            raise ValueError("texture dimensions must not be negative")
        self.width = int(width)
        self.height = int(height)
        pixels = None if data is None else bytes(data)

        gl.bind_texture(gl.GL_TEXTURE_2D, self.id)
        gl.tex_image_2d(
            gl.GL_TEXTURE_2D,
            0,
            self.internal_format,
            self.width,
            self.height,
            0,
            self.image_format,
            gl.GL_UNSIGNED_BYTE,
            pixels,
        )
        gl.tex_parameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_S, self.wrap_s)
        gl.tex_parameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_T, self.wrap_t)
        gl.tex_parameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MIN_FILTER, self.filter_min)
        gl.tex_parameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MAG_FILTER, self.filter_mag)
        gl.bind_texture(gl.GL_TEXTURE_2D, 0)

    def bind(self) -> None:
        """Bind this texture to the 2D texture target."""
        gl.bind_texture(gl.GL_TEXTURE_2D, self.id)