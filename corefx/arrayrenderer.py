"""Sprite renderer that draws a textured quad with ``glDrawArrays``."""

from __future__ import annotations

import numpy as np

from corefx import tglm
from corefx.rect import Rect
from corefx.shader import gl

_FLOAT_SIZE = np.dtype(np.float32).itemsize

# Two triangles; each vertex is (pos.x, pos.y, tex.u, tex.v).
_QUAD_VERTICES = (
    0.0, 1.0, 0.0, 1.0,
    1.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 0.0,

    0.0, 1.0, 0.0, 1.0,
    1.0, 1.0, 1.0, 1.0,
    1.0, 0.0, 1.0, 0.0,
)


class ArrayRenderer:
    """Draws textured, tinted and rotated sprites from a unit quad."""

    VERTICES = _QUAD_VERTICES
    VERTEX_COUNT = 6

    def __init__(self, shader) -> None:
        self.shader = shader
        self.vao = gl.gen_vertex_array()
        self.vbo = gl.gen_buffer()

        data = np.asarray(self.VERTICES, dtype=np.float32).tobytes()
        gl.bind_buffer(gl.GL_ARRAY_BUFFER, self.vbo)
        gl.buffer_data(gl.GL_ARRAY_BUFFER, data, gl.GL_STATIC_DRAW)

        gl.bind_vertex_array(self.vao)
        gl.enable_vertex_attrib_array(0)
        gl.vertex_attrib_pointer(0, 4, gl.GL_FLOAT, gl.GL_FALSE, 4 * _FLOAT_SIZE, 0)
        gl.bind_buffer(gl.GL_ARRAY_BUFFER, 0)
        gl.bind_vertex_array(0)

    def draw(self, texture, position, size, angle, color) -> None:
        """Draw ``texture`` at ``position`` with ``size``, rotated by ``angle``
        radians around its centre and tinted by the RGB ``color``."""
        self.shader.use()
        model = tglm.sprite_model(position, size, angle)
        self.shader.set_matrix("model", model, True)
        self.shader.set_vector3v("spriteColor", color, True)

        gl.active_texture(gl.GL_TEXTURE0)
        texture.bind()

        gl.bind_vertex_array(self.vao)
        gl.draw_arrays(gl.GL_TRIANGLES, 0, self.VERTEX_COUNT)
        gl.bind_vertex_array(0)

    def draw_rect(self, texture, bounds: Rect, angle, color) -> None:
        """Draw ``texture`` filling the rectangle ``bounds``."""
        self.draw(texture, bounds.position(), bounds.size(), angle, color)

    def delete(self) -> None:
        """Release the vertex array and buffer; calling it again does nothing."""
        if self.vao:
            gl.delete_vertex_array(self.vao)
            self.vao = 0
        if self.vbo:
            gl.delete_buffer(self.vbo)
            self.vbo = 0