"""Sprite renderer that draws an indexed textured quad with ``glDrawElements``."""

from __future__ import annotations

import numpy as np

from corefx import tglm
from corefx.rect import Rect
from corefx.shader import gl

_FLOAT_SIZE = np.dtype(np.float32).itemsize

# Each vertex is (x, y, z, u, v).
_QUAD_VERTICES = (
    0.5, 0.5, 0.0, 1.0, 1.0,     # top right
    0.5, -0.5, 0.0, 1.0, 0.0,    # bottom right
    -0.5, -0.5, 0.0, 0.0, 0.0,   # bottom left
    -0.5, 0.5, 0.0, 0.0, 1.0,    # top left
)

_QUAD_INDICES = (
    0, 1, 3,
    1, 2, 3,
)


class ElementRenderer:
    """Draws textured, tinted and rotated sprites from an indexed quad."""

    VERTICES = _QUAD_VERTICES
    INDICES = _QUAD_INDICES

    def __init__(self, shader) -> None:
        self.shader = shader
        self.vao = gl.gen_vertex_array()
        self.vbo = gl.gen_buffer()
        self.ebo = gl.gen_buffer()

        gl.bind_vertex_array(self.vao)

        vertices = np.asarray(self.VERTICES, dtype=np.float32).tobytes()
        gl.bind_buffer(gl.GL_ARRAY_BUFFER, self.vbo)
        gl.buffer_data(gl.GL_ARRAY_BUFFER, vertices, gl.GL_STATIC_DRAW)

        indices = np.asarray(self.INDICES, dtype=np.uint32).tobytes()
        gl.bind_buffer(gl.GL_ELEMENT_ARRAY_BUFFER, self.ebo)
        gl.buffer_data(gl.GL_ELEMENT_ARRAY_BUFFER, indices, gl.GL_STATIC_DRAW)

        stride = 5 * _FLOAT_SIZE
        gl.vertex_attrib_pointer(0, 3, gl.GL_FLOAT, gl.GL_FALSE, stride, 0)
        gl.enable_vertex_attrib_array(0)
        gl.vertex_attrib_pointer(1, 2, gl.GL_FLOAT, gl.GL_FALSE, stride, 3 * _FLOAT_SIZE)
        gl.enable_vertex_attrib_array(1)

    def draw(self, texture, position, size, angle, color) -> None:
        """Draw ``texture`` at ``position`` with ``size``, rotated by ``angle``
        radians around its centre and tinted by the RGB ``color``."""
        model = tglm.sprite_model(position, size, angle)
        self.shader.use()
        self.shader.set_matrix("model", model, True)
        self.shader.set_vector3v("spriteColor", color, True)
        gl.active_texture(gl.GL_TEXTURE0)
        texture.bind()
        gl.draw_elements(gl.GL_TRIANGLES, len(self.INDICES), gl.GL_UNSIGNED_INT, 0)

    def draw_rect(self, texture, bounds: Rect, angle, color) -> None:
        """Draw ``texture`` filling the rectangle ``bounds``."""
        self.draw(texture, bounds.position(), bounds.size(), angle, color)

    def delete(self) -> None:
        """Release the vertex array and buffers; calling it again does nothing."""
        if self.vao:
            gl.delete_vertex_array(self.vao)
            self.vao = 0
        if self.vbo:
            gl.delete_buffer(self.vbo)
            self.vbo = 0
        if self.ebo:
            gl.delete_buffer(self.ebo)
            self.ebo = 0