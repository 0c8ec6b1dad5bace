"""GLSL shader programs and their uniform setters."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Sequence, Tuple, Union

import numpy as np

VectorLike = Union[Sequence[float], np.ndarray]


@lru_cache(maxsize=None)
def _pyglet_gl():
    from pyglet import gl as pyglet_gl

    return pyglet_gl


class ShaderCompileError(RuntimeError):
    """A shader stage failed to compile or the program failed to link."""

    def __init__(self, stage: str, log: str) -> None:
        kind = "Link-time" if stage == "PROGRAM" else "Compile-time"
        super().__init__(f"{kind} error: type: {stage}\n{log}")
        self.stage = stage
        self.log = log


class _PygletGL:
    """OpenGL calls through pyglet, taking and returning plain Python values.

    ``GL_*`` constants are looked up in pyglet on first use.
    """

    _STAGE_KINDS = {"VERTEX": "vertex", "FRAGMENT": "fragment"}

    def __init__(self) -> None:
        self._programs: dict = {}

    def __getattr__(self, name: str):
        if name.startswith("GL_"):
            return getattr(_pyglet_gl(), name)
        raise AttributeError(name)

    # Shaders and programs

    def compile_shader(self, stage: str, source: str) -> Any:
        from pyglet.graphics.shader import Shader as PygletShader
        from pyglet.graphics.shader import ShaderException

        try:
            return PygletShader(source, self._STAGE_KINDS[stage])
        except ShaderException as exc:
            raise ShaderCompileError(stage, str(exc)) from exc

    def delete_shader(self, shader: Any) -> None:
        shader.delete()

    def link_program(self, vertex: Any, fragment: Any) -> int:
        from pyglet.graphics.shader import ShaderException, ShaderProgram

        try:
            program = ShaderProgram(vertex, fragment)
        except ShaderException as exc:
            raise ShaderCompileError("PROGRAM", str(exc)) from exc
        # Keep the program object alive for as long as its id is in use.
        self._programs[program.id] = program
        return program.id

    def use_program(self, program_id: int) -> None:
        _pyglet_gl().glUseProgram(program_id)

    def uniform_location(self, program_id: int, name: str) -> int:
        gl = _pyglet_gl()
        raw = name.encode("utf-8")
        buffer = (gl.GLchar * (len(raw) + 1))()
        buffer.value = raw
        return gl.glGetUniformLocation(program_id, buffer)

    @staticmethod
    def _floats(values: Sequence[float]):
        gl = _pyglet_gl()
        return (gl.GLfloat * len(values))(*values)

    def uniform1f(self, location: int, value: float) -> None:
        _pyglet_gl().glUniform1f(location, value)

    def uniform1i(self, location: int, value: int) -> None:
        _pyglet_gl().glUniform1i(location, value)

    def uniform2f(self, location: int, x: float, y: float) -> None:
        _pyglet_gl().glUniform2f(location, x, y)

    def uniform3f(self, location: int, x: float, y: float, z: float) -> None:
        _pyglet_gl().glUniform3f(location, x, y, z)

    def uniform4f(self, location: int, x: float, y: float, z: float, w: float) -> None:
        _pyglet_gl().glUniform4f(location, x, y, z, w)

    def uniform2fv(self, location: int, values: Sequence[float]) -> None:
        _pyglet_gl().glUniform2fv(location, 1, self._floats(values))

    def uniform3fv(self, location: int, values: Sequence[float]) -> None:
        _pyglet_gl().glUniform3fv(location, 1, self._floats(values))

    def uniform4fv(self, location: int, values: Sequence[float]) -> None:
        _pyglet_gl().glUniform4fv(location, 1, self._floats(values))

    def uniform_matrix4fv(self, location: int, values: Sequence[float]) -> None:
        gl = _pyglet_gl()
        gl.glUniformMatrix4fv(location, 1, gl.GL_FALSE, self._floats(values))

    # Textures

    def gen_texture(self) -> int:
        gl = _pyglet_gl()
        texture_id = gl.GLuint(0)
        gl.glGenTextures(1, texture_id)
        return texture_id.value

    def bind_texture(self, target: int, texture_id: int) -> None:
        _pyglet_gl().glBindTexture(target, texture_id)

    def tex_image_2d(
        self,
        target: int,
        level: int,
        internal_format: int,
        width: int,
        height: int,
        border: int,
        image_format: int,
        pixel_type: int,
        data,
    ) -> None:
        _pyglet_gl().glTexImage2D(
            target, level, internal_format, width, height, border,
            image_format, pixel_type, data,
        )

    def tex_parameteri(self, target: int, pname: int, value: int) -> None:
        _pyglet_gl().glTexParameteri(target, pname, value)

    def active_texture(self, unit: int) -> None:
        _pyglet_gl().glActiveTexture(unit)

    # Vertex arrays and buffers

    def gen_vertex_array(self) -> int:
        gl = _pyglet_gl()
        vao = gl.GLuint(0)
        gl.glGenVertexArrays(1, vao)
        return vao.value

    def gen_buffer(self) -> int:
        gl = _pyglet_gl()
        buffer = gl.GLuint(0)
        gl.glGenBuffers(1, buffer)
        return buffer.value

    def delete_vertex_array(self, vao: int) -> None:
        gl = _pyglet_gl()
        gl.glDeleteVertexArrays(1, gl.GLuint(vao))

    def delete_buffer(self, buffer: int) -> None:
        gl = _pyglet_gl()
        gl.glDeleteBuffers(1, gl.GLuint(buffer))

    def bind_buffer(self, target: int, buffer: int) -> None:
        _pyglet_gl().glBindBuffer(target, buffer)

    def buffer_data(self, target: int, data: bytes, usage: int) -> None:
        _pyglet_gl().glBufferData(target, len(data), data, usage)

    def bind_vertex_array(self, vao: int) -> None:
        _pyglet_gl().glBindVertexArray(vao)

    def enable_vertex_attrib_array(self, index: int) -> None:
        _pyglet_gl().glEnableVertexAttribArray(index)

    def vertex_attrib_pointer(
        self, index: int, size: int, kind: int, normalized: int, stride: int, offset: int
    ) -> None:
        _pyglet_gl().glVertexAttribPointer(
            index, size, kind, normalized, stride, offset or None
        )

    def draw_arrays(self, mode: int, first: int, count: int) -> None:
        _pyglet_gl().glDrawArrays(mode, first, count)

    def draw_elements(self, mode: int, count: int, index_type: int, offset: int) -> None:
        _pyglet_gl().glDrawElements(mode, count, index_type, offset or None)


gl = _PygletGL()


def _float_values(values: VectorLike, size: int, what: str) -> Tuple[float, ...]:
    arr = np.asarray(values, dtype=np.float32).reshape(-1)
    if arr.shape[0] != size:
        raise ValueError(f"{what} needs {size} components, got {arr.shape[0]}")
    return tuple(float(v) for v in arr)


class Shader:
    """A linked vertex + fragment shader program."""

    def __init__(self, vertex_source: str, fragment_source: str) -> None:
        self.program_id = 0
        self.compile(vertex_source, fragment_source)

    def use(self) -> "Shader":
        """Make this program current and return it."""
        gl.use_program(self.program_id)
        return self

    def compile(self, vertex_source: str, fragment_source: str) -> None:
        """Compile both stages and link them into this program."""
        vertex = gl.compile_shader("VERTEX", vertex_source)
        try:
            fragment = gl.compile_shader("FRAGMENT", fragment_source)
        except ShaderCompileError:
            gl.delete_shader(vertex)
            raise

        try:
            program = gl.link_program(vertex, fragment)
        finally:
            # The stages are linked into the program and no longer needed.
            gl.delete_shader(vertex)
            gl.delete_shader(fragment)
        self.program_id = program

    def _location(self, name: str, use_shader: bool) -> int:
        if use_shader:
            self.use()
        return gl.uniform_location(self.program_id, name)

    def set_float(self, name: str, value: float, use_shader: bool = True) -> None:
        location = self._location(name, use_shader)
        gl.uniform1f(location, float(value))

    def set_integer(self, name: str, value: int, use_shader: bool = True) -> None:
        location = self._location(name, use_shader)
        gl.uniform1i(location, int(value))

    def set_vector2(self, name: str, x: float, y: float, use_shader: bool = True) -> None:
        location = self._location(name, use_shader)
        gl.uniform2f(location, float(x), float(y))

    def set_vector2v(self, name: str, vector: VectorLike, use_shader: bool = True) -> None:
        values = _float_values(vector, 2, "vec2")
        location = self._location(name, use_shader)
        gl.uniform2fv(location, values)

    def set_vector3(
        self, name: str, x: float, y: float, z: float, use_shader: bool = True
    ) -> None:
        location = self._location(name, use_shader)
        gl.uniform3f(location, float(x), float(y), float(z))

    def set_vector3v(self, name: str, vector: VectorLike, use_shader: bool = True) -> None:
        values = _float_values(vector, 3, "vec3")
        location = self._location(name, use_shader)
        gl.uniform3fv(location, values)

    def set_vector4(
        self,
        name: str,
        x: float,
        y: float,
        z: float,
        w: float,
        use_shader: bool = True,
    ) -> None:
        location = self._location(name, use_shader)
        gl.uniform4f(location, float(x), float(y), float(z), float(w))

    def set_vector4v(self, name: str, vector: VectorLike, use_shader: bool = True) -> None:
        values = _float_values(vector, 4, "vec4")
        location = self._location(name, use_shader)
        gl.uniform4fv(location, values)

    def set_matrix(self, name: str, matrix: VectorLike, use_shader: bool = True) -> None:
        """Upload a 16-element column-major matrix (or a 4x4 array)."""
        values = _float_values(matrix, 16, "mat4")
        location = self._location(name, use_shader)
        gl.uniform_matrix4fv(location, values)