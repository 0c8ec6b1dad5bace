"""Named cache of shaders and textures loaded from files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Union

from PIL import Image, ImageOps

from corefx.shader import Shader, gl
from corefx.texture import Texture2D

PathLike = Union[str, "os.PathLike[str]"]


class ResourceManager:
    """Loads shaders and textures and keeps them under a name."""

    def __init__(self) -> None:
        self.shaders: Dict[str, Shader] = {}
        self.textures: Dict[str, Texture2D] = {}

    def load_shader(self, vertex_file: PathLike, fragment_file: PathLike, name: str) -> Shader:
        """Compile a program from two source files and store it as ``name``."""
        vertex_source = Path(vertex_file).read_text(encoding="utf-8")
        fragment_source = Path(fragment_file).read_text(encoding="utf-8")
        self.shaders[name] = Shader(vertex_source, fragment_source)
        return self.shaders[name]

    def get_shader(self, name: str) -> Shader:
        """Return the shader stored as ``name``; raise KeyError if there is none."""
        try:
            return self.shaders[name]
        except KeyError:
            raise KeyError(f"no shader named {name!r}") from None

    def load_texture(self, file: PathLike, alpha: bool, name: str) -> Texture2D:
        """Load an image file into a texture and store it as ``name``.

        The image is flipped vertically so that its first row is the bottom one.
        """
        image_format = gl.GL_RGBA if alpha else gl.GL_RGB
        mode = "RGBA" if alpha else "RGB"
        texture = Texture2D(image_format, image_format, str(file))
        with Image.open(file) as image:
            pixels = ImageOps.flip(image.convert(mode))
            texture.generate(pixels.width, pixels.height, pixels.tobytes())
        self.textures[name] = texture
        return texture

    def get_texture(self, name: str) -> Texture2D:
        """Return the texture stored as ``name``; raise KeyError if there is none."""
        try:
            return self.textures[name]
        except KeyError:
            raise KeyError(f"no texture named {name!r}") from None

    def clear(self) -> None:
        """Forget every stored shader and texture."""
        self.shaders = {}
        self.textures = {}