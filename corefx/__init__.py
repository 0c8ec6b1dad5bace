"""Small 2D sprite game framework: game loop, shaders, textures, sprite renderers, resources and matrix helpers."""

__version__ = "0.1.0"

__all__ = [
    "arrayrenderer",
    "elementrenderer",
    "game",
    "rect",
    "resources",
    "shader",
    "texture",
    "tglm",
]