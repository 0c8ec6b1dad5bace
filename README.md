# corefx

A small framework for 2D sprite games built on pyglet, numpy and Pillow.
It provides:

- `corefx.game`: a game loop with a fixed or variable time step, frame-lag
  tracking, keyboard state and on-screen d-pad / button state;
- `corefx.shader`: GLSL shader programs with uniform setters;
- `corefx.texture`: 2D textures;
- `corefx.arrayrenderer` and `corefx.elementrenderer`: sprite renderers that
  draw a textured quad at a position and size, rotated about its centre and
  tinted by a colour;
- `corefx.resources`: a resource manager that loads shaders and textures from
  files and keeps them by name;
- `corefx.rect`: an integer `Rect` used as sprite bounds;
- `corefx.tglm`: small vector and 4×4 matrix helpers.

## Installation

Install the package with your usual Python package installer. It depends on
numpy, pyglet and pillow.

## Writing a game

Subclass `Game` (or register callables in `game.hooks["initialize"]`,
`["load_content"]`, `["update"]` and `["draw"]`) and provide the four hooks
`initialize`, `load_content`, `update` and `draw`.

`create_window()` opens a pyglet window with an OpenGL 3.0 context, enables
face culling and alpha blending, and routes key presses to
`key_callback`. Shaders and textures need this GL context, so call it before
`run()`. `run()` calls `initialize`, `load_content`, `start`, then repeats
`run_loop` (event handling plus one `tick`) until the game stops, and finally
closes the window.

```python
from corefx import tglm
from corefx.arrayrenderer import ArrayRenderer
from corefx.game import Game
from corefx.rect import Rect
from corefx.resources import ResourceManager


class Demo(Game):
    def initialize(self):
        self.resources = ResourceManager()

    def load_content(self):
        shader = self.resources.load_shader(
            "shaders/sprite.vs", "shaders/sprite.fs", "sprite"
        )
        projection = tglm.ortho(0.0, 800.0, 600.0, 0.0, -1.0, 1.0)
        shader.set_integer("image", 0, True)
        shader.set_matrix("projection", projection, True)
        self.resources.load_texture("textures/ship.png", True, "ship")
        self.renderer = ArrayRenderer(shader)

    def update(self):
        pass

    def draw(self):
        ship = self.resources.get_texture("ship")
        self.renderer.draw_rect(ship, Rect(100, 100, 64, 64), 0.0, (1.0, 1.0, 1.0))


demo = Demo("Demo", 800, 600)
demo.create_window()
demo.run()
```

The game stops when Escape is pressed, when the window is closed, or when
`should_exit` is set.

## Timing

Time is counted in 100-nanosecond ticks. With `is_fixed_time_step` set (the
default), each `tick` sleeps until at least `target_elapsed_time`
(166667 ticks, about 1/60 s) has built up, then runs as many fixed updates
as fit, capped by `max_elapsed_time` (half a second). During `update`,
`self.delta` holds the step length in seconds. More than one update in a
tick counts as lag; after five frames of lag `is_running_slowly` becomes
true until the lag clears. With `is_fixed_time_step` false, each tick runs a
single update covering all time elapsed. Setting `suppress_draw` skips the
next draw.

`clock` and `sleep` are attributes of the game and can be replaced, for
example with a fake clock in tests.

## Input

`game.keys` is a list of 1024 booleans indexed by key code. Codes follow
the numbering in `corefx.game` (`KEY_SPACE`, `KEY_ESCAPE`, `KEY_ENTER`,
`KEY_TAB`, `KEY_BACKSPACE`, `KEY_UP`, `KEY_DOWN`, `KEY_LEFT`, `KEY_RIGHT`);
printable keys use their upper-case ASCII code. `key_callback(key, action)`
takes `PRESS` or `RELEASE`.

On-screen controls are named by the `Button` enum (`DPAD_UP`, `DPAD_DOWN`,
`DPAD_LEFT`, `DPAD_RIGHT`, `BUTTON_A`) and reported through `on_click`,
`on_touch_start`, `on_touch_end` and `on_touch_cancel`. Pressing a d-pad
direction sets that direction and clears its opposite; ending or cancelling
a touch clears both directions of that axis. `BUTTON_A` maps to
`KEY_SPACE`.

## Shaders, textures and renderers

`Shader(vertex_source, fragment_source)` compiles and links a program and
raises `ShaderCompileError` (with `stage` and `log`) if a stage fails to
compile or the program fails to link. Its setters — `set_float`,
`set_integer`, `set_vector2`, `set_vector2v`, `set_vector3`,
`set_vector3v`, `set_vector4`, `set_vector4v`, `set_matrix` — make the
program current first unless `use_shader` is false.

`ResourceManager.load_shader(vertex_file, fragment_file, name)` and
`load_texture(file, alpha, name)` load from files and store the result;
textures are converted to RGB or RGBA and flipped vertically. `get_shader`
and `get_texture` raise `KeyError` for an unknown name, and `clear` forgets
everything stored.

`ArrayRenderer` and `ElementRenderer` both offer
`draw(texture, position, size, angle, color)` and
`draw_rect(texture, bounds, angle, color)`; the shader must have `model`
and `spriteColor` uniforms. `delete` frees their GPU buffers.

## Matrix helpers

Matrices are flat 16-element `float32` arrays in column-major (OpenGL)
order; vectors have 2, 3 or 4 components. `tglm` offers `clamp`, `dot`,
`norm2`, `norm`, `length`, `normalize`, `identity`, `translate`, `scale`,
`rotate`, `rotate_y`, `rotate_z`, `mat_mul` and `ortho` (which raises
`ValueError` if two clipping planes coincide). `sprite_model(position, size,
angle)` builds the model matrix the renderers use.

```python
from corefx import tglm

m = tglm.identity()
m = tglm.translate(m, (10.0, 20.0, 0.0))
m = tglm.rotate_z(m, 0.5)
length = tglm.norm((3.0, 4.0))      # 5.0
unit = tglm.normalize((0.0, 0.0, 2.0))
```

## What it does not do

corefx is a library with no command of its own. It has no audio, no text or
font rendering and no mouse input. It draws no on-screen gamepad: the
`on_click` and `on_touch_*` methods must be called by your own interface code.

## Running the tests

Install the `test` extra and run pytest from the project directory.