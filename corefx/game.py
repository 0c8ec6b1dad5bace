"""Fixed or variable time-step game loop with keyboard and on-screen gamepad input."""

from __future__ import annotations

import time
from enum import Enum
from typing import Callable, Dict, List, Optional, Union

from corefx.shader import gl

TICKS_PER_MILLISECOND = 10000.0
MILLISECONDS_PER_TICK = 1.0 / TICKS_PER_MILLISECOND
TICKS_PER_SECOND = TICKS_PER_MILLISECOND * 1000.0
SECONDS_PER_TICK = 1.0 / TICKS_PER_SECOND

KEY_COUNT = 1024

# Key codes follow the GLFW numbering.
KEY_SPACE = 32
KEY_ESCAPE = 256
KEY_ENTER = 257
KEY_TAB = 258
KEY_BACKSPACE = 259
KEY_RIGHT = 262
KEY_LEFT = 263
KEY_DOWN = 264
KEY_UP = 265

RELEASE = 0
PRESS = 1
REPEAT = 2

DEFAULT_TARGET_ELAPSED_TIME = 166667
DEFAULT_MAX_ELAPSED_TIME = int(500 * TICKS_PER_MILLISECOND)

HOOK_NAMES = ("initialize", "load_content", "update", "draw")


def _system_ticks() -> int:
    """Current time in 100-nanosecond ticks."""
    return time.monotonic_ns() // 100


class Button(Enum):
    """On-screen gamepad controls, valued by their element id."""

    DPAD_UP = "#dpad-up"
    DPAD_DOWN = "#dpad-down"
    DPAD_LEFT = "#dpad-left"
    DPAD_RIGHT = "#dpad-right"
    BUTTON_A = "#button-a"


# Keys set by pressing a control.
_PRESS_KEYS = {
    Button.DPAD_UP: ((KEY_UP, True), (KEY_DOWN, False)),
    Button.DPAD_DOWN: ((KEY_UP, False), (KEY_DOWN, True)),
    Button.DPAD_LEFT: ((KEY_LEFT, True), (KEY_RIGHT, False)),
    Button.DPAD_RIGHT: ((KEY_LEFT, False), (KEY_RIGHT, True)),
    Button.BUTTON_A: ((KEY_SPACE, True),),
}

# Keys cleared when a touch on a control ends.
_RELEASE_KEYS = {
    Button.DPAD_UP: (KEY_UP, KEY_DOWN),
    Button.DPAD_DOWN: (KEY_UP, KEY_DOWN),
    Button.DPAD_LEFT: (KEY_LEFT, KEY_RIGHT),
    Button.DPAD_RIGHT: (KEY_LEFT, KEY_RIGHT),
    Button.BUTTON_A: (KEY_SPACE,),
}


class Game:
    """Base game: subclass it and override the four hooks, or register callbacks.

    ``initialize``, ``load_content``, ``update`` and ``draw`` are called by
    ``run`` and ``tick``; by default each runs the callables listed under its
    name in ``self.hooks``.  Times are counted in 100-nanosecond ticks.
    """

    def __init__(self, title: str, width: int, height: int) -> None:
        self.title = str(title)
        self.width = int(width)
        self.height = int(height)
        self.keys = [False] * KEY_COUNT
        self.window = None
        self.clock: Callable[[], int] = _system_ticks
        self.sleep: Callable[[float], None] = time.sleep
        self.hooks: Dict[str, List[Callable[[], None]]] = {
            name: [] for name in HOOK_NAMES
        }

        self.frame_skip = 0
        self.is_running = False
        self.previous_ticks = 0
        self.is_fixed_time_step = True
        self.should_exit = False
        self.suppress_draw = False
        self.max_elapsed_time = DEFAULT_MAX_ELAPSED_TIME
        self.target_elapsed_time = DEFAULT_TARGET_ELAPSED_TIME
        self.accumulated_elapsed_time = 0
        self.total_game_time = 0
        self.elapsed_game_time = 0
        self.update_frame_lag = 0
        self.is_running_slowly = False
        self.delta = 0.0
        self.current_time = self.clock()
        self._close_requested = False

    def __str__(self) -> str:
        return self.title

    @property
    def window_should_close(self) -> bool:
        """True once closing has been asked for by a key or by the window."""
        if self._close_requested:
            return True
        return self.window is not None and bool(getattr(self.window, "has_exit", False))

    # ------------------------------------------------------------------ window

    def create_window(self):
        """Open the window with a GL 3.0 context and set the render state."""
        import pyglet
        from pyglet.window import key as pyglet_key

        config = pyglet.gl.Config(major_version=3, minor_version=0, double_buffer=True)
        try:
            window = pyglet.window.Window(
                width=self.width,
                height=self.height,
                caption=self.title,
                config=config,
                vsync=True,
            )
        except Exception as exc:
            raise RuntimeError("Failed to create window") from exc

        special = {
            pyglet_key.ESCAPE: KEY_ESCAPE,
            pyglet_key.ENTER: KEY_ENTER,
            pyglet_key.TAB: KEY_TAB,
            pyglet_key.BACKSPACE: KEY_BACKSPACE,
            pyglet_key.RIGHT: KEY_RIGHT,
            pyglet_key.LEFT: KEY_LEFT,
            pyglet_key.DOWN: KEY_DOWN,
            pyglet_key.UP: KEY_UP,
        }

        def to_key(symbol: int) -> Optional[int]:
            if symbol in special:
                return special[symbol]
            if 32 <= symbol < 127:
                return ord(chr(symbol).upper())
            return None

        def on_key_press(symbol, modifiers):
            code = to_key(symbol)
            if code is not None:
                self.key_callback(code, PRESS)
            return pyglet.event.EVENT_HANDLED

        def on_key_release(symbol, modifiers):
            code = to_key(symbol)
            if code is not None:
                self.key_callback(code, RELEASE)
            return pyglet.event.EVENT_HANDLED

        def on_resize(width, height):
            gl.glViewport(0, 0, width, height)
            return pyglet.event.EVENT_HANDLED

        window.push_handlers(
            on_key_press=on_key_press,
            on_key_release=on_key_release,
            on_resize=on_resize,
        )
        window.switch_to()
        gl.glViewport(0, 0, self.width, self.height)
        gl.glEnable(gl.GL_CULL_FACE)
        gl.glEnable(gl.GL_BLEND)
        gl.glBlendFunc(gl.GL_SRC_ALPHA, gl.GL_ONE_MINUS_SRC_ALPHA)
        self.window = window
        return window

    # ------------------------------------------------------------------- input

    def key_callback(self, key: int, action: int) -> None:
        """Record a key press or release; Escape also asks the window to close."""
        if key == KEY_ESCAPE and action == PRESS:
            self._close_requested = True
        if 0 <= key < KEY_COUNT:
            if action == PRESS:
                self.keys[key] = True
            elif action == RELEASE:
                self.keys[key] = False

    def _press(self, button: Union[Button, str]) -> None:
        for key, state in _PRESS_KEYS[Button(button)]:
            self.keys[key] = state

    def _release(self, button: Union[Button, str]) -> None:
        for key in _RELEASE_KEYS[Button(button)]:
            self.keys[key] = False

    def on_click(self, button: Union[Button, str]) -> None:
        """A click on an on-screen control presses its direction or button."""
        self._press(button)

    def on_touch_start(self, button: Union[Button, str]) -> None:
        """A touch on an on-screen control presses its direction or button."""
        self._press(button)

    def on_touch_end(self, button: Union[Button, str]) -> None:
        """Lifting a touch releases the control's axis or button."""
        self._release(button)

    def on_touch_cancel(self, button: Union[Button, str]) -> None:
        """A cancelled touch releases the control's axis or button."""
        self._release(button)

    # ------------------------------------------------------------------- hooks

    def _run_hooks(self, name: str) -> None:
        for callback in self.hooks.get(name, ()):
            callback()

    def initialize(self) -> None:
        """Called once before content is loaded; runs the ``initialize`` hooks."""
        self._run_hooks("initialize")

    def load_content(self) -> None:
        """Called once to load resources; runs the ``load_content`` hooks."""
        self._run_hooks("load_content")

    def update(self) -> None:
        """Called for every update step; ``self.delta`` holds its seconds."""
        self._run_hooks("update")

    def draw(self) -> None:
        """Called once per frame unless drawing was suppressed."""
        self._run_hooks("draw")

    # -------------------------------------------------------------------- loop

    def start(self) -> None:
        self.is_running = True

    def handle_events(self) -> None:
        """Pump window events and stop when Escape is held."""
        if self.window is not None:
            self.window.dispatch_events()
        if self.keys[KEY_ESCAPE]:
            self._close_requested = True
            self.should_exit = True

    def tick(self) -> None:
        """Advance game time and run the due updates and one draw."""
        while True:
            current_ticks = self.clock() - self.current_time
            self.accumulated_elapsed_time += current_ticks - self.previous_ticks
            self.previous_ticks = current_ticks

            if (
                self.is_fixed_time_step
                and self.accumulated_elapsed_time < self.target_elapsed_time
            ):
                sleep_ms = int(
                    (self.target_elapsed_time - self.accumulated_elapsed_time)
                    * MILLISECONDS_PER_TICK
                )
                if sleep_ms < 1:
                    break
                self.sleep(sleep_ms / 1000.0)
            else:
                break

        if self.accumulated_elapsed_time > self.max_elapsed_time:
            self.accumulated_elapsed_time = self.max_elapsed_time

        if self.is_fixed_time_step:
            self.elapsed_game_time = self.target_elapsed_time
            step_count = 0
            while (
                self.accumulated_elapsed_time >= self.target_elapsed_time
                and not self.should_exit
            ):
                self.total_game_time += self.target_elapsed_time
                self.accumulated_elapsed_time -= self.target_elapsed_time
                step_count += 1
                self.delta = self.elapsed_game_time * SECONDS_PER_TICK
                self.update()

            # Every update after the first in one tick is lag.
            self.update_frame_lag += max(0, step_count - 1)
            if self.is_running_slowly:
                if self.update_frame_lag == 0:
                    self.is_running_slowly = False
            elif self.update_frame_lag >= 5:
                self.is_running_slowly = True
            if step_count == 1 and self.update_frame_lag > 0:
                self.update_frame_lag -= 1

            self.elapsed_game_time = self.target_elapsed_time * step_count
        else:
            self.elapsed_game_time = self.accumulated_elapsed_time
            self.total_game_time += self.accumulated_elapsed_time
            self.accumulated_elapsed_time = 0
            self.delta = self.elapsed_game_time * SECONDS_PER_TICK
            self.update()

        if self.suppress_draw:
            self.suppress_draw = False
        else:
            self.draw()
            if self.window is not None:
                self.window.flip()

        if self.should_exit or self.window_should_close:
            self.is_running = False

    def run_loop(self) -> None:
        self.handle_events()
        self.tick()

    def run(self) -> None:
        """Initialize, load content and loop until the game stops."""
        self.initialize()
        self.load_content()
        self.start()
        try:
            while self.is_running:
                self.run_loop()
        finally:
            if self.window is not None:
                self.window.close()