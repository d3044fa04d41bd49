"""Text-mode engine core: logging, input, layers, scenes and the main loop."""

from __future__ import annotations

import enum
import io
import os
import select
import sys
import time
from dataclasses import dataclass, field
from typing import Callable, Optional, TextIO

from deepspace.vector import Vec3d

_MESSAGE_LIMIT = 4095


class LogLevel(enum.IntEnum):
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    FATAL = 5

    @property
    def label(self) -> str:
        return _LEVEL_LABELS[self]


_LEVEL_LABELS = {
    LogLevel.TRACE: "TRACE",
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO ",
    LogLevel.WARNING: "WARN ",
    LogLevel.ERROR: "ERROR",
    LogLevel.FATAL: "FATAL",
}


class Logger:
    """Writes "[LEVEL] [category] message" lines to a stream."""

    _instance: Optional[Logger] = None

    def __init__(self, min_level: LogLevel = LogLevel.INFO, stream: Optional[TextIO] = None):
        self.min_level = min_level
        self.stream = stream

    @classmethod
    def get(cls) -> Logger:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def log(self, level: LogLevel, category: str, message: str) -> None:
        if level < self.min_level:
            return
        out = self.stream if self.stream is not None else sys.stdout
        print(f"[{LogLevel(level).label}] [{category}] {message}", file=out, flush=True)

    def set_min_level(self, level: LogLevel) -> None:
        self.min_level = level

    def format(self, level: LogLevel, category: str, fmt: str, *args) -> None:
        """Log a printf-style message, truncated like a fixed-size buffer."""
        message = fmt % args
        self.log(level, category, message[:_MESSAGE_LIMIT])


def info(fmt: str, *args) -> None:
    Logger.get().format(LogLevel.INFO, "Mock", fmt, *args)


def trace(fmt: str, *args) -> None:
    Logger.get().format(LogLevel.TRACE, "Mock", fmt, *args)


def warn(fmt: str, *args) -> None:
    Logger.get().format(LogLevel.WARNING, "Mock", fmt, *args)


def error(fmt: str, *args) -> None:
    Logger.get().format(LogLevel.ERROR, "Mock", fmt, *args)


class KeyCode(enum.IntEnum):
    SPACE = 32
    APOSTROPHE = 39
    COMMA = 44
    MINUS = 45
    PERIOD = 46
    SLASH = 47
    D0 = 48
    D1 = 49
    D2 = 50
    D3 = 51
    D4 = 52
    D5 = 53
    D6 = 54
    D7 = 55
    D8 = 56
    D9 = 57
    SEMICOLON = 59
    EQUAL = 61
    A = 65
    B = 66
    C = 67
    D = 68
    E = 69
    F = 70
    G = 71
    H = 72
    I = 73  # noqa: E741
    J = 74
    K = 75
    L = 76
    M = 77
    N = 78
    O = 79  # noqa: E741
    P = 80
    Q = 81
    R = 82
    S = 83
    T = 84
    U = 85
    V = 86
    W = 87
    X = 88
    Y = 89
    Z = 90
    LEFT_BRACKET = 91
    BACKSLASH = 92
    RIGHT_BRACKET = 93
    GRAVE_ACCENT = 96
    WORLD1 = 161
    WORLD2 = 162
    ESCAPE = 256
    ENTER = 257
    TAB = 258
    BACKSPACE = 259
    INSERT = 260
    DELETE = 261
    RIGHT = 262
    LEFT = 263
    DOWN = 264
    UP = 265


def key_for_char(char: str) -> KeyCode:
    """Map a typed character to its key; unknown characters map to ESCAPE."""
    if "a" <= char <= "z":
        return KeyCode(ord(char) - ord("a") + KeyCode.A)
    if "A" <= char <= "Z" or "0" <= char <= "9":
        return KeyCode(ord(char))
    if char == " ":
        return KeyCode.SPACE
    if char == "\n":
        return KeyCode.ENTER
    return KeyCode.ESCAPE


class InputManager:
    """Tracks held keys, keys pressed this frame and the last typed character."""

    _instance: Optional[InputManager] = None

    def __init__(self):
        self._pressed: list[KeyCode] = []
        self._just_pressed: list[KeyCode] = []
        self._char_input: Optional[str] = None

    @classmethod
    def get(cls) -> InputManager:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def is_key_pressed(self, key: KeyCode) -> bool:
        return key in self._pressed

    def is_key_just_pressed(self, key: KeyCode) -> bool:
        return key in self._just_pressed

    def set_key_state(self, key: KeyCode, pressed: bool) -> None:
        if pressed:
            if key not in self._pressed:
                self._pressed.append(key)
                self._just_pressed.append(key)
        else:
            self._pressed = [k for k in self._pressed if k != key]

    def clear_just_pressed(self) -> None:
        self._just_pressed.clear()

    def clear_pressed_keys(self) -> None:
        self._pressed.clear()

    def get_char_input(self) -> Optional[str]:
        """Return the last typed character, consuming it."""
        char, self._char_input = self._char_input, None
        return char

    def set_char_input(self, char: Optional[str]) -> None:
        self._char_input = char


class Layer:
    """A unit of per-frame behaviour hosted by the engine.

    The base hooks keep simple bookkeeping (attachment, elapsed time, frame
    and render counts, last key event); subclasses override them as needed.
    """

    def __init__(self, name: str):
        self.name = name
        self.attached = False
        self.elapsed = 0.0
        self.frames = 0
        self.renders = 0
        self.last_key_event: Optional[tuple[KeyCode, bool]] = None

    def on_attach(self) -> None:
        self.attached = True

    def on_detach(self) -> None:
        self.attached = False

    def on_update(self, dt: float) -> None:
        self.elapsed += dt
        self.frames += 1

    def on_imgui_render(self) -> None:
        self.renders += 1

    def on_key_event(self, key: KeyCode, pressed: bool) -> None:
        self.last_key_event = (key, pressed)


@dataclass(frozen=True)
class Timestep:
    seconds: float = 0.0

    def milliseconds(self) -> float:
        return self.seconds * 1000.0


@dataclass(eq=False)
class GameObject:
    name: str
    position: Vec3d = field(default_factory=Vec3d)
    orientation: Vec3d = field(default_factory=lambda: Vec3d(0.0, 1.0, 0.0))
    scale: Vec3d = field(default_factory=lambda: Vec3d(1.0, 1.0, 1.0))

    def set_orientation(self, direction: Vec3d) -> None:
        self.orientation = direction.normalized()


class Scene:
    """A named collection of game objects."""

    def __init__(self, name: str):
        self.name = name
        self.game_objects: list[GameObject] = []

    def add_game_object(self, obj: GameObject) -> None:
        self.game_objects.append(obj)

    def remove_game_object(self, obj: GameObject) -> None:
        self.game_objects = [o for o in self.game_objects if o is not obj]

    def create_game_object(self, name: str, factory: Callable[[str], GameObject] = GameObject) -> GameObject:
        obj = factory(name)
        self.add_game_object(obj)
        return obj

    def find_game_object(self, name: str) -> Optional[GameObject]:
        return next((obj for obj in self.game_objects if obj.name == name), None)


class CameraMode(enum.Enum):
    CHASE = "chase"
    TV = "tv"
    GROUND = "ground"
    FREE = "free"


@dataclass
class Camera:
    mode: CameraMode = CameraMode.CHASE
    position: Vec3d = field(default_factory=Vec3d)
    target: Vec3d = field(default_factory=Vec3d)
    fov: float = 60.0
    distance: float = 50.0


class Engine:
    """Runs layers in a frame loop, feeding them keyboard input."""

    _instance: Optional[Engine] = None

    def __init__(self, read_stdin: bool = True):
        self.running = False
        self.initialized = False
        self.target_fps = 60
        self.layers: list[Layer] = []
        self.input_manager = InputManager()
        self.logger = Logger()
        self.main_scene = Scene("MainScene")
        self.main_camera = Camera()
        self.read_stdin = read_stdin
        self._pending_input: list[str] = []
        self._last_time = 0.0

    @classmethod
    def get(cls) -> Engine:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def initialize(self) -> None:
        if self.initialized:
            return
        self.logger.log(LogLevel.INFO, "Engine", "Mock Engine v1.0 initialized")
        self.initialized = True

    def run(self) -> None:
        """Run frames until stop() is called."""
        if not self.initialized:
            self.initialize()
        self.running = True
        self._last_time = 0.0
        start = time.perf_counter()
        while self.running:
            elapsed = time.perf_counter() - start
            dt = elapsed - self._last_time
            self._last_time = elapsed

            self.process_input()
            for layer in self.layers:
                layer.on_update(dt)
            for layer in self.layers:
                layer.on_imgui_render()

            self.input_manager.clear_just_pressed()
            self.input_manager.clear_pressed_keys()

            if self.target_fps > 0:
                frame_time = 1.0 / self.target_fps
                if dt < frame_time:
                    time.sleep(frame_time - dt)

    def shutdown(self) -> None:
        self.running = False
        for layer in self.layers:
            layer.on_detach()
        self.layers.clear()
        self.logger.log(LogLevel.INFO, "Engine", "Mock Engine shutdown complete")

    def stop(self) -> None:
        self.running = False

    def push_layer(self, layer: Layer) -> None:
        layer.on_attach()
        self.layers.append(layer)

    def pop_layer(self) -> None:
        if self.layers:
            self.layers.pop().on_detach()

    def feed_input(self, text: str) -> None:
        """Queue typed text to be handled on the next input pass."""
        self._pending_input.append(text)

    def process_input(self) -> None:
        text = "".join(self._pending_input)
        self._pending_input.clear()
        if self.read_stdin:
            text += self._poll_stdin()
        for char in text:
            if char in ("\r", "\0"):
                continue
            self.input_manager.set_char_input(char)
            self.input_manager.set_key_state(key_for_char(char), True)

    @staticmethod
    def _poll_stdin() -> str:
        try:
            ready, _, _ = select.select([sys.stdin], [], [], 0)
            if not ready:
                return ""
            data = os.read(sys.stdin.fileno(), 255)
        except (OSError, ValueError, io.UnsupportedOperation):
            return ""
        return data.decode(errors="replace")