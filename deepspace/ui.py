"""Text heads-up display and console that write formatted lines to a callback."""

from __future__ import annotations

from typing import Callable, Optional

OutputCallback = Callable[[str], None]

_BUFFER_LIMIT = 1023
_SEPARATOR_RULE = "-" * 50

_RESET = "\033[0m"


def _clip(text: str, size: int) -> str:
    """Cut text to what fits a buffer of ``size`` bytes including the terminator."""
    return text[: size - 1]


class Canvas:
    """Renders HUD primitives as descriptive text lines."""

    _instance: Optional[Canvas] = None

    def __init__(self) -> None:
        self._output: Optional[OutputCallback] = None
        self.in_frame = False
        self.frame_count = 0

    @classmethod
    def get(cls) -> Canvas:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def set_output_callback(self, callback: Optional[OutputCallback]) -> None:
        self._output = callback

    def begin_frame(self) -> None:
        """Mark the start of a frame."""
        self.in_frame = True

    def end_frame(self) -> None:
        """Mark the end of a frame and count it."""
        self.in_frame = False
        self.frame_count += 1

    def text(self, x: int, y: int, fmt: str, *args) -> None:
        if self._output is None:
            return
        body = (fmt % args)[:_BUFFER_LIMIT]
        self._output(_clip(f"[HUD @ ({x},{y})] {body}", 1104))

    def text_colored(self, x: int, y: int, r: float, g: float, b: float, fmt: str, *args) -> None:
        if self._output is None:
            return
        body = (fmt % args)[:_BUFFER_LIMIT]
        red, green, blue = int(r * 255), int(g * 255), int(b * 255)
        line = f"[HUD @ ({x},{y})] \033[38;2;{red};{green};{blue}m{body}{_RESET}"
        self._output(_clip(line, 1150))

    def rect(self, x: int, y: int, w: int, h: int, r: float, g: float, b: float) -> None:
        if self._output is None:
            return
        line = "[RECT @ (%d,%d) %dx%d] Color: (%.2f, %.2f, %.2f)" % (x, y, w, h, r, g, b)
        self._output(_clip(line, 256))

    def progress_bar(
        self, x: int, y: int, w: int, h: int, progress: float, r: float, g: float, b: float
    ) -> None:
        if self._output is None:
            return
        line = "[PROGRESS @ (%d,%d) %dx%d] %.1f%% | Color: (%.2f, %.2f, %.2f)" % (
            x, y, w, h, progress * 100, r, g, b,
        )
        self._output(_clip(line, 512))

    def separator(self, x: int, y: int, width: int) -> None:
        if self._output is None:
            return
        line = "[SEP @ (%d,%d) width=%d] %s" % (x, y, width, _SEPARATOR_RULE)
        self._output(_clip(line, 128))


class Console:
    """Writes tagged log lines to a callback."""

    _instance: Optional[Console] = None

    def __init__(self) -> None:
        self._output: Optional[OutputCallback] = None

    @classmethod
    def get(cls) -> Console:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def set_output_callback(self, callback: Optional[OutputCallback]) -> None:
        self._output = callback

    def _emit(self, prefix: str, fmt: str, args: tuple) -> None:
        if self._output is None:
            return
        body = (fmt % args)[:_BUFFER_LIMIT]
        self._output(_clip(f"{prefix} {body}", 1100))

    def log(self, fmt: str, *args) -> None:
        self._emit("[LOG]", fmt, args)

    def log_info(self, fmt: str, *args) -> None:
        self._emit(f"\033[36m[INFO]{_RESET}", fmt, args)

    def log_warning(self, fmt: str, *args) -> None:
        self._emit(f"\033[33m[WARN]{_RESET}", fmt, args)

    def log_error(self, fmt: str, *args) -> None:
        self._emit(f"\033[31m[ERROR]{_RESET}", fmt, args)