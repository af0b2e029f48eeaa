"""A character-cell console with code page 437 glyphs and keyboard input."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ruztoo.colors import BLACK, RGB, WHITE

_CONTROL_GLYPHS = "☺☻♥♦♣♠•◘○◙♂♀♪♫☼►◄↕‼¶§▬↨↑↓→←∟↔▲▼"
_SPECIAL = {ch: code for code, ch in enumerate(_CONTROL_GLYPHS, start=1)}
_SPECIAL["⌂"] = 127

_SPACE = 32
_BAR_FULL = 178
_BAR_EMPTY = 176


def to_cp437(ch: str) -> int:
    """Return the code page 437 glyph for a character, or 0 if it has none."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    special = _SPECIAL.get(ch)
    if special is not None:
        return special
    try:
        return ch.encode("cp437")[0]
    except UnicodeEncodeError:
        return 0


class Key(Enum):
    """Keys the game reacts to."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    H = "H"
    I = "I"  # noqa: E741
    J = "J"
    K = "K"
    L = "L"
    M = "M"
    N = "N"
    O = "O"  # noqa: E741
    P = "P"
    Q = "Q"
    R = "R"
    S = "S"
    T = "T"
    U = "U"
    V = "V"
    W = "W"
    X = "X"
    Y = "Y"
    Z = "Z"
    ESCAPE = "Escape"
    RETURN = "Return"
    SPACE = "Space"
    TAB = "Tab"
    BACK = "Back"
    UP = "Up"
    DOWN = "Down"
    LEFT = "Left"
    RIGHT = "Right"


def letter_to_option(key: Key) -> int:
    """Return 0 for A through 25 for Z, and -1 for any other key."""
    if len(key.value) == 1:
        return ord(key.value) - ord("A")
    return -1


@dataclass
class Cell:
    """One character position on the console."""

    glyph: int = _SPACE
    fg: RGB = WHITE
    bg: RGB = BLACK


class Console:
    """A grid of cells plus the input state of the current frame."""

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError("console dimensions must be positive")
        self.width = width
        self.height = height
        self.key: Key | None = None
        self.mouse_pos: tuple[int, int] = (0, 0)
        self.left_click = False
        self.frame_time_ms = 0.0
        self._cells: list[list[Cell]] = []
        self.cls()

    def cls(self) -> None:
        """Reset every cell to a blank white-on-black space."""
        self._cells = [[Cell() for _ in range(self.width)] for _ in range(self.height)]

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Cell:
        if not self._in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the console")
        return self._cells[y][x]

    def get_char_size(self) -> tuple[int, int]:
        return self.width, self.height

    def set(self, x: int, y: int, fg: RGB, bg: RGB, glyph: int) -> None:
        """Draw a glyph; positions outside the console are ignored."""
        if self._in_bounds(x, y):
            self._cells[y][x] = Cell(glyph, fg, bg)

    def set_bg(self, x: int, y: int, bg: RGB) -> None:
        if self._in_bounds(x, y):
            self._cells[y][x].bg = bg

    def print(self, x: int, y: int, text: str) -> None:
        """Write text, keeping the colours already in each cell."""
        for offset, ch in enumerate(text):
            if self._in_bounds(x + offset, y):
                self._cells[y][x + offset].glyph = to_cp437(ch)

    def print_color(self, x: int, y: int, fg: RGB, bg: RGB, text: str) -> None:
        for offset, ch in enumerate(text):
            self.set(x + offset, y, fg, bg, to_cp437(ch))

    def print_color_centered(self, y: int, fg: RGB, bg: RGB, text: str) -> None:
        self.print_color(self.width // 2 - len(text) // 2, y, fg, bg, text)

    def _draw_frame(
        self, x: int, y: int, width: int, height: int, fg: RGB, bg: RGB, glyphs: str
    ) -> None:
        top_left, top_right, bottom_left, bottom_right, horizontal, vertical = (
            to_cp437(ch) for ch in glyphs
        )
        for row in range(y, y + height):
            for column in range(x, x + width):
                self.set(column, row, fg, bg, _SPACE)
        self.set(x, y, fg, bg, top_left)
        self.set(x + width, y, fg, bg, top_right)
        self.set(x, y + height, fg, bg, bottom_left)
        self.set(x + width, y + height, fg, bg, bottom_right)
        for column in range(x + 1, x + width):
            self.set(column, y, fg, bg, horizontal)
            self.set(column, y + height, fg, bg, horizontal)
        for row in range(y + 1, y + height):
            self.set(x, row, fg, bg, vertical)
            self.set(x + width, row, fg, bg, vertical)

    def draw_box(self, x: int, y: int, width: int, height: int, fg: RGB, bg: RGB) -> None:
        """Draw a filled box with a single-line border."""
        self._draw_frame(x, y, width, height, fg, bg, "┌┐└┘─│")

    def draw_box_double(
        self, x: int, y: int, width: int, height: int, fg: RGB, bg: RGB
    ) -> None:
        """Draw a filled box with a double-line border."""
        self._draw_frame(x, y, width, height, fg, bg, "╔╗╚╝═║")

    def draw_bar_horizontal(
        self,
        x: int,
        y: int,
        width: int,
        current: int,
        maximum: int,
        fg: RGB,
        bg: RGB,
    ) -> None:
        """Draw a progress bar showing ``current`` out of ``maximum``."""
        if maximum <= 0:
            raise ValueError("maximum must be positive")
        fill_width = int(current / maximum * width)
        for offset in range(width):
            glyph = _BAR_FULL if offset <= fill_width else _BAR_EMPTY
            self.set(x + offset, y, fg, bg, glyph)