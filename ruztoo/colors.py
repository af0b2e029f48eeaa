"""Colours for rendering, stored as floating point channels."""

from __future__ import annotations

import re
from dataclasses import dataclass

_HEX_PATTERN = re.compile(r"#[0-9a-fA-F]{6}")


@dataclass(frozen=True)
class RGB:
    """An RGB colour with channels in the range 0.0 to 1.0."""

    r: float
    g: float
    b: float

    @classmethod
    def from_u8(cls, r: int, g: int, b: int) -> RGB:
        """Build a colour from 0-255 channel values."""
        return cls(r / 255.0, g / 255.0, b / 255.0)

    @classmethod
    def from_f32(cls, r: float, g: float, b: float) -> RGB:
        """Build a colour from 0.0-1.0 channel values."""
        return cls(float(r), float(g), float(b))

    @classmethod
    def from_hex(cls, code: str) -> RGB:
        """Parse a colour written as ``#rrggbb``."""
        if not _HEX_PATTERN.fullmatch(code):
            raise ValueError(f"invalid hex colour: {code!r}")
        return cls.from_u8(int(code[1:3], 16), int(code[3:5], 16), int(code[5:7], 16))

    def lerp(self, other: RGB, fraction: float) -> RGB:
        """Blend linearly towards ``other`` by ``fraction``."""
        return RGB(
            self.r + (other.r - self.r) * fraction,
            self.g + (other.g - self.g) * fraction,
            self.b + (other.b - self.b) * fraction,
        )

    def to_u8(self) -> tuple[int, int, int]:
        """Return the colour as clamped 0-255 channel values."""
        return tuple(max(0, min(255, round(c * 255.0))) for c in (self.r, self.g, self.b))


BLACK = RGB.from_u8(0, 0, 0)
WHITE = RGB.from_u8(255, 255, 255)
GREY = RGB.from_u8(190, 190, 190)
LIGHT_GRAY = RGB.from_u8(211, 211, 211)
DARK_GRAY = RGB.from_u8(169, 169, 169)
LIGHT_SLATE = RGB.from_u8(119, 136, 153)
RED = RGB.from_u8(255, 0, 0)
GREEN = RGB.from_u8(0, 255, 0)
GREEN1 = RGB.from_u8(0, 255, 0)
BLUE = RGB.from_u8(0, 0, 255)
YELLOW = RGB.from_u8(255, 255, 0)
CYAN = RGB.from_u8(0, 255, 255)
MAGENTA = RGB.from_u8(255, 0, 255)
ORANGE = RGB.from_u8(255, 165, 0)
WHEAT = RGB.from_u8(245, 222, 179)
CHOCOLATE = RGB.from_u8(210, 105, 30)
CHOCOLATE2 = RGB.from_u8(238, 118, 33)
SADDLEBROWN = RGB.from_u8(139, 69, 19)
FORESTGREEN = RGB.from_u8(34, 139, 34)
MEDIUM_AQUAMARINE = RGB.from_u8(102, 205, 170)
NAVY_BLUE = RGB.from_u8(0, 0, 128)
CORNFLOWERBLUE = RGB.from_u8(100, 149, 237)