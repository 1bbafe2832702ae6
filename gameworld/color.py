"""RGBA colours with components in the range 0..1."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Color:
    """An RGBA colour; each component is a float, normally 0..1."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    @classmethod
    def from_bytes(cls, r: int, g: int, b: int, a: int = 100) -> Color:
        """Build a colour from 0..255 channel bytes and an alpha percentage."""
        return cls(r / 255.0, g / 255.0, b / 255.0, a / 100.0)

    def with_alpha(self, alpha: float) -> Color:
        """Return the same colour with a different alpha."""
        return replace(self, a=alpha)

    def scaled(self, factor: float) -> Color:
        """Return the colour with red, green and blue multiplied by ``factor``."""
        return Color(self.r * factor, self.g * factor, self.b * factor, self.a)

    @classmethod
    def black(cls) -> Color:
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def white(cls) -> Color:
        return cls(1.0, 1.0, 1.0, 1.0)

    @classmethod
    def red(cls) -> Color:
        return cls(1.0, 0.0, 0.0, 1.0)

    @classmethod
    def green(cls) -> Color:
        return cls(0.0, 1.0, 0.0, 1.0)

    @classmethod
    def blue(cls) -> Color:
        return cls(0.0, 0.0, 1.0, 1.0)