"""A bar that shows a health value from 0 to 100."""

from __future__ import annotations

from .color import Color
from .sprite import Sprite


class HealthBar(Sprite):
    """A sprite drawn as a bordered bar filled in proportion to its health."""

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        width: float = 1.0,
        height: float = 1.0,
    ) -> None:
        super().__init__(x, y, width, height)
        self.color = Color.green()
        self.border = Color.black()
        self.background = Color.red()

    def place(self, x: float, y: float, width: float, height: float) -> None:
        """Set the centre position and size of the bar."""
        self.x = float(x)
        self.y = float(y)
        self.width = float(width)
        self.height = float(height)

    def set_colors(self, bar: Color, background: Color, border: Color) -> None:
        self.color = bar
        self.background = background
        self.border = border

    def fill_width(self) -> float:
        """Width of the filled part; health is first clamped to 0..100."""
        self.health = min(max(self.health, 0), 100)
        return self.health * self.width / 100