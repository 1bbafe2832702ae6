"""Flat 2D sprites that move, turn, animate and collide.

A sprite has a centre position ``(x, y)``, a width and height, a
rotation in degrees, a movement direction given as an angle in degrees
and a speed in units per second. Game time is given in milliseconds.
"""

from __future__ import annotations

import copy
import math
from typing import Iterable, Iterator

from .color import Color


class Sprite:
    """A movable, rotatable rectangle with a bounding box."""

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        width: float = 1.0,
        height: float = 1.0,
    ) -> None:
        self.x = float(x)
        self.y = float(y)
        self.width = float(width)
        self.height = float(height)
        self.scale_bb = 1.0

        self.num_frames = 1
        self.current_frame = 1.0
        self.period = 0.0
        self.looping = False
        self.start_frame = 1
        self.stop_frame = 1

        self.color = Color.red()
        self.filled = True
        self.texture_id = 0

        self.sprite_time = 0
        self.health = 100
        self.status = 0

        self.speed = 0.0
        self.direction = 0.0
        self.rotation = 0.0
        self.omega = 0.0

        self.marked_for_removal = False
        self.dying = 0

    def copy_at(self, x: float, y: float, time: int) -> Sprite:
        """Copy of this sprite placed at ``(x, y)`` whose clock starts at ``time``."""
        twin = copy.copy(self)
        twin.x = float(x)
        twin.y = float(y)
        twin.sprite_time = time
        twin.marked_for_removal = False
        twin.dying = 0
        return twin

    # ----- time step -----

    def update(self, game_time: int) -> None:
        """Advance motion, rotation, animation and dying by the elapsed time."""
        if self.sprite_time == 0:
            self.sprite_time = game_time
            return

        delta = max(game_time - self.sprite_time, 0)
        if self.dying > 0:
            self.dying -= delta

        rad = math.radians(self.direction)
        self.x += self.speed * math.cos(rad) * delta / 1000.0
        self.y += self.speed * math.sin(rad) * delta / 1000.0

        self.rotate(self.omega * delta / 1000.0)

        if self.period > 0:
            self.current_frame += delta * self.period / 1000.0
            if self.current_frame >= self.stop_frame + 1:
                if self.looping:
                    self.current_frame = float(self.start_frame)
                else:
                    self.set_frame(self.stop_frame)

        if self.dying and self.animation_finished():
            self.delete()

        self.sprite_time = game_time

    # ----- movement and size -----

    def move(self, distance: float) -> None:
        """Move ``distance`` units along the movement direction."""
        rad = math.radians(self.direction)
        self.x += distance * math.cos(rad)
        self.y += distance * math.sin(rad)

    def rotate(self, angle: float) -> None:
        self.rotation += angle

    def set_size(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    def set_scale(self, scale: float) -> None:
        """Multiply width and height by ``scale``; non-positive values are ignored."""
        if scale > 0:
            self.width *= scale
            self.height *= scale

    # ----- animation -----

    def set_frame(self, frame: int) -> None:
        """Show a single frame and stop animating."""
        self.current_frame = float(frame)
        self.period = 0.0
        self.start_frame = frame
        self.stop_frame = frame

    def play_animation(self, start: int, stop: int, speed: float, loop: bool) -> None:
        """Play frames ``start..stop`` at ``speed`` frames per second.

        A sequence already running inside that range is left undisturbed.
        """
        if self.current_frame <= start or self.current_frame >= stop + 1 or self.period == 0:
            self.start_frame = start
            self.stop_frame = stop
            self.period = speed
            self.current_frame = float(start)
            self.looping = loop

    def animation_finished(self) -> bool:
        return self.stop_frame == self.current_frame

    @property
    def frame(self) -> int:
        return int(self.current_frame)

    # ----- collisions -----

    def radius(self) -> float:
        """Radius of the circle around the rectangle."""
        return math.sqrt((self.width / 2.0) ** 2 + (self.height / 2.0) ** 2)

    def hit_test_distance(self, x: float, y: float, min_distance: float) -> bool:
        """True if ``(x, y)`` is closer than ``min_distance`` to the centre."""
        return math.hypot(x - self.x, y - self.y) < min_distance

    def hit_test_point(self, x: float, y: float) -> bool:
        """True if ``(x, y)`` lies inside the rotated bounding box."""
        half_w = self.scale_bb * self.width / 2.0
        half_h = self.scale_bb * self.height / 2.0
        rad = math.radians(-self.rotation)
        c, s = math.cos(rad), math.sin(rad)
        dx, dy = x - self.x, y - self.y
        xp = dx * c - dy * s
        yp = dx * s + dy * c
        return -half_w <= xp <= half_w and -half_h <= yp <= half_h

    def _box_points(
        self, xs: Iterable[float], ys: Iterable[float]
    ) -> Iterator[tuple[float, float]]:
        rad = math.radians(self.rotation)
        c, s = math.cos(rad), math.sin(rad)
        for lx, ly in zip(xs, ys):
            yield self.x + lx * c - ly * s, self.y + lx * s + ly * c

    def _corners(self) -> Iterator[tuple[float, float]]:
        half_w = self.scale_bb * self.width / 2.0
        half_h = self.scale_bb * self.height / 2.0
        return self._box_points(
            (-half_w, half_w, half_w, -half_w),
            (half_h, half_h, -half_h, -half_h),
        )

    def _near_or_centred(self, other: Sprite) -> bool | None:
        """False if too far apart, True if a centre lies in the other box."""
        distance = math.hypot(other.x - self.x, other.y - self.y)
        if distance > self.scale_bb * self.radius() + other.scale_bb * other.radius():
            return False
        if self.hit_test_point(other.x, other.y) or other.hit_test_point(self.x, self.y):
            return True
        return None

    def hit_test(self, other: Sprite) -> bool:
        """True if the bounding boxes of the two sprites overlap."""
        quick = self._near_or_centred(other)
        if quick is not None:
            return quick
        if any(other.hit_test_point(px, py) for px, py in self._corners()):
            return True
        return any(self.hit_test_point(px, py) for px, py in other._corners())

    def hit_test_front(self, other: Sprite) -> bool:
        """True if the sprites touch at this sprite's front (+x) edge."""
        quick = self._near_or_centred(other)
        if quick is not None:
            return quick
        half_w = self.scale_bb * self.width / 2.0
        half_h = self.scale_bb * self.height / 2.0
        points = self._box_points((half_w, half_w, half_w), (half_h, -half_h, 0.0))
        return any(other.hit_test_point(px, py) for px, py in points)

    # ----- removal -----

    def delete(self) -> None:
        self.dying = 0
        self.marked_for_removal = True

    def undelete(self) -> None:
        self.dying = 0
        self.marked_for_removal = False

    def die(self, delay: int = 0) -> None:
        """Mark for removal once ``delay`` milliseconds have passed."""
        self.dying = delay
        self.marked_for_removal = True

    def is_deleted(self) -> bool:
        if self.dying > 0:
            return False
        return self.marked_for_removal