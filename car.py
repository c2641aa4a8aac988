"""
car.py

Defines the thief car: the single player-controlled vehicle.
It always drives forward at constant speed; the player only steers.
"""

from __future__ import annotations

import math

from controls import InputIntent
from physics import get_forward_vector, vec2
from settings import (
    CAR_WIDTH,
    CAR_HEIGHT,
    THIEF_SPEED,
    THIEF_TURN_RATE,
    THIEF_COLOR,
)


class ThiefCar:
    """
    Top-down car with a fixed forward speed and a fixed turn rate per tick.

    Heading is in degrees, 0 pointing up and increasing clockwise. It accumulates
    without wrapping. The world is unbounded so position is never clamped.
    """

    def __init__(
        self,
        position: tuple[float, float] = (0.0, 0.0),
        heading_degrees: float = 0.0,
        speed: float = THIEF_SPEED,
        turn_rate: float = THIEF_TURN_RATE,
        width: float = CAR_WIDTH,
        height: float = CAR_HEIGHT,
        color: tuple[int, int, int] = THIEF_COLOR,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Car dimensions must be positive.")

        self.position = vec2(*position)
        self.heading = heading_degrees
        self.speed = speed
        self.turn_rate = turn_rate
        self.width = width
        self.height = height
        self.color = color

    def steer(self, intent: InputIntent) -> None:
        """Apply one tick of steering; left and right together cancel out."""
        if intent.steer_left:
            self.heading -= self.turn_rate
        if intent.steer_right:
            self.heading += self.turn_rate

    def update(self, intent: InputIntent) -> None:
        """Advance one tick: steer, then move forward along the new heading."""
        self.steer(intent)

        self.position += get_forward_vector(self.heading) * self.speed

    @property
    def render_angle(self) -> float:
        """Body rotation in radians for drawing."""
        return math.radians(self.heading)

    def __repr__(self) -> str:
        return (f"ThiefCar(position=({self.position.x:.1f}, {self.position.y:.1f}), "
                f"heading={self.heading:.1f})")
