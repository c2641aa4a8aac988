"""
police.py

Police cars: plain records plus the pure-pursuit homing logic.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

import pygame

from physics import vec2
from settings import (
    CAR_WIDTH,
    CAR_HEIGHT,
    POLICE_SPEED,
    POLICE_COLOR,
    POLICE_SPAWN_DISTANCE,
)


def heading_to_target(source: pygame.math.Vector2, target: pygame.math.Vector2) -> float:
    """
    Heading in radians from source to target.

    Note the argument order: atan2(dx, dy), dx first. The angle is measured from
    the +y (screen-down) axis towards +x, and both movement and drawing use the
    same convention.
    """
    return math.atan2(target.x - source.x, target.y - source.y)


@dataclass(eq=False)
class PoliceCar:
    """A single pursuer. No prediction, no acceleration, no obstacle avoidance."""

    position: pygame.math.Vector2
    speed: float = POLICE_SPEED
    width: float = CAR_WIDTH
    height: float = CAR_HEIGHT
    color: tuple[int, int, int] = POLICE_COLOR

    def update(self, target: pygame.math.Vector2) -> None:
        """Move speed units straight at the target's current position."""
        if self.position == target:
            return
        angle = heading_to_target(self.position, target)
        self.position.x += self.speed * math.sin(angle)
        self.position.y += self.speed * math.cos(angle)

    def render_angle(self, target: pygame.math.Vector2) -> float:
        """Body rotation (radians, clockwise) that turns the car's front towards the target."""
        return math.pi - heading_to_target(self.position, target)


def spawn_police_car(
    target: pygame.math.Vector2,
    rng: random.Random | None = None,
    spawn_distance: float = POLICE_SPAWN_DISTANCE,
    angle: float | None = None,
    **car_kwargs,
) -> PoliceCar:
    """
    Create a police car on the circle of radius spawn_distance around target.
    The angle is drawn uniformly from [0, 2*pi) unless given explicitly.
    """
    if angle is None:
        angle = (rng or random).uniform(0.0, 2.0 * math.pi)

    position = vec2(
        target.x + spawn_distance * math.cos(angle),
        target.y + spawn_distance * math.sin(angle),
    )
    return PoliceCar(position=position, **car_kwargs)
