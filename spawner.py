"""
spawner.py

Police spawning and culling.

Spawning runs off a wall-clock interval timer (pygame.time.set_timer posting a
custom event), so the cadence does not depend on the frame rate. Culling is
done every frame by the session through cull().
"""

from __future__ import annotations

import logging
import random
from typing import Callable, Sequence

import pygame

from physics import distances_from
from police import PoliceCar, spawn_police_car
from settings import (
    CAR_WIDTH,
    CAR_HEIGHT,
    POLICE_SPAWN_INTERVAL_MS,
    POLICE_SPAWN_DISTANCE,
    POLICE_CULL_DISTANCE,
    POLICE_SPEED,
)

logger = logging.getLogger(__name__)

# Event posted by the interval timer each time a police car is due.
SPAWN_POLICE_EVENT = pygame.event.custom_type()


class Spawner:
    """
    Owns the spawn timer and the spawn/cull rules.

    Notes
    - start() arms the repeating timer, stop() cancels it. stop() is idempotent.
    - Once stopped, spawn() refuses to create cars, so a timer event that was
      already queued when the game ended cannot bring a police car back.
    """

    def __init__(
        self,
        interval_ms: int = POLICE_SPAWN_INTERVAL_MS,
        spawn_distance: float = POLICE_SPAWN_DISTANCE,
        cull_distance: float = POLICE_CULL_DISTANCE,
        police_speed: float = POLICE_SPEED,
        car_size: tuple[float, float] = (CAR_WIDTH, CAR_HEIGHT),
        rng: random.Random | None = None,
        set_timer: Callable[[int, int], object] | None = None,
        event_type: int = SPAWN_POLICE_EVENT,
    ) -> None:
        if interval_ms <= 0:
            raise ValueError("Spawn interval must be positive.")
        self.interval_ms = interval_ms
        self.spawn_distance = spawn_distance
        self.cull_distance = cull_distance
        self.police_speed = police_speed
        self.car_size = car_size
        self.rng = rng if rng is not None else random.Random()
        self.set_timer = set_timer if set_timer is not None else pygame.time.set_timer
        self.event_type = event_type
        self.active = False

    # -------------------------------------------------------------------------
    # Timer lifecycle
    # -------------------------------------------------------------------------

    def start(self) -> None:
        """Arm the repeating spawn timer. Does nothing if it is already running."""
        if self.active:
            return
        self.set_timer(self.event_type, self.interval_ms)
        self.active = True
        logger.debug("Spawn timer armed every %d ms", self.interval_ms)

    def stop(self) -> None:
        """Cancel the spawn timer. Does nothing if it is not running."""
        if not self.active:
            return
        # A zero interval cancels a pygame timer.
        self.set_timer(self.event_type, 0)
        self.active = False
        logger.debug("Spawn timer cancelled")

    # -------------------------------------------------------------------------
    # Spawn / cull
    # -------------------------------------------------------------------------

    def spawn(self, target: pygame.math.Vector2, angle: float | None = None) -> PoliceCar | None:
        """Create a police car around target, or None if the spawner is stopped."""
        if not self.active:
            return None

        car = spawn_police_car(
            target,
            rng=self.rng,
            spawn_distance=self.spawn_distance,
            angle=angle,
            speed=self.police_speed,
            width=self.car_size[0],
            height=self.car_size[1],
        )
        logger.debug("Police car spawned at (%.1f, %.1f)", car.position.x, car.position.y)
        return car

    def cull(self, pursuers: Sequence[PoliceCar], target: pygame.math.Vector2) -> list[PoliceCar]:
        """
        Return a new list without the police cars farther than cull_distance from target.
        The input sequence is left untouched.
        """
        if not pursuers:
            return []

        gaps = distances_from(target, [p.position for p in pursuers])
        kept = [car for car, gap in zip(pursuers, gaps) if gap <= self.cull_distance]

        dropped = len(pursuers) - len(kept)
        if dropped:
            logger.debug("Culled %d police car(s) beyond %.0f", dropped, self.cull_distance)
        return kept
