"""
session.py

The chase session: the one object that owns all mutable game state
(thief car, camera, police cars, input intent, spawner and RUNNING/STOPPED state)
and advances it one tick at a time. It has no window of its own, which keeps it
easy to drive from tests.
"""

from __future__ import annotations

import enum
import logging
import random
from typing import Callable

from camera import Camera
from car import ThiefCar
from collision import find_collisions
from controls import InputIntent
from police import PoliceCar
from settings import ChaseConfig, GAME_OVER_MESSAGE
from spawner import Spawner

logger = logging.getLogger(__name__)


class GameState(enum.Enum):
    RUNNING = "running"
    STOPPED = "stopped"


class ChaseSession:
    """
    Per-frame order:
      1. steer and move the thief car
      2. ease the camera towards it
      3. move every police car
      (the game draws the frame here)
      4. drop the police cars that are too far away
      5. check collisions; the first hit stops the game

    advance() covers steps 1-3, resolve() steps 4-5, tick() both.
    The RUNNING -> STOPPED transition happens once. It cancels the spawn timer
    and then calls notify with the game-over message.
    """

    def __init__(
        self,
        config: ChaseConfig | None = None,
        notify: Callable[[str], None] | None = None,
        rng: random.Random | None = None,
        set_timer: Callable[[int, int], object] | None = None,
    ) -> None:
        self.config = config if config is not None else ChaseConfig()
        self.notify = notify

        self.player = ThiefCar(
            speed=self.config.thief_speed,
            turn_rate=self.config.thief_turn_rate,
            width=self.config.car_width,
            height=self.config.car_height,
        )
        self.camera = Camera(
            position=(self.player.position.x, self.player.position.y),
            smooth_factor=self.config.camera_smooth_factor,
        )
        self.intent = InputIntent()
        self.pursuers: list[PoliceCar] = []
        self.spawner = Spawner(
            interval_ms=self.config.spawn_interval_ms,
            spawn_distance=self.config.spawn_distance,
            cull_distance=self.config.cull_distance,
            police_speed=self.config.police_speed,
            car_size=(self.config.car_width, self.config.car_height),
            rng=rng,
            set_timer=set_timer,
        )

        self.state = GameState.RUNNING
        self.ticks = 0
        self.game_over_message: str | None = None

    @property
    def running(self) -> bool:
        return self.state is GameState.RUNNING

    def start(self) -> None:
        """Arm the spawn timer. Call once the frame loop is about to start."""
        if not self.running:
            return
        self.spawner.start()
        logger.info("Chase started")

    # -------------------------------------------------------------------------
    # Simulation
    # -------------------------------------------------------------------------

    def spawn_police(self, angle: float | None = None) -> PoliceCar | None:
        """Handle one spawn-timer firing. Does nothing once the game is over."""
        if not self.running:
            return None
        car = self.spawner.spawn(self.player.position, angle=angle)
        if car is not None:
            self.pursuers.append(car)
        return car

    def advance(self) -> None:
        """
        First half of a frame: steer and move the thief car, ease the camera,
        then move every police car. Nothing is culled or checked yet, so the
        renderer can draw the cars exactly where they ended up this frame.
        """
        if not self.running:
            return

        self.ticks += 1
        self.player.update(self.intent)
        self.camera.update(self.player.position)

        target = self.player.position
        for car in self.pursuers:
            car.update(target)

    def resolve(self) -> None:
        """Second half of a frame: drop distant police cars, then check for a catch."""
        if not self.running:
            return

        self.pursuers = self.spawner.cull(self.pursuers, self.player.position)

        hits = find_collisions(self.player, self.pursuers)
        if hits:
            self.end(len(hits))

    def tick(self) -> None:
        """Advance the game by one whole frame. A stopped session does not change."""
        self.advance()
        self.resolve()

    def end(self, hits: int = 1) -> None:
        """
        Stop the game. Safe to call more than once; only the first call has effect.
        The police cars are left where they stopped so the final frame can still
        show them, but they are never moved again.
        """
        if not self.running:
            return

        self.state = GameState.STOPPED
        self.spawner.stop()
        self.game_over_message = GAME_OVER_MESSAGE

        logger.info("Caught after %d ticks by %d police car(s)", self.ticks, hits)
        if self.notify is not None:
            self.notify(GAME_OVER_MESSAGE)

    def close(self) -> None:
        """Release the spawn timer, e.g. when the window is closed mid-chase."""
        self.spawner.stop()
