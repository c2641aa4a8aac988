"""
settings.py

Central place for tuning all high-level game parameters.
Changing values here should change game feel without touching core logic.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import pygame

# --------------------------------------------------------------------------------------
# Display settings
# --------------------------------------------------------------------------------------

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
FPS = 60  # target FPS, one simulation tick per frame

WINDOW_TITLE = "Police Chase"

# --------------------------------------------------------------------------------------
# Colors (RGB)
# --------------------------------------------------------------------------------------

BLACK = (0, 0, 0)
RED = (220, 30, 30)
BLUE = (30, 60, 220)
YELLOW = (240, 230, 140)

BACKGROUND_COLOR = (235, 235, 235)
WINDOW_COLOR = BLACK

# --------------------------------------------------------------------------------------
# Car settings
# --------------------------------------------------------------------------------------

# Every car shares the same footprint (pixels).
CAR_WIDTH = 50
CAR_HEIGHT = 100

# Decorative "window" drawn inside each car body, relative to the body's top-left corner.
WINDOW_OFFSET = (10, 20)
WINDOW_SIZE = (30, 20)

# Thief (player) car. Speeds are per tick, angles in degrees.
THIEF_SPEED = 4.0
THIEF_TURN_RATE = 3.0
THIEF_COLOR = BLUE

# Police cars.
POLICE_SPEED = 5.0
POLICE_COLOR = RED
POLICE_SPAWN_INTERVAL_MS = 2000   # wall-clock, independent of frame rate
POLICE_SPAWN_DISTANCE = 800.0     # radius of the spawn circle around the thief
POLICE_CULL_DISTANCE = 1000.0     # police farther than this are dropped

# --------------------------------------------------------------------------------------
# Camera settings
# --------------------------------------------------------------------------------------

# Fraction of the remaining distance to the thief covered each tick, in (0, 1).
CAMERA_SMOOTH_FACTOR = 0.05

# --------------------------------------------------------------------------------------
# Input settings
# --------------------------------------------------------------------------------------

STEER_KEYS = {
    "left": (pygame.K_LEFT, pygame.K_a),
    "right": (pygame.K_RIGHT, pygame.K_d),
}

# Touches left of this (normalized) x coordinate steer left, the rest steer right.
TOUCH_SPLIT_X = 0.5

# --------------------------------------------------------------------------------------
# HUD / messages
# --------------------------------------------------------------------------------------

FONT_NAME = "consolas"
FONT_SIZE = 32

GAME_OVER_MESSAGE = "You have been caught by the police!"

# --------------------------------------------------------------------------------------
# Logging
# --------------------------------------------------------------------------------------

LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


@dataclass(frozen=True)
class ChaseConfig:
    """
    Bundle of the tuning values a chase session needs.

    Defaults come from the module constants above; tests build their own
    instances to pin down speeds, distances and so on.
    """

    screen_width: int = SCREEN_WIDTH
    screen_height: int = SCREEN_HEIGHT
    car_width: float = CAR_WIDTH
    car_height: float = CAR_HEIGHT
    thief_speed: float = THIEF_SPEED
    thief_turn_rate: float = THIEF_TURN_RATE
    police_speed: float = POLICE_SPEED
    spawn_interval_ms: int = POLICE_SPAWN_INTERVAL_MS
    spawn_distance: float = POLICE_SPAWN_DISTANCE
    cull_distance: float = POLICE_CULL_DISTANCE
    camera_smooth_factor: float = CAMERA_SMOOTH_FACTOR

    def __post_init__(self) -> None:
        if not 0.0 < self.camera_smooth_factor < 1.0:
            raise ValueError(
                f"camera_smooth_factor must be in (0, 1), got {self.camera_smooth_factor}"
            )

        positives = {
            "screen_width": self.screen_width,
            "screen_height": self.screen_height,
            "car_width": self.car_width,
            "car_height": self.car_height,
            "thief_speed": self.thief_speed,
            "police_speed": self.police_speed,
            "spawn_interval_ms": self.spawn_interval_ms,
            "spawn_distance": self.spawn_distance,
            "cull_distance": self.cull_distance,
        }
        for name, value in positives.items():
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")

        if self.thief_turn_rate < 0:
            raise ValueError(f"thief_turn_rate must not be negative, got {self.thief_turn_rate}")

    @property
    def viewport(self) -> tuple[int, int]:
        return self.screen_width, self.screen_height
