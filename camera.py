"""
camera.py

A follow camera that eases towards the thief car every tick.
"""

from __future__ import annotations

import pygame

from physics import vec2
from settings import CAMERA_SMOOTH_FACTOR


class Camera:
    """
    Exponential-smoothing camera.

    Each tick the camera covers smooth_factor of the remaining distance to its
    target, so it never overshoots. Entities are projected so the camera
    position lands in the middle of the viewport.
    """

    def __init__(self,
                 position: tuple[float, float] = (0.0, 0.0),
                 smooth_factor: float = CAMERA_SMOOTH_FACTOR) -> None:
        if not 0.0 < smooth_factor < 1.0:
            raise ValueError(f"smooth_factor must be in (0, 1), got {smooth_factor}")
        self.position = vec2(*position)
        self.smooth_factor = smooth_factor

    def update(self, target: pygame.math.Vector2) -> None:
        """Cover smooth_factor of the remaining distance to target."""
        self.position.x += (target.x - self.position.x) * self.smooth_factor
        self.position.y += (target.y - self.position.y) * self.smooth_factor

    def world_to_screen(self,
                        point: pygame.math.Vector2,
                        viewport: tuple[int, int]) -> pygame.math.Vector2:
        """Project a world position into viewport coordinates."""
        return vec2(
            point.x - self.position.x + viewport[0] / 2,
            point.y - self.position.y + viewport[1] / 2,
        )
