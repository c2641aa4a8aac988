"""
physics.py

Lightweight geometry helpers for the chase game.
We keep math-y stuff here so the cars, camera and collision code stay focused on game logic.

Angles follow screen conventions: y grows downwards, heading 0 points up and
positive angles turn clockwise.
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence

import numpy as np
import pygame


def vec2(x: float, y: float) -> pygame.math.Vector2:
    """Convenience helper around pygame Vector2."""
    return pygame.math.Vector2(x, y)


def distances_from(origin: pygame.math.Vector2,
                   points: Sequence[pygame.math.Vector2]) -> np.ndarray:
    """
    Distances from one point to many, computed in a single vectorised pass.
    Returns an empty float array for an empty input.
    """
    if not points:
        return np.zeros(0, dtype=np.float64)
    coords = np.array([(p.x, p.y) for p in points], dtype=np.float64)
    return np.hypot(coords[:, 0] - origin.x, coords[:, 1] - origin.y)


def get_forward_vector(angle_degrees: float) -> pygame.math.Vector2:
    """
    Unit vector for a heading in degrees (0 = up, clockwise positive).
    """
    rad = math.radians(angle_degrees)
    return vec2(math.sin(rad), -math.cos(rad))


def rect_polygon(center: pygame.math.Vector2,
                 local_rect: tuple[float, float, float, float],
                 angle_radians: float) -> list[pygame.math.Vector2]:
    """
    Corners of an axis-aligned rectangle given in body-local coordinates
    (left, top, width, height), rotated clockwise by angle_radians about the
    body origin and then moved to center.
    """
    left, top, width, height = local_rect
    corners = [
        vec2(left, top),
        vec2(left + width, top),
        vec2(left + width, top + height),
        vec2(left, top + height),
    ]

    angle_degrees = math.degrees(angle_radians)
    return [center + corner.rotate(angle_degrees) for corner in corners]


def body_rects(width: float,
               height: float,
               window_offset: tuple[float, float],
               window_size: tuple[float, float]) -> Iterable[tuple[float, float, float, float]]:
    """
    Local rectangles for a car body centred on the origin plus its window inset.
    The window offset is measured from the body's top-left corner.
    """
    left, top = -width / 2, -height / 2
    yield left, top, width, height
    yield left + window_offset[0], top + window_offset[1], window_size[0], window_size[1]
