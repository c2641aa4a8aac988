"""
collision.py

Thief-vs-police collision checks.

Each car is approximated by the circle around its bounding box (radius = half
the box diagonal). Two cars collide when their centres are strictly closer
than the sum of those radii.
"""

from __future__ import annotations

import math
from typing import Sequence

from car import ThiefCar
from physics import distances_from
from police import PoliceCar


def half_diagonal(width: float, height: float) -> float:
    """Half the length of a width x height box's diagonal."""
    return math.hypot(width, height) / 2


def collision_radius(player: ThiefCar, pursuer: PoliceCar) -> float:
    """Centre distance below which the two cars touch."""
    return half_diagonal(player.width, player.height) + half_diagonal(pursuer.width, pursuer.height)


def find_collisions(player: ThiefCar, pursuers: Sequence[PoliceCar]) -> list[PoliceCar]:
    """All pursuers currently touching the player, in list order."""
    if not pursuers:
        return []

    gaps = distances_from(player.position, [p.position for p in pursuers])
    return [
        pursuer
        for pursuer, gap in zip(pursuers, gaps)
        if gap < collision_radius(player, pursuer)
    ]
