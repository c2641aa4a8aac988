"""
render.py

Draws a chase session onto a pygame surface. Stateless apart from the surface
and font it was given: every frame is drawn from scratch.
"""

from __future__ import annotations

import pygame

from physics import body_rects, rect_polygon
from session import ChaseSession
from settings import (
    BACKGROUND_COLOR,
    WINDOW_COLOR,
    WINDOW_OFFSET,
    WINDOW_SIZE,
    YELLOW,
    BLACK,
)


class Renderer:
    """Draws the thief car first, then the police cars in list order."""

    def __init__(self, surface: pygame.Surface, font: pygame.font.Font | None = None) -> None:
        self.surface = surface
        self.font = font

    @property
    def viewport(self) -> tuple[int, int]:
        return self.surface.get_size()

    def draw(self, session: ChaseSession) -> None:
        self.surface.fill(BACKGROUND_COLOR)

        player = session.player
        self.draw_car(
            session.camera.world_to_screen(player.position, self.viewport),
            player.render_angle,
            player.width,
            player.height,
            player.color,
        )

        for car in session.pursuers:
            self.draw_car(
                session.camera.world_to_screen(car.position, self.viewport),
                car.render_angle(player.position),
                car.width,
                car.height,
                car.color,
            )

        if session.game_over_message is not None:
            self.draw_game_over(session.game_over_message)

    def draw_car(self,
                 screen_pos: pygame.math.Vector2,
                 angle_radians: float,
                 width: float,
                 height: float,
                 color: tuple[int, int, int]) -> None:
        """A rotated body rectangle plus its window inset."""
        body, window = body_rects(width, height, WINDOW_OFFSET, WINDOW_SIZE)
        for rect, fill in ((body, color), (window, WINDOW_COLOR)):
            poly = rect_polygon(screen_pos, rect, angle_radians)
            pygame.draw.polygon(self.surface, fill, [(p.x, p.y) for p in poly])

    def draw_game_over(self, message: str) -> None:
        """Centered banner standing in for the game-over alert."""
        if self.font is None:
            return
        text = self.font.render(message, True, YELLOW, BLACK)
        rect = text.get_rect(center=(self.viewport[0] // 2, self.viewport[1] // 2))
        pygame.draw.rect(self.surface, BLACK, rect.inflate(24, 16))
        self.surface.blit(text, rect)
