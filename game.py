"""
game.py

High-level orchestration:
- Initialize Pygame, create window, clock, banner font.
- Create the chase session and renderer.
- Main loop: events -> simulation tick -> rendering, one tick per display frame.
"""

from __future__ import annotations

import logging

import pygame

from controls import InputTracker
from render import Renderer
from session import ChaseSession
from settings import ChaseConfig, FPS, WINDOW_TITLE, FONT_NAME, FONT_SIZE
from spawner import SPAWN_POLICE_EVENT

logger = logging.getLogger(__name__)


class Game:
    """
    Main game controller.

    It owns:
    - window & clock
    - the chase session (all simulation state)
    - input tracker wired to the session's intent
    - renderer
    """

    def __init__(self, config: ChaseConfig | None = None) -> None:
        pygame.init()

        self.config = config if config is not None else ChaseConfig()
        self.screen = pygame.display.set_mode(self.config.viewport)
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()

        self.font = pygame.font.SysFont(FONT_NAME, FONT_SIZE)

        self.session = ChaseSession(config=self.config, notify=self._on_game_over)
        self.input = InputTracker(self.session.intent)
        self.renderer = Renderer(self.screen, self.font)

        # Set when the window is closed or ESC is pressed.
        self.quit_requested = False

    # -------------------------------------------------------------------------
    # Main loop
    # -------------------------------------------------------------------------

    def run(self) -> None:
        """
        Frame loop while the chase is RUNNING, then the blocking game-over banner.
        """
        self.session.start()
        try:
            while self.session.running and not self.quit_requested:
                self.clock.tick(FPS)
                self._handle_events()
                self.session.advance()
                self._render()
                self.session.resolve()

            if not self.quit_requested:
                self._wait_for_dismiss()
        finally:
            # Covers quitting mid-chase; a no-op after game over.
            self.session.close()
            pygame.quit()

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.quit_requested = True
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.quit_requested = True
            elif event.type == SPAWN_POLICE_EVENT:
                self.session.spawn_police()
            else:
                self.input.handle_event(event)

    def _render(self) -> None:
        self.renderer.draw(self.session)
        pygame.display.flip()

    # -------------------------------------------------------------------------
    # Game over
    # -------------------------------------------------------------------------

    def _on_game_over(self, message: str) -> None:
        logger.info(message)

    def _wait_for_dismiss(self) -> None:
        """
        Block on the game-over banner until the player closes the window,
        presses a key, clicks or touches the screen. No ticks run meanwhile.
        """
        self._render()
        # Drop steering presses and stale spawn events from the final frame.
        pygame.event.clear()
        dismiss_events = (pygame.QUIT, pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN, pygame.FINGERDOWN)
        while True:
            event = pygame.event.wait()
            if event.type in dismiss_events:
                return
            if event.type == pygame.VIDEOEXPOSE:
                self._render()
