"""
controls.py

Turns raw pygame keyboard/touch events into steering intent.
Only the currently-held state matters; nothing is queued.
"""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from settings import STEER_KEYS, TOUCH_SPLIT_X


@dataclass
class InputIntent:
    """Steering intent read once per tick by the thief car."""
    steer_left: bool = False
    steer_right: bool = False


class InputTracker:
    """
    Mirrors key/touch presses into an InputIntent.

    Touch input splits the screen in half; lifting any finger clears both
    directions, since only single-touch steering is supported.
    """

    def __init__(self,
                 intent: InputIntent | None = None,
                 key_bindings: dict[str, tuple[int, ...]] | None = None) -> None:
        self.intent = intent if intent is not None else InputIntent()
        bindings = key_bindings if key_bindings is not None else STEER_KEYS
        self.left_keys = frozenset(bindings["left"])
        self.right_keys = frozenset(bindings["right"])

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Update intent from one event. Returns True if the event was a steering event."""
        if event.type in (pygame.KEYDOWN, pygame.KEYUP):
            pressed = event.type == pygame.KEYDOWN
            if event.key in self.left_keys:
                self.intent.steer_left = pressed
                return True
            if event.key in self.right_keys:
                self.intent.steer_right = pressed
                return True
            return False

        if event.type == pygame.FINGERDOWN:
            # Finger coordinates are normalized to [0, 1].
            if event.x < TOUCH_SPLIT_X:
                self.intent.steer_left = True
            else:
                self.intent.steer_right = True
            return True

        if event.type == pygame.FINGERUP:
            self.release_all()
            return True

        return False

    def release_all(self) -> None:
        """Clear both steering directions."""
        self.intent.steer_left = False
        self.intent.steer_right = False
