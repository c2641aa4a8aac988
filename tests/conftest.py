import os

# Headless pygame for the renderer tests; must be set before pygame is imported.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest


class FakeTimer:
    """Stands in for pygame.time.set_timer and records every call."""

    def __init__(self):
        self.calls = []

    def __call__(self, event_type, millis):
        self.calls.append((event_type, millis))


@pytest.fixture
def fake_timer():
    return FakeTimer()
