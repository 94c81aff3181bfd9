"""
Pytest fixtures for Code Invaders tests.
"""

import os
import random

# Headless SDL for the pygame adapter tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from code_invaders.gameplay.aliens import Alien
from code_invaders.gameplay.words import WordPool
from code_invaders.gameplay.session import GameSession


CHAR_WIDTH = 10


def fake_text_width(text: str) -> float:
    """Monospace stand-in for font measurement: 10px per character."""
    return len(text) * CHAR_WIDTH


@pytest.fixture
def text_width():
    return fake_text_width


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def for_while_pool():
    """Catalog {for, while} with 'for' in the fast lane at 5.0."""
    return WordPool(codes=("for", "while"), fast_speeds={"for": 5.0})


@pytest.fixture
def make_session(text_width, rng):
    """Factory for sessions over an explicit pool."""
    def _make(pool, width=800, height=800, language="Python"):
        return GameSession(pool, width, height, text_width, rng=rng, language=language)
    return _make


@pytest.fixture
def make_alien():
    """Factory for alien records with sensible defaults."""
    def _make(alien_id=0, code="for", x=100.0, y=0.0, speed=1.5, **kwargs):
        return Alien(alien_id=alien_id, code=code, x=x, y=y, speed=speed, **kwargs)
    return _make


@pytest.fixture
def pygame_display():
    """A dummy-driver 800x600 display with fonts ready."""
    pygame.display.init()
    pygame.font.init()
    screen = pygame.display.set_mode((800, 600))
    yield screen
    pygame.display.quit()
