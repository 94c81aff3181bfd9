"""
Input Handler - Translates pygame events to session commands.
This is a THIN ADAPTER - no game logic here.
"""
from typing import Callable, Iterable, Optional

import pygame

from code_invaders.gameplay.session import GameSession, GameEvent


class InputHandler:
    """
    Handles keyboard and window events for a running session.

    Key events are forwarded by their text (event.unicode); the session
    decides what counts as a typed character, so shift, arrows and the
    like simply arrive as empty or control strings and are ignored.
    """

    def __init__(
        self,
        session: GameSession,
        on_events: Optional[Callable[[Iterable[GameEvent]], None]] = None
    ):
        self.session = session
        self.on_events = on_events

    def handle_key(self, event: pygame.event.Event, now_ms: float) -> bool:
        """
        Handle a single KEYDOWN event.
        Returns True if the game should quit.
        """
        if event.key == pygame.K_ESCAPE:
            return True

        events = self.session.type_key(getattr(event, "unicode", ""), now_ms)
        if events and self.on_events is not None:
            self.on_events(events)
        return False

    def handle_resize(self, event: pygame.event.Event) -> None:
        """Keep aliens on screen after the window changes size."""
        self.session.resize(event.w, event.h)
