"""
Game loop - the frame scheduler around GameSession.tick().
This is a THIN ADAPTER - no game logic here.

One logical loop: pending window events are dispatched to their
listeners, then the session ticks once, then the frame is drawn.
Each listener and each frame step runs to completion before the
next one starts.
"""
import logging
from typing import Callable, Dict, List, Optional

import pygame

from code_invaders.gameplay.session import GameSession
from code_invaders.ui.audio import AudioSink
from code_invaders.ui.renderer import Renderer, RenderSurfaceUnavailableError
from code_invaders.ui.input_handler import InputHandler

logger = logging.getLogger(__name__)

Listener = Callable[[pygame.event.Event, float], None]


class GameLoop:
    """
    Runs a session every display frame until stopped.

    Usage:
        loop = GameLoop(session, renderer, audio)
        loop.run()        # blocks until quit
    """

    def __init__(
        self,
        session: GameSession,
        renderer: Renderer,
        audio: AudioSink,
        fps: int = 60,
        clock: Optional[pygame.time.Clock] = None
    ):
        self.session = session
        self.renderer = renderer
        self.audio = audio
        self.fps = fps
        self.clock = clock if clock is not None else pygame.time.Clock()
        self.input_handler = InputHandler(session, on_events=audio.on_events)

        self._listeners: Dict[int, List[Listener]] = {}
        self._running = False
        self.frames = 0

    @property
    def is_running(self) -> bool:
        return self._running

    # =========================================================================
    # LISTENERS
    # =========================================================================

    def add_listener(self, event_type: int, listener: Listener) -> None:
        self._listeners.setdefault(event_type, []).append(listener)

    def remove_listener(self, event_type: int, listener: Listener) -> None:
        listeners = self._listeners.get(event_type, [])
        if listener in listeners:
            listeners.remove(listener)
        if not listeners:
            self._listeners.pop(event_type, None)

    def listener_count(self) -> int:
        return sum(len(listeners) for listeners in self._listeners.values())

    def dispatch(self, event: pygame.event.Event, now_ms: float) -> None:
        for listener in list(self._listeners.get(event.type, [])):
            listener(event, now_ms)

    def _on_key(self, event: pygame.event.Event, now_ms: float) -> None:
        if self.input_handler.handle_key(event, now_ms):
            self.stop()

    def _on_resize(self, event: pygame.event.Event, now_ms: float) -> None:
        self.input_handler.handle_resize(event)

    def _on_quit(self, event: pygame.event.Event, now_ms: float) -> None:
        self.stop()

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def start(self) -> None:
        """
        Attach to the display and register listeners.
        Fails if there is no surface to render on.
        """
        if self._running:
            return

        surface = pygame.display.get_surface()
        if surface is None:
            raise RenderSurfaceUnavailableError("No pygame display surface; call Renderer.init_display() first")
        self.renderer.attach(surface)

        self.add_listener(pygame.KEYDOWN, self._on_key)
        self.add_listener(pygame.VIDEORESIZE, self._on_resize)
        self.add_listener(pygame.QUIT, self._on_quit)
        self._running = True
        logger.info(f"Game loop started for {self.session.language} ({self.fps} fps)")

    def stop(self) -> None:
        """Stop scheduling frames and detach every listener. Safe to call twice."""
        if not self._running and not self._listeners:
            return

        self._running = False
        self._listeners.clear()
        matched, spawned = self.session.get_score()
        logger.info(f"Game loop stopped after {self.frames} frames (score {matched}/{spawned})")

    def run_frame(self, now_ms: float) -> None:
        """One frame: input, simulation, audio, drawing."""
        for event in pygame.event.get():
            self.dispatch(event, now_ms)
            if not self._running:
                return

        events = self.session.tick(now_ms)
        self.audio.on_events(events)

        self.renderer.render(self.session, now_ms)
        pygame.display.flip()
        self.frames += 1

    def run(self) -> None:
        """Run frames until quit. Always tears down on exit."""
        self.start()
        try:
            while self._running:
                self.run_frame(float(pygame.time.get_ticks()))
                self.clock.tick(self.fps)
        finally:
            self.stop()
