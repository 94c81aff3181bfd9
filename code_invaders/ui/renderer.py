"""
Renderer - Reads session state and draws it with pygame.
This is a THIN ADAPTER - no game logic here.
"""
import math
from typing import Optional, Tuple

import pygame

from code_invaders.gameplay.session import GameSession
from code_invaders.gameplay.aliens import Alien
from code_invaders.gameplay.constants import MARGIN, MISS_THRESHOLD


Color = Tuple[int, int, int]

# Colors
COLOR_BACKGROUND = (0, 0, 0)
COLOR_FLASH = (255, 255, 255)
COLOR_HUD = (255, 255, 255)

LANGUAGE_COLORS = {
    "C++": (51, 153, 255),       # #3399FF
    "C#": (238, 130, 238),       # violet
    "Java": (50, 205, 50),       # limegreen
    "Python": (75, 139, 190),    # #4B8BBE
    "Javascript": (247, 223, 30),  # #F7DF1E
}
COLOR_DEFAULT_LANGUAGE = (255, 0, 0)

WINDOW_TITLE = "Code Invaders"


class RenderSurfaceUnavailableError(RuntimeError):
    """No display surface to draw on; the game cannot start."""


def language_color(language: str) -> Color:
    return LANGUAGE_COLORS.get(language, COLOR_DEFAULT_LANGUAGE)


def window_title(language: str) -> str:
    return f"{WINDOW_TITLE} {language}".strip()


class Renderer:
    """
    Renders a GameSession to the pygame display surface.

    This class reads from the session but never modifies it.
    """

    def __init__(self, font_name: str = "Consolas", font_size: int = 18, hud_font_size: int = 20):
        self.font = pygame.font.SysFont(font_name, font_size)
        self.hud_font = pygame.font.SysFont(font_name, hud_font_size)
        self.screen: Optional[pygame.Surface] = None

    def init_display(self, width: int, height: int, language: str) -> pygame.Surface:
        """Open (or reuse) the resizable game window."""
        try:
            self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        except pygame.error as e:
            raise RenderSurfaceUnavailableError(f"Could not open a {width}x{height} window: {e}") from e
        pygame.display.set_caption(window_title(language))
        return self.screen

    def attach(self, surface: pygame.Surface) -> None:
        """Draw onto an existing surface (e.g. an offscreen one in tests)."""
        self.screen = surface

    def text_width(self, text: str) -> float:
        """Rendered width of an alien token in pixels."""
        return self.font.size(text)[0]

    def render(self, session: GameSession, now_ms: float) -> None:
        """Render the entire session state."""
        if self.screen is None:
            return

        self.screen.fill(COLOR_BACKGROUND)

        base_color = language_color(session.language)
        for alien in session.aliens:
            color = COLOR_FLASH if alien.is_flashing(now_ms) else base_color
            self._render_alien(alien, color)

        self.render_hud(session)

    def _render_alien(self, alien: Alien, color: Color) -> None:
        """Draw one token rotated about its centre."""
        text = self.font.render(alien.code, True, color)
        center = (alien.x + text.get_width() / 2, alien.y + text.get_height() / 2)
        # pygame rotates counter-clockwise, angles grow clockwise on screen
        rotated = pygame.transform.rotate(text, -math.degrees(alien.angle))
        self.screen.blit(rotated, rotated.get_rect(center=center))

    def render_hud(self, session: GameSession) -> None:
        """Typed text at the bottom, score in the top right."""
        width, height = self.screen.get_size()

        typed = self.hud_font.render(f"Typed: {session.input_buffer}", True, COLOR_HUD)
        self.screen.blit(typed, typed.get_rect(midbottom=(width // 2, height - MISS_THRESHOLD)))

        matched, spawned = session.get_score()
        score = self.hud_font.render(f"Score: {matched}/{spawned}", True, COLOR_HUD)
        self.screen.blit(score, score.get_rect(topright=(width - MARGIN, MARGIN)))
