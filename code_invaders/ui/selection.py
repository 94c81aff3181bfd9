"""
Selection screen - pick the language before the game starts.
This is a THIN ADAPTER - no game logic here.
"""
import logging
from typing import List, Optional, Sequence

import pygame

from code_invaders.gameplay.languages import available_languages

logger = logging.getLogger(__name__)

# Colors
COLOR_BACKGROUND = (0, 0, 0)
COLOR_TEXT = (50, 205, 50)
COLOR_BUTTON = (40, 40, 40)
COLOR_BUTTON_HOVER = (70, 70, 70)
COLOR_BUTTON_TEXT = (230, 230, 230)

TITLE = "Code Invaders"
INSTRUCTIONS = (
    "Type falling language keywords to destroy them.",
    "Select a language to begin:",
)

# Layout (pixels)
TOP_PADDING = 40
BUTTON_WIDTH = 140
BUTTON_HEIGHT = 44
BUTTON_GAP = 20

# Menu labels that differ from the language id
LABELS = {"Javascript": "JavaScript"}

NUMBER_KEYS = [pygame.K_1, pygame.K_2, pygame.K_3, pygame.K_4, pygame.K_5,
               pygame.K_6, pygame.K_7, pygame.K_8, pygame.K_9]


def button_rects(languages: Sequence[str], width: int, top: int) -> List[pygame.Rect]:
    """One button per language, centred in a single row."""
    total = len(languages) * BUTTON_WIDTH + max(0, len(languages) - 1) * BUTTON_GAP
    left = (width - total) // 2
    return [
        pygame.Rect(left + i * (BUTTON_WIDTH + BUTTON_GAP), top, BUTTON_WIDTH, BUTTON_HEIGHT)
        for i in range(len(languages))
    ]


class SelectionScreen:
    """
    One-shot language menu.

    choose() blocks until a language is picked (click or number key)
    and returns its id, or None if the window is closed or Escape pressed.
    """

    def __init__(self, languages: Optional[Sequence[str]] = None, font_name: str = "Consolas"):
        self.languages = list(languages) if languages is not None else available_languages()
        self.title_font = pygame.font.SysFont(font_name, 48, bold=True)
        self.font = pygame.font.SysFont(font_name, 20)
        self.button_font = pygame.font.SysFont(font_name, 16)
        self.buttons: List[pygame.Rect] = []

    def layout(self, width: int) -> None:
        top = TOP_PADDING + self.title_font.get_linesize() + len(INSTRUCTIONS) * self.font.get_linesize() + 40
        self.buttons = button_rects(self.languages, width, top)

    def language_at(self, pos) -> Optional[str]:
        for language, rect in zip(self.languages, self.buttons):
            if rect.collidepoint(pos):
                return language
        return None

    def language_for_key(self, key: int) -> Optional[str]:
        if key in NUMBER_KEYS:
            index = NUMBER_KEYS.index(key)
            if index < len(self.languages):
                return self.languages[index]
        return None

    def handle_event(self, event: pygame.event.Event):
        """
        Returns (done, language).
        done is True once the menu should close.
        """
        if event.type == pygame.QUIT:
            return True, None
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return True, None
            language = self.language_for_key(event.key)
            if language is not None:
                return True, language
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            language = self.language_at(event.pos)
            if language is not None:
                return True, language
        elif event.type == pygame.VIDEORESIZE:
            self.layout(event.w)
        return False, None

    def draw(self, screen: pygame.Surface) -> None:
        width = screen.get_width()
        screen.fill(COLOR_BACKGROUND)

        y = TOP_PADDING
        title = self.title_font.render(TITLE, True, COLOR_TEXT)
        screen.blit(title, title.get_rect(midtop=(width // 2, y)))
        y += self.title_font.get_linesize() + 10

        for line in INSTRUCTIONS:
            text = self.font.render(line, True, COLOR_TEXT)
            screen.blit(text, text.get_rect(midtop=(width // 2, y)))
            y += self.font.get_linesize()

        mouse = pygame.mouse.get_pos()
        for i, (language, rect) in enumerate(zip(self.languages, self.buttons)):
            color = COLOR_BUTTON_HOVER if rect.collidepoint(mouse) else COLOR_BUTTON
            pygame.draw.rect(screen, color, rect, border_radius=4)
            label = self.button_font.render(f"{i + 1}. {LABELS.get(language, language)}", True, COLOR_BUTTON_TEXT)
            screen.blit(label, label.get_rect(center=rect.center))

    def choose(self, fps: int = 30) -> Optional[str]:
        screen = pygame.display.get_surface()
        if screen is None:
            return None

        self.layout(screen.get_width())
        clock = pygame.time.Clock()

        while True:
            for event in pygame.event.get():
                done, language = self.handle_event(event)
                if done:
                    logger.info(f"Selected language: {language}")
                    return language

            self.draw(pygame.display.get_surface())
            pygame.display.flip()
            clock.tick(fps)
