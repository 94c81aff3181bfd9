#!/usr/bin/env python3
"""
Code Invaders - Main Entry Point

Programming-language keywords fall from the top of the window.
Type a keyword exactly to destroy it before it lands.

Usage:
    code-invaders [--language Python] [--seed 42] [--no-audio]

Controls:
    1-5 / click: Pick a language on the selection screen
    Letters, digits, symbols: Type the falling keywords
    Escape: Quit
"""
import argparse
import logging
import random
import sys
from typing import List, Optional

import pygame
from pydantic import ValidationError

from code_invaders.config import LOG_LEVELS, Settings, get_settings
from code_invaders.gameplay.languages import UnknownLanguageError, available_languages
from code_invaders.gameplay.session import GameSession
from code_invaders.ui.audio import SilentAudio, ToneAudio
from code_invaders.ui.loop import GameLoop, RenderSurfaceUnavailableError
from code_invaders.ui.renderer import Renderer, window_title
from code_invaders.ui.selection import SelectionScreen

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Code Invaders - a keyword typing game")
    parser.add_argument("--language", "-l", choices=available_languages(), help="Skip the menu and play this language")
    parser.add_argument("--seed", "-s", type=int, help="Seed for a reproducible game")
    parser.add_argument("--no-audio", action="store_true", help="Disable sound")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, help="Logging level (DEBUG, INFO, ...)")
    return parser.parse_args(argv)


def apply_args(settings: Settings, args: argparse.Namespace) -> Settings:
    """CLI flags win over environment settings."""
    overrides = {}
    if args.language is not None:
        overrides["language"] = args.language
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.no_audio:
        overrides["audio_enabled"] = False
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    return settings.model_copy(update=overrides)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    try:
        settings = apply_args(get_settings(), args)
    except ValidationError as e:
        logging.basicConfig(format=LOG_FORMAT)
        logger.error(f"Invalid settings: {e}")
        return 1

    # Configure logging
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    pygame.init()
    try:
        renderer = Renderer(settings.font_name, settings.font_size, settings.hud_font_size)
        renderer.init_display(settings.window_width, settings.window_height, "")

        language = settings.language
        if language is None:
            language = SelectionScreen(font_name=settings.font_name).choose()
            if language is None:
                logger.info("No language selected, exiting")
                return 0
        pygame.display.set_caption(window_title(language))

        rng = random.Random(settings.seed)
        width, height = pygame.display.get_surface().get_size()
        session = GameSession.for_language(language, width, height, renderer.text_width, rng=rng)

        if settings.audio_enabled:
            audio = ToneAudio(rng)
            audio.init_mixer()
        else:
            audio = SilentAudio()

        loop = GameLoop(session, renderer, audio, fps=settings.fps)
        loop.run()
    except (RenderSurfaceUnavailableError, UnknownLanguageError) as e:
        logger.error(f"Cannot start game: {e}")
        return 1
    finally:
        pygame.quit()

    return 0


if __name__ == "__main__":
    sys.exit(main())
