# controls.py
"""Keyboard mapping: arrows/WASD steer, a few keys drive the game controls."""
from typing import Dict, Optional, Tuple

import pygame  # type: ignore

from .config import UP, DOWN, LEFT, RIGHT

START, PAUSE, RESET, QUIT = "start", "pause", "reset", "quit"

DIRECTION_KEYS: Dict[int, Tuple[int, int]] = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_w: UP,
    pygame.K_s: DOWN,
    pygame.K_a: LEFT,
    pygame.K_d: RIGHT,
}

# Typed characters, for layouts where the key code isn't the letter itself
DIRECTION_CHARS: Dict[str, Tuple[int, int]] = {
    "w": UP,
    "s": DOWN,
    "a": LEFT,
    "d": RIGHT,
}

COMMAND_KEYS: Dict[int, str] = {
    pygame.K_RETURN: START,
    pygame.K_KP_ENTER: START,
    pygame.K_SPACE: START,
    pygame.K_p: PAUSE,
    pygame.K_r: RESET,
    pygame.K_ESCAPE: QUIT,
}

DIFFICULTY_KEYS: Dict[int, str] = {
    pygame.K_1: "EASY",
    pygame.K_2: "MEDIUM",
    pygame.K_3: "HARD",
    pygame.K_4: "EXPERT",
}


def direction_for_event(event) -> Optional[Tuple[int, int]]:
    if event.type != pygame.KEYDOWN:
        return None
    if event.key in DIRECTION_KEYS:
        return DIRECTION_KEYS[event.key]
    return DIRECTION_CHARS.get(getattr(event, "unicode", "").lower())


def command_for_event(event) -> Optional[str]:
    if event.type == pygame.QUIT:
        return QUIT
    if event.type != pygame.KEYDOWN:
        return None
    return COMMAND_KEYS.get(event.key)


def difficulty_for_event(event) -> Optional[str]:
    if event.type != pygame.KEYDOWN:
        return None
    return DIFFICULTY_KEYS.get(event.key)
