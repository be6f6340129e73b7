# placement.py
"""Rejection sampling of free grid cells for food and obstacles."""
from __future__ import annotations

import logging
import random
from typing import Iterable, List, Optional, Tuple

from .config import CFG, GRID_W, GRID_H

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


def random_cell(rng: random.Random) -> Position:
    return (rng.randrange(GRID_W), rng.randrange(GRID_H))


def spawn_food(
    snake: Iterable[Position],
    obstacles: Iterable[Position] = (),
    rng: Optional[random.Random] = None,
    max_attempts: int = CFG.food_attempts,
) -> Position:
    """
    Draw random cells until one is free of the snake and every obstacle.

    Gives up after ``max_attempts`` draws and keeps the last candidate even
    if it overlaps, so a nearly full board can never hang the game.
    """
    rng = rng or random.Random()
    occupied = set(snake) | set(obstacles)

    cand = random_cell(rng)
    attempts = 1
    while cand in occupied:
        if attempts >= max_attempts:
            logger.warning("Food placement gave up after %d attempts; using %s", attempts, cand)
            break
        cand = random_cell(rng)
        attempts += 1
    return cand


def spawn_obstacles(
    count: int,
    snake: Iterable[Position],
    food: Optional[Position],
    rng: Optional[random.Random] = None,
    max_attempts: int = CFG.obstacle_attempts,
) -> List[Position]:
    """
    Place up to ``count`` obstacles avoiding the snake, the food and each other.

    ``max_attempts`` bounds the draws for the whole batch; placements still
    missing when it runs out are skipped.
    """
    rng = rng or random.Random()
    blocked = set(snake)
    if food is not None:
        blocked.add(food)

    obstacles: List[Position] = []
    attempts = 0
    while len(obstacles) < count and attempts < max_attempts:
        cand = random_cell(rng)
        attempts += 1
        if cand in blocked:
            continue
        obstacles.append(cand)
        blocked.add(cand)

    if len(obstacles) < count:
        logger.warning(
            "Placed only %d of %d obstacles after %d attempts",
            len(obstacles), count, attempts,
        )
    return obstacles
