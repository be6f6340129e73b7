# game.py
from __future__ import annotations

import enum
import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .config import (
    GRID_W, GRID_H, START_POS,
    NONE, UP, DOWN, LEFT, RIGHT,
    DIFFICULTY_LEVELS, DEFAULT_DIFFICULTY,
    CFG, Difficulty, difficulty_key,
)
from .placement import Position, spawn_food, spawn_obstacles

logger = logging.getLogger(__name__)

Direction = Tuple[int, int]
VALID_DIRECTIONS = (UP, DOWN, LEFT, RIGHT)


class RunState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"


# ---------- Helpers ----------
def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


def in_bounds(x: int, y: int) -> bool:
    return 0 <= x < GRID_W and 0 <= y < GRID_H


def obstacle_count(level: str) -> int:
    return DIFFICULTY_LEVELS[difficulty_key(level)].obstacles


# ---------- State ----------
@dataclass
class GameState:
    snake: List[Position] = field(default_factory=lambda: [START_POS])  # head at index 0
    direction: Direction = NONE     # committed on the last tick
    pending: Direction = NONE       # latest accepted player intent
    food: Position = (0, 0)
    obstacles: List[Position] = field(default_factory=list)
    score: int = 0
    speed_ms: int = DIFFICULTY_LEVELS[DEFAULT_DIFFICULTY].speed_ms
    difficulty: str = DEFAULT_DIFFICULTY
    run_state: RunState = RunState.IDLE
    has_input: bool = False
    last_move: int = 0              # ms timestamp of last applied tick
    rng: random.Random = field(default_factory=random.Random, repr=False)

    @property
    def head(self) -> Position:
        return self.snake[0]

    @property
    def tier(self) -> Difficulty:
        return DIFFICULTY_LEVELS[self.difficulty]


def new_game_state(
    difficulty: str = DEFAULT_DIFFICULTY,
    rng: Optional[random.Random] = None,
) -> GameState:
    if rng is None:
        rng = random.Random(CFG.seed)
    state = GameState(difficulty=difficulty_key(difficulty), rng=rng)
    reset_game(state)
    return state


# ---------- Lifecycle ----------
def reset_game(state: GameState) -> None:
    """Back to a fresh idle board; the selected difficulty is kept."""
    state.snake = [START_POS]
    state.direction = NONE
    state.pending = NONE
    state.has_input = False
    state.obstacles = []
    state.food = spawn_food(state.snake, state.obstacles, state.rng)
    state.score = 0
    state.speed_ms = state.tier.speed_ms
    state.run_state = RunState.IDLE
    state.last_move = 0


def set_difficulty(state: GameState, level: str) -> bool:
    """Select a difficulty tier. Only honoured while idle."""
    key = difficulty_key(level)
    if state.run_state is not RunState.IDLE:
        logger.debug("Ignoring difficulty change to %s while %s", key, state.run_state.value)
        return False
    state.difficulty = key
    state.speed_ms = state.tier.speed_ms
    return True


def set_direction(state: GameState, intent: Direction) -> bool:
    """Buffer a turn for the next tick; 180° reversals are rejected."""
    if intent not in VALID_DIRECTIONS or is_opposite(intent, state.direction):
        return False
    state.pending = intent
    state.has_input = True
    return True


def start_game(state: GameState) -> bool:
    if state.run_state is not RunState.IDLE:
        return False
    state.obstacles = spawn_obstacles(
        obstacle_count(state.difficulty), state.snake, state.food, state.rng
    )
    state.run_state = RunState.RUNNING
    logger.info(
        "Game started on %s (%d ms/tick, %d obstacles)",
        state.tier.name, state.speed_ms, len(state.obstacles),
    )
    return True


def toggle_pause(state: GameState) -> bool:
    if state.run_state is RunState.RUNNING:
        state.run_state = RunState.PAUSED
    elif state.run_state is RunState.PAUSED:
        state.run_state = RunState.RUNNING
    else:
        return False
    return True


# ---------- Update ----------
def collides(state: GameState, head: Position, eating: bool) -> bool:
    """
    Would ``head`` be fatal this tick?

    Checked against the pre-move body. The tail only counts when food is
    eaten, otherwise it moves out of the way during the same tick.
    """
    if not in_bounds(*head):
        return True
    if head in state.obstacles:
        return True
    body = state.snake if eating else state.snake[:-1]
    return head in body


def step_game(state: GameState, now_ms: Optional[int] = None) -> bool:
    """
    Advance the game by one tick.
    Returns True if alive, False if game over.
    """
    if state.run_state is RunState.OVER:
        return False
    if now_ms is not None:
        state.last_move = now_ms

    # Commit direction once per tick
    state.direction = state.pending

    # Sit still until the first key press
    if not state.has_input and state.direction == NONE:
        return True

    hx, hy = state.head
    dx, dy = state.direction
    new_head = (hx + dx, hy + dy)
    eating = new_head == state.food

    if collides(state, new_head, eating):
        state.run_state = RunState.OVER
        logger.info("Collision at %s, final score %d", new_head, state.score)
        return False

    state.snake.insert(0, new_head)
    if eating:
        state.score += CFG.score_increment
        if state.speed_ms > CFG.min_move_ms:
            state.speed_ms = max(CFG.min_move_ms, state.speed_ms - CFG.speed_step_ms)
        state.food = spawn_food(state.snake, state.obstacles, state.rng)
        logger.debug("Ate food, score=%d speed=%dms", state.score, state.speed_ms)
    else:
        state.snake.pop()
    return True
